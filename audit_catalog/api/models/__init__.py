"""API request and response models."""

from audit_catalog.api.models.catalog import (
    AuditRecordResponse,
    CatalogResponse,
    ChainResponse,
    FindingsResponse,
    SelectionRequest,
    SeverityBadgeResponse,
)
from audit_catalog.api.models.health import HealthResponse

__all__: list[str] = [
    "AuditRecordResponse",
    "CatalogResponse",
    "ChainResponse",
    "FindingsResponse",
    "HealthResponse",
    "SelectionRequest",
    "SeverityBadgeResponse",
]
