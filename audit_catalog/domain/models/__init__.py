"""Domain models for the audit catalog."""

from audit_catalog.domain.models.audit_record import (
    SEVERITY_ORDER,
    AuditRecord,
    ChainInfo,
    FindingsSummary,
    RecordSource,
    Severity,
)
from audit_catalog.domain.models.catalog_view import (
    CatalogSnapshot,
    CatalogViewState,
    FetchPhase,
)

__all__: list[str] = [
    "SEVERITY_ORDER",
    "AuditRecord",
    "CatalogSnapshot",
    "CatalogViewState",
    "ChainInfo",
    "FetchPhase",
    "FindingsSummary",
    "RecordSource",
    "Severity",
]
