"""Application services for the audit catalog."""

from audit_catalog.application.services.catalog_aggregator_service import (
    CatalogAggregatorService,
    derive_remote_record,
)
from audit_catalog.application.services.catalog_session_service import (
    CatalogSessionService,
    get_catalog_session_service,
    init_catalog_session_service,
    reset_catalog_session_service,
)

__all__: list[str] = [
    "CatalogAggregatorService",
    "CatalogSessionService",
    "derive_remote_record",
    "get_catalog_session_service",
    "init_catalog_session_service",
    "reset_catalog_session_service",
]
