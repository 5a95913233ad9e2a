"""
Domain layer - Pure catalog logic.

This layer contains:
- Audit record models and the view state machine
- Formatting and merge services
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from audit_catalog.domain.exceptions import (
    CatalogError,
    CatalogStateError,
    CuratedCatalogError,
    ListingShapeError,
    ListingStatusError,
    ListingTransportError,
    RemoteListingError,
)

__all__: list[str] = [
    "CatalogError",
    "CatalogStateError",
    "CuratedCatalogError",
    "ListingShapeError",
    "ListingStatusError",
    "ListingTransportError",
    "RemoteListingError",
]
