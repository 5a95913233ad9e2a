"""Catalog API dependencies."""

from fastapi import HTTPException, status

from audit_catalog.application.services.catalog_session_service import (
    CatalogSessionService,
    get_catalog_session_service,
)


def get_catalog_session() -> CatalogSessionService:
    """Resolve the mounted catalog session.

    Raises:
        HTTPException: 503 if no session has been initialized.
    """
    try:
        return get_catalog_session_service()
    except RuntimeError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog is not available",
        ) from e
