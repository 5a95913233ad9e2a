"""Catalog endpoints.

Read the catalog view and drive the detail-viewer selection.

Endpoints:
    GET    /v1/audits            Current collection, loading flag, selection
    PUT    /v1/audits/selection  Open a record by document URL
    DELETE /v1/audits/selection  Close the detail viewer
"""

from fastapi import APIRouter, Depends, HTTPException, status

from audit_catalog.api.dependencies.catalog import get_catalog_session
from audit_catalog.api.models.catalog import CatalogResponse, SelectionRequest
from audit_catalog.application.services.catalog_session_service import (
    CatalogSessionService,
)

router = APIRouter(prefix="/v1/audits", tags=["audits"])


@router.get("", response_model=CatalogResponse)
async def get_catalog(
    session: CatalogSessionService = Depends(get_catalog_session),
) -> CatalogResponse:
    """Return the catalog as currently rendered.

    While the remote listing is in flight the curated records are
    returned with is_loading=true.
    """
    return CatalogResponse.from_snapshot(session.snapshot())


@router.put("/selection", response_model=CatalogResponse)
async def select_audit(
    request: SelectionRequest,
    session: CatalogSessionService = Depends(get_catalog_session),
) -> CatalogResponse:
    """Open a record in the detail viewer, replacing any current selection.

    Raises:
        HTTPException: 404 if no record of the collection has this URL.
    """
    record = session.find_record(request.document_url)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No audit with document_url {request.document_url}",
        )
    session.select(record)
    return CatalogResponse.from_snapshot(session.snapshot())


@router.delete("/selection", response_model=CatalogResponse)
async def dismiss_audit(
    session: CatalogSessionService = Depends(get_catalog_session),
) -> CatalogResponse:
    """Close the detail viewer. Always succeeds."""
    session.dismiss()
    return CatalogResponse.from_snapshot(session.snapshot())
