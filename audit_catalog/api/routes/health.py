"""Health check endpoint for the audit catalog API."""

from fastapi import APIRouter

from audit_catalog.api.models.health import HealthResponse
from audit_catalog.application.services.catalog_session_service import (
    get_catalog_session_service,
)

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return health status.

    The catalog never reports an error state; a failed remote listing
    only means fewer records, so health stays "healthy".

    Returns:
        Health status with 200 OK.
    """
    try:
        phase = get_catalog_session_service().phase.value
    except RuntimeError:
        phase = None
    return HealthResponse(status="healthy", catalog_phase=phase)
