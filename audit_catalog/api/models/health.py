"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string (e.g., "healthy").
        catalog_phase: Fetch phase of the catalog session, if mounted.
    """

    status: str
    catalog_phase: str | None = None
