"""API routes."""

from audit_catalog.api.routes.catalog import router as catalog_router
from audit_catalog.api.routes.health import router as health_router

__all__: list[str] = ["catalog_router", "health_router"]
