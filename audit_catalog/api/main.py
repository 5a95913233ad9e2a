"""FastAPI application entry point for the audit catalog."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from audit_catalog import __version__
from audit_catalog.api.routes.catalog import router as catalog_router
from audit_catalog.api.routes.health import router as health_router
from audit_catalog.application.services.catalog_session_service import (
    init_catalog_session_service,
    reset_catalog_session_service,
)
from audit_catalog.bootstrap.catalog import build_catalog_aggregator

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Mount one catalog session for the lifetime of the app."""
    session = init_catalog_session_service(build_catalog_aggregator())
    session.mount()
    log.info("catalog_api_started")
    try:
        yield
    finally:
        session.unmount()
        reset_catalog_session_service()


app = FastAPI(
    title="Audit Catalog API",
    description="Curated and discovered security audit reports",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(catalog_router)
