"""API dependencies for dependency injection."""

from audit_catalog.api.dependencies.catalog import get_catalog_session

__all__: list[str] = ["get_catalog_session"]
