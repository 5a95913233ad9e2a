"""Bootstrap wiring for the audit catalog."""

from audit_catalog.bootstrap.catalog import (
    build_catalog_aggregator,
    build_remote_listing,
)
from audit_catalog.bootstrap.logging import configure_structlog

__all__: list[str] = [
    "build_catalog_aggregator",
    "build_remote_listing",
    "configure_structlog",
]
