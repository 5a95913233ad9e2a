"""Bootstrap wiring for the audit catalog."""

from __future__ import annotations

import httpx

from audit_catalog.application.ports.remote_listing import RemoteListingProtocol
from audit_catalog.application.services.catalog_aggregator_service import (
    CatalogAggregatorService,
)
from audit_catalog.config.catalog_config import CatalogConfig
from audit_catalog.config.curated_catalog import load_curated_catalog
from audit_catalog.infrastructure.adapters.github_listing import (
    GitHubContentsListingAdapter,
)


def build_remote_listing(
    config: CatalogConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RemoteListingProtocol:
    """Create the production remote listing adapter."""
    return GitHubContentsListingAdapter(config, transport=transport)


def build_catalog_aggregator(
    config: CatalogConfig | None = None,
    remote_listing: RemoteListingProtocol | None = None,
) -> CatalogAggregatorService:
    """Wire curated catalog, remote listing and merge policy.

    Args:
        config: Catalog configuration; read from the environment when None.
        remote_listing: Listing source override (tests, offline mode).

    Returns:
        A ready-to-use CatalogAggregatorService.

    Raises:
        CuratedCatalogError: If the curated catalog cannot be loaded.
    """
    config = config or CatalogConfig.from_environment()
    return CatalogAggregatorService(
        curated=load_curated_catalog(config.curated_path),
        remote_listing=remote_listing or build_remote_listing(config),
        document_extension=config.document_extension,
        deduplicate=config.deduplicate,
    )


__all__ = ["build_catalog_aggregator", "build_remote_listing"]
