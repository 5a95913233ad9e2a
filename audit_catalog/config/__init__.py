"""Configuration module for the audit catalog.

Available Configurations:
- CatalogConfig: Remote listing location and merge policy
- load_curated_catalog: Curated records from YAML
"""

from audit_catalog.config.catalog_config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from audit_catalog.config.curated_catalog import (
    PACKAGED_CURATED_PATH,
    load_curated_catalog,
)

__all__ = [
    "CatalogConfig",
    "DEFAULT_CATALOG_CONFIG",
    "PACKAGED_CURATED_PATH",
    "load_curated_catalog",
]
