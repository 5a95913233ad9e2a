"""Pure domain services for the audit catalog."""

from audit_catalog.domain.services.catalog_merge import MergeResult, merge_catalog
from audit_catalog.domain.services.formatting import (
    DEFAULT_DOCUMENT_EXTENSION,
    format_audit_name,
    format_file_size,
)

__all__: list[str] = [
    "DEFAULT_DOCUMENT_EXTENSION",
    "MergeResult",
    "format_audit_name",
    "format_file_size",
    "merge_catalog",
]
