"""Application DTOs."""

from audit_catalog.application.dtos.remote_listing import (
    REMOTE_LISTING_ADAPTER,
    RemoteFileEntry,
)

__all__: list[str] = ["REMOTE_LISTING_ADAPTER", "RemoteFileEntry"]
