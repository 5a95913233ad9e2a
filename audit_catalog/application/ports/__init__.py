"""Application ports (abstract interfaces)."""

from audit_catalog.application.ports.remote_listing import RemoteListingProtocol

__all__: list[str] = ["RemoteListingProtocol"]
