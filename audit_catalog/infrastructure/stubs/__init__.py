"""In-memory stubs of application ports for testing."""

from audit_catalog.infrastructure.stubs.remote_listing_stub import RemoteListingStub

__all__: list[str] = ["RemoteListingStub"]
