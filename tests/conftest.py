"""
Pytest configuration and shared fixtures for audit catalog tests.

Testing Standards:
- Async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Remote listings are faked with RemoteListingStub or httpx.MockTransport
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from audit_catalog.domain.models.audit_record import AuditRecord
from audit_catalog.infrastructure.stubs.remote_listing_stub import RemoteListingStub
from tests.helpers import make_curated_record


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from audit_catalog import __version__

    return __version__


@pytest.fixture
def curated_records() -> tuple[AuditRecord, AuditRecord]:
    """Two curated records in catalog order."""
    return (
        make_curated_record("Lemonad DEX Security Review", "dex"),
        make_curated_record("DTreon Platform Security Review", "dtreon"),
    )


@pytest.fixture
def remote_listing() -> RemoteListingStub:
    """Empty remote listing stub."""
    return RemoteListingStub()
