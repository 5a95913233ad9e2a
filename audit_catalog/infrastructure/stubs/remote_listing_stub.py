"""Remote listing stub.

In-memory stub implementation of RemoteListingProtocol for testing and
offline runs (an empty stub lists nothing).
Returns configured entries or raises a configured failure, and records
how often it was called.
"""

from __future__ import annotations

import asyncio

from audit_catalog.application.dtos.remote_listing import RemoteFileEntry
from audit_catalog.application.ports.remote_listing import RemoteListingProtocol
from audit_catalog.domain.exceptions import RemoteListingError


class RemoteListingStub(RemoteListingProtocol):
    """Stub implementation of RemoteListingProtocol.

    Usage:
        stub = RemoteListingStub()
        stub.add_file("report.pdf", "https://example.com/report.pdf", size=2048)
        stub.set_failure(ListingStatusError("boom", status_code=500))
        stub.hold()      # list_files() blocks until release()
    """

    def __init__(self, entries: list[RemoteFileEntry] | None = None) -> None:
        """Initialize the stub with optional entries."""
        self._entries: list[RemoteFileEntry] = list(entries or [])
        self._failure: RemoteListingError | None = None
        self._gate: asyncio.Event | None = None
        self.call_count = 0

    def clear(self) -> None:
        """Clear all configured data."""
        self._entries.clear()
        self._failure = None
        self._gate = None
        self.call_count = 0

    def add_file(
        self,
        name: str,
        download_url: str | None,
        size: int = 0,
        html_url: str | None = None,
    ) -> RemoteFileEntry:
        """Append a listing entry.

        Returns:
            The added entry.
        """
        entry = RemoteFileEntry(
            name=name, download_url=download_url, html_url=html_url, size=size
        )
        self._entries.append(entry)
        return entry

    def set_failure(self, error: RemoteListingError | None) -> None:
        """Make list_files() raise the given error (None to clear)."""
        self._failure = error

    def hold(self) -> None:
        """Block list_files() until release() is called."""
        self._gate = asyncio.Event()

    def release(self) -> None:
        """Let a held list_files() call complete."""
        if self._gate is not None:
            self._gate.set()

    async def list_files(self) -> list[RemoteFileEntry]:
        """Return the configured entries or raise the configured failure."""
        self.call_count += 1
        if self._gate is not None:
            await self._gate.wait()
        if self._failure is not None:
            raise self._failure
        return list(self._entries)
