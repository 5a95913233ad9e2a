"""Remote listing port.

Abstract interface for discovering report files in a remote directory.
"""

from __future__ import annotations

from typing import Protocol

from audit_catalog.application.dtos.remote_listing import RemoteFileEntry


class RemoteListingProtocol(Protocol):
    """Source of remote file metadata.

    Implementations make exactly one request per call and never retry.
    """

    async def list_files(self) -> list[RemoteFileEntry]:
        """List the files in the configured remote directory.

        Returns:
            Validated entries in listing order.

        Raises:
            RemoteListingError: On transport, status or shape failure.
        """
        ...
