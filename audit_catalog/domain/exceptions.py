"""Exception classes for the audit catalog domain layer."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all catalog errors.

    All catalog-specific exceptions MUST inherit from this class.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)


class RemoteListingError(CatalogError):
    """Base exception for remote directory listing failures.

    Remote failures are never fatal: the aggregator catches this class
    and continues with an empty remote contribution.
    """

    kind: str = "unknown"


class ListingTransportError(RemoteListingError):
    """The listing request never produced a response (DNS, network, timeout)."""

    kind = "transport"


class ListingStatusError(RemoteListingError):
    """The listing endpoint answered with a non-2xx status."""

    kind = "status"

    def __init__(self, message: str, status_code: int) -> None:
        """Initialize with the offending status code.

        Args:
            message: Human-readable error description.
            status_code: HTTP status returned by the endpoint.
        """
        super().__init__(message)
        self.status_code = status_code


class ListingShapeError(RemoteListingError):
    """The listing body was not a JSON list of file entries."""

    kind = "shape"


class CatalogStateError(CatalogError):
    """An illegal catalog lifecycle transition was requested."""


class CuratedCatalogError(CatalogError):
    """The curated catalog document is missing or malformed."""
