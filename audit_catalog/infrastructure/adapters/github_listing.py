"""GitHub contents API listing adapter.

Implements RemoteListingProtocol with a single unauthenticated GET:

    GET https://{api_host}/repos/{owner}/{repo}/contents/{path}?ref={branch}

Every failure is mapped into a RemoteListingError subclass:
- ListingTransportError: no response (network, DNS, timeout)
- ListingStatusError: non-2xx status
- ListingShapeError: body is not JSON, not a list, or an entry is malformed
"""

from __future__ import annotations

import httpx
import structlog
from pydantic import ValidationError

from audit_catalog.application.dtos.remote_listing import (
    REMOTE_LISTING_ADAPTER,
    RemoteFileEntry,
)
from audit_catalog.application.ports.remote_listing import RemoteListingProtocol
from audit_catalog.config.catalog_config import CatalogConfig
from audit_catalog.domain.exceptions import (
    ListingShapeError,
    ListingStatusError,
    ListingTransportError,
)

log = structlog.get_logger()

GITHUB_ACCEPT = "application/vnd.github+json"


class GitHubContentsListingAdapter(RemoteListingProtocol):
    """List report files through the GitHub contents API.

    Makes exactly one request per list_files() call. No retries and no
    authentication header.
    """

    def __init__(
        self,
        config: CatalogConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            config: Listing location and optional timeout.
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests).
        """
        self._config = config
        self._transport = transport

    @property
    def url(self) -> str:
        return self._config.listing_url

    async def list_files(self) -> list[RemoteFileEntry]:
        """Fetch and validate the directory listing.

        Returns:
            Entries in listing order.

        Raises:
            ListingTransportError: If the request did not complete.
            ListingStatusError: If the status is not 2xx.
            ListingShapeError: If the body is not a valid listing.
        """
        client_kwargs: dict = {"transport": self._transport}
        if self._config.timeout_seconds is not None:
            client_kwargs["timeout"] = self._config.timeout_seconds

        async with httpx.AsyncClient(**client_kwargs) as client:
            try:
                response = await client.get(
                    self.url, headers={"Accept": GITHUB_ACCEPT}
                )
            except httpx.TimeoutException as e:
                raise ListingTransportError(f"Listing request timed out: {e}") from e
            except httpx.RequestError as e:
                raise ListingTransportError(f"Listing request failed: {e}") from e

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> list[RemoteFileEntry]:
        status = response.status_code
        if not response.is_success:
            raise ListingStatusError(
                f"Listing request returned status {status}", status_code=status
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ListingShapeError(f"Listing body is not JSON: {e}") from e

        if not isinstance(body, list):
            raise ListingShapeError(
                f"Listing body must be a list, got {type(body).__name__}"
            )

        try:
            entries = REMOTE_LISTING_ADAPTER.validate_python(body)
        except ValidationError as e:
            raise ListingShapeError(
                f"Listing entries are malformed ({e.error_count()} errors)"
            ) from e

        log.debug("remote_listing_fetched", url=self.url, entries=len(entries))
        return entries
