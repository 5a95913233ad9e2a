"""Catalog aggregator service.

Reconciles the curated catalog with a remote directory listing into one
ordered, de-duplicated, display-ready collection.

Policy:
- exactly one remote listing request per aggregate() call, no retry
- a remote failure degrades to an empty remote contribution (logged)
- curated records first, then remote records, each in source order
- first record per document_url wins, so curated beats remote
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from audit_catalog.application.dtos.remote_listing import RemoteFileEntry
from audit_catalog.application.ports.remote_listing import RemoteListingProtocol
from audit_catalog.domain.exceptions import RemoteListingError
from audit_catalog.domain.models.audit_record import AuditRecord, RecordSource
from audit_catalog.domain.services.catalog_merge import merge_catalog
from audit_catalog.domain.services.formatting import (
    DEFAULT_DOCUMENT_EXTENSION,
    format_audit_name,
    format_file_size,
)

log = structlog.get_logger()


def derive_remote_record(
    entry: RemoteFileEntry, extension: str = DEFAULT_DOCUMENT_EXTENSION
) -> AuditRecord:
    """Build an AuditRecord from a listing entry.

    Args:
        entry: Validated listing entry with a download URL.
        extension: Document extension stripped from the display name.

    Returns:
        A remote record with derived name and size label.
    """
    return AuditRecord(
        name=format_audit_name(entry.name, extension),
        document_url=entry.download_url or "",
        size_label=format_file_size(entry.size),
        file_name=entry.name,
        html_url=entry.html_url,
        source=RecordSource.REMOTE,
    )


class CatalogAggregatorService:
    """Merge curated records with remote-discovered reports.

    Usage:
        aggregator = CatalogAggregatorService(
            curated=load_curated_catalog(),
            remote_listing=GitHubContentsListingAdapter(config),
        )
        records = await aggregator.aggregate()
    """

    def __init__(
        self,
        curated: Sequence[AuditRecord],
        remote_listing: RemoteListingProtocol,
        document_extension: str = DEFAULT_DOCUMENT_EXTENSION,
        deduplicate: bool = True,
    ) -> None:
        """Initialize the aggregator.

        Args:
            curated: Curated records in display order.
            remote_listing: Source of remote file metadata.
            document_extension: Case-sensitive suffix of report files.
            deduplicate: Drop later records sharing a document_url.
        """
        self._curated = tuple(curated)
        self._remote_listing = remote_listing
        self._document_extension = document_extension
        self._deduplicate = deduplicate

    @property
    def curated(self) -> tuple[AuditRecord, ...]:
        return self._curated

    async def aggregate(self) -> tuple[AuditRecord, ...]:
        """Produce the final collection.

        Returns once the single remote attempt has settled, either with
        its records or, after a handled failure, with none.

        Returns:
            Curated records followed by remote-discovered records.
        """
        remote = await self._fetch_remote_records()
        result = merge_catalog(self._curated, remote, deduplicate=self._deduplicate)

        for duplicate in result.dropped:
            log.debug(
                "duplicate_record_dropped",
                name=duplicate.name,
                document_url=duplicate.document_url,
                source=duplicate.source.value,
            )

        log.info(
            "catalog_aggregated",
            curated=len(self._curated),
            remote=len(remote),
            duplicates=len(result.dropped),
            total=len(result.records),
        )
        return result.records

    async def _fetch_remote_records(self) -> list[AuditRecord]:
        try:
            entries = await self._remote_listing.list_files()
        except RemoteListingError as e:
            log.warning("remote_listing_failed", kind=e.kind, error=str(e))
            return []
        return self._map_entries(entries)

    def _map_entries(self, entries: Iterable[RemoteFileEntry]) -> list[AuditRecord]:
        records: list[AuditRecord] = []
        for entry in entries:
            if not entry.name.endswith(self._document_extension):
                continue
            if not entry.download_url:
                log.debug("remote_entry_without_download_url", name=entry.name)
                continue
            try:
                records.append(derive_remote_record(entry, self._document_extension))
            except ValueError as e:
                # e.g. a file named just ".pdf" has no title
                log.debug("remote_entry_dropped", name=entry.name, error=str(e))
        return records
