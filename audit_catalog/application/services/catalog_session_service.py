"""Catalog session service.

A session is one mount of the catalog view: it owns a CatalogViewState,
runs the aggregator exactly once and applies the settlement.

Lifecycle:
    session = CatalogSessionService(aggregator)
    session.mount()            # LOADING, curated records visible
    await session.wait_settled()
    session.snapshot()         # READY, merged records
    session.unmount()          # late settlements are discarded

Selection (select/dismiss) is synchronous and independent of the fetch.
"""

from __future__ import annotations

import asyncio

import structlog

from audit_catalog.application.services.catalog_aggregator_service import (
    CatalogAggregatorService,
)
from audit_catalog.domain.exceptions import CatalogStateError
from audit_catalog.domain.models.audit_record import AuditRecord
from audit_catalog.domain.models.catalog_view import (
    CatalogSnapshot,
    CatalogViewState,
    FetchPhase,
)

log = structlog.get_logger()


class CatalogSessionService:
    """One lifecycle of the catalog view with a single remote fetch."""

    def __init__(self, aggregator: CatalogAggregatorService) -> None:
        """Initialize the session in the LOADING phase.

        Args:
            aggregator: Aggregator run once when the session is mounted.
        """
        self._aggregator = aggregator
        self._state = CatalogViewState(aggregator.curated)
        self._task: asyncio.Task[None] | None = None
        self._mounted = False
        self._torn_down = False

    @property
    def phase(self) -> FetchPhase:
        return self._state.phase

    @property
    def is_mounted(self) -> bool:
        return self._mounted and not self._torn_down

    def mount(self) -> None:
        """Start the one aggregation of this session.

        Must be called from a running event loop.

        Raises:
            CatalogStateError: If the session was already mounted.
        """
        if self._mounted:
            raise CatalogStateError("catalog session can only be mounted once")
        self._mounted = True
        self._task = asyncio.create_task(self._run())
        log.debug("catalog_mounted", curated=len(self._aggregator.curated))

    def unmount(self) -> None:
        """Tear the session down.

        An aggregation still in flight keeps running; its result is
        discarded when it settles.
        """
        self._torn_down = True
        log.debug("catalog_unmounted", phase=self._state.phase.value)

    async def wait_settled(self) -> CatalogSnapshot:
        """Wait for the in-flight aggregation, then return the snapshot.

        Raises:
            CatalogStateError: If the session was never mounted.
        """
        if self._task is None:
            raise CatalogStateError("catalog session has not been mounted")
        await asyncio.shield(self._task)
        return self._state.snapshot()

    def select(self, record: AuditRecord) -> None:
        """Open a record in the detail viewer (last write wins)."""
        self._state.select(record)

    def dismiss(self) -> None:
        """Close the detail viewer."""
        self._state.dismiss()

    def snapshot(self) -> CatalogSnapshot:
        """Current collection, loading flag and selection."""
        return self._state.snapshot()

    def find_record(self, document_url: str) -> AuditRecord | None:
        """Look up a record of the current collection by document URL."""
        for record in self._state.collection:
            if record.document_url == document_url:
                return record
        return None

    async def _run(self) -> None:
        # Settle even if aggregation raises, so the view never stays LOADING
        collection = self._aggregator.curated
        try:
            collection = await self._aggregator.aggregate()
        except Exception:
            log.exception("catalog_aggregation_failed")
            raise
        finally:
            self._apply(collection)

    def _apply(self, collection: tuple[AuditRecord, ...]) -> None:
        if self._torn_down:
            log.info("catalog_settlement_discarded", records=len(collection))
            return
        self._state.settle(collection)
        log.info(
            "catalog_settled",
            records=len(collection),
            empty=not collection,
        )


# Singleton instance for dependency injection
_catalog_session_service: CatalogSessionService | None = None


def get_catalog_session_service() -> CatalogSessionService:
    """Get the singleton CatalogSessionService instance.

    Returns:
        The CatalogSessionService singleton.

    Raises:
        RuntimeError: If service not initialized.
    """
    if _catalog_session_service is None:
        raise RuntimeError(
            "CatalogSessionService not initialized. "
            "Call init_catalog_session_service() at startup."
        )
    return _catalog_session_service


def init_catalog_session_service(
    aggregator: CatalogAggregatorService,
) -> CatalogSessionService:
    """Initialize the singleton CatalogSessionService.

    Should be called once at application startup.

    Args:
        aggregator: Aggregator the session runs on mount.

    Returns:
        The initialized CatalogSessionService.
    """
    global _catalog_session_service
    _catalog_session_service = CatalogSessionService(aggregator)
    return _catalog_session_service


def reset_catalog_session_service() -> None:
    """Reset the singleton for testing.

    Only use this in tests to ensure clean state between test cases.
    """
    global _catalog_session_service
    _catalog_session_service = None
