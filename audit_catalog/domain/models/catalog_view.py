"""Catalog view state machine.

Two orthogonal slots:
- fetch phase: LOADING (initial) -> READY, exactly once, never back
- selected record: nullable, last write wins

The collection starts as the curated list so the first render is never
blank, and is replaced by the merged collection on settlement.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from audit_catalog.domain.exceptions import CatalogStateError
from audit_catalog.domain.models.audit_record import AuditRecord


class FetchPhase(str, Enum):
    """Lifecycle of the remote fetch as seen by the view."""

    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable read model handed to the presenter.

    Attributes:
        collection: Records in display order.
        is_loading: True until the remote attempt settles.
        selected_record: Record open in the detail viewer, if any.
    """

    collection: tuple[AuditRecord, ...]
    is_loading: bool
    selected_record: AuditRecord | None

    @property
    def is_empty(self) -> bool:
        """True once ready with nothing to show."""
        return not self.is_loading and not self.collection


class CatalogViewState:
    """State of one catalog view.

    Usage:
        state = CatalogViewState(curated)
        state.phase            # FetchPhase.LOADING, collection == curated
        state.settle(merged)   # FetchPhase.READY
        state.select(record)
        state.dismiss()
    """

    def __init__(self, curated: Sequence[AuditRecord] = ()) -> None:
        self._phase = FetchPhase.LOADING
        self._collection: tuple[AuditRecord, ...] = tuple(curated)
        self._selected: AuditRecord | None = None

    @property
    def phase(self) -> FetchPhase:
        return self._phase

    @property
    def is_loading(self) -> bool:
        return self._phase is FetchPhase.LOADING

    @property
    def collection(self) -> tuple[AuditRecord, ...]:
        return self._collection

    @property
    def selected_record(self) -> AuditRecord | None:
        return self._selected

    def settle(self, collection: Sequence[AuditRecord]) -> None:
        """Move from LOADING to READY with the final collection.

        Args:
            collection: Merged collection produced by the aggregator.

        Raises:
            CatalogStateError: If the view has already settled.
        """
        if self._phase is FetchPhase.READY:
            raise CatalogStateError("catalog view has already settled")
        self._collection = tuple(collection)
        self._phase = FetchPhase.READY

    def select(self, record: AuditRecord) -> None:
        """Open a record in the detail viewer, replacing any current one.

        Membership in the current collection is not checked.
        """
        self._selected = record

    def dismiss(self) -> None:
        """Close the detail viewer."""
        self._selected = None

    def snapshot(self) -> CatalogSnapshot:
        """Capture the current state for rendering."""
        return CatalogSnapshot(
            collection=self._collection,
            is_loading=self.is_loading,
            selected_record=self._selected,
        )
