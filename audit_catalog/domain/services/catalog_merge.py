"""Merge curated and remote-discovered records into one collection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from audit_catalog.domain.models.audit_record import AuditRecord


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a catalog merge.

    Attributes:
        records: Final collection, curated first.
        dropped: Records removed because their document_url was already taken.
    """

    records: tuple[AuditRecord, ...]
    dropped: tuple[AuditRecord, ...] = ()


def merge_catalog(
    curated: Sequence[AuditRecord],
    remote: Iterable[AuditRecord],
    *,
    deduplicate: bool = True,
) -> MergeResult:
    """Concatenate curated then remote records.

    Each source keeps its own order. With deduplicate on, only the first
    record per document_url survives, so a curated record always wins
    over a remote one pointing at the same document.

    Args:
        curated: Curated records in catalog order.
        remote: Remote records in listing order.
        deduplicate: Drop later records sharing a document_url.

    Returns:
        MergeResult with the final collection and dropped duplicates.
    """
    combined = [*curated, *remote]
    if not deduplicate:
        return MergeResult(records=tuple(combined))

    seen: set[str] = set()
    kept: list[AuditRecord] = []
    dropped: list[AuditRecord] = []
    for record in combined:
        if record.document_url in seen:
            dropped.append(record)
            continue
        seen.add(record.document_url)
        kept.append(record)
    return MergeResult(records=tuple(kept), dropped=tuple(dropped))
