"""Test helpers for audit catalog tests.

Helpers:
    make_curated_record: Curated AuditRecord with sensible defaults
    listing_entry: One contents-API listing entry as decoded JSON

Usage:
    from tests.helpers import make_curated_record, listing_entry
"""

from tests.helpers.audit_factories import listing_entry, make_curated_record

__all__ = ["listing_entry", "make_curated_record"]
