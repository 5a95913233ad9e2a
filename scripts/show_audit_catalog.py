#!/usr/bin/env python3
"""Print the audit catalog.

Mounts one catalog session, waits for the remote listing attempt to
settle and prints the merged collection. A failed listing only shrinks
the output to the curated records; the exit code stays 0.

Usage:
    python scripts/show_audit_catalog.py
    python scripts/show_audit_catalog.py --json
    python scripts/show_audit_catalog.py --no-remote
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from audit_catalog.api.models.catalog import CatalogResponse
from audit_catalog.application.services.catalog_session_service import (
    CatalogSessionService,
)
from audit_catalog.bootstrap import build_catalog_aggregator, configure_structlog
from audit_catalog.config.catalog_config import CatalogConfig
from audit_catalog.domain.exceptions import CuratedCatalogError
from audit_catalog.domain.models.audit_record import AuditRecord
from audit_catalog.domain.models.catalog_view import CatalogSnapshot
from audit_catalog.infrastructure.observability import get_logger_for_service
from audit_catalog.infrastructure.stubs.remote_listing_stub import RemoteListingStub


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the audit catalog.")
    parser.add_argument(
        "--json", action="store_true", help="Emit the catalog as JSON"
    )
    parser.add_argument(
        "--no-remote",
        action="store_true",
        help="Skip the remote listing and show curated audits only",
    )
    parser.add_argument(
        "--env",
        default="development",
        choices=("development", "production"),
        help="Log output mode (default: development)",
    )
    return parser.parse_args(argv)


def format_record_line(index: int, record: AuditRecord) -> str:
    """One human readable line per record."""
    parts = [f"{index:>2}. {record.name}"]
    if record.client:
        parts.append(record.client)
    if record.chain:
        parts.append(record.chain.name)
    if record.date:
        parts.append(record.date)
    if record.size_label:
        parts.append(record.size_label)
    badges = ", ".join(f"{count} {severity.label}" for severity, count in record.badges())
    if badges:
        parts.append(badges)
    return " | ".join(parts)


def render_text(snapshot: CatalogSnapshot) -> str:
    if snapshot.is_empty:
        return "No audits published yet."
    lines = [
        format_record_line(i, record)
        for i, record in enumerate(snapshot.collection, start=1)
    ]
    return "\n".join(lines)


def render_json(snapshot: CatalogSnapshot) -> str:
    payload: dict[str, Any] = CatalogResponse.from_snapshot(snapshot).model_dump()
    return json.dumps(payload, indent=2)


async def collect(no_remote: bool = False) -> CatalogSnapshot:
    """Run one catalog session to settlement."""
    config = CatalogConfig.from_environment()
    aggregator = build_catalog_aggregator(
        config, remote_listing=RemoteListingStub() if no_remote else None
    )
    session = CatalogSessionService(aggregator)
    session.mount()
    try:
        return await session.wait_settled()
    finally:
        session.unmount()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_structlog(args.env, stream=sys.stderr)
    log = get_logger_for_service("show_audit_catalog", component="cli")

    try:
        snapshot = asyncio.run(collect(no_remote=args.no_remote))
    except CuratedCatalogError as e:
        log.error("curated_catalog_invalid", error=str(e))
        return 1

    print(render_json(snapshot) if args.json else render_text(snapshot))
    return 0


if __name__ == "__main__":
    sys.exit(main())
