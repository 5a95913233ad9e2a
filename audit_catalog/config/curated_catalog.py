"""Curated audit catalog loading.

The curated catalog is a YAML document with a top-level ``audits`` list.
Entry order is display order. The package ships ``curated_audits.yaml``;
deployments may point AUDIT_CURATED_PATH at their own file.

Entry format:
    - name: Lemonad DEX Security Review       # required
      document_url: https://...               # required
      date: January 2026
      client: Lemonad
      chain: {name: Monad, color: "#836EF9", icon: monad}
      findings: {critical: 0, high: 0, medium: 1, low: 2, info: 2}
      description: ...
      socials: {twitter: https://...}

Unlike remote listing failures, a broken curated document is a
deployment error and is raised to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from audit_catalog.domain.exceptions import CuratedCatalogError
from audit_catalog.domain.models.audit_record import (
    AuditRecord,
    ChainInfo,
    FindingsSummary,
    RecordSource,
)

PACKAGED_CURATED_PATH = Path(__file__).with_name("curated_audits.yaml")


def _chain_from_dict(data: dict[str, Any]) -> ChainInfo:
    return ChainInfo(
        name=data["name"],
        color_hex=data["color"],
        icon_ref=data.get("icon"),
    )


def _findings_from_dict(data: dict[str, Any]) -> FindingsSummary:
    unknown = set(data) - {"critical", "high", "medium", "low", "info"}
    if unknown:
        raise ValueError(f"unknown severity buckets: {sorted(unknown)}")
    return FindingsSummary(**data)


def record_from_dict(data: dict[str, Any]) -> AuditRecord:
    """Build a curated AuditRecord from one YAML entry.

    Raises:
        KeyError: If a required key is missing.
        ValueError: If a value violates a record invariant.
    """
    chain = data.get("chain")
    findings = data.get("findings")
    return AuditRecord(
        name=data["name"],
        document_url=data["document_url"],
        date=data.get("date"),
        client=data.get("client"),
        chain=_chain_from_dict(chain) if chain else None,
        findings=_findings_from_dict(findings) if findings else None,
        description=data.get("description"),
        socials=data.get("socials") or {},
        source=RecordSource.CURATED,
    )


def load_curated_catalog(path: Path | None = None) -> tuple[AuditRecord, ...]:
    """Load the curated catalog from YAML.

    Args:
        path: Catalog file; the packaged catalog when None.

    Returns:
        Curated records in file order.

    Raises:
        CuratedCatalogError: If the file is unreadable or an entry is invalid.
    """
    source = path or PACKAGED_CURATED_PATH
    try:
        with open(source, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CuratedCatalogError(f"Cannot read curated catalog {source}: {e}") from e

    if data is None:
        return ()
    if not isinstance(data, dict) or not isinstance(data.get("audits") or [], list):
        raise CuratedCatalogError(
            f"Curated catalog {source} must be a mapping with an 'audits' list"
        )

    records: list[AuditRecord] = []
    for index, entry in enumerate(data.get("audits") or []):
        if not isinstance(entry, dict):
            raise CuratedCatalogError(f"Entry {index} in {source} is not a mapping")
        try:
            records.append(record_from_dict(entry))
        except (KeyError, TypeError, ValueError) as e:
            raise CuratedCatalogError(
                f"Entry {index} in {source} is invalid: {e}"
            ) from e
    return tuple(records)
