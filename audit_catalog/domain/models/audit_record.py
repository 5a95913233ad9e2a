"""Audit record domain models.

An AuditRecord is the unit of display in the catalog. Curated records
carry full metadata; remote-discovered records only know their file
name, size and download location.

Invariants:
- document_url is never empty
- severity counts are never negative
- a severity badge exists only for a positive count
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final

# Presentation order of severity badges
SEVERITY_ORDER: Final[tuple[str, ...]] = ("critical", "high", "medium", "low", "info")


class Severity(str, Enum):
    """Finding severity buckets, most severe first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def label(self) -> str:
        """Badge label, e.g. "Critical"."""
        return self.value.capitalize()


class RecordSource(str, Enum):
    """Where an audit record came from."""

    CURATED = "curated"
    REMOTE = "remote"


@dataclass(frozen=True, eq=True)
class ChainInfo:
    """Blockchain an audited project is deployed on.

    Attributes:
        name: Display name of the chain (e.g. "Monad").
        color_hex: Brand color used for the chain badge (e.g. "#836EF9").
        icon_ref: Opaque key the presenter resolves to an icon.
    """

    name: str
    color_hex: str
    icon_ref: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("chain name must not be empty")


@dataclass(frozen=True, eq=True)
class FindingsSummary:
    """Number of findings per severity bucket.

    Attributes:
        critical: Count of critical findings.
        high: Count of high findings.
        medium: Count of medium findings.
        low: Count of low findings.
        info: Count of informational findings.
    """

    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    info: int = 0

    def __post_init__(self) -> None:
        """Validate that every count is a non-negative integer.

        Raises:
            ValueError: If any count is negative or not an integer.
        """
        for name in SEVERITY_ORDER:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} count must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} count must be non-negative, got {value}")

    def count(self, severity: Severity) -> int:
        """Get the count for one severity bucket."""
        return int(getattr(self, severity.value))

    @property
    def total(self) -> int:
        """Total number of findings across all buckets."""
        return sum(self.count(severity) for severity in Severity)

    def badges(self) -> Iterator[tuple[Severity, int]]:
        """Yield (severity, count) for every bucket with a positive count.

        Buckets are yielded most severe first.
        """
        for severity in Severity:
            count = self.count(severity)
            if count > 0:
                yield severity, count


@dataclass(frozen=True, eq=True)
class AuditRecord:
    """A single security audit shown in the catalog.

    Attributes:
        name: Display title.
        document_url: Link and download target of the report.
        date: Publication date as displayed (e.g. "January 2026").
        client: Audited project.
        chain: Chain the audited contracts are deployed on.
        findings: Findings per severity.
        description: Short scope summary.
        size_label: Human readable report size (remote records only).
        socials: Social links of the client, keyed by network.
        file_name: Original file name in the listing (remote records only).
        html_url: Browser URL of the file (remote records only).
        source: Whether the record was curated or discovered remotely.
    """

    name: str
    document_url: str
    date: str | None = None
    client: str | None = None
    chain: ChainInfo | None = None
    findings: FindingsSummary | None = None
    description: str | None = None
    size_label: str | None = None
    socials: Mapping[str, str] = field(default_factory=dict, compare=False)
    file_name: str | None = None
    html_url: str | None = None
    source: RecordSource = RecordSource.CURATED

    def __post_init__(self) -> None:
        """Validate display invariants.

        Raises:
            ValueError: If name or document_url is empty.
        """
        if not self.name or not self.name.strip():
            raise ValueError("audit record name must not be empty")
        if not self.document_url or not self.document_url.strip():
            raise ValueError(
                f"audit record '{self.name}' must have a document_url"
            )
        object.__setattr__(self, "socials", MappingProxyType(dict(self.socials)))

    @property
    def is_remote(self) -> bool:
        """True for records derived from the remote listing."""
        return self.source is RecordSource.REMOTE

    def badges(self) -> list[tuple[Severity, int]]:
        """Severity badges to display, empty when findings are unknown."""
        if self.findings is None:
            return []
        return list(self.findings.badges())
