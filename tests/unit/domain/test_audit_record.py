"""Unit tests for audit record domain models.

Tests display invariants (non-empty document_url, non-negative counts)
and severity badge derivation.
"""

from __future__ import annotations

import pytest

from audit_catalog.domain.models.audit_record import (
    AuditRecord,
    ChainInfo,
    FindingsSummary,
    RecordSource,
    Severity,
)


class TestFindingsSummary:
    """Tests for FindingsSummary."""

    def test_defaults_to_zero(self) -> None:
        findings = FindingsSummary()
        assert findings.total == 0
        assert list(findings.badges()) == []

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="high count must be non-negative"):
            FindingsSummary(high=-1)

    def test_non_integer_count_raises(self) -> None:
        with pytest.raises(ValueError, match="must be an integer"):
            FindingsSummary(low=1.5)  # type: ignore[arg-type]

    def test_bool_count_raises(self) -> None:
        with pytest.raises(ValueError, match="must be an integer"):
            FindingsSummary(info=True)

    def test_total_sums_all_buckets(self) -> None:
        findings = FindingsSummary(critical=1, high=2, medium=3, low=4, info=2)
        assert findings.total == 12

    def test_badges_only_for_positive_counts(self) -> None:
        findings = FindingsSummary(critical=0, high=1, medium=0, low=3, info=0)
        assert list(findings.badges()) == [(Severity.HIGH, 1), (Severity.LOW, 3)]

    def test_badges_most_severe_first(self) -> None:
        findings = FindingsSummary(critical=1, high=2, medium=3, low=4, info=5)
        assert [severity for severity, _ in findings.badges()] == [
            Severity.CRITICAL,
            Severity.HIGH,
            Severity.MEDIUM,
            Severity.LOW,
            Severity.INFO,
        ]


class TestSeverity:
    """Tests for Severity enum."""

    def test_labels(self) -> None:
        assert Severity.CRITICAL.label == "Critical"
        assert Severity.INFO.label == "Info"


class TestChainInfo:
    """Tests for ChainInfo."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError):
            ChainInfo(name="", color_hex="#000000")


class TestAuditRecord:
    """Tests for AuditRecord."""

    def test_minimal_record(self) -> None:
        record = AuditRecord(name="Report", document_url="https://example.com/r.pdf")

        assert record.source is RecordSource.CURATED
        assert record.findings is None
        assert record.badges() == []
        assert not record.is_remote

    def test_empty_document_url_raises(self) -> None:
        with pytest.raises(ValueError, match="document_url"):
            AuditRecord(name="Report", document_url="")

    def test_blank_document_url_raises(self) -> None:
        with pytest.raises(ValueError, match="document_url"):
            AuditRecord(name="Report", document_url="   ")

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            AuditRecord(name="", document_url="https://example.com/r.pdf")

    def test_record_is_immutable(self) -> None:
        record = AuditRecord(name="Report", document_url="https://example.com/r.pdf")
        with pytest.raises(AttributeError):
            record.name = "Other"  # type: ignore[misc]

    def test_socials_are_read_only(self) -> None:
        socials = {"twitter": "https://x.com/example"}
        record = AuditRecord(
            name="Report",
            document_url="https://example.com/r.pdf",
            socials=socials,
        )
        socials["telegram"] = "https://t.me/example"

        assert dict(record.socials) == {"twitter": "https://x.com/example"}
        with pytest.raises(TypeError):
            record.socials["discord"] = "x"  # type: ignore[index]

    def test_records_are_hashable(self) -> None:
        record = AuditRecord(
            name="Report",
            document_url="https://example.com/r.pdf",
            socials={"twitter": "https://x.com/example"},
        )
        assert record in {record}

    def test_badges_from_findings(self) -> None:
        record = AuditRecord(
            name="Report",
            document_url="https://example.com/r.pdf",
            findings=FindingsSummary(critical=1, info=2),
        )
        assert record.badges() == [(Severity.CRITICAL, 1), (Severity.INFO, 2)]
