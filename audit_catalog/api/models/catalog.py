"""Catalog API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from audit_catalog.domain.models.audit_record import AuditRecord
from audit_catalog.domain.models.catalog_view import CatalogSnapshot


class ChainResponse(BaseModel):
    """Chain badge data."""

    name: str
    color_hex: str
    icon_ref: str | None = None


class FindingsResponse(BaseModel):
    """Findings per severity bucket."""

    critical: int = Field(ge=0)
    high: int = Field(ge=0)
    medium: int = Field(ge=0)
    low: int = Field(ge=0)
    info: int = Field(ge=0)
    total: int = Field(ge=0)


class SeverityBadgeResponse(BaseModel):
    """A severity badge with a positive count."""

    severity: str
    label: str
    count: int = Field(gt=0)


class AuditRecordResponse(BaseModel):
    """One audit record as rendered by the presenter.

    Attributes:
        name: Display title.
        document_url: View/download target.
        badges: Severity badges, only buckets with a positive count.
        source: "curated" or "remote".
    """

    name: str
    document_url: str
    date: str | None = None
    client: str | None = None
    chain: ChainResponse | None = None
    findings: FindingsResponse | None = None
    badges: list[SeverityBadgeResponse] = Field(default_factory=list)
    description: str | None = None
    size_label: str | None = None
    socials: dict[str, str] = Field(default_factory=dict)
    file_name: str | None = None
    html_url: str | None = None
    source: str

    @classmethod
    def from_record(cls, record: AuditRecord) -> "AuditRecordResponse":
        """Convert a domain record to its API representation."""
        chain = None
        if record.chain is not None:
            chain = ChainResponse(
                name=record.chain.name,
                color_hex=record.chain.color_hex,
                icon_ref=record.chain.icon_ref,
            )
        findings = None
        if record.findings is not None:
            findings = FindingsResponse(
                critical=record.findings.critical,
                high=record.findings.high,
                medium=record.findings.medium,
                low=record.findings.low,
                info=record.findings.info,
                total=record.findings.total,
            )
        return cls(
            name=record.name,
            document_url=record.document_url,
            date=record.date,
            client=record.client,
            chain=chain,
            findings=findings,
            badges=[
                SeverityBadgeResponse(
                    severity=severity.value, label=severity.label, count=count
                )
                for severity, count in record.badges()
            ],
            description=record.description,
            size_label=record.size_label,
            socials=dict(record.socials),
            file_name=record.file_name,
            html_url=record.html_url,
            source=record.source.value,
        )


class CatalogResponse(BaseModel):
    """Catalog view consumed by the presenter.

    Attributes:
        records: Records in display order.
        is_loading: True until the remote listing attempt settles.
        is_empty: True when ready with no records.
        selected: Record open in the detail viewer, if any.
    """

    records: list[AuditRecordResponse]
    is_loading: bool
    is_empty: bool
    selected: AuditRecordResponse | None = None

    @classmethod
    def from_snapshot(cls, snapshot: CatalogSnapshot) -> "CatalogResponse":
        """Convert a view snapshot to its API representation."""
        selected = snapshot.selected_record
        return cls(
            records=[AuditRecordResponse.from_record(r) for r in snapshot.collection],
            is_loading=snapshot.is_loading,
            is_empty=snapshot.is_empty,
            selected=AuditRecordResponse.from_record(selected) if selected else None,
        )


class SelectionRequest(BaseModel):
    """Select a record of the current collection by its document URL."""

    document_url: str = Field(min_length=1)
