"""Shared typed models.

This module defines the data models used by ingest, transforms, and
store layers to keep interfaces between pipeline stages explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Sequence, Union

SourceType = Literal["realtor", "neighbor", "investor"]
CellValue = Union[str, int, float, None]
RawRow = Sequence[CellValue]
OutputRow = tuple[str, ...]


@dataclass(frozen=True)
class CampaignContext:
    """Property campaign fields stamped onto every output row.

    Attributes:
        street_address_key: Short street-address key naming the campaign.
        campaign_tag: CRM tag identifying the mailing campaign.
        property_address: Display address of the campaign property.
        property_apn: Assessor parcel number.
        property_county: County of the campaign property.
        property_state: State of the campaign property.
        property_acreage: Lot acreage as displayed.
        property_price: Asking price as displayed.
    """

    street_address_key: str
    campaign_tag: str
    property_address: str
    property_apn: str
    property_county: str
    property_state: str
    property_acreage: str
    property_price: str


@dataclass(frozen=True)
class PersonName:
    """First/last split of a free-text person name."""

    first: str
    last: str


@dataclass(frozen=True)
class AgentField:
    """Agent name and brokerage split from a combined agent cell."""

    full_name: str
    company_name: str


@dataclass(frozen=True)
class MailingAddress:
    """Structured parts of a comma-separated address."""

    street: str
    city: str
    state: str
    zip_code: str


@dataclass
class AggregateRecord:
    """One deduplicated contact built from one or more source rows.

    Identity fields are set once when the record is created. Later rows
    sharing the same key only append to ``recently_sold`` or
    ``owned_properties``.

    Attributes:
        unique_key: Key that deduplicated the source rows.
        first_name: Contact first name.
        last_name: Contact last name.
        company_name: Company or brokerage name.
        email: Contact email.
        phones: Up to three phone numbers in source order.
        mailing: Mailing address parts.
        tags: Insertion-ordered unique tags.
        owned_properties: Formatted property addresses owned by the contact.
        recently_sold: Formatted property addresses sold by a realtor.
    """

    unique_key: str
    first_name: str = ""
    last_name: str = ""
    company_name: str = ""
    email: str = ""
    phones: list[str] = field(default_factory=list)
    mailing: MailingAddress = field(default_factory=lambda: MailingAddress("", "", "", ""))
    tags: list[str] = field(default_factory=list)
    owned_properties: list[str] = field(default_factory=list)
    recently_sold: list[str] = field(default_factory=list)

    def add_tag(self, tag: str) -> None:
        """Add a tag unless it is already present."""
        if tag not in self.tags:
            self.tags.append(tag)


@dataclass(frozen=True)
class SourceTable:
    """Header row plus data rows loaded from one source sheet.

    Attributes:
        source_uri: File path the table was read from.
        sheet_name: Sheet name inside the workbook, if any.
        header: Raw header cells.
        rows: Data rows beneath the header.
    """

    source_uri: str
    sheet_name: str | None
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class ProcessOptions:
    """Options for one list-normalization run.

    Attributes:
        source_type: Which raw export schema to read.
        source_uri: Local CSV or workbook path.
        campaign: Confirmed campaign context for the run.
        sheet_name: Optional workbook sheet name, default per source type.
        output_uri: Optional explicit output path.
    """

    source_type: SourceType
    source_uri: str
    campaign: CampaignContext
    sheet_name: str | None = None
    output_uri: str | None = None


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of one list-normalization run.

    Attributes:
        source_type: Source schema that was processed.
        input_count: Data rows read from the source.
        skipped_count: Rows skipped for a missing uniqueness key.
        output_rows: Projected rows in first-seen key order.
        output_path: Written output file, if any.
    """

    source_type: str
    input_count: int
    skipped_count: int
    output_rows: tuple[OutputRow, ...]
    output_path: str | None = None

    @property
    def record_count(self) -> int:
        """Return the number of deduplicated contact rows."""
        return len(self.output_rows)
