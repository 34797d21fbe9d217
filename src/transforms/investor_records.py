"""Aggregation rules for Propwire investor exports.

Investors are keyed by email, falling back to the first phone number.
Each row with a property address adds to ``owned_properties``.
"""

from __future__ import annotations

from core.constants import (
    INDIVIDUAL_OWNER_TYPES,
    TAG_COUNTY_PREFIX,
    TAG_SOURCE_PROPWIRE,
    TAG_TYPE_INVESTOR,
)
from core.types import AggregateRecord, CampaignContext, MailingAddress, RawRow
from ingest.header_resolver import InvestorFields, read_cell
from transforms.name_address_parsing import format_property_address
from transforms.record_aggregation import SourceRules
from transforms.tagging import seed_tags


def investor_key(row: RawRow, fields: InvestorFields) -> str:
    """Return the trimmed email, else the trimmed first phone."""
    return read_cell(row, fields.email) or read_cell(row, fields.phone_1)


def is_company_owner(owner_type: str) -> bool:
    """Return whether an ``Owner Type`` value names a non-person owner."""
    normalized = owner_type.strip().lower()
    return bool(normalized) and normalized not in INDIVIDUAL_OWNER_TYPES


def build_investor_record(
    unique_key: str,
    row: RawRow,
    fields: InvestorFields,
    campaign: CampaignContext,
) -> AggregateRecord:
    """Create an investor record from its first property row."""
    first_name = read_cell(row, fields.owner_first_name)
    last_name = read_cell(row, fields.owner_last_name)
    is_company = is_company_owner(read_cell(row, fields.owner_type))
    phones = [
        read_cell(row, fields.phone_1),
        read_cell(row, fields.phone_2),
        read_cell(row, fields.phone_3),
    ]
    record = AggregateRecord(
        unique_key=unique_key,
        email=read_cell(row, fields.email),
        phones=phones,
        mailing=MailingAddress(
            street=read_cell(row, fields.mailing_street),
            city=read_cell(row, fields.mailing_city),
            state=read_cell(row, fields.mailing_state),
            zip_code=read_cell(row, fields.mailing_zip),
        ),
    )
    if is_company:
        record.company_name = " ".join(part for part in (first_name, last_name) if part)
    else:
        record.first_name = first_name
        record.last_name = last_name
    seed_tags(
        record,
        campaign,
        type_tags=(TAG_TYPE_INVESTOR, TAG_SOURCE_PROPWIRE),
        state=read_cell(row, fields.state),
        is_company=is_company,
    )
    row_county = read_cell(row, fields.county)
    if row_county:
        record.add_tag(f"{TAG_COUNTY_PREFIX}{row_county}")
    merge_investor_row(record, row, fields)
    return record


def merge_investor_row(record: AggregateRecord, row: RawRow, fields: InvestorFields) -> None:
    """Append the row's property whenever it has a street address."""
    address = read_cell(row, fields.address)
    if not address:
        return
    record.owned_properties.append(
        format_property_address(
            address,
            read_cell(row, fields.city),
            read_cell(row, fields.state),
            read_cell(row, fields.zip_code),
        )
    )


INVESTOR_RULES: SourceRules[InvestorFields] = SourceRules(
    key_fn=investor_key,
    build_fn=build_investor_record,
    merge_fn=merge_investor_row,
)
