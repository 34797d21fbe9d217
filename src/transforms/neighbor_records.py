"""Aggregation rules for neighbor owner exports.

Neighbors are keyed by company name, falling back to the person name.
Repeated keys are ignored: the first row defines the whole record.
"""

from __future__ import annotations

from core.constants import TAG_TYPE_NEIGHBOR
from core.types import AggregateRecord, CampaignContext, RawRow
from ingest.header_resolver import NeighborFields, read_cell
from transforms.name_address_parsing import split_freeform_address, split_person_name
from transforms.record_aggregation import SourceRules
from transforms.tagging import seed_tags


def neighbor_key(row: RawRow, fields: NeighborFields) -> str:
    """Return the trimmed company name, else the trimmed person name."""
    return read_cell(row, fields.company_name) or read_cell(row, fields.name)


def build_neighbor_record(
    unique_key: str,
    row: RawRow,
    fields: NeighborFields,
    campaign: CampaignContext,
) -> AggregateRecord:
    """Create a neighbor record from its only contributing row."""
    company_name = read_cell(row, fields.company_name)
    name = split_person_name("" if company_name else read_cell(row, fields.name))
    mailing = split_freeform_address(read_cell(row, fields.mailing_address))
    phones = [read_cell(row, fields.phone_1), read_cell(row, fields.phone_2)]
    record = AggregateRecord(
        unique_key=unique_key,
        first_name=name.first,
        last_name=name.last,
        company_name=company_name,
        email=read_cell(row, fields.email),
        phones=phones,
        mailing=mailing,
    )
    property_address = read_cell(row, fields.property_address)
    if property_address:
        record.owned_properties.append(property_address)
    seed_tags(
        record,
        campaign,
        type_tags=(TAG_TYPE_NEIGHBOR,),
        state=mailing.state,
        is_company=bool(company_name),
    )
    return record


NEIGHBOR_RULES: SourceRules[NeighborFields] = SourceRules(
    key_fn=neighbor_key,
    build_fn=build_neighbor_record,
)
