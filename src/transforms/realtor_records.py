"""Aggregation rules for agent sales exports.

One record is built per raw agent cell. Every complete sold-property
address on that agent's rows is collected into ``recently_sold``.
"""

from __future__ import annotations

from core.constants import SKIPPED_AGENT_NAME, TAG_TYPE_REALTOR
from core.types import AggregateRecord, CampaignContext, RawRow
from ingest.header_resolver import RealtorFields, read_cell, read_raw_cell
from transforms.name_address_parsing import (
    format_property_address,
    split_combined_agent_field,
    split_person_name,
)
from transforms.record_aggregation import SourceRules
from transforms.tagging import seed_tags


def realtor_key(row: RawRow, fields: RealtorFields) -> str:
    """Return the raw agent cell, or empty for rows to skip."""
    agent_name = read_raw_cell(row, fields.agent_name)
    if not agent_name.strip() or agent_name == SKIPPED_AGENT_NAME:
        return ""
    return agent_name


def build_realtor_record(
    unique_key: str,
    row: RawRow,
    fields: RealtorFields,
    campaign: CampaignContext,
) -> AggregateRecord:
    """Create an agent record from its first sales row."""
    agent = split_combined_agent_field(unique_key)
    name = split_person_name(agent.full_name)
    mobile_phone = read_cell(row, fields.mobile_phone)
    record = AggregateRecord(
        unique_key=unique_key,
        first_name=name.first,
        last_name=name.last,
        company_name=agent.company_name,
        email=read_cell(row, fields.email),
        phones=[mobile_phone] if mobile_phone else [],
    )
    seed_tags(
        record,
        campaign,
        type_tags=(TAG_TYPE_REALTOR,),
        state=read_cell(row, fields.state),
        is_company=not agent.full_name and bool(agent.company_name),
    )
    merge_realtor_row(record, row, fields)
    return record


def merge_realtor_row(record: AggregateRecord, row: RawRow, fields: RealtorFields) -> None:
    """Append the row's sold property when every address part is present."""
    parts = (
        read_cell(row, fields.address),
        read_cell(row, fields.city),
        read_cell(row, fields.state),
        read_cell(row, fields.zip_code),
    )
    if all(parts):
        record.recently_sold.append(format_property_address(*parts))


REALTOR_RULES: SourceRules[RealtorFields] = SourceRules(
    key_fn=realtor_key,
    build_fn=build_realtor_record,
    merge_fn=merge_realtor_row,
)
