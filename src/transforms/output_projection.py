"""Projection of aggregate records onto the CRM import schema.

Every output row has exactly one value per output column. Fields a
source does not provide are emitted as empty strings.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import FACT_SEPARATOR, MAX_PHONE_COUNT, TAG_SEPARATOR
from core.types import AggregateRecord, CampaignContext, OutputRow


def project_records(
    records: Iterable[AggregateRecord],
    campaign: CampaignContext,
) -> list[OutputRow]:
    """Map aggregate records to fixed-width output rows.

    Args:
        records: Records in first-seen key order.
        campaign: Campaign context stamped onto every row.

    Returns:
        Output rows in record order.
    """
    display_fields = campaign_display_fields(campaign)
    return [project_record(record, display_fields) for record in records]


def project_record(record: AggregateRecord, display_fields: tuple[str, ...]) -> OutputRow:
    """Map one record plus shared display fields to an output row."""
    phones = (record.phones + [""] * MAX_PHONE_COUNT)[:MAX_PHONE_COUNT]
    return (
        record.first_name,
        record.last_name,
        record.company_name,
        record.email,
        *phones,
        record.mailing.street,
        record.mailing.city,
        record.mailing.state,
        record.mailing.zip_code,
        TAG_SEPARATOR.join(record.tags),
        FACT_SEPARATOR.join(record.owned_properties),
        FACT_SEPARATOR.join(record.recently_sold),
        *display_fields,
    )


def campaign_display_fields(campaign: CampaignContext) -> tuple[str, ...]:
    """Return the trailing ``[DISP]`` property columns."""
    return (
        campaign.property_address,
        campaign.property_apn,
        campaign.property_county,
        campaign.property_state,
        campaign.property_acreage,
        campaign.property_price,
    )
