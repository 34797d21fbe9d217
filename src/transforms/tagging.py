"""Tag seeding shared by every contact source."""

from __future__ import annotations

from core.constants import TAG_COUNTY_PREFIX, TAG_STATE_PREFIX, TAG_TYPE_COMPANY
from core.types import AggregateRecord, CampaignContext


def seed_tags(
    record: AggregateRecord,
    campaign: CampaignContext,
    type_tags: tuple[str, ...],
    state: str,
    is_company: bool,
) -> None:
    """Attach the base tag set to a newly built record.

    Args:
        record: Record receiving tags.
        campaign: Campaign context providing campaign and county tags.
        type_tags: Source type tags in display order.
        state: State value from the defining row, may be empty.
        is_company: Whether the record represents a company.
    """
    record.add_tag(campaign.campaign_tag)
    for tag in type_tags:
        record.add_tag(tag)
    record.add_tag(f"{TAG_COUNTY_PREFIX}{campaign.property_county}")
    if state:
        record.add_tag(f"{TAG_STATE_PREFIX}{state}")
    if is_company:
        record.add_tag(TAG_TYPE_COMPANY)
