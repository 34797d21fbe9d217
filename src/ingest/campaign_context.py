"""Campaign context loading and boundary validation.

A campaign context is confirmed once per run and stamped onto every
output row. The pipeline is never invoked without a complete context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, cast

import yaml

from core.constants import CAMPAIGN_FIELDS
from core.errors import ListPrepCampaignError
from core.types import CampaignContext


def load_campaign_context(campaign_path: str) -> CampaignContext:
    """Load and validate a campaign context YAML file.

    Args:
        campaign_path: Path to a YAML mapping of campaign fields.

    Returns:
        Validated campaign context.

    Raises:
        ListPrepCampaignError: If the file is missing, invalid, or incomplete.
    """
    campaign_file = Path(campaign_path).expanduser().resolve()
    if not campaign_file.is_file():
        raise ListPrepCampaignError(
            f"Campaign file does not exist at {campaign_file}. "
            "Provide a YAML file with the campaign property fields."
        )
    try:
        payload = cast(object, yaml.safe_load(campaign_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise ListPrepCampaignError(
            f"Failed to read campaign file at {campaign_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise ListPrepCampaignError(
            f"Failed to parse campaign YAML at {campaign_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if not isinstance(payload, Mapping):
        raise ListPrepCampaignError(
            f"Campaign file at {campaign_file} must contain a mapping of campaign fields."
        )
    return campaign_context_from_mapping(payload)


def campaign_context_from_mapping(payload: Mapping[object, object]) -> CampaignContext:
    """Build a campaign context from an already-parsed mapping.

    Args:
        payload: Mapping with one entry per campaign field.

    Returns:
        Validated campaign context.

    Raises:
        ListPrepCampaignError: If fields are unknown, missing, or blank.
    """
    unknown_keys = sorted(str(key) for key in payload.keys() if key not in CAMPAIGN_FIELDS)
    if unknown_keys:
        raise ListPrepCampaignError(
            f"Unknown campaign fields: {', '.join(unknown_keys)}. "
            f"Supported fields: {', '.join(CAMPAIGN_FIELDS)}."
        )
    values = {name: _campaign_value(payload, name) for name in CAMPAIGN_FIELDS}
    return CampaignContext(**values)


def _campaign_value(payload: Mapping[object, object], field_name: str) -> str:
    value = payload.get(field_name)
    if isinstance(value, bool):
        raise ListPrepCampaignError(f"Campaign field '{field_name}' must be text or a number.")
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise ListPrepCampaignError(
            f"Campaign field '{field_name}' is missing or blank. "
            "Fill in every campaign property field before processing lists."
        )
    return value.strip()


def is_campaign_found(campaign: CampaignContext | None) -> bool:
    """Return whether a context identifies an existing campaign."""
    if campaign is None:
        return False
    return bool(campaign.campaign_tag.strip() and campaign.street_address_key.strip())


def require_campaign_context(campaign: CampaignContext | None) -> CampaignContext:
    """Guard the pipeline boundary against a missing campaign context.

    Args:
        campaign: Context supplied by the caller, None when entry was cancelled.

    Returns:
        The same context when it identifies a campaign.

    Raises:
        ListPrepCampaignError: If no usable context was supplied.
    """
    if not is_campaign_found(campaign):
        raise ListPrepCampaignError(
            "No campaign context supplied. Confirm the campaign property data and retry."
        )
    return cast(CampaignContext, campaign)
