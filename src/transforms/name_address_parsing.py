"""Name and address splitting for raw contact exports.

These are pure helpers used when a contact record is first built.
Malformed input degrades to empty parts instead of raising.
"""

from __future__ import annotations

from core.constants import AGENT_COMPANY_SEPARATOR
from core.types import AgentField, MailingAddress, PersonName


def split_person_name(full_name: str) -> PersonName:
    """Split a person name into first and last name.

    The first space-separated token is the first name. The remaining
    tokens form the last name, so suffixes stay in the last name.

    Args:
        full_name: Free-text person name.

    Returns:
        First/last name parts, both empty for blank input.
    """
    stripped = full_name.strip()
    if not stripped:
        return PersonName(first="", last="")
    first, _, last = stripped.partition(" ")
    return PersonName(first=first, last=last)


def split_combined_agent_field(raw_value: str) -> AgentField:
    """Split an ``Agent Name • Company`` cell on the first separator.

    Args:
        raw_value: Combined agent cell.

    Returns:
        Agent full name and company name.
    """
    full_name, separator, company_name = raw_value.partition(AGENT_COMPANY_SEPARATOR)
    if not separator:
        return AgentField(full_name=raw_value.strip(), company_name="")
    return AgentField(full_name=full_name.strip(), company_name=company_name.strip())


def split_freeform_address(raw_value: str) -> MailingAddress:
    """Split ``street, city, STATE zip`` into address parts.

    Args:
        raw_value: Comma-separated address text.

    Returns:
        Address parts, all empty when fewer than three segments exist.
    """
    segments = raw_value.split(",")
    if len(segments) < 3:
        return MailingAddress(street="", city="", state="", zip_code="")
    street = segments[0].strip()
    city = segments[1].strip()
    state, _, zip_code = segments[2].strip().partition(" ")
    return MailingAddress(street=street, city=city, state=state, zip_code=zip_code.strip())


def format_property_address(address: str, city: str, state: str, zip_code: str) -> str:
    """Render one property as ``address, city, state zip``."""
    return f"{address}, {city}, {state} {zip_code}"
