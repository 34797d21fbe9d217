"""Header resolution and typed field access for raw exports.

This module maps a header row to column indexes and builds one typed
accessor per source schema. Absent columns read as empty strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from core.constants import INVESTOR_HEADERS, NEIGHBOR_HEADERS, REALTOR_HEADERS
from core.logging_config import get_logger
from core.types import CellValue, RawRow

_LOGGER = get_logger(__name__)


def resolve_headers(header_row: Sequence[CellValue]) -> dict[str, int]:
    """Map trimmed header names to zero-based column indexes.

    Later duplicates overwrite earlier ones, so only the last column
    sharing a trimmed name is addressable.

    Args:
        header_row: Raw header cells.

    Returns:
        Header name to column index mapping.
    """
    header_map: dict[str, int] = {}
    for index, raw_name in enumerate(header_row):
        name = cell_text(raw_name)
        if not name:
            continue
        if name in header_map:
            _LOGGER.warning(
                "duplicate_header",
                header=name,
                previous_index=header_map[name],
                index=index,
            )
        header_map[name] = index
    return header_map


def cell_text(value: CellValue) -> str:
    """Render one cell value as trimmed text.

    Args:
        value: Raw cell value.

    Returns:
        Trimmed string, empty for blank cells.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def read_cell(row: RawRow, index: int | None) -> str:
    """Read a trimmed cell by optional index.

    Args:
        row: Raw row cells.
        index: Column index, or None for an absent column.

    Returns:
        Cell text, empty when absent or beyond the row length.
    """
    if index is None or index >= len(row):
        return ""
    return cell_text(row[index])


def read_raw_cell(row: RawRow, index: int | None) -> str:
    """Read an untrimmed cell by optional index.

    Args:
        row: Raw row cells.
        index: Column index, or None for an absent column.

    Returns:
        Cell text exactly as stored, empty when absent.
    """
    if index is None or index >= len(row):
        return ""
    value = row[index]
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _indexes(header_map: Mapping[str, int], headers: Mapping[str, str]) -> dict[str, int | None]:
    return {attribute: header_map.get(name) for attribute, name in headers.items()}


@dataclass(frozen=True)
class RealtorFields:
    """Column indexes for an agent sales export."""

    agent_name: int | None
    state: int | None
    email: int | None
    mobile_phone: int | None
    address: int | None
    city: int | None
    zip_code: int | None

    @classmethod
    def from_header_map(cls, header_map: Mapping[str, int]) -> "RealtorFields":
        """Build accessor from a resolved header map."""
        return cls(**_indexes(header_map, REALTOR_HEADERS))


@dataclass(frozen=True)
class NeighborFields:
    """Column indexes for a neighbor owner export."""

    company_name: int | None
    name: int | None
    email: int | None
    phone_1: int | None
    phone_2: int | None
    mailing_address: int | None
    property_address: int | None

    @classmethod
    def from_header_map(cls, header_map: Mapping[str, int]) -> "NeighborFields":
        """Build accessor from a resolved header map."""
        return cls(**_indexes(header_map, NEIGHBOR_HEADERS))


@dataclass(frozen=True)
class InvestorFields:
    """Column indexes for a Propwire investor export."""

    email: int | None
    phone_1: int | None
    phone_2: int | None
    phone_3: int | None
    owner_type: int | None
    owner_first_name: int | None
    owner_last_name: int | None
    mailing_street: int | None
    mailing_city: int | None
    mailing_state: int | None
    mailing_zip: int | None
    county: int | None
    address: int | None
    city: int | None
    state: int | None
    zip_code: int | None

    @classmethod
    def from_header_map(cls, header_map: Mapping[str, int]) -> "InvestorFields":
        """Build accessor from a resolved header map."""
        return cls(**_indexes(header_map, INVESTOR_HEADERS))
