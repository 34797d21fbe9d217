"""Unit tests for agent sales aggregation rules."""

from __future__ import annotations

from ingest.header_resolver import RealtorFields, resolve_headers
from tests.sample_data import sample_campaign
from transforms.realtor_records import REALTOR_RULES, realtor_key
from transforms.record_aggregation import aggregate_records

HEADER = [
    "Agent's Name",
    "STATE OR PROVINCE",
    "Email Address",
    "Mobile Phone Number",
    "ADDRESS",
    "CITY",
    "ZIP OR POSTAL CODE",
]
FIELDS = RealtorFields.from_header_map(resolve_headers(HEADER))


def test_realtor_example_collapses_two_sales() -> None:
    """Two sales by one agent should produce one record with both sales."""
    rows = [
        ["Jane Doe • Acme Realty", "NC", "jane@acme.com", "", "1 Elm St", "Raleigh", "27601"],
        ["Jane Doe • Acme Realty", "NC", "", "", "2 Oak St", "Raleigh", "27602"],
    ]

    result = aggregate_records(rows, FIELDS, sample_campaign(), REALTOR_RULES)

    record = result.records[0]
    assert (record.first_name, record.last_name, record.company_name) == (
        "Jane",
        "Doe",
        "Acme Realty",
    )
    assert record.recently_sold == ["1 Elm St, Raleigh, NC 27601", "2 Oak St, Raleigh, NC 27602"]
    assert {"Type: Realtor", "State: NC"} <= set(record.tags)


def test_realtor_key_skips_public_records() -> None:
    """Public Records rows should never produce a key."""
    row = ["Public Records", "NC", "x@y.com", "555", "1 Elm St", "Raleigh", "27601"]

    assert realtor_key(row, FIELDS) == ""


def test_realtor_key_is_case_and_whitespace_sensitive() -> None:
    """Differently spaced agent cells should be distinct keys."""
    first = realtor_key(["Jane Doe"], FIELDS)
    second = realtor_key(["Jane Doe "], FIELDS)

    assert (first, second, first == realtor_key(["Jane Doe"], FIELDS)) == (
        "Jane Doe",
        "Jane Doe ",
        True,
    )


def test_realtor_partial_address_is_dropped() -> None:
    """A repeat row missing its zip should add no sale."""
    rows = [
        ["Jane Doe", "NC", "", "", "1 Elm St", "Raleigh", "27601"],
        ["Jane Doe", "NC", "", "", "2 Oak St", "Raleigh", ""],
    ]

    result = aggregate_records(rows, FIELDS, sample_campaign(), REALTOR_RULES)

    assert result.records[0].recently_sold == ["1 Elm St, Raleigh, NC 27601"]


def test_realtor_without_state_has_no_state_tag() -> None:
    """State tag should only be added when the defining row has a state."""
    rows = [["Jane Doe", "", "", "", "", "", ""]]

    result = aggregate_records(rows, FIELDS, sample_campaign(), REALTOR_RULES)

    assert result.records[0].tags == ["Campaign: 123 Main St", "Type: Realtor", "County: Wake"]


def test_realtor_company_only_cell_is_company() -> None:
    """A cell with only a brokerage after the separator is a company record."""
    rows = [["• Acme Realty", "NC", "", "", "", "", ""]]

    result = aggregate_records(rows, FIELDS, sample_campaign(), REALTOR_RULES)

    assert "Type: Company" in result.records[0].tags
