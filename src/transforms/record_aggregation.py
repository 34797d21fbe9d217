"""Deduplicate raw rows into aggregate contact records.

This module is the merge engine shared by every source schema. Each
call owns its own key-to-record mapping, scoped to one pipeline run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from core.logging_config import get_logger
from core.types import AggregateRecord, CampaignContext, RawRow

_LOGGER = get_logger(__name__)

FieldsT = TypeVar("FieldsT")
KeyFn = Callable[[RawRow, FieldsT], str]
BuildFn = Callable[[str, RawRow, FieldsT, CampaignContext], AggregateRecord]
MergeFn = Callable[[AggregateRecord, RawRow, FieldsT], None]


@dataclass(frozen=True)
class SourceRules(Generic[FieldsT]):
    """Per-source callbacks driving aggregation.

    Attributes:
        key_fn: Derives the uniqueness key, empty to skip the row.
        build_fn: Creates a record from the first row for a key.
        merge_fn: Folds a repeated row into an existing record, or None
            when repeated rows are ignored.
    """

    key_fn: KeyFn[FieldsT]
    build_fn: BuildFn[FieldsT]
    merge_fn: MergeFn[FieldsT] | None = None


@dataclass(frozen=True)
class AggregationResult:
    """Aggregated records plus skip accounting."""

    records: tuple[AggregateRecord, ...]
    skipped_count: int


def aggregate_records(
    rows: Iterable[RawRow],
    fields: FieldsT,
    campaign: CampaignContext,
    rules: SourceRules[FieldsT],
) -> AggregationResult:
    """Build one aggregate record per unique key.

    Args:
        rows: Raw data rows in source order.
        fields: Typed column accessor for the source schema.
        campaign: Campaign context passed to record builders.
        rules: Source-specific key, build, and merge callbacks.

    Returns:
        Records in first-seen key order and the number of skipped rows.
    """
    records_by_key: dict[str, AggregateRecord] = {}
    skipped_count = 0
    for row_number, row in enumerate(rows, 1):
        unique_key = rules.key_fn(row, fields)
        if not unique_key:
            skipped_count += 1
            _LOGGER.debug("row_skipped", row_number=row_number, reason="missing_key")
            continue
        existing = records_by_key.get(unique_key)
        if existing is None:
            records_by_key[unique_key] = rules.build_fn(unique_key, row, fields, campaign)
        elif rules.merge_fn is not None:
            rules.merge_fn(existing, row, fields)
    _LOGGER.info(
        "records_aggregated",
        record_count=len(records_by_key),
        skipped_count=skipped_count,
    )
    return AggregationResult(records=tuple(records_by_key.values()), skipped_count=skipped_count)
