"""List-normalization orchestration.

This module coordinates source loading, header resolution, record
aggregation, output projection, and file writes for one source run.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

from core.config import ListPrepConfig
from core.constants import DEFAULT_SOURCE_SHEETS, SUPPORTED_SOURCE_TYPES
from core.errors import ListPrepSourceError
from core.logging_config import get_logger
from core.types import CampaignContext, CellValue, PipelineResult, ProcessOptions, RawRow
from ingest.campaign_context import require_campaign_context
from ingest.header_resolver import (
    InvestorFields,
    NeighborFields,
    RealtorFields,
    resolve_headers,
)
from ingest.sheet_reader import read_source_table
from store.output_writer import build_output_path, write_output_rows
from transforms.investor_records import INVESTOR_RULES
from transforms.neighbor_records import NEIGHBOR_RULES
from transforms.output_projection import project_records
from transforms.realtor_records import REALTOR_RULES
from transforms.record_aggregation import SourceRules, aggregate_records

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SourceAdapter:
    """Field accessor factory and aggregation rules for one source schema."""

    build_fields: Callable[[Mapping[str, int]], Any]
    rules: SourceRules[Any]


SOURCE_ADAPTERS: Mapping[str, SourceAdapter] = {
    "realtor": SourceAdapter(RealtorFields.from_header_map, REALTOR_RULES),
    "neighbor": SourceAdapter(NeighborFields.from_header_map, NEIGHBOR_RULES),
    "investor": SourceAdapter(InvestorFields.from_header_map, INVESTOR_RULES),
}


def normalize_rows(
    source_type: str,
    header: Sequence[CellValue],
    rows: Sequence[RawRow],
    campaign: CampaignContext,
) -> PipelineResult:
    """Normalize raw rows of one source schema into output rows.

    Args:
        source_type: ``realtor``, ``neighbor``, or ``investor``.
        header: Raw header cells.
        rows: Raw data rows beneath the header.
        campaign: Confirmed campaign context.

    Returns:
        Projected rows plus input and skip counts.

    Raises:
        ListPrepSourceError: If the source type is unknown.
    """
    adapter = _source_adapter(source_type)
    fields = adapter.build_fields(resolve_headers(header))
    aggregation = aggregate_records(rows, fields, campaign, adapter.rules)
    output_rows = project_records(aggregation.records, campaign)
    return PipelineResult(
        source_type=source_type,
        input_count=len(rows),
        skipped_count=aggregation.skipped_count,
        output_rows=tuple(output_rows),
    )


def process_source(options: ProcessOptions, config: ListPrepConfig) -> PipelineResult:
    """Run the full file-to-file pipeline for one raw export.

    Args:
        options: Source, campaign, and output options.
        config: Runtime configuration.

    Returns:
        Pipeline result including the written output path.

    Raises:
        ListPrepCampaignError: If the campaign context is unusable.
        ListPrepSourceError: If the source file or sheet cannot be read.
        ListPrepOutputError: If the output cannot be written.
    """
    campaign = require_campaign_context(options.campaign)
    _source_adapter(options.source_type)
    sheet_name = options.sheet_name or DEFAULT_SOURCE_SHEETS[options.source_type]
    table = read_source_table(options.source_uri, sheet_name)
    result = normalize_rows(options.source_type, table.header, table.rows, campaign)
    output_path = _resolve_output_path(options, config, campaign)
    write_output_rows(result.output_rows, output_path)
    _log_pipeline_completion(options, result, output_path)
    return replace(result, output_path=str(output_path))


def _source_adapter(source_type: str) -> SourceAdapter:
    adapter = SOURCE_ADAPTERS.get(source_type)
    if adapter is None:
        raise ListPrepSourceError(
            f"Unsupported source type '{source_type}'. "
            f"Use one of: {', '.join(SUPPORTED_SOURCE_TYPES)}."
        )
    return adapter


def _resolve_output_path(
    options: ProcessOptions,
    config: ListPrepConfig,
    campaign: CampaignContext,
) -> Path:
    if options.output_uri:
        return Path(options.output_uri).expanduser().resolve()
    return build_output_path(config.output_dir, options.source_type, campaign, config.output_format)


def _log_pipeline_completion(
    options: ProcessOptions,
    result: PipelineResult,
    output_path: Path,
) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "pipeline_completed",
        source_type=options.source_type,
        source_uri=options.source_uri,
        campaign_tag=options.campaign.campaign_tag,
        input_count=result.input_count,
        skipped_count=result.skipped_count,
        output_count=result.record_count,
        output_path=str(output_path),
    )
