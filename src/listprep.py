"""Public SDK surface for ListPrep.

This module provides a stable import path for scripted use.
It re-exports the pipeline entry points and typed models.
"""

from __future__ import annotations

from core.config import ListPrepConfig
from core.constants import OUTPUT_COLUMNS, SUPPORTED_SOURCE_TYPES
from core.run_spec_execution import execute_run_spec_file
from core.types import AggregateRecord, CampaignContext, PipelineResult, ProcessOptions
from ingest.campaign_context import (
    campaign_context_from_mapping,
    is_campaign_found,
    load_campaign_context,
)
from ingest.pipeline import normalize_rows, process_source

__all__ = [
    "AggregateRecord",
    "CampaignContext",
    "ListPrepConfig",
    "OUTPUT_COLUMNS",
    "PipelineResult",
    "ProcessOptions",
    "SUPPORTED_SOURCE_TYPES",
    "campaign_context_from_mapping",
    "execute_run_spec_file",
    "is_campaign_found",
    "load_campaign_context",
    "normalize_rows",
    "process_source",
]
