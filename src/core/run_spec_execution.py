"""Run-spec execution engine shared by CLI and SDK workflows.

This module applies run-spec defaults to runtime configuration and runs
each step through the list-normalization pipeline in order.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import ListPrepConfig, parse_output_format
from core.errors import ListPrepConfigError, ListPrepRunSpecError
from core.logging_config import get_logger
from core.run_spec import RunSpec, RunSpecStep, load_run_spec
from core.types import PipelineResult, ProcessOptions
from ingest.pipeline import process_source

_LOGGER = get_logger(__name__)


def execute_run_spec_file(spec_path: str, config: ListPrepConfig) -> list[PipelineResult]:
    """Load and execute a run-spec file.

    Args:
        spec_path: Path to YAML run-spec.
        config: Base runtime configuration.

    Returns:
        One pipeline result per step, in step order.
    """
    return execute_run_spec(load_run_spec(spec_path), config)


def execute_run_spec(spec: RunSpec, config: ListPrepConfig) -> list[PipelineResult]:
    """Execute every step of a validated run-spec.

    Args:
        spec: Validated run-spec.
        config: Base runtime configuration.

    Returns:
        One pipeline result per step, in step order.
    """
    step_config = _apply_defaults(spec, config)
    results: list[PipelineResult] = []
    for step_index, step in enumerate(spec.steps, 1):
        result = process_source(_step_options(spec, step), step_config)
        _LOGGER.info(
            "run_spec_step_completed",
            step=step_index,
            source_type=step.source_type,
            output_count=result.record_count,
            output_path=result.output_path,
        )
        results.append(result)
    return results


def _apply_defaults(spec: RunSpec, config: ListPrepConfig) -> ListPrepConfig:
    step_config = config
    if spec.defaults.output_dir:
        step_config = replace(step_config, output_dir=Path(spec.defaults.output_dir).resolve())
    if spec.defaults.output_format:
        try:
            output_format = parse_output_format(spec.defaults.output_format)
        except ListPrepConfigError as error:
            raise ListPrepRunSpecError(f"Invalid run spec defaults: {error}") from error
        step_config = replace(step_config, output_format=output_format)
    return step_config


def _step_options(spec: RunSpec, step: RunSpecStep) -> ProcessOptions:
    return ProcessOptions(
        source_type=step.source_type,
        source_uri=step.input_path,
        campaign=spec.campaign,
        sheet_name=step.sheet_name,
        output_uri=step.output_path,
    )
