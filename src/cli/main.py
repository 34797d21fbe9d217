"""ListPrep CLI entry points.
This module exposes list-normalization commands for raw contact exports.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import ListPrepConfig
from core.constants import OUTPUT_COLUMNS, SUPPORTED_LOG_LEVELS, SUPPORTED_SOURCE_TYPES
from core.errors import ListPrepError
from core.logging_config import configure_logging
from core.types import ProcessOptions
from ingest.campaign_context import load_campaign_context
from ingest.pipeline import process_source


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="listprep",
        description="Normalize raw contact exports into a CRM import sheet",
    )
    parser.add_argument("--output-dir", help="Override LISTPREP_OUTPUT_DIR for this command")
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override LISTPREP_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_process_command(subparsers)
    add_run_spec_command(subparsers)
    _add_columns_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ListPrep CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.output_dir, args.log_level)
        configure_logging(config.log_level)
        if args.command == "process":
            return _run_process_command(config, args)
        if args.command == "run-spec":
            return run_run_spec_command(config, args)
        if args.command == "columns":
            return _run_columns_command()
    except ListPrepError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(output_dir: str | None, log_level: str | None) -> ListPrepConfig:
    """Build runtime config with optional CLI overrides.

    Args:
        output_dir: Optional output directory override.
        log_level: Optional log level override.

    Returns:
        Configured runtime config.
    """
    config = ListPrepConfig.from_env()
    if output_dir:
        config = replace(config, output_dir=Path(output_dir).expanduser().resolve())
    if log_level:
        config = replace(config, log_level=log_level)
    return config


def _run_process_command(config: ListPrepConfig, args: argparse.Namespace) -> int:
    """Handle process command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = ProcessOptions(
        source_type=args.source,
        source_uri=args.input,
        campaign=load_campaign_context(args.campaign),
        sheet_name=args.sheet,
        output_uri=args.output,
    )
    result = process_source(options, config)
    print(
        f"{result.output_path}\t"
        f"{result.record_count}\t"
        f"{result.input_count}\t"
        f"{result.skipped_count}"
    )
    return 0


def _run_columns_command() -> int:
    """Print the output schema, one column per line."""
    for column in OUTPUT_COLUMNS:
        print(column)
    return 0


def _add_process_command(subparsers: Any) -> None:
    """Register process subcommand."""
    parser = subparsers.add_parser("process", help="Normalize one raw contact export")
    parser.add_argument("source", choices=SUPPORTED_SOURCE_TYPES, help="Raw export schema")
    parser.add_argument("input", help="Source CSV or workbook path")
    parser.add_argument("--campaign", required=True, help="Campaign context YAML file")
    parser.add_argument("--sheet", help="Workbook sheet name, defaults per source type")
    parser.add_argument("--output", help="Explicit .csv or .xlsx output path")


def _add_columns_command(subparsers: Any) -> None:
    """Register columns subcommand."""
    subparsers.add_parser("columns", help="List the CRM import output columns")
