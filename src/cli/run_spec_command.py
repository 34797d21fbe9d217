"""Run-spec CLI command wiring.

This module registers the run-spec subcommand and delegates execution to the
shared run-spec engine used by CLI and SDK entry points.
"""

from __future__ import annotations

import argparse
from typing import Any

from core.config import ListPrepConfig
from core.run_spec_execution import execute_run_spec_file


def add_run_spec_command(subparsers: Any) -> None:
    """Register run-spec subcommand."""
    parser = subparsers.add_parser(
        "run-spec",
        help="Run a declarative YAML list-processing spec",
    )
    parser.add_argument("spec_file", help="Path to YAML run-spec file")


def run_run_spec_command(config: ListPrepConfig, args: argparse.Namespace) -> int:
    """Handle run-spec command invocation."""
    results = execute_run_spec_file(args.spec_file, config)
    for result in results:
        print(f"{result.source_type}\t{result.output_path}\t{result.record_count}")
    return 0
