"""Runtime configuration model for ListPrep.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_FORMAT,
    SUPPORTED_LOG_LEVELS,
    SUPPORTED_OUTPUT_FORMATS,
)
from core.errors import ListPrepConfigError


@dataclass(frozen=True)
class ListPrepConfig:
    """Validated runtime configuration.

    Attributes:
        output_dir: Directory where normalized contact files are written.
        output_format: Output file format, ``csv`` or ``xlsx``.
        log_level: Minimum structured log level.
    """

    output_dir: Path
    output_format: str
    log_level: str

    @classmethod
    def from_env(cls) -> "ListPrepConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ListPrepConfigError: If environment values are invalid.
        """
        output_dir_value = os.getenv("LISTPREP_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        output_format = parse_output_format(
            os.getenv("LISTPREP_OUTPUT_FORMAT", DEFAULT_OUTPUT_FORMAT)
        )
        log_level = parse_log_level(os.getenv("LISTPREP_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            output_dir=Path(output_dir_value).expanduser().resolve(),
            output_format=output_format,
            log_level=log_level,
        )


def parse_output_format(raw_value: str) -> str:
    """Parse and validate an output format name.

    Args:
        raw_value: Raw string from environment or run-spec.

    Returns:
        Lowercased supported format name.

    Raises:
        ListPrepConfigError: If format is not supported.
    """
    value = raw_value.strip().lower()
    if value not in SUPPORTED_OUTPUT_FORMATS:
        raise ListPrepConfigError(
            f"Invalid output format '{raw_value}'. "
            f"Set LISTPREP_OUTPUT_FORMAT to one of: {', '.join(SUPPORTED_OUTPUT_FORMATS)}."
        )
    return value


def parse_log_level(raw_value: str) -> str:
    """Parse and validate a log level name.

    Args:
        raw_value: Raw string from environment or CLI.

    Returns:
        Lowercased supported level name.

    Raises:
        ListPrepConfigError: If level is not supported.
    """
    value = raw_value.strip().lower()
    if value not in SUPPORTED_LOG_LEVELS:
        raise ListPrepConfigError(
            f"Invalid log level '{raw_value}'. "
            f"Set LISTPREP_LOG_LEVEL to one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return value
