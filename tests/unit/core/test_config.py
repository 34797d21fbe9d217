"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import ListPrepConfig
from core.errors import ListPrepConfigError


def test_from_env_reads_output_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve output directory from environment."""
    monkeypatch.setenv("LISTPREP_OUTPUT_DIR", "./.tmp-listprep")

    config = ListPrepConfig.from_env()

    assert config.output_dir.name == ".tmp-listprep"


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to csv output and info logging."""
    monkeypatch.delenv("LISTPREP_OUTPUT_FORMAT", raising=False)
    monkeypatch.delenv("LISTPREP_LOG_LEVEL", raising=False)

    config = ListPrepConfig.from_env()

    assert (config.output_format, config.log_level) == ("csv", "info")


def test_from_env_normalizes_output_format_case(monkeypatch: pytest.MonkeyPatch) -> None:
    """Output format should be accepted case-insensitively."""
    monkeypatch.setenv("LISTPREP_OUTPUT_FORMAT", " XLSX ")

    config = ListPrepConfig.from_env()

    assert config.output_format == "xlsx"


def test_from_env_raises_for_invalid_output_format(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unsupported output format."""
    monkeypatch.setenv("LISTPREP_OUTPUT_FORMAT", "parquet")

    with pytest.raises(ListPrepConfigError):
        ListPrepConfig.from_env()

    assert os.getenv("LISTPREP_OUTPUT_FORMAT") == "parquet"


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unknown log level."""
    monkeypatch.setenv("LISTPREP_LOG_LEVEL", "verbose")

    with pytest.raises(ListPrepConfigError):
        ListPrepConfig.from_env()

    assert os.getenv("LISTPREP_LOG_LEVEL") == "verbose"
