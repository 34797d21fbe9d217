"""Unit tests for structured logging setup."""

from __future__ import annotations

import json

import structlog

from core.logging_config import configure_logging, get_logger


def test_get_logger_configures_json_events_when_unconfigured(capsys) -> None:
    """Library callers without a CLI entry point should still get JSON events."""
    structlog.reset_defaults()

    get_logger("listprep.test").info("records_aggregated", record_count=2)
    payload = json.loads(capsys.readouterr().out.strip())

    assert (payload["event"], payload["record_count"], payload["level"]) == (
        "records_aggregated",
        2,
        "info",
    )


def test_get_logger_keeps_existing_level_filter(capsys) -> None:
    """An explicit level set by an entry point should not be reset."""
    configure_logging("error")

    get_logger("listprep.test").info("records_aggregated", record_count=2)

    assert capsys.readouterr().out == ""
