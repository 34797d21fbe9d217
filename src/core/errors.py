"""ListPrep exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class ListPrepError(Exception):
    """Base exception for all ListPrep failures."""


class ListPrepConfigError(ListPrepError):
    """Raised for invalid runtime configuration."""


class ListPrepSourceError(ListPrepError):
    """Raised when a source file or named sheet cannot be read."""


class ListPrepCampaignError(ListPrepError):
    """Raised for a missing or incomplete campaign context."""


class ListPrepRunSpecError(ListPrepError):
    """Raised for invalid or unsupported run-spec configuration."""


class ListPrepOutputError(ListPrepError):
    """Raised when normalized rows cannot be written."""
