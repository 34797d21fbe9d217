"""Typed run-spec parsing for declarative list-normalization runs.

This module loads and validates YAML run-spec files that process several
raw exports against one campaign in a single invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import SUPPORTED_SOURCE_TYPES
from core.errors import ListPrepCampaignError, ListPrepRunSpecError
from core.types import CampaignContext, SourceType
from ingest.campaign_context import campaign_context_from_mapping, load_campaign_context

_ROOT_KEYS = {"version", "defaults", "campaign", "campaign_file", "steps"}


@dataclass(frozen=True)
class RunSpecDefaults:
    """Default values applied to run-spec steps."""

    output_dir: str | None = None
    output_format: str | None = None


@dataclass(frozen=True)
class RunSpecStep:
    """One source export to normalize."""

    source_type: SourceType
    input_path: str
    sheet_name: str | None = None
    output_path: str | None = None


@dataclass(frozen=True)
class RunSpec:
    """Validated run-spec root object."""

    version: int
    defaults: RunSpecDefaults
    campaign: CampaignContext
    steps: tuple[RunSpecStep, ...]


def load_run_spec(spec_path: str) -> RunSpec:
    """Load and validate a YAML run-spec from disk.

    Relative input, output, and campaign paths resolve against the
    directory containing the run-spec file.

    Args:
        spec_path: File path to YAML run-spec.

    Returns:
        Fully validated run-spec object.

    Raises:
        ListPrepRunSpecError: If file is invalid or schema checks fail.
    """
    spec_file = Path(spec_path).expanduser().resolve()
    payload = _load_yaml_payload(spec_file)
    root_mapping = _expect_mapping(payload, "run spec root")
    _validate_keys(root_mapping, _ROOT_KEYS, "root")
    version = _parse_version(root_mapping)
    base_dir = spec_file.parent
    defaults = _parse_defaults(root_mapping, base_dir)
    campaign = _parse_campaign(root_mapping, base_dir)
    steps = _parse_steps(root_mapping, base_dir)
    return RunSpec(version=version, defaults=defaults, campaign=campaign, steps=steps)


def _load_yaml_payload(spec_file: Path) -> object:
    if not spec_file.exists():
        raise ListPrepRunSpecError(
            f"Run spec file does not exist at {spec_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(spec_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise ListPrepRunSpecError(
            f"Failed to read run spec at {spec_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise ListPrepRunSpecError(
            f"Failed to parse YAML run spec at {spec_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise ListPrepRunSpecError(
            f"Run spec at {spec_file} is empty. Define 'version', a campaign, and 'steps'."
        )
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise ListPrepRunSpecError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise ListPrepRunSpecError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise ListPrepRunSpecError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if not isinstance(raw_version, int) or isinstance(raw_version, bool):
        raise ListPrepRunSpecError("Run spec field 'version' must be an integer. Set version: 1.")
    if raw_version != 1:
        raise ListPrepRunSpecError(f"Unsupported run spec version {raw_version}. Use version: 1.")
    return raw_version


def _parse_defaults(root_mapping: Mapping[str, object], base_dir: Path) -> RunSpecDefaults:
    raw_defaults = root_mapping.get("defaults")
    if raw_defaults is None:
        return RunSpecDefaults()
    defaults_mapping = _expect_mapping(raw_defaults, "run spec defaults")
    _validate_keys(defaults_mapping, {"output_dir", "output_format"}, "defaults")
    output_dir = _optional_string(defaults_mapping, "output_dir")
    return RunSpecDefaults(
        output_dir=_resolve_path(base_dir, output_dir),
        output_format=_optional_string(defaults_mapping, "output_format"),
    )


def _parse_campaign(root_mapping: Mapping[str, object], base_dir: Path) -> CampaignContext:
    has_inline = "campaign" in root_mapping
    campaign_file = _optional_string(root_mapping, "campaign_file")
    if has_inline == (campaign_file is not None):
        raise ListPrepRunSpecError(
            "Run spec must define exactly one of 'campaign' or 'campaign_file'."
        )
    try:
        if campaign_file is not None:
            return load_campaign_context(cast(str, _resolve_path(base_dir, campaign_file)))
        campaign_mapping = _expect_mapping(root_mapping["campaign"], "run spec campaign")
        return campaign_context_from_mapping(campaign_mapping)
    except ListPrepCampaignError as error:
        raise ListPrepRunSpecError(f"Invalid run spec campaign: {error}") from error


def _parse_steps(root_mapping: Mapping[str, object], base_dir: Path) -> tuple[RunSpecStep, ...]:
    raw_steps = root_mapping.get("steps")
    if raw_steps is None:
        raise ListPrepRunSpecError(
            "Run spec missing required field 'steps'. Add a non-empty list of sources."
        )
    step_rows = _expect_sequence(raw_steps, "run spec steps")
    if len(step_rows) == 0:
        raise ListPrepRunSpecError("Run spec field 'steps' must include at least one step.")
    return tuple(
        _parse_step(step_value, index, base_dir) for index, step_value in enumerate(step_rows)
    )


def _parse_step(step_value: object, step_index: int, base_dir: Path) -> RunSpecStep:
    context = f"run spec step #{step_index + 1}"
    step_mapping = _expect_mapping(step_value, context)
    _validate_keys(step_mapping, {"source", "input", "sheet", "output"}, context)
    raw_source = step_mapping.get("source")
    if raw_source not in SUPPORTED_SOURCE_TYPES:
        supported_rows = ", ".join(SUPPORTED_SOURCE_TYPES)
        raise ListPrepRunSpecError(
            f"Unsupported source '{raw_source}' in {context}. Use one of: {supported_rows}."
        )
    input_path = _optional_string(step_mapping, "input")
    if input_path is None:
        raise ListPrepRunSpecError(f"Invalid {context}: field 'input' is required.")
    return RunSpecStep(
        source_type=cast(SourceType, raw_source),
        input_path=cast(str, _resolve_path(base_dir, input_path)),
        sheet_name=_optional_string(step_mapping, "sheet"),
        output_path=_resolve_path(base_dir, _optional_string(step_mapping, "output")),
    )


def _optional_string(mapping: Mapping[str, object], field_name: str) -> str | None:
    raw_value = mapping.get(field_name)
    if raw_value is None:
        return None
    if isinstance(raw_value, str):
        normalized_value = raw_value.strip()
        return normalized_value if normalized_value else None
    raise ListPrepRunSpecError(f"Run spec field '{field_name}' must be a string when provided.")


def _resolve_path(base_dir: Path, raw_path: str | None) -> str | None:
    if raw_path is None:
        return None
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def _validate_keys(mapping: Mapping[str, object], allowed_keys: set[str], context: str) -> None:
    unknown_keys = sorted(set(mapping) - allowed_keys)
    if unknown_keys:
        raise ListPrepRunSpecError(
            f"Run spec {context} contains unknown fields: {', '.join(unknown_keys)}."
        )
