"""Output file writers for normalized contact rows.

This module writes the fixed CRM import header plus projected rows to
CSV or to a single-sheet workbook, chosen by file extension.
"""

from __future__ import annotations

import csv
import re
from pathlib import Path
from typing import Sequence

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from core.constants import OUTPUT_COLUMNS, OUTPUT_SHEET_NAME
from core.errors import ListPrepOutputError
from core.logging_config import get_logger
from core.types import CampaignContext, OutputRow

_LOGGER = get_logger(__name__)


def build_output_path(
    output_dir: Path,
    source_type: str,
    campaign: CampaignContext,
    output_format: str,
) -> Path:
    """Build the default output path for one source run.

    Args:
        output_dir: Base output directory.
        source_type: Source schema name.
        campaign: Campaign context naming the property.
        output_format: ``csv`` or ``xlsx``.

    Returns:
        Output file path inside ``output_dir``.
    """
    slug = _slugify(campaign.street_address_key)
    return output_dir / f"{slug}-{source_type}-crm-import.{output_format}"


def write_output_rows(rows: Sequence[OutputRow], output_path: Path) -> Path:
    """Write header plus rows to a CSV or workbook file.

    Args:
        rows: Projected output rows.
        output_path: Destination file; suffix selects the format.

    Returns:
        Written output path.

    Raises:
        ListPrepOutputError: If the suffix is unsupported or writing fails.
    """
    suffix = output_path.suffix.lower()
    if suffix not in (".csv", ".xlsx"):
        raise ListPrepOutputError(
            f"Unsupported output file type '{suffix}' for {output_path}. "
            "Use a .csv or .xlsx output path."
        )
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if suffix == ".csv":
            _write_csv(rows, output_path)
        else:
            _write_workbook(rows, output_path)
    except OSError as error:
        raise ListPrepOutputError(
            f"Failed to write output at {output_path}: {error}. "
            "Check the output directory is writable and the file is not open elsewhere."
        ) from error
    _LOGGER.info("output_written", output_path=str(output_path), row_count=len(rows))
    return output_path


def _write_csv(rows: Sequence[OutputRow], output_path: Path) -> None:
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(OUTPUT_COLUMNS)
        writer.writerows(rows)


def _write_workbook(rows: Sequence[OutputRow], output_path: Path) -> None:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = OUTPUT_SHEET_NAME
    worksheet.append(list(OUTPUT_COLUMNS))
    for row in rows:
        worksheet.append([_workbook_text(value) for value in row])
        for cell in worksheet[worksheet.max_row]:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"
    workbook.save(output_path)


def _workbook_text(value: str) -> str:
    """Drop control characters that worksheets cannot store."""
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def _slugify(value: str) -> str:
    """Lowercase and hyphenate a value for use in file names."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or "campaign"
