"""Source sheet readers for list normalization.

This module loads one header row plus data rows from a CSV file or a
named workbook sheet. Structural problems raise before any output.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence

from openpyxl import load_workbook

from core.constants import SUPPORTED_CSV_EXTENSIONS, SUPPORTED_WORKBOOK_EXTENSIONS
from core.errors import ListPrepSourceError
from core.logging_config import get_logger
from core.types import CellValue, SourceTable
from ingest.header_resolver import read_raw_cell

_LOGGER = get_logger(__name__)


def read_source_table(source_uri: str, sheet_name: str | None = None) -> SourceTable:
    """Load a source table from a local CSV or workbook.

    Args:
        source_uri: Local file path.
        sheet_name: Workbook sheet to read; ignored for CSV input.

    Returns:
        Header and data rows, empty when the source has no content.

    Raises:
        ListPrepSourceError: If the file or named sheet is missing.
    """
    source_path = Path(source_uri).expanduser()
    if not source_path.is_file():
        raise ListPrepSourceError(
            f"Failed to read source at {source_path}: file does not exist. "
            "Provide an existing CSV or workbook path."
        )
    suffix = source_path.suffix.lower()
    if suffix in SUPPORTED_CSV_EXTENSIONS:
        raw_rows = _read_csv_rows(source_path)
        table = _build_table(str(source_path), None, raw_rows)
    elif suffix in SUPPORTED_WORKBOOK_EXTENSIONS:
        if not sheet_name:
            raise ListPrepSourceError(
                f"Workbook source {source_path} requires a sheet name. "
                "Pass --sheet with the raw export sheet."
            )
        raw_rows = _read_workbook_rows(source_path, sheet_name)
        table = _build_table(str(source_path), sheet_name, raw_rows)
    else:
        supported = SUPPORTED_CSV_EXTENSIONS + SUPPORTED_WORKBOOK_EXTENSIONS
        raise ListPrepSourceError(
            f"Unsupported source file type '{suffix}' for {source_path}. "
            f"Supported extensions: {supported}."
        )
    _LOGGER.info(
        "source_loaded",
        source_uri=table.source_uri,
        sheet_name=table.sheet_name,
        row_count=len(table.rows),
    )
    return table


def _read_csv_rows(source_path: Path) -> list[list[CellValue]]:
    try:
        with source_path.open("r", encoding="utf-8-sig", newline="") as handle:
            return [list(row) for row in csv.reader(handle)]
    except (OSError, UnicodeDecodeError, csv.Error) as error:
        raise ListPrepSourceError(
            f"Failed to read CSV source at {source_path}: {error}. "
            "Export the sheet as UTF-8 CSV and retry."
        ) from error


def _read_workbook_rows(source_path: Path, sheet_name: str) -> list[list[CellValue]]:
    try:
        workbook = load_workbook(source_path, read_only=True, data_only=True)
    except Exception as error:
        raise ListPrepSourceError(
            f"Failed to open workbook at {source_path}: {error}. "
            "Check the file is a valid .xlsx workbook."
        ) from error
    try:
        if sheet_name not in workbook.sheetnames:
            available = ", ".join(workbook.sheetnames)
            raise ListPrepSourceError(
                f"Sheet '{sheet_name}' not found in {source_path}. "
                f"Available sheets: {available}."
            )
        worksheet = workbook[sheet_name]
        return [list(row) for row in worksheet.iter_rows(values_only=True)]
    finally:
        workbook.close()


def _build_table(
    source_uri: str,
    sheet_name: str | None,
    raw_rows: Sequence[Sequence[CellValue]],
) -> SourceTable:
    """Split raw rows into header and data rows.

    Leading blank rows are skipped to find the header and trailing blank
    rows are dropped. Cells are rendered as untrimmed strings.
    """
    text_rows = [_row_text(row) for row in raw_rows]
    while text_rows and _is_blank(text_rows[0]):
        text_rows.pop(0)
    while text_rows and _is_blank(text_rows[-1]):
        text_rows.pop()
    if not text_rows:
        return SourceTable(source_uri=source_uri, sheet_name=sheet_name, header=(), rows=())
    return SourceTable(
        source_uri=source_uri,
        sheet_name=sheet_name,
        header=text_rows[0],
        rows=tuple(text_rows[1:]),
    )


def _row_text(row: Sequence[CellValue]) -> tuple[str, ...]:
    return tuple(read_raw_cell(row, index) for index in range(len(row)))


def _is_blank(row: Iterable[str]) -> bool:
    return all(not cell.strip() for cell in row)
