from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pandas as pd

from ..excel.reader import WorkbookReadError, list_sheet_names, open_workbook, read_sheet
from ..models.config_models import ConvertOptions
from ..models.processing_result import ConversionResult, SheetStat
from ..models.row_data import RawRow
from ..output.writer import default_output_path, save_json_file
from .progress import ProgressTracker
from .selector import select_and_process, select_sheets

logger = logging.getLogger(__name__)

"""Service orchestration for the Excel -> JSON converter.

Coordinates one conversion:
1. Check the workbook exists and list its sheets
2. Apply the sheet selection policy (or return the list for list_sheets)
3. Read only the selected sheets (tqdm progress on TTY)
4. Normalize rows via select_and_process
5. Return ConversionResult with per-sheet stats and timing
"""

__all__ = [
    "ProcessingError",
    "convert_excel_to_json",
    "quick_convert",
    "resolve_output_path",
]


class ProcessingError(Exception):
    """Base exception for processing errors (missing file, unreadable workbook)."""
    pass


def _read_selected_sheets(
    xls: pd.ExcelFile, sheet_names: list[str], options: ConvertOptions
) -> dict[str, list[RawRow]]:
    raw_rows_by_sheet: dict[str, list[RawRow]] = {}
    with ProgressTracker(len(sheet_names)) as progress:
        for name in sheet_names:
            progress.start_sheet(name)
            sheet = read_sheet(xls, name, header_row=options.header, na_strings=options.na_strings)
            raw_rows_by_sheet[name] = list(sheet.rows)
            progress.finish_sheet(rows=len(sheet.rows))
    return raw_rows_by_sheet


def convert_excel_to_json(path: Path, options: ConvertOptions) -> ConversionResult:
    """Convert one workbook according to ``options``.

    Args:
        path: Excel file path
        options: Conversion options (built once at the CLI boundary)

    Returns:
        ConversionResult. ``data`` is the sheet-name list when
        ``options.list_sheets`` is set.

    Raises:
        ProcessingError: File missing or workbook unreadable
        SheetSelectionError: Empty workbook / unknown sheet (from selector)
    """
    start_time = datetime.now(UTC)

    if not path.exists():
        raise ProcessingError(f"File not found: {path}")

    try:
        with open_workbook(path) as xls:
            sheet_names = list_sheet_names(xls)
            logger.debug(f"workbook={path.name} sheets={sheet_names}")

            if options.list_sheets:
                end_time = datetime.now(UTC)
                return ConversionResult(
                    data=select_and_process(sheet_names, {}, options),
                    sheets=sheet_names,
                    message=f"Found {len(sheet_names)} sheet(s)",
                    sheet_stats=[],
                    start_time=start_time,
                    end_time=end_time,
                    elapsed_seconds=(end_time - start_time).total_seconds(),
                )

            # 選択を先に確定し、対象シートだけを読み込む
            selection = select_sheets(sheet_names, sheet=options.sheet, all_sheets=options.all_sheets)
            raw_rows_by_sheet = _read_selected_sheets(xls, selection.sheet_names, options)
    except WorkbookReadError as e:
        raise ProcessingError(str(e)) from e

    data = select_and_process(sheet_names, raw_rows_by_sheet, options)

    if isinstance(data, dict):
        output_counts = {name: len(rows) for name, rows in data.items()}
    else:
        output_counts = {selection.target: len(data)}
    sheet_stats = [
        SheetStat(
            sheet_name=name,
            input_rows=len(raw_rows_by_sheet[name]),
            output_rows=output_counts[name],
        )
        for name in selection.sheet_names
    ]

    end_time = datetime.now(UTC)
    return ConversionResult(
        data=data,
        sheets=sheet_names,
        message="Conversion successful",
        sheet_stats=sheet_stats,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )


def quick_convert(
    excel_file: str | Path,
    output_file: str | Path | None = None,
    options: ConvertOptions | None = None,
) -> Any:
    """Programmatic one-shot conversion.

    Returns the converted data, or, when ``output_file`` is given, writes it
    and returns ``"Converted to <output_file>"``. Errors propagate as raised
    by convert_excel_to_json / save_json_file.
    """
    opts = options or ConvertOptions()
    result = convert_excel_to_json(Path(excel_file), opts)
    if output_file is None:
        return result.data
    written = save_json_file(result.data, Path(output_file), pretty=opts.pretty)
    return f"Converted to {written}"


def resolve_output_path(excel_file: Path, options: ConvertOptions) -> Path:
    """Output path from options, else ``<stem>.json`` next to the workbook."""
    if options.output:
        return Path(options.output)
    return default_output_path(excel_file)
