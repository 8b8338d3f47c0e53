from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ..models.config_models import ConvertOptions
from ..models.row_data import ConversionData, RawRow
from .rows import process_rows

"""Sheet selection policy.

Decides which sheet(s) of a workbook are converted and how the results are
shaped:
- all_sheets: every sheet, workbook order, as a mapping sheet name -> rows
- otherwise: the requested sheet (or the first one) as a plain row list
- list_sheets: the sheet names themselves, no row processing
"""

__all__ = [
    "EmptyWorkbookError",
    "SheetNotFoundError",
    "SheetSelection",
    "SheetSelectionError",
    "select_and_process",
    "select_sheets",
]


class SheetSelectionError(Exception):
    """Base class for sheet selection failures."""


class EmptyWorkbookError(SheetSelectionError):
    """Raised when the workbook exposes no sheets at all."""

    def __init__(self) -> None:
        super().__init__("Workbook contains no sheets")


class SheetNotFoundError(SheetSelectionError):
    """Raised when the requested sheet is not in the workbook."""

    def __init__(self, requested: str, available: Sequence[str]) -> None:
        self.requested = requested
        self.available = list(available)
        super().__init__(
            f'Sheet "{requested}" not found. Available sheets: {", ".join(self.available)}'
        )


@dataclass(frozen=True)
class SheetSelection:
    sheet_names: list[str]  # 処理対象 (workbook 順)
    all_sheets: bool  # True なら結果は sheet 名 -> rows の mapping

    @property
    def target(self) -> str:
        """Single target sheet.

        Raises:
            ValueError: the selection covers all sheets
        """
        if self.all_sheets:
            raise ValueError("all-sheets selection has no single target sheet")
        return self.sheet_names[0]


def select_sheets(
    sheet_names: Sequence[str], *, sheet: str | None = None, all_sheets: bool = False
) -> SheetSelection:
    """Pick the sheet(s) to convert.

    Raises:
        EmptyWorkbookError: ``sheet_names`` is empty
        SheetNotFoundError: ``sheet`` is given but not present
    """
    names = list(sheet_names)
    if not names:
        raise EmptyWorkbookError()
    if all_sheets:
        return SheetSelection(sheet_names=names, all_sheets=True)
    if sheet and sheet not in names:
        raise SheetNotFoundError(sheet, names)
    target = sheet or names[0]
    return SheetSelection(sheet_names=[target], all_sheets=False)


def select_and_process(
    sheet_names: Sequence[str],
    raw_rows_by_sheet: Mapping[str, Sequence[RawRow]],
    options: ConvertOptions,
) -> ConversionData | list[str]:
    """Apply the selection policy and normalize the selected sheets.

    ``raw_rows_by_sheet`` only needs entries for the selected sheets. Each
    sheet is processed independently, so ids restart at 0 per sheet.
    """
    if options.list_sheets:
        return list(sheet_names)

    selection = select_sheets(sheet_names, sheet=options.sheet, all_sheets=options.all_sheets)
    if selection.all_sheets:
        return {
            name: process_rows(raw_rows_by_sheet[name], options.add_id, options.camel_case)
            for name in selection.sheet_names
        }
    return process_rows(raw_rows_by_sheet[selection.target], options.add_id, options.camel_case)
