from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .row_data import ConversionData

"""Conversion result models for the Excel -> JSON converter.

ConversionResult carries the converted data plus the metadata the CLI reports
(workbook sheet names, per-sheet row counts, timing).
"""


@dataclass(frozen=True)
class SheetStat:
    """Per-sheet statistics (internal helper for ConversionResult)."""
    sheet_name: str
    input_rows: int  # reader が返した行数 (空行含む)
    output_rows: int  # 空行除去後の出力行数


@dataclass(frozen=True)
class ConversionResult:
    """Result of one conversion run.

    For list-sheets requests ``data`` is the plain list of sheet names and
    ``sheet_stats`` is empty.
    """
    data: ConversionData | list[str]
    sheets: list[str]  # workbook sheet names, workbook order
    message: str
    sheet_stats: list[SheetStat] | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    elapsed_seconds: float = 0.0

    @property
    def total_rows(self) -> int:
        if not self.sheet_stats:
            return 0
        return sum(s.output_rows for s in self.sheet_stats)

    @property
    def processed_sheets(self) -> list[str]:
        return [s.sheet_name for s in self.sheet_stats or []]
