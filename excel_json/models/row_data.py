from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Union

"""Row shape definitions for the Excel -> JSON converter.

RawRow は外部 (Excel reader) から渡される 1 行分のマッピング。
NormalizedRow は変換後の JSON レコード (日付は YYYY-MM-DD 文字列化済)。
"""

__all__ = [
    "CellValue",
    "JsonScalar",
    "RawRow",
    "NormalizedRow",
    "SheetResult",
    "ConversionData",
    "is_empty_value",
]

# Values a spreadsheet cell can hold once read into Python
CellValue = Union[str, int, float, bool, datetime, date, None]

# Values allowed in output records (always JSON serializable)
JsonScalar = Union[str, int, float, bool, None]

RawRow = Mapping[str, CellValue]
NormalizedRow = dict[str, JsonScalar]
SheetResult = list[NormalizedRow]
ConversionData = Union[SheetResult, dict[str, SheetResult]]


def is_empty_value(value: object) -> bool:
    """True for cells that count as blank (None or empty string)."""
    return value is None or value == ""
