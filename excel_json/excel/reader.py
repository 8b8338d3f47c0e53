from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import time
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from ..models.row_data import CellValue

"""Excel reader (pandas + openpyxl).

Produces, per sheet, the ordered raw rows consumed by the row normalization
services:
- 指定 header_row (0-indexed) の行をヘッダとして扱い、それより上の行は読み飛ばす
- 空ヘッダは ``__EMPTY``, ``__EMPTY_1`` ..., 重複ヘッダは ``name_1``, ``name_2`` ...
- 欠損セルは None、pandas / numpy のスカラーは Python ネイティブ型へ変換
- pandas 既定の NA 文字列変換 ("NA", "null" 等) は適用しない
"""

__all__ = [
    "SheetData",
    "WorkbookReadError",
    "list_sheet_names",
    "open_workbook",
    "read_sheet",
]

logger = logging.getLogger(__name__)

EMPTY_HEADER = "__EMPTY"


class WorkbookReadError(Exception):
    """Raised when a workbook or one of its sheets cannot be read."""


@dataclass
class SheetData:
    sheet_name: str
    columns: list[str]
    rows: list[dict[str, CellValue]]  # 生データ (ヘッダ名 -> 値), 空行も含む


def open_workbook(path: Path) -> pd.ExcelFile:
    """Open an Excel workbook. Use as a context manager to release the file."""
    try:
        return pd.ExcelFile(path)
    except Exception as e:  # openpyxl / zipfile 由来の例外も含めて包む
        raise WorkbookReadError(f"cannot open workbook {path}: {e}") from e


def list_sheet_names(source: Path | pd.ExcelFile) -> list[str]:
    """Return sheet names in workbook order."""
    if isinstance(source, pd.ExcelFile):
        return [str(n) for n in source.sheet_names]
    with open_workbook(source) as xls:
        return [str(n) for n in xls.sheet_names]


def _to_cell_value(value: Any) -> CellValue:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # NaN / NaT -> None (pd.isna は配列を渡さない前提)
    if pd.isna(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, time):
        return value.isoformat()
    return value


def _header_name(value: Any) -> str:
    cell = _to_cell_value(value)
    if cell is None or cell == "":
        return EMPTY_HEADER
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def _unique_headers(raw_headers: Iterable[Any]) -> list[str]:
    """Name blank headers and suffix duplicates so every column keeps its own key."""
    seen: dict[str, int] = {}
    columns: list[str] = []
    for raw in raw_headers:
        base = _header_name(raw)
        name = base
        count = seen.get(base, 0)
        while name in seen:
            count += 1
            name = f"{base}_{count}"
        seen[base] = count
        seen.setdefault(name, 0)
        columns.append(name)
    return columns


def _trim_to_used_range(df: pd.DataFrame) -> pd.DataFrame:
    """Drop the blank rows above and the blank columns left of the table.

    openpyxl 経由の parse は A1 から読むため、先頭の空行・空列を落として
    シートの使用範囲 (used range) の左上を原点にする。内部の空行は残す。
    """
    blank = df.isna() | df.astype(str).eq("")
    filled_rows = ~blank.all(axis=1)
    filled_cols = ~blank.all(axis=0)
    if not filled_rows.any():
        return df.iloc[0:0, 0:0]
    first_row = int(filled_rows.to_numpy().argmax())
    first_col = int(filled_cols.to_numpy().argmax())
    return df.iloc[first_row:, first_col:]


def read_sheet(
    workbook: pd.ExcelFile,
    sheet_name: str,
    header_row: int = 0,
    na_strings: Iterable[str] | None = None,
) -> SheetData:
    """Read one sheet into raw rows.

    Parameters
    ----------
    workbook: ``open_workbook`` の戻り値
    sheet_name: 対象シート名
    header_row: ヘッダ行 (使用範囲の先頭行から 0-indexed)。これより上の行は無視
    na_strings: 空セルとして扱う文字列 (既定では何も変換しない)
    """
    na_values = list(na_strings) if na_strings else None
    try:
        df = workbook.parse(sheet_name, header=None, keep_default_na=False, na_values=na_values)
    except Exception as e:  # openpyxl / zipfile 由来の例外も含めて包む
        raise WorkbookReadError(f"cannot read sheet '{sheet_name}': {e}") from e
    df = _trim_to_used_range(df)

    if header_row < 0 or df.shape[0] <= header_row:
        logger.debug(f"sheet '{sheet_name}': header row {header_row} outside {df.shape[0]} rows")
        return SheetData(sheet_name=sheet_name, columns=[], rows=[])

    columns = _unique_headers(df.iloc[header_row].tolist())
    rows: list[dict[str, CellValue]] = []
    for raw in df.iloc[header_row + 1:].itertuples(index=False, name=None):
        rows.append({col: _to_cell_value(val) for col, val in zip(columns, raw, strict=True)})
    logger.debug(f"sheet '{sheet_name}': columns={len(columns)} rows={len(rows)}")
    return SheetData(sheet_name=sheet_name, columns=columns, rows=rows)
