from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, date, datetime

from ..models.row_data import CellValue, JsonScalar, NormalizedRow, RawRow, is_empty_value
from .naming import normalize_header

"""Row normalization for one sheet.

Steps per sheet:
1. Drop rows whose cells are all blank (None / "")
2. Optionally prepend a dense zero-based ``id`` (position in the filtered output)
3. Normalize each header and coerce each value; columns whose header
   normalizes to "" are dropped
"""

__all__ = [
    "coerce_value",
    "is_empty_row",
    "process_rows",
]

logger = logging.getLogger(__name__)

ID_FIELD = "id"


def coerce_value(value: CellValue) -> JsonScalar:
    """Coerce a raw cell value into a JSON-representable value.

    - datetime -> UTC calendar date ``YYYY-MM-DD`` (naive values are taken as UTC)
    - date -> ``YYYY-MM-DD``
    - None / "" -> None
    - str / int / float / bool -> unchanged
    """
    # datetime は date のサブクラスなので先に判定する
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if is_empty_value(value):
        return None
    return value  # type: ignore[return-value]


def is_empty_row(row: RawRow) -> bool:
    """True when every cell of the row is blank. Keys are not considered."""
    return all(is_empty_value(v) for v in row.values())


def _normalize_row(row: RawRow, index: int, add_id: bool, camel_case: bool) -> NormalizedRow:
    out: NormalizedRow = {}
    if add_id:
        out[ID_FIELD] = index
    # Fold left over the pairs in column order: when two headers normalize to
    # the same key the later column overwrites the earlier one.
    for raw_key, raw_value in row.items():
        key = normalize_header(raw_key, camel_case)
        if not key:
            continue
        out[key] = coerce_value(raw_value)
    return out


def process_rows(rows: Iterable[RawRow], add_id: bool = True, camel_case: bool = True) -> list[NormalizedRow]:
    """Normalize the raw rows of one sheet.

    Args:
        rows: Raw rows in sheet order
        add_id: Prepend ``id`` numbered over the output rows (0..N-1)
        camel_case: camelCase keys instead of whitespace-collapsed headers

    Returns:
        Output records in sheet order, blank rows removed. Never None.
    """
    kept = [row for row in rows if not is_empty_row(row)]
    result = [_normalize_row(row, i, add_id, camel_case) for i, row in enumerate(kept)]
    logger.debug(f"process_rows: kept={len(result)} add_id={add_id} camel_case={camel_case}")
    return result
