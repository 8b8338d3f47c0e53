from __future__ import annotations

import re

from excel_json.models.processing_result import ConversionResult, SheetStat
from excel_json.services.summary import format_seconds, render_sheet_lines, render_summary_line

SUMMARY_PATTERN = re.compile(r"^sheets=([0-9]+) rows=([0-9]+) elapsed_sec=([0-9]+\.?[0-9]*)$")


def _result(stats: list[SheetStat], elapsed: float) -> ConversionResult:
    return ConversionResult(
        data={},
        sheets=[s.sheet_name for s in stats],
        message="Conversion successful",
        sheet_stats=stats,
        elapsed_seconds=elapsed,
    )


def test_render_summary_line_multiple_sheets():
    result = _result([SheetStat("A", 5, 3), SheetStat("B", 2, 2)], 2.0)
    line = render_summary_line(result)
    match = SUMMARY_PATTERN.match(line)
    assert match, line
    assert match.group(1) == "2"
    assert match.group(2) == "5"
    assert match.group(3) == "2"


def test_render_summary_line_no_stats():
    result = ConversionResult(data=["A"], sheets=["A"], message="Found 1 sheet(s)")
    assert render_summary_line(result) == "sheets=0 rows=0 elapsed_sec=0"


def test_format_seconds_small_values_avoid_scientific_notation():
    assert format_seconds(0) == "0"
    assert format_seconds(3.0) == "3"
    assert format_seconds(0.5) == "0.5"
    assert format_seconds(0.0000123) == "0.000012"
    assert "e" not in format_seconds(1e-5)


def test_render_sheet_lines():
    result = _result([SheetStat("Sales", 4, 3), SheetStat("Summary", 1, 0)], 0.1)
    assert render_sheet_lines(result) == ["  Sales: 3 rows", "  Summary: 0 rows"]
