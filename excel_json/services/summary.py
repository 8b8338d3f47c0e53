from __future__ import annotations

from ..models.processing_result import ConversionResult

"""Summary line rendering for the CLI.

Format:
SUMMARY sheets={processed} rows={total output rows} elapsed_sec={elapsed}

The "SUMMARY " prefix is added by the logger (see logging.init.log_summary),
so render_summary_line returns only the content after it.
"""

__all__ = [
    "format_seconds",
    "render_sheet_lines",
    "render_summary_line",
]


def format_seconds(seconds: float) -> str:
    """Render seconds without scientific notation; whole numbers drop the fraction."""
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    return f"{seconds:.6f}".rstrip("0").rstrip(".")


def render_summary_line(result: ConversionResult) -> str:
    """Render the SUMMARY content for one conversion.

    Examples:
        >>> from excel_json.models.processing_result import SheetStat
        >>> result = ConversionResult(
        ...     data=[], sheets=["A", "B"], message="Conversion successful",
        ...     sheet_stats=[SheetStat("A", 3, 2), SheetStat("B", 1, 1)],
        ...     elapsed_seconds=0.5,
        ... )
        >>> render_summary_line(result)
        'sheets=2 rows=3 elapsed_sec=0.5'
    """
    return (
        f"sheets={len(result.sheet_stats or [])} "
        f"rows={result.total_rows} "
        f"elapsed_sec={format_seconds(result.elapsed_seconds)}"
    )


def render_sheet_lines(result: ConversionResult) -> list[str]:
    """One ``  <sheet>: <rows> rows`` line per processed sheet."""
    return [f"  {s.sheet_name}: {s.output_rows} rows" for s in result.sheet_stats or []]
