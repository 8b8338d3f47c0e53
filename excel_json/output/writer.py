from __future__ import annotations

import json
from pathlib import Path
from typing import Any

"""JSON output writer.

Compact output uses the tightest separators (no spaces) and pretty output uses
2-space indentation. Non-ASCII text is written as-is (UTF-8).
"""

__all__ = [
    "OutputError",
    "default_output_path",
    "render_json",
    "save_json_file",
]


class OutputError(Exception):
    pass


def render_json(data: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(data, ensure_ascii=False, indent=2)
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def default_output_path(excel_file: Path) -> Path:
    """``data/report.xlsx`` -> ``data/report.json``"""
    return excel_file.with_suffix(".json")


def save_json_file(data: Any, output_path: Path, pretty: bool = False) -> Path:
    """Write ``data`` as JSON to ``output_path``.

    Parent directories are created when missing.

    Raises:
        OutputError: the file could not be written
    """
    text = render_json(data, pretty=pretty)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"cannot write {output_path}: {e}") from e
    return output_path
