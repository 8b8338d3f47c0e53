# Shared pytest fixtures
from __future__ import annotations
import tempfile
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
import pandas as pd
import pytest


def write_workbook(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
    """Write a real .xlsx (openpyxl) with the given sheets, cells as-is from A1."""
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet, rows in sheets.items():
            df = pd.DataFrame(rows)
            df.to_excel(writer, sheet_name=sheet, header=False, index=False)
    return path


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("EXCEL_JSON_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """pretty: true
all_sheets: false
header: 0
add_id: true
camel_case: true
na_strings: ["N/A"]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "excel_json.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def make_workbook(temp_workdir: Path) -> Callable[..., Path]:
    def _make(name: str, sheets: dict[str, list[list[object]]]) -> Path:
        return write_workbook(temp_workdir / "data" / name, sheets)
    return _make


@pytest.fixture()
def tournament_workbook(make_workbook) -> Path:
    """Single-sheet workbook with a fully blank row between two data rows."""
    return make_workbook(
        "tournament.xlsx",
        {
            "Players": [
                ["premiu turneu", "phone", "cash", "tesla"],
                ["Premium Gold", "1234567890", 500, "Model 3"],
                [None, None, None, None],
                ["Basic Silver", "9876543210", 200, "Model Y"],
            ]
        },
    )


@pytest.fixture()
def sales_workbook(make_workbook) -> Path:
    return make_workbook(
        "sales.xlsx",
        {
            "Sales": [
                ["Order Date", "product-category", "total.amount"],
                [datetime(2024, 3, 15, 14, 30), "Tools", 19.5],
                [datetime(2024, 3, 16), "Garden", 7],
            ],
            "Summary": [
                ["user_email", "First Name"],
                ["a@example.com", "Ann"],
            ],
        },
    )
