from __future__ import annotations

import re
from pathlib import Path

from excel_json.cli.__main__ import main as cli_main
from excel_json.logging.init import reset_logging

SUMMARY_RE = re.compile(r"^SUMMARY sheets=([0-9]+) rows=([0-9]+) elapsed_sec=([0-9]+(\.[0-9]+)?)$", re.M)


def test_summary_line_is_last_and_matches_contract(sales_workbook: Path, capsys):
    reset_logging()
    code = cli_main([str(sales_workbook), "--all-sheets"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert code == 0
    match = SUMMARY_RE.match(lines[-1])
    assert match, lines[-1]
    assert match.group(1) == "2"
    assert match.group(2) == "3"


def test_no_summary_for_list_sheets(sales_workbook: Path, capsys):
    reset_logging()
    cli_main([str(sales_workbook), "-l"])
    assert "SUMMARY" not in capsys.readouterr().out
