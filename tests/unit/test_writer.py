from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from excel_json.output.writer import OutputError, default_output_path, render_json, save_json_file

DATA = [{"id": 0, "name": "Zoë", "amount": 1.5, "ok": True, "note": None}]


def test_render_json_compact_has_no_spaces():
    assert render_json(DATA) == '[{"id":0,"name":"Zoë","amount":1.5,"ok":true,"note":null}]'


def test_render_json_pretty_indents_two_spaces():
    text = render_json({"A": []}, pretty=True)
    assert text == '{\n  "A": []\n}'


def test_save_json_file_round_trips(temp_workdir: Path):
    out = temp_workdir / "out" / "nested" / "result.json"
    written = save_json_file(DATA, out, pretty=True)
    assert written == out
    assert json.loads(out.read_text(encoding="utf-8")) == DATA
    # 非 ASCII はエスケープしない
    assert "Zoë" in out.read_text(encoding="utf-8")


def test_save_json_file_wraps_os_error(temp_workdir: Path):
    out = temp_workdir / "result.json"
    with patch.object(Path, "write_text", side_effect=PermissionError("denied")):
        with pytest.raises(OutputError) as e:
            save_json_file(DATA, out)
    assert "denied" in str(e.value)


def test_default_output_path_is_sibling_json():
    assert default_output_path(Path("data/report.xlsx")) == Path("data/report.json")
    assert default_output_path(Path("report.v2.xls")) == Path("report.v2.json")
