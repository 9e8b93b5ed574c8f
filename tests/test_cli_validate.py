"""In-process tests for the CLI entry point and the validate exit-code contract."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from seqdemo.__main__ import main
from seqdemo.api import build_report
from seqdemo.utils.exit_codes import ExitCode


def test_main_runs_selected_section(capsys) -> None:
    rc = main(["--section", "mutating"])
    out = capsys.readouterr().out
    assert rc == ExitCode.SUCCESS
    assert "Mutating methods" in out
    assert "Non-mutating methods" not in out
    assert "\nDone\n" in out


def test_main_json(capsys) -> None:
    rc = main(["--json", "--section", "non-mutating"])
    d = json.loads(capsys.readouterr().out)
    assert rc == ExitCode.SUCCESS
    assert [s["title"] for s in d["sections"]] == ["Non-mutating methods"]


def test_validate_ok(tmp_path: Path, capsys) -> None:
    _, d = build_report()
    path = tmp_path / "report.json"
    path.write_text(json.dumps(d), encoding="utf-8")
    assert main(["validate", str(path)]) == ExitCode.SUCCESS
    assert capsys.readouterr().out == "OK\n"


def test_validate_schema_violation(tmp_path: Path, capsys) -> None:
    path = tmp_path / "report.json"
    path.write_text(json.dumps({"schema_version": "demo_report_v1"}), encoding="utf-8")
    assert main(["validate", str(path)]) == ExitCode.VIOLATION
    assert capsys.readouterr().err.startswith("FAIL:")


@pytest.mark.parametrize("content", [None, "{not json"])
def test_validate_unreadable(tmp_path: Path, capsys, content) -> None:
    path = tmp_path / "report.json"
    if content is not None:
        path.write_text(content, encoding="utf-8")
    assert main(["validate", str(path)]) == ExitCode.ERROR
    assert capsys.readouterr().err.startswith("ERROR:")


def test_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("seqdemo ")


def test_main_json_is_strict_json(capsys) -> None:
    def reject(token: str):
        raise ValueError(f"non-standard JSON constant {token}")

    assert main(["--json", "--section", "non-mutating"]) == ExitCode.SUCCESS
    d = json.loads(capsys.readouterr().out, parse_constant=reject)
    records = d["sections"][0]["records"]
    nan_records = [r for r in records if "NaN" in r["label"]]
    assert len(nan_records) == 2
    assert all(r["before"] == ["nan"] for r in nan_records)
