# topmark:header:start
#
#   project      : FtDetect
#   file         : test_detect.py
#   file_relpath : tests/cli/test_detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `detect` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from ftdetect.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from tests.cli.conftest import RunCli, RunCliIn

pytestmark = pytest.mark.cli


def test_detect_prints_type_per_path(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "main.c").write_text("int x;\n", encoding="utf-8")
    (tmp_path / "tool").write_text("#!/usr/bin/env python3\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "main.c", "tool"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.splitlines() == ["main.c: c", "tool: python"]


def test_detect_reports_default_for_unmatched(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "notes.zzz-unknown").write_text("hello\n", encoding="utf-8")

    result: Result = run_cli_in(
        tmp_path, ["--no-color", "detect", "--explain", "notes.zzz-unknown"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.startswith("notes.zzz-unknown: text")
    assert "(default: no rule matched)" in result.stdout


def test_detect_explain_shows_stage_and_key(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "Dockerfile").write_text("FROM scratch\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "--explain", "Dockerfile"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Dockerfile: dockerfile" in result.stdout
    assert "filename 'Dockerfile'" in result.stdout


def test_detect_missing_path_exits_file_not_found(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "absent.py"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "No such file or directory: absent.py" in result.output


def test_detect_no_content_classifies_path_strings(run_cli: RunCli) -> None:
    result: Result = run_cli(
        ["--no-config", "--no-color", "detect", "--no-content", "/nowhere/app.py", "/etc/yum.conf"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.splitlines() == ["/nowhere/app.py: python", "/etc/yum.conf: confini"]


def test_detect_json_output(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "app.py").write_text("x = 1\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["detect", "--format", "json", "app.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert json.loads(result.stdout) == [{"path": "app.py", "filetype": "python"}]


def test_detect_ndjson_explain_records(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "app.py").write_text("x = 1\n", encoding="utf-8")
    (tmp_path / "odd.zzz-unknown").write_text("x\n", encoding="utf-8")

    result: Result = run_cli_in(
        tmp_path,
        ["detect", "--explain", "--format", "ndjson", "app.py", "odd.zzz-unknown"],
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    records: list[dict[str, Any]] = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["filetype"] for r in records] == ["python", "text"]
    assert [r["matched"] for r in records] == [True, False]
    assert records[0]["stage"] == "extension"
    assert records[0]["key"] == "py"


def test_detect_uses_config_default_and_overrides(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "ftdetect.toml").write_text(
        'default = "markdown"\n\n[extensions]\ntpl = "jinja"\n', encoding="utf-8"
    )
    (tmp_path / "page.tpl").write_text("{{ x }}\n", encoding="utf-8")
    (tmp_path / "odd.zzz-unknown").write_text("x\n", encoding="utf-8")

    result: Result = run_cli_in(
        tmp_path, ["--no-color", "detect", "page.tpl", "odd.zzz-unknown"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.splitlines() == ["page.tpl: jinja", "odd.zzz-unknown: markdown"]


def test_detect_malformed_config_exits_config_error(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "ftdetect.toml").write_text('default = "no-such-type"\n', encoding="utf-8")
    (tmp_path / "app.py").write_text("x = 1\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "app.py"])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "unknown file type 'no-such-type'" in result.output


def test_detect_no_config_ignores_project_file(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "ftdetect.toml").write_text('default = "no-such-type"\n', encoding="utf-8")
    (tmp_path / "app.py").write_text("x = 1\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-config", "--no-color", "detect", "app.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.strip() == "app.py: python"


def test_detect_explicit_config_file(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    extra: Path = tmp_path / "extra.toml"
    extra.write_text('[filenames]\n"Taskfile" = "yaml"\n', encoding="utf-8")

    result: Result = run_cli_in(
        tmp_path,
        ["--no-config", "--config", str(extra), "--no-color", "detect", "--no-content", "Taskfile"],
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.strip() == "Taskfile: yaml"
