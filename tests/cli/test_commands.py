# topmark:header:start
#
#   project      : FtDetect
#   file         : test_commands.py
#   file_relpath : tests/cli/test_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `version`, `audit` and `filetypes` commands and the group itself."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from ftdetect.cli.exit_codes import ExitCode
from ftdetect.constants import FTDETECT_VERSION
from ftdetect.filetypes.kinds import FileType

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from tests.cli.conftest import RunCli, RunCliIn

pytestmark = pytest.mark.cli


def test_group_without_command_prints_hint_and_help(run_cli: RunCli) -> None:
    result: Result = run_cli(["--no-color"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Hint: use 'ftdetect detect PATH...'" in result.stdout
    assert "Commands:" in result.stdout


def test_version_plain(run_cli: RunCli) -> None:
    result: Result = run_cli(["--no-color", "version"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.strip() == FTDETECT_VERSION


def test_version_json(run_cli: RunCli) -> None:
    result: Result = run_cli(["version", "--format", "json"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert json.loads(result.stdout) == {"version": FTDETECT_VERSION}


def test_version_ignores_broken_config(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    """Configuration is loaded lazily, so `version` works next to a broken config."""
    (tmp_path / "ftdetect.toml").write_text("this is = = not toml\n", encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["--no-color", "version"])

    assert result.exit_code == ExitCode.SUCCESS, result.output


def test_verbose_and_quiet_conflict(run_cli: RunCli) -> None:
    result: Result = run_cli(["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


def test_invalid_color_mode_is_rejected(run_cli: RunCli) -> None:
    result: Result = run_cli(["--color", "sometimes", "version"])

    assert result.exit_code != ExitCode.SUCCESS
    assert "Invalid value 'sometimes'" in result.output


def test_audit_builtin_tables_clean(isolation: Path, run_cli: RunCli) -> None:
    result: Result = run_cli(["--no-color", "audit"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "No defects found." in result.stdout


def test_audit_verbose_prints_table_counts(isolation: Path, run_cli: RunCli) -> None:
    result: Result = run_cli(["--no-color", "-v", "audit"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Tables: " in result.stdout


def test_audit_reports_config_defects(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "ftdetect.toml").write_text(
        '[extensions]\n".tpl" = "jinja"\n', encoding="utf-8"
    )

    result: Result = run_cli_in(tmp_path, ["--no-color", "audit"])

    assert result.exit_code == ExitCode.FAILURE
    assert "'.tpl'" in result.stdout
    assert "1 defect(s) found." in result.stdout


def test_audit_json(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "ftdetect.toml").write_text(
        '[extensions]\n".tpl" = "jinja"\n', encoding="utf-8"
    )

    result: Result = run_cli_in(tmp_path, ["audit", "--format", "json"])

    assert result.exit_code == ExitCode.FAILURE
    payload: dict[str, Any] = json.loads(result.stdout)
    assert payload["ok"] is False
    assert [f["key"] for f in payload["findings"]] == [".tpl"]


def test_audit_bad_override_regex_is_config_error(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "ftdetect.toml").write_text(
        "[[patterns]]\nregex = '('\nfiletype = \"c\"\n", encoding="utf-8"
    )

    result: Result = run_cli_in(tmp_path, ["--no-color", "audit"])

    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_filetypes_lists_every_token_sorted(isolation: Path, run_cli: RunCli) -> None:
    result: Result = run_cli(["--no-color", "filetypes"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    tokens: list[str] = result.stdout.splitlines()
    assert tokens == sorted(ft.value for ft in FileType)


def test_filetypes_long_json(isolation: Path, run_cli: RunCli) -> None:
    result: Result = run_cli(["filetypes", "--long", "--format", "json"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    entries: dict[str, dict[str, Any]] = {e["name"]: e for e in json.loads(result.stdout)}
    assert "py" in entries["python"]["extensions"]
    assert "python3" in entries["python"]["aliases"]
    assert "Dockerfile" in entries["dockerfile"]["filenames"]
