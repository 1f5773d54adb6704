# topmark:header:start
#
#   project      : FtDetect
#   file         : test_breakdown.py
#   file_relpath : tests/cli/test_breakdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `breakdown` command.

All tests run against the `project` fixture: three Python files, one C file
and one Markdown file survive ``.gitignore`` and the binary check.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from ftdetect.cli.commands import breakdown
from ftdetect.cli.commands.breakdown import compute_breakdown
from ftdetect.cli.exit_codes import ExitCode
from ftdetect.config.model import MutableConfig
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.tables import get_detection_tables

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from tests.cli.conftest import RunCliIn

pytestmark = pytest.mark.cli


def test_compute_breakdown_groups_by_type(project: Path) -> None:
    groups = compute_breakdown(
        project, tables=get_detection_tables(), config=MutableConfig().freeze()
    )

    assert [(ft, len(files)) for ft, files in groups] == [
        (FileType.PYTHON, 3),
        (FileType.C, 1),
        (FileType.MARKDOWN, 1),
    ]
    assert [p.name for p in groups[0][1]] == ["__init__.py", "core.py", "setup.py"]


def test_compute_breakdown_honors_config_excludes(project: Path) -> None:
    config = MutableConfig(exclude=["pkg/"]).freeze()

    groups = compute_breakdown(project, tables=get_detection_tables(), config=config)

    assert [(ft, len(files)) for ft, files in groups] == [
        (FileType.C, 1),
        (FileType.MARKDOWN, 1),
        (FileType.PYTHON, 1),
    ]


def test_breakdown_percentages(project: Path, run_cli_in: RunCliIn) -> None:
    result: Result = run_cli_in(project, ["--no-color", "breakdown"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.splitlines() == [
        "60.00% python",
        "20.00% c",
        "20.00% markdown",
    ]


def test_breakdown_files_listing(project: Path, run_cli_in: RunCliIn) -> None:
    result: Result = run_cli_in(project, ["--no-color", "breakdown", "--files"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    lines: list[str] = result.stdout.splitlines()
    start: int = lines.index("python (3)")
    assert lines[start + 1 : start + 4] == ["pkg/__init__.py", "pkg/core.py", "setup.py"]
    assert "c (1)" in lines
    assert "main.c" in lines


def test_breakdown_condensed_with_filter(project: Path, run_cli_in: RunCliIn) -> None:
    result: Result = run_cli_in(
        project,
        ["--no-color", "breakdown", "--files", "--condensed", "--filter", "^py"],
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    lines: list[str] = result.stdout.splitlines()
    assert "python (3)" in lines
    assert "c (1)" not in lines
    assert "setup.py" not in lines


def test_breakdown_json(project: Path, run_cli_in: RunCliIn) -> None:
    result: Result = run_cli_in(
        project, ["breakdown", "--format", "json", "--files", "--filter", "markdown"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    payload: dict[str, Any] = json.loads(result.stdout)
    assert payload["total"] == 5
    by_type: dict[str, dict[str, Any]] = {e["filetype"]: e for e in payload["filetypes"]}
    assert by_type["python"]["percentage"] == 60.0
    assert by_type["markdown"]["files"] == ["README.md"]
    assert "files" not in by_type["python"]


def test_breakdown_warns_about_unreadable_files(
    project: Path, run_cli_in: RunCliIn, monkeypatch: pytest.MonkeyPatch
) -> None:
    real_read_head = breakdown.read_head

    def _read_head(path: Path, max_bytes: int) -> bytes:
        if path.name == "main.c":
            raise PermissionError(13, "Permission denied")
        return real_read_head(path, max_bytes)

    monkeypatch.setattr(breakdown, "read_head", _read_head)

    result: Result = run_cli_in(project, ["--no-color", "breakdown"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Cannot read main.c: Permission denied" in result.stderr
    assert result.stdout.splitlines() == ["75.00% python", "25.00% markdown"]


def test_breakdown_missing_path(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    result: Result = run_cli_in(tmp_path, ["--no-color", "breakdown", "nowhere"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND


def test_breakdown_bad_filter_is_usage_error(project: Path, run_cli_in: RunCliIn) -> None:
    result: Result = run_cli_in(project, ["--no-color", "breakdown", "--filter", "("])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "Invalid filter" in result.output


def test_breakdown_empty_directory(tmp_path: Path, run_cli_in: RunCliIn) -> None:
    (tmp_path / "empty").mkdir()

    result: Result = run_cli_in(tmp_path, ["--no-color", "breakdown", "empty"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout == ""
