# topmark:header:start
#
#   project      : FtDetect
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test fixtures for running FtDetect through Click's `CliRunner`.

`run_cli` invokes the CLI from the current working directory; `run_cli_in`
changes into a given directory first, so relative paths and config discovery
resolve against a temporary project instead of the repository checkout.

Program output goes to stdout and diagnostics to stderr, so tests that parse
machine output read `result.stdout`.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from ftdetect.cli.main import cli
from ftdetect.config import logging

if TYPE_CHECKING:
    from pathlib import Path

RunCli = Callable[[Sequence[str]], Result]
RunCliIn = Callable[["Path", Sequence[str]], Result]


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Re-install the suite's logging handler after each CLI run.

    The CLI reconfigures the root logger and binds its handler to the
    runner's (short-lived) stderr stream.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def run_cli() -> RunCli:
    """Return a callable invoking the CLI in the current working directory.

    Example:
        ```python
        result = run_cli(["--no-color", "version"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()

    def _run(argv: Sequence[str]) -> Result:
        return runner.invoke(cli, list(argv))

    return _run


@pytest.fixture
def run_cli_in() -> RunCliIn:
    """Return a callable invoking the CLI with a given working directory."""
    runner = CliRunner()

    def _run(cwd: Path, argv: Sequence[str]) -> Result:
        previous: str = os.getcwd()
        try:
            os.chdir(cwd)
            return runner.invoke(cli, list(argv))
        finally:
            os.chdir(previous)

    return _run


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small source tree with a known file type makeup.

    Layout: three Python files, one C file, one Markdown file, an ignored log
    file and a binary blob.
    """
    root: Path = tmp_path / "project"
    (root / "pkg").mkdir(parents=True)
    (root / "pkg" / "__init__.py").write_text("", encoding="utf-8")
    (root / "pkg" / "core.py").write_text("x = 1\n", encoding="utf-8")
    (root / "setup.py").write_text("print('hi')\n", encoding="utf-8")
    (root / "main.c").write_text("int main(void) { return 0; }\n", encoding="utf-8")
    (root / "README.md").write_text("# Title\n", encoding="utf-8")
    (root / "debug.log").write_text("noise\n", encoding="utf-8")
    (root / "blob.py").write_bytes(b"\x00\x01\x02binary")
    (root / ".gitignore").write_text("*.log\n.gitignore\n", encoding="utf-8")
    return root
