# topmark:header:start
#
#   project      : FtDetect
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the shared CLI option resolution helpers."""

from __future__ import annotations

import logging

import pytest

from ftdetect.cli.errors import FtdetectUsageError
from ftdetect.cli.options import (
    ColorMode,
    OutputFormat,
    resolve_color_mode,
    resolve_verbosity,
)
from ftdetect.config.logging import TRACE_LEVEL


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 3, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_rejects_both_flags() -> None:
    with pytest.raises(FtdetectUsageError):
        resolve_verbosity(1, 1)


def test_machine_formats_never_use_color() -> None:
    assert not resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=OutputFormat.JSON)
    assert not resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=OutputFormat.NDJSON)


def test_explicit_mode_beats_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not resolve_color_mode(cli_mode=ColorMode.NEVER, output_format=None)

    monkeypatch.delenv("FORCE_COLOR")
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=None)


def test_auto_mode_consults_environment_then_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, output_format=None, stdout_isatty=True)
    assert not resolve_color_mode(cli_mode=None, output_format=None, stdout_isatty=False)

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=None, output_format=None, stdout_isatty=False)

    monkeypatch.setenv("FORCE_COLOR", "0")
    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(cli_mode=None, output_format=None, stdout_isatty=True)
