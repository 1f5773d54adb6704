# topmark:header:start
#
#   project      : FtDetect
#   file         : cmd_common.py
#   file_relpath : src/ftdetect/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for FtDetect CLI commands.

The group callback only records *what* to load; the configuration and the
detection tables are resolved lazily, on first use by a subcommand, so that
commands such as ``version`` keep working next to a broken config file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from ftdetect.cli.errors import FtdetectConfigError
from ftdetect.config.io import ConfigError
from ftdetect.config.logging import get_logger
from ftdetect.config.model import MutableConfig
from ftdetect.filetypes.base import TableBuildError

if TYPE_CHECKING:
    from ftdetect.cli.console import ClickConsole
    from ftdetect.config.logging import FtdetectLogger
    from ftdetect.config.model import Config
    from ftdetect.filetypes.tables import DetectionTables

logger: FtdetectLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (a logging level) for this command."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def is_verbose(ctx: click.Context) -> bool:
    """Whether at least one ``-v`` was given."""
    return get_effective_verbosity(ctx) <= logging.INFO


def get_config(ctx: click.Context) -> Config:
    """Load (once) and return the effective configuration.

    Raises:
        FtdetectConfigError: If a config file is unreadable or malformed.
    """
    ctx.ensure_object(dict)
    cached: Config | None = ctx.obj.get("config")
    if cached is not None:
        return cached
    config_files: tuple[Path, ...] = tuple(Path(p) for p in ctx.obj.get("config_files", ()))
    try:
        config: Config = MutableConfig.load_merged(
            config_files=config_files,
            use_project=not ctx.obj.get("no_config", False),
        ).freeze()
    except ConfigError as exc:
        raise FtdetectConfigError(str(exc)) from exc
    logger.debug("Effective config loaded from: %s", [str(p) for p in config.config_files])
    ctx.obj["config"] = config
    return config


def get_tables(ctx: click.Context) -> DetectionTables:
    """Build (once) the detection tables, including the config override layer.

    Raises:
        FtdetectConfigError: If the config is invalid or an override pattern
            does not compile.
    """
    cached: DetectionTables | None = ctx.obj.get("tables")
    if cached is not None:
        return cached
    config: Config = get_config(ctx)
    try:
        tables: DetectionTables = config.tables()
    except TableBuildError as exc:
        raise FtdetectConfigError(f"Invalid override tables: {exc}") from exc
    ctx.obj["tables"] = tables
    return tables
