# topmark:header:start
#
#   project      : FtDetect
#   file         : main.py
#   file_relpath : src/ftdetect/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtDetect command line entry point.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- The configuration is only recorded here; subcommands load it lazily
  through [`ftdetect.cli.cmd_common`][].
"""

from __future__ import annotations

import click

from ftdetect.cli.commands.audit import audit_command
from ftdetect.cli.commands.breakdown import breakdown_command
from ftdetect.cli.commands.detect import detect_command
from ftdetect.cli.commands.filetypes import filetypes_command
from ftdetect.cli.commands.version import version_command
from ftdetect.cli.console import ClickConsole
from ftdetect.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from ftdetect.config.logging import (
    FtdetectLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

logger: FtdetectLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[str, ...] = (),
    no_config: bool = False,
) -> None:
    """Initialize shared state (verbosity, color, config sources) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_files (tuple[str, ...]): Explicit ``--config`` files, in order.
        no_config (bool): Whether project config discovery is disabled.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # FTDETECT_LOG_LEVEL wins; otherwise -v/-q drive diagnostics.
    level_env: int | None = resolve_env_log_level()
    log_level: int | None = level_env
    if log_level is None and (verbose or quiet):
        log_level = level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["config_files"] = tuple(config_files)
    ctx.obj["no_config"] = no_config
    logger.debug(
        "CLI state: verbosity=%s log_level=%s color=%s config_files=%s no_config=%s",
        level_cli,
        log_level,
        enable_color,
        config_files,
        no_config,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FtDetect: classify files by name, path and content.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the FtDetect CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'ftdetect detect PATH...' to classify files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(detect_command)

cli.add_command(breakdown_command)

cli.add_command(audit_command)

cli.add_command(filetypes_command)

if __name__ == "__main__":
    cli()
