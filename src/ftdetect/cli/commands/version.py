# topmark:header:start
#
#   project      : FtDetect
#   file         : version.py
#   file_relpath : src/ftdetect/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtDetect `version` command.

Prints the current FtDetect version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from ftdetect.cli.cmd_common import get_console, is_verbose
from ftdetect.cli.options import OutputFormat, output_format_option
from ftdetect.constants import FTDETECT_VERSION

if TYPE_CHECKING:
    from ftdetect.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of FtDetect.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of FtDetect.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine:
        console.print(json.dumps({"version": FTDETECT_VERSION}))
    elif is_verbose(ctx):
        console.print(console.styled("FtDetect version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(FTDETECT_VERSION, bold=True)}")
    else:
        console.print(console.styled(FTDETECT_VERSION, bold=True))
