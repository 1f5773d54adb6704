# topmark:header:start
#
#   project      : FtDetect
#   file         : filetypes.py
#   file_relpath : src/ftdetect/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtDetect `filetypes` command.

Lists the file type tokens FtDetect can report. With ``--long``, each token is
shown with its aliases and the filename and extension keys that statically
resolve to it in the effective tables.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from ftdetect.cli.cmd_common import get_console, get_tables
from ftdetect.cli.options import OutputFormat, output_format_option
from ftdetect.filetypes.base import Static
from ftdetect.filetypes.kinds import FileType

if TYPE_CHECKING:
    from ftdetect.cli.console import ClickConsole
    from ftdetect.filetypes.tables import DetectionTables


def _static_keys(tables: DetectionTables) -> dict[FileType, dict[str, list[str]]]:
    """Map each file type to the exact-table keys that statically resolve to it."""
    out: dict[FileType, dict[str, list[str]]] = {}
    for table_name, table in (("extensions", tables.extensions), ("filenames", tables.filenames)):
        for key, resolver in table.items():
            if isinstance(resolver, Static):
                bucket = out.setdefault(resolver.filetype, {"extensions": [], "filenames": []})
                bucket[table_name].append(key)
    return out


@click.command(
    name="filetypes",
    help="List all file type tokens.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show aliases and the static extensions/filenames of each type.",
)
@output_format_option
def filetypes_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List file type tokens.

    Args:
        show_details (bool): If True, include aliases and static table keys.
        output_format (OutputFormat | None): Output format to use.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    members: list[FileType] = sorted(FileType, key=lambda ft: ft.value)
    keys: dict[FileType, dict[str, list[str]]] = _static_keys(get_tables(ctx)) if show_details else {}

    def _serialize(ft: FileType) -> dict[str, Any]:
        if not show_details:
            return {"name": ft.value}
        found: dict[str, list[str]] = keys.get(ft, {"extensions": [], "filenames": []})
        return {
            "name": ft.value,
            "aliases": list(ft.aliases),
            "extensions": sorted(found["extensions"]),
            "filenames": sorted(found["filenames"]),
        }

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([_serialize(ft) for ft in members], indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for ft in members:
            console.print(json.dumps(_serialize(ft)))
        return

    for ft in members:
        if not show_details:
            console.print(ft.value)
            continue
        info: dict[str, Any] = _serialize(ft)
        console.print(console.styled(ft.value, bold=True))
        if info["aliases"]:
            console.print(f"    aliases:    {', '.join(info['aliases'])}")
        if info["extensions"]:
            console.print(f"    extensions: {', '.join(info['extensions'])}")
        if info["filenames"]:
            console.print(f"    filenames:  {', '.join(info['filenames'])}")
