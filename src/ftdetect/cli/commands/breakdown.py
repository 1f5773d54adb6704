# topmark:header:start
#
#   project      : FtDetect
#   file         : breakdown.py
#   file_relpath : src/ftdetect/cli/commands/breakdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtDetect `breakdown` command.

Walks a directory (honoring ``.gitignore``), classifies every text file and
prints the percentage split per file type, most frequent first. Files that
look binary, or that no rule classifies, are left out of the split.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from ftdetect.cli.cmd_common import get_config, get_console, get_tables
from ftdetect.cli.errors import FtdetectFileNotFoundError, FtdetectUsageError
from ftdetect.cli.options import OutputFormat, output_format_option
from ftdetect.config.logging import get_logger
from ftdetect.filetypes.content import is_binary, read_head
from ftdetect.filetypes.pipeline import try_detect
from ftdetect.walk import iter_files

if TYPE_CHECKING:
    from collections.abc import Callable

    from ftdetect.cli.console import ClickConsole
    from ftdetect.config.logging import FtdetectLogger
    from ftdetect.config.model import Config
    from ftdetect.filetypes.kinds import FileType
    from ftdetect.filetypes.tables import DetectionTables

logger: FtdetectLogger = get_logger(__name__)


def compute_breakdown(
    root: Path,
    *,
    tables: DetectionTables,
    config: Config,
    on_unreadable: Callable[[Path, OSError], None] | None = None,
) -> list[tuple[FileType, list[Path]]]:
    """Classify the files below `root`, grouped by file type.

    Args:
        root (Path): Directory (or single file) to inspect.
        tables (DetectionTables): Tables to detect with.
        config (Config): Supplies the content bound, shebang policy and excludes.
        on_unreadable (Callable[[Path, OSError], None] | None): Called for each
            file that cannot be read; such files are left out of the split.

    Returns:
        list[tuple[FileType, list[Path]]]: Groups sorted by descending file
        count (ties by type key); paths within a group are sorted.
    """
    groups: dict[FileType, list[Path]] = {}
    for path in iter_files(root, exclude=config.exclude):
        try:
            head: bytes = read_head(path, config.max_content_bytes)
        except OSError as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            if on_unreadable is not None:
                on_unreadable(path, exc)
            continue
        if is_binary(head):
            logger.trace("Skipping binary file %s", path)
            continue
        filetype: FileType | None = try_detect(
            path,
            head,
            tables=tables,
            max_bytes=config.max_content_bytes,
            shebang_fallback=config.shebang_fallback,
        )
        if filetype is None:
            logger.debug("Unclassified: %s", path)
            continue
        groups.setdefault(filetype, []).append(path)

    ordered = sorted(groups.items(), key=lambda item: (-len(item[1]), item[0].value))
    return [(filetype, sorted(paths)) for filetype, paths in ordered]


def _display_path(root: Path, path: Path) -> str:
    if root.is_dir():
        try:
            return path.relative_to(root).as_posix()
        except ValueError:
            pass
    return path.as_posix()


@click.command(
    name="breakdown",
    help="Show the file type makeup of a directory.",
    epilog="""
Prints the percentage of files per file type. With --files, every type is
followed by the files classified as such; --condensed keeps only the type
headers. --filter REGEX (repeatable) restricts the listing to matching types.
""",
)
@click.argument("path", required=False, default=".", type=click.Path(path_type=Path))
@click.option("--files", "show_files", is_flag=True, help="List the files per file type.")
@click.option(
    "--condensed",
    is_flag=True,
    help="With --files, only print the type headers with their file counts.",
)
@click.option(
    "--filter",
    "filters",
    multiple=True,
    help="Regex on the file type key; only matching types are listed (repeatable).",
)
@output_format_option
def breakdown_command(
    *,
    path: Path,
    show_files: bool = False,
    condensed: bool = False,
    filters: tuple[str, ...] = (),
    output_format: OutputFormat | None = None,
) -> None:
    """Summarize the file types found under PATH.

    Raises:
        FtdetectFileNotFoundError: If PATH does not exist.
        FtdetectUsageError: If a ``--filter`` regex does not compile.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    config: Config = get_config(ctx)
    tables: DetectionTables = get_tables(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if not path.exists():
        raise FtdetectFileNotFoundError(f"No such file or directory: {path}")
    try:
        compiled: list[re.Pattern[str]] = [re.compile(f) for f in filters]
    except re.error as exc:
        raise FtdetectUsageError(f"Invalid filter: {exc}") from exc

    def _warn_unreadable(file: Path, exc: OSError) -> None:
        console.warn(f"Cannot read {_display_path(path, file)}: {exc.strerror or exc}")

    groups: list[tuple[FileType, list[Path]]] = compute_breakdown(
        path, tables=tables, config=config, on_unreadable=_warn_unreadable
    )
    total: int = sum(len(files) for _ft, files in groups)

    def _selected(filetype: FileType) -> bool:
        return not compiled or any(rx.search(filetype.value) for rx in compiled)

    if fmt.is_machine:
        entries: list[dict[str, Any]] = []
        for filetype, files in groups:
            entry: dict[str, Any] = {
                "filetype": str(filetype),
                "count": len(files),
                "percentage": round(len(files) * 100 / total, 2),
            }
            if show_files and not condensed and _selected(filetype):
                entry["files"] = [_display_path(path, f) for f in files]
            entries.append(entry)
        if fmt == OutputFormat.JSON:
            console.print(json.dumps({"total": total, "filetypes": entries}, indent=2))
        else:
            for entry in entries:
                console.print(json.dumps(entry))
        return

    for filetype, files in groups:
        console.print(f"{len(files) * 100 / total:.2f}% {filetype}")

    if not show_files:
        return
    console.print()
    for filetype, files in groups:
        if not _selected(filetype):
            continue
        console.print(f"{console.styled(str(filetype), fg='magenta')} ({len(files)})")
        if condensed:
            continue
        for file in files:
            console.print(_display_path(path, file))
        console.print()
