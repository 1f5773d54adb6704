# topmark:header:start
#
#   project      : FtDetect
#   file         : detect.py
#   file_relpath : src/ftdetect/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtDetect `detect` command.

Classifies each given path and prints its file type. With ``--explain`` the
stage and table key that decided are shown, along with any content-sniffing
rules that matched but declined on the way.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from ftdetect.cli.cmd_common import get_config, get_console, get_tables
from ftdetect.cli.errors import FtdetectFileNotFoundError
from ftdetect.cli.options import OutputFormat, output_format_option
from ftdetect.config.logging import get_logger
from ftdetect.filetypes.content import file_content
from ftdetect.filetypes.pipeline import explain

if TYPE_CHECKING:
    from collections.abc import Callable

    from ftdetect.cli.console import ClickConsole
    from ftdetect.config.logging import FtdetectLogger
    from ftdetect.config.model import Config
    from ftdetect.filetypes.kinds import FileType
    from ftdetect.filetypes.pipeline import Detection
    from ftdetect.filetypes.tables import DetectionTables

logger: FtdetectLogger = get_logger(__name__)


def _record(detection: Detection, filetype: FileType, *, explained: bool) -> dict[str, Any]:
    if not explained:
        return {"path": detection.path, "filetype": str(filetype)}
    record: dict[str, Any] = detection.to_dict()
    record["filetype"] = str(filetype)
    record["matched"] = detection.matched
    return record


def _render_text(
    console: ClickConsole, detection: Detection, filetype: FileType, *, explained: bool
) -> None:
    line: str = f"{detection.path}: {console.styled(str(filetype), fg='cyan', bold=True)}"
    if explained:
        if detection.stage is None or detection.resolver is None:
            line += console.styled("  (default: no rule matched)", dim=True)
        else:
            line += console.styled(
                f"  [{detection.stage.value} {detection.key!r} -> {detection.resolver.describe()}]",
                dim=True,
            )
    console.print(line)
    if explained:
        for declined in detection.declined:
            console.print(
                f"    declined: {declined.stage.value} {declined.key!r} "
                f"-> {declined.resolver.describe()}"
            )


@click.command(
    name="detect",
    help="Print the file type of each PATH.",
    epilog="""
Content is read lazily (at most max-content-bytes) and only when a matching
rule needs it. Use --no-content to classify path strings that need not exist.
""",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option("--explain", "explained", is_flag=True, help="Show the stage and key that decided.")
@click.option(
    "--no-content",
    "no_content",
    is_flag=True,
    help="Classify by path only; never open the files.",
)
@output_format_option
def detect_command(
    *,
    paths: tuple[str, ...],
    explained: bool = False,
    no_content: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Classify PATHS.

    Args:
        paths (tuple[str, ...]): Paths to classify.
        explained (bool): Whether to report provenance.
        no_content (bool): Whether to skip content sampling.
        output_format (OutputFormat | None): Output format.

    Raises:
        FtdetectFileNotFoundError: If a path does not exist while content
            sampling is enabled.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    config: Config = get_config(ctx)
    tables: DetectionTables = get_tables(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if not no_content:
        for path in paths:
            if not Path(path).exists():
                raise FtdetectFileNotFoundError(f"No such file or directory: {path}")

    records: list[dict[str, Any]] = []
    for path in paths:
        content: Callable[[], bytes] | None = (
            None if no_content else file_content(path, config.max_content_bytes)
        )
        detection: Detection = explain(
            path,
            content,
            tables=tables,
            max_bytes=config.max_content_bytes,
            shebang_fallback=config.shebang_fallback,
        )
        filetype: FileType = (
            detection.filetype if detection.filetype is not None else config.default
        )
        logger.debug("%s -> %s (stage=%s)", path, filetype, detection.stage)

        if fmt == OutputFormat.JSON:
            records.append(_record(detection, filetype, explained=explained))
        elif fmt == OutputFormat.NDJSON:
            console.print(json.dumps(_record(detection, filetype, explained=explained)))
        else:
            _render_text(console, detection, filetype, explained=explained)

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(records, indent=2))
