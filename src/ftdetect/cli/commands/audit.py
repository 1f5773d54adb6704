# topmark:header:start
#
#   project      : FtDetect
#   file         : audit.py
#   file_relpath : src/ftdetect/cli/commands/audit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtDetect `audit` command.

Reports data defects in the effective detection tables (built-ins plus the
config override layer). Exits with ``ExitCode.FAILURE`` when anything is found,
so the command can gate CI.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from ftdetect.cli.cmd_common import get_console, get_tables, is_verbose
from ftdetect.cli.exit_codes import ExitCode
from ftdetect.cli.options import OutputFormat, output_format_option
from ftdetect.filetypes.audit import audit_tables

if TYPE_CHECKING:
    from ftdetect.cli.console import ClickConsole
    from ftdetect.filetypes.audit import AuditReport
    from ftdetect.filetypes.tables import DetectionTables


@click.command(
    name="audit",
    help="Check the detection tables for entries that can never match.",
)
@output_format_option
def audit_command(*, output_format: OutputFormat | None = None) -> None:
    """Audit the effective tables; exit 1 when defects are found."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    tables: DetectionTables = get_tables(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    report: AuditReport = audit_tables(tables)

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(report.to_dict(), indent=2))
    elif fmt == OutputFormat.NDJSON:
        for finding in report.findings:
            console.print(json.dumps(finding.to_dict()))
    else:
        if is_verbose(ctx):
            counts: str = ", ".join(f"{k}={v}" for k, v in tables.summary().items())
            console.print(console.styled(f"Tables: {counts}", dim=True))
        for finding in report.findings:
            console.print(
                f"{console.styled(str(finding.kind), fg='yellow')} "
                f"[{finding.table}] {finding.key!r}: {finding.message}"
            )
        if report.ok:
            console.print(console.styled("No defects found.", fg="green"))
        else:
            console.print(console.styled(f"{len(report.findings)} defect(s) found.", bold=True))

    if not report.ok:
        ctx.exit(ExitCode.FAILURE)
