# topmark:header:start
#
#   project      : FtDetect
#   file         : audit.py
#   file_relpath : src/ftdetect/filetypes/audit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data-defect audit for detection tables.

Table data is large and hand-maintained, so some defects are only visible
when looking at the built table set as a whole:

- path suffixes containing glob syntax (``*``, ``?``, ``{``, ``}``, ``[``,
  ``]``) can never match, because suffixes are compared literally;
- extension keys with a leading dot never match (keys are bare);
- filename keys containing a ``/`` never match (the filename table sees the
  final path component only);
- empty keys never match;
- the same pattern key (scope + regex) declared more than once: with
  different resolvers the first one in sorted order silently wins
  (conflicting), with equal resolvers the later entries are redundant.

The audit never changes lookup behavior; it only reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from ftdetect.config.logging import get_logger
from ftdetect.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from ftdetect.config.logging import FtdetectLogger
    from ftdetect.filetypes.base import Pattern
    from ftdetect.filetypes.tables import DetectionTables

logger: FtdetectLogger = get_logger(__name__)

GLOB_CHARS: Final[frozenset[str]] = frozenset("*?{}[]")


class FindingKind(KeyedStrEnum):
    """Kinds of table defects."""

    DEAD_SUFFIX = "dead-suffix"
    DOTTED_EXTENSION = "dotted-extension"
    FILENAME_WITH_SEPARATOR = "filename-with-separator"
    EMPTY_KEY = "empty-key"
    CONFLICTING_PATTERN = "conflicting-pattern"
    REDUNDANT_PATTERN = "redundant-pattern"


@dataclass(frozen=True)
class Finding:
    """A single table defect.

    Attributes:
        kind (FindingKind): Defect kind.
        table (str): Table name (``filenames``, ``extensions``, ``path_suffixes``, ``patterns``).
        key (str): Offending key (suffix string, extension, filename, or regex source).
        message (str): Human-readable explanation.
    """

    kind: FindingKind
    table: str
    key: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": str(self.kind),
            "table": self.table,
            "key": self.key,
            "message": self.message,
        }


@dataclass(frozen=True)
class AuditReport:
    """Result of [`audit_tables`][ftdetect.filetypes.audit.audit_tables]."""

    findings: tuple[Finding, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.findings

    def by_kind(self, kind: FindingKind) -> tuple[Finding, ...]:
        return tuple(f for f in self.findings if f.kind is kind)

    def counts(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for finding in self.findings:
            out[str(finding.kind)] = out.get(str(finding.kind), 0) + 1
        return out

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "counts": self.counts(),
            "findings": [f.to_dict() for f in self.findings],
        }


def is_dead_suffix(suffix: str) -> bool:
    """Whether a path suffix contains glob syntax (and therefore never matches)."""
    return any(ch in GLOB_CHARS for ch in suffix)


def _audit_exact(tables: DetectionTables) -> list[Finding]:
    findings: list[Finding] = []
    for key in tables.extensions:
        if not key:
            findings.append(Finding(FindingKind.EMPTY_KEY, "extensions", key, "Empty extension key"))
        elif key.startswith("."):
            findings.append(
                Finding(
                    FindingKind.DOTTED_EXTENSION,
                    "extensions",
                    key,
                    f"Extension keys are bare; {key!r} never matches (use {key.lstrip('.')!r})",
                )
            )
    for key in tables.filenames:
        if not key:
            findings.append(Finding(FindingKind.EMPTY_KEY, "filenames", key, "Empty filename key"))
        elif "/" in key:
            findings.append(
                Finding(
                    FindingKind.FILENAME_WITH_SEPARATOR,
                    "filenames",
                    key,
                    f"Filename keys match the final path component; {key!r} never matches",
                )
            )
    return findings


def _audit_suffixes(tables: DetectionTables) -> list[Finding]:
    findings: list[Finding] = []
    for suffix, _resolver in tables.path_suffixes.entries:
        if not suffix:
            findings.append(
                Finding(FindingKind.EMPTY_KEY, "path_suffixes", suffix, "Empty suffix matches every path")
            )
        elif is_dead_suffix(suffix):
            findings.append(
                Finding(
                    FindingKind.DEAD_SUFFIX,
                    "path_suffixes",
                    suffix,
                    f"Suffixes are compared literally; glob syntax in {suffix!r} never matches",
                )
            )
    return findings


def _audit_patterns(tables: DetectionTables) -> list[Finding]:
    findings: list[Finding] = []
    seen: dict[tuple[bool, str], Pattern] = {}
    for pattern in tables.patterns.patterns:
        first: Pattern | None = seen.get(pattern.key)
        if first is None:
            seen[pattern.key] = pattern
            continue
        if first.resolver != pattern.resolver:
            findings.append(
                Finding(
                    FindingKind.CONFLICTING_PATTERN,
                    "patterns",
                    pattern.source,
                    f"{pattern.describe()} -> {pattern.resolver.describe()} is shadowed by "
                    f"{first.describe()} -> {first.resolver.describe()}",
                )
            )
        else:
            findings.append(
                Finding(
                    FindingKind.REDUNDANT_PATTERN,
                    "patterns",
                    pattern.source,
                    f"{pattern.describe()} repeats an earlier entry",
                )
            )
    return findings


def audit_tables(tables: DetectionTables) -> AuditReport:
    """Report data defects in `tables`.

    Args:
        tables (DetectionTables): Table set to inspect.

    Returns:
        AuditReport: All findings, in table order.
    """
    findings: list[Finding] = [
        *_audit_exact(tables),
        *_audit_suffixes(tables),
        *_audit_patterns(tables),
    ]
    for finding in findings:
        logger.debug("audit: %s %s %r", finding.kind, finding.table, finding.key)
    logger.info("Table audit: %d finding(s)", len(findings))
    return AuditReport(findings=tuple(findings))
