# topmark:header:start
#
#   project      : FtDetect
#   file         : scripting.py
#   file_relpath : src/ftdetect/filetypes/detectors/scripting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamic detectors for shells and scripting languages."""

from __future__ import annotations

import re
from typing import Final

from ftdetect.filetypes.base import first_of
from ftdetect.filetypes.detectors import util
from ftdetect.filetypes.kinds import FileType

_RE_SHEBANG: Final[re.Pattern[str]] = re.compile(r"^\s*#!")
_RE_SCALA_EXEC: Final[re.Pattern[str]] = re.compile(r"^\s*exec\s+(?:\S*/)?scala\b", re.I | re.M)
_RE_TCL_EXEC: Final[re.Pattern[str]] = re.compile(r"\s*exec\s+(\S*/)?(tclsh|wish)", re.I)
_RE_CONTINUED_COMMENT: Final[re.Pattern[str]] = re.compile(r"^\s*#.*\\$")

# Shell dialects named on a `#!` line, most specific first.
_SHELL_DIALECTS: Final[tuple[tuple[re.Pattern[str], FileType], ...]] = (
    (re.compile(r"\bcsh\b", re.I), FileType.CSH),
    (re.compile(r"\btcsh\b", re.I), FileType.TCSH),
    (re.compile(r"\bzsh\b", re.I), FileType.ZSH),
    (re.compile(r"\bksh\b", re.I), FileType.KSH),
    (re.compile(r"\b(bash|bash2)\b", re.I), FileType.BASH),
)


def shell_dialect(content: str) -> FileType:
    """Return the shell dialect named on the ``#!`` line (plain ``sh`` otherwise)."""
    line: str = util.first_line(content)
    if not _RE_SHEBANG.search(line):
        return FileType.SH
    for regex, dialect in _SHELL_DIALECTS:
        if regex.search(line):
            return dialect
    return FileType.SH


def shell(content: str, dialect: FileType) -> FileType:
    """Refine a shell script: Scala and Tcl launcher scripts, else `dialect`."""
    if _RE_SCALA_EXEC.search(util.get_lines(content, 10)):
        return FileType.SCALA
    script_lines: list[str] = util.lines(content, 1000)
    for prev, line in zip(script_lines, script_lines[1:]):
        # `exec tclsh` after a comment ending in a backslash is the classic Tcl trampoline.
        if _RE_TCL_EXEC.search(line) and not _RE_CONTINUED_COMMENT.search(prev):
            return FileType.TCL
    return dialect


def sh(path: str, content: str, dialect: FileType | None = None) -> FileType | None:
    """Shell scripts (``*.sh``, ``.profile``...); the dialect comes from the ``#!`` line."""
    return shell(content, dialect if dialect is not None else shell_dialect(content))


def csh(path: str, content: str) -> FileType | None:
    return shell(content, FileType.CSH)


def install(path: str, content: str) -> FileType | None:
    """``*.install``: PHP installer hooks or bash scripts (Arch packages)."""
    if util.find(content, 1, "<?php", case_sensitive=False):
        return FileType.PHP
    return sh(path, content, FileType.BASH)


def perl(path: str, content: str) -> FileType | None:
    """Perl, recognized by a ``t/`` test location, a perl ``#!`` line, or ``use`` lines."""
    in_test_dir: bool = util.suffix(path) == "t" and util.basename(util.dirname(path)) in ("t", "xt")
    if in_test_dir:
        return FileType.PERL
    if content.startswith("#") and util.find(content, 1, "perl", case_sensitive=False):
        return FileType.PERL
    for line in util.lines(content, 30):
        if util.starts_with_any(line.lstrip(), ("use",), case_sensitive=False):
            return FileType.PERL
    return None


_RE_PROLOG: Final[re.Pattern[str]] = re.compile(r":-|\bprolog\b|^\s*(%+(\s|$)|/\*)", re.I)


def is_prolog(content: str) -> bool:
    """Whether the first non-blank line looks like Prolog.

    A blank is required after ``%`` since Perl uses ``%list`` and ``%translate``.
    """
    line: str | None = util.next_non_blank(content)
    return line is not None and _RE_PROLOG.search(line) is not None


def pl(path: str, content: str) -> FileType | None:
    return FileType.PROLOG if is_prolog(content) else FileType.PERL


def pm(path: str, content: str) -> FileType | None:
    """``*.pm``: X pixmaps or Perl modules."""
    line: str = util.first_line(content)
    if "XPM2" in line:
        return FileType.XPM2
    if "XPM" in line:
        return FileType.XPM
    return FileType.PERL


_RE_REBOL: Final[re.Pattern[str]] = re.compile(r"\brebol\b", re.I)


def r(path: str, content: str) -> FileType | None:
    """``*.r``: Rebol, R or Rexx."""
    if _RE_REBOL.search(util.get_lines(content, 50)):
        return FileType.REBOL
    for line in util.lines(content, 50):
        stripped: str = line.lstrip()
        if stripped.startswith("#"):
            return FileType.R
        if stripped.startswith("/*"):
            return FileType.REXX
    return FileType.R


_RE_TERRA: Final[re.Pattern[str]] = re.compile(r"^\s*terra\b|\bterralib\b", re.I | re.M)
_RE_RAKU: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"^\s*use\s+v6\s*;", re.I | re.M),
    re.compile(r"\bis\s+copy\b", re.I),
    re.compile(r"->\s*\$\w+", re.M),
    re.compile(r"^\s*#\s*vim:\s*ft=perl6\b", re.M),
)


def terra(path: str, content: str) -> FileType | None:
    if _RE_TERRA.search(util.get_lines(content, 200)):
        return FileType.TERRA
    return None


def raku(path: str, content: str) -> FileType | None:
    head: str = util.get_lines(content, 200)
    if any(regex.search(head) for regex in _RE_RAKU):
        return FileType.RAKU
    return None


# `*.t` is shared by Terra, Raku tests and Perl tests; Perl is the fallback.
t = first_of(terra, raku, perl, default=FileType.PERL)


_RE_EUPHORIA: Final[re.Pattern[str]] = re.compile(r"^(--|ifdef\b|include\b)")


def ex(path: str, content: str) -> FileType | None:
    """``*.ex``: Euphoria or Elixir."""
    if util.search_lines(_RE_EUPHORIA, content, 100):
        return FileType.EUPHORIA3
    return FileType.ELIXIR


def cpy(path: str, content: str) -> FileType | None:
    """``*.cpy``: Python (``##`` header comment) or COBOL copybooks."""
    return FileType.PYTHON if content.startswith("##") else FileType.COBOL


def cmd(path: str, content: str) -> FileType | None:
    """``*.cmd``: Rexx (leading ``/*``) or DOS batch."""
    return FileType.REXX if content.startswith("/*") else FileType.BAT


_RE_SUPERCOLLIDER: Final[re.Pattern[str]] = re.compile(
    r"(class)?var\s<|\^this.*|\|\w+\||\+\s\w*\s\{|\*ar\s"
)
_RE_SCDOC: Final[re.Pattern[str]] = re.compile(r'^\S+\(\d[0-9A-Za-z]*\)(\s+"[^"]*"]){0,2}')


def sc(path: str, content: str) -> FileType | None:
    """``*.sc``: SuperCollider or Scala."""
    if util.search_lines(_RE_SUPERCOLLIDER, content, 25):
        return FileType.SUPERCOLLIDER
    return FileType.SCALA


def scd(path: str, content: str) -> FileType | None:
    """``*.scd``: scdoc man pages or SuperCollider documents."""
    if _RE_SCDOC.search(util.first_line(content)):
        return FileType.SCDOC
    return FileType.SUPERCOLLIDER


_RE_SPEC_PYTHON: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"^\s*\w+\s*=\s*Analysis\s*\(", re.M),
    re.compile(r"^\s*from\s+\w+\s+import\s+\w+", re.M),
    re.compile(r"^\s*import\s+\w+", re.M),
)
_RE_SPEC_RUBY: Final[re.Pattern[str]] = re.compile(r"^\s*describe\b", re.M)


def spec(path: str, content: str) -> FileType | None:
    """``*.spec``: PyInstaller specs, RSpec files, or RPM spec files."""
    head: str = util.get_lines(content, 120)
    if any(regex.search(head) for regex in _RE_SPEC_PYTHON):
        return FileType.PYTHON
    if _RE_SPEC_RUBY.search(head) and "require" in head:
        return FileType.RUBY
    return FileType.SPEC
