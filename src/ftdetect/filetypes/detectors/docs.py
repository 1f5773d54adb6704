# topmark:header:start
#
#   project      : FtDetect
#   file         : docs.py
#   file_relpath : src/ftdetect/filetypes/detectors/docs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamic detectors for documentation and typesetting formats."""

from __future__ import annotations

import re
from typing import Final

from ftdetect.filetypes.detectors import util
from ftdetect.filetypes.kinds import FileType

_RE_PLAINTEX: Final[re.Pattern[str]] = re.compile(r"^%&\s*plain(tex)?")
_RE_CONTEXT_FMT: Final[re.Pattern[str]] = re.compile(r"^%&\s*context")
_RE_CONTEXT_PATH: Final[re.Pattern[str]] = re.compile(r"tex/context/.*/.*\.tex", re.I)
_RE_LATEX: Final[re.Pattern[str]] = re.compile(
    r"^\s*\\(documentclass\b|usepackage\b|begin\{|newcommand\b|renewcommand\b)", re.I
)
_RE_CONTEXT: Final[re.Pattern[str]] = re.compile(
    r"^\s*\\(start[a-zA-Z]+|setup[a-zA-Z]+|usemodule|enablemode|enableregime|setvariables"
    r"|useencoding|usesymbols|stelle[a-zA-Z]+|verwende[a-zA-Z]+|stel[a-zA-Z]+|gebruik[a-zA-Z]+"
    r"|usa[a-zA-Z]+|imposta[a-zA-Z]+|regle[a-zA-Z]+|utilisemodule\b)",
    re.I,
)
_RE_TEX_COMMENT: Final[re.Pattern[str]] = re.compile(r"^\s*%\S")


def tex(path: str, content: str) -> FileType | None:
    """``*.tex``: plain TeX, ConTeXt, or LaTeX (``tex``)."""
    line: str = util.first_line(content)
    if _RE_PLAINTEX.search(line):
        return FileType.PLAINTEX
    if _RE_CONTEXT_FMT.search(line) or _RE_CONTEXT_PATH.search(path):
        return FileType.CONTEXT
    body: list[str] = util.lines(content)
    start = 0
    while start < len(body) and _RE_TEX_COMMENT.search(body[start]):
        start += 1
    for line in body[start : start + 1000]:
        if _RE_LATEX.search(line):
            return FileType.TEX
        if _RE_CONTEXT.search(line):
            return FileType.CONTEXT
    return FileType.TEX


_RE_VIM_HELP: Final[re.Pattern[str]] = re.compile(r"vim:.*ft=help")


def txt(path: str, content: str) -> FileType | None:
    """``*.txt``: Vim help files carry a ``ft=help`` modeline on their last line."""
    if _RE_VIM_HELP.search(util.last_line(content)):
        return FileType.HELP
    return FileType.TEXT


_RE_SQL_TYPE: Final[re.Pattern[str]] = re.compile(r"^(CASE\s*=\s*(SAME|LOWER|UPPER|OPPOSITE)$|TYPE\s)")


def typ(path: str, content: str) -> FileType | None:
    """``*.typ``: SQL type definitions or Typst documents."""
    if util.search_lines(_RE_SQL_TYPE, content, 200):
        return FileType.SQL
    return FileType.TYPST


def changelog(path: str, content: str) -> FileType | None:
    """``ChangeLog``/``changelog``: Debian changelogs or GNU-style change logs."""
    if util.find(content, 1, "; urgency=", case_sensitive=False):
        return FileType.DEBCHANGELOG
    return FileType.CHANGELOG


def news(path: str, content: str) -> FileType | None:
    """``NEWS``: Debian-style changelogs; declines otherwise."""
    if util.find(content, 1, "; urgency=", case_sensitive=False):
        return FileType.DEBCHANGELOG
    return None


def nroff(path: str, content: str) -> FileType | None:
    """Man page sources: a request line (leading ``.``) in the first five lines."""
    for line in util.lines(content, 5):
        if line.startswith("."):
            return FileType.NROFF
    return None


def me(path: str, content: str) -> FileType | None:
    """``*.me``: nroff ``me`` macros, except ``read.me`` and ``click.me``."""
    if util.basename(path).lower() in ("read.me", "click.me"):
        return None
    return FileType.NROFF


def sil(path: str, content: str) -> FileType | None:
    """``*.sil``: SILE documents or Swift Intermediate Language."""
    for line in util.lines(content, 100):
        stripped: str = line.lstrip()
        if stripped.startswith(("\\", "%")):
            return FileType.SILE
        if stripped:
            return FileType.SIL
    return FileType.SIL


def web(path: str, content: str) -> FileType | None:
    """``*.web``: Knuth WEB or WinBatch."""
    for line in util.lines(content, 5):
        if line.startswith("%"):
            return FileType.WEB
    return FileType.WINBATCH


_RE_NOTEBOOK: Final[re.Pattern[str]] = re.compile(r"^\s*Notebook\s*\[", re.M)


def nb(path: str, content: str) -> FileType | None:
    """``*.nb``: Wolfram notebooks when they look like one, plain text otherwise."""
    first: str = util.next_non_blank(content) or ""
    if first.lstrip().startswith("(*") or _RE_NOTEBOOK.search(util.get_lines(content, 40)):
        return FileType.MMA
    return FileType.TEXT
