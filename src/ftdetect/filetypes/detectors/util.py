# topmark:header:start
#
#   project      : FtDetect
#   file         : util.py
#   file_relpath : src/ftdetect/filetypes/detectors/util.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small text helpers shared by the dynamic detectors.

All helpers operate on the decoded content sample and never raise for
short or empty input.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def lines(content: str, limit: int | None = None) -> list[str]:
    """Return the first `limit` lines of `content` (all lines when None)."""
    all_lines: list[str] = content.splitlines()
    return all_lines if limit is None else all_lines[:limit]


def get_lines(content: str, n: int) -> str:
    """Return the first `n` lines of `content` as a single string.

    Line separators between the returned lines are kept; the separator after
    the last returned line is not.
    """
    if n <= 0:
        return ""
    return "\n".join(lines(content, n))


def first_line(content: str) -> str:
    return get_lines(content, 1)


def last_line(content: str) -> str:
    all_lines: list[str] = content.splitlines()
    return all_lines[-1] if all_lines else ""


def next_non_blank(content: str, start: int = 0) -> str | None:
    """Return the first non-blank line at or after line index `start`."""
    for line in content.splitlines()[start:]:
        if line.strip():
            return line
    return None


def find(content: str, nlines: int, needle: str, *, case_sensitive: bool = True) -> bool:
    """Whether `needle` occurs in the first `nlines` lines (0 means all of `content`)."""
    haystack: str = content if nlines <= 0 else get_lines(content, nlines)
    if not case_sensitive:
        return needle.lower() in haystack.lower()
    return needle in haystack


def findany(
    content: str,
    nlines: int,
    needles: Iterable[str],
    *,
    case_sensitive: bool = True,
) -> bool:
    """Whether any of `needles` occurs in the first `nlines` lines (0 means all)."""
    return any(find(content, nlines, n, case_sensitive=case_sensitive) for n in needles)


def starts_with_any(line: str, prefixes: Iterable[str], *, case_sensitive: bool = True) -> bool:
    """Whether `line` starts with any of `prefixes`."""
    if not case_sensitive:
        line = line.lower()
        return any(line.startswith(p.lower()) for p in prefixes)
    return any(line.startswith(p) for p in prefixes)


def search_lines(regex: re.Pattern[str], content: str, limit: int) -> bool:
    """Whether `regex` matches any of the first `limit` lines (searched per line)."""
    return any(regex.search(line) for line in lines(content, limit))


def basename(path: str) -> str:
    """Final component of a normalized (forward-slash) path."""
    return path.rstrip("/").rsplit("/", 1)[-1]


def dirname(path: str) -> str:
    """Parent of a normalized path ("" for a bare name)."""
    head, sep, _tail = path.rstrip("/").rpartition("/")
    return head if sep else ""


def suffix(path: str) -> str:
    """Simple extension of the final path component, without the dot ("" if none)."""
    name: str = basename(path)
    stem, dot, ext = name.rpartition(".")
    return ext if dot and stem else ""
