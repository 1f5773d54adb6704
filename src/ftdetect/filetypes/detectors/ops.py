# topmark:header:start
#
#   project      : FtDetect
#   file         : ops.py
#   file_relpath : src/ftdetect/filetypes/detectors/ops.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamic detectors for system administration, VCS and build files.

This module also hosts the *retry* detectors (`bak`, `tmp`, `in_`): they
strip a wrapper suffix such as ``.bak`` or ``~`` and run detection again on
the derived name, with the tables of the lookup in progress.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from ftdetect.config.logging import get_logger
from ftdetect.filetypes.detectors import util
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.pipeline import redetect

if TYPE_CHECKING:
    from ftdetect.config.logging import FtdetectLogger

logger: FtdetectLogger = get_logger(__name__)


_RE_UDEV_PATH: Final[re.Pattern[str]] = re.compile(r"/(etc|lib|usr/lib)/udev/(rules\.d/)?[^/]*\.rules$")
_RE_UFW_PATH: Final[re.Pattern[str]] = re.compile(r"/etc/ufw/")
_RE_POLKIT_PATH: Final[re.Pattern[str]] = re.compile(r"/(etc|usr/share)/polkit(-1)?/rules\.d/")


def rules(path: str, content: str) -> FileType | None:
    """``*.rules``: udev, ufw, polkit (JavaScript) or hog rules, by location."""
    if _RE_UDEV_PATH.search(path):
        return FileType.UDEVRULES
    if _RE_UFW_PATH.search(path):
        return FileType.CONF
    if _RE_POLKIT_PATH.search(path):
        return FileType.JAVASCRIPT
    return FileType.HOG


_GIT_COMMIT_FILES: Final[frozenset[str]] = frozenset(
    {"COMMIT_EDITMSG", "MERGE_MSG", "TAG_EDITMSG", "NOTES_EDITMSG", "EDIT_DESCRIPTION"}
)
_RE_GIT_REF: Final[re.Pattern[str]] = re.compile(r"^([0-9a-fA-F]{40,}\b|ref: )")


def git(path: str, content: str) -> FileType | None:
    """Files below a ``.git`` directory; declines on anything unrecognized."""
    name: str = util.basename(path)
    if name in _GIT_COMMIT_FILES:
        return FileType.GITCOMMIT
    if name == "git-rebase-todo":
        return FileType.GITREBASE
    if name == "config":
        return FileType.GITCONFIG
    if _RE_GIT_REF.search(util.first_line(content)):
        return FileType.GIT
    return None


_UPSTREAM_LOGS: Final[tuple[tuple[re.Pattern[str], FileType], ...]] = (
    (re.compile(r"upstream([.-][^/]*)?\.log$|upstream\.log\.[^/]*$", re.I), FileType.UPSTREAMLOG),
    (re.compile(r"upstreaminstall([.-][^/]*)?\.log$", re.I), FileType.UPSTREAMINSTALLLOG),
    (re.compile(r"usserver([.-][^/]*)?\.log$", re.I), FileType.USSERVERLOG),
    (re.compile(r"usw2kagt([.-][^/]*)?\.log$", re.I), FileType.USW2KAGTLOG),
)


def log(path: str, content: str) -> FileType | None:
    """``*.log``: Universe upstream logs by name; declines on other logs."""
    name: str = util.basename(path)
    for regex, filetype in _UPSTREAM_LOGS:
        if regex.search(name):
            return filetype
    return None


def hook(path: str, content: str) -> FileType | None:
    """``*.hook``: pacman hooks start with a ``[Trigger]`` section."""
    if util.first_line(content).strip() == "[Trigger]":
        return FileType.CONFINI
    return None


def control(path: str, content: str) -> FileType | None:
    """``debian/control``: starts with a ``Source:`` or ``Package:`` stanza."""
    if util.starts_with_any(util.first_line(content), ("Source:", "Package:")):
        return FileType.DEBCONTROL
    return None


def debcopyright(path: str, content: str) -> FileType | None:
    """``debian/copyright``: machine-readable copyright files open with ``Format:``."""
    if util.first_line(content).startswith("Format:"):
        return FileType.DEBCOPYRIGHT
    return None


_RE_DEP3_FIELD: Final[re.Pattern[str]] = re.compile(
    r"^(Description|Subject|Origin|Bug(-\w+)?|Forwarded|Author|From|Reviewed-by|Acked-by"
    r"|Last-Update|Applied-Upstream):",
    re.I,
)


def dep3patch(path: str, content: str) -> FileType | None:
    """``debian/patches/*``: DEP-3 headers above the first ``---`` line."""
    if util.basename(path) == "series":
        return None
    for line in util.lines(content, 100):
        if line.startswith("---"):
            return None
        if _RE_DEP3_FIELD.search(line):
            return FileType.DEP3PATCH
    return None


_RE_GIT_FORMAT_PATCH: Final[re.Pattern[str]] = re.compile(
    r"^From [0-9a-f]{40,} Mon Sep 17 00:00:00 2001$"
)


def patch(path: str, content: str) -> FileType | None:
    """``*.patch``: ``git format-patch`` mails or plain diffs."""
    if _RE_GIT_FORMAT_PATCH.search(util.first_line(content)):
        return FileType.GITSENDEMAIL
    return FileType.DIFF


def m4_ext(path: str, content: str) -> FileType | None:
    """``*.m4``: m4 macros, except ``fvwm2rc`` m4 configurations."""
    if "fvwm2rc" in util.basename(path).lower():
        return FileType.FVWM2M4
    return FileType.M4


_RE_M4_MC: Final[re.Pattern[str]] = re.compile(r"^\s*(#|dnl\b)")
_RE_MSMESSAGES: Final[re.Pattern[str]] = re.compile(
    r"^\s*(MessageId|SeverityNames|FacilityNames|LanguageNames)\s*=", re.I
)


def mc(path: str, content: str) -> FileType | None:
    """``*.mc``: sendmail m4 sources or Windows message compiler files."""
    for line in util.lines(content, 20):
        if _RE_M4_MC.search(line):
            return FileType.M4
        if _RE_MSMESSAGES.search(line):
            return FileType.MSMESSAGES
    return FileType.M4


def rc(path: str, content: str) -> FileType | None:
    """``*.rc``: Mutt configuration snippets under ``Muttrc.d``, else resource scripts."""
    if "/etc/Muttrc.d/" in path:
        return FileType.MUTTRC
    return FileType.RC


def bak(path: str, content: str) -> FileType | None:
    """``*.bak``, ``*.orig`` and friends: classify the name without its last extension."""
    stem, dot, ext = path.rpartition(".")
    if not dot or "/" in ext or not util.basename(stem):
        return None
    logger.debug("Retrying %s as %s", path, stem)
    return redetect(stem, content)


def tmp(path: str, content: str) -> FileType | None:
    """Editor backups (``name~``): classify the name without the trailing tildes."""
    stem: str = path.rstrip("~")
    if not util.basename(stem):
        return None
    logger.debug("Retrying %s as %s", path, stem)
    return redetect(stem, content)


def in_(path: str, content: str) -> FileType | None:
    """``*.in`` templates: ``configure.in`` is autoconf, the rest use the inner name."""
    if util.basename(path) == "configure.in":
        return FileType.CONFIG
    return bak(path, content)
