# topmark:header:start
#
#   project      : FtDetect
#   file         : data.py
#   file_relpath : src/ftdetect/filetypes/detectors/data.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamic detectors for data, configuration and schema formats."""

from __future__ import annotations

import re
from typing import Final

from ftdetect.filetypes.detectors import util
from ftdetect.filetypes.kinds import FileType

_RE_HAPROXY: Final[re.Pattern[str]] = re.compile(
    r"^\s*(global|defaults|frontend|backend|listen)\b", re.I | re.M
)
_RE_INI_SECTION: Final[re.Pattern[str]] = re.compile(r"^\s*\[[^\]]+\]\s*$", re.M)
_RE_INI_ASSIGN: Final[re.Pattern[str]] = re.compile(r"^\s*[A-Za-z0-9_.-]+\s*=", re.M)
_RE_RAPID_CFG: Final[re.Pattern[str]] = re.compile(r"(eio|mmc|moc|proc|sio|sys):cfg", re.I)


def cfg(path: str, content: str) -> FileType | None:
    """``*.cfg``: HAProxy, INI-style, RAPID configuration, or generic cfg."""
    if _RE_HAPROXY.search(util.get_lines(content, 50)):
        return FileType.HAPROXY
    head: str = util.get_lines(content, 120)
    if _RE_INI_SECTION.search(head) or _RE_INI_ASSIGN.search(head):
        return FileType.CONFINI
    if _RE_RAPID_CFG.search(util.first_line(content)):
        return FileType.RAPID
    return FileType.CFG


_RE_REGEDIT: Final[re.Pattern[str]] = re.compile(
    r"^regedit[0-9]*\s*$|^windows registry editor version \d*\.\d*\s*$", re.I
)


def reg(path: str, content: str) -> FileType | None:
    """``*.reg``: Windows registry exports; declines otherwise."""
    if _RE_REGEDIT.search(util.first_line(content)):
        return FileType.REGISTRY
    return None


_RE_TURTLE: Final[re.Pattern[str]] = re.compile(r"^@?(prefix|base)")


def ttl(path: str, content: str) -> FileType | None:
    """``*.ttl``: RDF Turtle or Tera Term macros."""
    if _RE_TURTLE.search(util.first_line(content)):
        return FileType.TURTLE
    return FileType.TERATERM


def xfree86(path: str, content: str) -> FileType | None:
    """``XF86Config``: version 3 files mention XConfigurator on the first line."""
    if re.search(r"\bXConfigurator\b", util.first_line(content)):
        return FileType.XF86CONF3
    return FileType.XF86CONF


def foam(path: str, content: str) -> FileType | None:
    """OpenFOAM dictionaries: a ``FoamFile`` header followed by ``object``."""
    foam_file = False
    for line in util.lines(content, 15):
        if "FoamFile" in line:
            foam_file = True
        elif foam_file and line.lstrip().startswith("object"):
            return FileType.FOAM
    return None


def inp(path: str, content: str) -> FileType | None:
    """``*.inp``: Abaqus or Trasys input decks; declines otherwise."""
    if content.startswith("*"):
        return FileType.ABAQUS
    for line in util.lines(content, 500):
        if util.starts_with_any(line, ("header surface data",), case_sensitive=False):
            return FileType.TRASYS
    return None


_PSF_KEYWORDS: Final[frozenset[str]] = frozenset(
    {"distribution", "installed_software", "root", "bundle", "product"}
)


def psf(path: str, content: str) -> FileType | None:
    """HP-UX product specification files; declines otherwise."""
    if util.first_line(content).strip().lower() in _PSF_KEYWORDS:
        return FileType.PSF
    return None


_RE_BINDZONE: Final[re.Pattern[str]] = re.compile(
    r"^; <<>> DiG [0-9.]+.* <<>>|\$ORIGIN|\$TTL|IN\s+SOA"
)


def bindzone(path: str, content: str, default: FileType | None = None) -> FileType | None:
    """BIND zone files; returns `default` when the first lines do not look like one."""
    if _RE_BINDZONE.search(util.get_lines(content, 4)):
        return FileType.BINDZONE
    return default


def redif(path: str, content: str) -> FileType | None:
    """ReDIF bibliographic templates; declines otherwise."""
    for line in util.lines(content, 5):
        if util.starts_with_any(line, ("template-type:",), case_sensitive=False):
            return FileType.REDIF
    return None


_RE_CL_START: Final[re.Pattern[str]] = re.compile(r"^\s*[#{]")


def ent(path: str, content: str) -> FileType | None:
    """``*.ent``: Cynlib CL sources or DTD entity files."""
    for line in util.lines(content, 5):
        if _RE_CL_START.search(line):
            return FileType.CL
        if line.strip():
            break
    return FileType.DTD


def dsl(path: str, content: str) -> FileType | None:
    """``*.dsl``: DSSSL style sheets or Structurizr workspaces."""
    if re.search(r"^\s*<!", util.first_line(content)):
        return FileType.DSL
    return FileType.STRUCTURIZR


def edn(path: str, content: str) -> FileType | None:
    """``*.edn``: EDIF netlists or Clojure EDN data."""
    if re.search(r"^\s*\(\s*edif\b", util.first_line(content), re.I):
        return FileType.EDIF
    return FileType.EDN


def tf(path: str, content: str) -> FileType | None:
    """``*.tf``: Terraform, or TinyFugue scripts made only of comments."""
    for line in content.splitlines():
        stripped: str = line.lstrip()
        if stripped and not stripped.startswith((";", "/")):
            return FileType.TERRAFORM
    return FileType.TF


def looks_like_jsonc(text: str) -> bool:
    r"""Whether a JSON-ish text contains ``//`` or ``/* */`` comments outside strings.

    A small state machine tracks double-quoted strings (with backslash
    escapes) so URLs inside string values are not mistaken for comments.
    """
    if "{" not in text and "[" not in text:
        return False
    in_string = False
    i: int = 0
    n: int = len(text)
    while i < n:
        ch: str = text[i]
        if in_string:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue
        if ch == '"':
            in_string = True
        elif ch == "/" and i + 1 < n and text[i + 1] in "/*":
            return True
        i += 1
    return False


def json(path: str, content: str) -> FileType | None:
    """``*.json``: JSON, or JSON with comments when comments are present."""
    return FileType.JSONC if looks_like_jsonc(content) else FileType.JSON
