# topmark:header:start
#
#   project      : FtDetect
#   file         : web.py
#   file_relpath : src/ftdetect/filetypes/detectors/web.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamic detectors for markup and web templating formats."""

from __future__ import annotations

import re
from typing import Final

from ftdetect.filetypes.detectors import util
from ftdetect.filetypes.detectors.shebang import from_shebang
from ftdetect.filetypes.kinds import FileType

_RE_XHTML_DTD: Final[re.Pattern[str]] = re.compile(r"\bDTD\s+XHTML\s")
_RE_DJANGO_TAG: Final[re.Pattern[str]] = re.compile(r"\{%\s*(extends|block|load)\b|\{#\s+", re.I)


def html(path: str, content: str) -> FileType | None:
    """``*.html``: XHTML, Django/Jinja templates, or HTML."""
    for line in util.lines(content, 10):
        if _RE_XHTML_DTD.search(line):
            return FileType.XHTML
        if _RE_DJANGO_TAG.search(line):
            return FileType.HTMLDJANGO
    return FileType.HTML


_RE_DOCBOOK_DOCTYPE: Final[re.Pattern[str]] = re.compile(r"<!DOCTYPE.*DocBook")
_DOCBOOK5_NS: Final[str] = ' xmlns="http://docbook.org/ns/docbook"'
_XBL_NS: Final[str] = 'xmlns:xbl="http://www.mozilla.org/xbl"'


def xml(path: str, content: str) -> FileType | None:
    """``*.xml``: DocBook (4 or 5), Mozilla XBL, or generic XML."""
    for line in util.lines(content, 100):
        if _RE_DOCBOOK_DOCTYPE.search(line):
            return FileType.DOCBKXML
        lowered: str = line.lower()
        if _DOCBOOK5_NS in lowered:
            return FileType.DOCBKXML
        if _XBL_NS in lowered:
            return FileType.XBL
    return FileType.XML


def sgml(path: str, content: str) -> FileType | None:
    """``*.sgml``: LinuxDoc, DocBook SGML, or generic SGML."""
    head: str = util.get_lines(content, 5)
    if "linuxdoc" in head:
        return FileType.SGMLLNX
    if _RE_DOCBOOK_DOCTYPE.search(head):
        return FileType.DOCBKSGML
    return FileType.SGML


_RE_SGML_DECL: Final[re.Pattern[str]] = re.compile(r"^<!sgml", re.I)


def decl(path: str, content: str) -> FileType | None:
    """``*.decl``/``*.dec``: SGML declarations; declines otherwise."""
    if util.search_lines(_RE_SGML_DECL, content, 3):
        return FileType.SGMLDECL
    return None


_RE_XML_DECL: Final[re.Pattern[str]] = re.compile(r"<\?\s*xml.*\?>")


def smil(path: str, content: str) -> FileType | None:
    """``*.smil``: XML-declared documents are XML, the rest SMIL."""
    if _RE_XML_DECL.search(util.first_line(content)):
        return FileType.XML
    return FileType.SMIL


def smi(path: str, content: str) -> FileType | None:
    """``*.smi``: SMIL or SNMP MIB modules."""
    if re.search(r"\bsmil\b", util.first_line(content), re.I):
        return FileType.SMIL
    return FileType.MIB


_RE_MM_XML: Final[re.Pattern[str]] = re.compile(r"^\s*<\?xml\b|^\s*<\s*map\b", re.M)
_RE_MM_OBJCPP: Final[re.Pattern[str]] = re.compile(r"^\s*(#\s*(include|import)\b|@import\b|/\*)", re.I)


def mm(path: str, content: str) -> FileType | None:
    """``*.mm``: FreeMind maps (XML), Objective-C++, or nroff ``mm`` macros."""
    if _RE_MM_XML.search(util.get_lines(content, 3)):
        return FileType.XML
    if util.search_lines(_RE_MM_OBJCPP, content, 20):
        return FileType.OBJCPP
    return FileType.NROFF


def asp(path: str, content: str) -> FileType | None:
    """``*.asp``: PerlScript or VBScript ASP pages."""
    if util.find(content, 3, "perlscript", case_sensitive=False):
        return FileType.ASPPERL
    return FileType.ASPVBS


def hw(path: str, content: str) -> FileType | None:
    """``*.hw``: PHP or Virata configuration."""
    if util.find(content, 1, "<?php", case_sensitive=False):
        return FileType.PHP
    return FileType.VIRATA


def xpm(path: str, content: str) -> FileType | None:
    """``*.xpm``: XPM2 or XPM pixmaps."""
    if util.find(content, 1, "XPM2"):
        return FileType.XPM2
    return FileType.XPM


def fcgi(path: str, content: str) -> FileType | None:
    """``*.fcgi``: PHP FastCGI wrappers, else the ``#!`` interpreter; declines otherwise."""
    if util.find(content, 10, "<?php", case_sensitive=False):
        return FileType.PHP
    return from_shebang(content)


_RE_NGINX_SERVER: Final[re.Pattern[str]] = re.compile(r"^\s*server\s*\{", re.M)


def vhost(path: str, content: str) -> FileType | None:
    """``*.vhost``: nginx server blocks, else Apache virtual hosts."""
    if _RE_NGINX_SERVER.search(util.get_lines(content, 20)):
        return FileType.NGINX
    return FileType.APACHE


_RE_XML_START: Final[re.Pattern[str]] = re.compile(r"^\s*<\?xml\b|^\s*<", re.M)


def xml_bucket(path: str, content: str) -> FileType | None:
    """Extensions that are XML when the sample starts with markup; declines otherwise."""
    if _RE_XML_START.search(util.get_lines(content, 5)):
        return FileType.XML
    return None
