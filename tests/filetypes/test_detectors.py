# topmark:header:start
#
#   project      : FtDetect
#   file         : test_detectors.py
#   file_relpath : tests/filetypes/test_detectors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for individual dynamic detectors.

Detectors are plain two-argument functions, so most of these tests call them
directly with a normalized path and a decoded content sample, without going
through the pipeline.
"""

from __future__ import annotations

from functools import partial

import pytest

from ftdetect.filetypes.base import Dynamic, detector_name, first_of
from ftdetect.filetypes.detectors import core_langs, data, docs, ops, web
from ftdetect.filetypes.detectors.shebang import from_shebang, interpreter_of
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.pipeline import explain, try_detect

# --- shebang ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("#!/bin/bash\necho hi\n", "bash"),
        ("#! /bin/sh\n", "sh"),
        ("#!/usr/bin/env python3\n", "python"),
        ("#!/usr/bin/env python3.11 -u\n", "python"),
        ("#!/usr/bin/env -S node --experimental-modules\n", "node"),
        ("#!/usr/bin/env LANG=C perl -w\n", "perl"),
        ("#!/usr/local/bin/lua5.4\n", "lua"),
        ("#!/usr/bin/env\n", None),
        ("#!\n", None),
        ("echo no shebang\n", None),
        ("", None),
    ],
)
def test_interpreter_of(content: str, expected: str | None) -> None:
    """The interpreter name drops its directory, env options and version digits."""
    assert interpreter_of(content) == expected


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("#!/bin/bash\n", FileType.BASH),
        ("#!/bin/dash\n", FileType.SH),
        ("#!/usr/bin/env ruby\n", FileType.RUBY),
        ("#!/usr/bin/env -S deno run\n", FileType.TYPESCRIPT),
        ("#!/usr/bin/unknown-interp\n", None),
        ("print('no shebang')\n", None),
    ],
)
def test_from_shebang(content: str, expected: FileType | None) -> None:
    assert from_shebang(content) == expected


# --- C family ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ('#import <Foundation/Foundation.h>\n', FileType.OBJC),
        ("@interface Foo : NSObject\n@end\n", FileType.OBJC),
        ("namespace app {\n}\n", FileType.CPP),
        ("template <typename T> struct Box;\n", FileType.CPP),
        ("static constexpr int N = 3;\n", FileType.CPP),
        ("void f(std::string s);\n", FileType.CPP),
        ("#include <stdio.h>\nint main(void);\n", FileType.C),
        ("", FileType.C),
    ],
)
def test_header(content: str, expected: FileType) -> None:
    """``.h`` files are C unless an Objective-C or C++ marker is seen."""
    assert core_langs.header("include/app.h", content) == expected


# --- documents -----------------------------------------------------------------


def test_txt_help_modeline_on_last_line() -> None:
    content = "*intro.txt*  Introduction\n\nText.\n vim:tw=78:ts=8:ft=help:norl:\n"
    assert docs.txt("doc/intro.txt", content) == FileType.HELP


def test_txt_modeline_elsewhere_is_plain_text() -> None:
    content = "vim:ft=help\nthe modeline must be last\n"
    assert docs.txt("notes.txt", content) == FileType.TEXT


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("pkg (1.0-1) unstable; urgency=medium\n\n  * Initial.\n", FileType.DEBCHANGELOG),
        ("2025-01-01  Jane Doe  <jane@example.org>\n\n\t* main.c: Fix.\n", FileType.CHANGELOG),
    ],
)
def test_changelog(content: str, expected: FileType) -> None:
    assert docs.changelog("ChangeLog", content) == expected


def test_news_declines_without_debian_header() -> None:
    assert docs.news("NEWS", "Version 2.0\n") is None
    assert docs.news("NEWS", "pkg (2.0) unstable; urgency=low\n") == FileType.DEBCHANGELOG


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("read.me", None),
        ("docs/Click.me", None),
        ("macros/paper.me", FileType.NROFF),
    ],
)
def test_me(path: str, expected: FileType | None) -> None:
    assert docs.me(path, "") == expected


def test_typ_prefers_sql_type_definitions() -> None:
    assert docs.typ("t.typ", "CASE = LOWER\nTYPE x\n") == FileType.SQL
    assert docs.typ("paper.typ", "= Title\n#lorem(20)\n") == FileType.TYPST


# --- data formats ------------------------------------------------------------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('{"a": 1}', False),
        ('{"url": "https://example.org/x"}', False),
        ('{"s": "escaped \\" // still a string"}', False),
        ('{\n  // comment\n  "a": 1\n}', True),
        ('[1, /* two */ 2]', True),
        ("// a comment but no object", False),
    ],
)
def test_looks_like_jsonc(text: str, expected: bool) -> None:
    """Comment markers only count outside double-quoted strings."""
    assert data.looks_like_jsonc(text) is expected


def test_json_detector() -> None:
    assert data.json("a.json", '{"a": 1}\n') == FileType.JSON
    assert data.json("a.json", '{\n  // c\n}\n') == FileType.JSONC


def test_reg_declines_on_unknown_first_line() -> None:
    assert data.reg("x.reg", "Windows Registry Editor Version 5.00\n") == FileType.REGISTRY
    assert data.reg("x.reg", "something else\n") is None


def test_ttl() -> None:
    assert data.ttl("a.ttl", "@prefix ex: <http://example.org/> .\n") == FileType.TURTLE
    assert data.ttl("a.ttl", "connect 'host'\n") == FileType.TERATERM


# --- markup ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        (
            '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN">\n<html>\n',
            FileType.XHTML,
        ),
        ("{% extends 'base.html' %}\n", FileType.HTMLDJANGO),
        ("<!doctype html>\n<p>hi</p>\n", FileType.HTML),
    ],
)
def test_html(content: str, expected: FileType) -> None:
    assert web.html("index.html", content) == expected


def test_xml_docbook_and_generic() -> None:
    docbook = '<article xmlns="http://docbook.org/ns/docbook" version="5.0">\n'
    assert web.xml("book.xml", docbook) == FileType.DOCBKXML
    assert web.xml("pom.xml", "<project/>\n") == FileType.XML


# --- version control and system files -----------------------------------------


@pytest.mark.parametrize(
    ("path", "content", "expected"),
    [
        ("/repo/.git/COMMIT_EDITMSG", "", FileType.GITCOMMIT),
        ("/repo/.git/MERGE_MSG", "", FileType.GITCOMMIT),
        ("/repo/.git/rebase-merge/git-rebase-todo", "", FileType.GITREBASE),
        ("/repo/.git/config", "", FileType.GITCONFIG),
        ("/repo/.git/HEAD", "ref: refs/heads/main\n", FileType.GIT),
        ("/repo/.git/ORIG_HEAD", "0123456789abcdef0123456789abcdef01234567\n", FileType.GIT),
        ("/repo/.git/description", "Unnamed repository\n", None),
    ],
)
def test_git(path: str, content: str, expected: FileType | None) -> None:
    assert ops.git(path, content) == expected


def test_rules_by_location() -> None:
    assert ops.rules("/etc/udev/rules.d/99-usb.rules", "") == FileType.UDEVRULES
    assert ops.rules("/etc/ufw/before.rules", "") == FileType.CONF
    assert ops.rules("/usr/share/polkit-1/rules.d/10-x.rules", "") == FileType.JAVASCRIPT
    assert ops.rules("snort/local.rules", "") == FileType.HOG


def test_rc_under_muttrc_d() -> None:
    assert ops.rc("/etc/Muttrc.d/colors.rc", "") == FileType.MUTTRC
    assert ops.rc("app/resource.rc", "") == FileType.RC


def test_m4_ext() -> None:
    assert ops.m4_ext("home/.fvwm/fvwm2rc.m4", "") == FileType.FVWM2M4
    assert ops.m4_ext("aclocal/ax_check.m4", "") == FileType.M4


def test_patch() -> None:
    mail = "From 0123456789abcdef0123456789abcdef01234567 Mon Sep 17 00:00:00 2001\n"
    assert ops.patch("0001-fix.patch", mail) == FileType.GITSENDEMAIL
    assert ops.patch("fix.patch", "--- a/x\n+++ b/x\n") == FileType.DIFF


def test_control_and_hook_decline_on_other_content() -> None:
    assert ops.control("debian/control", "Source: pkg\n") == FileType.DEBCONTROL
    assert ops.control("debian/control", "random\n") is None
    assert ops.hook("hooks/x.hook", "[Trigger]\nType = Package\n") == FileType.CONFINI
    assert ops.hook("hooks/x.hook", "#!/bin/sh\n") is None


def test_dep3patch_stops_at_diff_start() -> None:
    assert ops.dep3patch("debian/patches/fix", "Description: fix\n---\n") == FileType.DEP3PATCH
    assert ops.dep3patch("debian/patches/fix", "---\nDescription: too late\n") is None
    assert ops.dep3patch("debian/patches/series", "Description: x\n") is None


# --- retry detectors -----------------------------------------------------------


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("src/main.c.bak", FileType.C),
        ("src/script.py.orig", FileType.PYTHON),
        ("noextension", None),
        ("dir.d/file", None),
        (".bak", None),
    ],
)
def test_bak_retries_without_last_extension(path: str, expected: FileType | None) -> None:
    assert ops.bak(path, "") == expected


def test_retry_inherits_outer_lookup_options() -> None:
    """A retried lookup keeps the caller's shebang setting."""
    script = "#!/bin/bash\necho hi\n"

    assert try_detect("/x/runme", script, shebang_fallback=False) is None
    assert try_detect("/x/runme.bak", script, shebang_fallback=False) is None
    assert try_detect("/x/runme.bak", script) == FileType.BASH
    assert explain("/x/runme.bak", script).key == "bak"


def test_tmp_strips_trailing_tildes() -> None:
    assert ops.tmp("src/main.c~~", "") == FileType.C
    assert ops.tmp("~", "") is None


def test_in_template() -> None:
    assert ops.in_("project/configure.in", "") == FileType.CONFIG
    assert ops.in_("project/setup.py.in", "") == FileType.PYTHON


# --- composition ------------------------------------------------------------------


def _never(path: str, content: str) -> FileType | None:
    return None


def _always_lua(path: str, content: str) -> FileType | None:
    return FileType.LUA


def test_first_of_returns_first_verdict_or_default() -> None:
    assert first_of(_never, _always_lua)("x", "") == FileType.LUA
    assert first_of(_never, default=FileType.TEXT)("x", "") == FileType.TEXT
    assert first_of(_never)("x", "") is None


def test_detector_names() -> None:
    """Display names unwrap `functools.partial` and describe compositions."""
    assert detector_name(_never) == "_never"
    assert detector_name(partial(partial(_always_lua))) == "_always_lua"
    assert detector_name(first_of(_never, _always_lua)) == "first_of(_never, _always_lua)"
    assert Dynamic(ops.git).describe() == "Dynamic(git)"
