# topmark:header:start
#
#   project      : FtDetect
#   file         : shebang.py
#   file_relpath : src/ftdetect/filetypes/detectors/shebang.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interpreter detection from ``#!`` lines.

Used as the last pipeline stage and by a few dynamic detectors. Handles the
plain form (``#!/bin/bash``), the ``env`` form (``#!/usr/bin/env python3``,
including ``env -S``) and trims trailing version numbers (``python3.11`` is
``python``).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from ftdetect.filetypes.kinds import FileType

if TYPE_CHECKING:
    from collections.abc import Mapping

INTERPRETERS: Final[Mapping[str, FileType]] = MappingProxyType(
    {
        "bash": FileType.BASH,
        "sh": FileType.SH,
        "dash": FileType.SH,
        "ash": FileType.SH,
        "zsh": FileType.ZSH,
        "ksh": FileType.KSH,
        "mksh": FileType.KSH,
        "pdksh": FileType.KSH,
        "csh": FileType.CSH,
        "tcsh": FileType.TCSH,
        "fish": FileType.FISH,
        "elvish": FileType.ELVISH,
        "pwsh": FileType.POWERSHELL,
        "perl": FileType.PERL,
        "raku": FileType.RAKU,
        "python": FileType.PYTHON,
        "pypy": FileType.PYTHON,
        "ruby": FileType.RUBY,
        "jruby": FileType.RUBY,
        "php": FileType.PHP,
        "node": FileType.JAVASCRIPT,
        "nodejs": FileType.JAVASCRIPT,
        "ts-node": FileType.TYPESCRIPT,
        "deno": FileType.TYPESCRIPT,
        "bun": FileType.TYPESCRIPT,
        "tclsh": FileType.TCL,
        "wish": FileType.TCL,
        "expect": FileType.TCL,
        "lua": FileType.LUA,
        "luajit": FileType.LUA,
        "guile": FileType.SCHEME,
        "racket": FileType.RACKET,
        "scheme": FileType.SCHEME,
        "sbcl": FileType.LISP,
        "clisp": FileType.LISP,
        "elixir": FileType.ELIXIR,
        "erlang": FileType.ERLANG,
        "escript": FileType.ERLANG,
        "groovy": FileType.GROOVY,
        "java": FileType.JAVA,
        "kotlin": FileType.KOTLIN,
        "scala": FileType.SCALA,
        "clojure": FileType.CLOJURE,
        "bb": FileType.CLOJURE,
        "ocaml": FileType.OCAML,
        "ocamlrun": FileType.OCAML,
        "swift": FileType.SWIFT,
        "julia": FileType.JULIA,
        "R": FileType.R,
        "Rscript": FileType.R,
        "rscript": FileType.R,
        "matlab": FileType.MATLAB,
        "octave": FileType.OCTAVE,
        "awk": FileType.AWK,
        "gawk": FileType.AWK,
        "mawk": FileType.AWK,
        "nawk": FileType.AWK,
        "sed": FileType.SED,
        "gsed": FileType.SED,
        "make": FileType.MAKE,
        "gmake": FileType.MAKE,
        "nasm": FileType.NASM,
        "yasm": FileType.ASM,
        "bc": FileType.BC,
        "icon": FileType.ICON,
        "rexx": FileType.REXX,
        "regina": FileType.REXX,
        "jq": FileType.JQ,
        "nix-shell": FileType.NIX,
        "just": FileType.JUST,
        "crystal": FileType.CRYSTAL,
        "dart": FileType.DART,
        "nim": FileType.NIM,
    }
)


def interpreter_of(content: str) -> str | None:
    """Return the interpreter name from a ``#!`` first line, or None.

    The directory part and trailing version digits are stripped:
    ``#!/usr/bin/env python3.11 -u`` yields ``python``.
    """
    if not content.startswith("#!"):
        return None
    line: str = content[2:].split("\n", 1)[0].strip()
    words: list[str] = line.split()
    if not words:
        return None
    program: str = words[0].rsplit("/", 1)[-1]
    if program == "env":
        # Skip env options such as `-S` or `-i` and VAR=value assignments.
        rest: list[str] = [w for w in words[1:] if not w.startswith("-") and "=" not in w]
        if not rest:
            return None
        program = rest[0].rsplit("/", 1)[-1]
    name: str = program.rstrip("0123456789.")
    return name or None


def from_shebang(content: str) -> FileType | None:
    """Map the ``#!`` interpreter of `content` to a file type."""
    name: str | None = interpreter_of(content)
    if name is None:
        return None
    return INTERPRETERS.get(name)


def shebang(path: str, content: str) -> FileType | None:
    """Detector form of [`from_shebang`][ftdetect.filetypes.detectors.shebang.from_shebang]."""
    return from_shebang(content)
