# topmark:header:start
#
#   project      : FtDetect
#   file         : core_langs.py
#   file_relpath : src/ftdetect/filetypes/detectors/core_langs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamic detectors for compiled and general-purpose programming languages.

Most of these disambiguate an extension shared by several ecosystems
(``.h``, ``.m``, ``.inc``, ``.v``, ``.mod``...) by looking at the first lines
of the content sample. Every detector here has a fallback verdict except
where noted, so an empty sample still yields the most common interpretation.
"""

from __future__ import annotations

import re
from typing import Final

from ftdetect.filetypes.detectors import util
from ftdetect.filetypes.detectors.scripting import is_prolog
from ftdetect.filetypes.kinds import FileType

_RE_OBJC_DIRECTIVE: Final[re.Pattern[str]] = re.compile(r"^@(interface|protocol|end|class)\b", re.I)
_RE_CPP_DECL: Final[re.Pattern[str]] = re.compile(r"^\s*(namespace|template)\b", re.I)
_RE_CPP_KEYWORD: Final[re.Pattern[str]] = re.compile(r"\b(constexpr|nullptr)\b")


def header(path: str, content: str) -> FileType | None:
    """``*.h``: Objective-C, C++ or C headers (C when nothing else is recognized)."""
    for line in util.lines(content, 200):
        stripped: str = line.lstrip()
        if stripped.startswith("#import") or _RE_OBJC_DIRECTIVE.search(stripped):
            return FileType.OBJC
        if stripped.startswith("@"):
            continue
        if _RE_CPP_DECL.search(line) or _RE_CPP_KEYWORD.search(line) or "std::" in line:
            return FileType.CPP
    return FileType.C


_RE_OCTAVE_END: Final[re.Pattern[str]] = re.compile(
    r"(^|;)\s*\bend(_try_catch|classdef|enumeration|events|methods|parfor|properties)\b", re.I
)
_RE_OBJC_PREPROC: Final[re.Pattern[str]] = re.compile(
    r"^\s*#\s*(import|include|define|if|ifn?def|undef|line|error|pragma)\b", re.I
)
_RE_MUMPS_LABEL: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9]*\s+;")
_RE_MURPHI: Final[re.Pattern[str]] = re.compile(r"^\s*((type|var)\b|--)", re.I)


def m(path: str, content: str) -> FileType | None:
    """``*.m``: MUMPS, Objective-C, Octave, MATLAB, Mathematica or Murphi."""
    saw_comment = False
    mumps_score = 0
    for line in util.lines(content, 100):
        stripped: str = line.lstrip()
        if stripped.startswith(("set ", "write ", "quit")):
            mumps_score += 1
        if "$order(" in stripped or "zwrite" in stripped:
            mumps_score += 2
        if _RE_MUMPS_LABEL.search(line):
            mumps_score += 1
        if stripped.startswith("/*"):
            # Comment leader shared by Objective-C and Murphi; only a hint.
            saw_comment = True
        if mumps_score >= 3:
            return FileType.MUMPS
        if (
            stripped.startswith("//")
            or util.starts_with_any(stripped, ("@import",), case_sensitive=False)
            or _RE_OBJC_PREPROC.search(line)
        ):
            return FileType.OBJC
        if util.starts_with_any(
            stripped, ("#", "%%!", "unwind_protect"), case_sensitive=False
        ) or _RE_OCTAVE_END.search(line):
            return FileType.OCTAVE
        if stripped.startswith("%%"):
            return FileType.MATLAB
        if stripped.startswith("(*"):
            return FileType.MMA
        if _RE_MURPHI.search(line):
            return FileType.MURPHI
    return FileType.OBJC if saw_comment else FileType.MATLAB


_VMASM_DIRECTIVES: Final[tuple[str, ...]] = (".title", ".ident", ".macro", ".subtitle", ".library")


def asm(path: str, content: str) -> FileType | None:
    """``*.asm``/``*.s``: VMS Macro assembly or generic assembly."""
    if util.findany(content, 10, _VMASM_DIRECTIVES):
        return FileType.VMASM
    return FileType.ASM


_RE_PASCAL_KEYWORDS: Final[re.Pattern[str]] = re.compile(
    r"^\s*(program|unit|library|uses|begin|procedure|function|const|type|var)\b", re.I
)
_RE_PASCAL_COMMENTS: Final[re.Pattern[str]] = re.compile(r"^\s*(\{|\(\*|//)")

_RE_INC_SQL: Final[re.Pattern[str]] = re.compile(
    r"^\s*(select|insert|update|delete|create|alter|drop|flush|set|use)\b", re.I | re.M
)
_RE_INC_HTML: Final[re.Pattern[str]] = re.compile(
    r"<!DOCTYPE\s+html\b|<\s*/?\s*(html|head|body|div|p|ul|li|a|table|tr|td|span|meta|link)\b",
    re.I | re.M,
)
_RE_INC_ASM: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"^\s*\.(macro|endmacro|segment|define|include)\b", re.I | re.M),
    re.compile(r"^\s*%macro\b|^\s*%define\b", re.I | re.M),
)
_RE_INC_PAWN: Final[re.Pattern[str]] = re.compile(
    r"^\s*#\s*include\s*<\s*(a_samp|sourcemod|amxmodx)\s*>|^\s*#\s*pragma\s+semicolon\b"
    r"|^\s*public\s+\w+\s*\(",
    re.I | re.M,
)
_RE_INC_CPP: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"^\s*#\s*include\s*<", re.M),
    re.compile(r"^\s*using\s+namespace\b", re.M),
    re.compile(r"\b(namespace|template|class|struct)\b", re.M),
)
_RE_INC_PASCAL_OPEN: Final[re.Pattern[str]] = re.compile(r"^\s(\{|\(\*)", re.I)
_RE_BITBAKE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(inherit|require|[A-Z][\w_:${}]*\s+\??[?:+]?=) ", re.I
)


def inc(path: str, content: str) -> FileType | None:
    """``*.inc``: the most overloaded include extension.

    Tried in order: SQL, HTML, assembly, (Source)Pawn, C++, ASP, PHP, Pascal,
    BitBake, VMS assembly; POV-Ray is the fallback.
    """
    first3: str = util.get_lines(content, 3)
    head: str = util.get_lines(content, 2500)

    if _RE_INC_SQL.search(head) and ";" in head:
        if "mysql." in head or "`" in head or "@@" in head:
            return FileType.MYSQL
        return FileType.SQL
    if _RE_INC_HTML.search(head):
        return FileType.HTML
    if any(regex.search(head) for regex in _RE_INC_ASM):
        return asm(path, content)
    if _RE_INC_PAWN.search(head) or util.findany(
        head, 0, ("#endinput", "forward public", "stock "), case_sensitive=False
    ):
        if util.findany(head, 0, ("<sourcemod>", "Plugin:"), case_sensitive=False):
            return FileType.SOURCEPAWN
        return FileType.PAWN
    if (
        any(regex.search(head) for regex in _RE_INC_CPP)
        or util.find(head, 0, 'extern "C"', case_sensitive=False)
        or "::" in head
    ):
        return FileType.CPP
    if util.find(first3, 0, "perlscript", case_sensitive=False):
        return FileType.ASPPERL
    if "<%" in first3:
        return FileType.ASPVBS
    if "<?" in first3:
        return FileType.PHP
    if _RE_INC_PASCAL_OPEN.search(first3) or _RE_PASCAL_KEYWORDS.search(first3):
        return FileType.PASCAL
    if _RE_BITBAKE.search(first3):
        return FileType.BITBAKE
    if asm(path, content) is FileType.VMASM:
        return FileType.VMASM
    return FileType.POV


_VB_FORM_MARKERS: Final[tuple[str, ...]] = (
    "BEGIN VB.Form",
    "BEGIN VB.MDIForm",
    "BEGIN VB.UserControl",
)
_RE_FB_KEYWORDS: Final[re.Pattern[str]] = re.compile(
    r"^\s*(extern|var|enum|private|scope|union|byref|operator|constructor|delete|namespace"
    r"|public|property|with|destructor|using)\b(?!\s*[:=(])",
    re.I,
)
_RE_FB_PREPROC: Final[re.Pattern[str]] = re.compile(
    r"^\s*(#\s*[a-z]+|option\s+(byval|dynamic|escape|(no)?gosub|nokeyword|private|static)\b"
    r"|(''|rem)\s*\$lang\b|def(byte|longint|short|ubyte|uint|ulongint|ushort)\b)",
    re.I,
)
_RE_FB_COMMENT: Final[re.Pattern[str]] = re.compile(r"^\s*/'")
_RE_QB64_PREPROC: Final[re.Pattern[str]] = re.compile(
    r"^\s*(\$[a-z]+|option\s+(_explicit|_?explicitarray)\b)", re.I
)


def bas(path: str, content: str) -> FileType | None:
    """``*.bas``: Visual Basic, FreeBASIC, QB64, or generic BASIC."""
    for line in util.lines(content, 100):
        if util.findany(line, 0, _VB_FORM_MARKERS, case_sensitive=False):
            return FileType.VB
        if _RE_FB_COMMENT.search(line) or _RE_FB_PREPROC.search(line) or _RE_FB_KEYWORDS.search(line):
            return FileType.FREEBASIC
        if _RE_QB64_PREPROC.search(line):
            return FileType.QB64
    return FileType.BASIC


def frm(path: str, content: str) -> FileType | None:
    """``*.frm``: Visual Basic forms or FORM (symbolic algebra)."""
    if util.findany(content, 5, _VB_FORM_MARKERS[:2], case_sensitive=False):
        return FileType.VB
    return FileType.FORM


_RE_TEX_START: Final[re.Pattern[str]] = re.compile(r"^[%\\]")
_RE_APEX: Final[re.Pattern[str]] = re.compile(
    r"^\s*(global|public|private|protected)\s+(with\s+sharing\s+)?(class|interface|enum)\b",
    re.I | re.M,
)
_RE_APEX_TRIGGER: Final[re.Pattern[str]] = re.compile(r"\btrigger\s+\w+\s+on\s+\w+\s*\(", re.M)


def cls(path: str, content: str) -> FileType | None:
    """``*.cls``: TeX classes, Rexx, VB classes, Apex, or Smalltalk."""
    line: str = util.first_line(content)
    if _RE_TEX_START.search(line):
        return FileType.TEX
    if line.startswith("#") and "rexx" in line.lower():
        return FileType.REXX
    if line == "VERSION 1.0 CLASS":
        return FileType.VB
    if _RE_APEX.search(util.get_lines(content, 120)) or _RE_APEX_TRIGGER.search(
        util.get_lines(content, 200)
    ):
        return FileType.APEX
    return FileType.ST


def fs(path: str, content: str) -> FileType | None:
    """``*.fs``: Forth or F#."""
    for line in util.lines(content, 100):
        if line.startswith((":", "(", "\\")):
            return FileType.FORTH
    return FileType.FSHARP


_RE_SV_STATEMENT: Final[re.Pattern[str]] = re.compile(r";\s*($|/)")
_RE_COQ_SENTENCE: Final[re.Pattern[str]] = re.compile(r"\.\s*($|\(\*)")


def v(path: str, content: str) -> FileType | None:
    """``*.v``: (System)Verilog, Coq, or V."""
    for line in util.lines(content, 200):
        if line.lstrip().startswith("/"):
            continue
        if _RE_SV_STATEMENT.search(line):
            return FileType.SYSTEMVERILOG
        if _RE_COQ_SENTENCE.search(line):
            return FileType.COQ
    return FileType.V


def pp(path: str, content: str) -> FileType | None:
    """``*.pp``: Pascal or Puppet manifests."""
    line: str | None = util.next_non_blank(content)
    if line is not None and (_RE_PASCAL_COMMENTS.search(line) or _RE_PASCAL_KEYWORDS.search(line)):
        return FileType.PASCAL
    return FileType.PUPPET


def progress_pascal(path: str, content: str) -> FileType | None:
    """``*.p``: Pascal or Progress 4GL."""
    for line in util.lines(content, 10):
        if _RE_PASCAL_COMMENTS.search(line) or _RE_PASCAL_KEYWORDS.search(line):
            return FileType.PASCAL
        if line.lstrip().startswith("/*"):
            break
    return FileType.PROGRESS


_RE_ASM_STATEMENT: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*\s{2,}[A-Za-z.]{2,}\b")


def progress_asm(path: str, content: str) -> FileType | None:
    """``*.i``: assembly includes or Progress 4GL."""
    asm_like = 0
    for line in util.lines(content, 25):
        stripped: str = line.lstrip()
        if not stripped:
            continue
        if stripped.startswith((";", ".macro", ".segment", ".include")):
            return asm(path, content)
        if _RE_ASM_STATEMENT.search(stripped):
            asm_like += 1
        if asm_like >= 2:
            return asm(path, content)
        if stripped.startswith("/*"):
            break
    return FileType.PROGRESS


def progress_cweb(path: str, content: str) -> FileType | None:
    """``*.w``: Progress 4GL or CWEB."""
    if util.starts_with_any(content, ("&analyze",), case_sensitive=False):
        return FileType.PROGRESS
    for line in util.lines(content, 3):
        if util.starts_with_any(line, ("&global-define",), case_sensitive=False):
            return FileType.PROGRESS
    return FileType.CWEB


_RE_LPROLOG_SIG: Final[re.Pattern[str]] = re.compile(r"^\s*(/\*|%|sig\s+[a-zA-Z])")
_RE_SML_SIG: Final[re.Pattern[str]] = re.compile(r"^\s*(\(\*|(signature|structure)\s+[a-zA-Z])")


def sig(path: str, content: str) -> FileType | None:
    """``*.sig``: Lambda Prolog or SML signatures; declines otherwise."""
    line: str | None = util.next_non_blank(content)
    if line is None:
        return None
    if _RE_LPROLOG_SIG.search(line):
        return FileType.LPROLOG
    if _RE_SML_SIG.search(line):
        return FileType.SML
    return None


_RE_SPECMAN: Final[re.Pattern[str]] = re.compile(r"^\s*<'\s*$|^\s*'>\s*$")


def e(path: str, content: str) -> FileType | None:
    """``*.e``: Specman or Eiffel."""
    if util.search_lines(_RE_SPECMAN, content, 100):
        return FileType.SPECMAN
    return FileType.EIFFEL


_RE_MSIDL_IMPORT: Final[re.Pattern[str]] = re.compile(r'^\s*import\s+"(unknwn|objidl)"\.idl', re.I)


def idl(path: str, content: str) -> FileType | None:
    """``*.idl``: Microsoft IDL or OMG IDL."""
    if util.search_lines(_RE_MSIDL_IMPORT, content, 50):
        return FileType.MSIDL
    return FileType.IDL


_LPC_PREFIXES: Final[tuple[str, ...]] = (
    "inherit",
    "private",
    "protected",
    "nosave",
    "string",
    "object",
    "mapping",
    "mixed",
)


def lpc(path: str, content: str) -> FileType | None:
    """``*.c`` under LPC mudlibs: LPC when declarations look LPC-ish, else C."""
    for line in util.lines(content, 12):
        if line.startswith(_LPC_PREFIXES):
            return FileType.LPC
    return FileType.C


_RE_TS_XML: Final[re.Pattern[str]] = re.compile(r"^\s*<\?\s*xml\b|^\s*<\s*TS\b")
_RE_TS_SMIL: Final[re.Pattern[str]] = re.compile(r"^\s*<\s*smil\b", re.I)


def ts(path: str, content: str) -> FileType | None:
    """``*.ts``: TypeScript, unless the sample is Qt Linguist XML or SMIL."""
    first: str = util.next_non_blank(content) or ""
    if _RE_TS_XML.search(first):
        return FileType.XML
    if _RE_TS_SMIL.search(first):
        return FileType.SMIL
    return FileType.TYPESCRIPT


_RE_MASON: Final[re.Pattern[str]] = re.compile(
    r"(<%|</%|<%args>|<%init>|<%perl>|<%once>|<%def\b)", re.I
)


def comp(path: str, content: str) -> FileType | None:
    """``*.comp``: Mason components or GLSL compute shaders."""
    if _RE_MASON.search(util.get_lines(content, 80)):
        return FileType.MASON
    return FileType.GLSL


_RE_AMPL: Final[re.Pattern[str]] = re.compile(
    r"^\s*(param|set|var|minimize|maximize|subject\s+to)\b", re.I | re.M
)
_RE_LPROLOG_MODULE: Final[re.Pattern[str]] = re.compile(r"\bmodule\s+\w+\s*\.\s*(%|$)", re.I)
_RE_MODULA2: Final[re.Pattern[str]] = re.compile(r"(\bMODULE\s+\w+\s*;|^\s*\(\*)")
_RE_RAPID: Final[re.Pattern[str]] = re.compile(r"^\s*(%{3}|module\s+\w+\s*(\(|$))", re.I)


def is_lprolog(content: str) -> bool:
    """Whether the first non-comment line declares a Lambda Prolog module."""
    for line in util.lines(content, 500):
        stripped: str = line.lstrip()
        if stripped and not stripped.startswith("%"):
            return _RE_LPROLOG_MODULE.search(line) is not None
    return False


def is_rapid(content: str) -> bool:
    """Whether the first non-blank line opens an ABB RAPID module."""
    line: str | None = util.next_non_blank(content)
    return line is not None and _RE_RAPID.search(line) is not None


def mod(path: str, content: str) -> FileType | None:
    """``*.mod``: go.mod, AMPL, Lambda Prolog, Modula-2, RAPID, or Modsim III."""
    if util.basename(path).lower() == "go.mod":
        return FileType.GOMOD
    if _RE_AMPL.search(util.get_lines(content, 80)):
        return FileType.AMPL
    if is_lprolog(content):
        return FileType.LPROLOG
    line: str | None = util.next_non_blank(content)
    if line is not None and _RE_MODULA2.search(line):
        return FileType.MODULA2
    if is_rapid(content):
        return FileType.RAPID
    return FileType.MODSIM3


def prg(path: str, content: str) -> FileType | None:
    """``*.prg``: RAPID or Clipper."""
    return FileType.RAPID if is_rapid(content) else FileType.CLIPPER


def sys_(path: str, content: str) -> FileType | None:
    """``*.sys``: RAPID system modules or DOS batch (``config.sys``)."""
    return FileType.RAPID if is_rapid(content) else FileType.BAT


_RE_KRL_SRC: Final[re.Pattern[str]] = re.compile(r"^\s*(&\w+|(global\s+)?def(fct)?\b)", re.I)
_RE_KRL_DAT: Final[re.Pattern[str]] = re.compile(r"^\s*(&\w+|defdat\b)", re.I)
_RE_UPSTREAM_DAT: Final[re.Pattern[str]] = re.compile(
    r"^((.*\.)?upstream\.dat|upstream\..*\.dat)$", re.I
)


def src(path: str, content: str) -> FileType | None:
    """``*.src``: KUKA robot language sources; declines otherwise."""
    line: str | None = util.next_non_blank(content)
    if line is not None and _RE_KRL_SRC.search(line):
        return FileType.KRL
    return None


def dat(path: str, content: str) -> FileType | None:
    """``*.dat``: upstream data files or KUKA data lists; declines otherwise."""
    if _RE_UPSTREAM_DAT.search(util.basename(path)):
        return FileType.UPSTREAMDAT
    line: str | None = util.next_non_blank(content)
    if line is not None and _RE_KRL_DAT.search(line):
        return FileType.KRL
    return None


_RE_YACC_RACC: Final[re.Pattern[str]] = re.compile(r"^\s*(#|class\b)", re.I)
_RE_C_INCLUDE: Final[re.Pattern[str]] = re.compile(r"^\s*#\s*include", re.I)


def y(path: str, content: str) -> FileType | None:
    """``*.y``: Yacc or Racc grammars."""
    for line in util.lines(content, 100):
        if line.lstrip().startswith("%"):
            return FileType.YACC
        if _RE_YACC_RACC.search(line) and not _RE_C_INCLUDE.search(line):
            return FileType.RACC
    return FileType.YACC


_RE_D_MODULE: Final[re.Pattern[str]] = re.compile(r"^(module|import)\b", re.I)
_RE_DTRACE: Final[re.Pattern[str]] = re.compile(r"^#!\S+dtrace|#pragma\s+D\s+option|:\S-:\S-:")


def dtrace(path: str, content: str) -> FileType | None:
    """``*.d``: D or DTrace scripts."""
    for line in util.lines(content, 100):
        if _RE_D_MODULE.search(line):
            return FileType.D
        if _RE_DTRACE.search(line):
            return FileType.DTRACE
    return FileType.D


_RE_LARCH: Final[re.Pattern[str]] = re.compile(r"^\s*%|:\s*trait\s*$")


def lsl(path: str, content: str) -> FileType | None:
    """``*.lsl``: Larch Shared Language or Linden Scripting Language."""
    line: str | None = util.next_non_blank(content)
    if line is not None and _RE_LARCH.search(line):
        return FileType.LARCH
    return FileType.LSL


_RE_CPROTO: Final[re.Pattern[str]] = re.compile(r".;$", re.M)


def proto(path: str, content: str, default: FileType = FileType.IDL) -> FileType | None:
    """Cproto output, Prolog, or `default` (``*.pro`` and ``*.pl``-like names)."""
    if _RE_CPROTO.search(util.get_lines(content, 2)):
        return FileType.CPP
    if is_prolog(content):
        return FileType.PROLOG
    return default


def change(path: str, content: str) -> FileType | None:
    """``*.ch``: Ch scripts, Charity, change files, or CHILL."""
    if re.match(r"^(#|!)", util.first_line(content)):
        return FileType.CH
    if (
        re.search(r"^\s*%", util.get_lines(content, 5), re.M)
        and re.search(r"^\s*data\s+\w", util.get_lines(content, 50), re.I | re.M)
        and "->" in content
    ):
        return FileType.CHARITY
    for line in util.lines(content, 10):
        if line.startswith("@"):
            return FileType.CHANGE
        if "MODULE" in line:
            return FileType.CHILL
        if re.search(r"main\s*\(|#\s*include|//", line, re.I):
            return FileType.CH
    return FileType.CHILL


_RE_GLSL_VERSION: Final[re.Pattern[str]] = re.compile(r"^\s*#\s*version\b", re.I | re.M)
_RE_GDSHADER: Final[re.Pattern[str]] = re.compile(r"^\s*shader_type\b", re.I | re.M)
_RE_GLSL_BODY: Final[re.Pattern[str]] = re.compile(
    r"^\s*(uniform|varying|precision)\b|\bvoid\s+main\s*\(", re.I | re.M
)


def shader(path: str, content: str) -> FileType | None:
    """``*.shader``: GLSL or Godot shaders; declines when neither is evident."""
    head: str = util.get_lines(content, 60)
    if _RE_GLSL_VERSION.search(head):
        return FileType.GLSL
    if _RE_GDSHADER.search(head):
        return FileType.GDSHADER
    return None


def frag(path: str, content: str) -> FileType | None:
    """``*.frag``: GLSL fragment shaders or JavaScript fragments."""
    head: str = util.get_lines(content, 80)
    if _RE_GLSL_VERSION.search(head) or _RE_GLSL_BODY.search(head):
        return FileType.GLSL
    if re.search(r"^\s*\(function\b|^\s*function\b", head, re.M) or "window" in head:
        return FileType.JAVASCRIPT
    return FileType.GLSL


_RE_LIMBO: Final[re.Pattern[str]] = re.compile(r"^\s*implement\s+\w+\s*;", re.M)


def b(path: str, content: str) -> FileType | None:
    """``*.b``: Limbo sources; declines otherwise."""
    if _RE_LIMBO.search(util.get_lines(content, 5)):
        return FileType.LIMBO
    return None


_RE_SOURCEPAWN: Final[re.Pattern[str]] = re.compile(
    r"^\s*#\s*include\s*<sourcemod>|^\s*public\s+Plugin:", re.I | re.M
)


def sp(path: str, content: str) -> FileType | None:
    """``*.sp``: SourcePawn plugins; declines otherwise."""
    if _RE_SOURCEPAWN.search(util.get_lines(content, 80)):
        return FileType.SOURCEPAWN
    return None


_RE_GAP: Final[re.Pattern[str]] = re.compile(
    r"\b(?:InstallMethod|InstallGlobalFunction|TryNextMethod|DeclareOperation)\b"
)


def gi(path: str, content: str) -> FileType | None:
    """``*.gi``: GAP implementation files; declines otherwise."""
    if _RE_GAP.search(util.get_lines(content, 120)):
        return FileType.GAP
    return None
