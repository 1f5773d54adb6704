# topmark:header:start
#
#   project      : FtDetect
#   file         : editor.py
#   file_relpath : src/ftdetect/filetypes/builtins/editor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in editor filetype tables.

The base layer of the built-in table set: the extension, filename,
path-suffix and pattern rules an editor ships with. Later layers (see
``grammars.py`` and user configuration) override individual keys.

Exports:
    SOURCE (TableSource): The ``editor`` table layer.

Notes:
    - Keys are case-sensitive; upper-case variants are listed explicitly.
    - Backup and template suffixes (``.bak``, ``~``, ``.in``) are resolved by
      retry detectors that classify the name without the wrapper suffix.
"""

from __future__ import annotations

from functools import partial

from ..base import LOWEST
from ..detectors import core_langs, data, docs, ops, scripting, web
from ..kinds import FileType
from ..tables import TableSource

_EXTENSIONS = {
    # C family
    "c": FileType.C,
    "h": core_langs.header,
    "cc": FileType.CPP,
    "cpp": FileType.CPP,
    "cxx": FileType.CPP,
    "c++": FileType.CPP,
    "hh": FileType.CPP,
    "hpp": FileType.CPP,
    "hxx": FileType.CPP,
    "h++": FileType.CPP,
    "ipp": FileType.CPP,
    "tcc": FileType.CPP,
    "inl": FileType.CPP,
    "C": FileType.CPP,
    "H": FileType.CPP,
    "cu": FileType.CUDA,
    "cuh": FileType.CUDA,
    "m": core_langs.m,
    "mm": web.mm,
    "ch": core_langs.change,
    "chf": FileType.CH,
    "cs": FileType.CS,
    "csx": FileType.CS,
    "d": core_langs.dtrace,
    "di": FileType.D,
    "cyn": FileType.CYNLIB,
    "cpy": scripting.cpy,
    # JVM and .NET
    "java": FileType.JAVA,
    "jav": FileType.JAVA,
    "kt": FileType.KOTLIN,
    "kts": FileType.KOTLIN,
    "ktm": FileType.KOTLIN,
    "groovy": FileType.GROOVY,
    "gradle": FileType.GROOVY,
    "scala": FileType.SCALA,
    "sc": scripting.sc,
    "scd": scripting.scd,
    "clj": FileType.CLOJURE,
    "cljs": FileType.CLOJURE,
    "cljc": FileType.CLOJURE,
    "cljx": FileType.CLOJURE,
    "edn": data.edn,
    "fs": core_langs.fs,
    "fsi": FileType.FSHARP,
    "fsx": FileType.FSHARP,
    "vb": FileType.VB,
    "vbs": FileType.VB,
    "dsm": FileType.VB,
    "ctl": FileType.VB,
    "bas": core_langs.bas,
    "frm": core_langs.frm,
    "cls": core_langs.cls,
    "bi": FileType.FREEBASIC,
    "bm": FileType.FREEBASIC,
    "apex": FileType.APEX,
    "trigger": FileType.APEX,
    # Scripting
    "sh": scripting.sh,
    "bash": partial(scripting.sh, dialect=FileType.BASH),
    "ebuild": partial(scripting.sh, dialect=FileType.BASH),
    "eclass": partial(scripting.sh, dialect=FileType.BASH),
    "env": scripting.sh,
    "ksh": partial(scripting.sh, dialect=FileType.KSH),
    "zsh": FileType.ZSH,
    "csh": scripting.csh,
    "tcsh": FileType.TCSH,
    "fish": FileType.FISH,
    "elv": FileType.ELVISH,
    "install": scripting.install,
    "py": FileType.PYTHON,
    "pyw": FileType.PYTHON,
    "pyi": FileType.PYTHON,
    "pyx": FileType.PYTHON,
    "pxd": FileType.PYTHON,
    "ptl": FileType.PYTHON,
    "gyp": FileType.PYTHON,
    "gypi": FileType.PYTHON,
    "wsgi": FileType.PYTHON,
    "bzl": FileType.BZL,
    "bazel": FileType.BZL,
    "rb": FileType.RUBY,
    "rbw": FileType.RUBY,
    "gemspec": FileType.RUBY,
    "rake": FileType.RUBY,
    "ru": FileType.RUBY,
    "builder": FileType.RUBY,
    "rxml": FileType.RUBY,
    "rjs": FileType.RUBY,
    "podspec": FileType.RUBY,
    "pl": scripting.pl,
    "PL": scripting.pl,
    "pm": scripting.pm,
    "pod": FileType.PERL,
    "psgi": FileType.PERL,
    "t": scripting.t,
    "raku": FileType.RAKU,
    "rakumod": FileType.RAKU,
    "rakutest": FileType.RAKU,
    "pm6": FileType.RAKU,
    "p6": FileType.RAKU,
    "pl6": FileType.RAKU,
    "php": FileType.PHP,
    "phtml": FileType.PHP,
    "ctp": FileType.PHP,
    "phpt": FileType.PHP,
    "theme": FileType.PHP,
    "module": FileType.PHP,
    "lua": FileType.LUA,
    "rockspec": FileType.LUA,
    "luau": FileType.LUAU,
    "tcl": FileType.TCL,
    "tk": FileType.TCL,
    "itcl": FileType.TCL,
    "itk": FileType.TCL,
    "jacl": FileType.TCL,
    "tm": FileType.TCL,
    "r": scripting.r,
    "R": scripting.r,
    "rmd": FileType.RMD,
    "Rmd": FileType.RMD,
    "rebol": FileType.REBOL,
    "rexx": FileType.REXX,
    "rex": FileType.REXX,
    "orx": FileType.REXX,
    "awk": FileType.AWK,
    "gawk": FileType.AWK,
    "sed": FileType.SED,
    "jq": FileType.JQ,
    "bc": FileType.BC,
    "ps1": FileType.POWERSHELL,
    "psm1": FileType.POWERSHELL,
    "psd1": FileType.POWERSHELL,
    "ps1xml": FileType.XML,
    "bat": FileType.BAT,
    "cmd": scripting.cmd,
    "btm": FileType.BTM,
    "ahk": FileType.AUTOHOTKEY,
    "nsi": FileType.NSIS,
    "nsh": FileType.NSIS,
    "ex": scripting.ex,
    "exs": FileType.ELIXIR,
    "eex": FileType.ELIXIR,
    "leex": FileType.ELIXIR,
    "heex": FileType.HEEX,
    "exw": FileType.EUPHORIA3,
    "exu": FileType.EUPHORIA3,
    "e": core_langs.e,
    "E": core_langs.e,
    "eu": FileType.EUPHORIA3,
    "ew": FileType.EUPHORIA3,
    "spec": scripting.spec,
    "vim": FileType.VIM,
    "vba": FileType.VIM,
    # Functional and systems languages
    "hs": FileType.HASKELL,
    "lhs": FileType.HASKELL,
    "hsc": FileType.HASKELL,
    "hs-boot": FileType.HASKELL,
    "cabal": FileType.CABAL,
    "ml": FileType.OCAML,
    "mli": FileType.OCAML,
    "mll": FileType.OCAML,
    "mly": FileType.OCAML,
    "sml": FileType.SML,
    "sig": core_langs.sig,
    "erl": FileType.ERLANG,
    "hrl": FileType.ERLANG,
    "yaws": FileType.ERLANG,
    "elm": FileType.ELM,
    "gleam": FileType.GLEAM,
    "lisp": FileType.LISP,
    "lsp": FileType.LISP,
    "el": FileType.LISP,
    "cl": FileType.LISP,
    "asd": FileType.LISP,
    "scm": FileType.SCHEME,
    "ss": FileType.SCHEME,
    "sld": FileType.SCHEME,
    "rkt": FileType.RACKET,
    "rktl": FileType.RACKET,
    "purs": FileType.PURESCRIPT,
    "jl": FileType.JULIA,
    "nim": FileType.NIM,
    "nims": FileType.NIM,
    "nimble": FileType.NIM,
    "zig": FileType.ZIG,
    "zon": FileType.ZIG,
    "odin": FileType.ODIN,
    "mojo": FileType.MOJO,
    "rs": FileType.RUST,
    "go": FileType.GO,
    "swift": FileType.SWIFT,
    "swiftinterface": FileType.SWIFT,
    "sil": docs.sil,
    "dart": FileType.DART,
    "cr": FileType.CRYSTAL,
    "ada": FileType.ADA,
    "adb": FileType.ADA,
    "ads": FileType.ADA,
    "gpr": FileType.ADA,
    "f": FileType.FORTRAN,
    "for": FileType.FORTRAN,
    "f77": FileType.FORTRAN,
    "f90": FileType.FORTRAN,
    "f95": FileType.FORTRAN,
    "f03": FileType.FORTRAN,
    "f08": FileType.FORTRAN,
    "fpp": FileType.FORTRAN,
    "ftn": FileType.FORTRAN,
    "F": FileType.FORTRAN,
    "F90": FileType.FORTRAN,
    "cob": FileType.COBOL,
    "cbl": FileType.COBOL,
    "lib": FileType.COBOL,
    "pas": FileType.PASCAL,
    "dpr": FileType.PASCAL,
    "lpr": FileType.PASCAL,
    "pp": core_langs.pp,
    "p": core_langs.progress_pascal,
    "i": core_langs.progress_asm,
    "w": core_langs.progress_cweb,
    "cweb": FileType.CWEB,
    "web": docs.web,
    "mod": core_langs.mod,
    "def": FileType.MODULA2,
    "mi": FileType.MODULA2,
    "m2": FileType.MODULA2,
    "prg": core_langs.prg,
    "sys": core_langs.sys_,
    "src": core_langs.src,
    "dat": core_langs.dat,
    "y": core_langs.y,
    "yy": FileType.YACC,
    "yxx": FileType.YACC,
    "lsl": core_langs.lsl,
    "pro": partial(core_langs.proto, default=FileType.IDL),
    "idl": core_langs.idl,
    "odl": FileType.MSIDL,
    "mof": FileType.MSIDL,
    "thrift": FileType.THRIFT,
    "proto": FileType.PROTO,
    "icn": FileType.ICON,
    "gd": FileType.GDSCRIPT,
    "gdshader": FileType.GDSHADER,
    "gdshaderinc": FileType.GDSHADER,
    "shader": core_langs.shader,
    "frag": core_langs.frag,
    "vert": FileType.GLSL,
    "geom": FileType.GLSL,
    "tesc": FileType.GLSL,
    "tese": FileType.GLSL,
    "glsl": FileType.GLSL,
    "comp": core_langs.comp,
    "wgsl": FileType.WGSL,
    "b": core_langs.b,
    "sp": core_langs.sp,
    "gi": core_langs.gi,
    "gap": FileType.GAP,
    "mu": FileType.MUMPS,
    "mumps": FileType.MUMPS,
    "st": FileType.ST,
    "sol": FileType.SOLIDITY,
    "scad": FileType.OPENSCAD,
    "pov": FileType.POV,
    "pwn": FileType.PAWN,
    "mat": FileType.MATLAB,
    "nb": docs.nb,
    "wl": FileType.MMA,
    "wls": FileType.MMA,
    "qml": FileType.QML,
    "qbs": FileType.QML,
    "sv": FileType.SYSTEMVERILOG,
    "svh": FileType.SYSTEMVERILOG,
    "v": core_langs.v,
    "vh": FileType.VERILOG,
    "va": FileType.VERILOG,
    "vhd": FileType.VHDL,
    "vhdl": FileType.VHDL,
    "vho": FileType.VHDL,
    "vhi": FileType.VHDL,
    "coq": FileType.COQ,
    "asm": core_langs.asm,
    "s": core_langs.asm,
    "S": core_langs.asm,
    "nasm": FileType.NASM,
    "inc": core_langs.inc,
    "lpc": FileType.LPC,
    "ulpc": FileType.LPC,
    "4th": FileType.FORTH,
    "fth": FileType.FORTH,
    # Web
    "html": web.html,
    "htm": web.html,
    "shtml": FileType.HTML,
    "stm": FileType.HTML,
    "xhtml": FileType.XHTML,
    "xht": FileType.XHTML,
    "css": FileType.CSS,
    "scss": FileType.SCSS,
    "sass": FileType.SASS,
    "less": FileType.LESS,
    "js": FileType.JAVASCRIPT,
    "javascript": FileType.JAVASCRIPT,
    "es": FileType.JAVASCRIPT,
    "mjs": FileType.JAVASCRIPT,
    "cjs": FileType.JAVASCRIPT,
    "jsm": FileType.JAVASCRIPT,
    "jsx": FileType.JAVASCRIPTREACT,
    "ts": core_langs.ts,
    "mts": FileType.TYPESCRIPT,
    "cts": FileType.TYPESCRIPT,
    "tsx": FileType.TSX,
    "vue": FileType.VUE,
    "svelte": FileType.SVELTE,
    "astro": FileType.ASTRO,
    "mdx": FileType.MDX,
    "haml": FileType.HAML,
    "slim": FileType.SLIM,
    "pug": FileType.PUG,
    "jade": FileType.PUG,
    "twig": FileType.TWIG,
    "jinja": FileType.JINJA,
    "jinja2": FileType.JINJA,
    "j2": FileType.JINJA,
    "djhtml": FileType.HTMLDJANGO,
    "mason": FileType.MASON,
    "mhtml": FileType.MASON,
    "templ": FileType.TEMPL,
    "asp": web.asp,
    "asa": FileType.ASPVBS,
    "hw": web.hw,
    "fcgi": web.fcgi,
    "vhost": web.vhost,
    "graphql": FileType.GRAPHQL,
    "graphqls": FileType.GRAPHQL,
    "gql": FileType.GRAPHQL,
    "hurl": FileType.HURL,
    "coffee": FileType.COFFEE,
    "litcoffee": FileType.COFFEE,
    "cson": FileType.COFFEE,
    # Markup and XML
    "xml": web.xml,
    "xsd": FileType.XSD,
    "xsl": FileType.XSLT,
    "xslt": FileType.XSLT,
    "svg": FileType.SVG,
    "xbl": FileType.XBL,
    "dtd": FileType.DTD,
    "ent": data.ent,
    "sgml": web.sgml,
    "sgm": web.sgml,
    "decl": web.decl,
    "dec": web.decl,
    "smil": web.smil,
    "smi": web.smi,
    "rss": FileType.XML,
    "atom": FileType.XML,
    "xul": FileType.XML,
    "wsdl": FileType.XML,
    "plist": FileType.XML,
    "csproj": FileType.XML,
    "vbproj": FileType.XML,
    "vcxproj": FileType.XML,
    "fsproj": FileType.XML,
    "props": FileType.XML,
    "targets": FileType.XML,
    "xaml": FileType.XML,
    "ui": FileType.XML,
    "qrc": FileType.XML,
    "kml": FileType.XML,
    "gpx": FileType.XML,
    "xlf": FileType.XML,
    "xliff": FileType.XML,
    "fods": FileType.XML,
    "fodt": FileType.XML,
    "sch": web.xml_bucket,
    "tpl": web.xml_bucket,
    "xpm": web.xpm,
    "xpm2": FileType.XPM2,
    "dsl": data.dsl,
    # Documentation
    "md": FileType.MARKDOWN,
    "markdown": FileType.MARKDOWN,
    "mdown": FileType.MARKDOWN,
    "mkd": FileType.MARKDOWN,
    "mkdn": FileType.MARKDOWN,
    "mdwn": FileType.MARKDOWN,
    "rst": FileType.RST,
    "adoc": FileType.ASCIIDOC,
    "asciidoc": FileType.ASCIIDOC,
    "org": FileType.ORG,
    "tex": docs.tex,
    "latex": FileType.LATEX,
    "sty": FileType.TEX,
    "dtx": FileType.TEX,
    "ltx": FileType.TEX,
    "bbl": FileType.TEX,
    "bib": FileType.BIB,
    "mkii": FileType.CONTEXT,
    "mkiv": FileType.CONTEXT,
    "mkvi": FileType.CONTEXT,
    "mkxl": FileType.CONTEXT,
    "texi": FileType.TEXINFO,
    "texinfo": FileType.TEXINFO,
    "txi": FileType.TEXINFO,
    "typ": docs.typ,
    "txt": docs.txt,
    "text": FileType.TEXT,
    "man": FileType.MAN,
    "me": docs.me,
    "ms": FileType.NROFF,
    "mom": FileType.NROFF,
    "tr": FileType.NROFF,
    "nr": FileType.NROFF,
    "roff": FileType.NROFF,
    "tmac": FileType.NROFF,
    "1": docs.nroff,
    "2": docs.nroff,
    "3": docs.nroff,
    "4": docs.nroff,
    "5": docs.nroff,
    "6": docs.nroff,
    "7": docs.nroff,
    "8": docs.nroff,
    "9": docs.nroff,
    "po": FileType.PO,
    "pot": FileType.PO,
    "mmd": FileType.MERMAID,
    "mermaid": FileType.MERMAID,
    "dot": FileType.DOT,
    "gv": FileType.DOT,
    "ttl": data.ttl,
    # Data and configuration
    "json": data.json,
    "jsonc": FileType.JSONC,
    "json5": FileType.JSON5,
    "jsonl": FileType.JSONL,
    "ndjson": FileType.JSONL,
    "jsonnet": FileType.JSONNET,
    "libsonnet": FileType.JSONNET,
    "geojson": FileType.JSON,
    "webmanifest": FileType.JSON,
    "har": FileType.JSON,
    "ipynb": FileType.JSON,
    "yaml": FileType.YAML,
    "yml": FileType.YAML,
    "toml": FileType.TOML,
    "ini": FileType.DOSINI,
    "INI": FileType.DOSINI,
    "cfg": data.cfg,
    "properties": FileType.PROPERTIES,
    "editorconfig": FileType.EDITORCONFIG,
    "csv": FileType.CSV,
    "tsv": FileType.TSV,
    "sql": FileType.SQL,
    "mysql": FileType.MYSQL,
    "ldif": FileType.LDIF,
    "kdl": FileType.KDL,
    "reg": data.reg,
    "foam": data.foam,
    "inp": data.inp,
    "psf": data.psf,
    "zone": data.bindzone,
    "tf": data.tf,
    "tfvars": FileType.TERRAFORM_VARS,
    "hcl": FileType.HCL,
    "nomad": FileType.HCL,
    "bicep": FileType.BICEP,
    "bicepparam": FileType.BICEP,
    "nix": FileType.NIX,
    "cmake": FileType.CMAKE,
    "mak": FileType.MAKE,
    "mk": FileType.MAKE,
    "dsp": FileType.MAKE,
    "ninja": FileType.NINJA,
    "just": FileType.JUST,
    "bb": FileType.BITBAKE,
    "bbappend": FileType.BITBAKE,
    "bbclass": FileType.BITBAKE,
    "meson": FileType.MESON,
    "service": FileType.SYSTEMD,
    "socket": FileType.SYSTEMD,
    "timer": FileType.SYSTEMD,
    "mount": FileType.SYSTEMD,
    "automount": FileType.SYSTEMD,
    "target": FileType.SYSTEMD,
    "slice": FileType.SYSTEMD,
    "path": FileType.SYSTEMD,
    "network": FileType.SYSTEMD,
    "netdev": FileType.SYSTEMD,
    "link": FileType.SYSTEMD,
    "epp": FileType.PUPPET,
    "haproxy": FileType.HAPROXY,
    "nginx": FileType.NGINX,
    "rules": ops.rules,
    "hook": ops.hook,
    "hog": FileType.HOG,
    "mib": FileType.MIB,
    "my": FileType.MIB,
    "gpg": FileType.GPG,
    "pgp": FileType.GPG,
    "eml": FileType.MAIL,
    "mbox": FileType.MAIL,
    "muttrc": FileType.MUTTRC,
    "rc": ops.rc,
    "rc2": FileType.RC,
    "dlg": FileType.RC,
    "mc": ops.mc,
    "m4": ops.m4_ext,
    "diff": FileType.DIFF,
    "rej": FileType.DIFF,
    "patch": ops.patch,
    "dsc": FileType.DEBCONTROL,
    "log": FileType.TEXT,
    "tmux": FileType.TMUX,
    "kconfig": FileType.KCONFIG,
    "fvwm": FileType.FVWM,
    "fvwmrc": FileType.FVWM,
    "xrdb": FileType.XDEFAULTS,
    "Xdefaults": FileType.XDEFAULTS,
    "Xresources": FileType.XDEFAULTS,
    "query": FileType.QUERY,
    "qb64": FileType.QB64,
    "ishd": FileType.ISHD,
    "krl": FileType.KRL,
    "mar": FileType.VMASM,
    "dtrace": FileType.DTRACE,
    "diva": FileType.DIVA,
    "redif": data.redif,
    "ttml": FileType.XML,
    "upstream.dat": FileType.UPSTREAMDAT,
    # Backups and templates
    "bak": ops.bak,
    "BAK": ops.bak,
    "old": ops.bak,
    "orig": ops.bak,
    "new": ops.bak,
    "dpkg-dist": ops.bak,
    "dpkg-old": ops.bak,
    "dpkg-new": ops.bak,
    "dpkg-bak": ops.bak,
    "rpmsave": ops.bak,
    "rpmnew": ops.bak,
    "pacsave": ops.bak,
    "pacnew": ops.bak,
    "in": ops.in_,
    "cmake.in": FileType.CMAKE,
}

_FILENAMES = {
    # Build systems
    "Makefile": FileType.MAKE,
    "makefile": FileType.MAKE,
    "GNUmakefile": FileType.MAKE,
    "BSDmakefile": FileType.MAKE,
    "Kbuild": FileType.MAKE,
    "CMakeLists.txt": FileType.CMAKE,
    "meson.build": FileType.MESON,
    "meson_options.txt": FileType.MESON,
    "meson.options": FileType.MESON,
    "build.ninja": FileType.NINJA,
    "justfile": FileType.JUST,
    "Justfile": FileType.JUST,
    ".justfile": FileType.JUST,
    "BUILD": FileType.BZL,
    "BUILD.bazel": FileType.BZL,
    "WORKSPACE": FileType.BZL,
    "WORKSPACE.bazel": FileType.BZL,
    "MODULE.bazel": FileType.BZL,
    "Tiltfile": FileType.BZL,
    "configure.ac": FileType.CONFIG,
    "SConstruct": FileType.PYTHON,
    "SConscript": FileType.PYTHON,
    "wscript": FileType.PYTHON,
    "Rakefile": FileType.RUBY,
    "rakefile": FileType.RUBY,
    "Gemfile": FileType.RUBY,
    "Guardfile": FileType.RUBY,
    "Vagrantfile": FileType.RUBY,
    "Podfile": FileType.RUBY,
    "Brewfile": FileType.RUBY,
    "Fastfile": FileType.RUBY,
    "Capfile": FileType.RUBY,
    "Dangerfile": FileType.RUBY,
    "Puppetfile": FileType.RUBY,
    "Jenkinsfile": FileType.GROOVY,
    "build.gradle": FileType.GROOVY,
    "Caddyfile": FileType.CADDYFILE,
    "Dockerfile": FileType.DOCKERFILE,
    "Containerfile": FileType.DOCKERFILE,
    "go.mod": FileType.GOMOD,
    "go.sum": FileType.GOSUM,
    "go.work": FileType.GOWORK,
    "go.work.sum": FileType.GOSUM,
    "Cargo.lock": FileType.TOML,
    "Pipfile": FileType.TOML,
    "poetry.lock": FileType.TOML,
    "uv.lock": FileType.TOML,
    "Gopkg.lock": FileType.TOML,
    "package.json": FileType.JSON,
    "composer.lock": FileType.JSON,
    "flake.lock": FileType.JSON,
    ".babelrc": FileType.JSON,
    ".prettierrc": FileType.JSON,
    ".jshintrc": FileType.JSON,
    ".eslintrc": FileType.JSON,
    ".firebaserc": FileType.JSON,
    "tsconfig.json": FileType.JSONC,
    "jsconfig.json": FileType.JSONC,
    ".jscsrc": FileType.JSONC,
    ".swcrc": FileType.JSONC,
    ".clangd": FileType.YAML,
    ".clang-format": FileType.YAML,
    ".clang-tidy": FileType.YAML,
    ".condarc": FileType.YAML,
    "pixi.lock": FileType.YAML,
    "yarn.lock": FileType.YAML,
    ".editorconfig": FileType.EDITORCONFIG,
    ".gitconfig": FileType.GITCONFIG,
    ".gitmodules": FileType.GITCONFIG,
    ".gitattributes": FileType.GITATTRIBUTES,
    ".gitignore": FileType.GITIGNORE,
    ".dockerignore": FileType.GITIGNORE,
    ".npmignore": FileType.GITIGNORE,
    ".prettierignore": FileType.GITIGNORE,
    "git-rebase-todo": FileType.GITREBASE,
    ".gitsendemail.msg": FileType.GITSENDEMAIL,
    # Shells
    ".bashrc": FileType.BASH,
    "bashrc": FileType.BASH,
    "bash.bashrc": FileType.BASH,
    ".bash_profile": FileType.BASH,
    ".bash_login": FileType.BASH,
    ".bash_logout": FileType.BASH,
    ".bash_aliases": FileType.BASH,
    "PKGBUILD": FileType.BASH,
    "APKBUILD": FileType.BASH,
    ".profile": scripting.sh,
    ".kshrc": FileType.KSH,
    ".zshrc": FileType.ZSH,
    ".zshenv": FileType.ZSH,
    ".zprofile": FileType.ZSH,
    ".zlogin": FileType.ZSH,
    ".zlogout": FileType.ZSH,
    ".zcompdump": FileType.ZSH,
    ".cshrc": scripting.csh,
    ".login": scripting.csh,
    ".logout": FileType.CSH,
    "csh.cshrc": scripting.csh,
    "csh.login": scripting.csh,
    "csh.logout": FileType.CSH,
    ".tcshrc": FileType.TCSH,
    ".inputrc": FileType.READLINE,
    "inputrc": FileType.READLINE,
    ".tmux.conf": FileType.TMUX,
    "tmux.conf": FileType.TMUX,
    ".vimrc": FileType.VIM,
    "_vimrc": FileType.VIM,
    ".exrc": FileType.VIM,
    "_exrc": FileType.VIM,
    ".gvimrc": FileType.VIM,
    ".muttrc": FileType.MUTTRC,
    "Muttrc": FileType.MUTTRC,
    "muttrc": FileType.MUTTRC,
    ".Xdefaults": FileType.XDEFAULTS,
    ".Xresources": FileType.XDEFAULTS,
    ".Xpdefaults": FileType.XDEFAULTS,
    "xdm-config": FileType.XDEFAULTS,
    ".Xmodmap": FileType.XMODMAP,
    "Xmodmap": FileType.XMODMAP,
    "XF86Config": data.xfree86,
    "xorg.conf": FileType.XF86CONF,
    "xorg.conf-4": FileType.XF86CONF,
    "config.sys": FileType.BAT,
    "autoexec.bat": FileType.BAT,
    # System configuration
    "fstab": FileType.FSTAB,
    "mtab": FileType.FSTAB,
    "inittab": FileType.INITTAB,
    "passwd": FileType.PASSWD,
    "passwd-": FileType.PASSWD,
    "shadow": FileType.PASSWD,
    "group": FileType.GROUP,
    "group-": FileType.GROUP,
    "gshadow": FileType.GROUP,
    "sudoers": FileType.SUDOERS,
    "hosts.allow": FileType.HOSTSACCESS,
    "hosts.deny": FileType.HOSTSACCESS,
    "host.conf": FileType.HOSTCONF,
    "pam.conf": FileType.PAMCONF,
    "udev.conf": FileType.UDEVCONF,
    "sshd_config": FileType.SSHDCONFIG,
    "ssh_config": FileType.SSHCONFIG,
    "mailcap": FileType.MAILCAP,
    ".mailcap": FileType.MAILCAP,
    "named.root": FileType.BINDZONE,
    "haproxy.cfg": FileType.HAPROXY,
    "nginx.conf": FileType.NGINX,
    "httpd.conf": FileType.APACHE,
    "apache.conf": FileType.APACHE,
    "apache2.conf": FileType.APACHE,
    ".htaccess": FileType.APACHE,
    "snort.conf": FileType.HOG,
    "vision.conf": FileType.HOG,
    "php.ini-production": FileType.DOSINI,
    "php.ini-development": FileType.DOSINI,
    ".flake8": FileType.DOSINI,
    ".pylintrc": FileType.DOSINI,
    "pylintrc": FileType.DOSINI,
    ".coveragerc": FileType.DOSINI,
    "setup.cfg": FileType.DOSINI,
    "tox.ini": FileType.DOSINI,
    ".npmrc": FileType.DOSINI,
    "Kconfig": FileType.KCONFIG,
    "Kconfig.debug": FileType.KCONFIG,
    "Config.in": FileType.KCONFIG,
    # Documentation and packaging
    "README": FileType.TEXT,
    "LICENSE": FileType.TEXT,
    "COPYING": FileType.TEXT,
    "AUTHORS": FileType.TEXT,
    "ChangeLog": docs.changelog,
    "changelog": docs.changelog,
    "NEWS": docs.news,
    "changelog.Debian": FileType.DEBCHANGELOG,
    "changelog.dch": FileType.DEBCHANGELOG,
    "NEWS.Debian": FileType.DEBCHANGELOG,
    "NEWS.dch": FileType.DEBCHANGELOG,
    "sources.list": FileType.DEBSOURCES,
    "COMMIT_EDITMSG": FileType.GITCOMMIT,
    "MERGE_MSG": FileType.GITCOMMIT,
    "TAG_EDITMSG": FileType.GITCOMMIT,
    "NOTES_EDITMSG": FileType.GITCOMMIT,
    "EDIT_DESCRIPTION": FileType.GITCOMMIT,
    "configure.in": ops.in_,
    "upstream.dat": FileType.UPSTREAMDAT,
    "fdrupstream.log": FileType.UPSTREAMLOG,
    "usserver.log": FileType.USSERVERLOG,
    "usw2kagt.log": FileType.USW2KAGTLOG,
    "upstream.log": FileType.UPSTREAMLOG,
    "upstreaminstall.log": FileType.UPSTREAMINSTALLLOG,
    "pyproject.toml": FileType.TOML,
    "Cargo.toml": FileType.TOML,
    "Gopkg.toml": FileType.TOML,
    ".python-version": FileType.TEXT,
    "requirements.txt": FileType.TEXT,
    "constraints.txt": FileType.TEXT,
    "robots.txt": FileType.TEXT,
    "INSTALL": FileType.TEXT,
    ".envrc": FileType.SH,
    ".env": scripting.sh,
    "APKINDEX": FileType.TEXT,
    ".latexmkrc": FileType.PERL,
    "latexmkrc": FileType.PERL,
    "cpanfile": FileType.PERL,
    "Jakefile": FileType.JAVASCRIPT,
    ".babelrc.js": FileType.JAVASCRIPT,
    "gulpfile.js": FileType.JAVASCRIPT,
    ".Rprofile": FileType.R,
    "Rprofile": FileType.R,
    "Rprofile.site": FileType.R,
    "NAMESPACE": FileType.R,
    "DESCRIPTION": FileType.TEXT,
    "cabal.project": FileType.CABAL,
    "cabal.config": FileType.CABAL,
    "stack.yaml": FileType.YAML,
    "rebar.config": FileType.ERLANG,
    ".ocamlinit": FileType.OCAML,
    "dune": FileType.LISP,
    "dune-project": FileType.LISP,
    ".emacs": FileType.LISP,
    ".sbclrc": FileType.LISP,
    ".guile": FileType.SCHEME,
    "flake.nix": FileType.NIX,
    "Snakefile": FileType.PYTHON,
    "BUCK": FileType.BZL,
    "Pkgfile": FileType.SH,
    "Earthfile": FileType.DOCKERFILE,
    "nfpm.yaml": FileType.YAML,
    ".terraformrc": FileType.HCL,
    "terraform.rc": FileType.HCL,
    "psql_history": FileType.SQL,
    ".psqlrc": FileType.SQL,
    ".sqlite_history": FileType.SQL,
    ".mysql_history": FileType.MYSQL,
    ".myclirc": FileType.DOSINI,
    "crontab": FileType.SH,
    "specman.el": FileType.LISP,
    "indent.pro": FileType.TEXT,
    ".indent.pro": FileType.TEXT,
    "ldaprc": FileType.CONF,
    ".ldaprc": FileType.CONF,
    "ldap.conf": FileType.CONF,
    "click.me": FileType.TEXT,
    "read.me": FileType.TEXT,
}

_PATH_SUFFIXES = (
    ("/etc/zsh/zprofile", FileType.ZSH),
    ("/etc/zsh/zshrc", FileType.ZSH),
    ("/etc/zsh/zshenv", FileType.ZSH),
    ("/etc/zsh/zlogin", FileType.ZSH),
    ("/etc/zsh/zlogout", FileType.ZSH),
    ("/etc/profile", scripting.sh),
    ("/etc/environment", FileType.SH),
    ("/etc/pacman.conf", FileType.CONFINI),
    ("/etc/yum.conf", FileType.DOSINI),
    ("/etc/pip.conf", FileType.DOSINI),
    ("/etc/mpv/mpv.conf", FileType.CONFINI),
    ("/etc/hosts", FileType.CONF),
    ("/.ssh/config", FileType.SSHCONFIG),
    ("/etc/xinetd.conf", FileType.CONF),
    ("/.config/git/config", FileType.GITCONFIG),
    ("/.config/git/ignore", FileType.GITIGNORE),
    ("/.config/git/attributes", FileType.GITATTRIBUTES),
    ("/.config/mpv/mpv.conf", FileType.CONFINI),
    ("/.cargo/config", FileType.TOML),
    ("/.cargo/credentials", FileType.TOML),
    ("/debian/control", ops.control),
    ("/debian/copyright", ops.debcopyright),
    ("/.gnupg/gpg.conf", FileType.GPG),
    ("/.gnupg/options", FileType.GPG),
    ("/usr/share/X11/app-defaults/XTerm", FileType.XDEFAULTS),
)

_PATTERNS = (
    # Before the extension stage
    (False, r"^Dockerfile\..+$", FileType.DOCKERFILE, None),
    (False, r"^Containerfile\..+$", FileType.DOCKERFILE, None),
    (False, r"^[Mm]akefile\..+$", FileType.MAKE, None),
    (False, r"^.+\.[Dd]ockerfile$", FileType.DOCKERFILE, None),
    (False, r"^\.env\..+$", scripting.sh, None),
    (False, r"^requirements[-_].+\.txt$", FileType.TEXT, None),
    (False, r"^\.?bash[-_]?(rc|profile|aliases|logout)[-_.].+$", FileType.BASH, None),
    (False, r"^\.?zsh(rc|env|profile)\..+$", FileType.ZSH, None),
    (False, r"^\.?gitlab-ci\..*ya?ml$", FileType.YAML, None),
    (False, r"^tsconfig[-.].+\.json$", FileType.JSONC, None),
    (False, r"^\.eslintrc\.json$", FileType.JSONC, None),
    (True, r"^.*\.[Ll][Oo][Gg]$", ops.log, None),
    (True, r"/etc/apache2/.+\.conf$", FileType.APACHE, 10),
    (True, r"/etc/httpd/.+\.conf$", FileType.APACHE, 10),
    (True, r"/etc/apache2/(sites|conf|mods)-(available|enabled)/.+$", FileType.APACHE, 5),
    (True, r"/etc/nginx/.+\.conf$", FileType.NGINX, 10),
    (True, r"/nginx/(sites|conf)\.d/.+$", FileType.NGINX, 5),
    (True, r"/etc/systemd/.+\.conf$", FileType.SYSTEMD, 10),
    (True, r"/etc/systemd/system/.+\.d/.+\.conf$", FileType.SYSTEMD, 20),
    (True, r"/\.config/systemd/user/.+\.d/.+\.conf$", FileType.SYSTEMD, 20),
    (True, r"/etc/udev/rules\.d/.+\.rules$", FileType.UDEVRULES, 10),
    (True, r"/etc/pam\.d/[^/]+$", FileType.PAMCONF, 5),
    (True, r"/etc/sudoers\.d/[^/]+$", FileType.SUDOERS, 5),
    (True, r"/etc/apt/sources\.list\.d/.+\.list$", FileType.DEBSOURCES, 5),
    (True, r"/etc/ssh/ssh_config\.d/.+\.conf$", FileType.SSHCONFIG, 10),
    (True, r"/etc/ssh/sshd_config\.d/.+\.conf$", FileType.SSHDCONFIG, 10),
    (True, r"/etc/pacman\.d/hooks/.+\.hook$", FileType.CONFINI, 10),
    (True, r"/\.?(mud)?lib/.+\.c$", core_langs.lpc, 1),
    (True, r"/debian/patches/[^/]+$", ops.dep3patch, 1),
    (True, r"/etc/(xinetd\.d|modprobe\.d)/[^/]+$", FileType.CONF, 1),
    (True, r"/etc/bind/db\.[^/]+$", partial(data.bindzone, default=FileType.BINDZONE), 1),
    (True, r"/var/named/[^/]+$", data.bindzone, None),
    (True, r"/\.git/modules/.+/config$", FileType.GITCONFIG, None),
    (True, r"/openfoam/.+$", data.foam, None),
    (True, r"/(usr/)?share/X11/app-defaults/[^/]+$", FileType.XDEFAULTS, None),
    # After the path-suffix stage
    (True, r"^.*\.git/.*$", ops.git, -1),
    (False, r"^.+~$", ops.tmp, -1),
    (False, r"^[Dd]ockerfile.*$", FileType.DOCKERFILE, -1),
    (False, r"^.*\.bash[-_].+$", FileType.BASH, -1),
    (False, r"^\.?zsh.*$", FileType.ZSH, -2),
    (False, r"^\.?bash.*$", FileType.BASH, -2),
    (False, r"^[Mm]akefile.*$", FileType.MAKE, -2),
    (False, r"^.*\.[Mm][Aa][Kk]$", FileType.MAKE, -2),
    (False, r"^[Cc]hange[Ll]og.*$", docs.changelog, -2),
    (False, r"^.+\.(ba|orig|old)k?\.[0-9]+$", ops.bak, -3),
    (False, r"^crontab\..+$", FileType.SH, -3),
    (True, r"/etc/profile\.d/.+\.sh$", scripting.sh, -3),
    (False, r"^.+\.conf$", FileType.CONF, LOWEST),
    (False, r"^.+\.conf\.[^/]+$", FileType.CONF, LOWEST),
    (False, r"^.+rc$", FileType.CONF, LOWEST),
    (False, r"^[Rr][Ee][Aa][Dd][Mm][Ee]([._-].*)?$", FileType.TEXT, LOWEST),
)

SOURCE = TableSource(
    name="editor",
    extensions=_EXTENSIONS,
    filenames=_FILENAMES,
    path_suffixes=_PATH_SUFFIXES,
    patterns=_PATTERNS,
)
