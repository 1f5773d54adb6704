# topmark:header:start
#
#   project      : FtDetect
#   file         : kinds.py
#   file_relpath : src/ftdetect/filetypes/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The FileType token set.

`FileType` is an opaque, enumerable classification token. Its `.value` is the
canonical key used for (de)serialization (``str(ft)``); ``FileType.parse()``
accepts the canonical key, the member name and any alias, case-insensitively.

The members follow editor filetype names (``"sh"``, ``"cpp"``, ``"dosini"``...)
so that table data can be compared against editor filetype tables directly.
"""

from __future__ import annotations

from ftdetect.core.enum_mixins import KeyedStrEnum


class FileType(KeyedStrEnum):
    """Classification token produced by the detection pipeline.

    ``TEXT`` is the default member, substituted by
    [`ftdetect.filetypes.pipeline.detect`][] when no rule produced a verdict.
    """

    TEXT = ("text", "plain-text", "plaintext", "fundamental", "txt")

    ABAQUS = "abaqus"
    ADA = "ada"
    AMPL = "ampl"
    ANT = "ant"
    APACHE = "apache"
    APEX = "apex"
    ARDUINO = "arduino"
    ASCIIDOC = ("asciidoc", "adoc")
    ASM = ("asm", "assembly")
    ASPPERL = "aspperl"
    ASPVBS = "aspvbs"
    ASTRO = "astro"
    AUTOHOTKEY = ("autohotkey", "ahk")
    AWK = "awk"
    BASH = "bash"
    BASIC = "basic"
    BAT = ("dosbatch", "bat", "batch", "cmd")
    BC = "bc"
    BIB = ("bib", "bibtex")
    BICEP = "bicep"
    BINDZONE = ("bindzone", "dns-zone")
    BITBAKE = "bitbake"
    BTM = "btm"
    BZL = ("bzl", "starlark", "bazel")
    C = "c"
    CABAL = "cabal"
    CADDYFILE = "caddyfile"
    CFG = "cfg"
    CH = "ch"
    CHANGE = "change"
    CHANGELOG = "changelog"
    CHARITY = "charity"
    CHILL = "chill"
    CL = "cl"
    CLIPPER = "clipper"
    CLOJURE = ("clojure", "clj")
    CMAKE = "cmake"
    COBOL = "cobol"
    COFFEE = ("coffee", "coffeescript")
    CONF = "conf"
    CONFIG = ("config", "autoconf")
    CONFINI = ("confini", "ini-conf")
    CONTEXT = "context"
    COQ = "coq"
    CPP = ("cpp", "c++", "cxx")
    CRYSTAL = "crystal"
    CS = ("cs", "csharp", "c#")
    CSH = "csh"
    CSS = "css"
    CSV = "csv"
    CUDA = "cuda"
    CWEB = "cweb"
    CYNLIB = "cynlib"
    D = ("d", "dlang")
    DART = "dart"
    DEBCHANGELOG = "debchangelog"
    DEBCONTROL = "debcontrol"
    DEBCOPYRIGHT = "debcopyright"
    DEBSOURCES = "debsources"
    DEP3PATCH = "dep3patch"
    DIFF = ("diff", "patch")
    DIVA = "diva"
    DJANGO = "django"
    DOCKERFILE = ("dockerfile", "docker", "containerfile")
    DOSINI = ("dosini", "ini")
    DOT = ("dot", "graphviz")
    DTD = "dtd"
    DTRACE = "dtrace"
    DSL = "dsl"
    EDIF = "edif"
    EDITORCONFIG = "editorconfig"
    EDN = "edn"
    EIFFEL = "eiffel"
    ELIXIR = ("elixir", "ex")
    ELM = "elm"
    ELVISH = "elvish"
    ERLANG = ("erlang", "erl")
    EUPHORIA3 = "euphoria3"
    FISH = "fish"
    FOAM = "foam"
    FORM = "form"
    FORTH = "forth"
    FORTRAN = "fortran"
    FREEBASIC = "freebasic"
    FSHARP = ("fsharp", "f#")
    FSTAB = "fstab"
    FVWM = "fvwm"
    FVWM2M4 = "fvwm2m4"
    GAP = "gap"
    GDSCRIPT = "gdscript"
    GDSHADER = "gdshader"
    GIT = "git"
    GITATTRIBUTES = "gitattributes"
    GITCOMMIT = "gitcommit"
    GITCONFIG = "gitconfig"
    GITIGNORE = "gitignore"
    GITREBASE = "gitrebase"
    GITSENDEMAIL = "gitsendemail"
    GLEAM = "gleam"
    GLSL = "glsl"
    GO = ("go", "golang")
    GOMOD = "gomod"
    GOSUM = "gosum"
    GOWORK = "gowork"
    GPG = "gpg"
    GRAPHQL = ("graphql", "gql")
    GROOVY = "groovy"
    GROUP = "group"
    HAML = "haml"
    HAPROXY = "haproxy"
    HASKELL = ("haskell", "hs")
    HCL = "hcl"
    HELP = ("help", "vimhelp")
    HEEX = "heex"
    HOG = "hog"
    HOSTCONF = "hostconf"
    HOSTSACCESS = "hostsaccess"
    HTML = ("html", "xhtml5")
    HTMLDJANGO = ("htmldjango", "jinja-html")
    HURL = "hurl"
    ICON = "icon"
    IDL = "idl"
    INITTAB = "inittab"
    ISHD = ("ishd", "installshield")
    JAVA = "java"
    JAVASCRIPT = ("javascript", "js", "node")
    JAVASCRIPTREACT = ("javascriptreact", "jsx")
    JINJA = ("jinja", "jinja2", "j2")
    JQ = "jq"
    JSON = "json"
    JSON5 = "json5"
    JSONC = ("jsonc", "json-with-comments")
    JSONNET = "jsonnet"
    JSONL = ("jsonl", "ndjson")
    JULIA = ("julia", "jl")
    JUST = ("just", "justfile")
    KCONFIG = "kconfig"
    KDL = "kdl"
    KOTLIN = ("kotlin", "kt")
    KRL = "krl"
    KSH = "ksh"
    LARCH = "larch"
    LATEX = "latex"
    LDIF = "ldif"
    LESS = "less"
    LIMBO = "limbo"
    LISP = ("lisp", "common-lisp")
    LPC = "lpc"
    LPROLOG = ("lprolog", "lambda-prolog")
    LSL = "lsl"
    LUA = "lua"
    LUAU = "luau"
    M4 = "m4"
    MAIL = "mail"
    MAILCAP = "mailcap"
    MAKE = ("make", "makefile", "gnumake", "bsdmake")
    MAN = "man"
    MARKDOWN = ("markdown", "md")
    MASON = "mason"
    MATLAB = "matlab"
    MDX = "mdx"
    MERMAID = "mermaid"
    MESON = "meson"
    MIB = "mib"
    MMA = ("mma", "mathematica", "wolfram")
    MODSIM3 = "modsim3"
    MODULA2 = "modula2"
    MOJO = "mojo"
    MSIDL = "msidl"
    MSMESSAGES = "msmessages"
    MUMPS = "mumps"
    MURPHI = "murphi"
    MUTTRC = "muttrc"
    MYSQL = "mysql"
    NASM = "nasm"
    NGINX = "nginx"
    NIM = "nim"
    NINJA = "ninja"
    NIX = "nix"
    NROFF = ("nroff", "groff", "troff", "roff")
    NSIS = "nsis"
    OBJC = ("objc", "objective-c")
    OBJCPP = ("objcpp", "objective-c++")
    OCAML = ("ocaml", "ml")
    OCTAVE = "octave"
    ODIN = "odin"
    OPENSCAD = "openscad"
    ORG = ("org", "org-mode")
    PAMCONF = "pamconf"
    PASCAL = ("pascal", "delphi")
    PASSWD = "passwd"
    PAWN = "pawn"
    PERL = ("perl", "pl")
    PHP = "php"
    PLAINTEX = "plaintex"
    PO = ("po", "gettext")
    POV = ("pov", "povray")
    POWERSHELL = ("ps1", "powershell", "pwsh")
    PROGRESS = "progress"
    PROLOG = "prolog"
    PROPERTIES = ("jproperties", "properties", "java-properties")
    PROTO = ("proto", "protobuf")
    PSF = "psf"
    PUG = ("pug", "jade")
    PUPPET = "puppet"
    PURESCRIPT = "purescript"
    PYTHON = ("python", "py", "python3")
    QB64 = "qb64"
    QML = "qml"
    QUERY = ("query", "tsq", "treesitter-query")
    R = "r"
    RACC = "racc"
    RACKET = "racket"
    RAKU = ("raku", "perl6")
    RAPID = "rapid"
    RC = "rc"
    READLINE = ("readline", "inputrc")
    REBOL = "rebol"
    REDIF = "redif"
    REGISTRY = ("registry", "reg")
    REXX = "rexx"
    RMD = ("rmd", "rmarkdown")
    RST = ("rst", "restructuredtext")
    RUBY = ("ruby", "rb")
    RUST = ("rust", "rs")
    SASS = "sass"
    SCALA = "scala"
    SCHEME = ("scheme", "scm")
    SCDOC = "scdoc"
    SCSS = "scss"
    SED = "sed"
    SGML = "sgml"
    SGMLDECL = "sgmldecl"
    SGMLLNX = "sgmllnx"
    SH = ("sh", "shell", "posix-shell")
    SIL = "sil"
    SILE = "sile"
    SLIM = "slim"
    SML = "sml"
    SMIL = "smil"
    SOLIDITY = "solidity"
    SOURCEPAWN = "sourcepawn"
    SPEC = ("spec", "rpmspec")
    SPECMAN = "specman"
    SQL = "sql"
    SSHCONFIG = ("sshconfig", "ssh-config")
    SSHDCONFIG = "sshdconfig"
    ST = ("st", "smalltalk")
    STRUCTURIZR = "structurizr"
    SUDOERS = "sudoers"
    SUPERCOLLIDER = "supercollider"
    SVELTE = "svelte"
    SVG = "svg"
    SWIFT = "swift"
    SYSTEMD = "systemd"
    SYSTEMVERILOG = ("systemverilog", "sv")
    TCL = "tcl"
    TCSH = "tcsh"
    TEMPL = "templ"
    TERRAFORM_VARS = ("terraform-vars", "tfvars")
    TERATERM = "teraterm"
    TERRA = "terra"
    TERRAFORM = ("terraform", "tf-config")
    TEX = "tex"
    TEXINFO = "texinfo"
    TF = "tf"
    THRIFT = "thrift"
    TMUX = "tmux"
    TOML = "toml"
    TRASYS = "trasys"
    TSX = ("typescriptreact", "tsx")
    TSV = "tsv"
    TURTLE = "turtle"
    TWIG = "twig"
    TYPESCRIPT = ("typescript", "ts")
    TYPST = ("typst", "typ")
    UDEVCONF = "udevconf"
    UDEVRULES = ("udevrules", "udev")
    UPSTREAMDAT = "upstreamdat"
    UPSTREAMINSTALLLOG = "upstreaminstalllog"
    UPSTREAMLOG = "upstreamlog"
    USSERVERLOG = "usserverlog"
    USW2KAGTLOG = "usw2kagtlog"
    V = ("v", "vlang")
    VB = ("vb", "vbnet", "visual-basic")
    VERILOG = "verilog"
    VHDL = "vhdl"
    VIM = ("vim", "vimscript", "viml")
    VIRATA = "virata"
    VMASM = "vmasm"
    VUE = "vue"
    WEB = "web"
    WGSL = "wgsl"
    WINBATCH = "winbatch"
    XBL = "xbl"
    XDEFAULTS = ("xdefaults", "xresources")
    XF86CONF = "xf86conf"
    XF86CONF3 = "xf86conf-3"
    XHTML = "xhtml"
    XML = ("xml", "rss", "wsdl")
    XMODMAP = "xmodmap"
    XPM = "xpm"
    XPM2 = "xpm2"
    XSD = "xsd"
    XSLT = ("xslt", "xsl")
    YACC = ("yacc", "bison")
    YAML = ("yaml", "yml")
    ZIG = "zig"
    ZSH = "zsh"
    DOCBKSGML = "docbksgml"
    DOCBKXML = "docbkxml"

    @classmethod
    def default(cls) -> FileType:
        """Return the default classification (plain text)."""
        return cls.TEXT
