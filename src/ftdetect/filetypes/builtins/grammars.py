# topmark:header:start
#
#   project      : FtDetect
#   file         : grammars.py
#   file_relpath : src/ftdetect/filetypes/builtins/grammars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grammar overlay tables.

Layered on top of ``editor.py``: rules contributed by syntax-grammar
packages. Keys present in both layers take this layer's resolver.

Exports:
    SOURCE (TableSource): The ``grammars`` table layer.
"""

from __future__ import annotations

from functools import partial

from ..detectors import core_langs, data
from ..kinds import FileType
from ..tables import TableSource

_EXTENSIONS = {
    "ino": FileType.ARDUINO,
    "pde": FileType.ARDUINO,
    "djt": FileType.DJANGO,
    "jinja.html": FileType.JINJA,
    "html.j2": FileType.JINJA,
    "html.twig": FileType.TWIG,
    "d.ts": FileType.TYPESCRIPT,
    "d.mts": FileType.TYPESCRIPT,
    "d.cts": FileType.TYPESCRIPT,
    "tfvars.json": FileType.JSON,
    "code-workspace": FileType.JSONC,
    "code-snippets": FileType.JSONC,
    "tfstate": FileType.JSON,
    # Grammar packages read `*.pro` as Prolog when cproto output is not evident.
    "pro": partial(core_langs.proto, default=FileType.PROLOG),
    "named": data.bindzone,
}

_FILENAMES = {
    "build.xml": FileType.ANT,
    "devcontainer.json": FileType.JSONC,
    ".devcontainer.json": FileType.JSONC,
    "launch.json": FileType.JSONC,
    "keybindings.json": FileType.JSONC,
    "deno.json": FileType.JSONC,
    "bun.lock": FileType.JSONC,
    ".luaurc": FileType.JSON,
    "gleam.toml": FileType.TOML,
}

_PATH_SUFFIXES = (
    ("/etc/yum.conf", FileType.CONFINI),
    ("/etc/containers/registries.conf", FileType.TOML),
    ("/.config/containers/containers.conf", FileType.TOML),
    ("/.config/fish/fish_variables", FileType.FISH),
)

_PATTERNS = (
    (False, r"^.+\.(djhtml|django)$", FileType.HTMLDJANGO, None),
    (True, r"/\.vscode/[^/]+\.json$", FileType.JSONC, 2),
)

SOURCE = TableSource(
    name="grammars",
    extensions=_EXTENSIONS,
    filenames=_FILENAMES,
    path_suffixes=_PATH_SUFFIXES,
    patterns=_PATTERNS,
)
