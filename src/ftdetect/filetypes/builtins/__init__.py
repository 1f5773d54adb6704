# topmark:header:start
#
#   project      : FtDetect
#   file         : __init__.py
#   file_relpath : src/ftdetect/filetypes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in detection table layers.

Each submodule exports a ``SOURCE`` [`ftdetect.filetypes.tables.TableSource`][].
[`ftdetect.filetypes.tables.builtin_sources`][] imports them lazily, in merge
order (``editor`` first, then the ``grammars`` overlay).
"""

from __future__ import annotations
