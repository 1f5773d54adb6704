# topmark:header:start
#
#   project      : FtDetect
#   file         : __init__.py
#   file_relpath : src/ftdetect/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File type detection engine.

This package holds the `FileType` token set, the resolver and table types,
the detection pipeline, the table audit, the built-in table data
(`ftdetect.filetypes.builtins`) and the dynamic detectors
(`ftdetect.filetypes.detectors`).
"""

from __future__ import annotations
