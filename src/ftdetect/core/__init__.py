# topmark:header:start
#
#   project      : FtDetect
#   file         : __init__.py
#   file_relpath : src/ftdetect/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core helpers shared across FtDetect layers."""

from __future__ import annotations
