# topmark:header:start
#
#   project      : FtDetect
#   file         : __init__.py
#   file_relpath : src/ftdetect/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for FtDetect: logging, TOML loading and the `Config` model.

Submodules are imported directly (``ftdetect.config.model``...); this package
does not re-export them, since the detection modules import
``ftdetect.config.logging`` and must not pull in the config model.
"""

from __future__ import annotations
