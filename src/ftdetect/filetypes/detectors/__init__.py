# topmark:header:start
#
#   project      : FtDetect
#   file         : __init__.py
#   file_relpath : src/ftdetect/filetypes/detectors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamic detectors.

Every detector has the signature ``(path: str, content: str) -> FileType | None``
and returns None to decline. Detectors never read files themselves; the
content argument is the lazily read, bounded sample of the lookup.
"""

from __future__ import annotations
