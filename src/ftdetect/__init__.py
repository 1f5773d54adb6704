# topmark:header:start
#
#   project      : FtDetect
#   file         : __init__.py
#   file_relpath : src/ftdetect/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtDetect package.

FtDetect classifies a path (and, lazily, a bounded sample of its content)
into a file type token, using layered editor-style detection tables:
filename, extension, path-suffix and priority-sorted regex patterns, each
entry resolving statically or through a content-sniffing detector.

Typical use:

```python
import ftdetect

ftdetect.detect("build/Dockerfile")                  # FileType.DOCKERFILE
ftdetect.detect("run", b"#!/usr/bin/env bash\\n")    # FileType.BASH
ftdetect.explain("src/app.h", ftdetect.file_content("src/app.h")).stage
```
"""

from __future__ import annotations

from ftdetect.constants import FTDETECT_VERSION
from ftdetect.filetypes.audit import AuditReport, Finding, FindingKind, audit_tables
from ftdetect.filetypes.base import (
    LOWEST,
    ContentUnavailableError,
    Dynamic,
    Pattern,
    Phase,
    Priority,
    Static,
    TableBuildError,
    first_of,
)
from ftdetect.filetypes.content import ContentSample, file_content, is_binary
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.pipeline import (
    Detection,
    Stage,
    detect,
    detect_stream,
    explain,
    try_detect,
)
from ftdetect.filetypes.registry import TableRegistry
from ftdetect.filetypes.tables import (
    DetectionTables,
    TableSource,
    build_tables,
    builtin_sources,
    get_detection_tables,
)

__version__: str = FTDETECT_VERSION

__all__: list[str] = [
    "AuditReport",
    "ContentSample",
    "ContentUnavailableError",
    "Detection",
    "DetectionTables",
    "Dynamic",
    "FileType",
    "Finding",
    "FindingKind",
    "LOWEST",
    "Pattern",
    "Phase",
    "Priority",
    "Stage",
    "Static",
    "TableBuildError",
    "TableRegistry",
    "TableSource",
    "audit_tables",
    "build_tables",
    "builtin_sources",
    "detect",
    "detect_stream",
    "explain",
    "file_content",
    "first_of",
    "get_detection_tables",
    "is_binary",
    "try_detect",
]
