# topmark:header:start
#
#   project      : FtDetect
#   file         : test_pipeline.py
#   file_relpath : tests/filetypes/test_pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the detection pipeline: stage precedence, declining and lazy content."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftdetect.filetypes.base import LOWEST, Dynamic, Static
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.pipeline import (
    Stage,
    compound_extensions,
    detect,
    detect_stream,
    explain,
    extension_of,
    filename_of,
    normalize_path,
    try_detect,
)
from ftdetect.filetypes.registry import TableRegistry
from ftdetect.filetypes.tables import DetectionTables


class CountingSource:
    """Content accessor that records how often it was invoked."""

    def __init__(self, result: str | bytes = "") -> None:
        self.result: str | bytes = result
        self.calls = 0

    def __call__(self) -> str | bytes:
        self.calls += 1
        return self.result


def _decline(path: str, content: str) -> FileType | None:
    return None


def _needs_content(path: str, content: str) -> FileType | None:
    return FileType.PYTHON if "import" in content else None


def test_pre_extension_pattern_beats_filename() -> None:
    tables: DetectionTables = DetectionTables.build(
        filenames={"build": FileType.MAKE},
        patterns=[(False, r"^build$", FileType.BZL, None)],
    )
    detection = explain("src/build", tables=tables)

    assert detection.filetype is FileType.BZL
    assert detection.stage is Stage.PRE_EXTENSION


def test_filename_beats_post_extension_pattern() -> None:
    tables: DetectionTables = DetectionTables.build(
        filenames={"build": FileType.MAKE},
        patterns=[(False, r"^build$", FileType.BZL, -1)],
    )
    assert detect("src/build", tables=tables) is FileType.MAKE


def test_extension_beats_path_suffix() -> None:
    tables: DetectionTables = DetectionTables.build(
        extensions={"conf": FileType.CONF},
        path_suffixes=[("/etc/app.conf", FileType.TOML)],
    )
    detection = explain("/etc/app.conf", tables=tables)
    assert detection.filetype is FileType.CONF
    assert detection.stage is Stage.EXTENSION
    assert detection.key == "conf"


def test_path_suffix_beats_post_extension_pattern() -> None:
    tables: DetectionTables = DetectionTables.build(
        path_suffixes=[("/etc/zsh/zprofile", FileType.ZSH)],
        patterns=[(False, r"^.+$", FileType.TEXT, LOWEST)],
    )
    assert detect("/etc/zsh/zprofile", tables=tables) is FileType.ZSH
    assert detect("/etc/other", tables=tables) is FileType.TEXT


def test_declined_entry_continues_with_next_stage() -> None:
    tables: DetectionTables = DetectionTables.build(
        filenames={"app.x": _decline},
        extensions={"x": _decline},
        path_suffixes=[("/app.x", FileType.C)],
    )
    detection = explain("/src/app.x", tables=tables)

    assert detection.filetype is FileType.C
    assert detection.stage is Stage.PATH_SUFFIX
    assert [(d.stage, d.key) for d in detection.declined] == [
        (Stage.FILENAME, "app.x"),
        (Stage.EXTENSION, "x"),
    ]


def test_declining_pattern_continues_with_lower_priority_pattern() -> None:
    tables: DetectionTables = DetectionTables.build(
        patterns=[
            (False, r"\.x$", _decline, 10),
            (False, r"\.x$", FileType.LUA, 5),
        ],
    )
    assert try_detect("a.x", tables=tables) is FileType.LUA


def test_no_match_yields_none_and_default() -> None:
    tables = DetectionTables()
    assert try_detect("whatever", tables=tables, shebang_fallback=False) is None
    assert detect("whatever", tables=tables, shebang_fallback=False) is FileType.TEXT
    assert detect("whatever", tables=tables, default=FileType.CONF) is FileType.CONF


def test_content_accessor_invoked_at_most_once() -> None:
    tables: DetectionTables = DetectionTables.build(
        patterns=[(False, r"\.py$", _needs_content, 1)],
        extensions={"py": _needs_content},
        path_suffixes=[(".py", _needs_content)],
    )
    source = CountingSource("print('hello')\n")
    assert try_detect("a.py", source, tables=tables, shebang_fallback=True) is None
    assert source.calls == 1


def test_static_lookup_never_reads_content() -> None:
    tables: DetectionTables = DetectionTables.build(extensions={"py": FileType.PYTHON})
    source = CountingSource("irrelevant")
    assert detect("a.py", source, tables=tables) is FileType.PYTHON
    assert source.calls == 0


def test_accessor_failure_declines_and_never_raises() -> None:
    def failing() -> bytes:
        raise OSError("permission denied")

    tables: DetectionTables = DetectionTables.build(
        extensions={"py": _needs_content},
        path_suffixes=[("a.py", FileType.RUBY)],
    )
    detection = explain("a.py", failing, tables=tables)

    assert detection.filetype is FileType.RUBY
    assert detection.declined[0].stage is Stage.EXTENSION


def test_missing_file_accessor_yields_default(tmp_path: Path) -> None:
    from ftdetect.filetypes.content import file_content

    missing: Path = tmp_path / "nope.py"
    tables: DetectionTables = DetectionTables.build(extensions={"py": _needs_content})
    assert detect(missing, file_content(missing), tables=tables) is FileType.TEXT


def test_none_content_is_empty_string() -> None:
    seen: list[str] = []

    def record(path: str, content: str) -> FileType | None:
        seen.append(content)
        return None

    tables: DetectionTables = DetectionTables.build(extensions={"x": record})
    try_detect("a.x", None, tables=tables, shebang_fallback=False)
    assert seen == [""]


def test_content_is_truncated_to_max_bytes() -> None:
    seen: list[str] = []

    def record(path: str, content: str) -> FileType | None:
        seen.append(content)
        return None

    tables: DetectionTables = DetectionTables.build(extensions={"x": record})
    try_detect("a.x", b"a" * 100, tables=tables, max_bytes=10, shebang_fallback=False)
    assert seen == ["a" * 10]


def test_compound_extension_before_simple() -> None:
    tables: DetectionTables = DetectionTables.build(
        extensions={"erb": FileType.HTML, "js.erb": FileType.JAVASCRIPT},
    )
    detection = explain("app/assets/main.js.erb", tables=tables)
    assert detection.filetype is FileType.JAVASCRIPT
    assert detection.key == "js.erb"
    assert detect("page.html.erb", tables=tables) is FileType.HTML


def test_extension_matching_is_case_sensitive() -> None:
    tables: DetectionTables = DetectionTables.build(extensions={"c": FileType.C})
    assert try_detect("main.C", tables=tables, shebang_fallback=False) is None


def test_shebang_fallback() -> None:
    tables = DetectionTables()
    detection = explain("bin/tool", "#!/usr/bin/env python3\nprint()\n", tables=tables)
    assert detection.filetype is FileType.PYTHON
    assert detection.stage is Stage.SHEBANG

    assert try_detect("bin/tool", "#!/bin/bash\n", tables=tables, shebang_fallback=False) is None


def test_detection_to_dict() -> None:
    tables: DetectionTables = DetectionTables.build(filenames={"Makefile": FileType.MAKE})
    record = explain("Makefile", tables=tables).to_dict()
    assert record == {
        "path": "Makefile",
        "filetype": "make",
        "stage": "filename",
        "key": "Makefile",
        "resolver": "Static(make)",
        "declined": [],
    }


def test_registry_tables_are_used_by_default() -> None:
    custom: DetectionTables = DetectionTables.build(extensions={"zz": FileType.ZIG})
    assert try_detect("a.zz", shebang_fallback=False) is None
    with TableRegistry.using(custom):
        assert detect("a.zz") is FileType.ZIG
    assert try_detect("a.zz", shebang_fallback=False) is None


def test_registry_swap_returns_previous() -> None:
    custom = DetectionTables()
    previous: DetectionTables = TableRegistry.swap(custom)
    assert TableRegistry.active() is custom
    TableRegistry.reset()
    assert TableRegistry.active() is previous


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("foo.js.erb", ["js.erb"]),
        ("a.b.c.d.e.f", ["c.d.e.f", "d.e.f", "e.f"]),
        ("foo.c", []),
        ("Makefile", []),
        (".bashrc.local", ["bashrc.local"]),
        ("x..y", []),
    ],
)
def test_compound_extensions(name: str, expected: list[str]) -> None:
    assert compound_extensions(name) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [("main.c", "c"), ("Makefile", None), (".bashrc", None), ("trailing.", None), ("a.b.c", "c")],
)
def test_extension_of(name: str, expected: str | None) -> None:
    assert extension_of(name) == expected


def test_path_helpers() -> None:
    assert filename_of("/etc/zsh/zprofile") == "zprofile"
    assert filename_of("dir/") == "dir"
    assert normalize_path(Path("a") / "b") == "a/b"


_NAMES = st.sampled_from(["Makefile", "a.py", "x.h", "b.bak", "c~", "d.js.erb", "e", ".zshrc"])
_DIRS = st.sampled_from(["", "src/", "/etc/", "/repo/.git/", "/etc/zsh/"])
_CONTENT = st.sampled_from(["", "#!/bin/sh\n", "#include <x>\nclass A {};\n", "ref: refs/heads/x\n"])


@given(directory=_DIRS, name=_NAMES, content=_CONTENT)
def test_detection_is_deterministic(directory: str, name: str, content: str) -> None:
    path: str = directory + name
    first = explain(path, content)
    second = explain(path, content)
    assert first == second
    assert detect(path, content) is (first.filetype or FileType.TEXT)


def test_dynamic_resolver_describe() -> None:
    assert Dynamic(_decline).describe() == "Dynamic(_decline)"
    assert Static(FileType.C).describe() == "Static(c)"


class _Unseekable(io.BytesIO):
    def seekable(self) -> bool:
        return False


def test_detect_stream_rewinds_seekable_stream() -> None:
    tables: DetectionTables = DetectionTables.build(extensions={"py": FileType.PYTHON})
    stream = io.BytesIO(b"#!/bin/sh\necho hi\n")

    filetype, head = detect_stream("tool", stream, tables=tables)

    assert filetype is FileType.SH
    assert head == b"#!/bin/sh\necho hi\n"
    assert stream.tell() == 0


def test_detect_stream_leaves_stream_untouched_for_static_rules() -> None:
    tables: DetectionTables = DetectionTables.build(extensions={"py": FileType.PYTHON})
    stream = _Unseekable(b"import os\n")

    assert detect_stream("a.py", stream, tables=tables) == (FileType.PYTHON, b"")
    assert stream.read() == b"import os\n"


def test_detect_stream_returns_consumed_head_of_unseekable_stream() -> None:
    tables = DetectionTables()
    stream = _Unseekable(b"#!/bin/sh\nrest")

    filetype, head = detect_stream("tool", stream, tables=tables, max_bytes=12)

    assert filetype is FileType.SH
    assert head == b"#!/bin/sh\nre"
    assert head + stream.read() == b"#!/bin/sh\nrest"
