# topmark:header:start
#
#   project      : FtDetect
#   file         : test_tables.py
#   file_relpath : tests/filetypes/test_tables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for table construction: pattern sorting, suffix matching and layer merging."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftdetect.filetypes.base import LOWEST, Dynamic, Pattern, Phase, Static, TableBuildError
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.tables import (
    DetectionTables,
    ExactTable,
    PatternTable,
    SuffixTable,
    TableSource,
    build_tables,
    sort_patterns,
)


def _pattern(source: str, priority: object) -> Pattern:
    return Pattern.compile(False, source, FileType.TEXT, priority)


def test_sort_patterns_descending_with_phase_split() -> None:
    """[5, None, 5, -1, LOWEST] sorts to [5, 5, None] + [-1, LOWEST] with split 3."""
    patterns: list[Pattern] = [
        _pattern("a", 5),
        _pattern("b", None),
        _pattern("c", 5),
        _pattern("d", -1),
        _pattern("e", LOWEST),
    ]
    ordered, split = sort_patterns(patterns)

    assert [p.source for p in ordered] == ["a", "c", "b", "d", "e"]
    assert [p.priority for p in ordered] == [5, 5, None, -1, LOWEST]
    assert split == 3


def test_pattern_table_phase_slices() -> None:
    table = PatternTable([_pattern("late", -3), _pattern("early", 1), _pattern("last", LOWEST)])

    assert [p.source for p in table.phase_slice(Phase.PRE_EXTENSION)] == ["early"]
    assert [p.source for p in table.phase_slice(Phase.POST_EXTENSION)] == ["late", "last"]


def test_all_pre_extension_split_is_length() -> None:
    _ordered, split = sort_patterns([_pattern("a", 0), _pattern("b", None)])
    assert split == 2


def test_empty_pattern_table() -> None:
    table = PatternTable()
    assert len(table) == 0
    assert table.split == 0
    assert table.lookup("/x", "x", Phase.PRE_EXTENSION) is None


priorities = st.one_of(st.none(), st.integers(-5, 5), st.just(LOWEST))


@given(st.lists(priorities, max_size=12))
def test_sort_is_stable_and_partitions(prios: list[object]) -> None:
    """Equal priorities keep declaration order and the split partitions the phases."""
    patterns: list[Pattern] = [_pattern(f"p{i}", prio) for i, prio in enumerate(prios)]
    ordered, split = sort_patterns(patterns)

    assert sorted(p.source for p in ordered) == sorted(p.source for p in patterns)
    assert all(p.phase is Phase.PRE_EXTENSION for p in ordered[:split])
    assert all(p.phase is Phase.POST_EXTENSION for p in ordered[split:])
    for left, right in zip(ordered, ordered[1:]):
        if left.priority == right.priority:
            assert int(left.source[1:]) < int(right.source[1:])


def test_malformed_regex_raises_table_build_error() -> None:
    with pytest.raises(TableBuildError):
        PatternTable.from_entries([(False, r"([unclosed", FileType.TEXT, None)])


@pytest.mark.parametrize("bad", [True, 1.5, "high"])
def test_invalid_priority_raises_table_build_error(bad: object) -> None:
    with pytest.raises(TableBuildError):
        PatternTable.from_entries([(False, r"^x$", FileType.TEXT, bad)])


def test_suffix_table_plain_string_suffix() -> None:
    """Suffixes are a plain string test: no boundary check, no trailing text."""
    table = SuffixTable([("/etc/pacman.conf", FileType.CONFINI)])

    assert table.lookup("/etc/pacman.conf") == Static(FileType.CONFINI)
    assert table.lookup("/mnt/root/etc/pacman.conf") == Static(FileType.CONFINI)
    assert table.lookup("/etc/pacman.conf.bak") is None


def test_suffix_table_partial_segment_quirk() -> None:
    """A suffix without a leading separator also matches inside a segment."""
    table = SuffixTable([("zprofile", FileType.ZSH)])
    assert table.lookup("/home/u/.zprofile") == Static(FileType.ZSH)


def test_suffix_table_glob_syntax_never_matches() -> None:
    table = SuffixTable([("/etc/*.conf", FileType.CONF)])
    assert table.lookup("/etc/foo.conf") is None


def test_suffix_table_first_entry_wins() -> None:
    table = SuffixTable([("/b/c", FileType.C), ("/c", FileType.CPP)])
    assert table.lookup("/a/b/c") == Static(FileType.C)
    assert [s for s, _r in table.iter_matches("/a/b/c")] == ["/b/c", "/c"]


def test_exact_table_is_case_sensitive() -> None:
    table = ExactTable({"C": FileType.CPP, "c": FileType.C})
    assert table.lookup("C") == Static(FileType.CPP)
    assert table.lookup("c") == Static(FileType.C)
    assert table.lookup("cc") is None
    assert "C" in table
    assert len(table) == 2


def test_table_literals_become_resolvers() -> None:
    def detector(path: str, content: str) -> FileType | None:
        return None

    tables: DetectionTables = DetectionTables.build(
        extensions={"a": FileType.AWK, "b": detector},
        filenames={"x": Static(FileType.C)},
    )
    assert tables.extensions.lookup("a") == Static(FileType.AWK)
    assert tables.extensions.lookup("b") == Dynamic(detector)
    assert tables.filenames.lookup("x") == Static(FileType.C)
    assert tables.summary() == {"filenames": 1, "extensions": 2, "path_suffixes": 0, "patterns": 0}


def test_build_tables_later_layer_wins() -> None:
    base = TableSource(
        name="base",
        extensions={"h": FileType.C, "py": FileType.PYTHON},
        filenames={"Makefile": FileType.MAKE},
        path_suffixes=(("/etc/a", FileType.CONF), ("/etc/b", FileType.CONF)),
        patterns=((False, r"^x$", FileType.TEXT, None),),
    )
    overlay = TableSource(
        name="overlay",
        extensions={"h": FileType.CPP},
        path_suffixes=(("/etc/a", FileType.TOML), ("/etc/c", FileType.YAML)),
        patterns=((False, r"^x$", FileType.YAML, 1),),
    )
    tables: DetectionTables = build_tables(base, overlay)

    assert tables.extensions.lookup("h") == Static(FileType.CPP)
    assert tables.extensions.lookup("py") == Static(FileType.PYTHON)
    assert tables.filenames.lookup("Makefile") == Static(FileType.MAKE)
    # A replaced suffix keeps the position of its first occurrence.
    assert [(s, r) for s, r in tables.path_suffixes.entries] == [
        ("/etc/a", Static(FileType.TOML)),
        ("/etc/b", Static(FileType.CONF)),
        ("/etc/c", Static(FileType.YAML)),
    ]
    # Patterns are concatenated, never merged.
    assert len(tables.patterns) == 2
    assert tables.patterns.patterns[0].resolver == Static(FileType.YAML)
