# topmark:header:start
#
#   project      : FtDetect
#   file         : test_audit.py
#   file_relpath : tests/filetypes/test_audit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the detection table audit."""

from __future__ import annotations

import pytest

from ftdetect.filetypes.audit import AuditReport, FindingKind, audit_tables, is_dead_suffix
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.tables import DetectionTables


@pytest.mark.parametrize(
    "suffix",
    ["/etc/*.conf", "/etc/?x", "/a/{b,c}", "/a/[ab]", "/usr/**/foo"],
)
def test_glob_suffixes_are_dead(suffix: str) -> None:
    assert is_dead_suffix(suffix)


def test_plain_suffix_is_alive() -> None:
    assert not is_dead_suffix("/etc/pacman.conf")


def test_audit_reports_each_defect_kind() -> None:
    def other(path: str, content: str) -> FileType | None:
        return None

    tables: DetectionTables = DetectionTables.build(
        extensions={".py": FileType.PYTHON, "": FileType.TEXT},
        filenames={"etc/hosts": FileType.CONF},
        path_suffixes=[("/etc/*.conf", FileType.CONF), ("/etc/ok", FileType.CONF)],
        patterns=[
            (False, r"^x$", FileType.C, 1),
            (False, r"^x$", other, None),
            (True, r"^y$", FileType.C, None),
            (True, r"^y$", FileType.C, -1),
            (False, r"^y$", FileType.CPP, None),
        ],
    )
    report: AuditReport = audit_tables(tables)

    assert not report.ok
    assert report.counts() == {
        "dotted-extension": 1,
        "empty-key": 1,
        "filename-with-separator": 1,
        "dead-suffix": 1,
        "conflicting-pattern": 1,
        "redundant-pattern": 1,
    }
    conflicting = report.by_kind(FindingKind.CONFLICTING_PATTERN)
    assert conflicting[0].key == "^x$"
    assert conflicting[0].table == "patterns"


def test_audit_report_to_dict() -> None:
    tables: DetectionTables = DetectionTables.build(path_suffixes=[("/a/[b]", FileType.C)])
    payload = audit_tables(tables).to_dict()

    assert payload["ok"] is False
    assert payload["counts"] == {"dead-suffix": 1}
    assert payload["findings"][0]["key"] == "/a/[b]"


def test_empty_tables_audit_clean() -> None:
    assert audit_tables(DetectionTables()).ok
