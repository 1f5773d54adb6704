# topmark:header:start
#
#   project      : FtDetect
#   file         : test_builtin_scenarios.py
#   file_relpath : tests/filetypes/test_builtin_scenarios.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end detection scenarios against the built-in tables."""

from __future__ import annotations

import pytest

from ftdetect.filetypes.audit import AuditReport, audit_tables
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.pipeline import Stage, detect, explain
from ftdetect.filetypes.tables import get_detection_tables

pytestmark = pytest.mark.integration


@pytest.mark.parametrize(
    ("path", "content", "expected", "stage"),
    [
        ("build/Dockerfile", None, FileType.DOCKERFILE, Stage.FILENAME),
        ("makefile", None, FileType.MAKE, Stage.FILENAME),
        ("Dockerfile.dev", None, FileType.DOCKERFILE, Stage.PRE_EXTENSION),
        ("deploy.sh", "#!/usr/bin/env bash\necho hi\n", FileType.BASH, Stage.EXTENSION),
        ("deploy.sh", "echo hi\n", FileType.SH, Stage.EXTENSION),
        ("/etc/zsh/zprofile", None, FileType.ZSH, Stage.PATH_SUFFIX),
        ("/etc/pacman.conf", None, FileType.CONFINI, Stage.PATH_SUFFIX),
        ("/etc/yum.conf", None, FileType.CONFINI, Stage.PATH_SUFFIX),
        ("/repo/.git/HEAD", "ref: refs/heads/main\n", FileType.GIT, Stage.POST_EXTENSION),
        ("types/index.d.ts", None, FileType.TYPESCRIPT, Stage.EXTENSION),
        ("proj/.vscode/settings.json", "{}", FileType.JSONC, Stage.PRE_EXTENSION),
        ("configure.in", None, FileType.CONFIG, Stage.FILENAME),
        ("include/app.h", "#import <Foundation/Foundation.h>\n", FileType.OBJC, Stage.EXTENSION),
        ("tool", "#!/usr/bin/env python3\n", FileType.PYTHON, Stage.SHEBANG),
    ],
)
def test_builtin_scenarios(
    path: str, content: str | None, expected: FileType, stage: Stage
) -> None:
    detection = explain(path, content)
    assert detection.filetype is expected, detection.to_dict()
    assert detection.stage is stage


def test_unmatched_path_defaults_to_text() -> None:
    detection = explain("notes/random_file_without_ext")
    assert detection.filetype is None
    assert detect("notes/random_file_without_ext") is FileType.TEXT


def test_git_pattern_declines_on_unknown_content() -> None:
    """The ``.git/`` pattern declines for unrecognized files, leaving the default."""
    detection = explain("/repo/.git/description", "Unnamed repository\n")
    assert detection.filetype is None
    assert any(d.stage is Stage.POST_EXTENSION for d in detection.declined)


def test_backup_name_is_retried_without_extension() -> None:
    detection = explain("src/main.c.bak")
    assert detection.filetype is FileType.C
    assert detection.stage is Stage.EXTENSION
    assert detection.key == "bak"


def test_backup_retry_reaches_path_suffix() -> None:
    """The suffix table does not match ``pacman.conf.bak`` but the backup retry does."""
    assert detect("/etc/pacman.conf.bak") is FileType.CONFINI


def test_editor_backup_tilde_is_retried() -> None:
    assert detect("script.py~") is FileType.PYTHON


def test_catch_all_conf_is_last() -> None:
    detection = explain("/opt/app/settings.conf")
    assert detection.filetype is FileType.CONF
    assert detection.stage is Stage.POST_EXTENSION


def test_builtin_tables_audit_clean() -> None:
    report: AuditReport = audit_tables(get_detection_tables())
    assert report.ok, [f.to_dict() for f in report.findings]


def test_builtin_tables_are_cached() -> None:
    assert get_detection_tables() is get_detection_tables()
