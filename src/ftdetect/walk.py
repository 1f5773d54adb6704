# topmark:header:start
#
#   project      : FtDetect
#   file         : walk.py
#   file_relpath : src/ftdetect/walk.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Walk directory trees for the ``breakdown`` command.

The walker yields regular files below a root directory in a deterministic
(sorted) order. ``.gitignore`` files found along the way are honored with
gitignore semantics (``pathspec``'s ``GitWildMatchPattern``), each evaluated
relative to the directory that contains it. VCS metadata directories such
as ``.git/`` are always skipped.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from ftdetect.config.logging import get_logger
from ftdetect.constants import ALWAYS_SKIPPED_DIRS, GITIGNORE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ftdetect.config.logging import FtdetectLogger

logger: FtdetectLogger = get_logger(__name__)


def load_patterns_from_file(path: Path) -> list[str]:
    """Load non-empty, non-comment patterns from a gitignore-style file."""
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Cannot read patterns from '%s': %s", path, e)
        return []
    patterns: list[str] = []
    for line in text.splitlines():
        s: str = line.strip()
        if not s or s.startswith("#"):
            continue
        patterns.append(s)
    logger.debug("Loaded %d pattern(s) from %s", len(patterns), path)
    return patterns


class _IgnoreStack:
    """PathSpecs collected from the root down to the current directory.

    Configured excludes are checked first and cannot be re-included by a
    ``.gitignore`` negation.
    """

    def __init__(self, root: Path, exclude: Iterable[str]) -> None:
        self.root: Path = root
        self.exclude: PathSpec = PathSpec.from_lines(GitWildMatchPattern, exclude)
        self.specs: list[tuple[Path, PathSpec]] = []

    def push_gitignore(self, directory: Path) -> None:
        gitignore: Path = directory / GITIGNORE_NAME
        if gitignore.is_file():
            patterns: list[str] = load_patterns_from_file(gitignore)
            if patterns:
                self.specs.append((directory, PathSpec.from_lines(GitWildMatchPattern, patterns)))

    def ignored(self, path: Path, *, is_dir: bool) -> bool:
        """Return whether `path` is ignored; the last matching pattern wins.

        Patterns are evaluated from the root down, so a deeper ``.gitignore``
        can re-include (``!name``) what a parent ignored.
        """
        rel_root: str = path.relative_to(self.root).as_posix() + ("/" if is_dir else "")
        if self.exclude.match_file(rel_root):
            return True
        verdict: bool = False
        for base, spec in self.specs:
            try:
                rel: str = path.relative_to(base).as_posix()
            except ValueError:
                continue
            if is_dir:
                rel += "/"
            for pattern in spec.patterns:
                if pattern.include is not None and pattern.match_file(rel) is not None:
                    verdict = pattern.include
        return verdict

    def copy(self) -> _IgnoreStack:
        """Independent copy, so a subdirectory's .gitignore stays local to it."""
        clone: _IgnoreStack = _IgnoreStack.__new__(_IgnoreStack)
        clone.root = self.root
        clone.exclude = self.exclude
        clone.specs = list(self.specs)
        return clone


def iter_files(
    root: Path,
    *,
    exclude: Iterable[str] = (),
    respect_gitignore: bool = True,
) -> Iterator[Path]:
    """Yield the regular files below `root`, sorted per directory.

    Args:
        root (Path): Directory to walk (a file yields just itself).
        exclude (Iterable[str]): Extra gitignore-style patterns, relative to `root`.
        respect_gitignore (bool): Whether ``.gitignore`` files are honored.

    Yields:
        Path: Files that are neither ignored nor inside a skipped directory.
    """
    if root.is_file():
        yield root
        return

    base_stack = _IgnoreStack(root, exclude)
    stacks: dict[Path, _IgnoreStack] = {root: base_stack}
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        stack: _IgnoreStack = stacks.pop(current, base_stack)
        if respect_gitignore:
            stack.push_gitignore(current)

        kept_dirs: list[str] = []
        for name in sorted(dirnames):
            child: Path = current / name
            if name in ALWAYS_SKIPPED_DIRS:
                logger.trace("Skipping VCS directory %s", child)
                continue
            if stack.ignored(child, is_dir=True):
                logger.trace("Ignoring directory %s", child)
                continue
            kept_dirs.append(name)
            stacks[child] = stack.copy()
        dirnames[:] = kept_dirs

        for name in sorted(filenames):
            path: Path = current / name
            if stack.ignored(path, is_dir=False):
                logger.trace("Ignoring file %s", path)
                continue
            if path.is_file():
                yield path
