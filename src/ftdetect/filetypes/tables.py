# topmark:header:start
#
#   project      : FtDetect
#   file         : tables.py
#   file_relpath : src/ftdetect/filetypes/tables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection tables: exact-match maps, the path-suffix list and the pattern list.

All tables are immutable after construction. `DetectionTables.build()` turns
the four static table sources into a ready-to-query table set;
`build_tables()` merges several `TableSource` layers (built-in editor data,
grammar overlay, user overrides) with last-writer-wins semantics.

The built-in table set is built lazily on first use and cached for the life
of the process (see `get_detection_tables()`).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import import_module
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Tuple, Union

from ftdetect.config.logging import FtdetectLogger, get_logger
from ftdetect.filetypes.base import (
    Pattern,
    Phase,
    TableBuildError,
    as_resolver,
    priority_sort_key,
)

if TYPE_CHECKING:
    from types import ModuleType

    from ftdetect.filetypes.base import DetectorFunc, PriorityValue, Resolver
    from ftdetect.filetypes.kinds import FileType

logger: FtdetectLogger = get_logger(__name__)

# Merge order: later modules override earlier ones.
_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "ftdetect.filetypes.builtins.editor",
    "ftdetect.filetypes.builtins.grammars",
)

# Table literal value: a bare FileType (Static), a resolver, or a detector function (Dynamic).
ResolverLike = Union["FileType", "Resolver", "DetectorFunc"]

# Pattern source entry: (matches_full_path, regex_source, resolver, priority).
PatternEntry = Tuple[bool, str, ResolverLike, "PriorityValue"]


@dataclass(frozen=True)
class TableSource:
    """One layer of static table data.

    Attributes:
        name (str): Layer name, used in log messages.
        extensions (Mapping[str, ResolverLike]): Bare extension -> resolver.
        filenames (Mapping[str, ResolverLike]): Final path component -> resolver.
        path_suffixes (Iterable[tuple[str, ResolverLike]]): Ordered suffix pairs.
        patterns (Iterable[PatternEntry]): Ordered pattern source entries.
    """

    name: str
    extensions: Mapping[str, ResolverLike] = field(default_factory=dict)
    filenames: Mapping[str, ResolverLike] = field(default_factory=dict)
    path_suffixes: Iterable[tuple[str, ResolverLike]] = ()
    patterns: Iterable[PatternEntry] = ()


class ExactTable:
    """Exact, case-sensitive key -> resolver map (filenames or extensions)."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, ResolverLike] | None = None) -> None:
        self._entries: Mapping[str, Resolver] = MappingProxyType(
            {key: as_resolver(value) for key, value in (entries or {}).items()}
        )

    def lookup(self, key: str) -> Resolver | None:
        return self._entries.get(key)

    def items(self) -> Iterable[tuple[str, Resolver]]:
        return self._entries.items()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class SuffixTable:
    """Ordered path-suffix list.

    A path matches an entry when it ends with the entry's suffix string. The
    comparison is a plain string suffix test with no path-boundary check, so
    entries should start with a separator to avoid partial-segment matches.
    """

    __slots__ = ("entries",)

    def __init__(self, entries: Iterable[tuple[str, ResolverLike]] = ()) -> None:
        self.entries: tuple[tuple[str, Resolver], ...] = tuple(
            (suffix, as_resolver(value)) for suffix, value in entries
        )

    def iter_matches(self, full_path: str) -> Iterator[tuple[str, Resolver]]:
        """Yield every matching `(suffix, resolver)` pair in table order."""
        for suffix, resolver in self.entries:
            if full_path.endswith(suffix):
                yield suffix, resolver

    def lookup(self, full_path: str) -> Resolver | None:
        """Return the resolver of the first matching entry, if any."""
        for _suffix, resolver in self.iter_matches(full_path):
            return resolver
        return None

    def __len__(self) -> int:
        return len(self.entries)


def sort_patterns(patterns: Iterable[Pattern]) -> tuple[tuple[Pattern, ...], int]:
    """Sort patterns by descending priority and compute the phase split index.

    The sort is stable, so entries of equal priority keep their declaration
    order. `None` sorts as 0; `Priority.LOWEST` sorts after every integer.

    Returns:
        tuple[tuple[Pattern, ...], int]: The sorted patterns and the index of
        the first post-extension entry (or the number of patterns).
    """
    ordered: tuple[Pattern, ...] = tuple(
        sorted(patterns, key=lambda p: priority_sort_key(p.priority), reverse=True)
    )
    split: int = len(ordered)
    for index, pattern in enumerate(ordered):
        if pattern.phase is Phase.POST_EXTENSION:
            split = index
            break
    return ordered, split


class PatternTable:
    """Priority-sorted pattern list with a pre/post-extension split."""

    __slots__ = ("patterns", "split")

    def __init__(self, patterns: Iterable[Pattern] = ()) -> None:
        self.patterns: tuple[Pattern, ...]
        self.split: int
        self.patterns, self.split = sort_patterns(patterns)

    @classmethod
    def from_entries(cls, entries: Iterable[PatternEntry]) -> PatternTable:
        """Compile pattern source entries.

        Raises:
            TableBuildError: On a malformed regex or invalid priority.
        """
        return cls(Pattern.compile(*entry) for entry in entries)

    def phase_slice(self, phase: Phase) -> tuple[Pattern, ...]:
        if phase is Phase.PRE_EXTENSION:
            return self.patterns[: self.split]
        return self.patterns[self.split :]

    def iter_matches(self, full_path: str, filename: str, phase: Phase) -> Iterator[Pattern]:
        """Yield every pattern of `phase` matching the path, in sorted order."""
        for pattern in self.phase_slice(phase):
            if pattern.matches(full_path, filename):
                yield pattern

    def lookup(self, full_path: str, filename: str, phase: Phase) -> Resolver | None:
        """Return the resolver of the first pattern of `phase` matching the path."""
        for pattern in self.iter_matches(full_path, filename, phase):
            return pattern.resolver
        return None

    def __len__(self) -> int:
        return len(self.patterns)


@dataclass(frozen=True)
class DetectionTables:
    """Immutable set of the four detection tables."""

    filenames: ExactTable = field(default_factory=ExactTable)
    extensions: ExactTable = field(default_factory=ExactTable)
    path_suffixes: SuffixTable = field(default_factory=SuffixTable)
    patterns: PatternTable = field(default_factory=PatternTable)

    @classmethod
    def build(
        cls,
        *,
        extensions: Mapping[str, ResolverLike] | None = None,
        filenames: Mapping[str, ResolverLike] | None = None,
        path_suffixes: Iterable[tuple[str, ResolverLike]] = (),
        patterns: Iterable[PatternEntry] = (),
    ) -> DetectionTables:
        """Build a table set from the four static table sources.

        Raises:
            TableBuildError: On a malformed pattern regex or invalid priority.
        """
        return cls(
            filenames=ExactTable(filenames),
            extensions=ExactTable(extensions),
            path_suffixes=SuffixTable(path_suffixes),
            patterns=PatternTable.from_entries(patterns),
        )

    def summary(self) -> dict[str, int]:
        """Return entry counts per table."""
        return {
            "filenames": len(self.filenames),
            "extensions": len(self.extensions),
            "path_suffixes": len(self.path_suffixes),
            "patterns": len(self.patterns),
        }


def build_tables(*sources: TableSource) -> DetectionTables:
    """Merge table source layers into a single `DetectionTables`.

    Later layers win: a duplicate extension, filename or path suffix replaces
    the earlier entry (path suffixes keep the position of their first
    occurrence). Patterns are concatenated in layer order and never merged;
    conflicting duplicates are reported by the audit.

    Raises:
        TableBuildError: On a malformed pattern regex or invalid priority.
    """
    extensions: dict[str, ResolverLike] = {}
    filenames: dict[str, ResolverLike] = {}
    suffixes: dict[str, ResolverLike] = {}
    patterns: list[PatternEntry] = []
    for source in sources:
        overridden: int = sum(1 for key in source.extensions if key in extensions)
        overridden += sum(1 for key in source.filenames if key in filenames)
        extensions.update(source.extensions)
        filenames.update(source.filenames)
        for suffix, value in source.path_suffixes:
            overridden += suffix in suffixes
            suffixes[suffix] = value
        patterns.extend(source.patterns)
        logger.debug("Merged table layer %r (%d overridden entries)", source.name, overridden)

    tables: DetectionTables = DetectionTables.build(
        extensions=extensions,
        filenames=filenames,
        path_suffixes=suffixes.items(),
        patterns=patterns,
    )
    logger.debug("Built detection tables: %s", tables.summary())
    return tables


def builtin_sources() -> tuple[TableSource, ...]:
    """Return the built-in table layers in merge order (lazy import).

    Raises:
        TableBuildError: If a built-in module does not export a `SOURCE` layer.
    """
    layers: list[TableSource] = []
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        source: object = getattr(mod, "SOURCE", None)
        if not isinstance(source, TableSource):
            raise TableBuildError(f"Module {modname} has no SOURCE table layer")
        layers.append(source)
    return tuple(layers)


@lru_cache(maxsize=1)
def get_detection_tables() -> DetectionTables:
    """Return the built-in detection tables, building them on first use."""
    return build_tables(*builtin_sources())
