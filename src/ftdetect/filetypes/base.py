# topmark:header:start
#
#   project      : FtDetect
#   file         : base.py
#   file_relpath : src/ftdetect/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core value types of the detection engine.

Defines the `Resolver` tagged union (`Static` / `Dynamic`), the compiled
`Pattern` entry with its priority model, and the errors raised while building
detection tables.

Resolvers are immutable. A `Static` resolver never touches content; a
`Dynamic` resolver wraps a two-argument detector `func(path, content)` and may
return `None` to decline, in which case the pipeline keeps looking.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Final, Protocol, Union

from ftdetect.config.logging import FtdetectLogger, get_logger
from ftdetect.filetypes.kinds import FileType

logger: FtdetectLogger = get_logger(__name__)


class TableBuildError(ValueError):
    """Raised when static table data cannot be turned into detection tables.

    Typical causes are malformed regular expressions and invalid priorities.
    A table build error is a data defect and aborts startup.
    """


class ContentUnavailableError(RuntimeError):
    """Raised by a content accessor when the content sample cannot be produced."""


class DetectorFunc(Protocol):
    """Protocol for dynamic detectors.

    A detector inspects the normalized path and a bounded content sample and
    returns a file type, or `None` when the rule does not apply.
    """

    def __call__(self, path: str, content: str) -> FileType | None:
        """Classify `path` given its content sample."""
        ...


ContentFn = Callable[[], str]


class Phase(Enum):
    """Pattern phase relative to the exact-match tables."""

    PRE_EXTENSION = "pre-extension"
    POST_EXTENSION = "post-extension"


class Priority(Enum):
    """Distinguished priority values that are not plain integers.

    Attributes:
        LOWEST: Catch-all marker; sorts strictly after every integer priority
            and always belongs to the post-extension phase.
    """

    LOWEST = "lowest"

    def __repr__(self) -> str:
        return f"Priority.{self.name}"


LOWEST: Final[Priority] = Priority.LOWEST

PriorityValue = Union[int, None, Priority]


def detector_name(func: Callable[..., object]) -> str:
    """Return a short, stable display name for a detector callable."""
    while isinstance(func, partial):
        func = func.func
    return getattr(func, "__name__", None) or type(func).__name__


@dataclass(frozen=True)
class Static:
    """Resolver that always yields a fixed file type."""

    filetype: FileType

    @property
    def is_dynamic(self) -> bool:
        return False

    def resolve(self, path: str, content_fn: ContentFn) -> FileType | None:
        """Return the fixed file type; `content_fn` is never invoked."""
        return self.filetype

    def describe(self) -> str:
        return f"Static({self.filetype})"


@dataclass(frozen=True)
class Dynamic:
    """Resolver that inspects path and content through a detector function.

    Attributes:
        func (DetectorFunc): Two-argument detector. Extra parameters (fallback
            type, dialect hint) are pre-bound with `functools.partial`.
    """

    func: DetectorFunc

    @property
    def is_dynamic(self) -> bool:
        return True

    @property
    def name(self) -> str:
        return detector_name(self.func)

    def resolve(self, path: str, content_fn: ContentFn) -> FileType | None:
        """Run the detector on `path` and the (lazily read) content sample.

        Args:
            path (str): Normalized path being classified.
            content_fn (ContentFn): Deferred accessor for the content sample.

        Returns:
            FileType | None: The detected file type, or None when the detector
            declines or the content sample is unavailable.
        """
        try:
            content: str = content_fn()
        except ContentUnavailableError as exc:
            logger.debug("%s: content unavailable for %s, declining: %s", self.name, path, exc)
            return None
        return self.func(path, content)

    def describe(self) -> str:
        return f"Dynamic({self.name})"


Resolver = Union[Static, Dynamic]


def as_resolver(value: FileType | Static | Dynamic | DetectorFunc) -> Resolver:
    """Coerce a table literal into a Resolver.

    A bare `FileType` becomes `Static`, a callable becomes `Dynamic`, and an
    existing resolver is returned unchanged.

    Raises:
        TableBuildError: If `value` cannot be interpreted as a resolver.
    """
    if isinstance(value, (Static, Dynamic)):
        return value
    if isinstance(value, FileType):
        return Static(value)
    if callable(value):
        return Dynamic(value)
    raise TableBuildError(f"Not a resolver literal: {value!r}")


def first_of(
    *detectors: DetectorFunc,
    default: FileType | None = None,
) -> DetectorFunc:
    """Compose detectors; the first non-None verdict wins.

    Args:
        *detectors (DetectorFunc): Detectors tried in order.
        default (FileType | None): Returned when every detector declines.

    Returns:
        DetectorFunc: A single two-argument detector.
    """

    def _first_of(path: str, content: str) -> FileType | None:
        for detector in detectors:
            found: FileType | None = detector(path, content)
            if found is not None:
                return found
        return default

    _first_of.__name__ = "first_of(" + ", ".join(detector_name(d) for d in detectors) + ")"
    return _first_of


def validate_priority(priority: object) -> PriorityValue:
    """Check that `priority` is an int, None, or `Priority.LOWEST`.

    Raises:
        TableBuildError: For any other value (booleans included).
    """
    if priority is None or priority is Priority.LOWEST:
        return priority
    if isinstance(priority, int) and not isinstance(priority, bool):
        return priority
    raise TableBuildError(f"Invalid pattern priority: {priority!r}")


def priority_sort_key(priority: PriorityValue) -> tuple[int, int]:
    """Sort key for descending priority ordering (`None` counts as 0)."""
    if priority is Priority.LOWEST:
        return (0, 0)
    return (1, priority or 0)


def phase_of(priority: PriorityValue) -> Phase:
    """Return the phase a priority belongs to."""
    if priority is Priority.LOWEST:
        return Phase.POST_EXTENSION
    if priority is not None and priority < 0:
        return Phase.POST_EXTENSION
    return Phase.PRE_EXTENSION


@dataclass(frozen=True)
class Pattern:
    """A compiled pattern table entry.

    Attributes:
        matches_full_path (bool): Match against the whole normalized path
            (True) or against the final path component only (False).
        regex (re.Pattern[str]): Compiled expression, searched (not full-matched).
        resolver (Resolver): Resolver used when the regex matches.
        priority (PriorityValue): Ordering priority; see `phase_of`.
    """

    matches_full_path: bool
    regex: re.Pattern[str]
    resolver: Resolver
    priority: PriorityValue = None

    @classmethod
    def compile(
        cls,
        matches_full_path: bool,
        source: str,
        resolver: FileType | Resolver | DetectorFunc,
        priority: object = None,
    ) -> Pattern:
        """Compile a pattern source entry.

        Raises:
            TableBuildError: On a malformed regex or an invalid priority.
        """
        try:
            regex: re.Pattern[str] = re.compile(source)
        except re.error as exc:
            raise TableBuildError(f"Malformed pattern regex {source!r}: {exc}") from exc
        return cls(
            matches_full_path=bool(matches_full_path),
            regex=regex,
            resolver=as_resolver(resolver),
            priority=validate_priority(priority),
        )

    @property
    def source(self) -> str:
        return self.regex.pattern

    @property
    def phase(self) -> Phase:
        return phase_of(self.priority)

    @property
    def key(self) -> tuple[bool, str]:
        """Identity of the pattern for duplicate detection."""
        return (self.matches_full_path, self.source)

    def matches(self, full_path: str, filename: str) -> bool:
        haystack: str = full_path if self.matches_full_path else filename
        return self.regex.search(haystack) is not None

    def describe(self) -> str:
        scope: str = "path" if self.matches_full_path else "name"
        prio: str = "LOWEST" if self.priority is Priority.LOWEST else str(self.priority)
        return f"{scope}:{self.source} [{prio}]"
