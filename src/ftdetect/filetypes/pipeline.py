# topmark:header:start
#
#   project      : FtDetect
#   file         : pipeline.py
#   file_relpath : src/ftdetect/filetypes/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection pipeline.

Classifies a path (and, lazily, a bounded content sample) by walking the
detection tables in a fixed stage order:

1. pre-extension patterns (priority >= 0 or None, highest first)
2. filename table (final path component)
3. extension table (compound dotted keys first, then the simple extension)
4. path-suffix table (ordered, plain suffix test)
5. post-extension patterns (negative priority and `Priority.LOWEST`)
6. shebang fallback (interpreter named on a ``#!`` first line)

The first non-None verdict wins. A dynamic resolver that declines does not
stop the pipeline: the scan continues with the next matching entry of the same
stage and then with the next stage.

The content accessor is evaluated at most once per lookup; a failing accessor
makes every dynamic resolver decline while static rules still apply.
"""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from ftdetect.config.logging import FtdetectLogger, get_logger
from ftdetect.filetypes.base import Dynamic, Phase
from ftdetect.filetypes.content import MAX_CONTENT_SIZE_BYTES, ContentSample
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.registry import TableRegistry

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import BinaryIO

    from ftdetect.filetypes.base import Resolver
    from ftdetect.filetypes.content import ContentSource
    from ftdetect.filetypes.tables import DetectionTables

logger: FtdetectLogger = get_logger(__name__)

# Longest compound extension considered, in dot-separated components.
MAX_COMPOUND_PARTS: Final[int] = 4


class Stage(Enum):
    """Pipeline stage that produced (or declined) a verdict."""

    PRE_EXTENSION = "pre-extension"
    FILENAME = "filename"
    EXTENSION = "extension"
    PATH_SUFFIX = "path-suffix"
    POST_EXTENSION = "post-extension"
    SHEBANG = "shebang"


@dataclass(frozen=True)
class Declined:
    """A dynamic table entry that matched but produced no verdict."""

    stage: Stage
    key: str
    resolver: Resolver

    def to_dict(self) -> dict[str, str]:
        return {"stage": self.stage.value, "key": self.key, "resolver": self.resolver.describe()}


@dataclass(frozen=True)
class Detection:
    """Outcome of a lookup, with provenance.

    Attributes:
        path (str): Normalized path that was classified.
        filetype (FileType | None): Verdict, or None when no stage produced one.
        stage (Stage | None): Stage that produced the verdict.
        key (str | None): Table key (filename, extension, suffix or pattern) that matched.
        resolver (Resolver | None): Resolver that produced the verdict.
        declined (tuple[Declined, ...]): Dynamic entries that declined on the way.
    """

    path: str
    filetype: FileType | None
    stage: Stage | None = None
    key: str | None = None
    resolver: Resolver | None = None
    declined: tuple[Declined, ...] = field(default_factory=tuple)

    @property
    def matched(self) -> bool:
        return self.filetype is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "path": self.path,
            "filetype": None if self.filetype is None else str(self.filetype),
            "stage": None if self.stage is None else self.stage.value,
            "key": self.key,
            "resolver": None if self.resolver is None else self.resolver.describe(),
            "declined": [d.to_dict() for d in self.declined],
        }


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Return `path` as a string with forward slashes as separators."""
    text: str = os.fspath(path)
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    return text


def filename_of(path: str) -> str:
    """Return the final component of a normalized path."""
    return path.rstrip("/").rsplit("/", 1)[-1]


def extension_of(filename: str) -> str | None:
    """Return the simple extension of `filename` (no leading dot).

    The extension is the text after the last dot. A name without a dot, a
    dotfile without a further dot (``.bashrc``) and a trailing dot yield None.
    """
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem or not ext:
        return None
    return ext


def compound_extensions(filename: str) -> list[str]:
    """Return dotted extension candidates of `filename`, longest first.

    ``foo.js.erb`` yields ``["js.erb"]``. Candidates span two to
    `MAX_COMPOUND_PARTS` components, always start right after a dot, never
    cover the whole name, and never contain empty components.
    """
    parts: list[str] = filename.split(".")
    longest: int = min(len(parts) - 1, MAX_COMPOUND_PARTS)
    candidates: list[str] = []
    for n in range(longest, 1, -1):
        tail: list[str] = parts[-n:]
        if all(tail):
            candidates.append(".".join(tail))
    return candidates


_active_lookup: ContextVar[_Lookup | None] = ContextVar("ftdetect_lookup", default=None)


class _Lookup:
    """State of a single lookup: the path, its tables and the memoized sample."""

    def __init__(
        self,
        path: str,
        content: ContentSource,
        tables: DetectionTables,
        *,
        max_bytes: int,
        shebang_fallback: bool,
    ) -> None:
        self.path: str = path
        self.filename: str = filename_of(path)
        self.tables: DetectionTables = tables
        self.sample: ContentSample = (
            content if isinstance(content, ContentSample) else ContentSample(content, max_bytes)
        )
        self.max_bytes: int = max_bytes
        self.shebang_fallback: bool = shebang_fallback

    def candidates(self) -> Iterator[tuple[Stage, str, Resolver]]:
        """Yield every matching table entry in precedence order (lazily)."""
        tables: DetectionTables = self.tables
        for pattern in tables.patterns.iter_matches(self.path, self.filename, Phase.PRE_EXTENSION):
            yield Stage.PRE_EXTENSION, pattern.source, pattern.resolver

        resolver: Resolver | None = tables.filenames.lookup(self.filename)
        if resolver is not None:
            yield Stage.FILENAME, self.filename, resolver

        for key in compound_extensions(self.filename):
            resolver = tables.extensions.lookup(key)
            if resolver is not None:
                yield Stage.EXTENSION, key, resolver
        ext: str | None = extension_of(self.filename)
        if ext is not None:
            resolver = tables.extensions.lookup(ext)
            if resolver is not None:
                yield Stage.EXTENSION, ext, resolver

        for suffix, resolver in tables.path_suffixes.iter_matches(self.path):
            yield Stage.PATH_SUFFIX, suffix, resolver

        for pattern in tables.patterns.iter_matches(self.path, self.filename, Phase.POST_EXTENSION):
            yield Stage.POST_EXTENSION, pattern.source, pattern.resolver

        if self.shebang_fallback:
            from ftdetect.filetypes.detectors.shebang import shebang

            yield Stage.SHEBANG, "#!", Dynamic(shebang)

    def run(self) -> Detection:
        declined: list[Declined] = []
        token = _active_lookup.set(self)
        try:
            for stage, key, resolver in self.candidates():
                verdict: FileType | None = resolver.resolve(self.path, self.sample)
                if verdict is not None:
                    logger.trace("%s: %s %r -> %s", self.path, stage.value, key, verdict)
                    return Detection(
                        path=self.path,
                        filetype=verdict,
                        stage=stage,
                        key=key,
                        resolver=resolver,
                        declined=tuple(declined),
                    )
                logger.trace("%s: %s %r declined", self.path, stage.value, key)
                declined.append(Declined(stage, key, resolver))
        finally:
            _active_lookup.reset(token)
        return Detection(path=self.path, filetype=None, declined=tuple(declined))


def explain(
    path: str | os.PathLike[str],
    content: ContentSource = None,
    *,
    tables: DetectionTables | None = None,
    max_bytes: int = MAX_CONTENT_SIZE_BYTES,
    shebang_fallback: bool = True,
) -> Detection:
    """Classify `path` and report which stage and table key decided.

    Args:
        path (str | os.PathLike[str]): Path to classify. Only the string is
            inspected; the file is never opened unless `content` reads it.
        content (ContentSource): Content sample source: None (no content),
            ``str``, ``bytes``, or a zero-argument callable returning either.
            A callable is invoked at most once, and only if a dynamic rule
            needs content.
        tables (DetectionTables | None): Tables to use; defaults to the active set.
        max_bytes (int): Upper bound of the content sample.
        shebang_fallback (bool): Whether to try the ``#!`` interpreter line last.

    Returns:
        Detection: The verdict with its provenance.
    """
    lookup = _Lookup(
        normalize_path(path),
        content,
        tables if tables is not None else TableRegistry.active(),
        max_bytes=max_bytes,
        shebang_fallback=shebang_fallback,
    )
    return lookup.run()


def try_detect(
    path: str | os.PathLike[str],
    content: ContentSource = None,
    *,
    tables: DetectionTables | None = None,
    max_bytes: int = MAX_CONTENT_SIZE_BYTES,
    shebang_fallback: bool = True,
) -> FileType | None:
    """Classify `path`; return None when no rule produced a verdict."""
    return explain(
        path,
        content,
        tables=tables,
        max_bytes=max_bytes,
        shebang_fallback=shebang_fallback,
    ).filetype


def detect(
    path: str | os.PathLike[str],
    content: ContentSource = None,
    *,
    tables: DetectionTables | None = None,
    default: FileType | None = None,
    max_bytes: int = MAX_CONTENT_SIZE_BYTES,
    shebang_fallback: bool = True,
) -> FileType:
    """Classify `path`, substituting `default` (plain text) when nothing matched."""
    found: FileType | None = try_detect(
        path,
        content,
        tables=tables,
        max_bytes=max_bytes,
        shebang_fallback=shebang_fallback,
    )
    if found is not None:
        return found
    return default if default is not None else FileType.default()


def redetect(path: str, content: str) -> FileType | None:
    """Re-run detection for a derived path from inside a dynamic detector.

    Inherits the tables, sample bound and shebang setting of the lookup in
    progress (or the defaults outside of one) and reuses the content already
    sampled for the original path.
    """
    outer: _Lookup | None = _active_lookup.get()
    if outer is None:
        return try_detect(path, content)
    return try_detect(
        path,
        content,
        tables=outer.tables,
        max_bytes=outer.max_bytes,
        shebang_fallback=outer.shebang_fallback,
    )


def detect_stream(
    path: str | os.PathLike[str],
    stream: BinaryIO,
    *,
    tables: DetectionTables | None = None,
    default: FileType | None = None,
    max_bytes: int = MAX_CONTENT_SIZE_BYTES,
    shebang_fallback: bool = True,
) -> tuple[FileType, bytes]:
    """Classify `path`, sampling content from an open binary `stream` on demand.

    At most `max_bytes` are read, and only if a dynamic rule asks for content.
    A seekable stream is put back where it was; for any other stream the
    returned head holds the consumed bytes, which the caller replays before
    reading on.

    Args:
        path (str | os.PathLike[str]): Path (or name) the stream belongs to.
        stream (BinaryIO): Open binary stream positioned at the content start.
        tables (DetectionTables | None): Tables to use; defaults to the active set.
        default (FileType | None): Verdict when nothing matched (plain text).
        max_bytes (int): Upper bound of the content sample.
        shebang_fallback (bool): Whether to try the ``#!`` interpreter line last.

    Returns:
        tuple[FileType, bytes]: The file type and the bytes read from `stream`
        (empty when no rule needed content).
    """
    consumed: list[bytes] = []
    start: int | None = stream.tell() if stream.seekable() else None

    def _read() -> bytes:
        data: bytes = stream.read(max_bytes)
        consumed.append(data)
        return data

    try:
        filetype: FileType = detect(
            path,
            _read,
            tables=tables,
            default=default,
            max_bytes=max_bytes,
            shebang_fallback=shebang_fallback,
        )
    finally:
        if start is not None and consumed:
            stream.seek(start)
    return filetype, consumed[0] if consumed else b""
