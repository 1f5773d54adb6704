# topmark:header:start
#
#   project      : FtDetect
#   file         : content.py
#   file_relpath : src/ftdetect/filetypes/content.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded, lazily read content samples.

Dynamic resolvers receive a content sample produced by a deferred accessor.
This module turns the content sources accepted by the public API into a
memoizing accessor that is invoked at most once per lookup, reads at most
`MAX_CONTENT_SIZE_BYTES`, and converts any failure into
`ContentUnavailableError` so that resolvers can decline.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Final, Union

from ftdetect.config.logging import FtdetectLogger, get_logger
from ftdetect.filetypes.base import ContentUnavailableError

if TYPE_CHECKING:
    from os import PathLike

logger: FtdetectLogger = get_logger(__name__)

MAX_CONTENT_SIZE_BYTES: Final[int] = 51_200

BINARY_SNIFF_BYTES: Final[int] = 8_192
BINARY_NON_TEXT_RATIO: Final[float] = 0.30

ContentSource = Union[None, str, bytes, Callable[[], Union[str, bytes]]]

# Printable ASCII plus common whitespace/control characters seen in text files.
_TEXT_BYTES: Final[bytes] = bytes({7, 8, 9, 10, 12, 13, 27} | set(range(0x20, 0x100)) - {0x7F})


def decode_sample(raw: str | bytes, max_bytes: int = MAX_CONTENT_SIZE_BYTES) -> str:
    """Truncate `raw` to `max_bytes` and return it as text.

    Bytes are truncated before decoding and decoded as UTF-8 with replacement
    characters, so a multi-byte sequence cut at the bound never raises.
    Strings are truncated by their UTF-8 length the same way.
    """
    if isinstance(raw, str):
        encoded: bytes = raw.encode("utf-8", errors="surrogatepass")
        if len(encoded) <= max_bytes:
            return raw
        raw = encoded
    return raw[:max_bytes].decode("utf-8", errors="replace")


class ContentSample:
    """Memoizing content accessor for a single lookup.

    The wrapped source is evaluated on the first call only. Its result, or its
    failure, is remembered: later calls return the same text or raise the same
    `ContentUnavailableError` without touching the source again.

    Attributes:
        calls (int): How many times the underlying source was evaluated (0 or 1).
    """

    def __init__(self, source: ContentSource, max_bytes: int = MAX_CONTENT_SIZE_BYTES) -> None:
        self._source: ContentSource = source
        self._max_bytes: int = max_bytes
        self._text: str | None = None
        self._error: ContentUnavailableError | None = None
        self.calls: int = 0

    @property
    def loaded(self) -> bool:
        """Whether the source has already been evaluated."""
        return self.calls > 0

    def __call__(self) -> str:
        if self._error is not None:
            raise self._error
        if self._text is not None:
            return self._text
        self.calls += 1
        source: ContentSource = self._source
        if source is None:
            self._text = ""
            return self._text
        if callable(source):
            try:
                raw: str | bytes = source()
            except Exception as exc:
                logger.debug("Content accessor failed: %s", exc)
                self._error = ContentUnavailableError(str(exc) or type(exc).__name__)
                raise self._error from exc
        else:
            raw = source
        if not isinstance(raw, (str, bytes)):
            self._error = ContentUnavailableError(
                f"Content accessor returned {type(raw).__name__}, expected str or bytes"
            )
            raise self._error
        self._text = decode_sample(raw, self._max_bytes)
        return self._text


def read_head(path: str | PathLike[str], max_bytes: int = MAX_CONTENT_SIZE_BYTES) -> bytes:
    """Read at most `max_bytes` from the start of a file.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with Path(path).open("rb") as fh:
        return fh.read(max_bytes)


def file_content(
    path: str | PathLike[str],
    max_bytes: int = MAX_CONTENT_SIZE_BYTES,
) -> Callable[[], bytes]:
    """Return a zero-argument accessor reading the head of `path` from disk.

    Nothing is read until the accessor is called. I/O errors propagate from the
    accessor; the detection pipeline converts them into a declined rule.
    """

    def _read() -> bytes:
        return read_head(path, max_bytes)

    return _read


def is_binary(sample: bytes) -> bool:
    """Heuristically decide whether a byte sample is binary.

    A sample is binary if its first `BINARY_SNIFF_BYTES` contain a NUL byte or
    more than `BINARY_NON_TEXT_RATIO` non-text bytes. Empty samples are text.
    """
    head: bytes = sample[:BINARY_SNIFF_BYTES]
    if not head:
        return False
    if b"\x00" in head:
        return True
    non_text: int = len(head.translate(None, _TEXT_BYTES))
    return non_text / len(head) > BINARY_NON_TEXT_RATIO
