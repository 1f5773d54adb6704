# topmark:header:start
#
#   project      : FtDetect
#   file         : registry.py
#   file_relpath : src/ftdetect/filetypes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Active detection table set (advanced).

Lookups that are not given an explicit `DetectionTables` use the *active*
table set held here. By default this is the built-in set from
[`get_detection_tables`][ftdetect.filetypes.tables.get_detection_tables].

Notes:
    * Tables are never mutated in place. Live reload means building a new
      `DetectionTables` and calling `TableRegistry.swap()`; readers grab a
      reference and never observe a partially built set.
    * Swaps are process-global and guarded by an `RLock`. Prefer temporary
      usage in tests with try/finally (or `TableRegistry.using()`).
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import RLock
from typing import TYPE_CHECKING

from ftdetect.config.logging import FtdetectLogger, get_logger
from ftdetect.filetypes.tables import get_detection_tables

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ftdetect.filetypes.tables import DetectionTables

logger: FtdetectLogger = get_logger(__name__)


class TableRegistry:
    """Holder of the active, immutable detection table set."""

    _lock = RLock()

    # None means "use the built-in tables".
    _active: DetectionTables | None = None

    @classmethod
    def active(cls) -> DetectionTables:
        """Return the active table set."""
        with cls._lock:
            current: DetectionTables | None = cls._active
        return current if current is not None else get_detection_tables()

    @classmethod
    def swap(cls, tables: DetectionTables) -> DetectionTables:
        """Atomically replace the active table set.

        Args:
            tables (DetectionTables): Fully built replacement tables.

        Returns:
            DetectionTables: The previously active table set.
        """
        with cls._lock:
            previous: DetectionTables = cls.active()
            cls._active = tables
        logger.debug("Swapped active detection tables: %s", tables.summary())
        return previous

    @classmethod
    def reset(cls) -> None:
        """Revert to the built-in tables."""
        with cls._lock:
            cls._active = None

    @classmethod
    @contextmanager
    def using(cls, tables: DetectionTables) -> Iterator[DetectionTables]:
        """Temporarily activate `tables` for the duration of a `with` block."""
        with cls._lock:
            saved: DetectionTables | None = cls._active
            cls._active = tables
        try:
            yield tables
        finally:
            with cls._lock:
                cls._active = saved
