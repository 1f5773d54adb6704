# topmark:header:start
#
#   project      : FtDetect
#   file         : enum_mixins.py
#   file_relpath : src/ftdetect/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for FtDetect (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``:
        ``str`` Enum whose ``.value`` is a stable machine key, with optional
        aliases accepted by ``parse()``.

Design:
    - Keep the helpers *pure* and side-effect free.
    - Avoid bringing UI libraries (e.g. yachalk) into this module.

Example:
    ```python
    from ftdetect.core.enum_mixins import KeyedStrEnum

    class Mode(KeyedStrEnum):
        A = ("alpha", "first")
        B = "beta"

    assert Mode.parse("First") is Mode.A
    assert str(Mode.B) == "beta"
    ```
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import TypeVar

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string for alias matching."""
    return s.strip().lower().replace(" ", "-")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key and aliases live on an attribute.

    Members are declared either as a plain key string or as a tuple whose
    first item is the key and whose remaining items are aliases.

    Attributes:
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    aliases: tuple[str, ...]

    def __new__(cls: type[_KS], key: str, *aliases: str) -> _KS:
        """Create a new member with a key and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            *aliases (str): Optional aliases for parsing.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, format_spec: str) -> str:
        return format(str(self.value), format_spec)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key (`.value`), the member name (`.name`)
        and any configured aliases. Matching is case-insensitive.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)
        if not token:
            return None
        return _token_index(cls).get(token)  # type: ignore[return-value]


@lru_cache(maxsize=None)
def _token_index(enum_cls: type[KeyedStrEnum]) -> dict[str, KeyedStrEnum]:
    """Build the token -> member index for an enum class (keys win over names and aliases)."""
    index: dict[str, KeyedStrEnum] = {}
    for m in enum_cls:
        index.setdefault(_norm_token(m.value), m)
    for m in enum_cls:
        index.setdefault(_norm_token(m.name), m)
    for m in enum_cls:
        for a in m.aliases:
            index.setdefault(_norm_token(a), m)
    return index
