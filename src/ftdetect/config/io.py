# topmark:header:start
#
#   project      : FtDetect
#   file         : io.py
#   file_relpath : src/ftdetect/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML I/O helpers for FtDetect configuration.

This module reads TOML documents with ``tomlkit`` and offers small typed
accessors for the values found in them. Keeping these utilities separate
avoids import cycles between the config model and its loaders.

Unlike a lenient reader, the accessors here are strict: a value of the wrong
type raises [`ConfigError`][ftdetect.config.io.ConfigError] naming the
offending key, so a typo in a config file never silently falls back to a
default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from ftdetect.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from ftdetect.config.logging import FtdetectLogger

logger: FtdetectLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "ConfigError",
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "get_string_value_or_none",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_string_map",
    "get_table_list",
    "load_toml_dict",
    "parse_toml_text",
]


class ConfigError(ValueError):
    """Unreadable or malformed configuration."""


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str, *, where: str = "") -> TomlTable:
    """Extract a sub-table; a missing key yields an empty table.

    Raises:
        ConfigError: If the value is present but not a table.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if not is_toml_table(value):
        raise ConfigError(f"{where}{key}: expected a table, got {type(value).__name__}")
    return value


def get_string_value_or_none(table: TomlTable, key: str, *, where: str = "") -> str | None:
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{where}{key}: expected a string, got {type(value).__name__}")
    return value


def get_bool_value_or_none(table: TomlTable, key: str, *, where: str = "") -> bool | None:
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"{where}{key}: expected a boolean, got {type(value).__name__}")
    return value


def get_int_value_or_none(table: TomlTable, key: str, *, where: str = "") -> int | None:
    # bool is a subclass of int; `true` is not a byte count.
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{where}{key}: expected an integer, got {type(value).__name__}")
    return value


def get_string_map(table: TomlTable, key: str, *, where: str = "") -> dict[str, str]:
    """Extract a ``str -> str`` table, preserving key order.

    Raises:
        ConfigError: If the value is not a table or holds non-string values.
    """
    sub: TomlTable = get_table_value(table, key, where=where)
    out: dict[str, str] = {}
    for k, v in sub.items():
        if not isinstance(v, str):
            raise ConfigError(f"{where}{key}.{k}: expected a string, got {type(v).__name__}")
        out[k] = v
    return out


def get_table_list(table: TomlTable, key: str, *, where: str = "") -> list[TomlTable]:
    """Extract an array of tables (``[[key]]``); a missing key yields an empty list.

    Raises:
        ConfigError: If the value is not a list of tables.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{where}{key}: expected an array of tables")
    items: list[Any] = cast("list[Any]", value)
    for index, item in enumerate(items):
        if not is_toml_table(item):
            raise ConfigError(f"{where}{key}[{index}]: expected a table")
    return cast("list[TomlTable]", items)


def parse_toml_text(text: str, *, origin: str = "<string>") -> TomlTable:
    """Parse TOML text into plain Python containers.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {origin}: {exc}") from exc
    return doc.unwrap()


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``ftdetect.toml`` or
            ``pyproject.toml``). Encoding is assumed to be UTF-8.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    table: TomlTable = parse_toml_text(text, origin=str(path))
    logger.debug("Loaded TOML from %s (%d top-level keys)", path, len(table))
    return table
