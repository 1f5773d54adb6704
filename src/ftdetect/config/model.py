# topmark:header:start
#
#   project      : FtDetect
#   file         : model.py
#   file_relpath : src/ftdetect/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the CLI and the API.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Scope:
    - *In scope*: data shapes, defaulting rules, merge policy
      (`MutableConfig.merge_with`), TOML table interpretation, discovery of
      ``ftdetect.toml`` / ``[tool.ftdetect]`` and freeze/thaw mechanics.
    - *Out of scope*: raw TOML I/O, which lives in [`ftdetect.config.io`][].

TOML shape (``ftdetect.toml`` top level, or ``[tool.ftdetect]``)::

    default = "text"
    max-content-bytes = 51200
    shebang-fallback = true
    exclude = [".venv/"]

    [extensions]
    tpl = "html"

    [filenames]
    "Justfile" = "just"

    [path-suffixes]
    "/etc/myapp/config" = "toml"

    [[patterns]]
    regex = '^.*\\.conf\\.j2$'
    filetype = "jinja"
    full-path = false
    priority = 10          # an integer, or "lowest"

Override tables form one extra table layer merged *after* the built-in
layers, so every key they name wins over the built-in rule for that key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ftdetect.config.io import (
    ConfigError,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_map,
    get_string_value_or_none,
    get_table_list,
    get_table_value,
    load_toml_dict,
)
from ftdetect.config.logging import get_logger
from ftdetect.constants import (
    FTDETECT_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from ftdetect.filetypes.base import LOWEST, TableBuildError, validate_priority
from ftdetect.filetypes.content import MAX_CONTENT_SIZE_BYTES
from ftdetect.filetypes.kinds import FileType
from ftdetect.filetypes.tables import (
    TableSource,
    build_tables,
    builtin_sources,
    get_detection_tables,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ftdetect.config.io import TomlTable
    from ftdetect.config.logging import FtdetectLogger
    from ftdetect.filetypes.base import PriorityValue
    from ftdetect.filetypes.tables import DetectionTables

logger: FtdetectLogger = get_logger(__name__)

# (full_path, regex, filetype, priority), as in a pattern table literal.
PatternOverride = tuple[bool, str, FileType, "PriorityValue"]


def parse_filetype(raw: str, *, where: str) -> FileType:
    """Parse a file type token from configuration.

    Raises:
        ConfigError: If `raw` names no known file type.
    """
    filetype: FileType | None = FileType.parse(raw)
    if filetype is None:
        raise ConfigError(f"{where}: unknown file type {raw!r}")
    return filetype


def parse_priority(raw: Any, *, where: str) -> PriorityValue:
    """Parse a pattern priority: an integer, ``"lowest"``, or absent (None).

    Raises:
        ConfigError: For any other value.
    """
    if isinstance(raw, str):
        if raw.strip().lower() == "lowest":
            return LOWEST
        raise ConfigError(f"{where}: priority must be an integer or 'lowest', got {raw!r}")
    try:
        return validate_priority(raw)
    except TableBuildError as exc:
        raise ConfigError(f"{where}: {exc}") from exc


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for FtDetect.

    Attributes:
        default (FileType): Type reported when no rule produced a verdict.
        max_content_bytes (int): Upper bound of the content sample.
        shebang_fallback (bool): Whether to consult the ``#!`` line last.
        extensions (Mapping[str, FileType]): Extension overrides.
        filenames (Mapping[str, FileType]): Filename overrides.
        path_suffixes (tuple[tuple[str, FileType], ...]): Ordered suffix overrides.
        patterns (tuple[PatternOverride, ...]): Extra pattern entries.
        exclude (tuple[str, ...]): gitignore-style patterns skipped when walking.
        config_files (tuple[Path, ...]): Files the snapshot was loaded from.
    """

    default: FileType = FileType.TEXT
    max_content_bytes: int = MAX_CONTENT_SIZE_BYTES
    shebang_fallback: bool = True
    extensions: Mapping[str, FileType] = field(default_factory=lambda: MappingProxyType({}))
    filenames: Mapping[str, FileType] = field(default_factory=lambda: MappingProxyType({}))
    path_suffixes: tuple[tuple[str, FileType], ...] = ()
    patterns: tuple[PatternOverride, ...] = ()
    exclude: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()

    @property
    def has_overrides(self) -> bool:
        return bool(self.extensions or self.filenames or self.path_suffixes or self.patterns)

    def table_source(self) -> TableSource:
        """Return the override tables as a table layer named ``config``."""
        return TableSource(
            name="config",
            extensions=self.extensions,
            filenames=self.filenames,
            path_suffixes=self.path_suffixes,
            patterns=self.patterns,
        )

    def tables(self) -> DetectionTables:
        """Build the built-in layers plus this config's override layer.

        Raises:
            TableBuildError: On a malformed override pattern.
        """
        if not self.has_overrides:
            return get_detection_tables()
        return build_tables(*builtin_sources(), self.table_source())

    def thaw(self) -> MutableConfig:
        return MutableConfig(
            default=self.default,
            max_content_bytes=self.max_content_bytes,
            shebang_fallback=self.shebang_fallback,
            extensions=dict(self.extensions),
            filenames=dict(self.filenames),
            path_suffixes=dict(self.path_suffixes),
            patterns=list(self.patterns),
            exclude=list(self.exclude),
            config_files=list(self.config_files),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping in the TOML key shape (for display)."""
        return {
            "default": str(self.default),
            "max-content-bytes": self.max_content_bytes,
            "shebang-fallback": self.shebang_fallback,
            "exclude": list(self.exclude),
            "extensions": {k: str(v) for k, v in self.extensions.items()},
            "filenames": {k: str(v) for k, v in self.filenames.items()},
            "path-suffixes": {k: str(v) for k, v in self.path_suffixes},
            "patterns": [
                {
                    "regex": regex,
                    "filetype": str(filetype),
                    "full-path": full_path,
                    "priority": "lowest" if priority is LOWEST else priority,
                }
                for full_path, regex, filetype, priority in self.patterns
            ],
            "config-files": [str(p) for p in self.config_files],
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields left at None inherit from earlier layers on `merge_with` and fall
    back to the `Config` defaults on `freeze`.
    """

    default: FileType | None = None
    max_content_bytes: int | None = None
    shebang_fallback: bool | None = None
    extensions: dict[str, FileType] = field(default_factory=dict)
    filenames: dict[str, FileType] = field(default_factory=dict)
    path_suffixes: dict[str, FileType] = field(default_factory=dict)
    patterns: list[PatternOverride] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot.

        Raises:
            ConfigError: If `max_content_bytes` is not positive.
        """
        max_bytes: int = (
            self.max_content_bytes if self.max_content_bytes is not None else MAX_CONTENT_SIZE_BYTES
        )
        if max_bytes <= 0:
            raise ConfigError(f"max-content-bytes must be positive, got {max_bytes}")
        return Config(
            default=self.default if self.default is not None else FileType.default(),
            max_content_bytes=max_bytes,
            shebang_fallback=self.shebang_fallback if self.shebang_fallback is not None else True,
            extensions=MappingProxyType(dict(self.extensions)),
            filenames=MappingProxyType(dict(self.filenames)),
            path_suffixes=tuple(self.path_suffixes.items()),
            patterns=tuple(self.patterns),
            exclude=tuple(self.exclude),
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Merge `other` into this builder (other wins) and return self.

        Scalars are replaced when set in `other`; override tables are merged
        key by key; patterns, excludes and config files are appended.
        """
        if other.default is not None:
            self.default = other.default
        if other.max_content_bytes is not None:
            self.max_content_bytes = other.max_content_bytes
        if other.shebang_fallback is not None:
            self.shebang_fallback = other.shebang_fallback
        self.extensions.update(other.extensions)
        self.filenames.update(other.filenames)
        self.path_suffixes.update(other.path_suffixes)
        self.patterns.extend(other.patterns)
        self.exclude.extend(other.exclude)
        self.config_files.extend(other.config_files)
        return self

    @classmethod
    def from_toml_table(cls, table: TomlTable, *, origin: str = "<config>") -> MutableConfig:
        """Interpret an ``ftdetect`` TOML table.

        Raises:
            ConfigError: On wrongly typed values or unknown file type tokens.
        """
        where: str = f"{origin}: "
        draft = cls()

        raw_default: str | None = get_string_value_or_none(table, "default", where=where)
        if raw_default is not None:
            draft.default = parse_filetype(raw_default, where=f"{origin}: default")
        draft.max_content_bytes = get_int_value_or_none(table, "max-content-bytes", where=where)
        draft.shebang_fallback = get_bool_value_or_none(table, "shebang-fallback", where=where)

        raw_exclude: Any = table.get("exclude", [])
        if not isinstance(raw_exclude, list) or not all(isinstance(x, str) for x in raw_exclude):
            raise ConfigError(f"{where}exclude: expected an array of strings")
        draft.exclude = list(raw_exclude)

        for key, attr in (("extensions", "extensions"), ("filenames", "filenames")):
            entries: dict[str, str] = get_string_map(table, key, where=where)
            getattr(draft, attr).update(
                {k: parse_filetype(v, where=f"{origin}: {key}.{k}") for k, v in entries.items()}
            )
        for suffix, raw in get_string_map(table, "path-suffixes", where=where).items():
            draft.path_suffixes[suffix] = parse_filetype(raw, where=f"{origin}: path-suffixes.{suffix}")

        for index, entry in enumerate(get_table_list(table, "patterns", where=where)):
            at: str = f"{origin}: patterns[{index}]"
            regex: str | None = get_string_value_or_none(entry, "regex", where=f"{at}.")
            raw_ft: str | None = get_string_value_or_none(entry, "filetype", where=f"{at}.")
            if regex is None or raw_ft is None:
                raise ConfigError(f"{at}: 'regex' and 'filetype' are required")
            full_path: bool | None = get_bool_value_or_none(entry, "full-path", where=f"{at}.")
            draft.patterns.append(
                (
                    bool(full_path),
                    regex,
                    parse_filetype(raw_ft, where=f"{at}.filetype"),
                    parse_priority(entry.get("priority"), where=f"{at}.priority"),
                )
            )
        return draft

    @classmethod
    def from_file(cls, path: Path) -> MutableConfig:
        """Load a config file: ``pyproject.toml`` uses its ``[tool.ftdetect]`` table.

        Raises:
            ConfigError: If the file cannot be read or is malformed.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            for key in PYPROJECT_TOOL_SECTION:
                data = get_table_value(data, key, where=f"{path}: ")
        draft: MutableConfig = cls.from_toml_table(data, origin=str(path))
        draft.config_files.append(path)
        logger.debug("Loaded config from %s", path)
        return draft

    @classmethod
    def discover(cls, start: Path) -> Path | None:
        """Find the nearest config file at or above `start`.

        In each directory ``ftdetect.toml`` wins over a ``pyproject.toml``
        that has a ``[tool.ftdetect]`` table.
        """
        directory: Path = start if start.is_dir() else start.parent
        for candidate_dir in (directory, *directory.parents):
            own: Path = candidate_dir / FTDETECT_TOML_NAME
            if own.is_file():
                return own
            pyproject: Path = candidate_dir / PYPROJECT_TOML_NAME
            if pyproject.is_file() and _has_tool_section(pyproject):
                return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_files: tuple[Path, ...] = (),
        use_project: bool = True,
        start: Path | None = None,
    ) -> MutableConfig:
        """Merge the discovered project config and explicit config files (in order).

        Args:
            config_files (tuple[Path, ...]): Extra files, applied after the project file.
            use_project (bool): Whether to discover a project config at all.
            start (Path | None): Discovery start directory (default: CWD).

        Raises:
            ConfigError: If any config file is unreadable or malformed.
        """
        merged = cls()
        if use_project:
            found: Path | None = cls.discover(start if start is not None else Path.cwd())
            if found is not None:
                merged.merge_with(cls.from_file(found))
        for path in config_files:
            merged.merge_with(cls.from_file(path))
        return merged


def _has_tool_section(pyproject: Path) -> bool:
    data: TomlTable = load_toml_dict(pyproject)
    for key in PYPROJECT_TOOL_SECTION:
        sub: Any = data.get(key)
        if not isinstance(sub, dict):
            return False
        data = sub
    return True
