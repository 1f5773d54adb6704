# topmark:header:start
#
#   project      : FtDetect
#   file         : constants.py
#   file_relpath : src/ftdetect/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtDetect Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FTDETECT_VERSION: str = get_version("ftdetect")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution.
    FTDETECT_VERSION = "0.0.0+unknown"

# Configuration discovery
FTDETECT_TOML_NAME: str = "ftdetect.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: tuple[str, str] = ("tool", "ftdetect")

# Directory walking
GITIGNORE_NAME: str = ".gitignore"
ALWAYS_SKIPPED_DIRS: frozenset[str] = frozenset({".git", ".hg", ".svn"})
