# topmark:header:start
#
#   project      : FtDetect
#   file         : __main__.py
#   file_relpath : src/ftdetect/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FtDetect via ``python -m ftdetect``.

It delegates directly to :func:`ftdetect.cli.main.cli`, so the module and
the ``ftdetect`` console script share a single entry point.

Examples:
    Classify a few files::

        python -m ftdetect detect Makefile src/main.c
"""

from __future__ import annotations

from ftdetect.cli.main import cli

if __name__ == "__main__":
    cli()
