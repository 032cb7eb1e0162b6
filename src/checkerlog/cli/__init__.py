# topmark:header:start
#
#   project      : CheckerLog
#   file         : __init__.py
#   file_relpath : src/checkerlog/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CheckerLog CLI package.

A small host around the diagnostic layer: it reads raw checker output from a
JSON file, normalizes and filters it, then prints terminal reports or the
runtime payload envelope.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    checkerlog = "checkerlog.cli.main:cli"

All subcommands live in [`checkerlog.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
