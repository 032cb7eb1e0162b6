# topmark:header:start
#
#   project      : CheckerLog
#   file         : keys.py
#   file_relpath : src/checkerlog/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for CheckerLog configuration.

Keys defined here represent the *external configuration API* as it appears in
``checkerlog.toml`` and in ``[tool.checkerlog]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by CheckerLog configuration."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_CHECKERLOG: Final[str] = "checkerlog"

    KEY_LOG_LEVEL: Final[str] = "log_level"
    KEY_LINES_ABOVE: Final[str] = "lines_above"
    KEY_LINES_BELOW: Final[str] = "lines_below"
    KEY_COLOR: Final[str] = "color"


PYPROJECT_TOML: Final[str] = "pyproject.toml"
CHECKERLOG_TOML: Final[str] = "checkerlog.toml"
