# topmark:header:start
#
#   project      : CheckerLog
#   file         : __init__.py
#   file_relpath : src/checkerlog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for CheckerLog.

Settings are read from ``checkerlog.toml`` or the ``[tool.checkerlog]`` table of
``pyproject.toml`` with `tomlkit`, built in a `MutableConfig` and frozen into a
`Config`. Internal logging lives in
[`checkerlog.config.logging`][checkerlog.config.logging].
"""

from __future__ import annotations

from checkerlog.config.io import ConfigError
from checkerlog.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
]
