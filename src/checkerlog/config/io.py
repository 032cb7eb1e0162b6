# topmark:header:start
#
#   project      : CheckerLog
#   file         : io.py
#   file_relpath : src/checkerlog/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for CheckerLog configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures, so the
model layer never deals with tomlkit item types.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeAlias, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from checkerlog.config.keys import PYPROJECT_TOML, Toml
from checkerlog.config.logging import get_logger

if TYPE_CHECKING:
    from checkerlog.config.logging import CheckerLogLogger

TomlTable: TypeAlias = dict[str, Any]

logger: CheckerLogLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration source is malformed or holds invalid values."""


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(obj, dict)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``checkerlog.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content as plain Python structures.

    Raises:
        ConfigError: If the document is not valid TOML.

    Notes:
        ``OSError`` from reading the file propagates to the caller.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.error("Invalid TOML in %s: %s", path, exc)
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    logger.debug("Loaded TOML config from %s", path)
    return cast("TomlTable", data_any) if is_toml_table(data_any) else {}


def extract_checkerlog_table(data: TomlTable, *, path: Path) -> TomlTable:
    """Return the CheckerLog settings table of a parsed TOML document.

    For ``pyproject.toml`` the settings live under ``[tool.checkerlog]``; any other
    file is a dedicated ``checkerlog.toml`` whose top level is the settings table.

    Args:
        data: Parsed TOML document.
        path: Path the document was read from (selects the layout).

    Returns:
        The settings table (empty when the section is absent).
    """
    if path.name != PYPROJECT_TOML:
        return data
    tool: object = data.get(Toml.SECTION_TOOL, {})
    if not is_toml_table(tool):
        return {}
    table: object = tool.get(Toml.SECTION_CHECKERLOG, {})
    return table if is_toml_table(table) else {}
