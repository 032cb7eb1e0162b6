# topmark:header:start
#
#   project      : CheckerLog
#   file         : model.py
#   file_relpath : src/checkerlog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for CheckerLog.

Configuration follows a mutable/immutable split:

- `MutableConfig` is a builder: load defaults, merge TOML, apply overrides.
- `Config` is the frozen snapshot handed to rendering and filtering code.

Call `MutableConfig.freeze()` to obtain a `Config`, and `Config.thaw()` to get an
editable copy back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from checkerlog.config.io import (
    ConfigError,
    extract_checkerlog_table,
    load_toml_dict,
)
from checkerlog.config.keys import Toml
from checkerlog.config.logging import get_logger
from checkerlog.console.color import ColorMode
from checkerlog.diagnostic.level import DEFAULT_LOG_LEVELS, DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from checkerlog.config.io import TomlTable
    from checkerlog.config.logging import CheckerLogLogger

logger: CheckerLogLogger = get_logger(__name__)

DEFAULT_LINES_ABOVE: int = 2
DEFAULT_LINES_BELOW: int = 3


def parse_levels(raw: Iterable[str | int]) -> tuple[DiagnosticLevel, ...]:
    """Parse level names/ordinals into a tuple of unique `DiagnosticLevel` values.

    Args:
        raw: Level names (case-insensitive) or ordinals.

    Returns:
        The parsed levels in first-seen order.

    Raises:
        ConfigError: If a value does not name a level.
    """
    levels: list[DiagnosticLevel] = []
    for item in raw:
        level: DiagnosticLevel | None = DiagnosticLevel.parse(item)
        if level is None:
            valid: str = ", ".join(m.name.lower() for m in DiagnosticLevel)
            raise ConfigError(f"Unknown diagnostic level {item!r} - valid choices: {valid}")
        if level not in levels:
            levels.append(level)
    return tuple(levels)


def _get_non_negative_int(table: TomlTable, key: str, default: int) -> int:
    value: object = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"'{key}' must be a non-negative integer, got {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        log_level: Levels that pass the filter.
        lines_above: Source lines shown above a diagnostic in code frames.
        lines_below: Source lines shown below a diagnostic in code frames.
        color_mode: Whether terminal output keeps color escapes.
    """

    log_level: tuple[DiagnosticLevel, ...] = DEFAULT_LOG_LEVELS
    lines_above: int = DEFAULT_LINES_ABOVE
    lines_below: int = DEFAULT_LINES_BELOW
    color_mode: ColorMode = ColorMode.AUTO

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the runtime defaults."""
        return cls()

    @classmethod
    def from_toml_file(cls, path: Path) -> Config:
        """Load a configuration file and freeze it.

        Args:
            path: ``pyproject.toml`` (reads ``[tool.checkerlog]``) or ``checkerlog.toml``.

        Returns:
            The frozen configuration.
        """
        return MutableConfig.from_defaults().merge_toml_file(path).freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            log_level=list(self.log_level),
            lines_above=self.lines_above,
            lines_below=self.lines_below,
            color_mode=self.color_mode,
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder (see `Config` for attribute semantics)."""

    log_level: list[DiagnosticLevel] = field(default_factory=lambda: list(DEFAULT_LOG_LEVELS))
    lines_above: int = DEFAULT_LINES_ABOVE
    lines_below: int = DEFAULT_LINES_BELOW
    color_mode: ColorMode = ColorMode.AUTO

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder initialized with runtime defaults."""
        return cls()

    def merge_table(self, table: TomlTable) -> MutableConfig:
        """Merge a CheckerLog settings table into this builder in place.

        Args:
            table: Settings table; absent keys keep their current values.

        Returns:
            This builder, for chaining.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        if Toml.KEY_LOG_LEVEL in table:
            raw_levels: object = table[Toml.KEY_LOG_LEVEL]
            if not isinstance(raw_levels, list):
                raise ConfigError(f"'{Toml.KEY_LOG_LEVEL}' must be a list of level names")
            self.log_level = list(parse_levels(raw_levels))
        self.lines_above = _get_non_negative_int(table, Toml.KEY_LINES_ABOVE, self.lines_above)
        self.lines_below = _get_non_negative_int(table, Toml.KEY_LINES_BELOW, self.lines_below)
        if Toml.KEY_COLOR in table:
            raw_color: object = table[Toml.KEY_COLOR]
            try:
                self.color_mode = ColorMode(str(raw_color).lower())
            except ValueError as exc:
                valid: str = ", ".join(m.value for m in ColorMode)
                raise ConfigError(
                    f"Unknown color mode {raw_color!r} - valid choices: {valid}"
                ) from exc
        return self

    def merge_toml_file(self, path: Path) -> MutableConfig:
        """Load ``path`` and merge its CheckerLog table into this builder."""
        data: TomlTable = load_toml_dict(path)
        table: TomlTable = extract_checkerlog_table(data, path=path)
        logger.debug("Merging config table from %s: %r", path, table)
        return self.merge_table(table)

    def freeze(self) -> Config:
        """Return an immutable snapshot of this builder."""
        return Config(
            log_level=tuple(self.log_level),
            lines_above=self.lines_above,
            lines_below=self.lines_below,
            color_mode=self.color_mode,
        )
