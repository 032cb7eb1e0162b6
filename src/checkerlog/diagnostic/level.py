# topmark:header:start
#
#   project      : CheckerLog
#   file         : level.py
#   file_relpath : src/checkerlog/diagnostic/level.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Four-valued severity taxonomy shared by every checker.

Each upstream severity scheme (TypeScript categories, LSP severities, ESLint
severities) maps onto exactly one `DiagnosticLevel`. The ordinals mirror
TypeScript's ``DiagnosticCategory`` enum so that a type-checker category can be
cast directly::

    Warning = 0, Error = 1, Suggestion = 2, Message = 3

Levels carry no severity ranking; they are compared by membership only.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Final

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class DiagnosticLevel(IntEnum):
    """Canonical severity classification of a normalized diagnostic."""

    WARNING = 0
    ERROR = 1
    SUGGESTION = 2
    MESSAGE = 3

    @property
    def label(self) -> str:
        """Upper-case label used in terminal reports (e.g. ``"ERROR"``)."""
        return self.name

    @property
    def badge(self) -> Callable[[str], str]:
        """Return the `yachalk` badge style for this level.

        The style is bold black text on a bright background. A fresh builder is
        returned on every access since `yachalk` builders accumulate styles when
        chained.

        Returns:
            Callable[[str], str]: The badge colorizer.
        """
        base = chalk.bold.rgb(0, 0, 0)
        if self is DiagnosticLevel.ERROR:
            return base.bg_red_bright
        if self is DiagnosticLevel.WARNING:
            return base.bg_yellow_bright
        if self is DiagnosticLevel.SUGGESTION:
            return base.bg_blue_bright
        return base.bg_cyan_bright

    @classmethod
    def parse(cls, raw: str | int | None) -> DiagnosticLevel | None:
        """Parse a level from its name (case-insensitive) or ordinal.

        Args:
            raw: A level name such as ``"warning"`` or an integer ordinal.

        Returns:
            The matching level, or ``None`` when ``raw`` is unknown.
        """
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            try:
                return cls(raw)
            except ValueError:
                return None
        token: str = _norm_token(raw)
        if token.isdigit():
            return cls.parse(int(token))
        for member in cls:
            if token == _norm_token(member.name):
                return member
        return None


DEFAULT_LOG_LEVELS: Final[tuple[DiagnosticLevel, ...]] = (
    DiagnosticLevel.WARNING,
    DiagnosticLevel.ERROR,
    DiagnosticLevel.SUGGESTION,
    DiagnosticLevel.MESSAGE,
)
"""Levels that pass the filter by default: everything classifiable."""
