# topmark:header:start
#
#   project      : CheckerLog
#   file         : summary.py
#   file_relpath : src/checkerlog/rendering/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-checker summary lines (``[ESLint] Found 2 errors and 1 warning``).

The composer does not count anything itself; callers pass the counts (see
[`compute_diagnostic_stats`][checkerlog.diagnostic.model.compute_diagnostic_stats]).
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from yachalk import chalk


class SummaryTone(str, Enum):
    """Summary color, chosen from the worst counted severity.

    Each value names a `yachalk` style. The style is looked up on the module's
    ``chalk`` when the line is colored, so the global color mode in effect at
    that moment applies.
    """

    ERROR = "red"
    WARNING = "yellow"
    CLEAN = "green"

    @property
    def color(self) -> Callable[..., str]:
        """Return the colorizer for this tone."""
        return getattr(chalk, self.value)

    @classmethod
    def for_counts(cls, error_count: int, warning_count: int) -> SummaryTone:
        """Return the tone for the given counts: errors win over warnings."""
        if error_count > 0:
            return cls.ERROR
        if warning_count > 0:
            return cls.WARNING
        return cls.CLEAN


def _plural(noun: str, count: int) -> str:
    # Only counts above one take the plural: "0 error", "1 error", "2 errors".
    return f"{count} {noun}{'s' if count > 1 else ''}"


def wrap_checker_summary(checker_name: str, raw_summary: str) -> str:
    """Prefix ``raw_summary`` with ``[checker_name] ``."""
    return f"[{checker_name}] {raw_summary}"


def compose_checker_summary(checker_name: str, error_count: int, warning_count: int) -> str:
    """Compose the colored summary line for one checker.

    Args:
        checker_name: Display name of the checker.
        error_count: Number of errors reported.
        warning_count: Number of warnings reported.

    Returns:
        ``"[<checker>] Found N error(s) and M warning(s)"``, colored red when there
        are errors, yellow when there are only warnings and green otherwise.
    """
    message: str = (
        f"Found {_plural('error', error_count)} and {_plural('warning', warning_count)}"
    )
    tone: SummaryTone = SummaryTone.for_counts(error_count, warning_count)
    return tone.color(wrap_checker_summary(checker_name, message))
