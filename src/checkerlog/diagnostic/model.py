# topmark:header:start
#
#   project      : CheckerLog
#   file         : model.py
#   file_relpath : src/checkerlog/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical diagnostic record shared by every checker.

A `NormalizedDiagnostic` is produced once per raw diagnostic by exactly one
source normalizer (see [`checkerlog.normalizers`][checkerlog.normalizers]) and is
immutable thereafter. The only sanctioned change is a checker-name override via
`NormalizedDiagnostic.with_checker`, which returns a copy.

Sections:
    * CheckerName: the provenance tags in use.
    * NormalizedDiagnostic: the canonical, engine-agnostic record.
    * DiagnosticStats: aggregated error/warning counts for summaries.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

from checkerlog.diagnostic.level import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from checkerlog.diagnostic.location import SourceLocation


class CheckerName:
    """Canonical checker names used for the ``checker`` provenance tag."""

    TYPESCRIPT: Final[str] = "TypeScript"
    VUE_TSC: Final[str] = "vue-tsc"
    VLS: Final[str] = "VLS"
    ESLINT: Final[str] = "ESLint"


@dataclass(frozen=True, slots=True)
class NormalizedDiagnostic:
    """Canonical diagnostic record.

    Attributes:
        checker: Name of the producing checker (provenance tag, not behavior).
        message: Human-readable message; may be absent for sparse input.
        conclusion: Optional trailing note appended to terminal reports.
        stack: Optional raw stack trace, as one string or a sequence of lines.
        id: Absolute file path (or identifier) the diagnostic refers to.
        code_frame: Color-decorated code frame.
        striped_code_frame: The same code frame with all color escapes removed.
        loc: 1-based location, or ``None`` when the position is unknown.
        level: Canonical level; ``None`` means "not classified" and such records
            never pass the filter.
    """

    checker: str
    message: str | None = None
    conclusion: str = ""
    stack: str | Sequence[str] | None = None
    id: str | None = None
    code_frame: str | None = None
    striped_code_frame: str | None = None
    loc: SourceLocation | None = None
    level: DiagnosticLevel | None = None

    def with_checker(self, checker: str) -> NormalizedDiagnostic:
        """Return a copy of this diagnostic relabeled as ``checker``."""
        return replace(self, checker=checker)


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated error and warning counts for summary lines."""

    n_error: int
    n_warning: int

    @property
    def total(self) -> int:
        """Return the total count of counted diagnostics."""
        return self.n_error + self.n_warning


def compute_diagnostic_stats(diagnostics: Iterable[NormalizedDiagnostic]) -> DiagnosticStats:
    """Return error/warning counts for an iterable of diagnostics.

    Args:
        diagnostics: Normalized diagnostics to count.

    Returns:
        The per-level counts (suggestions and messages are not counted).
    """
    items: list[NormalizedDiagnostic] = list(diagnostics)
    n_err: int = sum(1 for d in items if d.level is DiagnosticLevel.ERROR)
    n_warn: int = sum(1 for d in items if d.level is DiagnosticLevel.WARNING)
    return DiagnosticStats(n_error=n_err, n_warning=n_warn)
