# topmark:header:start
#
#   project      : CheckerLog
#   file         : filter.py
#   file_relpath : src/checkerlog/diagnostic/filter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Level-based selection of normalized diagnostics."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, overload

from checkerlog.config.logging import get_logger
from checkerlog.diagnostic.level import DEFAULT_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Collection

    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.diagnostic.level import DiagnosticLevel
    from checkerlog.diagnostic.model import NormalizedDiagnostic

logger: CheckerLogLogger = get_logger(__name__)


def _accepts(d: NormalizedDiagnostic, levels: Collection[DiagnosticLevel]) -> bool:
    # WARNING has ordinal 0, so test for presence explicitly.
    if d.level is None:
        logger.trace("Rejecting unclassified diagnostic from %s: %r", d.checker, d.message)
        return False
    return d.level in levels


@overload
def filter_log_level(
    diagnostics: NormalizedDiagnostic,
    levels: Collection[DiagnosticLevel] = ...,
) -> NormalizedDiagnostic | None: ...


@overload
def filter_log_level(
    diagnostics: Sequence[NormalizedDiagnostic],
    levels: Collection[DiagnosticLevel] = ...,
) -> list[NormalizedDiagnostic]: ...


def filter_log_level(
    diagnostics: NormalizedDiagnostic | Sequence[NormalizedDiagnostic],
    levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS,
) -> NormalizedDiagnostic | list[NormalizedDiagnostic] | None:
    """Select diagnostics whose level is in ``levels``.

    Works on a single record or a sequence and preserves cardinality: a single
    record comes back unchanged or as ``None``; a sequence comes back as a
    (possibly empty) list in the original relative order.

    A record without a level never passes, even when every level is allowed.

    Args:
        diagnostics: One normalized diagnostic or a sequence of them.
        levels: Allowed levels; defaults to all four.

    Returns:
        The selected record (or ``None``), or the list of selected records.
    """
    if isinstance(diagnostics, Sequence):
        return [d for d in diagnostics if _accepts(d, levels)]
    return diagnostics if _accepts(diagnostics, levels) else None
