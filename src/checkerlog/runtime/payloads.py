# topmark:header:start
#
#   project      : CheckerLog
#   file         : payloads.py
#   file_relpath : src/checkerlog/runtime/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload builders projecting canonical diagnostics for overlay clients.

This module is Click-free and serialization-free (no `json.dumps`); see
`checkerlog.runtime.shapes` for the envelope and
`checkerlog.runtime.serializers` for the JSON text.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING, overload

from checkerlog.config.logging import get_logger
from checkerlog.runtime.schemas import RuntimeDiagnostic, RuntimeLocation

if TYPE_CHECKING:
    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.diagnostic.model import NormalizedDiagnostic

logger: CheckerLogLogger = get_logger(__name__)


def _join_stack(stack: str | Sequence[str] | None) -> str:
    if isinstance(stack, str):
        return stack
    if stack is None:
        return ""
    return os.linesep.join(stack)


def _to_runtime(d: NormalizedDiagnostic) -> RuntimeDiagnostic:
    loc: RuntimeLocation | None = None
    if d.loc is not None:
        loc = RuntimeLocation(
            file=d.id,
            line=d.loc.start.line,
            column=d.loc.start.column if isinstance(d.loc.start.column, int) else 0,
        )
    return RuntimeDiagnostic(
        message=d.message or "",
        stack=_join_stack(d.stack),
        id=d.id,
        frame=d.striped_code_frame,
        checker_id=d.checker,
        level=int(d.level) if d.level is not None else None,
        loc=loc,
    )


@overload
def diagnostic_to_runtime_error(
    diagnostics: Sequence[NormalizedDiagnostic],
) -> list[RuntimeDiagnostic]: ...


@overload
def diagnostic_to_runtime_error(diagnostics: NormalizedDiagnostic) -> RuntimeDiagnostic: ...


def diagnostic_to_runtime_error(
    diagnostics: NormalizedDiagnostic | Sequence[NormalizedDiagnostic],
) -> RuntimeDiagnostic | list[RuntimeDiagnostic]:
    """Project one diagnostic, or a sequence of them, into runtime payloads.

    Cardinality is preserved: a single record yields a single payload and a
    sequence yields a list of the same length, in order.

    Args:
        diagnostics: One canonical diagnostic or a sequence of them.

    Returns:
        The runtime payload(s).
    """
    if isinstance(diagnostics, Sequence):
        logger.trace("Projecting %d diagnostic(s) for the runtime", len(diagnostics))
        return [_to_runtime(d) for d in diagnostics]
    return _to_runtime(diagnostics)
