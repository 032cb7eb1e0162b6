# topmark:header:start
#
#   project      : CheckerLog
#   file         : shapes.py
#   file_relpath : src/checkerlog/runtime/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Envelope builder for runtime payloads.

The envelope is what a dev server pushes to a connected overlay client::

    {"type": "custom", "event": CHECKER_ERROR_EVENT,
     "data": {"checkerId": ..., "diagnostics": [...]}}

This module does not serialize; see `checkerlog.runtime.serializers`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from checkerlog.constants import CHECKER_ERROR_EVENT
from checkerlog.runtime.schemas import CUSTOM_PAYLOAD_TYPE, RuntimeKey

if TYPE_CHECKING:
    from collections.abc import Iterable

    from checkerlog.runtime.schemas import RuntimeDiagnostic


def to_custom_payload(
    checker_id: str,
    diagnostics: Iterable[RuntimeDiagnostic],
) -> dict[str, Any]:
    """Wrap runtime payloads into a ``custom`` event envelope.

    Args:
        checker_id: Identifier of the checker that produced the diagnostics.
        diagnostics: Runtime payloads, in order.

    Returns:
        JSON-serializable envelope dict.
    """
    return {
        RuntimeKey.TYPE: CUSTOM_PAYLOAD_TYPE,
        RuntimeKey.EVENT: CHECKER_ERROR_EVENT,
        RuntimeKey.DATA: {
            RuntimeKey.CHECKER_ID: checker_id,
            RuntimeKey.DIAGNOSTICS: [d.to_dict() for d in diagnostics],
        },
    }
