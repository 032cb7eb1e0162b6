# topmark:header:start
#
#   project      : CheckerLog
#   file         : serializers.py
#   file_relpath : src/checkerlog/runtime/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON serialization of runtime envelopes.

`json.dumps()` does not append a trailing newline; callers printing the result
add their own.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from checkerlog.runtime.shapes import to_custom_payload

if TYPE_CHECKING:
    from collections.abc import Iterable

    from checkerlog.runtime.schemas import RuntimeDiagnostic


def serialize_custom_payload(
    checker_id: str,
    diagnostics: Iterable[RuntimeDiagnostic],
    *,
    indent: int | None = 2,
) -> str:
    """Serialize a ``custom`` event envelope to JSON text.

    Args:
        checker_id: Identifier of the checker that produced the diagnostics.
        diagnostics: Runtime payloads, in order.
        indent: Indentation passed to `json.dumps`; ``None`` for compact output.

    Returns:
        The JSON string (no trailing newline).
    """
    envelope: dict[str, Any] = to_custom_payload(checker_id, diagnostics)
    return json.dumps(envelope, indent=indent)
