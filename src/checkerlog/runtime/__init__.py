# topmark:header:start
#
#   project      : CheckerLog
#   file         : __init__.py
#   file_relpath : src/checkerlog/runtime/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime projection of diagnostics for in-browser overlay clients."""

from __future__ import annotations

from checkerlog.runtime.payloads import diagnostic_to_runtime_error
from checkerlog.runtime.schemas import RuntimeDiagnostic, RuntimeKey, RuntimeLocation
from checkerlog.runtime.serializers import serialize_custom_payload
from checkerlog.runtime.shapes import to_custom_payload

__all__ = [
    "RuntimeDiagnostic",
    "RuntimeKey",
    "RuntimeLocation",
    "diagnostic_to_runtime_error",
    "serialize_custom_payload",
    "to_custom_payload",
]
