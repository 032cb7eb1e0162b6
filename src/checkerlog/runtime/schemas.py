# topmark:header:start
#
#   project      : CheckerLog
#   file         : schemas.py
#   file_relpath : src/checkerlog/runtime/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime payload schema for overlay clients.

A runtime payload is the JSON-serializable projection of a `NormalizedDiagnostic`
sent to an in-browser overlay. It only carries plain text: the code frame is the
stripped variant, never the color-decorated one.

Keys are camel-cased where the overlay expects it (``checkerId``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final


class RuntimeKey:
    """Canonical keys used in runtime payloads and envelopes."""

    # envelope
    TYPE: Final[str] = "type"
    EVENT: Final[str] = "event"
    DATA: Final[str] = "data"
    CHECKER_ID: Final[str] = "checkerId"
    DIAGNOSTICS: Final[str] = "diagnostics"

    # diagnostic entry
    MESSAGE: Final[str] = "message"
    STACK: Final[str] = "stack"
    ID: Final[str] = "id"
    FRAME: Final[str] = "frame"
    LEVEL: Final[str] = "level"
    LOC: Final[str] = "loc"

    # location
    FILE: Final[str] = "file"
    LINE: Final[str] = "line"
    COLUMN: Final[str] = "column"


# Envelope ``type`` understood by dev-server transports.
CUSTOM_PAYLOAD_TYPE: Final[str] = "custom"


@dataclass(frozen=True, slots=True)
class RuntimeLocation:
    """Start position of a runtime diagnostic."""

    file: str | None
    line: int
    column: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {
            RuntimeKey.FILE: self.file,
            RuntimeKey.LINE: self.line,
            RuntimeKey.COLUMN: self.column,
        }


@dataclass(frozen=True, slots=True)
class RuntimeDiagnostic:
    """Runtime payload for one diagnostic.

    Attributes:
        message: Message text, ``""`` when absent.
        stack: Stack trace as one string, ``""`` when absent.
        id: File identifier, if any.
        frame: Plain-text code frame, if any.
        checker_id: Name of the producing checker.
        level: Integer level ordinal, if classified.
        loc: Start position, if known.
    """

    message: str
    stack: str
    id: str | None
    frame: str | None
    checker_id: str
    level: int | None
    loc: RuntimeLocation | None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping with the overlay's key names."""
        return {
            RuntimeKey.MESSAGE: self.message,
            RuntimeKey.STACK: self.stack,
            RuntimeKey.ID: self.id,
            RuntimeKey.FRAME: self.frame,
            RuntimeKey.CHECKER_ID: self.checker_id,
            RuntimeKey.LEVEL: self.level,
            RuntimeKey.LOC: self.loc.to_dict() if self.loc is not None else None,
        }
