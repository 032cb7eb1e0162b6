# topmark:header:start
#
#   project      : CheckerLog
#   file         : test_runtime.py
#   file_relpath : tests/test_runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for runtime payload projection and the overlay envelope."""

from __future__ import annotations

import json
import os

from checkerlog.constants import CHECKER_ERROR_EVENT
from checkerlog.diagnostic.level import DiagnosticLevel
from checkerlog.runtime.payloads import diagnostic_to_runtime_error
from checkerlog.runtime.schemas import RuntimeDiagnostic
from checkerlog.runtime.serializers import serialize_custom_payload
from checkerlog.runtime.shapes import to_custom_payload
from tests.conftest import make_diagnostic, make_location


def test_cardinality_is_preserved() -> None:
    """A single record gives a single payload; a sequence gives a list."""
    first = make_diagnostic(message="first")
    second = make_diagnostic(message="second")
    single = diagnostic_to_runtime_error(first)
    assert isinstance(single, RuntimeDiagnostic)
    many = diagnostic_to_runtime_error([first, second])
    assert [p.message for p in many] == ["first", "second"]
    assert diagnostic_to_runtime_error([]) == []


def test_payload_uses_the_stripped_frame() -> None:
    """Only the escape-free frame is carried."""
    d = make_diagnostic(code_frame="\x1b[31m> 1 |\x1b[39m", striped_code_frame="> 1 |")
    assert diagnostic_to_runtime_error(d).frame == "> 1 |"


def test_payload_fields() -> None:
    """Keys follow the overlay contract, with the level as its ordinal."""
    d = make_diagnostic(
        DiagnosticLevel.WARNING,
        loc=make_location(4, 2, 4, 6),
        stack=["at a()", "at b()"],
    )
    assert diagnostic_to_runtime_error(d).to_dict() == {
        "message": d.message,
        "stack": f"at a(){os.linesep}at b()",
        "id": "/project/src/main.ts",
        "frame": None,
        "checkerId": "TypeScript",
        "level": 0,
        "loc": {"file": "/project/src/main.ts", "line": 4, "column": 2},
    }


def test_sparse_record_defaults() -> None:
    """Missing message and stack become empty strings; no location gives no loc."""
    payload = diagnostic_to_runtime_error(make_diagnostic(None, message=None)).to_dict()
    assert payload["message"] == ""
    assert payload["stack"] == ""
    assert payload["level"] is None
    assert payload["loc"] is None


def test_custom_payload_envelope() -> None:
    """The envelope carries the event tag, checker id and payloads in order."""
    payloads = diagnostic_to_runtime_error(
        [make_diagnostic(message="a"), make_diagnostic(message="b")]
    )
    envelope = to_custom_payload("ESLint", payloads)
    assert envelope["type"] == "custom"
    assert envelope["event"] == CHECKER_ERROR_EVENT
    assert envelope["data"]["checkerId"] == "ESLint"
    assert [p["message"] for p in envelope["data"]["diagnostics"]] == ["a", "b"]


def test_serialized_envelope_is_json() -> None:
    """Serialization round-trips through `json.loads`."""
    payloads = diagnostic_to_runtime_error([make_diagnostic()])
    text: str = serialize_custom_payload("TypeScript", payloads)
    assert json.loads(text) == to_custom_payload("TypeScript", payloads)
