# topmark:header:start
#
#   project      : CheckerLog
#   file         : types.py
#   file_relpath : src/checkerlog/normalizers/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Raw diagnostic shapes consumed by the source normalizers.

These `TypedDict`s describe the JSON-compatible structures each checker emits:

- TypeScript compiler diagnostics (``ts.Diagnostic``, with the source file text),
- language-server ``textDocument/publishDiagnostics`` notifications,
- ESLint ``LintResult`` objects (as produced by ``eslint -f json``).

Only the fields CheckerLog reads are declared; optional fields may be missing.
"""

from __future__ import annotations

from typing import TypedDict

from typing_extensions import NotRequired

from checkerlog.diagnostic.location import LineAndCharacter

# --- TypeScript ---


class DiagnosticMessageChain(TypedDict):
    """Nested TypeScript message (``ts.DiagnosticMessageChain``)."""

    messageText: str
    category: NotRequired[int]
    code: NotRequired[int]
    next: NotRequired[list[DiagnosticMessageChain]]


class TsSourceFile(TypedDict):
    """The part of ``ts.SourceFile`` a diagnostic refers to."""

    fileName: str
    text: str


class TsDiagnostic(TypedDict):
    """TypeScript compiler diagnostic (``ts.Diagnostic``)."""

    messageText: str | DiagnosticMessageChain
    category: int
    code: NotRequired[int]
    file: NotRequired[TsSourceFile | None]
    start: NotRequired[int | None]
    length: NotRequired[int | None]


# --- Language server protocol ---


class LspRange(TypedDict):
    """0-based LSP range."""

    start: LineAndCharacter
    end: LineAndCharacter


class LspDiagnostic(TypedDict):
    """LSP ``Diagnostic``."""

    range: LspRange
    message: str
    severity: NotRequired[int]
    code: NotRequired[int | str]
    source: NotRequired[str]


class PublishDiagnosticsParams(TypedDict):
    """LSP ``PublishDiagnosticsParams`` for one document."""

    uri: str
    diagnostics: list[LspDiagnostic]
    version: NotRequired[int]


# --- ESLint ---


class ESLintMessage(TypedDict):
    """One message of an ESLint ``LintResult`` (1-based positions)."""

    ruleId: str | None
    severity: int
    message: str
    line: NotRequired[int]
    column: NotRequired[int]
    endLine: NotRequired[int]
    endColumn: NotRequired[int]


class ESLintLintResult(TypedDict):
    """ESLint result for one file."""

    filePath: str
    messages: list[ESLintMessage]
    source: NotRequired[str]
    errorCount: NotRequired[int]
    warningCount: NotRequired[int]
