# topmark:header:start
#
#   project      : CheckerLog
#   file         : eslint.py
#   file_relpath : src/checkerlog/normalizers/eslint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalizer for ESLint lint results.

One ``LintResult`` covers one file and many messages. ESLint positions are
already 1-based and the result captures the source text, so no I/O is needed.

Severity ``0`` ("off") drops the message entirely. A missing ``endLine`` becomes
``0`` rather than the start line; the resulting inverted range renders a frame
without carets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from checkerlog.config.logging import get_logger
from checkerlog.diagnostic.level import DiagnosticLevel
from checkerlog.diagnostic.location import SourceLocation, SourcePosition
from checkerlog.diagnostic.model import CheckerName, NormalizedDiagnostic
from checkerlog.rendering.frame import create_frame, strip_frame

if TYPE_CHECKING:
    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.normalizers.types import ESLintLintResult, ESLintMessage

logger: CheckerLogLogger = get_logger(__name__)

# 0 ("off") is absent on purpose: such messages are dropped.
ESLINT_SEVERITY_TO_LEVEL: Final[dict[int, DiagnosticLevel]] = {
    1: DiagnosticLevel.WARNING,
    2: DiagnosticLevel.ERROR,
}


def _with_rule_id(text: str, rule_id: str | None) -> str:
    # Parser errors carry no rule id.
    return f"{text} ({rule_id})" if rule_id else text


def _normalize_message(
    message: ESLintMessage,
    *,
    file_path: str,
    source: str,
    lines_above: int,
    lines_below: int,
) -> NormalizedDiagnostic | None:
    severity: int = message["severity"]
    if severity == 0:
        logger.trace("Dropping ESLint message turned off: %r", message.get("ruleId"))
        return None
    level: DiagnosticLevel = ESLINT_SEVERITY_TO_LEVEL.get(severity, DiagnosticLevel.ERROR)

    loc = SourceLocation(
        start=SourcePosition(line=message.get("line") or 0, column=message.get("column") or 0),
        end=SourcePosition(
            line=message.get("endLine") or 0,
            column=message.get("endColumn") or 0,
        ),
    )
    code_frame: str = create_frame(source, loc, lines_above=lines_above, lines_below=lines_below)

    return NormalizedDiagnostic(
        checker=CheckerName.ESLINT,
        message=_with_rule_id(message["message"], message.get("ruleId")),
        conclusion="",
        code_frame=code_frame,
        striped_code_frame=strip_frame(code_frame),
        id=file_path,
        loc=loc,
        level=level,
    )


def normalize_eslint_diagnostic(
    diagnostic: ESLintLintResult,
    *,
    lines_above: int = 2,
    lines_below: int = 3,
) -> list[NormalizedDiagnostic]:
    """Normalize every reported message of one ESLint result.

    Args:
        diagnostic: The lint result for one file.
        lines_above: Context lines shown above each marked range.
        lines_below: Context lines shown below each marked range.

    Returns:
        One canonical diagnostic per message that is not turned off, tagged
        ``"ESLint"``, in the linter's original order.
    """
    source: str = diagnostic.get("source") or ""
    results: list[NormalizedDiagnostic] = []
    for message in diagnostic["messages"]:
        normalized: NormalizedDiagnostic | None = _normalize_message(
            message,
            file_path=diagnostic["filePath"],
            source=source,
            lines_above=lines_above,
            lines_below=lines_below,
        )
        if normalized is not None:
            results.append(normalized)
    logger.debug(
        "Normalized %d of %d ESLint message(s) for %s",
        len(results),
        len(diagnostic["messages"]),
        diagnostic["filePath"],
    )
    return results
