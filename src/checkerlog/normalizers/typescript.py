# topmark:header:start
#
#   project      : CheckerLog
#   file         : typescript.py
#   file_relpath : src/checkerlog/normalizers/typescript.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalizer for TypeScript compiler diagnostics (``tsc`` and ``vue-tsc``).

The source text is carried by the diagnostic itself (``file.text``), so
normalization is synchronous. Positions are raw character offsets, converted to
0-based line/character pairs and then to a 1-based `SourceLocation`.

The compiler's ``DiagnosticCategory`` (``Warning = 0, Error = 1,
Suggestion = 2, Message = 3``) has the same ordinals as `DiagnosticLevel`, so
the category is cast directly; unknown categories become errors.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from checkerlog.config.logging import get_logger
from checkerlog.diagnostic.level import DiagnosticLevel
from checkerlog.diagnostic.location import (
    compute_line_starts,
    line_and_character_of_position,
    ts_location_to_location,
)
from checkerlog.diagnostic.model import CheckerName, NormalizedDiagnostic
from checkerlog.rendering.frame import create_frame, strip_frame

if TYPE_CHECKING:
    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.diagnostic.location import SourceLocation
    from checkerlog.normalizers.types import (
        DiagnosticMessageChain,
        TsDiagnostic,
        TsSourceFile,
    )

logger: CheckerLogLogger = get_logger(__name__)


def flatten_diagnostic_message_text(
    diag: str | DiagnosticMessageChain | None,
    new_line: str,
    indent: int = 0,
) -> str:
    """Flatten a possibly nested TypeScript message into one string.

    Each nested message starts on a new line, indented by two spaces per level.

    Args:
        diag: Plain message, message chain, or ``None``.
        new_line: Line separator to use.
        indent: Current nesting depth.

    Returns:
        The flattened message text.
    """
    if diag is None:
        return ""
    if isinstance(diag, str):
        return diag
    result: str = ""
    if indent:
        result += new_line + "  " * indent
    result += diag["messageText"]
    for kid in diag.get("next") or []:
        result += flatten_diagnostic_message_text(kid, new_line, indent + 1)
    return result


def _category_to_level(category: object) -> DiagnosticLevel:
    if isinstance(category, int) and not isinstance(category, bool):
        try:
            return DiagnosticLevel(category)
        except ValueError:
            pass
    logger.debug("Unknown TypeScript diagnostic category %r, treating as error", category)
    return DiagnosticLevel.ERROR


def _location_of(d: TsDiagnostic) -> SourceLocation | None:
    source_file: TsSourceFile | None = d.get("file")
    start: object = d.get("start")
    length: object = d.get("length")
    if source_file is None or not isinstance(start, int) or not isinstance(length, int):
        return None
    line_starts: list[int] = compute_line_starts(source_file["text"])
    return ts_location_to_location(
        {
            "start": line_and_character_of_position(line_starts, start),
            "end": line_and_character_of_position(line_starts, start + length),
        }
    )


def normalize_ts_diagnostic(
    d: TsDiagnostic,
    *,
    lines_above: int = 2,
    lines_below: int = 3,
) -> NormalizedDiagnostic:
    """Normalize a TypeScript compiler diagnostic.

    A location and code frame are computed only when the diagnostic has a file,
    a start offset and a length; otherwise both stay unset.

    Args:
        d: The raw compiler diagnostic.
        lines_above: Context lines shown above the marked range.
        lines_below: Context lines shown below the marked range.

    Returns:
        The canonical diagnostic, tagged ``"TypeScript"``.
    """
    source_file: TsSourceFile | None = d.get("file")
    loc: SourceLocation | None = _location_of(d)
    code_frame: str | None = None
    if loc is not None and source_file is not None:
        code_frame = create_frame(
            source_file["text"], loc, lines_above=lines_above, lines_below=lines_below
        )

    diagnostic = NormalizedDiagnostic(
        checker=CheckerName.TYPESCRIPT,
        message=flatten_diagnostic_message_text(d.get("messageText"), os.linesep),
        conclusion="",
        code_frame=code_frame,
        striped_code_frame=strip_frame(code_frame) if code_frame else None,
        id=source_file["fileName"] if source_file is not None else None,
        loc=loc,
        level=_category_to_level(d.get("category")),
    )
    logger.trace("Normalized TypeScript diagnostic: %r", diagnostic)
    return diagnostic


def normalize_vue_tsc_diagnostic(
    d: TsDiagnostic,
    *,
    lines_above: int = 2,
    lines_below: int = 3,
) -> NormalizedDiagnostic:
    """Normalize a ``vue-tsc`` diagnostic (same shape as TypeScript's)."""
    diagnostic: NormalizedDiagnostic = normalize_ts_diagnostic(
        d, lines_above=lines_above, lines_below=lines_below
    )
    return diagnostic.with_checker(CheckerName.VUE_TSC)
