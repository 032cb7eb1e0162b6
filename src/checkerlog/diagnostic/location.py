# topmark:header:start
#
#   project      : CheckerLog
#   file         : location.py
#   file_relpath : src/checkerlog/diagnostic/location.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical 1-based source locations and conversions into them.

Checkers report positions in different conventions:

- the TypeScript compiler API uses 0-based ``{line, character}`` pairs (and raw
  character offsets into the file text),
- the language-server protocol uses 0-based ``{line, character}`` ranges,
- ESLint already reports 1-based lines and columns.

All of them end up as a `SourceLocation`, whose lines and columns are 1-based.
The conversions add 1 to each coordinate independently and never clamp.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class LineAndCharacter(TypedDict):
    """0-based line and character pair (compiler and LSP convention)."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """1-based line/column position."""

    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly dict of this position."""
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """1-based start/end range a diagnostic applies to."""

    start: SourcePosition
    end: SourcePosition

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Return a JSON-friendly dict of this location."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


def _shift(pos: Mapping[str, int]) -> SourcePosition:
    return SourcePosition(line=pos["line"] + 1, column=pos["character"] + 1)


def ts_location_to_location(ts_loc: Mapping[str, LineAndCharacter]) -> SourceLocation:
    """Convert a 0-based compiler ``{start, end}`` pair into a `SourceLocation`.

    Args:
        ts_loc: Mapping with ``start`` and ``end`` `LineAndCharacter` entries.

    Returns:
        The 1-based location (every coordinate shifted by one).
    """
    return SourceLocation(start=_shift(ts_loc["start"]), end=_shift(ts_loc["end"]))


def lsp_range_to_location(lsp_range: Mapping[str, Mapping[str, int]]) -> SourceLocation:
    """Convert a 0-based LSP ``Range`` into a `SourceLocation`.

    Args:
        lsp_range: LSP range with ``start``/``end`` positions.

    Returns:
        The 1-based location.
    """
    return SourceLocation(start=_shift(lsp_range["start"]), end=_shift(lsp_range["end"]))


# --- Offset to line/character ---

_LINE_BREAKS = frozenset("\n\r\u2028\u2029")


def compute_line_starts(text: str) -> list[int]:
    """Return the offsets at which each line of ``text`` starts.

    ``\\r\\n`` counts as a single break; lone ``\\r``, ``\\n``, and the Unicode
    line/paragraph separators are breaks too.
    """
    starts: list[int] = [0]
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        pos += 1
        if ch in _LINE_BREAKS:
            if ch == "\r" and pos < length and text[pos] == "\n":
                pos += 1
            starts.append(pos)
    return starts


def line_and_character_of_position(
    text_or_line_starts: str | Sequence[int],
    position: int,
) -> LineAndCharacter:
    """Convert a 0-based character offset into a 0-based line/character pair.

    Args:
        text_or_line_starts: Source text, or precomputed `compute_line_starts` output.
        position: Character offset into the source text.

    Returns:
        The 0-based line and character of ``position``.
    """
    line_starts: Sequence[int] = (
        compute_line_starts(text_or_line_starts)
        if isinstance(text_or_line_starts, str)
        else text_or_line_starts
    )
    line: int = max(bisect_right(line_starts, position) - 1, 0)
    return {"line": line, "character": position - line_starts[line]}
