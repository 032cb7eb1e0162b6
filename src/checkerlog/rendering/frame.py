# topmark:header:start
#
#   project      : CheckerLog
#   file         : frame.py
#   file_relpath : src/checkerlog/rendering/frame.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Code frame rendering for diagnostics.

A code frame is a bounded excerpt of the source text around a location, with a
line-number gutter, a ``>`` marker on the affected lines and ``^`` carets under
the affected columns::

      1 | const a = 1
    > 2 | const b: string = a
        |       ^
      3 | export { b }

Frames produced by `create_frame` are always color-decorated: checkers usually
run in worker contexts whose stdout is not a TTY, so colors are forced here and
the writer decides whether to keep them. `strip_frame` derives the escape-free
variant carried by runtime payloads.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

import click
from yachalk import ChalkFactory
from yachalk import ColorMode as ChalkColorMode

from checkerlog.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.diagnostic.location import SourceLocation

logger: CheckerLogLogger = get_logger(__name__)

# (first marked column, number of carets); ``True`` marks the whole line.
Marker: TypeAlias = "tuple[int, int] | bool"

NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|[\n\r\u2028\u2029]")
FRAME_INDENT: Final[str] = "  "

_PLAIN: Final[ChalkFactory] = ChalkFactory(ChalkColorMode.AllOff)
_FORCED: Final[ChalkFactory] = ChalkFactory(ChalkColorMode.Basic16)


@dataclass(frozen=True)
class _FrameStyles:
    gutter: Callable[[str], str]
    marker: Callable[[str], str]
    message: Callable[[str], str]

    @classmethod
    def from_palette(cls, palette: ChalkFactory) -> _FrameStyles:
        # yachalk builders accumulate styles when chained: build each one fresh.
        return cls(
            gutter=palette.grey,
            marker=palette.red.bold,
            message=palette.red.bold,
        )


def _line_length(lines: list[str], line_number: int) -> int:
    index: int = line_number - 1
    return len(lines[index]) if 0 <= index < len(lines) else 0


def _marker_lines(
    location: SourceLocation,
    lines: list[str],
    *,
    lines_above: int,
    lines_below: int,
) -> tuple[int, int, dict[int, Marker]]:
    """Compute the visible line window and the per-line markers.

    Returns:
        ``(start, end, markers)`` where ``start``/``end`` are 0-based slice bounds
        into ``lines`` and ``markers`` maps 1-based line numbers to markers.
    """
    start_line: int = location.start.line
    start_column: int = location.start.column
    end_line: int = location.end.line
    end_column: int = location.end.column

    start: int = max(start_line - (lines_above + 1), 0)
    end: int = min(len(lines), end_line + lines_below)

    line_diff: int = end_line - start_line
    markers: dict[int, Marker] = {}

    if line_diff:
        # An inverted range (line_diff < 0) marks nothing.
        for i in range(line_diff + 1):
            line_number: int = start_line + i
            if not start_column:
                markers[line_number] = True
            elif i == 0:
                source_length: int = _line_length(lines, line_number)
                markers[line_number] = (start_column, source_length - start_column + 1)
            elif i == line_diff:
                markers[line_number] = (0, end_column)
            else:
                markers[line_number] = (0, _line_length(lines, line_number))
    elif start_column == end_column:
        markers[start_line] = (start_column, 0) if start_column else True
    else:
        markers[start_line] = (start_column, end_column - start_column)

    return start, end, markers


def code_frame_columns(
    source: str,
    location: SourceLocation,
    *,
    lines_above: int = 2,
    lines_below: int = 3,
    highlight: bool = False,
    message: str | None = None,
) -> str:
    """Render a code frame for ``location`` inside ``source``.

    Args:
        source: Full source text of the file.
        location: 1-based location to mark.
        lines_above: Context lines shown above the first marked line.
        lines_below: Context lines shown below the last marked line.
        highlight: Insert color escapes regardless of terminal capabilities.
        message: Optional message printed after the last caret row.

    Returns:
        The rendered frame, lines joined with ``"\\n"`` (no indentation).
    """
    styles: _FrameStyles = _FrameStyles.from_palette(_FORCED if highlight else _PLAIN)
    lines: list[str] = NEWLINE_RE.split(source)
    start, end, markers = _marker_lines(
        location, lines, lines_above=lines_above, lines_below=lines_below
    )
    number_max_width: int = len(str(end))

    rendered: list[str] = []
    for index, line in enumerate(lines[start:end]):
        number: int = start + 1 + index
        padded_number: str = f" {number}"[-number_max_width:]
        gutter: str = f" {padded_number} |"
        marker: Marker | None = markers.get(number)
        code: str = f" {line}" if line else ""

        if not marker:
            rendered.append(f" {styles.gutter(gutter)}{code}")
            continue

        marker_line: str = ""
        if isinstance(marker, tuple):
            column, count = marker
            marker_spacing: str = re.sub(r"[^\t]", " ", line[: max(column - 1, 0)])
            marker_line = "".join(
                [
                    "\n ",
                    styles.gutter(re.sub(r"\d", " ", gutter)),
                    " ",
                    marker_spacing,
                    styles.marker("^") * (count or 1),
                ]
            )
            if message and not markers.get(number + 1):
                marker_line += " " + styles.message(message)
        rendered.append("".join([styles.marker(">"), styles.gutter(gutter), code, marker_line]))

    return "\n".join(rendered)


def create_frame(
    source: str,
    location: SourceLocation,
    *,
    lines_above: int = 2,
    lines_below: int = 3,
) -> str:
    """Render a color-decorated, indented code frame.

    Colors are forced since worker contexts do not share the parent's TTY. Each
    line is indented by two spaces and lines are joined with ``os.linesep``.

    Args:
        source: Full source text of the file.
        location: 1-based location to mark.
        lines_above: Context lines shown above the first marked line.
        lines_below: Context lines shown below the last marked line.

    Returns:
        The decorated frame.
    """
    frame: str = code_frame_columns(
        source,
        location,
        lines_above=lines_above,
        lines_below=lines_below,
        highlight=True,
    )
    logger.trace(
        "Rendered frame for %d:%d-%d:%d",
        location.start.line,
        location.start.column,
        location.end.line,
        location.end.column,
    )
    return os.linesep.join(FRAME_INDENT + line for line in frame.split("\n"))


def strip_frame(frame: str) -> str:
    """Return ``frame`` with every ANSI escape sequence removed."""
    return click.unstyle(frame)
