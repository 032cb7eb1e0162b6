# topmark:header:start
#
#   project      : CheckerLog
#   file         : test_frame.py
#   file_relpath : tests/test_frame.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for code frame rendering and stripping."""

from __future__ import annotations

import os

from checkerlog.rendering.frame import code_frame_columns, create_frame, strip_frame
from tests.conftest import SAMPLE_SOURCE, make_location

ESC: str = "\x1b["


def test_single_line_frame_layout() -> None:
    """A one-line range gets a marker, a gutter and carets under the columns."""
    frame: str = code_frame_columns(SAMPLE_SOURCE, make_location(2, 7, 2, 8))
    assert frame.split("\n") == [
        "  1 | const a = 1",
        "> 2 | const b: string = a",
        "    |       ^",
        "  3 | export { b }",
        "  4 |",
    ]


def test_context_window_is_bounded() -> None:
    """Only ``lines_above`` lines above and ``lines_below`` lines below are shown."""
    source: str = "\n".join(f"line {n}" for n in range(1, 21))
    frame: str = code_frame_columns(
        source, make_location(10, 1, 10, 5), lines_above=1, lines_below=1
    )
    numbers: list[str] = [row[:4].strip(" >|") for row in frame.split("\n") if "line" in row]
    assert numbers == ["9", "10", "11"]


def test_multi_line_range_marks_every_line() -> None:
    """Every line of a multi-line range is marked."""
    frame: str = code_frame_columns(SAMPLE_SOURCE, make_location(1, 7, 2, 6))
    marked: list[str] = [row for row in frame.split("\n") if row.startswith(">")]
    assert len(marked) == 2


def test_frame_at_file_boundaries_does_not_fail() -> None:
    """Ranges at the first line or beyond the last line render without error."""
    assert "> 1 |" in code_frame_columns(SAMPLE_SOURCE, make_location(1, 1, 1, 2))
    assert code_frame_columns(SAMPLE_SOURCE, make_location(40, 1, 40, 2)) == ""
    assert code_frame_columns("", make_location(1, 1, 1, 1)).startswith("> 1 |")


def test_inverted_range_renders_without_carets() -> None:
    """An end line of 0 marks nothing but still renders context."""
    frame: str = code_frame_columns(SAMPLE_SOURCE, make_location(2, 7, 0, 0))
    assert "^" not in frame
    assert "> " not in frame


def test_create_frame_is_colored_and_indented() -> None:
    """Forced colors are applied and each line is indented by two spaces."""
    frame: str = create_frame(SAMPLE_SOURCE, make_location(2, 7, 2, 8))
    assert ESC in frame
    assert all(line.startswith("  ") for line in frame.split(os.linesep))


def test_strip_frame_keeps_visible_text() -> None:
    """Stripping removes every escape and leaves the plain render, indented."""
    loc = make_location(2, 7, 2, 8)
    stripped: str = strip_frame(create_frame(SAMPLE_SOURCE, loc))
    plain: str = code_frame_columns(SAMPLE_SOURCE, loc)
    assert ESC not in stripped
    assert stripped == os.linesep.join(f"  {line}" for line in plain.split("\n"))
