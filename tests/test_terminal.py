# topmark:header:start
#
#   project      : CheckerLog
#   file         : test_terminal.py
#   file_relpath : tests/test_terminal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for terminal report rendering."""

from __future__ import annotations

import os

import click

from checkerlog.diagnostic.level import DiagnosticLevel
from checkerlog.rendering.terminal import diagnostic_to_terminal_log
from tests.conftest import make_diagnostic, make_location


def test_full_report_parts() -> None:
    """Label, message, file position, frame and conclusion appear in order."""
    d = make_diagnostic(
        DiagnosticLevel.WARNING,
        message="Unused variable",
        loc=make_location(3, 5, 3, 9),
        code_frame="FRAME",
        conclusion="see docs",
    )
    text: str = click.unstyle(diagnostic_to_terminal_log(d, "ESLint"))
    assert text.split(os.linesep) == [
        " WARNING(ESLint)  Unused variable",
        " FILE  /project/src/main.ts:3:5",
        "",
        "FRAME",
        "",
        "see docs",
    ]


def test_empty_parts_are_omitted() -> None:
    """Without frame and conclusion, only the label and file lines remain."""
    d = make_diagnostic(DiagnosticLevel.ERROR, message="boom")
    text: str = click.unstyle(diagnostic_to_terminal_log(d))
    assert text == f" ERROR  boom{os.linesep} FILE  /project/src/main.ts:{os.linesep}"


def test_missing_level_is_labelled_error() -> None:
    """An unclassified record renders with the ERROR label."""
    text: str = click.unstyle(diagnostic_to_terminal_log(make_diagnostic(None)))
    assert text.startswith(" ERROR ")
