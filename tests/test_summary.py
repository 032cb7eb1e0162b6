# topmark:header:start
#
#   project      : CheckerLog
#   file         : test_summary.py
#   file_relpath : tests/test_summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for checker summary lines."""

from __future__ import annotations

from typing import Callable

import click
import pytest

from checkerlog.rendering import summary as summary_module
from checkerlog.rendering.summary import (
    SummaryTone,
    compose_checker_summary,
    wrap_checker_summary,
)


@pytest.mark.parametrize(
    "errors, warnings, expected",
    [
        (2, 0, "[TypeScript] Found 2 errors and 0 warning"),
        (1, 1, "[TypeScript] Found 1 error and 1 warning"),
        (0, 0, "[TypeScript] Found 0 error and 0 warning"),
        (0, 3, "[TypeScript] Found 0 error and 3 warnings"),
    ],
)
def test_summary_wording(errors: int, warnings: int, expected: str) -> None:
    """Nouns are pluralized only when their count is above one."""
    assert click.unstyle(compose_checker_summary("TypeScript", errors, warnings)) == expected


@pytest.mark.parametrize(
    "errors, warnings, tone",
    [
        (1, 5, SummaryTone.ERROR),
        (0, 5, SummaryTone.WARNING),
        (0, 0, SummaryTone.CLEAN),
    ],
)
def test_summary_tone(errors: int, warnings: int, tone: SummaryTone) -> None:
    """Errors win over warnings; no findings is clean."""
    assert SummaryTone.for_counts(errors, warnings) is tone


def test_wrap_checker_summary() -> None:
    """The checker name is prefixed in brackets."""
    assert wrap_checker_summary("ESLint", "all good") == "[ESLint] all good"


class RecordingChalk:
    """Stand-in for `yachalk.chalk` that wraps text in the requested style name."""

    def __getattr__(self, style: str) -> Callable[..., str]:
        def colorize(*args: object, sep: str = " ") -> str:
            return f"<{style}>{sep.join(str(arg) for arg in args)}</{style}>"

        return colorize


@pytest.mark.parametrize(
    "errors, warnings, style",
    [
        (1, 5, "red"),
        (0, 5, "yellow"),
        (0, 0, "green"),
    ],
)
def test_summary_line_is_colored_by_tone(
    monkeypatch: pytest.MonkeyPatch, errors: int, warnings: int, style: str
) -> None:
    """The whole composed line goes through the colorizer chosen for the counts."""
    monkeypatch.setattr(summary_module, "chalk", RecordingChalk())
    line: str = compose_checker_summary("TypeScript", errors, warnings)
    plain: str = wrap_checker_summary(
        "TypeScript",
        f"Found {errors} error and {warnings} warning{'s' if warnings > 1 else ''}",
    )
    assert line == f"<{style}>{plain}</{style}>"
