# topmark:header:start
#
#   project      : CheckerLog
#   file         : test_color.py
#   file_relpath : tests/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color resolution and the global `yachalk` color mode."""

from __future__ import annotations

import pytest
from yachalk import ColorMode as ChalkColorMode
from yachalk import chalk

from checkerlog.console.color import ColorMode, resolve_color_mode, sync_chalk_color_mode
from checkerlog.diagnostic.level import DiagnosticLevel


@pytest.mark.parametrize(
    "override, isatty, expected",
    [
        (ColorMode.ALWAYS, False, True),
        (ColorMode.NEVER, True, False),
        (ColorMode.AUTO, True, True),
        (ColorMode.AUTO, False, False),
    ],
)
def test_resolve_color_mode(
    monkeypatch: pytest.MonkeyPatch, override: ColorMode, isatty: bool, expected: bool
) -> None:
    """Explicit modes win over TTY detection."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert (
        resolve_color_mode(color_mode_override=override, output_format=None, stdout_isatty=isatty)
        is expected
    )


def test_json_output_is_never_colored() -> None:
    """Machine output stays plain even when color is forced."""
    assert not resolve_color_mode(color_mode_override=ColorMode.ALWAYS, output_format="json")


def test_enabled_color_lifts_global_chalk_out_of_all_off() -> None:
    """Badges styled through the global chalk carry escapes once color is enabled."""
    chalk.set_color_mode(ChalkColorMode.AllOff)
    assert "\x1b[" not in DiagnosticLevel.ERROR.badge(" ERROR ")

    sync_chalk_color_mode(True)

    assert chalk.get_color_mode() == ChalkColorMode.Basic16
    assert "\x1b[" in DiagnosticLevel.ERROR.badge(" ERROR ")


def test_enabled_color_keeps_a_richer_mode() -> None:
    """A terminal already detected as true-color is not downgraded."""
    chalk.set_color_mode(ChalkColorMode.FullTrueColor)
    sync_chalk_color_mode(True)
    assert chalk.get_color_mode() == ChalkColorMode.FullTrueColor


def test_disabled_color_leaves_the_mode_alone() -> None:
    """The writer strips escapes; the global mode is not touched."""
    chalk.set_color_mode(ChalkColorMode.AllOff)
    sync_chalk_color_mode(False)
    assert chalk.get_color_mode() == ChalkColorMode.AllOff
