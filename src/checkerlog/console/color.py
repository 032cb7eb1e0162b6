# topmark:header:start
#
#   project      : CheckerLog
#   file         : color.py
#   file_relpath : src/checkerlog/console/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for CheckerLog.

This module decides whether the *writer* should keep or strip color escapes, and
keeps the global `yachalk` instance in step with that decision.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from yachalk import ColorMode as ChalkColorMode
from yachalk import chalk

from checkerlog.config.logging import get_logger

logger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: If `output_format` is `"json"`, return False.
        2. **Override**: `ALWAYS` → True; `NEVER` → False.
        3. **Environment**: `FORCE_COLOR` (set and not `"0"`) → True;
           `NO_COLOR` (set to any value) → False.
        4. **Auto**: return `stdout.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode`; `None` means "not provided".
        output_format: Output format; `"json"` suppresses color.
        stdout_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be kept; False otherwise.
    """
    if output_format and output_format.lower() == "json":
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: stdout_isatty=%s", stdout_isatty)
    return bool(stdout_isatty)


def sync_chalk_color_mode(enable_color: bool) -> None:
    """Raise the global `yachalk` color mode when color output is enabled.

    `yachalk.chalk` detects support on import and settles on ``AllOff`` when
    stdout is not a TTY. Level badges and summary lines are styled through
    that global instance, so a forced color decision has to reach it too.
    Disabled color leaves the mode untouched; the writer strips escapes.

    Args:
        enable_color: The resolved color decision.
    """
    if enable_color and chalk.get_color_mode() == ChalkColorMode.AllOff:
        logger.debug("Raising global chalk color mode to %s", ChalkColorMode.Basic16)
        chalk.set_color_mode(ChalkColorMode.Basic16)
