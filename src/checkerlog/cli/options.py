# topmark:header:start
#
#   project      : CheckerLog
#   file         : options.py
#   file_relpath : src/checkerlog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options for CheckerLog commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import click

from checkerlog.console.color import ColorMode
from checkerlog.diagnostic.level import DiagnosticLevel

F = TypeVar("F", bound=Callable[..., object])


def common_color_options(f: F) -> F:
    """Add ``--color`` and ``--no-color`` options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: F) -> F:
    """Add the ``--config PATH`` option to a command."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this checkerlog.toml or pyproject.toml "
        "(default: discover in the current directory).",
    )(f)


def level_options(f: F) -> F:
    """Add the repeatable ``--level`` option to a command."""
    return click.option(
        "--level",
        "levels",
        multiple=True,
        metavar="LEVEL",
        help="Diagnostic level to report; repeat to allow several "
        f"({', '.join(m.name.lower() for m in DiagnosticLevel)}). "
        "Defaults to the configured levels.",
    )(f)
