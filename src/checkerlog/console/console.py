# topmark:header:start
#
#   project      : CheckerLog
#   file         : console.py
#   file_relpath : src/checkerlog/console/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Reports and summary lines are program output, not log records: they go through
a `ConsoleLike` object, while `logging` is reserved for CheckerLog's own
diagnostics (see `checkerlog.config.logging`).
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for the single writer of terminal output."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console backed by `click.echo`.

    Rendered diagnostics always contain color escapes; when ``enable_color`` is
    False, `click.echo` strips them on the way out.

    Args:
        enable_color: If True, keep ANSI color codes in the output.
        out: Stream for standard output. Defaults to `sys.stdout`.
        err: Stream for error output. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text: Message text.
            nl: If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")
