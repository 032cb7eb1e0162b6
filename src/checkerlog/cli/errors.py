# topmark:header:start
#
#   project      : CheckerLog
#   file         : errors.py
#   file_relpath : src/checkerlog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CheckerLog CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. They print through the project console when one is present in the Click
context, and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from checkerlog.cli.exit_codes import ExitCode


class CheckerLogError(click.ClickException):
    """Base class for all CheckerLog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: object = getattr(ctx, "obj", None)
        console: object = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")  # type: ignore[attr-defined]


class CheckerLogUsageError(CheckerLogError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CheckerLogConfigError(CheckerLogError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CheckerLogFileNotFoundError(CheckerLogError):
    """Error when an input or document path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CheckerLogIOError(CheckerLogError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class CheckerLogInputError(CheckerLogError):
    """Error for input that is not valid JSON, not UTF-8, or has the wrong shape."""

    exit_code = ExitCode.ENCODING_ERROR
