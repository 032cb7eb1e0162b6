# topmark:header:start
#
#   project      : CheckerLog
#   file         : version.py
#   file_relpath : src/checkerlog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CheckerLog `version` command.

Prints the current CheckerLog version as installed in the active Python
environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from checkerlog.constants import CHECKERLOG_VERSION

if TYPE_CHECKING:
    from checkerlog.console.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of CheckerLog.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text, json).",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of CheckerLog.

    Args:
        output_format: ``"text"`` for the bare version, ``"json"`` for
            ``{"version": ...}``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": CHECKERLOG_VERSION}))
    else:
        console.print(CHECKERLOG_VERSION)
