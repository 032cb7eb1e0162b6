# topmark:header:start
#
#   project      : CheckerLog
#   file         : terminal.py
#   file_relpath : src/checkerlog/rendering/terminal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Multi-line terminal report for one normalized diagnostic.

A report block looks like::

     ERROR(TypeScript)  Type 'number' is not assignable to type 'string'.
     FILE  /project/src/main.ts:2:7

      1 | const a = 1
    > 2 | const b: string = a
        |       ^

Empty parts (message line, file line, frame, conclusion) are left out entirely.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from yachalk import chalk

from checkerlog.diagnostic.level import DiagnosticLevel

if TYPE_CHECKING:
    from checkerlog.diagnostic.model import NormalizedDiagnostic


def _level_label(level: DiagnosticLevel, checker_name: str | None) -> str:
    name_in_label: str = f"({checker_name})" if checker_name else ""
    return level.badge(f" {level.label}{name_in_label} ")


def _file_label() -> str:
    return chalk.bold.rgb(0, 0, 0).bg_cyan_bright(" FILE ") + " "


def diagnostic_to_terminal_log(d: NormalizedDiagnostic, name: str | None = None) -> str:
    """Render ``d`` as a terminal report block.

    Args:
        d: The diagnostic to render. A missing level is labelled as an error.
        name: Optional checker display name appended to the level label.

    Returns:
        The report parts joined with ``os.linesep``.
    """
    level_label: str = _level_label(d.level if d.level is not None else DiagnosticLevel.ERROR, name)
    position: str = (
        f"{chalk.yellow(d.loc.start.line)}:{chalk.yellow(d.loc.start.column)}" if d.loc else ""
    )

    parts: list[str | None] = [
        f"{level_label} {d.message or ''}",
        f"{_file_label()}{d.id or ''}:{position}{os.linesep}",
        f"{d.code_frame}{os.linesep}" if d.code_frame else None,
        d.conclusion,
    ]
    return os.linesep.join(part for part in parts if part)
