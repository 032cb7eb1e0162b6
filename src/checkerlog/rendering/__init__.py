# topmark:header:start
#
#   project      : CheckerLog
#   file         : __init__.py
#   file_relpath : src/checkerlog/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing rendering: code frames, terminal reports and summary lines."""

from __future__ import annotations

from checkerlog.rendering.frame import code_frame_columns, create_frame, strip_frame
from checkerlog.rendering.summary import compose_checker_summary, wrap_checker_summary
from checkerlog.rendering.terminal import diagnostic_to_terminal_log

__all__ = [
    "code_frame_columns",
    "compose_checker_summary",
    "create_frame",
    "diagnostic_to_terminal_log",
    "strip_frame",
    "wrap_checker_summary",
]
