# topmark:header:start
#
#   project      : CheckerLog
#   file         : __init__.py
#   file_relpath : src/checkerlog/console/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal output: the single-writer console and cross-context relaying."""

from __future__ import annotations

from checkerlog.console.channel import (
    ActionType,
    ConsoleMessage,
    ConsoleRelay,
    bind_worker_channel,
    console_log,
    drain_console_messages,
    is_worker_context,
    set_default_console,
    unbind_worker_channel,
)
from checkerlog.console.color import ColorMode, resolve_color_mode, sync_chalk_color_mode
from checkerlog.console.console import ClickConsole, ConsoleLike

__all__ = [
    "ActionType",
    "ClickConsole",
    "ColorMode",
    "ConsoleLike",
    "ConsoleMessage",
    "ConsoleRelay",
    "bind_worker_channel",
    "console_log",
    "drain_console_messages",
    "is_worker_context",
    "resolve_color_mode",
    "set_default_console",
    "sync_chalk_color_mode",
    "unbind_worker_channel",
]
