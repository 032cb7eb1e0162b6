# topmark:header:start
#
#   project      : CheckerLog
#   file         : channel.py
#   file_relpath : src/checkerlog/console/channel.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cross-context console logging.

Terminal output must have a single writer. Analysis may run in worker threads or
worker processes; those never write to the terminal themselves. Instead,
`console_log` posts a `ConsoleMessage` to the channel bound for the current
worker, and the coordinating context drains that channel in order.

A context is a *worker* exactly when `bind_worker_channel` was called in it.
Bindings are thread-local; a child process starts unbound until its entry point
binds the channel it was given.

A channel is any object with ``put(item)`` and ``get(block, timeout)``, such as
`queue.Queue` or `multiprocessing.Queue`. Posting is fire-and-forget.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from checkerlog.config.logging import get_logger
from checkerlog.console.color import resolve_color_mode
from checkerlog.console.console import ClickConsole

if TYPE_CHECKING:
    from types import TracebackType

    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.console.console import ConsoleLike

logger: CheckerLogLogger = get_logger(__name__)


class ActionType(str, Enum):
    """Kinds of messages a worker may post to the coordinating context."""

    CONSOLE = "console"


@dataclass(frozen=True, slots=True)
class ConsoleMessage:
    """A line of terminal output produced in a worker context."""

    type: ActionType
    payload: str

    def to_dict(self) -> dict[str, str]:
        """Return the wire form ``{"type": "console", "payload": ...}``."""
        return {"type": self.type.value, "payload": self.payload}

    @classmethod
    def from_obj(cls, obj: object) -> ConsoleMessage | None:
        """Coerce a message or its wire form; return ``None`` for anything else."""
        if isinstance(obj, ConsoleMessage):
            return obj
        if isinstance(obj, Mapping):
            try:
                action = ActionType(obj.get("type"))
            except ValueError:
                return None
            payload: object = obj.get("payload")
            return cls(type=action, payload=payload if isinstance(payload, str) else str(payload))
        return None


class Channel(Protocol):
    """Transport between a worker and the coordinating context."""

    def put(self, item: Any) -> None:
        """Enqueue ``item``."""
        ...

    def get(self, block: bool = True, timeout: float | None = None) -> Any:
        """Dequeue the next item."""
        ...


_local = threading.local()

_default_console: ConsoleLike | None = None
_default_console_lock = threading.Lock()


def bind_worker_channel(channel: Channel) -> None:
    """Mark the current thread as a worker posting to ``channel``."""
    _local.channel = channel
    logger.debug("Bound worker channel in thread %s", threading.current_thread().name)


def unbind_worker_channel() -> None:
    """Return the current thread to coordinating-context behavior."""
    _local.channel = None


def current_worker_channel() -> Channel | None:
    """Return the channel bound in the current thread, if any."""
    return getattr(_local, "channel", None)


def is_worker_context() -> bool:
    """Return True if the current thread is a worker context."""
    return current_worker_channel() is not None


def set_default_console(console: ConsoleLike | None) -> None:
    """Install the console used by `console_log` in the coordinating context."""
    global _default_console
    with _default_console_lock:
        _default_console = console


def get_default_console() -> ConsoleLike:
    """Return the coordinating context's console, creating it on first use."""
    global _default_console
    with _default_console_lock:
        if _default_console is None:
            _default_console = ClickConsole(
                enable_color=resolve_color_mode(color_mode_override=None, output_format=None)
            )
        return _default_console


def console_log(value: str, *, console: ConsoleLike | None = None) -> None:
    """Write ``value`` to the terminal, or post it from a worker context.

    Args:
        value: Text to write (no trailing newline required).
        console: Console to use in the coordinating context. Defaults to
            `get_default_console()`. Ignored in worker contexts.
    """
    channel: Channel | None = current_worker_channel()
    if channel is not None:
        channel.put(ConsoleMessage(type=ActionType.CONSOLE, payload=value))
        return
    (console or get_default_console()).print(value)


def _write(message_obj: object, console: ConsoleLike) -> bool:
    message: ConsoleMessage | None = ConsoleMessage.from_obj(message_obj)
    if message is None:
        logger.debug("Ignoring unknown worker message: %r", message_obj)
        return False
    console.print(message.payload)
    return True


def drain_console_messages(channel: Channel, console: ConsoleLike | None = None) -> int:
    """Write every message currently queued on ``channel``, in order.

    Does not block: stops at the first empty read.

    Args:
        channel: The worker channel.
        console: Destination console. Defaults to `get_default_console()`.

    Returns:
        The number of console messages written.
    """
    target: ConsoleLike = console or get_default_console()
    written: int = 0
    while True:
        try:
            item: object = channel.get(block=False)
        except queue.Empty:
            break
        if _write(item, target):
            written += 1
    return written


class ConsoleRelay:
    """Background writer relaying worker messages to the coordinating console.

    The relay owns one daemon thread that blocks on the channel and writes each
    message as it arrives. Use it as a context manager: on exit it posts a stop
    marker, waits for the thread, then drains anything left over.

    Args:
        channel: The worker channel to relay from.
        console: Destination console. Defaults to `get_default_console()`.
    """

    _STOP: str = "__checkerlog_relay_stop__"

    def __init__(self, channel: Channel, console: ConsoleLike | None = None) -> None:
        self.channel = channel
        self.console: ConsoleLike = console or get_default_console()
        self._thread: threading.Thread | None = None

    def start(self) -> ConsoleRelay:
        """Start the relay thread."""
        if self._thread is not None:
            raise RuntimeError("ConsoleRelay already started")
        self._thread = threading.Thread(
            target=self._run, name="checkerlog-console-relay", daemon=True
        )
        self._thread.start()
        return self

    def stop(self) -> None:
        """Stop the relay thread after every queued message has been written."""
        if self._thread is None:
            return
        self.channel.put(self._STOP)
        self._thread.join()
        self._thread = None
        drain_console_messages(self.channel, self.console)

    def _run(self) -> None:
        while True:
            item: object = self.channel.get()
            if item == self._STOP:
                return
            _write(item, self.console)

    def __enter__(self) -> ConsoleRelay:
        return self.start()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
