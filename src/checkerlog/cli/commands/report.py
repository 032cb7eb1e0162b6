# topmark:header:start
#
#   project      : CheckerLog
#   file         : report.py
#   file_relpath : src/checkerlog/cli/commands/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CheckerLog `report` command.

Reads raw checker output (JSON) from a file or STDIN, normalizes it with the
selected checker's normalizer, filters it by level, and prints either:

- one terminal report per diagnostic followed by a summary line (``text``), or
- the runtime payload envelope an overlay client would receive (``json``).

Accepted inputs per checker:

- ``eslint``: the output of ``eslint -f json`` (a list of lint results);
- ``vls``: one ``publishDiagnostics`` params object, or a list of them;
- ``typescript`` / ``vue-tsc``: one compiler diagnostic, or a list of them,
  each carrying ``file.fileName`` and ``file.text``.

Reports are rendered in a worker thread and relayed to the console, so every
line reaches the terminal through a single writer.
"""

from __future__ import annotations

import asyncio
import json
import queue
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import click

from checkerlog.cli.errors import (
    CheckerLogFileNotFoundError,
    CheckerLogInputError,
    CheckerLogIOError,
    CheckerLogUsageError,
)
from checkerlog.cli.exit_codes import ExitCode
from checkerlog.cli.options import level_options
from checkerlog.config.io import ConfigError
from checkerlog.config.logging import get_logger
from checkerlog.config.model import parse_levels
from checkerlog.console.channel import (
    ConsoleRelay,
    bind_worker_channel,
    console_log,
    unbind_worker_channel,
)
from checkerlog.diagnostic.filter import filter_log_level
from checkerlog.diagnostic.model import CheckerName, compute_diagnostic_stats
from checkerlog.normalizers.registry import NORMALIZERS, normalize_batch
from checkerlog.rendering.summary import compose_checker_summary
from checkerlog.rendering.terminal import diagnostic_to_terminal_log
from checkerlog.runtime.payloads import diagnostic_to_runtime_error
from checkerlog.runtime.serializers import serialize_custom_payload

if TYPE_CHECKING:
    from collections.abc import Sequence

    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.config.model import Config
    from checkerlog.console.channel import Channel
    from checkerlog.console.console import ConsoleLike
    from checkerlog.diagnostic.level import DiagnosticLevel
    from checkerlog.diagnostic.model import DiagnosticStats, NormalizedDiagnostic

logger: CheckerLogLogger = get_logger(__name__)

DISPLAY_NAMES: Final[dict[str, str]] = {
    "typescript": CheckerName.TYPESCRIPT,
    "vue-tsc": CheckerName.VUE_TSC,
    "eslint": CheckerName.ESLINT,
    "vls": CheckerName.VLS,
}


def read_input_json(input_path: Path) -> object:
    """Read and decode the JSON document at ``input_path`` (``-`` for STDIN).

    Raises:
        CheckerLogFileNotFoundError: If the file does not exist.
        CheckerLogIOError: If the file cannot be read.
        CheckerLogInputError: If the content is not UTF-8 or not valid JSON.
    """
    try:
        if str(input_path) == "-":
            text: str = click.get_text_stream("stdin").read()
        else:
            text = input_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CheckerLogFileNotFoundError(f"Input file not found: {input_path}") from exc
    except UnicodeDecodeError as exc:
        raise CheckerLogInputError(f"Input is not valid UTF-8: {input_path}") from exc
    except OSError as exc:
        raise CheckerLogIOError(f"Cannot read {input_path}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CheckerLogInputError(f"Input is not valid JSON ({input_path}): {exc}") from exc


def coerce_items(data: object) -> list[dict[str, Any]]:
    """Return the raw items of a decoded input document.

    A single JSON object is treated as a one-item list.

    Raises:
        CheckerLogInputError: If the document is not an object or a list of objects.
    """
    items: list[object] = data if isinstance(data, list) else [data]
    if not all(isinstance(item, dict) for item in items):
        raise CheckerLogInputError("Input must be a JSON object or a list of JSON objects")
    return [item for item in items if isinstance(item, dict)]


def normalize_items(
    checker: str,
    items: list[dict[str, Any]],
    *,
    config: Config,
) -> list[NormalizedDiagnostic]:
    """Run the checker's normalizer over ``items``, mapping failures to CLI errors."""
    try:
        return asyncio.run(
            normalize_batch(
                checker,
                items,
                lines_above=config.lines_above,
                lines_below=config.lines_below,
            )
        )
    except FileNotFoundError as exc:
        raise CheckerLogFileNotFoundError(f"Document not found: {exc.filename}") from exc
    except UnicodeDecodeError as exc:
        raise CheckerLogInputError(f"Document is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise CheckerLogIOError(f"Cannot read document: {exc}") from exc
    except (KeyError, TypeError, AttributeError) as exc:
        raise CheckerLogInputError(f"Malformed {checker} input: {exc!r}") from exc


def _render_reports(
    channel: Channel,
    diagnostics: Sequence[NormalizedDiagnostic],
    display_name: str,
) -> None:
    bind_worker_channel(channel)
    try:
        for d in diagnostics:
            console_log(diagnostic_to_terminal_log(d, display_name))
    finally:
        unbind_worker_channel()


def emit_text_reports(
    console: ConsoleLike,
    diagnostics: Sequence[NormalizedDiagnostic],
    display_name: str,
) -> None:
    """Render reports in a worker thread, relaying its output to ``console``."""
    channel: queue.Queue[object] = queue.Queue()
    with (
        ConsoleRelay(channel, console),
        ThreadPoolExecutor(max_workers=1, thread_name_prefix="checkerlog-report") as pool,
    ):
        pool.submit(_render_reports, channel, diagnostics, display_name).result()


@click.command(
    name="report",
    help="Normalize raw checker output (JSON) and print reports with a summary.",
)
@click.option(
    "--checker",
    "checker",
    type=click.Choice(sorted(NORMALIZERS)),
    required=True,
    help="Checker that produced the input.",
)
@level_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: terminal reports (text) or the runtime payload envelope (json).",
)
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
def report_command(
    *,
    checker: str,
    levels: tuple[str, ...],
    output_format: str,
    input_path: Path,
) -> None:
    """Report the diagnostics found in INPUT.

    Exits with `ExitCode.FAILURE` when at least one error-level diagnostic is
    reported, and `ExitCode.SUCCESS` otherwise.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    config: Config = ctx.obj["config"]

    allowed: tuple[DiagnosticLevel, ...] = config.log_level
    if levels:
        try:
            allowed = parse_levels(levels)
        except ConfigError as exc:
            raise CheckerLogUsageError(str(exc)) from exc

    items: list[dict[str, Any]] = coerce_items(read_input_json(input_path))
    diagnostics: list[NormalizedDiagnostic] = filter_log_level(
        normalize_items(checker, items, config=config), allowed
    )
    display_name: str = DISPLAY_NAMES[checker]
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    logger.info(
        "%s: %d diagnostic(s) reported (%d error(s), %d warning(s))",
        display_name,
        len(diagnostics),
        stats.n_error,
        stats.n_warning,
    )

    if output_format == "json":
        console.print(
            serialize_custom_payload(display_name, diagnostic_to_runtime_error(diagnostics))
        )
    else:
        emit_text_reports(console, diagnostics, display_name)
        console_log(
            compose_checker_summary(display_name, stats.n_error, stats.n_warning),
            console=console,
        )

    ctx.exit(ExitCode.FAILURE if stats.n_error else ExitCode.SUCCESS)
