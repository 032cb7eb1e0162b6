# topmark:header:start
#
#   project      : CheckerLog
#   file         : main.py
#   file_relpath : src/checkerlog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CheckerLog command-line interface.

Group-level options (color, config) are resolved once and placed into
``ctx.obj``:

- ``ctx.obj["config"]``: the frozen `Config`,
- ``ctx.obj["console"]``: the `ClickConsole` every command writes through,
- ``ctx.obj["color_enabled"]``: whether color escapes are kept.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from checkerlog.cli.commands.report import report_command
from checkerlog.cli.commands.version import version_command
from checkerlog.cli.errors import (
    CheckerLogConfigError,
    CheckerLogFileNotFoundError,
    CheckerLogIOError,
)
from checkerlog.cli.options import common_color_options, common_config_options
from checkerlog.config.io import ConfigError
from checkerlog.config.keys import CHECKERLOG_TOML, PYPROJECT_TOML
from checkerlog.config.logging import get_logger, resolve_env_log_level, setup_logging
from checkerlog.config.model import Config
from checkerlog.console.channel import set_default_console
from checkerlog.console.color import ColorMode, resolve_color_mode, sync_chalk_color_mode
from checkerlog.console.console import ClickConsole

if TYPE_CHECKING:
    from checkerlog.console.console import ConsoleLike

logger = get_logger(__name__)


def discover_config_path(cwd: Path) -> Path | None:
    """Return the first config file found in ``cwd``.

    ``checkerlog.toml`` wins over ``pyproject.toml``.
    """
    for name in (CHECKERLOG_TOML, PYPROJECT_TOML):
        candidate: Path = cwd / name
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Path | None) -> Config:
    """Load the effective configuration.

    Args:
        config_path: Explicit ``--config`` path, or ``None`` to discover one in
            the current directory.

    Returns:
        The frozen configuration (defaults when no file is found).

    Raises:
        CheckerLogFileNotFoundError: If an explicit path does not exist.
        CheckerLogIOError: If the file cannot be read.
        CheckerLogConfigError: If the file is malformed or holds invalid values.
    """
    path: Path | None = config_path or discover_config_path(Path.cwd())
    if path is None:
        logger.debug("No config file found, using defaults")
        return Config.from_defaults()
    try:
        return Config.from_toml_file(path)
    except FileNotFoundError as exc:
        raise CheckerLogFileNotFoundError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise CheckerLogIOError(f"Cannot read config file {path}: {exc}") from exc
    except ConfigError as exc:
        raise CheckerLogConfigError(str(exc)) from exc


def init_common_state(
    ctx: click.Context,
    *,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (logging, config, color, console) on the Click context.

    Args:
        ctx: Current Click context; will have ``obj`` and ``color`` set.
        color_mode: Explicit color mode from ``--color`` (or ``None``).
        no_color: Whether ``--no-color`` was passed; forces color off.
        config_path: Explicit ``--config`` path (or ``None``).
    """
    ctx.obj = ctx.obj or {}

    # Configure internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    config: Config = load_config(config_path)
    ctx.obj["config"] = config

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode) if color_mode else config.color_mode
    )
    enable_color: bool = resolve_color_mode(
        color_mode_override=effective_color_mode, output_format=None
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    sync_chalk_color_mode(enable_color)

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console
    set_default_console(console)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CheckerLog CLI: normalize and report static-checker diagnostics.",
)
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the CheckerLog CLI."""
    init_common_state(
        ctx,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'checkerlog report --checker eslint FILE' to report diagnostics.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(report_command)

if __name__ == "__main__":
    cli()
