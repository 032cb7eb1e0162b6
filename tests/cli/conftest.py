# topmark:header:start
#
#   project      : CheckerLog
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running CheckerLog in a controlled working directory.

`run_cli_in()` changes the working directory to the given ``tmp_path`` before
invoking the Click CLI, so config discovery only sees files the test created.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from checkerlog.cli.main import cli
from tests.conftest import SAMPLE_SOURCE

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
    color: str | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Color is disabled unless ``color`` names a ``--color`` mode, so assertions
    can match plain text by default.

    Args:
        tmp_path: Directory used as the CWD for the invocation.
        argv: CLI argument vector, e.g. ``["report", "--checker", "eslint", "in.json"]``.
        input_text: Optional standard input.
        color: Optional ``--color`` value used instead of ``--no-color``.

    Returns:
        The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        color_args: list[str] = ["--color", color] if color else ["--no-color"]
        return runner.invoke(cli, [*color_args, *argv], input=input_text)
    finally:
        os.chdir(cwd)


def write_eslint_input(tmp_path: Path, name: str = "eslint.json") -> Path:
    """Write an ``eslint -f json`` document with one warning and one error."""
    results: list[dict[str, Any]] = [
        {
            "filePath": str(tmp_path / "main.js"),
            "source": SAMPLE_SOURCE,
            "errorCount": 1,
            "warningCount": 1,
            "messages": [
                {
                    "ruleId": "no-unused-vars",
                    "severity": 1,
                    "message": "'a' is assigned a value but never used.",
                    "line": 1,
                    "column": 7,
                    "endLine": 1,
                    "endColumn": 8,
                },
                {
                    "ruleId": "no-undef",
                    "severity": 2,
                    "message": "'b' is not defined.",
                    "line": 2,
                    "column": 7,
                    "endLine": 2,
                    "endColumn": 8,
                },
            ],
        }
    ]
    path: Path = tmp_path / name
    path.write_text(json.dumps(results), encoding="utf-8")
    return path
