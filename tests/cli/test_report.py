# topmark:header:start
#
#   project      : CheckerLog
#   file         : test_report.py
#   file_relpath : tests/cli/test_report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `report` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
from yachalk import ColorMode as ChalkColorMode
from yachalk import chalk

from checkerlog.cli.exit_codes import ExitCode
from checkerlog.constants import CHECKER_ERROR_EVENT
from tests.cli.conftest import run_cli_in, write_eslint_input
from tests.conftest import SAMPLE_SOURCE

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def test_text_report_with_errors_fails(tmp_path: Path) -> None:
    """Reports and the summary are printed; an error makes the command fail."""
    write_eslint_input(tmp_path)
    result: Result = run_cli_in(tmp_path, ["report", "--checker", "eslint", "eslint.json"])
    assert result.exit_code == ExitCode.FAILURE
    assert " WARNING(ESLint)  'a' is assigned a value but never used. (no-unused-vars)" in (
        result.stdout
    )
    assert " ERROR(ESLint)  'b' is not defined. (no-undef)" in result.stdout
    assert "> 2 | const b: string = a" in result.stdout
    assert result.stdout.rstrip().endswith("[ESLint] Found 1 error and 1 warning")
    assert "\x1b[" not in result.stdout


def test_color_always_styles_badges_and_summary_when_piped(tmp_path: Path) -> None:
    """``--color always`` colors badges and the summary, not just code frames."""
    chalk.set_color_mode(ChalkColorMode.AllOff)
    write_eslint_input(tmp_path)
    result: Result = run_cli_in(
        tmp_path, ["report", "--checker", "eslint", "eslint.json"], color="always"
    )
    assert result.exit_code == ExitCode.FAILURE

    lines: list[str] = result.stdout.rstrip().splitlines()
    badge_lines: list[str] = [line for line in lines if "ERROR(ESLint)" in click.unstyle(line)]
    assert badge_lines
    assert all("\x1b[" in line for line in badge_lines)

    summary_line: str = lines[-1]
    assert click.unstyle(summary_line) == "[ESLint] Found 1 error and 1 warning"
    assert summary_line != click.unstyle(summary_line)


def test_level_filter_from_command_line(tmp_path: Path) -> None:
    """``--level`` restricts the reported levels; warnings alone succeed."""
    write_eslint_input(tmp_path)
    result: Result = run_cli_in(
        tmp_path, ["report", "--checker", "eslint", "--level", "warning", "eslint.json"]
    )
    assert result.exit_code == ExitCode.SUCCESS
    assert "no-undef" not in result.stdout
    assert "[ESLint] Found 0 error and 1 warning" in result.stdout


def test_level_filter_from_config(tmp_path: Path) -> None:
    """Levels configured in checkerlog.toml apply when ``--level`` is absent."""
    write_eslint_input(tmp_path)
    (tmp_path / "checkerlog.toml").write_text('log_level = ["error"]\n', encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["report", "--checker", "eslint", "eslint.json"])
    assert result.exit_code == ExitCode.FAILURE
    assert "no-unused-vars" not in result.stdout
    assert "[ESLint] Found 1 error and 0 warning" in result.stdout


def test_json_format_prints_the_envelope(tmp_path: Path) -> None:
    """``--format json`` prints the runtime envelope with plain-text frames."""
    write_eslint_input(tmp_path)
    result: Result = run_cli_in(
        tmp_path, ["report", "--checker", "eslint", "--format", "json", "eslint.json"]
    )
    assert result.exit_code == ExitCode.FAILURE
    envelope = json.loads(result.stdout)
    assert envelope["type"] == "custom"
    assert envelope["event"] == CHECKER_ERROR_EVENT
    assert envelope["data"]["checkerId"] == "ESLint"
    diagnostics = envelope["data"]["diagnostics"]
    assert [d["level"] for d in diagnostics] == [0, 1]
    assert diagnostics[1]["loc"] == {"file": str(tmp_path / "main.js"), "line": 2, "column": 7}
    assert all("\x1b[" not in d["frame"] for d in diagnostics)


def test_typescript_input_from_stdin(tmp_path: Path) -> None:
    """``-`` reads the input document from STDIN."""
    diagnostic = {
        "messageText": "Cannot find name 'c'.",
        "category": 1,
        "code": 2304,
        "file": {"fileName": "/project/main.ts", "text": SAMPLE_SOURCE},
        "start": 18,
        "length": 1,
    }
    result: Result = run_cli_in(
        tmp_path,
        ["report", "--checker", "typescript", "-"],
        input_text=json.dumps(diagnostic),
    )
    assert result.exit_code == ExitCode.FAILURE
    assert " ERROR(TypeScript)  Cannot find name 'c'." in result.stdout
    assert "/project/main.ts:2:7" in result.stdout


def test_vls_input_reads_the_document(tmp_path: Path) -> None:
    """LSP notifications are normalized against the referenced document."""
    document: Path = tmp_path / "App.vue"
    document.write_text(SAMPLE_SOURCE, encoding="utf-8")
    params = {
        "uri": document.as_uri(),
        "diagnostics": [
            {
                "range": {"start": {"line": 0, "character": 6}, "end": {"line": 0, "character": 7}},
                "message": "Unused.",
                "severity": 2,
            }
        ],
    }
    (tmp_path / "vls.json").write_text(json.dumps(params), encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["report", "--checker", "vls", "vls.json"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "[VLS] Found 0 error and 1 warning" in result.stdout


def test_vls_missing_document(tmp_path: Path) -> None:
    """A notification for a missing document maps to FILE_NOT_FOUND."""
    params = {"uri": (tmp_path / "gone.vue").as_uri(), "diagnostics": []}
    (tmp_path / "vls.json").write_text(json.dumps(params), encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["report", "--checker", "vls", "vls.json"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


def test_missing_input_file(tmp_path: Path) -> None:
    """A missing input path maps to FILE_NOT_FOUND."""
    result: Result = run_cli_in(tmp_path, ["report", "--checker", "eslint", "nope.json"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


def test_invalid_json_input(tmp_path: Path) -> None:
    """Undecodable input maps to ENCODING_ERROR."""
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["report", "--checker", "eslint", "bad.json"])
    assert result.exit_code == ExitCode.ENCODING_ERROR


def test_wrong_input_shape(tmp_path: Path) -> None:
    """Items that are not objects, or miss required fields, are input errors."""
    (tmp_path / "list.json").write_text("[1, 2]", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["report", "--checker", "eslint", "list.json"])
    assert result.exit_code == ExitCode.ENCODING_ERROR

    (tmp_path / "shape.json").write_text('[{"filePath": "x.js"}]', encoding="utf-8")
    result = run_cli_in(tmp_path, ["report", "--checker", "eslint", "shape.json"])
    assert result.exit_code == ExitCode.ENCODING_ERROR


def test_unknown_level_is_a_usage_error(tmp_path: Path) -> None:
    """An unknown ``--level`` value maps to USAGE_ERROR."""
    write_eslint_input(tmp_path)
    result: Result = run_cli_in(
        tmp_path, ["report", "--checker", "eslint", "--level", "fatal", "eslint.json"]
    )
    assert result.exit_code == ExitCode.USAGE_ERROR


def test_invalid_config_is_a_config_error(tmp_path: Path) -> None:
    """Invalid settings map to CONFIG_ERROR."""
    write_eslint_input(tmp_path)
    (tmp_path / "checkerlog.toml").write_text("lines_above = -2\n", encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["report", "--checker", "eslint", "eslint.json"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
