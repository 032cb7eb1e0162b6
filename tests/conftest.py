# topmark:header:start
#
#   project      : CheckerLog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CheckerLog test suite.

Sets up TRACE logging for every run and provides small builders for canonical
diagnostics shared across test modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from yachalk import chalk

from checkerlog.config import logging
from checkerlog.diagnostic.level import DiagnosticLevel
from checkerlog.diagnostic.location import SourceLocation, SourcePosition
from checkerlog.diagnostic.model import NormalizedDiagnostic

if TYPE_CHECKING:
    from collections.abc import Iterator

SAMPLE_SOURCE: str = "const a = 1\nconst b: string = a\nexport { b }\n"


@pytest.fixture(autouse=True)
def silence_checkerlog_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CheckerLog's runtime log level is not forced via env during tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def restore_chalk_color_mode() -> Iterator[None]:
    """Undo changes a test makes to the global `yachalk` color mode."""
    original = chalk.get_color_mode()
    yield
    chalk.set_color_mode(original)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_location(line: int, column: int, end_line: int, end_column: int) -> SourceLocation:
    """Build a 1-based `SourceLocation`."""
    return SourceLocation(
        start=SourcePosition(line=line, column=column),
        end=SourcePosition(line=end_line, column=end_column),
    )


def make_diagnostic(
    level: DiagnosticLevel | None = DiagnosticLevel.ERROR,
    **overrides: Any,
) -> NormalizedDiagnostic:
    """Return a canonical diagnostic with sensible defaults and ``overrides``."""
    fields: dict[str, Any] = {
        "checker": "TypeScript",
        "message": "Type 'number' is not assignable to type 'string'.",
        "id": "/project/src/main.ts",
        "level": level,
    }
    fields.update(overrides)
    return NormalizedDiagnostic(**fields)
