# topmark:header:start
#
#   project      : CheckerLog
#   file         : __init__.py
#   file_relpath : src/checkerlog/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical diagnostic model.

This package holds the engine-agnostic building blocks every checker's output
is reconciled into:

Design:
    - `SourceLocation` is the single 1-based position model.
    - `DiagnosticLevel` is the closed four-valued severity taxonomy.
    - `NormalizedDiagnostic` is the immutable canonical record; the ``checker``
      field tags provenance only.
    - `filter_log_level` selects records by level, preserving cardinality.
"""

from __future__ import annotations

from checkerlog.diagnostic.filter import filter_log_level
from checkerlog.diagnostic.level import DEFAULT_LOG_LEVELS, DiagnosticLevel
from checkerlog.diagnostic.location import (
    LineAndCharacter,
    SourceLocation,
    SourcePosition,
    lsp_range_to_location,
    ts_location_to_location,
)
from checkerlog.diagnostic.model import (
    CheckerName,
    DiagnosticStats,
    NormalizedDiagnostic,
    compute_diagnostic_stats,
)

__all__ = [
    "DEFAULT_LOG_LEVELS",
    "CheckerName",
    "DiagnosticLevel",
    "DiagnosticStats",
    "LineAndCharacter",
    "NormalizedDiagnostic",
    "SourceLocation",
    "SourcePosition",
    "compute_diagnostic_stats",
    "filter_log_level",
    "lsp_range_to_location",
    "ts_location_to_location",
]
