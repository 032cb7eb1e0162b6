# topmark:header:start
#
#   project      : CheckerLog
#   file         : __init__.py
#   file_relpath : src/checkerlog/normalizers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source normalizers turning raw checker output into `NormalizedDiagnostic`s."""

from __future__ import annotations

from checkerlog.normalizers.eslint import normalize_eslint_diagnostic
from checkerlog.normalizers.lsp import (
    normalize_lsp_diagnostic,
    normalize_publish_diagnostic_params,
    uri_to_abs_path,
)
from checkerlog.normalizers.registry import NORMALIZERS, normalize_batch
from checkerlog.normalizers.typescript import (
    flatten_diagnostic_message_text,
    normalize_ts_diagnostic,
    normalize_vue_tsc_diagnostic,
)

__all__ = [
    "NORMALIZERS",
    "flatten_diagnostic_message_text",
    "normalize_batch",
    "normalize_eslint_diagnostic",
    "normalize_lsp_diagnostic",
    "normalize_publish_diagnostic_params",
    "normalize_ts_diagnostic",
    "normalize_vue_tsc_diagnostic",
    "uri_to_abs_path",
]
