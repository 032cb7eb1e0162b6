# topmark:header:start
#
#   project      : CheckerLog
#   file         : registry.py
#   file_relpath : src/checkerlog/normalizers/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Strategy table mapping checker keys to their normalizer.

All normalizers share one output shape (`NormalizedDiagnostic`) but differ in
cardinality and execution model:

- TypeScript / vue-tsc: one raw diagnostic in, one record out;
- ESLint: one lint result in, zero or more records out;
- VLS: one ``publishDiagnostics`` notification in, a coroutine of records out.

`normalize_batch` hides these differences from hosts that just want a flat list.
The table itself is exposed read-only as a `MappingProxyType`.
"""

from __future__ import annotations

import inspect
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Final, TypeAlias

from checkerlog.config.logging import get_logger
from checkerlog.normalizers.eslint import normalize_eslint_diagnostic
from checkerlog.normalizers.lsp import normalize_publish_diagnostic_params
from checkerlog.normalizers.typescript import (
    normalize_ts_diagnostic,
    normalize_vue_tsc_diagnostic,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.diagnostic.model import NormalizedDiagnostic

logger: CheckerLogLogger = get_logger(__name__)

Normalizer: TypeAlias = Callable[..., Any]

NORMALIZERS: Final[Mapping[str, Normalizer]] = MappingProxyType(
    {
        "typescript": normalize_ts_diagnostic,
        "vue-tsc": normalize_vue_tsc_diagnostic,
        "eslint": normalize_eslint_diagnostic,
        "vls": normalize_publish_diagnostic_params,
    }
)


async def normalize_batch(
    checker: str,
    items: Iterable[Any],
    *,
    lines_above: int = 2,
    lines_below: int = 3,
) -> list[NormalizedDiagnostic]:
    """Normalize a batch of raw items with the normalizer registered for ``checker``.

    Items are processed sequentially so the output keeps input order.

    Args:
        checker: Key in `NORMALIZERS` (``"typescript"``, ``"vue-tsc"``,
            ``"eslint"`` or ``"vls"``).
        items: Raw items in the shape the selected normalizer expects.
        lines_above: Context lines shown above each marked range.
        lines_below: Context lines shown below each marked range.

    Returns:
        A flat list of canonical diagnostics.

    Raises:
        ValueError: If ``checker`` is not a registered key.
        OSError: If an LSP document cannot be read.
    """
    normalizer: Normalizer | None = NORMALIZERS.get(checker)
    if normalizer is None:
        valid: str = ", ".join(sorted(NORMALIZERS))
        raise ValueError(f"Unknown checker {checker!r} - valid choices: {valid}")

    results: list[NormalizedDiagnostic] = []
    for item in items:
        produced: Any = normalizer(item, lines_above=lines_above, lines_below=lines_below)
        if inspect.isawaitable(produced):
            produced = await produced
        if isinstance(produced, list):
            results.extend(produced)
        else:
            results.append(produced)
    logger.debug("Normalized %d %s diagnostic(s)", len(results), checker)
    return results
