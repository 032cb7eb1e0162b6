# topmark:header:start
#
#   project      : CheckerLog
#   file         : lsp.py
#   file_relpath : src/checkerlog/normalizers/lsp.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalizer for language-server diagnostics (VLS).

LSP diagnostics carry no source text, so the notification-level entry point
reads the referenced file once and is asynchronous. A failed read is not
swallowed: it propagates to the caller, which decides whether to drop the whole
notification.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Final
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from checkerlog.config.logging import get_logger
from checkerlog.diagnostic.level import DiagnosticLevel
from checkerlog.diagnostic.location import lsp_range_to_location
from checkerlog.diagnostic.model import CheckerName, NormalizedDiagnostic
from checkerlog.rendering.frame import create_frame, strip_frame

if TYPE_CHECKING:
    from checkerlog.config.logging import CheckerLogLogger
    from checkerlog.diagnostic.location import SourceLocation
    from checkerlog.normalizers.types import LspDiagnostic, PublishDiagnosticsParams

logger: CheckerLogLogger = get_logger(__name__)

# LSP DiagnosticSeverity: Error = 1, Warning = 2, Information = 3, Hint = 4
LSP_SEVERITY_TO_LEVEL: Final[dict[int, DiagnosticLevel]] = {
    1: DiagnosticLevel.ERROR,
    2: DiagnosticLevel.WARNING,
    3: DiagnosticLevel.MESSAGE,
    4: DiagnosticLevel.SUGGESTION,
}


def uri_to_abs_path(document_uri: str) -> str:
    """Resolve a document URI to an absolute file-system path.

    ``file://`` URIs are percent-decoded by `url2pathname`; anything else is taken
    as a (possibly percent-encoded) path.

    Args:
        document_uri: The ``textDocument`` URI, e.g. ``file:///project/App.vue``.

    Returns:
        The absolute path.
    """
    parsed = urlparse(document_uri)
    if parsed.scheme != "file":
        return str(Path(unquote(document_uri)).absolute())
    path: str = url2pathname(parsed.path)
    if parsed.netloc and parsed.netloc != "localhost":
        # UNC share: file://server/share/x -> //server/share/x
        path = f"//{parsed.netloc}{path}"
    return path


def normalize_lsp_diagnostic(
    *,
    diagnostic: LspDiagnostic,
    abs_file_path: str,
    file_text: str,
    lines_above: int = 2,
    lines_below: int = 3,
) -> NormalizedDiagnostic:
    """Normalize one LSP diagnostic whose file text has already been read.

    Args:
        diagnostic: The raw LSP diagnostic.
        abs_file_path: Absolute path of the document.
        file_text: Full text of the document.
        lines_above: Context lines shown above the marked range.
        lines_below: Context lines shown below the marked range.

    Returns:
        The canonical diagnostic, tagged ``"VLS"``. A missing or unknown severity
        is classified as an error.
    """
    loc: SourceLocation = lsp_range_to_location(diagnostic["range"])
    code_frame: str = create_frame(
        file_text, loc, lines_above=lines_above, lines_below=lines_below
    )
    severity: object = diagnostic.get("severity")
    level: DiagnosticLevel = (
        LSP_SEVERITY_TO_LEVEL.get(severity, DiagnosticLevel.ERROR)
        if isinstance(severity, int)
        else DiagnosticLevel.ERROR
    )

    return NormalizedDiagnostic(
        checker=CheckerName.VLS,
        message=diagnostic["message"].strip(),
        conclusion="",
        code_frame=code_frame,
        striped_code_frame=strip_frame(code_frame),
        id=abs_file_path,
        loc=loc,
        level=level,
    )


async def normalize_publish_diagnostic_params(
    publish_diagnostics: PublishDiagnosticsParams,
    *,
    lines_above: int = 2,
    lines_below: int = 3,
) -> list[NormalizedDiagnostic]:
    """Normalize a ``publishDiagnostics`` notification for one document.

    The document is read exactly once, off the event loop.

    Args:
        publish_diagnostics: The notification parameters.
        lines_above: Context lines shown above each marked range.
        lines_below: Context lines shown below each marked range.

    Returns:
        The canonical diagnostics, in notification order.

    Raises:
        OSError: If the document cannot be read.
        UnicodeDecodeError: If the document is not valid UTF-8.
    """
    abs_file_path: str = uri_to_abs_path(publish_diagnostics["uri"])
    file_text: str = await asyncio.to_thread(Path(abs_file_path).read_text, encoding="utf-8")
    logger.debug(
        "Normalizing %d LSP diagnostic(s) for %s",
        len(publish_diagnostics["diagnostics"]),
        abs_file_path,
    )
    return [
        normalize_lsp_diagnostic(
            diagnostic=d,
            abs_file_path=abs_file_path,
            file_text=file_text,
            lines_above=lines_above,
            lines_below=lines_below,
        )
        for d in publish_diagnostics["diagnostics"]
    ]
