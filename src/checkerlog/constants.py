# topmark:header:start
#
#   project      : CheckerLog
#   file         : constants.py
#   file_relpath : src/checkerlog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CheckerLog constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CHECKERLOG: str = "checkerlog"

CHECKERLOG_VERSION: str = get_version("checkerlog")

# Event tag of the runtime envelope pushed to overlay clients.
CHECKER_ERROR_EVENT: str = "checkerlog:error"
