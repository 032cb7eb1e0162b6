# topmark:header:start
#
#   project      : CheckerLog
#   file         : __init__.py
#   file_relpath : src/checkerlog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CheckerLog package.

CheckerLog turns the output of static checkers (TypeScript, vue-tsc, ESLint and
language servers such as VLS) into one canonical diagnostic record, and projects
those records into terminal reports, summary lines and runtime payloads for
in-browser overlays.
"""

from __future__ import annotations
