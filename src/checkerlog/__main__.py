# topmark:header:start
#
#   project      : CheckerLog
#   file         : __main__.py
#   file_relpath : src/checkerlog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CheckerLog via ``python -m checkerlog``.

It delegates directly to :func:`checkerlog.cli.main.cli`, the same entry point as
the ``checkerlog`` console script.

Examples:
    Report ESLint results::

        eslint -f json src > eslint.json
        python -m checkerlog report --checker eslint eslint.json
"""

from __future__ import annotations

from checkerlog.cli.main import cli

if __name__ == "__main__":
    cli()
