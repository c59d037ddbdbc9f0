# rangler:header:start
#
#   project      : Rangler
#   file         : __main__.py
#   file_relpath : src/rangler/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Module entry point for running Rangler via ``python -m rangler``.

It delegates directly to [`rangler.cli.main.cli`][rangler.cli.main.cli], so
there is a single CLI entry point regardless of how Rangler is launched.

Examples:
    Lower-case and dedupe a log file::

        python -m rangler lower dedupe < access.log
"""

from __future__ import annotations

from rangler.cli.main import cli

if __name__ == "__main__":
    cli()
