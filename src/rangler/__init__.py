# rangler:header:start
#
#   project      : Rangler
#   file         : __init__.py
#   file_relpath : src/rangler/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Rangler package.

Rangler is a streaming line-oriented text transformation tool. It reads lines
from STDIN, threads each one through an ordered pipeline of steps (filter,
append, prepend, trim, lower, upper, dedupe) and writes the surviving lines to
STDOUT, one line at a time so inputs larger than memory are fine.
"""

from __future__ import annotations
