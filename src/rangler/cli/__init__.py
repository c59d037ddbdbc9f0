# rangler:header:start
#
#   project      : Rangler
#   file         : __init__.py
#   file_relpath : src/rangler/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Rangler command-line interface (Click)."""
