# rangler:header:start
#
#   project      : Rangler
#   file         : __init__.py
#   file_relpath : src/rangler/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Configuration handling for Rangler.

Logging setup lives in [`rangler.config.logging`][rangler.config.logging]; the
run configuration and its TOML loading in [`rangler.config.model`][rangler.config.model]
and [`rangler.config.io`][rangler.config.io].
"""

from __future__ import annotations
