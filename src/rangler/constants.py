# rangler:header:start
#
#   project      : Rangler
#   file         : constants.py
#   file_relpath : src/rangler/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Rangler Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

RANGLER_VERSION: str = get_version("rangler")

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "RANGLER_LOG_LEVEL"

# Name of the TOML table holding Rangler settings (``[tool.rangler]`` in pyproject.toml):
CONFIG_SECTION: str = "rangler"

# Flush the output and report progress each time this many more bytes were read:
DEFAULT_FLUSH_BYTES: int = 256_000

# Text encoding for both input records and output lines:
STREAM_ENCODING: str = "utf-8"

USAGE: str = """\
Usage: rangler [OPTIONS] COMMANDS...

Commands (applied to every line, in the given order):
    filter <regex>     excludes lines that do not match
    append <text>      appends the text to every line
    prepend <text>     prepends the text to every line
    trim               removes whitespace at both ends of every line
    lower              converts letters to lower case
    upper              converts letters to upper case
    dedupe             drops lines already seen at this point of the pipeline"""
