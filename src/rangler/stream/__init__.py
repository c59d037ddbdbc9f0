# rangler:header:start
#
#   project      : Rangler
#   file         : __init__.py
#   file_relpath : src/rangler/stream/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Streaming I/O around the pipeline: line source, sink, progress and run loop."""

from __future__ import annotations

from rangler.stream.engine import RunStats, run_stream
from rangler.stream.progress import ConsoleProgress, NullProgress, ProgressObserver
from rangler.stream.sink import LineSink
from rangler.stream.source import LineSource

__all__ = [
    "ConsoleProgress",
    "LineSink",
    "LineSource",
    "NullProgress",
    "ProgressObserver",
    "RunStats",
    "run_stream",
]
