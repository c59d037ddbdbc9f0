# rangler:header:start
#
#   project      : Rangler
#   file         : engine.py
#   file_relpath : src/rangler/stream/engine.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Run loop driving a pipeline over a stream (engine layer).

This module wires a [`LineSource`][rangler.stream.source.LineSource], a
[`Pipeline`][rangler.pipeline.pipeline.Pipeline] and a
[`LineSink`][rangler.stream.sink.LineSink] together.

Design goals:
  - No CLI dependencies: presentation (messages, exit codes) belongs to the
    CLI layer. Errors propagate as [`StreamIOError`][rangler.errors.StreamIOError].
  - Strictly sequential: a line is read, transformed and written (or dropped)
    before the next one is read.
  - Bounded latency: the sink is flushed, and the observer notified, each time
    another ``flush_bytes`` bytes of input were consumed, and once at the end.

Typical usage:

    stats = run_stream(
        pipeline,
        LineSource(sys.stdin.buffer),
        LineSink(sys.stdout.buffer),
        observer=ConsoleProgress(),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rangler.config.logging import get_logger
from rangler.constants import DEFAULT_FLUSH_BYTES
from rangler.stream.progress import NullProgress

if TYPE_CHECKING:
    from rangler.config.logging import RanglerLogger
    from rangler.pipeline import Pipeline
    from rangler.stream.progress import ProgressObserver
    from rangler.stream.sink import LineSink
    from rangler.stream.source import LineSource

logger: RanglerLogger = get_logger(__name__)


@dataclass
class RunStats:
    """Summary of one run.

    Attributes:
        bytes_read (int): Raw input bytes consumed.
        records (int): Input records seen, including undecodable ones.
        skipped_records (int): Records dropped because they were not valid text.
        lines_written (int): Lines that survived the pipeline.
        lines_dropped (int): Lines dropped by a filter or dedupe step.
        bytes_stored (int): Bytes held by dedupe steps at the end of the run.
    """

    bytes_read: int = 0
    records: int = 0
    skipped_records: int = 0
    lines_written: int = 0
    lines_dropped: int = 0
    bytes_stored: int = 0


def run_stream(
    pipeline: Pipeline,
    source: LineSource,
    sink: LineSink,
    *,
    observer: ProgressObserver | None = None,
    flush_bytes: int = DEFAULT_FLUSH_BYTES,
) -> RunStats:
    """Feed every line of ``source`` through ``pipeline`` into ``sink``.

    Args:
        pipeline (Pipeline): The constructed pipeline (mutated by dedupe steps).
        source (LineSource): Where lines come from.
        sink (LineSink): Where surviving lines go.
        observer (ProgressObserver | None): Receives periodic throughput figures.
        flush_bytes (int): Input bytes between two flushes/notifications.

    Returns:
        RunStats: Counters describing the run.

    Raises:
        StreamIOError: If reading or writing fails. Output flushed before the
            failure stays valid; nothing is retried.
    """
    progress: ProgressObserver = observer or NullProgress()
    bytes_at_last_report = 0
    dropped = 0

    for line in source:
        result = pipeline.apply(line)
        if result is None:
            dropped += 1
        else:
            sink.write(result)

        if source.bytes_read > bytes_at_last_report + flush_bytes:
            sink.flush()
            progress.update(source.bytes_read, pipeline.memory())
            bytes_at_last_report = source.bytes_read

    sink.flush()
    progress.finish(source.bytes_read, pipeline.memory())

    stats = RunStats(
        bytes_read=source.bytes_read,
        records=source.records,
        skipped_records=source.skipped_records,
        lines_written=sink.lines_written,
        lines_dropped=dropped,
        bytes_stored=pipeline.memory(),
    )
    logger.info(
        "Processed %d records (%d bytes): %d written, %d dropped, %d skipped",
        stats.records,
        stats.bytes_read,
        stats.lines_written,
        stats.lines_dropped,
        stats.skipped_records,
    )
    return stats
