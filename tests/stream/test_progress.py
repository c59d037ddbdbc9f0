# rangler:header:start
#
#   project      : Rangler
#   file         : test_progress.py
#   file_relpath : tests/stream/test_progress.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Unit tests for the console progress observer."""

from __future__ import annotations

import io

from rangler.stream import ConsoleProgress, NullProgress


class _FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_console_progress_overwrites_status_line() -> None:
    """Updates rewrite one line; finish terminates it."""
    clock = _FakeClock()
    buffer = io.StringIO()
    progress = ConsoleProgress(file=buffer, clock=clock)

    clock.now += 5
    progress.update(2048, 100)
    clock.now += 3660
    progress.finish(3 * 1024 * 1024, 1024)

    assert buffer.getvalue() == (
        "\r[00:00:05] 2.00 KiB read, 100 B stored"
        "\r[01:01:05] 3.00 MiB read, 1.00 KiB stored\n"
    )
    assert progress.updates == 1


def test_null_progress_accepts_notifications() -> None:
    """The null observer silently ignores everything."""
    progress = NullProgress()

    progress.update(1, 2)
    progress.finish(1, 2)
