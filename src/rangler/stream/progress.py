# rangler:header:start
#
#   project      : Rangler
#   file         : progress.py
#   file_relpath : src/rangler/stream/progress.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Progress observers notified by the run loop.

The run loop owns no global counters: it hands cumulative figures to an
observer passed in by the caller. [`NullProgress`][rangler.stream.progress.NullProgress]
ignores them, [`ConsoleProgress`][rangler.stream.progress.ConsoleProgress]
keeps a single status line updated on STDERR.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Protocol

import click

from rangler.utils.format import format_bytes, format_elapsed

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO


class ProgressObserver(Protocol):
    """Receives cumulative throughput figures from the run loop."""

    def update(self, bytes_read: int, bytes_stored: int) -> None:
        """Report progress so far."""
        ...

    def finish(self, bytes_read: int, bytes_stored: int) -> None:
        """Report the final figures once the input is exhausted."""
        ...


class NullProgress:
    """Observer that discards every notification."""

    def update(self, bytes_read: int, bytes_stored: int) -> None:
        pass

    def finish(self, bytes_read: int, bytes_stored: int) -> None:
        pass


class ConsoleProgress:
    """Observer rendering ``[HH:MM:SS] 1.20 MiB read, 30.00 KiB stored`` on STDERR.

    Each update overwrites the previous one with a carriage return; ``finish``
    terminates the line.

    Args:
        file (TextIO | None): Target stream; defaults to Click's STDERR.
        clock (Callable[[], float]): Monotonic time source.
    """

    def __init__(
        self,
        *,
        file: TextIO | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.file = file
        self.clock = clock
        self.started = clock()
        self.updates = 0

    def render(self, bytes_read: int, bytes_stored: int) -> str:
        """Return the status text for the given figures."""
        elapsed = format_elapsed(self.clock() - self.started)
        return f"[{elapsed}] {format_bytes(bytes_read)} read, {format_bytes(bytes_stored)} stored"

    def update(self, bytes_read: int, bytes_stored: int) -> None:
        self.updates += 1
        click.echo(
            "\r" + self.render(bytes_read, bytes_stored), nl=False, file=self.file, err=True
        )

    def finish(self, bytes_read: int, bytes_stored: int) -> None:
        click.echo("\r" + self.render(bytes_read, bytes_stored), file=self.file, err=True)
