# rangler:header:start
#
#   project      : Rangler
#   file         : sink.py
#   file_relpath : src/rangler/stream/sink.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Line sink: write surviving lines, one newline each."""

from __future__ import annotations

from typing import BinaryIO

from rangler.constants import STREAM_ENCODING
from rangler.errors import StreamIOError


class LineSink:
    """Encode and write lines to a binary stream.

    Flushing is left to the caller so output can be flushed periodically
    rather than per line.

    Args:
        stream (BinaryIO): The output stream (e.g. ``sys.stdout.buffer``).
        encoding (str): Text encoding of each written line.

    Attributes:
        lines_written (int): Lines written so far.
    """

    def __init__(self, stream: BinaryIO, *, encoding: str = STREAM_ENCODING) -> None:
        self.stream = stream
        self.encoding = encoding
        self.lines_written = 0

    def write(self, line: str) -> None:
        """Write ``line`` followed by exactly one newline.

        Raises:
            StreamIOError: If the underlying stream fails.
        """
        data = line.encode(self.encoding, errors="surrogateescape") + b"\n"
        try:
            self.stream.write(data)
        except OSError as exc:
            raise StreamIOError(f"failed to write output: {exc}") from exc
        self.lines_written += 1

    def flush(self) -> None:
        """Flush the underlying stream.

        Raises:
            StreamIOError: If the underlying stream fails.
        """
        try:
            self.stream.flush()
        except OSError as exc:
            raise StreamIOError(f"failed to flush output: {exc}") from exc
