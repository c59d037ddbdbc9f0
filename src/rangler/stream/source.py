# rangler:header:start
#
#   project      : Rangler
#   file         : source.py
#   file_relpath : src/rangler/stream/source.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Line source: split a binary stream into decoded lines.

Contract:
  - Records end at each ``b"\\n"``; the delimiter is stripped.
  - A final record without a trailing newline is still delivered.
  - Records that do not decode as UTF-8 are skipped silently. They still
    count towards ``bytes_read`` and are tallied in ``skipped_records``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from rangler.config.logging import get_logger
from rangler.constants import STREAM_ENCODING
from rangler.errors import StreamIOError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rangler.config.logging import RanglerLogger

logger: RanglerLogger = get_logger(__name__)


class LineSource:
    """Iterate over the decoded lines of a binary stream.

    Args:
        stream (BinaryIO): The input stream (e.g. ``sys.stdin.buffer``).
        encoding (str): Text encoding of each record.

    Attributes:
        bytes_read (int): Raw bytes consumed so far, delimiters included.
        records (int): Records read so far, including skipped ones.
        skipped_records (int): Records dropped because they failed to decode.
    """

    def __init__(self, stream: BinaryIO, *, encoding: str = STREAM_ENCODING) -> None:
        self.stream = stream
        self.encoding = encoding
        self.bytes_read = 0
        self.records = 0
        self.skipped_records = 0

    def _read_record(self) -> bytes:
        try:
            return self.stream.readline()
        except OSError as exc:
            raise StreamIOError(f"failed to read input: {exc}") from exc

    def __iter__(self) -> Iterator[str]:
        while True:
            record = self._read_record()
            if not record:
                return

            self.bytes_read += len(record)
            self.records += 1

            if record.endswith(b"\n"):
                record = record[:-1]

            try:
                line = record.decode(self.encoding)
            except UnicodeDecodeError as exc:
                # Undecodable records are dropped, never surfaced.
                self.skipped_records += 1
                logger.debug("Skipping record #%d: %s", self.records, exc)
                continue

            yield line
