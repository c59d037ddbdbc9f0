# rangler:header:start
#
#   project      : Rangler
#   file         : test_format.py
#   file_relpath : tests/utils/test_format.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Tests for human-readable byte and duration formatting."""

from __future__ import annotations

import pytest

from rangler.utils.format import format_bytes, format_elapsed


@pytest.mark.parametrize(
    "count, expected",
    [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.00 KiB"),
        (1536, "1.50 KiB"),
        (1024**2, "1.00 MiB"),
        (3 * 1024**3, "3.00 GiB"),
        (5 * 1024**5, "5.00 PiB"),
    ],
)
def test_format_bytes(count: int, expected: str) -> None:
    """Binary units, two decimals above one KiB."""
    assert format_bytes(count) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "00:00:00"), (59.9, "00:00:59"), (3725, "01:02:05"), (100 * 3600, "100:00:00")],
)
def test_format_elapsed(seconds: float, expected: str) -> None:
    """Elapsed time is shown as hours, minutes and seconds."""
    assert format_elapsed(seconds) == expected
