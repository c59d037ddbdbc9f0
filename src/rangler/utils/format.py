# rangler:header:start
#
#   project      : Rangler
#   file         : format.py
#   file_relpath : src/rangler/utils/format.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Formatting helpers for human-readable status output."""

from __future__ import annotations

_BINARY_UNITS: tuple[str, ...] = ("KiB", "MiB", "GiB", "TiB", "PiB")


def format_bytes(count: int) -> str:
    """Render a byte count with binary units, e.g. ``"1.50 MiB"``.

    Counts below one KiB are rendered exactly (``"512 B"``).

    Args:
        count (int): Number of bytes (non-negative).

    Returns:
        str: The formatted size.
    """
    if count < 1024:
        return f"{count} B"

    value = float(count)
    unit = _BINARY_UNITS[0]
    for unit in _BINARY_UNITS:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.2f} {unit}"


def format_elapsed(seconds: float) -> str:
    """Render elapsed seconds as ``HH:MM:SS``."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
