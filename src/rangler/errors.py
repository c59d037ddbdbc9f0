# rangler:header:start
#
#   project      : Rangler
#   file         : errors.py
#   file_relpath : src/rangler/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Exceptions raised by the Rangler engine.

These carry no CLI policy (exit codes, usage text). The CLI layer maps them
onto Click exceptions in [`rangler.cli.errors`][rangler.cli.errors].
"""

from __future__ import annotations


class RanglerError(Exception):
    """Base error for this package."""

    message: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PipelineBuildError(RanglerError):
    """Raised when command tokens cannot be turned into a pipeline.

    Attributes:
        message (str): Human-readable reason, e.g. ``"missing suffix"``.
        token (str | None): The keyword being processed when construction failed.
        position (int | None): Index of ``token`` in the token list.
    """

    token: str | None
    position: int | None

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.token = token
        self.position = position


class InvalidPatternError(PipelineBuildError):
    """Raised when a ``filter`` argument does not compile as a regular expression."""


class StreamIOError(RanglerError):
    """Raised when reading the input or writing the output fails."""


class ConfigError(RanglerError):
    """Raised when a configuration file is unreadable or malformed."""
