# rangler:header:start
#
#   project      : Rangler
#   file         : errors.py
#   file_relpath : src/rangler/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Exceptions for the Rangler CLI.

Usage:
    Raise these exceptions in the CLI to signal errors with standardized
    messages and exit codes. Click prints them and exits.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from rangler.cli.exit_codes import ExitCode
from rangler.constants import USAGE


class RanglerCliError(click.ClickException):
    """Base class for all Rangler CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add an ``Error:`` prefix.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(self.format_message(), fg="bright_red"))


class RanglerUsageError(RanglerCliError):
    """Error for invalid command tokens; the usage summary follows the message."""

    exit_code = ExitCode.USAGE_ERROR

    def format_message(self) -> str:
        return f"{super().format_message()}\n{USAGE}"


class RanglerConfigError(RanglerCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class RanglerIOError(RanglerCliError):
    """Error for I/O errors reading STDIN or writing STDOUT."""

    exit_code = ExitCode.IO_ERROR


class RanglerInterruptedError(RanglerCliError):
    """Error raised when the run is interrupted from the keyboard."""

    exit_code = ExitCode.INTERRUPTED
