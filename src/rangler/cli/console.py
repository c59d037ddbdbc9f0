# rangler:header:start
#
#   project      : Rangler
#   file         : console.py
#   file_relpath : src/rangler/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Console abstraction for user-facing program messages.

STDOUT belongs to the transformed lines, so every console message goes to
STDERR. Use this for messages intended for end users, while reserving
`logging` for diagnostics.
"""

from __future__ import annotations

from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by the CLI."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write an informational message."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole:
    """Program-message console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
            Otherwise, all output is plain text.
        err (TextIO | None): The text stream to write to. Defaults to Click's STDERR.
    """

    enable_color: bool
    err: TextIO | None

    def __init__(self, *, enable_color: bool = True, err: TextIO | None = None) -> None:
        self.enable_color = enable_color
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stderr.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, err=True, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by click.style.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
