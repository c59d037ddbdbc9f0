# rangler:header:start
#
#   project      : Rangler
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""CLI test helpers for running Rangler through Click's test runner.

Every invocation passes ``--no-color`` first so assertions on STDERR never
have to deal with ANSI escapes.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from rangler.cli.exit_codes import ExitCode
from rangler.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: Sequence[str],
    *,
    input_bytes: bytes | str | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with color disabled.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["lower", "dedupe"]``.
        input_bytes (bytes | str | IO[Any] | None): Data fed to STDIN.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["upper"], input_bytes=b"a\\n")
        assert result.stdout_bytes == b"A\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *argv], input=input_bytes)


def write_config(tmp_path: Path, text: str, *, name: str = "rangler.toml") -> Path:
    """Write a TOML config file into ``tmp_path`` and return its path."""
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
