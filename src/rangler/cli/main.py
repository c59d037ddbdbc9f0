# rangler:header:start
#
#   project      : Rangler
#   file         : main.py
#   file_relpath : src/rangler/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Rangler command-line entry point.

Key ideas:
- Options (verbosity, color, progress, config) come first and are resolved
  once into ``ctx.obj``.
- Every remaining token is a pipeline command; the pipeline is built before
  any input is read, so a bad command line never consumes STDIN.
- Engine errors are mapped onto Click exceptions carrying sysexits-style
  exit codes (see [`rangler.cli.exit_codes`][rangler.cli.exit_codes]).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from rangler.cli.console import ClickConsole
from rangler.cli.errors import (
    RanglerConfigError,
    RanglerInterruptedError,
    RanglerIOError,
    RanglerUsageError,
)
from rangler.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from rangler.config.logging import get_logger, setup_logging
from rangler.config.model import MutableRunConfig
from rangler.constants import RANGLER_VERSION, USAGE
from rangler.errors import ConfigError, PipelineBuildError, StreamIOError
from rangler.pipeline import Pipeline
from rangler.stream import ConsoleProgress, LineSink, LineSource, NullProgress, run_stream

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rangler.cli.console import ConsoleLike
    from rangler.config.model import RunConfig
    from rangler.stream import ProgressObserver

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    effective_color_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    log_level = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level, use_color=enable_color)


def build_run_config(
    *,
    config_path: Path | None,
    commands: Sequence[str],
    progress: bool | None,
) -> RunConfig:
    """Merge defaults, the optional config file and CLI arguments.

    Raises:
        RanglerConfigError: If the config file is unusable.
    """
    draft = MutableRunConfig.from_defaults()
    try:
        if config_path is not None:
            draft.merge_with(MutableRunConfig.from_toml_file(config_path))
        draft.apply_cli_args(commands=commands, progress=progress)
        return draft.freeze()
    except ConfigError as exc:
        raise RanglerConfigError(exc.message) from exc


def build_pipeline(commands: Sequence[str]) -> Pipeline:
    """Build the pipeline, turning construction errors into usage errors.

    Raises:
        RanglerUsageError: If the tokens do not form a valid pipeline.
    """
    try:
        return Pipeline.build(commands)
    except PipelineBuildError as exc:
        logger.debug("Rejected command tokens %r at position %s", exc.token, exc.position)
        raise RanglerUsageError(exc.message) from exc


@click.command(
    name="rangler",
    context_settings=CONTEXT_SETTINGS,
    help="Transform STDIN line by line and write the surviving lines to STDOUT.",
    epilog=USAGE,
)
@click.version_option(RANGLER_VERSION, "--version", prog_name="rangler", message="%(version)s")
@common_verbose_options
@common_color_options
@click.option(
    "--progress/--no-progress",
    "progress",
    default=None,
    help="Show bytes read and bytes stored on STDERR while running.",
)
@click.option(
    "--config",
    "config_path",
    metavar="FILE",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Load settings from a TOML file ([rangler] or [tool.rangler] table).",
)
@click.option(
    "--explain",
    is_flag=True,
    help="Print the pipeline steps and exit without reading STDIN.",
)
@click.argument("commands", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    progress: bool | None,
    config_path: Path | None,
    explain: bool,
    commands: tuple[str, ...],
) -> None:
    """Entry point for the Rangler CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    config = build_run_config(config_path=config_path, commands=commands, progress=progress)
    for path in config.config_files:
        logger.info("Settings loaded from %s", path)
    pipeline = build_pipeline(config.commands)

    if explain:
        for index, description in enumerate(pipeline.describe(), start=1):
            console.print(f"{index:>3}. {description}")
        return

    observer: ProgressObserver = ConsoleProgress() if config.progress else NullProgress()
    source = LineSource(click.get_text_stream("stdin").buffer)
    sink = LineSink(click.get_text_stream("stdout").buffer)

    try:
        run_stream(pipeline, source, sink, observer=observer, flush_bytes=config.flush_bytes)
    except StreamIOError as exc:
        logger.debug("Run aborted after %d bytes", source.bytes_read)
        raise RanglerIOError(f"IO Error: {exc.message}") from exc
    except KeyboardInterrupt as exc:
        raise RanglerInterruptedError("Interrupted") from exc


if __name__ == "__main__":
    cli()
