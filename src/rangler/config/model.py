# rangler:header:start
#
#   project      : Rangler
#   file         : model.py
#   file_relpath : src/rangler/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Run configuration: an immutable snapshot and its mutable builder.

`MutableRunConfig` collects settings from defaults, an optional TOML file and
CLI arguments; `freeze()` validates them and yields the immutable `RunConfig`
handed to the run loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rangler.config.io import (
    extract_section,
    get_bool_or_none,
    get_int_or_none,
    get_string_list,
    load_toml_dict,
)
from rangler.config.logging import get_logger
from rangler.constants import DEFAULT_FLUSH_BYTES
from rangler.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rangler.config.logging import RanglerLogger

logger: RanglerLogger = get_logger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """Immutable settings for one run.

    Attributes:
        commands (tuple[str, ...]): Command tokens the pipeline is built from.
        flush_bytes (int): Input bytes between two output flushes / progress updates.
        progress (bool): Whether a progress line is shown on STDERR.
        config_files (tuple[Path, ...]): Config files that contributed settings.
    """

    commands: tuple[str, ...]
    flush_bytes: int = DEFAULT_FLUSH_BYTES
    progress: bool = False
    config_files: tuple[Path, ...] = ()


@dataclass
class MutableRunConfig:
    """Mutable configuration used while merging sources.

    ``None`` means "not set here, inherit".
    """

    commands: list[str] = field(default_factory=lambda: [])
    flush_bytes: int | None = None
    progress: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableRunConfig:
        """Return a builder holding the built-in defaults."""
        return cls(flush_bytes=DEFAULT_FLUSH_BYTES, progress=False)

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRunConfig:
        """Load settings from a TOML file.

        Recognized keys of the ``[rangler]`` / ``[tool.rangler]`` table:
        ``commands`` (list of tokens), ``flush-bytes`` (int), ``progress`` (bool).

        Raises:
            ConfigError: If the file is unreadable or a value has the wrong type.
        """
        logger.debug("Creating MutableRunConfig from TOML config: %s", path)
        table = extract_section(load_toml_dict(path), path)

        draft = cls(
            commands=get_string_list(table, "commands", path) or [],
            flush_bytes=get_int_or_none(table, "flush-bytes", path),
            progress=get_bool_or_none(table, "progress", path),
            config_files=[path],
        )
        logger.debug("Generated MutableRunConfig: %s", draft)
        return draft

    def merge_with(self, other: MutableRunConfig) -> MutableRunConfig:
        """Overlay ``other`` onto this builder (``other`` wins where set)."""
        if other.commands:
            self.commands = list(other.commands)
        if other.flush_bytes is not None:
            self.flush_bytes = other.flush_bytes
        if other.progress is not None:
            self.progress = other.progress
        self.config_files.extend(other.config_files)
        return self

    def apply_cli_args(
        self,
        *,
        commands: Sequence[str],
        progress: bool | None,
    ) -> MutableRunConfig:
        """Apply command-line overrides.

        Command tokens given on the command line replace configured ones.
        """
        if commands:
            self.commands = list(commands)
        if progress is not None:
            self.progress = progress
        return self

    def freeze(self) -> RunConfig:
        """Validate and freeze into a `RunConfig`.

        Raises:
            ConfigError: If ``flush_bytes`` is not a positive integer.
        """
        flush_bytes = DEFAULT_FLUSH_BYTES if self.flush_bytes is None else self.flush_bytes
        if flush_bytes <= 0:
            raise ConfigError(f"flush-bytes must be a positive integer, got {flush_bytes}")
        return RunConfig(
            commands=tuple(self.commands),
            flush_bytes=flush_bytes,
            progress=bool(self.progress),
            config_files=tuple(self.config_files),
        )
