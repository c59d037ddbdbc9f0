# rangler:header:start
#
#   project      : Rangler
#   file         : io.py
#   file_relpath : src/rangler/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Rangler settings live in a ``[rangler]`` table (``rangler.toml``) or in
``[tool.rangler]`` (``pyproject.toml``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from rangler.config.logging import get_logger
from rangler.constants import CONFIG_SECTION
from rangler.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from rangler.config.logging import RanglerLogger

TomlTable = dict[str, Any]

logger: RanglerLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(data: TomlTable, path: Path) -> TomlTable:
    """Return the Rangler table of a parsed TOML document.

    ``pyproject.toml`` files are read from ``[tool.rangler]``, anything else
    from ``[rangler]``. A missing table yields an empty dict.
    """
    if path.name == "pyproject.toml":
        tool: Any = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool] in {path} must be a table")
        section: Any = tool.get(CONFIG_SECTION, {})
    else:
        section = data.get(CONFIG_SECTION, {})

    if not isinstance(section, dict):
        raise ConfigError(f"[{CONFIG_SECTION}] in {path} must be a table")
    if not section:
        logger.warning("No [%s] settings found in %s", CONFIG_SECTION, path)
    return cast("TomlTable", section)


def get_string_list(table: TomlTable, key: str, path: Path) -> list[str] | None:
    """Return ``table[key]`` as a list of strings, or None when absent."""
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' in {path} must be a list of strings")
    return cast("list[str]", value)


def get_bool_or_none(table: TomlTable, key: str, path: Path) -> bool | None:
    """Return ``table[key]`` as a bool, or None when absent."""
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' in {path} must be a boolean")
    return value


def get_int_or_none(table: TomlTable, key: str, path: Path) -> int | None:
    """Return ``table[key]`` as an int, or None when absent."""
    value = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' in {path} must be an integer")
    return value
