# topmark:header:start
#
#   project      : TermOut
#   file         : loaders.py
#   file_relpath : src/termout/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading TermOut configuration from
on-disk TOML files:

- ``termout.toml``: settings live at the top level of the document;
- ``pyproject.toml``: settings live in the ``[tool.termout]`` table.

Parsing is done with `tomlkit` and returned as plain `dict` structures before
validation by [`OutputConfig.from_mapping`][termout.config.model.OutputConfig.from_mapping].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from termout.config.logging import get_logger
from termout.config.model import OutputConfig
from termout.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_TABLE, TERMOUT_TOML_NAME
from termout.core.errors import ConfigError

if TYPE_CHECKING:
    from termout.config.logging import TermoutLogger

TomlTable = dict[str, Any]

logger: TermoutLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read, is not UTF-8 or is not valid TOML.

    Notes:
        Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"cannot read configuration: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"invalid UTF-8: {e}", path=path) from e
    except TomlkitParseError as e:
        raise ConfigError(f"invalid TOML: {e}", path=path) from e

    data_any: Any = doc.unwrap()
    logger.trace("Loaded TOML from %s: %r", path, data_any)
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_termout_table(data: TomlTable, path: Path) -> TomlTable:
    """Return the TermOut settings table of a parsed document.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): File the document was read from; its name selects the layout.

    Returns:
        TomlTable: ``[tool.termout]`` for ``pyproject.toml``, the whole document
            otherwise. Missing tables yield an empty dict.

    Raises:
        ConfigError: If the settings location exists but is not a table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data

    table: Any = data
    for key in PYPROJECT_TOOL_TABLE:
        if not isinstance(table, dict):
            break
        table = cast("TomlTable", table).get(key, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{'.'.join(PYPROJECT_TOOL_TABLE)}] must be a table", path=path)
    return cast("TomlTable", table)


def has_termout_table(path: Path) -> bool:
    """Return True if ``pyproject.toml`` at ``path`` has a ``[tool.termout]`` table."""
    try:
        data: TomlTable = load_toml_dict(path)
    except ConfigError as exc:
        logger.warning("Skipping %s during discovery: %s", path, exc)
        return False
    tool: Any = data.get(PYPROJECT_TOOL_TABLE[0])
    return isinstance(tool, dict) and PYPROJECT_TOOL_TABLE[1] in tool


def load_config(path: Path) -> OutputConfig:
    """Load and validate the configuration stored in ``path``.

    Args:
        path (Path): A ``termout.toml`` or ``pyproject.toml`` file.

    Returns:
        OutputConfig: The validated configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    data: TomlTable = load_toml_dict(path)
    table: TomlTable = extract_termout_table(data, path)
    logger.debug("Using configuration from %s", path)
    return OutputConfig.from_mapping(table, source=path)


def discover_config(start: Path | None = None) -> OutputConfig:
    """Find the nearest configuration file and load it.

    Walks from ``start`` (default: the current working directory) up to the
    filesystem root. In each directory ``termout.toml`` wins over
    ``pyproject.toml``; a ``pyproject.toml`` without ``[tool.termout]`` is skipped.

    Args:
        start (Path | None): Directory (or file) to start from.

    Returns:
        OutputConfig: The loaded configuration, or the defaults when no file is found.

    Raises:
        ConfigError: If a discovered file cannot be read, parsed or validated.
    """
    here: Path = (start or Path.cwd()).resolve()
    if here.is_file():
        here = here.parent

    for directory in (here, *here.parents):
        candidate: Path = directory / TERMOUT_TOML_NAME
        if candidate.is_file():
            return load_config(candidate)
        candidate = directory / PYPROJECT_TOML_NAME
        if candidate.is_file() and has_termout_table(candidate):
            return load_config(candidate)

    logger.debug("No configuration found from %s upwards; using defaults", here)
    return OutputConfig()
