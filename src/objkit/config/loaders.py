# topmark:header:start
#
#   project      : ObjKit
#   file         : loaders.py
#   file_relpath : src/objkit/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading ObjKit configuration from on-disk
TOML files (``objkit.toml`` / ``pyproject.toml``), plus the runtime defaults
defined in code. Parsing is done with `tomlkit` and returned as plain `dict`
structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from objkit.config.keys import Toml
from objkit.config.logging import get_logger
from objkit.constants import PYPROJECT_TOOL_SECTION
from objkit.core.errors import ObjkitError

if TYPE_CHECKING:
    from pathlib import Path

    from objkit.config.logging import ObjkitLogger

TomlTable = dict[str, Any]

logger: ObjkitLogger = get_logger(__name__)


class ConfigLoadError(ObjkitError):
    """A configuration file could not be read or parsed."""


def load_defaults_dict() -> TomlTable:
    """Return ObjKit's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_JSON: {
            Toml.KEY_INDENT: 0,
            Toml.KEY_SORT_KEYS: False,
        },
        Toml.SECTION_COLLATION: {
            Toml.KEY_LOCALE: "",
        },
    }


def parse_toml_file(path: Path) -> TomlTable:
    """Read and parse a TOML file, raising on failure.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content (``{}`` if the document is not a table).

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigLoadError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``objkit.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return parse_toml_file(path)
    except ConfigLoadError as e:
        logger.error("%s", e)
        return {}


def extract_tool_section(data: TomlTable, dotted: str = PYPROJECT_TOOL_SECTION) -> TomlTable:
    """Return the nested table at ``dotted`` (e.g. ``tool.objkit``), or ``{}``.

    Args:
        data: Parsed TOML document, typically from ``pyproject.toml``.
        dotted: Dotted section path.

    Returns:
        The nested table, or an empty dict when any segment is missing or not a table.
    """
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict):
            return {}
        node = cast("TomlTable", node).get(part)
    return cast("TomlTable", node) if isinstance(node, dict) else {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table, or ``{}`` when absent or not a table."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for %r, got %s", key, type(value).__name__)
    return {}


def to_toml(data: TomlTable) -> str:
    """Render a TOML table as TOML text."""
    return tomlkit.dumps(data)
