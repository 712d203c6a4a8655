# topmark:header:start
#
#   project      : RubyLit
#   file         : io.py
#   file_relpath : src/rubylit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and query TOML configuration sources.

This module provides I/O helpers for reading RubyLit configuration from:
- runtime defaults defined in code (`load_defaults_dict`),
- on-disk TOML files (``rubylit.toml``, or ``[tool.rubylit]`` in ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures. The getters
coerce loosely and log at debug level when a value has the wrong type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from rubylit.config.keys import Toml
from rubylit.config.logging import get_logger
from rubylit.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_INDENT_UNIT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_PREFIX,
    PYPROJECT_FILE_NAME,
)

if TYPE_CHECKING:
    from pathlib import Path

    from rubylit.config.logging import RubylitLogger

TomlTable = dict[str, Any]

logger: RubylitLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or holds invalid values."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        where: str = f" in {path}" if path is not None else ""
        super().__init__(f"Invalid configuration{where}: {reason}")


def load_defaults_dict() -> TomlTable:
    """Return RubyLit's runtime defaults as a new TOML-compatible dict (no I/O)."""
    return {
        Toml.SECTION_ENCODER: {
            Toml.KEY_INDENT: False,
            Toml.KEY_INDENT_UNIT: DEFAULT_INDENT_UNIT,
            Toml.KEY_PREFIX: DEFAULT_PREFIX,
            Toml.KEY_MAX_DEPTH: DEFAULT_MAX_DEPTH,
            Toml.KEY_UNIFORM_PAIR_SPACING: False,
        },
    }


def parse_toml_text(text: str, *, source: Path | None = None) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(source, f"TOML parse error: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem (UTF-8).

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(path, f"cannot read file: {e}") from e
    return parse_toml_text(text, source=path)


def extract_rubylit_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable | None:
    """Return the RubyLit table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.rubylit]`` (None when absent); for
    ``rubylit.toml`` it is the whole document.
    """
    if not is_pyproject:
        return data
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table: Any = cast("TomlTable", tool).get("rubylit")
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest RubyLit config file, walking up from ``start``.

    In each directory ``rubylit.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.rubylit]`` table.

    Returns:
        Path | None: The config file, or None when none is found.
    """
    directory: Path = start.resolve()
    for candidate_dir in (directory, *directory.parents):
        rubylit_toml: Path = candidate_dir / CONFIG_FILE_NAME
        if rubylit_toml.is_file():
            logger.debug("Discovered config file %s", rubylit_toml)
            return rubylit_toml
        pyproject: Path = candidate_dir / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                data: TomlTable = load_toml_dict(pyproject)
            except ConfigError as e:
                logger.warning("Ignoring unreadable %s: %s", pyproject, e.reason)
                continue
            if extract_rubylit_table(data, is_pyproject=True) is not None:
                logger.debug("Discovered [tool.rubylit] in %s", pyproject)
                return pyproject
    return None


def load_config_table(path: Path) -> TomlTable:
    """Load the RubyLit table from ``path`` (``rubylit.toml`` or ``pyproject.toml``).

    Unknown sections and keys are reported as warnings and otherwise ignored.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    data: TomlTable = load_toml_dict(path)
    table: TomlTable | None = extract_rubylit_table(
        data, is_pyproject=path.name == PYPROJECT_FILE_NAME
    )
    if table is None:
        logger.debug("No [tool.rubylit] table in %s", path)
        return {}
    warn_unknown_keys(table, source=path)
    return table


def warn_unknown_keys(table: TomlTable, *, source: Path | None = None) -> list[str]:
    """Log a warning for every unknown section/key; return their dotted names."""
    unknown: list[str] = []
    for section, value in table.items():
        if section not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            unknown.append(section)
            continue
        allowed: frozenset[str] = Toml.ALLOWED_SECTION_KEYS.get(section, frozenset())
        if isinstance(value, dict):
            unknown.extend(f"{section}.{key}" for key in value if key not in allowed)
    for name in unknown:
        logger.warning("Unknown configuration key '%s' (source: %s)", name, source or "<memory>")
    return unknown


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key``, or an empty dict when absent or not a table."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %s, got %r", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string; ints, floats and bools are coerced with ``str()``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.debug("Cannot coerce %r to string, returning None", value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean; integers are coerced with ``bool()``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.debug("Cannot coerce %r to bool, returning None", value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer; booleans are rejected, digit strings are parsed."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        logger.debug("Refusing to coerce bool %r to int, returning None", value)
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    logger.debug("Cannot coerce %r to int, returning None", value)
    return None
