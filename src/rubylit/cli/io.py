# topmark:header:start
#
#   project      : RubyLit
#   file         : io.py
#   file_relpath : src/rubylit/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers for the ``encode`` command.

Reads a document from a path or STDIN (``-``) and parses it into plain Python values
(dicts, lists, scalars). Filesystem and parse failures are mapped to the CLI error
types so commands exit with the matching code.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from rubylit.cli.cli_types import InputFormat
from rubylit.cli.errors import (
    RubylitDataError,
    RubylitFileNotFoundError,
    RubylitIOError,
    RubylitPermissionDeniedError,
)
from rubylit.config.logging import get_logger

logger = get_logger(__name__)

STDIN_MARKER: str = "-"

_SUFFIX_FORMATS: dict[str, InputFormat] = {
    ".json": InputFormat.JSON,
    ".toml": InputFormat.TOML,
}


def infer_input_format(source: str, explicit: InputFormat | None) -> InputFormat:
    """Return the input format: explicit choice, else by file suffix, else JSON."""
    if explicit is not None:
        return explicit
    if source != STDIN_MARKER:
        fmt: InputFormat | None = _SUFFIX_FORMATS.get(Path(source).suffix.lower())
        if fmt is not None:
            return fmt
    return InputFormat.JSON


def read_input_text(source: str) -> str:
    """Read UTF-8 text from ``source`` (a path, or ``-`` for STDIN).

    Raises:
        RubylitFileNotFoundError: If the path does not exist.
        RubylitPermissionDeniedError: If the path cannot be read.
        RubylitIOError: For other OS errors.
        RubylitDataError: If the content is not valid UTF-8.
    """
    if source == STDIN_MARKER:
        stream = click.get_binary_stream("stdin")
        data: bytes = stream.read()
        name: str = "<stdin>"
    else:
        path = Path(source)
        name = str(path)
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise RubylitFileNotFoundError(f"File not found: {name}") from e
        except PermissionError as e:
            raise RubylitPermissionDeniedError(f"Permission denied: {name}") from e
        except OSError as e:
            raise RubylitIOError(f"Cannot read {name}: {e}") from e

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RubylitDataError(f"{name} is not valid UTF-8: {e}") from e


def parse_document(text: str, fmt: InputFormat, *, name: str = "<input>") -> Any:
    """Parse ``text`` as ``fmt`` into plain Python values.

    Raises:
        RubylitDataError: If the document is malformed.
    """
    logger.debug("Parsing %s as %s (%d chars)", name, fmt.value, len(text))
    if fmt == InputFormat.TOML:
        try:
            return tomlkit.parse(text).unwrap()
        except TomlkitParseError as e:
            raise RubylitDataError(f"Invalid TOML in {name}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise RubylitDataError(f"Invalid JSON in {name}: {e}") from e
