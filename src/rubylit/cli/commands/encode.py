# topmark:header:start
#
#   project      : RubyLit
#   file         : encode.py
#   file_relpath : src/rubylit/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RubyLit `encode` command.

Reads a JSON or TOML document from a file or STDIN and prints it as a Ruby literal.

Examples:
    ```bash
    echo '{"b": [1, 2], "a": "it\\'s"}' | rubylit encode
    rubylit encode --indent --indent-unit '    ' settings.toml
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from rubylit.api import encode_to_string
from rubylit.cli.cli_types import EnumChoiceParam, InputFormat
from rubylit.cli.errors import RubylitConfigError, RubylitEncodeError, RubylitUnexpectedError
from rubylit.cli.io import STDIN_MARKER, infer_input_format, parse_document, read_input_text
from rubylit.cli.options import config_options, encoder_layout_options
from rubylit.config.io import ConfigError
from rubylit.config.logging import get_logger
from rubylit.config.model import resolve_config
from rubylit.encoding.errors import EncodeError

if TYPE_CHECKING:
    from rubylit.cli.console import ConsoleLike
    from rubylit.config.model import EncoderConfig

logger = get_logger(__name__)


@click.command(
    name="encode",
    help="Encode a JSON or TOML document (PATH, or '-' for STDIN) as a Ruby literal.",
)
@click.argument("source", metavar="[PATH]", required=False, default=STDIN_MARKER, type=str)
@click.option(
    "--from",
    "input_format",
    type=EnumChoiceParam(InputFormat),
    default=None,
    help=(
        f"Input format ({', '.join(v.value for v in InputFormat)}). "
        "Defaults to the file suffix, or json for STDIN."
    ),
)
@encoder_layout_options
@config_options
@click.pass_context
def encode_command(
    ctx: click.Context,
    *,
    source: str,
    input_format: InputFormat | None,
    indent_enabled: bool | None,
    indent_unit: str | None,
    prefix: str | None,
    max_depth: int | None,
    uniform_pair_spacing: bool | None,
    config_file: str | None,
    no_config: bool,
) -> None:
    """Encode one document and print the literal to stdout."""
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = int(ctx.obj.get("verbosity_level", 0))

    try:
        config: EncoderConfig = resolve_config(
            config_file=Path(config_file) if config_file else None,
            discover=not no_config,
            indent_enabled=indent_enabled,
            indent_unit=indent_unit,
            prefix=prefix,
            max_depth=max_depth,
            uniform_pair_spacing=uniform_pair_spacing,
        )
    except ConfigError as e:
        raise RubylitConfigError(str(e)) from e

    if verbosity > 0:
        for path in config.config_files:
            console.info(f"Using config: {path}")

    fmt: InputFormat = infer_input_format(source, input_format)
    value: Any = parse_document(read_input_text(source), fmt, name=source)

    try:
        literal: str = encode_to_string(value, config.to_options())
    except EncodeError as e:
        logger.debug("Encoding %s failed: %s", source, e)
        raise RubylitEncodeError(str(e)) from e
    except Exception as e:  # pragma: no cover
        logger.exception("Unexpected error encoding %s", source)
        raise RubylitUnexpectedError(f"Unexpected error encoding {source}: {e}") from e

    console.print(literal)
