# topmark:header:start
#
#   project      : RubyLit
#   file         : api.py
#   file_relpath : src/rubylit/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points for encoding Python values as Ruby literals.

Each call creates a fresh encode state, so the functions are safe to use from several
threads at once. Errors propagate unchanged; nothing is logged at error level and no
fallback output is produced.

Example:
    ```python
    from rubylit import marshal, marshal_indent

    marshal({"b": 2, "a": 1})
    # b"{'a' => 1, 'b' => 2}"
    marshal_indent([1, 2], "", "  ")
    # b"[\\n  1,\\n  2\\n]"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass

from rubylit.constants import DEFAULT_MAX_DEPTH
from rubylit.encoding.encoder import ValueEncoder
from rubylit.encoding.state import EncodeState


@dataclass(frozen=True, slots=True)
class EncoderOptions:
    """Immutable encoder settings.

    Attributes:
        indent_enabled (bool): Emit line breaks and indentation.
        indent (str): Unit repeated once per nesting level (indented mode only).
        prefix (str): Written at the start of every indented line (indented mode only).
        max_depth (int): Maximum nesting depth before `MaxDepthExceededError`.
        uniform_pair_spacing (bool): Make mapping entries follow the record separator
            rule (``"=>"`` in compact mode) instead of always using ``" => "``.
    """

    indent_enabled: bool = False
    indent: str = ""
    prefix: str = ""
    max_depth: int = DEFAULT_MAX_DEPTH
    uniform_pair_spacing: bool = False


def encode_to_string(value: object, options: EncoderOptions | None = None) -> str:
    """Encode ``value`` with the given options and return the literal text.

    Args:
        value (object): Any supported Python object or value shape member.
        options (EncoderOptions | None): Encoder settings; compact defaults when None.

    Returns:
        str: The Ruby literal text.

    Raises:
        EncodeError: If the value (or anything nested in it) cannot be encoded.
    """
    opts: EncoderOptions = options or EncoderOptions()
    state = EncodeState(
        indent_enabled=opts.indent_enabled,
        indent=opts.indent,
        prefix=opts.prefix,
    )
    encoder = ValueEncoder(
        state,
        max_depth=opts.max_depth,
        uniform_pair_spacing=opts.uniform_pair_spacing,
    )
    encoder.encode(value)
    return state.getvalue()


def marshal(
    value: object,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    uniform_pair_spacing: bool = False,
) -> bytes:
    """Encode ``value`` in compact mode and return UTF-8 bytes."""
    options = EncoderOptions(max_depth=max_depth, uniform_pair_spacing=uniform_pair_spacing)
    return encode_to_string(value, options).encode("utf-8")


def marshal_indent(
    value: object,
    prefix: str,
    indent: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    uniform_pair_spacing: bool = False,
) -> bytes:
    """Encode ``value`` in indented mode and return UTF-8 bytes.

    Args:
        value (object): The value to encode.
        prefix (str): Written at the start of every indented line.
        indent (str): Repeated once per nesting level.
        max_depth (int): Maximum nesting depth.
        uniform_pair_spacing (bool): See `EncoderOptions`.

    Returns:
        bytes: The UTF-8 encoded literal.
    """
    options = EncoderOptions(
        indent_enabled=True,
        indent=indent,
        prefix=prefix,
        max_depth=max_depth,
        uniform_pair_spacing=uniform_pair_spacing,
    )
    return encode_to_string(value, options).encode("utf-8")


def dumps(
    value: object,
    *,
    indent: str | None = None,
    prefix: str = "",
    max_depth: int = DEFAULT_MAX_DEPTH,
    uniform_pair_spacing: bool = False,
) -> str:
    """Return the Ruby literal for ``value`` as text.

    Indented mode is selected by passing an ``indent`` unit (``""`` still indents,
    with line breaks only); ``None`` selects compact mode.
    """
    options = EncoderOptions(
        indent_enabled=indent is not None,
        indent=indent or "",
        prefix=prefix,
        max_depth=max_depth,
        uniform_pair_spacing=uniform_pair_spacing,
    )
    return encode_to_string(value, options)
