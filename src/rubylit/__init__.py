# topmark:header:start
#
#   project      : RubyLit
#   file         : __init__.py
#   file_relpath : src/rubylit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RubyLit package.

RubyLit renders in-memory Python values (scalars, lists, dicts, dataclasses) as Ruby
hash/array/scalar literal text, in compact or indented form, with deterministic key
ordering. It exposes a small API and a ``rubylit`` CLI.
"""

from __future__ import annotations

from rubylit.api import EncoderOptions, dumps, encode_to_string, marshal, marshal_indent
from rubylit.encoding.errors import (
    CyclicReferenceError,
    EncodeError,
    MaxDepthExceededError,
    UnsupportedShapeError,
)

__all__ = [
    "CyclicReferenceError",
    "EncodeError",
    "EncoderOptions",
    "MaxDepthExceededError",
    "UnsupportedShapeError",
    "dumps",
    "encode_to_string",
    "marshal",
    "marshal_indent",
]
