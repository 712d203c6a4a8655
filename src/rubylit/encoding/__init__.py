# topmark:header:start
#
#   project      : RubyLit
#   file         : __init__.py
#   file_relpath : src/rubylit/encoding/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ruby literal encoding core.

Modules:
    - `values`: the closed set of value shapes.
    - `introspection`: classification of Python objects into shapes, record metadata.
    - `literals`: scalar literal text (integers, floats, quoted strings).
    - `ordering`: deterministic mapping key ordering.
    - `state`: output buffer and indentation bookkeeping.
    - `encoder`: the recursive, dispatch-by-shape encoder.
"""

from __future__ import annotations

from rubylit.encoding.encoder import ValueEncoder
from rubylit.encoding.errors import (
    CyclicReferenceError,
    EncodeError,
    MaxDepthExceededError,
    UnsupportedShapeError,
)
from rubylit.encoding.state import EncodeState

__all__ = [
    "CyclicReferenceError",
    "EncodeError",
    "EncodeState",
    "MaxDepthExceededError",
    "UnsupportedShapeError",
    "ValueEncoder",
]
