# topmark:header:start
#
#   project      : RubyLit
#   file         : literals.py
#   file_relpath : src/rubylit/encoding/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text renderings of scalar literals.

These helpers are pure: they take a Python scalar and return the Ruby literal text.
They are shared by the value encoder and by map key ordering, so that a key sorts by
the same text it would be rendered with.
"""

from __future__ import annotations

import math
import struct
from decimal import Decimal
from typing import Final

NIL_LITERAL: Final[str] = "nil"
TRUE_LITERAL: Final[str] = "true"
FALSE_LITERAL: Final[str] = "false"

NAN_LITERAL: Final[str] = "Float::NAN"
INFINITY_LITERAL: Final[str] = "Float::INFINITY"

# A float32 never needs more than 9 significant digits to round-trip.
_FLOAT32_MAX_DIGITS: Final[int] = 9


def format_bool(value: bool) -> str:
    """Return ``true`` or ``false``."""
    return TRUE_LITERAL if value else FALSE_LITERAL


def format_int(value: int) -> str:
    """Return the base-10 representation of ``value`` (sign only when negative)."""
    return str(int(value))


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest IEEE 754 single precision number.

    Values beyond the float32 range overflow to a signed infinity, as a narrowing
    conversion does.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _shortest_float32_digits(value: float) -> str:
    """Return the shortest decimal string that reads back as the same float32."""
    for precision in range(1, _FLOAT32_MAX_DIGITS + 1):
        candidate: str = f"{value:.{precision}g}"
        if to_float32(float(candidate)) == value:
            return candidate
    return repr(value)


def _positional(digits: str) -> str:
    """Render a (possibly exponent-form) decimal string positionally.

    Integral values lose their fractional part entirely: ``1.0`` becomes ``1``.
    """
    text: str = format(Decimal(digits), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_float(value: float, bits: int = 64) -> str:
    """Return the shortest round-trip decimal text for ``value`` at the given width.

    Args:
        value (float): The number to render.
        bits (int): 32 for single precision semantics, 64 for double precision.

    Returns:
        str: Positional decimal text (never exponent form), or one of the Ruby constants
            ``Float::NAN``, ``Float::INFINITY``, ``-Float::INFINITY`` for non-finite values.
    """
    if bits == 32:
        value = to_float32(value)
    if math.isnan(value):
        return NAN_LITERAL
    if math.isinf(value):
        return INFINITY_LITERAL if value > 0 else f"-{INFINITY_LITERAL}"

    digits: str = _shortest_float32_digits(value) if bits == 32 else repr(value)
    return _positional(digits)


def quote_text(value: str) -> str:
    """Wrap ``value`` in single quotes, escaping embedded single quotes only."""
    escaped: str = value.replace("'", "\\'")
    return f"'{escaped}'"
