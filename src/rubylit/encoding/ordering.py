# topmark:header:start
#
#   project      : RubyLit
#   file         : ordering.py
#   file_relpath : src/rubylit/encoding/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Best-effort deterministic ordering of mapping entries.

Ordering is a two-phase operation:

1. Every key is stringified with `stringify_key` (pure, no side effects).
2. Only if *all* keys stringify, the entries are sorted by that text. Otherwise the
   entries are returned unchanged, in the mapping's native enumeration order.

The fallback is intentional: mappings keyed by records, sequences or other
non-scalar values keep their insertion order rather than failing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rubylit.config.logging import get_logger
from rubylit.encoding.literals import format_bool, format_float, format_int
from rubylit.encoding.values import Bool, Float, Nil, SignedInt, Text, UnsignedInt

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rubylit.config.logging import RubylitLogger

logger: RubylitLogger = get_logger(__name__)


def stringify_key(key: object) -> str | None:
    """Return the canonical text of a scalar key, or None when it has none.

    Args:
        key (object): A mapping key (host object or value shape member).

    Returns:
        str | None: Text for strings, booleans, integers, floats, ``None`` (empty text)
            and UTF-8 decodable bytes; ``None`` for anything else.
    """
    if key is None or isinstance(key, Nil):
        return ""
    if isinstance(key, (str, Text)):
        return key if isinstance(key, str) else key.value
    if isinstance(key, (bool, Bool)):
        return format_bool(key if isinstance(key, bool) else key.value)
    if isinstance(key, int):
        return format_int(key)
    if isinstance(key, (SignedInt, UnsignedInt)):
        return format_int(key.value)
    if isinstance(key, float):
        return format_float(key)
    if isinstance(key, Float):
        return format_float(key.value, key.bits)
    if isinstance(key, (bytes, bytearray)):
        try:
            return bytes(key).decode("utf-8")
        except UnicodeDecodeError:
            return None
    return None


def order_pairs(pairs: Sequence[tuple[object, object]]) -> list[tuple[object, object]]:
    """Return mapping entries sorted by stringified key when every key stringifies.

    Args:
        pairs (Sequence[tuple[object, object]]): Entries in native enumeration order.

    Returns:
        list[tuple[object, object]]: Entries in lexical key order, or in their original
            order when at least one key cannot be stringified.
    """
    keyed: list[tuple[str, tuple[object, object]]] = []
    for pair in pairs:
        text: str | None = stringify_key(pair[0])
        if text is None:
            logger.debug(
                "Key %r cannot be stringified; keeping native order for %d entries",
                pair[0],
                len(pairs),
            )
            return list(pairs)
        keyed.append((text, pair))

    keyed.sort(key=lambda item: item[0])
    return [pair for _text, pair in keyed]
