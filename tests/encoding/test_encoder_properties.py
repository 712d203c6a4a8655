# topmark:header:start
#
#   project      : RubyLit
#   file         : test_encoder_properties.py
#   file_relpath : tests/encoding/test_encoder_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for scalar literals: float round-trips and quote escaping."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from rubylit.encoding.literals import format_float, quote_text, to_float32


@given(value=st.floats(allow_nan=False, allow_infinity=False))
def test_float64_text_round_trips(value: float) -> None:
    text: str = format_float(value)
    assert "e" not in text
    assert float(text) == value


@given(value=st.floats(width=32, allow_nan=False, allow_infinity=False))
def test_float32_text_round_trips(value: float) -> None:
    text: str = format_float(value, bits=32)
    assert "e" not in text
    assert to_float32(float(text)) == value


@given(value=st.text())
def test_quoted_text_is_escape_safe(value: str) -> None:
    """Every embedded quote is escaped and the original text is recoverable."""
    quoted: str = quote_text(value)
    assert quoted.startswith("'") and quoted.endswith("'")

    body: str = quoted[1:-1]
    assert all(body[i - 1] == "\\" for i, ch in enumerate(body) if ch == "'")
    assert body.replace("\\'", "'") == value
