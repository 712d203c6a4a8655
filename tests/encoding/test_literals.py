# topmark:header:start
#
#   project      : RubyLit
#   file         : test_literals.py
#   file_relpath : tests/encoding/test_literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Scalar literal rendering: booleans, integers, floats and quoted text."""

from __future__ import annotations

import math

import pytest

from rubylit.encoding.literals import (
    format_bool,
    format_float,
    format_int,
    quote_text,
    to_float32,
)
from rubylit.encoding.values import INT64_MAX, INT64_MIN, UINT64_MAX


def test_format_bool() -> None:
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (-5, "-5"),
        (42, "42"),
        (INT64_MIN, "-9223372036854775808"),
        (INT64_MAX, "9223372036854775807"),
        (UINT64_MAX, "18446744073709551615"),
    ],
)
def test_format_int(value: int, expected: str) -> None:
    assert format_int(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3.14159265, "3.14159265"),
        (1.5, "1.5"),
        (1.0, "1"),
        (0.0, "0"),
        (-0.0, "-0"),
        (-2.25, "-2.25"),
        (0.1, "0.1"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
    ],
)
def test_format_float64_is_shortest_positional(value: float, expected: str) -> None:
    """Doubles use the shortest round-trip digits and never exponent form."""
    assert format_float(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3.14159265, "3.1415927"),
        (0.1, "0.1"),
        (1.0, "1"),
        (16777217.0, "16777216"),
    ],
)
def test_format_float32_uses_single_precision_digits(value: float, expected: str) -> None:
    assert format_float(value, bits=32) == expected


def test_format_float_non_finite_values() -> None:
    assert format_float(math.nan) == "Float::NAN"
    assert format_float(math.inf) == "Float::INFINITY"
    assert format_float(-math.inf) == "-Float::INFINITY"


def test_to_float32_overflows_to_infinity() -> None:
    assert to_float32(1e39) == math.inf
    assert to_float32(-1e39) == -math.inf
    assert format_float(1e39, bits=32) == "Float::INFINITY"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", "''"),
        ("plain", "'plain'"),
        ("it's", "'it\\'s'"),
        ("back\\slash", "'back\\slash'"),
        ("line\nbreak", "'line\nbreak'"),
        ("héllo ✓", "'héllo ✓'"),
    ],
)
def test_quote_text_escapes_only_single_quotes(value: str, expected: str) -> None:
    assert quote_text(value) == expected
