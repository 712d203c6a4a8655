# topmark:header:start
#
#   project      : RubyLit
#   file         : test_encode_errors.py
#   file_relpath : tests/encoding/test_encode_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Failure modes: unsupported values, cycles and the nesting limit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from rubylit.api import marshal
from rubylit.encoding.encoder import ValueEncoder
from rubylit.encoding.errors import (
    CyclicReferenceError,
    EncodeError,
    MaxDepthExceededError,
    UnsupportedShapeError,
)
from rubylit.encoding.state import EncodeState
from rubylit.encoding.values import Reference


@dataclass
class Node:
    child: Any = None


@dataclass
class Link:
    child: Any = field(default=None, metadata={"ruby": ",omitempty"})


def test_unsupported_top_level_value() -> None:
    with pytest.raises(UnsupportedShapeError, match="Unsupported type 'set', cannot encode"):
        marshal({1, 2})


def test_unsupported_nested_value_aborts_whole_call() -> None:
    with pytest.raises(UnsupportedShapeError) as exc_info:
        marshal({"ok": [1, 2], "bad": [object()]})
    assert exc_info.value.shape == "object"


def test_unsupported_mapping_key() -> None:
    with pytest.raises(UnsupportedShapeError):
        marshal({frozenset({1}): "x"})


def test_integers_beyond_64_bits_are_rejected() -> None:
    with pytest.raises(UnsupportedShapeError, match="exceeds 64 bits"):
        marshal([2**64])


def test_errors_are_value_errors() -> None:
    """Callers can catch every encoding failure as ``EncodeError`` or ``ValueError``."""
    assert issubclass(UnsupportedShapeError, EncodeError)
    assert issubclass(CyclicReferenceError, EncodeError)
    assert issubclass(MaxDepthExceededError, EncodeError)
    assert issubclass(EncodeError, ValueError)


def test_self_containing_list_is_a_cycle() -> None:
    items: list[Any] = [1]
    items.append(items)
    with pytest.raises(CyclicReferenceError, match="'list'"):
        marshal(items)


def test_self_containing_dict_is_a_cycle() -> None:
    table: dict[str, Any] = {}
    table["self"] = table
    with pytest.raises(CyclicReferenceError):
        marshal(table)


def test_record_cycle_through_reference() -> None:
    node = Node()
    node.child = Reference(node)
    with pytest.raises(CyclicReferenceError):
        marshal(node)


def test_max_depth_counts_nested_composites() -> None:
    assert marshal([[[1]]], max_depth=3) == b"[[[1]]]"
    with pytest.raises(MaxDepthExceededError) as exc_info:
        marshal([[[1]]], max_depth=2)
    assert exc_info.value.max_depth == 2


def test_deep_nesting_fails_with_depth_error_not_recursion_error() -> None:
    value: list[Any] = []
    for _ in range(500):
        value = [value]
    with pytest.raises(MaxDepthExceededError):
        marshal(value)


def test_deep_omitempty_chain_fails_with_depth_error() -> None:
    """Zero checks on omitempty fields honor the nesting limit too."""
    node = Link()
    for _ in range(2000):
        node = Link(child=node)
    with pytest.raises(MaxDepthExceededError) as exc_info:
        marshal(node)
    assert exc_info.value.max_depth == 128


def test_omitempty_zero_check_uses_configured_max_depth() -> None:
    chain = Link(child=Link(child=Link()))
    assert marshal(chain, max_depth=3) == b"{}"
    with pytest.raises(MaxDepthExceededError):
        marshal(chain, max_depth=2)


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError, match="max_depth"):
        ValueEncoder(EncodeState(), max_depth=0)


def test_state_depth_is_restored_after_failure() -> None:
    """An encoder can be reused (after a reset) once a call has failed."""
    state = EncodeState(indent_enabled=True, indent="  ")
    encoder = ValueEncoder(state)

    with pytest.raises(UnsupportedShapeError):
        encoder.encode({"a": [[object()]]})
    assert state.depth == 0

    state.reset()
    encoder.encode([1])
    assert state.getvalue() == "[\n  1\n]"
