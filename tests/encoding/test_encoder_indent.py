# topmark:header:start
#
#   project      : RubyLit
#   file         : test_encoder_indent.py
#   file_relpath : tests/encoding/test_encoder_indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indented encoding: one entry per line, closing brackets on their own line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rubylit.api import dumps, marshal_indent


@dataclass
class Inner:
    value: int = 0


@dataclass
class Config:
    name: str
    ports: list[int]
    labels: dict[str, str]
    inner: Inner
    extra: dict[str, Any] = field(default_factory=dict, metadata={"ruby": "Value"})


def test_nested_mapping_and_sequence() -> None:
    assert dumps({"b": [1, 2], "a": 1}, indent="  ") == (
        "{\n"
        "  'a' => 1,\n"
        "  'b' => [\n"
        "    1,\n"
        "    2\n"
        "  ]\n"
        "}"
    )


def test_record_uses_spaced_separator_when_indenting() -> None:
    value = Config(
        name="web",
        ports=[80, 443],
        labels={"tier": "front", "env": "prod"},
        inner=Inner(1),
    )
    assert dumps(value, indent="  ") == (
        "{\n"
        "  'name' => 'web',\n"
        "  'ports' => [\n"
        "    80,\n"
        "    443\n"
        "  ],\n"
        "  'labels' => {\n"
        "    'env' => 'prod',\n"
        "    'tier' => 'front'\n"
        "  },\n"
        "  'inner' => {\n"
        "    'value' => 1\n"
        "  },\n"
        "  'Value' => {}\n"
        "}"
    )


def test_empty_composites_stay_on_one_line_at_any_depth() -> None:
    assert dumps({"Value": {}}, indent="  ") == "{\n  'Value' => {}\n}"
    assert dumps([[], {}], indent="  ") == "[\n  [],\n  {}\n]"
    assert dumps([], indent="  ") == "[]"


def test_keys_are_indented_once() -> None:
    """A nested key starts right after the entry indentation, never indented twice."""
    out: str = dumps({"outer": {"inner": 1}}, indent="    ")
    assert out.splitlines() == [
        "{",
        "    'outer' => {",
        "        'inner' => 1",
        "    }",
        "}",
    ]


def test_sequence_of_records() -> None:
    assert dumps([Inner(1), Inner(2)], indent="  ") == (
        "[\n  {\n    'value' => 1\n  },\n  {\n    'value' => 2\n  }\n]"
    )


def test_prefix_is_written_on_every_continuation_line() -> None:
    assert marshal_indent([1, [2]], ">", "\t") == b"[\n>\t1,\n>\t[\n>\t\t2\n>\t]\n>]"


def test_empty_indent_unit_still_breaks_lines() -> None:
    assert dumps([1, 2], indent="") == "[\n1,\n2\n]"


def test_top_level_scalar_is_not_indented() -> None:
    assert dumps(5, indent="  ", prefix="# ") == "5"
    assert dumps("x", indent="  ") == "'x'"


def test_uniform_pair_spacing_is_a_no_op_when_indenting() -> None:
    value: dict[str, Any] = {"a": 1, "b": Inner(2)}
    assert dumps(value, indent="  ", uniform_pair_spacing=True) == dumps(value, indent="  ")
