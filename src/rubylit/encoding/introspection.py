# topmark:header:start
#
#   project      : RubyLit
#   file         : introspection.py
#   file_relpath : src/rubylit/encoding/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host object adapter: classify Python objects into encoder value shapes.

This module is the only place that knows about Python-specific types. It exposes:

- `classify(obj)`: normalize *one level* of a Python object into a member of
  [`rubylit.encoding.values`][]; children of composites stay unclassified.
- `describe_fields(obj)`: the record metadata provider. For dataclass and
  `NamedTuple` instances it yields one `FieldDescriptor` per declared field, in
  declaration order.
- `is_zero(obj)`: zero/empty detection used by the ``omitempty`` field option.

Field tags:
    Dataclass fields are tagged through their metadata under the ``"ruby"`` key, using
    a comma separated string: the first part is the output name (empty keeps the
    declared name), the remaining parts are options.

    ```python
    @dataclass
    class Item:
        name: str
        count: int = field(default=0, metadata={"ruby": "count"})
        note: str = field(default="", metadata={"ruby": ",omitempty"})
        secret: str = field(default="", metadata={"ruby": "-"})
        _cache: dict = field(default_factory=dict)  # private: never emitted
    ```
"""

from __future__ import annotations

import ctypes
import dataclasses
import weakref
from collections import abc
from typing import TYPE_CHECKING, Any, Callable, Final

from rubylit.constants import DEFAULT_MAX_DEPTH
from rubylit.encoding.errors import MaxDepthExceededError, UnsupportedShapeError
from rubylit.encoding.values import (
    INT64_MAX,
    INT64_MIN,
    NIL,
    SKIP_FIELD_NAME,
    UINT64_MAX,
    VALUE_TYPES,
    Bool,
    FieldDescriptor,
    Float,
    Mapping,
    Nil,
    Record,
    Reference,
    Sequence,
    SignedInt,
    Text,
    UnsignedInt,
)

if TYPE_CHECKING:
    from rubylit.encoding.values import Value

# Metadata key holding the field tag on dataclass fields.
TAG_KEY: Final[str] = "ruby"

# Tag option: omit the field when its value is zero/empty.
OPT_OMITEMPTY: Final[str] = "omitempty"

_CTYPE_FACTORIES: Final[dict[type, Callable[[Any], Value]]] = {
    ctypes.c_bool: Bool,
    ctypes.c_byte: SignedInt,
    ctypes.c_short: SignedInt,
    ctypes.c_int: SignedInt,
    ctypes.c_long: SignedInt,
    ctypes.c_longlong: SignedInt,
    ctypes.c_ubyte: UnsignedInt,
    ctypes.c_ushort: UnsignedInt,
    ctypes.c_uint: UnsignedInt,
    ctypes.c_ulong: UnsignedInt,
    ctypes.c_ulonglong: UnsignedInt,
    ctypes.c_float: lambda v: Float(v, bits=32),
    ctypes.c_double: lambda v: Float(v, bits=64),
}


def parse_tag(tag: str | None) -> tuple[str | None, frozenset[str]]:
    """Split a field tag into its override name and option set.

    Args:
        tag (str | None): Tag text such as ``"count,omitempty"``.

    Returns:
        tuple[str | None, frozenset[str]]: The override name (``None`` when empty or
            absent) and the set of options.
    """
    if not tag:
        return None, frozenset()
    name, *options = tag.split(",")
    return (name or None), frozenset(opt.strip() for opt in options if opt.strip())


def is_record(obj: object) -> bool:
    """Return True for dataclass and `NamedTuple` *instances*."""
    if isinstance(obj, type):
        return False
    if dataclasses.is_dataclass(obj):
        return True
    return isinstance(obj, tuple) and hasattr(type(obj), "_fields")


def _record_items(obj: object) -> list[tuple[str, object, str | None]]:
    """Return ``(declared name, value, tag)`` for each field of a record instance.

    A dataclass field that was never assigned (``field(init=False)`` without a
    default) reads as ``None``.
    """
    if dataclasses.is_dataclass(obj):
        return [
            (f.name, getattr(obj, f.name, None), f.metadata.get(TAG_KEY))
            for f in dataclasses.fields(obj)
        ]
    names: tuple[str, ...] = getattr(type(obj), "_fields")
    return [(name, getattr(obj, name), None) for name in names]


def describe_fields(
    obj: object,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0,
) -> tuple[FieldDescriptor, ...]:
    """Return the field descriptors of a record instance in declaration order.

    Args:
        obj (object): A dataclass or `NamedTuple` instance.
        max_depth (int): Nesting limit applied while checking ``omitempty`` fields.
        depth (int): Nesting level of ``obj`` itself.

    Returns:
        tuple[FieldDescriptor, ...]: One descriptor per declared field, including
            fields that will not be emitted (unexported, skipped, omitted when zero).

    Raises:
        UnsupportedShapeError: If ``obj`` is not a record instance.
        MaxDepthExceededError: If an ``omitempty`` field nests records beyond ``max_depth``.
    """
    if not is_record(obj):
        raise UnsupportedShapeError(type(obj).__name__, obj, "not a record instance")

    descriptors: list[FieldDescriptor] = []
    for name, value, tag in _record_items(obj):
        override, options = parse_tag(tag)
        omit_if_zero: bool = OPT_OMITEMPTY in options
        zero: bool = False
        if omit_if_zero:
            zero = is_zero(value, max_depth=max_depth, depth=depth + 1)
        descriptors.append(
            FieldDescriptor(
                name=name,
                value=value,
                override_name=override,
                omit_if_zero=omit_if_zero,
                skip=override == SKIP_FIELD_NAME,
                is_exported=not name.startswith("_"),
                is_zero=zero,
            )
        )
    return tuple(descriptors)


def is_zero(
    obj: object,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0,
    _seen: set[int] | None = None,
) -> bool:
    """Return True when ``obj`` is its type's zero/empty value.

    Zero values are ``None``, ``False``, numeric zero, the empty string, empty
    containers, null references, and records whose fields are all zero.

    Args:
        obj (object): Host object or value shape member.
        max_depth (int): Records nested deeper than this raise instead of recursing.
        depth (int): Nesting level of ``obj``.
        _seen (set[int] | None): Records already being inspected (cycle guard).

    Returns:
        bool: Whether the value is zero.

    Raises:
        MaxDepthExceededError: If nested records reach ``max_depth``.
    """
    if obj is None or isinstance(obj, Nil):
        return True
    if isinstance(obj, (Bool, SignedInt, UnsignedInt, Float, Text)):
        return not obj.value
    if isinstance(obj, Reference):
        return obj.is_null
    if isinstance(obj, (Mapping, Sequence)):
        return not obj.items
    if isinstance(obj, (bool, int, float, str, bytes, bytearray)):
        return not obj
    if type(obj) in _CTYPE_FACTORIES:
        return not getattr(obj, "value")
    if isinstance(obj, weakref.ReferenceType):
        return obj() is None

    if isinstance(obj, Record) or is_record(obj):
        if depth >= max_depth:
            raise MaxDepthExceededError(max_depth)
        seen: set[int] = _seen if _seen is not None else set()
        if id(obj) in seen:
            # A record reachable from itself holds a non-null reference.
            return False
        seen.add(id(obj))
        values: list[object] = (
            [f.value for f in obj.fields]
            if isinstance(obj, Record)
            else [value for _name, value, _tag in _record_items(obj)]
        )
        try:
            return all(
                is_zero(value, max_depth=max_depth, depth=depth + 1, _seen=seen)
                for value in values
            )
        finally:
            seen.discard(id(obj))

    if isinstance(obj, (abc.Mapping, list, tuple)):
        return len(obj) == 0
    return False


def _classify_int(value: int) -> Value:
    if INT64_MIN <= value <= INT64_MAX:
        return SignedInt(value)
    if 0 <= value <= UINT64_MAX:
        return UnsignedInt(value)
    raise UnsupportedShapeError(type(value).__name__, value, "integer exceeds 64 bits")


def classify(obj: object, *, max_depth: int = DEFAULT_MAX_DEPTH, depth: int = 0) -> Value:
    """Normalize one level of ``obj`` into a value shape member.

    Args:
        obj (object): Any host object, or an existing value shape member (returned as is).
        max_depth (int): Nesting limit for the ``omitempty`` checks of a record.
        depth (int): Nesting level of ``obj`` in the value being encoded.

    Returns:
        Value: The matching shape member. Children of composites are left unclassified.

    Raises:
        UnsupportedShapeError: If ``obj`` has no matching shape (sets, complex numbers,
            classes, arbitrary objects, integers beyond 64 bits).
        MaxDepthExceededError: If a record's ``omitempty`` check nests past ``max_depth``.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj
    if obj is None:
        return NIL
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return _classify_int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return Text(obj)

    ctype_factory: Callable[[Any], Value] | None = _CTYPE_FACTORIES.get(type(obj))
    if ctype_factory is not None:
        return ctype_factory(getattr(obj, "value"))

    if isinstance(obj, (bytes, bytearray)):
        return Sequence(tuple(UnsignedInt(b) for b in obj))
    if isinstance(obj, weakref.ReferenceType):
        return Reference(obj())
    if is_record(obj):
        return Record(
            describe_fields(obj, max_depth=max_depth, depth=depth),
            type_name=type(obj).__name__,
        )
    if isinstance(obj, abc.Mapping):
        return Mapping(tuple(obj.items()))
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(obj))

    raise UnsupportedShapeError(type(obj).__name__, obj)
