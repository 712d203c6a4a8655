# topmark:header:start
#
#   project      : RubyLit
#   file         : values.py
#   file_relpath : src/rubylit/encoding/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed set of value shapes understood by the encoder.

Every value the encoder emits is first normalized into one of the members below
(see [`rubylit.encoding.introspection.classify`][]). Scalar members carry their
payload; composite members carry their children *unclassified* so that nesting is
resolved lazily, one level per dispatch.

Callers may also build these members directly, e.g. to force 32-bit float semantics
(`Float(3.14159265, bits=32)`) or to spell out a nullable reference.

Example:
    ```python
    from rubylit.encoding.values import Float, Mapping, Text

    value = Mapping(items=((Text("pi"), Float(3.14159265, bits=32)),))
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Final, Union

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT64_MAX: Final[int] = 2**64 - 1

# Resolved field name that always skips a record field.
SKIP_FIELD_NAME: Final[str] = "-"


class Shape(str, Enum):
    """Runtime category of a value, used to select an emission routine.

    Attributes:
        INVALID: Absent value, rendered as ``nil``.
        BOOL: ``true`` / ``false``.
        SIGNED_INT: 64-bit signed integer.
        UNSIGNED_INT: 64-bit unsigned integer.
        FLOAT: 32- or 64-bit floating point number.
        TEXT: Single-quoted string.
        REFERENCE: Nullable wrapper, transparent when set.
        RECORD: Named fields, rendered as a hash.
        MAPPING: Unordered key/value pairs, rendered as a hash.
        SEQUENCE: Ordered items, rendered as an array.
    """

    INVALID = "invalid"
    BOOL = "bool"
    SIGNED_INT = "signed_int"
    UNSIGNED_INT = "unsigned_int"
    FLOAT = "float"
    TEXT = "text"
    REFERENCE = "reference"
    RECORD = "record"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True, slots=True)
class Nil:
    """The absent value."""

    shape: ClassVar[Shape] = Shape.INVALID


@dataclass(frozen=True, slots=True)
class Bool:
    """A boolean."""

    value: bool

    shape: ClassVar[Shape] = Shape.BOOL


@dataclass(frozen=True, slots=True)
class SignedInt:
    """A signed integer within the 64-bit range."""

    value: int

    shape: ClassVar[Shape] = Shape.SIGNED_INT

    def __post_init__(self) -> None:
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"{self.value} does not fit in a signed 64-bit integer")


@dataclass(frozen=True, slots=True)
class UnsignedInt:
    """An unsigned integer within the 64-bit range."""

    value: int

    shape: ClassVar[Shape] = Shape.UNSIGNED_INT

    def __post_init__(self) -> None:
        if not 0 <= self.value <= UINT64_MAX:
            raise ValueError(f"{self.value} does not fit in an unsigned 64-bit integer")


@dataclass(frozen=True, slots=True)
class Float:
    """A floating point number with an explicit bit width (32 or 64)."""

    value: float
    bits: int = 64

    shape: ClassVar[Shape] = Shape.FLOAT

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError(f"Unsupported float width: {self.bits} (expected 32 or 64)")


@dataclass(frozen=True, slots=True)
class Text:
    """A string."""

    value: str

    shape: ClassVar[Shape] = Shape.TEXT


@dataclass(frozen=True, slots=True)
class Reference:
    """A nullable reference; ``target=None`` means the reference is absent."""

    target: object = None

    shape: ClassVar[Shape] = Shape.REFERENCE

    @property
    def is_null(self) -> bool:
        """Whether the reference points at nothing."""
        return self.target is None


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """One field of a record, as reported by the metadata provider.

    Attributes:
        name (str): Declared field identifier.
        value (object): Field value (unclassified).
        override_name (str | None): Output name from the field tag, if any.
        omit_if_zero (bool): Skip the field when its value is zero/empty.
        skip (bool): Always skip the field.
        is_exported (bool): Whether the field is public; private fields are never emitted.
        is_zero (bool): Whether the value is its type's zero/empty value.
    """

    name: str
    value: object
    override_name: str | None = None
    omit_if_zero: bool = False
    skip: bool = False
    is_exported: bool = True
    is_zero: bool = False

    @property
    def resolved_name(self) -> str:
        """Output key: the override name when present and non-empty, else the declared name."""
        return self.override_name or self.name

    @property
    def is_emitted(self) -> bool:
        """Whether the field appears in the encoded record."""
        if not self.is_exported or self.skip:
            return False
        if self.resolved_name == SKIP_FIELD_NAME:
            return False
        return not (self.omit_if_zero and self.is_zero)


@dataclass(frozen=True, slots=True)
class Record:
    """A composite with a fixed, ordered set of named fields."""

    fields: tuple[FieldDescriptor, ...]
    type_name: str = "record"

    shape: ClassVar[Shape] = Shape.RECORD

    def emitted_fields(self) -> tuple[FieldDescriptor, ...]:
        """Return the fields that survive export/skip/omit rules, in declared order."""
        return tuple(f for f in self.fields if f.is_emitted)


@dataclass(frozen=True, slots=True)
class Mapping:
    """Key/value pairs in their native enumeration order."""

    items: tuple[tuple[object, object], ...]

    shape: ClassVar[Shape] = Shape.MAPPING


@dataclass(frozen=True, slots=True)
class Sequence:
    """Ordered items."""

    items: tuple[object, ...]

    shape: ClassVar[Shape] = Shape.SEQUENCE


Value = Union[Nil, Bool, SignedInt, UnsignedInt, Float, Text, Reference, Record, Mapping, Sequence]

VALUE_TYPES: Final[tuple[type, ...]] = (
    Nil,
    Bool,
    SignedInt,
    UnsignedInt,
    Float,
    Text,
    Reference,
    Record,
    Mapping,
    Sequence,
)

NIL: Final[Nil] = Nil()


def float32(value: float) -> Float:
    """Return a `Float` with 32-bit round-trip semantics."""
    return Float(value, bits=32)
