# topmark:header:start
#
#   project      : RubyLit
#   file         : encoder.py
#   file_relpath : src/rubylit/encoding/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive value encoder producing Ruby hash/array/scalar literal text.

The encoder classifies each value by shape (see [`rubylit.encoding.values.Shape`][]),
looks up the matching emission routine in its dispatch table, and writes straight into
an [`rubylit.encoding.state.EncodeState`][]. Composite routines recurse through
`ValueEncoder.encode` for every nested value.

Composite layout (records, mappings and sequences share it):

- empty composites render as ``{}`` / ``[]`` in every mode;
- compact mode separates entries with ``", "``;
- indented mode puts each entry on its own line, indented one level deeper than the
  enclosing composite, and closes the bracket on a line of its own.

Key/value separators:
    Mapping entries always use ``" => "``. Record entries use ``" => "`` when indenting
    and ``"=>"`` in compact mode. Pass ``uniform_pair_spacing=True`` to make mapping
    entries follow the record rule as well.

Hardening:
    Nesting is bounded by ``max_depth`` (`MaxDepthExceededError`) and a composite that
    contains itself raises `CyclicReferenceError` instead of exhausting the stack.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Final, TypeVar

from rubylit.config.logging import get_logger
from rubylit.constants import DEFAULT_MAX_DEPTH
from rubylit.encoding.errors import (
    CyclicReferenceError,
    MaxDepthExceededError,
    UnsupportedShapeError,
)
from rubylit.encoding.introspection import classify
from rubylit.encoding.literals import (
    NIL_LITERAL,
    format_bool,
    format_float,
    format_int,
    quote_text,
)
from rubylit.encoding.ordering import order_pairs
from rubylit.encoding.values import Shape, Text

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from rubylit.config.logging import RubylitLogger
    from rubylit.encoding.state import EncodeState
    from rubylit.encoding.values import (
        Bool,
        FieldDescriptor,
        Float,
        Mapping,
        Nil,
        Record,
        Reference,
        SignedInt,
        UnsignedInt,
        Value,
    )
    from rubylit.encoding.values import Sequence as SequenceValue

logger: RubylitLogger = get_logger(__name__)

T = TypeVar("T")

SPACED_PAIR_SEPARATOR: Final[str] = " => "
TIGHT_PAIR_SEPARATOR: Final[str] = "=>"

# Shapes that recurse; these count towards max_depth and are tracked for cycles.
NESTING_SHAPES: Final[frozenset[Shape]] = frozenset(
    {Shape.REFERENCE, Shape.RECORD, Shape.MAPPING, Shape.SEQUENCE}
)


class ValueEncoder:
    """Dispatch-by-shape encoder writing into a single `EncodeState`.

    Args:
        state (EncodeState): Output buffer and indentation settings for this call.
        max_depth (int): Maximum number of nested composites/references on one path.
        uniform_pair_spacing (bool): Make mapping entries use the record separator rule.
    """

    def __init__(
        self,
        state: EncodeState,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        uniform_pair_spacing: bool = False,
    ) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.state = state
        self.max_depth = max_depth
        self.uniform_pair_spacing = uniform_pair_spacing
        self._nesting: int = 0
        # id() -> object for composites on the active path; holding the object keeps
        # its id from being reused while it is tracked.
        self._active: dict[int, object] = {}
        self._routines: dict[Shape, Callable[[Any], None]] = {
            Shape.INVALID: self._encode_nil,
            Shape.BOOL: self._encode_bool,
            Shape.SIGNED_INT: self._encode_int,
            Shape.UNSIGNED_INT: self._encode_int,
            Shape.FLOAT: self._encode_float,
            Shape.TEXT: self._encode_text,
            Shape.REFERENCE: self._encode_reference,
            Shape.RECORD: self._encode_record,
            Shape.MAPPING: self._encode_mapping,
            Shape.SEQUENCE: self._encode_sequence,
        }

    def encode(self, obj: object) -> None:
        """Encode ``obj`` (and everything it contains) into the state buffer.

        Args:
            obj (object): Host object or value shape member.

        Raises:
            UnsupportedShapeError: If a value has no emission routine.
            CyclicReferenceError: If a composite contains itself.
            MaxDepthExceededError: If nesting exceeds ``max_depth``.
        """
        value: Value = classify(obj, max_depth=self.max_depth, depth=self._nesting)
        routine: Callable[[Any], None] | None = self._routines.get(value.shape)
        if routine is None:
            raise UnsupportedShapeError(str(value.shape.value), obj)

        logger.trace("Encoding %s at depth %d", value.shape.value, self._nesting)
        if value.shape in NESTING_SHAPES:
            with self._guard(obj):
                routine(value)
        else:
            routine(value)

    @contextmanager
    def _guard(self, obj: object) -> Iterator[None]:
        """Track ``obj`` on the active path and enforce the depth limit."""
        if self._nesting >= self.max_depth:
            raise MaxDepthExceededError(self.max_depth)
        key: int = id(obj)
        if key in self._active:
            raise CyclicReferenceError(type(obj).__name__)
        self._active[key] = obj
        self._nesting += 1
        try:
            yield
        finally:
            self._nesting -= 1
            del self._active[key]

    # --- scalars ---

    def _encode_nil(self, _value: Nil) -> None:
        self.state.write_raw(NIL_LITERAL)

    def _encode_bool(self, value: Bool) -> None:
        self.state.write_raw(format_bool(value.value))

    def _encode_int(self, value: SignedInt | UnsignedInt) -> None:
        self.state.write_raw(format_int(value.value))

    def _encode_float(self, value: Float) -> None:
        self.state.write_raw(format_float(value.value, value.bits))

    def _encode_text(self, value: Text) -> None:
        self.state.write_raw(quote_text(value.value))

    def _encode_reference(self, value: Reference) -> None:
        if value.is_null:
            self.state.write_raw(NIL_LITERAL)
            return
        self.encode(value.target)

    # --- composites ---

    def _write_composite(
        self,
        opening: str,
        closing: str,
        entries: Sequence[T],
        emit: Callable[[T], None],
    ) -> None:
        """Write a bracketed, separated body; shared by records, mappings and sequences.

        Each entry's own leading line is indented here; the entry emitter never
        indents its first token.
        """
        state: EncodeState = self.state
        state.write_raw(opening)
        if not entries:
            state.write_raw(closing)
            return

        if state.indent_enabled:
            state.write_raw("\n")
        with state.nested():
            last: int = len(entries) - 1
            for i, entry in enumerate(entries):
                state.write_raw(state.current_indent_prefix())
                emit(entry)
                if i < last:
                    state.write_raw(",")
                    if not state.indent_enabled:
                        state.write_raw(" ")
                if state.indent_enabled:
                    state.write_raw("\n")
        state.write_indented(closing)

    def _encode_pair(self, key: object, value: object, separator: str) -> None:
        """Write ``key <separator> value``; both sides use full shape dispatch."""
        self.encode(key)
        self.state.write_raw(separator)
        self.encode(value)

    def _record_separator(self) -> str:
        return SPACED_PAIR_SEPARATOR if self.state.indent_enabled else TIGHT_PAIR_SEPARATOR

    def _mapping_separator(self) -> str:
        if self.uniform_pair_spacing:
            return self._record_separator()
        return SPACED_PAIR_SEPARATOR

    def _encode_record(self, value: Record) -> None:
        fields: tuple[FieldDescriptor, ...] = value.emitted_fields()
        if len(fields) != len(value.fields):
            logger.trace(
                "Record %s: emitting %d of %d fields",
                value.type_name,
                len(fields),
                len(value.fields),
            )
        separator: str = self._record_separator()
        self._write_composite(
            "{",
            "}",
            fields,
            lambda f: self._encode_pair(Text(f.resolved_name), f.value, separator),
        )

    def _encode_mapping(self, value: Mapping) -> None:
        pairs: list[tuple[object, object]] = order_pairs(value.items)
        separator: str = self._mapping_separator()
        self._write_composite(
            "{",
            "}",
            pairs,
            lambda pair: self._encode_pair(pair[0], pair[1], separator),
        )

    def _encode_sequence(self, value: SequenceValue) -> None:
        self._write_composite("[", "]", value.items, self.encode)
