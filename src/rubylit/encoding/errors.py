# topmark:header:start
#
#   project      : RubyLit
#   file         : errors.py
#   file_relpath : src/rubylit/encoding/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error types raised while encoding values to Ruby literals.

All errors are fatal for the enclosing encode call: the first one raised aborts the
remaining entries of every enclosing composite and propagates to the caller unchanged.
Whatever was written to the output buffer up to that point is undefined and should
be discarded.
"""

from __future__ import annotations


class EncodeError(ValueError):
    """Base exception for all encoding errors."""


class UnsupportedShapeError(EncodeError):
    """Raised when a value has no registered emission routine.

    Attributes:
        shape (str): Identity of the offending shape (a `Shape` value or a host type name).
        value (object): The value that could not be encoded.
    """

    def __init__(self, shape: str, value: object = None, reason: str | None = None) -> None:
        self.shape = shape
        self.value = value
        msg: str = f"Unsupported type '{shape}', cannot encode"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class CyclicReferenceError(EncodeError):
    """Raised when a composite value contains itself."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Circular reference detected while encoding '{type_name}'")


class MaxDepthExceededError(EncodeError):
    """Raised when nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Maximum nesting depth of {max_depth} exceeded")
