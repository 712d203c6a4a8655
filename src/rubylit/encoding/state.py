# topmark:header:start
#
#   project      : RubyLit
#   file         : state.py
#   file_relpath : src/rubylit/encoding/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output buffer and indentation state for one encode call.

`EncodeState` holds no encoding logic. It is owned by exactly one in-flight encode
call and must not be shared; create a fresh instance per call (or `reset()` it).
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class EncodeState:
    """Append-only text buffer plus indentation configuration.

    Args:
        indent_enabled (bool): Whether line breaks and indentation are emitted.
        indent (str): Unit repeated once per nesting level.
        prefix (str): Written at the start of every indented line, before the units.

    Attributes:
        depth (int): Current nesting depth (never negative).
    """

    def __init__(
        self,
        *,
        indent_enabled: bool = False,
        indent: str = "",
        prefix: str = "",
    ) -> None:
        self.indent_enabled = indent_enabled
        self.indent = indent
        self.prefix = prefix
        self.depth = 0
        self._parts: list[str] = []

    def write_raw(self, text: str) -> None:
        """Append ``text`` without indentation."""
        self._parts.append(text)

    def write_indented(self, text: str) -> None:
        """Append the current indentation prefix (when enabled), then ``text``."""
        if self.indent_enabled:
            self._parts.append(self.current_indent_prefix())
        self._parts.append(text)

    def enter_level(self) -> None:
        """Increase the nesting depth by one."""
        self.depth += 1

    def leave_level(self) -> None:
        """Decrease the nesting depth by one."""
        if self.depth == 0:
            raise RuntimeError("leave_level() called without a matching enter_level()")
        self.depth -= 1

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Enter one nesting level for the duration of the block.

        The depth is restored on every exit path, including exceptions.
        """
        self.enter_level()
        try:
            yield
        finally:
            self.leave_level()

    def current_indent_prefix(self) -> str:
        """Return ``prefix + indent * depth``, or an empty string when indentation is off."""
        if not self.indent_enabled:
            return ""
        return self.prefix + self.indent * self.depth

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def reset(self) -> None:
        """Discard the buffer and return to depth 0."""
        self._parts.clear()
        self.depth = 0
