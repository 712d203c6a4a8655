# topmark:header:start
#
#   project      : RubyLit
#   file         : cli_types.py
#   file_relpath : src/rubylit/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types and format enums for the RubyLit CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

import click

if TYPE_CHECKING:

    class ParamTypeBase(Protocol):
        """Typed stand-in for `click.ParamType` during type checking."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class InputFormat(str, Enum):
    """Document formats accepted by ``rubylit encode``."""

    JSON = "json"
    TOML = "toml"


class OutputFormat(str, Enum):
    """Output formats for informational commands such as ``rubylit version``.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable, colorless).
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Click parameter type accepting the (case-insensitive) value of an Enum member.

    Args:
        enum_cls (type[E]): The Enum whose string values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name = enum_cls.__name__.lower()
        self._members: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted values, in declaration order."""
        return [str(m.value) for m in self._members.values()]

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the choices in help output, e.g. ``[json|toml]``."""
        return f"[{'|'.join(self.choices)}]"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the member for ``value``; members themselves pass through."""
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self._members.get(str(value).lower())
        if member is None:
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param=param,
                ctx=ctx,
            )
        return member
