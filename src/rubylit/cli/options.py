# topmark:header:start
#
#   project      : RubyLit
#   file         : options.py
#   file_relpath : src/rubylit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, encoder layout) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from rubylit.cli.errors import RubylitUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The verbosity level: negative when quiet, 0 by default, positive when verbose.

    Raises:
        RubylitUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RubylitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -quiet_count
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then ``FORCE_COLOR`` and ``NO_COLOR``,
    and finally enables color only when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto/always/never) and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def encoder_layout_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the encoder layout options shared by encoding commands.

    Every option defaults to ``None`` so that unset flags do not override values
    coming from configuration files.
    """
    f = click.option(
        "--indent/--compact",
        "indent_enabled",
        default=None,
        help="Pretty-print with one entry per line, or emit everything on one line.",
    )(f)
    f = click.option(
        "--indent-unit",
        "indent_unit",
        type=str,
        default=None,
        help="String repeated once per nesting level (indented mode).",
    )(f)
    f = click.option(
        "--prefix",
        "prefix",
        type=str,
        default=None,
        help="String written at the start of every indented line.",
    )(f)
    f = click.option(
        "--max-depth",
        "max_depth",
        type=click.IntRange(min=1),
        default=None,
        help="Maximum nesting depth before failing.",
    )(f)
    f = click.option(
        "--uniform-pair-spacing/--mapping-pair-spacing",
        "uniform_pair_spacing",
        default=None,
        help="Use the record '=>' spacing rule for mapping entries too.",
    )(f)
    return f


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read settings from this TOML file (rubylit.toml or pyproject.toml).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover rubylit.toml / [tool.rubylit] in the working tree.",
    )(f)
    return f
