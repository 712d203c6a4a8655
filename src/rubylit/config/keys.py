# topmark:header:start
#
#   project      : RubyLit
#   file         : keys.py
#   file_relpath : src/rubylit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for RubyLit configuration.

These names are the external configuration API as it appears in ``rubylit.toml``
and in ``[tool.rubylit]`` inside ``pyproject.toml``. Renaming or removing a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by RubyLit configuration."""

    # [encoder]
    SECTION_ENCODER: Final[str] = "encoder"

    KEY_INDENT: Final[str] = "indent"
    KEY_INDENT_UNIT: Final[str] = "indent_unit"
    KEY_PREFIX: Final[str] = "prefix"
    KEY_MAX_DEPTH: Final[str] = "max_depth"
    KEY_UNIFORM_PAIR_SPACING: Final[str] = "uniform_pair_spacing"

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({SECTION_ENCODER})

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_ENCODER: frozenset(
            {
                KEY_INDENT,
                KEY_INDENT_UNIT,
                KEY_PREFIX,
                KEY_MAX_DEPTH,
                KEY_UNIFORM_PAIR_SPACING,
            }
        ),
    }
