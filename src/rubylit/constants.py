# topmark:header:start
#
#   project      : RubyLit
#   file         : constants.py
#   file_relpath : src/rubylit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RubyLit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

RUBYLIT_VERSION: str = get_version("rubylit")

# Environment variable selecting the internal log level (e.g. "TRACE", "DEBUG", "10").
LOG_LEVEL_ENV_VAR: Final[str] = "RUBYLIT_LOG_LEVEL"

# Configuration file names, in discovery order within one directory.
CONFIG_FILE_NAME: Final[str] = "rubylit.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

DEFAULT_INDENT_UNIT: Final[str] = "  "
DEFAULT_PREFIX: Final[str] = ""

# Each nesting level costs several interpreter frames; stay well below the
# default recursion limit.
DEFAULT_MAX_DEPTH: Final[int] = 128
