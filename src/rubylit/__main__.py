# topmark:header:start
#
#   project      : RubyLit
#   file         : __main__.py
#   file_relpath : src/rubylit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running RubyLit via ``python -m rubylit``.

Delegates to :func:`rubylit.cli.main.cli`, the same entry point as the ``rubylit``
console script.
"""

from __future__ import annotations

from rubylit.cli.main import cli

if __name__ == "__main__":
    cli()
