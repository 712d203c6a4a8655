# topmark:header:start
#
#   project      : RubyLit
#   file         : __init__.py
#   file_relpath : src/rubylit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RubyLit configuration: logging setup, TOML discovery/loading, and the encoder config model.

This package is imported by the encoding core (for logging), so it keeps its
``__init__`` free of imports; use the submodules directly.
"""
