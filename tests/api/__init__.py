# topmark:header:start
#
#   project      : RubyLit
#   file         : __init__.py
#   file_relpath : tests/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RubyLit test package."""
