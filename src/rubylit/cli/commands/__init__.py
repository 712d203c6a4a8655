# topmark:header:start
#
#   project      : RubyLit
#   file         : __init__.py
#   file_relpath : src/rubylit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RubyLit CLI subcommands."""
