# topmark:header:start
#
#   project      : Tripwire
#   file         : __init__.py
#   file_relpath : src/tripwire/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 Tripwire contributors
#
# topmark:header:end


"""Tripwire CLI subcommands."""
