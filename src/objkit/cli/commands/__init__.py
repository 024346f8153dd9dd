# topmark:header:start
#
#   project      : ObjKit
#   file         : __init__.py
#   file_relpath : src/objkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit CLI subcommands (one module per command)."""
