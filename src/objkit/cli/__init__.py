# topmark:header:start
#
#   project      : ObjKit
#   file         : __init__.py
#   file_relpath : src/objkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for ObjKit.

The entry point is :func:`objkit.cli.main.cli`, installed as the ``objkit``
console script.
"""

from __future__ import annotations
