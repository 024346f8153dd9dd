# topmark:header:start
#
#   project      : ObjKit
#   file         : __init__.py
#   file_relpath : src/objkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared across ObjKit (errors, enums, formats, diagnostics).

Modules in this package are UI-agnostic: they import neither Click nor the console
layer, so the library API and the CLI can both depend on them.
"""

from __future__ import annotations
