# topmark:header:start
#
#   project      : ObjKit
#   file         : __init__.py
#   file_relpath : src/objkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit package.

ObjKit is a small toolkit of in-memory object helpers (copy, merge, compare,
grouping, JSON round-trips) together with a fluent CSS selector builder that
enforces selector part ordering. It exposes both a typed API and a CLI.
"""

from __future__ import annotations
