# topmark:header:start
#
#   project      : ObjKit
#   file         : keys.py
#   file_relpath : src/objkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ObjKit configuration.

These constants are the external configuration API as it appears in
``objkit.toml`` and in ``[tool.objkit]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ObjKit configuration."""

    # [json]
    SECTION_JSON: Final[str] = "json"

    KEY_INDENT: Final[str] = "indent"
    KEY_SORT_KEYS: Final[str] = "sort_keys"

    # [collation]
    SECTION_COLLATION: Final[str] = "collation"

    KEY_LOCALE: Final[str] = "locale"

    ALL_SECTIONS: Final[frozenset[str]] = frozenset({SECTION_JSON, SECTION_COLLATION})
