# topmark:header:start
#
#   project      : ObjKit
#   file         : categories.py
#   file_relpath : src/objkit/selector/categories.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Selector part categories.

Members are declared in CSS order; a member's position is its rank, so
``ELEMENT < ID < CLASS < ATTR < PSEUDO_CLASS < PSEUDO_ELEMENT``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from objkit.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable


class SelectorCategory(KeyedStrEnum):
    """Kind of a selector part, with its rendering and uniqueness rules.

    Attributes:
        prefix (str): Text rendered before the part's name.
        suffix (str): Text rendered after the part's name.
        singleton (bool): Whether the category may occur at most once per selector.
    """

    prefix: str
    suffix: str
    singleton: bool

    def __new__(
        cls,
        key: str,
        label: str,
        aliases: Iterable[str] = (),
        prefix: str = "",
        suffix: str = "",
        singleton: bool = False,
    ) -> SelectorCategory:
        obj = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        obj.prefix = prefix
        obj.suffix = suffix
        obj.singleton = singleton
        return obj

    ELEMENT = ("element", "element", ("tag", "type"), "", "", True)
    ID = ("id", "id", ("hash",), "#", "", True)
    CLASS = ("class", "class", ("cls", "class_"), ".", "", False)
    ATTR = ("attr", "attribute", ("attribute",), "[", "]", False)
    PSEUDO_CLASS = ("pseudo-class", "pseudo-class", ("pseudoClass",), ":", "", False)
    PSEUDO_ELEMENT = ("pseudo-element", "pseudo-element", ("pseudoElement",), "::", "", True)

    @property
    def rank(self) -> int:
        """Position of this category in CSS order (0 for element)."""
        return list(type(self)).index(self)

    def render(self, name: str) -> str:
        """Return the selector fragment for ``name`` in this category."""
        return f"{self.prefix}{name}{self.suffix}"
