# topmark:header:start
#
#   project      : ObjKit
#   file         : builder.py
#   file_relpath : src/objkit/selector/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fluent CSS selector builder with ordering validation.

A `SelectorBuilder` accumulates rendered selector fragments (``div``, ``#id``,
``.cls``, ``[attr]``, ``:hover``, ``::before``) and serializes them by plain
concatenation. Each category method validates the new part before appending it:

- categories must be added in CSS order (element, id, class, attribute,
  pseudo-class, pseudo-element); adding a lower-ranked part after a
  higher-ranked one raises `OrderViolation`;
- element, id and pseudo-element may occur only once; a second occurrence
  raises `DuplicateSingleton`.

A rejected part leaves the builder unchanged, but callers should treat the
whole chain as invalid.

Builders are not thread-safe; each chain is owned by the code that started it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from objkit.config.logging import get_logger
from objkit.core.errors import DuplicateSingleton, OrderViolation
from objkit.selector.categories import SelectorCategory

logger = get_logger(__name__)


@runtime_checkable
class SelectorLike(Protocol):
    """Anything that can be serialized to a selector string."""

    def serialize(self) -> str:
        """Return the selector text."""
        ...


class SelectorBuilder:
    """Mutable accumulator of selector fragments.

    Attributes:
        fragments (tuple[str, ...]): Rendered fragments in insertion order.
        categories (tuple[SelectorCategory, ...]): Categories added through the
            category methods, in insertion order. Fragments produced by
            `combine` carry no category.
    """

    __slots__ = ("_fragments", "_categories")

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._categories: list[SelectorCategory] = []

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    @property
    def categories(self) -> tuple[SelectorCategory, ...]:
        return tuple(self._categories)

    def element(self, name: str) -> SelectorBuilder:
        """Add a type selector (``div``)."""
        return self.add(SelectorCategory.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:
        """Add an id selector (``#name``)."""
        return self.add(SelectorCategory.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        """Add a class selector (``.name``)."""
        return self.add(SelectorCategory.CLASS, name)

    def attr(self, name: str) -> SelectorBuilder:
        """Add an attribute selector (``[name]``); ``name`` may include an operator and value."""
        return self.add(SelectorCategory.ATTR, name)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        """Add a pseudo-class (``:name``)."""
        return self.add(SelectorCategory.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        """Add a pseudo-element (``::name``)."""
        return self.add(SelectorCategory.PSEUDO_ELEMENT, name)

    def add(self, category: SelectorCategory, name: str) -> SelectorBuilder:
        """Validate and append a part of the given category.

        Args:
            category (SelectorCategory): Category of the new part.
            name (str): Part name, rendered with the category's prefix/suffix.

        Returns:
            SelectorBuilder: This builder, for chaining.

        Raises:
            OrderViolation: If ``category`` ranks below the most recently added category.
            DuplicateSingleton: If ``category`` is a singleton that was already added.
        """
        self._validate(category)
        fragment = category.render(name)
        self._fragments.append(fragment)
        self._categories.append(category)
        logger.trace("Added %s fragment %r", category.key, fragment)
        return self

    def combine(
        self,
        selector_a: SelectorLike,
        combinator: str,
        selector_b: SelectorLike,
    ) -> SelectorBuilder:
        """Append ``"<a> <combinator> <b>"`` as a single uncategorized fragment.

        Raises:
            TypeError: If either selector does not expose ``serialize()``.
        """
        for selector in (selector_a, selector_b):
            if not isinstance(selector, SelectorLike):
                raise TypeError(
                    f"Cannot combine {type(selector).__name__!r}: expected an object "
                    "with a serialize() method"
                )
        fragment = f"{selector_a.serialize()} {combinator} {selector_b.serialize()}"
        self._fragments.append(fragment)
        logger.trace("Added combined fragment %r", fragment)
        return self

    def stringify(self) -> str:
        """Return the selector string; does not modify the builder."""
        return "".join(self._fragments)

    def serialize(self) -> str:
        """Alias of `stringify`."""
        return self.stringify()

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    def _validate(self, category: SelectorCategory) -> None:
        if self._categories and category.rank < self._categories[-1].rank:
            logger.debug(
                "Rejected %s after %s in %r", category.key, self._categories[-1].key, self
            )
            raise OrderViolation(category)
        if category.singleton and category in self._categories:
            logger.debug("Rejected second %s in %r", category.key, self)
            raise DuplicateSingleton(category)


def combine(selector_a: SelectorLike, combinator: str, selector_b: SelectorLike) -> SelectorBuilder:
    """Return a new builder holding ``"<a> <combinator> <b>"``.

    Args:
        selector_a (SelectorLike): Left-hand selector.
        combinator (str): Combinator token, e.g. ``" "``, ``">"``, ``"+"``, ``"~"``.
        selector_b (SelectorLike): Right-hand selector.

    Returns:
        SelectorBuilder: A fresh builder that can be serialized or combined further.
    """
    return SelectorBuilder().combine(selector_a, combinator, selector_b)


class CssSelectorFactory:
    """Entry points that start a new `SelectorBuilder` chain per call."""

    def element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().element(name)

    def id(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().id(name)

    def class_(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().class_(name)

    def attr(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().attr(name)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(name)

    def combine(
        self,
        selector_a: SelectorLike,
        combinator: str,
        selector_b: SelectorLike,
    ) -> SelectorBuilder:
        return combine(selector_a, combinator, selector_b)


css_selector_builder = CssSelectorFactory()
