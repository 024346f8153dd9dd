# topmark:header:start
#
#   project      : ObjKit
#   file         : grouping.py
#   file_relpath : src/objkit/grouping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sorting and grouping helpers for sequences of records.

Collation:
    Without a configured locale, strings are compared with a built-in
    Unicode-aware key: accents and case are ignored first, then accents break
    ties, then case (lowercase before uppercase). With a locale name, the C
    library collation of that locale is used (`locale.strxfrm`). An unavailable
    locale falls back to the built-in key with a warning.
"""

from __future__ import annotations

import locale
import unicodedata
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar

from objkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Mapping

    from objkit.config.logging import ObjkitLogger

logger: ObjkitLogger = get_logger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def collation_key(text: str) -> tuple[str, str, str]:
    """Return a locale-independent sort key approximating natural-language order.

    Example:
        ``sorted(["b", "Á", "a"], key=collation_key)`` gives ``["a", "Á", "b"]``.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), decomposed.casefold(), text.swapcase())


@contextmanager
def _collation_locale(name: str) -> Iterator[bool]:
    """Temporarily switch ``LC_COLLATE``; yields False when ``name`` is unavailable."""
    previous = locale.setlocale(locale.LC_COLLATE)
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error as exc:
        logger.warning("Collation locale %r unavailable (%s); using built-in collation", name, exc)
        yield False
        return
    try:
        yield True
    finally:
        locale.setlocale(locale.LC_COLLATE, previous)


def sort_by_collation(
    items: Iterable[T],
    key: Callable[[T], tuple[str, ...]],
    *,
    locale_name: str = "",
) -> list[T]:
    """Return ``items`` as a new list sorted by the string fields ``key`` extracts.

    Sorting is stable. Keys are computed once per item.
    """
    decorated: list[tuple[tuple[Any, ...], int, T]]
    values = list(items)
    if locale_name:
        with _collation_locale(locale_name) as active:
            if active:
                decorated = [
                    (tuple(locale.strxfrm(s) for s in key(item)), i, item)
                    for i, item in enumerate(values)
                ]
                decorated.sort(key=lambda entry: (entry[0], entry[1]))
                return [entry[2] for entry in decorated]
    decorated = [
        (tuple(collation_key(s) for s in key(item)), i, item) for i, item in enumerate(values)
    ]
    decorated.sort(key=lambda entry: (entry[0], entry[1]))
    return [entry[2] for entry in decorated]


def sort_cities_array(
    cities: Iterable[Mapping[str, str]],
    *,
    locale_name: str = "",
) -> list[Mapping[str, str]]:
    """Return the city records ordered by ``country``, then ``city``.

    The input is not modified; records are reused, not copied.

    Example:
        ``sort_cities_array([{"country": "B", "city": "Y"}, {"country": "A", "city": "Z"}])``
        returns the ``A`` record first.
    """
    return sort_by_collation(
        cities,
        lambda record: (record["country"], record["city"]),
        locale_name=locale_name,
    )


def group(
    items: Iterable[T],
    key_selector: Callable[[T], K],
    value_selector: Callable[[T], V],
) -> dict[K, list[V]]:
    """Group ``items`` by ``key_selector``, collecting ``value_selector`` results.

    Groups appear in order of first occurrence and values keep input order.

    Example:
        ``group(["ant", "bee", "asp"], lambda s: s[0], str.upper)`` returns
        ``{"a": ["ANT", "ASP"], "b": ["BEE"]}``.
    """
    groups: dict[K, list[V]] = {}
    for item in items:
        groups.setdefault(key_selector(item), []).append(value_selector(item))
    return groups
