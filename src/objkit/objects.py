# topmark:header:start
#
#   project      : ObjKit
#   file         : objects.py
#   file_relpath : src/objkit/objects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers for plain record objects (string-keyed mappings).

All helpers are shallow: nested values are shared with the input, never copied.
Key order follows Python's insertion-ordered ``dict``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from objkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from objkit.config.logging import ObjkitLogger

logger: ObjkitLogger = get_logger(__name__)

K = TypeVar("K")
V = TypeVar("V")

_SCALARS = (str, int, float)


def shallow_copy(obj: Mapping[K, V]) -> dict[K, V]:
    """Return a new dict with the same top-level key/value pairs.

    Example:
        ``shallow_copy({"a": 2, "b": {"c": [1]}})`` returns an equal dict whose
        ``"b"`` value is the very same inner dict.
    """
    return dict(obj)


def merge_objects(objects: Iterable[Mapping[str, float]]) -> dict[str, float]:
    """Sum values key-wise across ``objects``; missing keys count as 0.

    Keys appear in the order they are first seen.
    """
    merged: dict[str, float] = {}
    for obj in objects:
        for key, value in obj.items():
            merged[key] = merged.get(key, 0) + value
    return merged


def remove_properties(obj: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return a copy of ``obj`` without ``keys``; absent keys are ignored."""
    result = dict(obj)
    for key in keys:
        result.pop(key, None)
    return result


def _strict_equal(a: Any, b: Any) -> bool:
    # bool is an int subclass, but True must not equal 1 here
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if a is None or b is None:
        return a is b
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        if isinstance(a, str) != isinstance(b, str):
            return False
        return a == b
    return a is b


def compare_objects(obj1: Mapping[Any, Any], obj2: Mapping[Any, Any]) -> bool:
    """Return True if both mappings hold the same keys with strictly equal values.

    Scalars (str, int, float, bool, None) compare by value, with bools never
    equal to numbers; any other value compares by identity. The comparison is
    shallow: two distinct but equal nested lists are *not* equal.
    """
    if len(obj1) != len(obj2):
        return False
    for key, value in obj1.items():
        if key not in obj2 or not _strict_equal(value, obj2[key]):
            return False
    return True


def is_empty_object(obj: Mapping[Any, Any]) -> bool:
    return len(obj) == 0


def make_immutable(obj: Mapping[K, V]) -> Mapping[K, V]:
    """Return a read-only shallow copy of ``obj``.

    The result is a `MappingProxyType`: item assignment and deletion raise
    ``TypeError``. Later changes to ``obj`` do not show through.
    """
    return MappingProxyType(dict(obj))


def make_word(letters: Mapping[str, Sequence[int]]) -> str:
    """Assemble a word by placing each letter at each of its zero-based positions.

    Example:
        ``make_word({"a": [0, 1], "b": [2]})`` returns ``"aab"``.

    Positions are expected to cover ``0..N-1`` exactly once. When two letters
    claim the same index the one listed later wins; gaps are skipped.
    """
    slots: dict[int, str] = {}
    for letter, positions in letters.items():
        for pos in positions:
            slots[pos] = letter
    if slots and len(slots) != max(slots) + 1:
        logger.debug("make_word: positions do not cover 0..%d contiguously", max(slots))
    return "".join(slots[i] for i in sorted(slots))
