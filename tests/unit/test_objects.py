# topmark:header:start
#
#   project      : ObjKit
#   file         : test_objects.py
#   file_relpath : tests/unit/test_objects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the record helpers in `objkit.objects`."""

from __future__ import annotations

from typing import Any

import pytest

from objkit.objects import (
    compare_objects,
    is_empty_object,
    make_immutable,
    make_word,
    merge_objects,
    remove_properties,
    shallow_copy,
)
from tests.conftest import parametrize


def test_shallow_copy_is_new_dict_sharing_nested_values() -> None:
    inner: dict[str, list[int]] = {"c": [1]}
    original: dict[str, Any] = {"a": 2, "b": inner}

    copy = shallow_copy(original)

    assert copy == original
    assert copy is not original
    assert copy["b"] is inner

    copy["a"] = 99
    assert original["a"] == 2


def test_shallow_copy_of_empty() -> None:
    assert shallow_copy({}) == {}


def test_merge_objects_sums_keywise() -> None:
    merged = merge_objects([{"a": 1, "b": 2}, {"a": 3, "c": 4}])
    assert merged == {"a": 4, "b": 2, "c": 4}
    # keys follow first appearance
    assert list(merged) == ["a", "b", "c"]


def test_merge_objects_empty_input() -> None:
    assert merge_objects([]) == {}


def test_merge_objects_does_not_modify_inputs() -> None:
    first = {"a": 1}
    merge_objects([first, {"a": 2}])
    assert first == {"a": 1}


def test_remove_properties_ignores_absent_keys() -> None:
    source = {"a": 1, "b": 2, "c": 3}
    result = remove_properties(source, ["b", "zzz"])
    assert result == {"a": 1, "c": 3}
    assert source == {"a": 1, "b": 2, "c": 3}


@parametrize(
    "left, right, expected",
    [
        ({"a": 1, "b": 2}, {"a": 1, "b": 2}, True),
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, True),
        ({"a": 1, "b": 2}, {"a": 1, "b": 3}, False),
        ({"a": 1}, {"a": 1, "b": 2}, False),
        ({"a": 1}, {"b": 1}, False),
        ({"a": 1}, {"a": "1"}, False),
        ({"a": 1}, {"a": True}, False),
        ({"a": None}, {"a": None}, True),
        ({"a": None}, {"a": 0}, False),
        ({"a": 1.5}, {"a": 1.5}, True),
        ({}, {}, True),
    ],
)
def test_compare_objects(left: dict[str, Any], right: dict[str, Any], expected: bool) -> None:
    assert compare_objects(left, right) is expected


def test_compare_objects_is_shallow() -> None:
    shared: list[int] = [1, 2]
    assert compare_objects({"a": shared}, {"a": shared})
    assert not compare_objects({"a": [1, 2]}, {"a": [1, 2]})


def test_is_empty_object() -> None:
    assert is_empty_object({})
    assert not is_empty_object({"a": None})


def test_make_immutable_rejects_writes() -> None:
    frozen = make_immutable({"a": 1})

    with pytest.raises(TypeError):
        frozen["a"] = 2  # type: ignore[index]
    with pytest.raises(TypeError):
        frozen["b"] = 3  # type: ignore[index]
    with pytest.raises(TypeError):
        del frozen["a"]  # type: ignore[attr-defined]

    assert dict(frozen) == {"a": 1}


def test_make_immutable_is_detached_from_source() -> None:
    source = {"a": 1}
    frozen = make_immutable(source)
    source["a"] = 42
    assert frozen["a"] == 1


@parametrize(
    "letters, expected",
    [
        ({"H": [0], "e": [1], "l": [2, 3], "o": [4]}, "Hello"),
        ({"a": [0, 1], "b": [2]}, "aab"),
        ({"t": [0, 3], "e": [1], "s": [2]}, "test"),
        ({}, ""),
    ],
)
def test_make_word(letters: dict[str, list[int]], expected: str) -> None:
    assert make_word(letters) == expected


def test_make_word_later_letter_wins_on_collision() -> None:
    assert make_word({"a": [0], "b": [0]}) == "b"


def test_make_word_skips_gaps() -> None:
    assert make_word({"a": [0], "b": [2]}) == "ab"
