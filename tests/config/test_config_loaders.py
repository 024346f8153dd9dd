# topmark:header:start
#
#   project      : ObjKit
#   file         : test_config_loaders.py
#   file_relpath : tests/config/test_config_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in objkit.config.loaders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from objkit.config.loaders import (
    ConfigLoadError,
    extract_tool_section,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    parse_toml_file,
    to_toml,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_are_fresh_copies() -> None:
    first = load_defaults_dict()
    first["json"]["indent"] = 8
    assert load_defaults_dict()["json"]["indent"] == 0


def test_parse_toml_file_returns_plain_dicts(tmp_path: Path) -> None:
    path = tmp_path / "objkit.toml"
    path.write_text("[json]\nindent = 2\n", encoding="utf-8")
    data = parse_toml_file(path)
    assert data == {"json": {"indent": 2}}
    assert type(data["json"]) is dict


def test_parse_toml_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError):
        parse_toml_file(tmp_path / "missing.toml")


def test_load_toml_dict_swallows_errors(tmp_path: Path) -> None:
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_extract_tool_section() -> None:
    data: dict[str, Any] = {"tool": {"objkit": {"json": {"indent": 1}}, "other": {}}}
    assert extract_tool_section(data) == {"json": {"indent": 1}}
    assert extract_tool_section({"tool": {"objkit": 3}}) == {}
    assert extract_tool_section({}) == {}


def test_get_table_value() -> None:
    assert get_table_value({"json": {"indent": 1}}, "json") == {"indent": 1}
    assert get_table_value({"json": 5}, "json") == {}
    assert get_table_value({}, "json") == {}


def test_to_toml_is_parseable() -> None:
    text = to_toml({"json": {"indent": 2, "sort_keys": False}})
    parsed: Any = tomlkit.parse(text)
    assert parsed["json"]["indent"] == 2
    assert "[json]" in text
