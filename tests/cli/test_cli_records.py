# topmark:header:start
#
#   project      : ObjKit
#   file         : test_cli_records.py
#   file_relpath : tests/cli/test_cli_records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the JSON record commands: `cities`, `merge` and `word`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_DATA_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

CITIES = [
    {"country": "Russia", "city": "Moscow"},
    {"country": "Belarus", "city": "Minsk"},
    {"country": "Belarus", "city": "Brest"},
]


@mark_cli
def test_cities_from_file(tmp_path: Path) -> None:
    (tmp_path / "cities.json").write_text(json.dumps(CITIES), encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "cities", "cities.json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == [
        {"country": "Belarus", "city": "Brest"},
        {"country": "Belarus", "city": "Minsk"},
        {"country": "Russia", "city": "Moscow"},
    ]


@mark_cli
def test_cities_from_stdin_honors_indent(tmp_path: Path) -> None:
    (tmp_path / "objkit.toml").write_text("[json]\nindent = 2\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "cities"], input_text=json.dumps(CITIES[:1]))
    assert_SUCCESS(result)
    assert result.output.startswith("[\n  {")


@mark_cli
def test_cities_rejects_bad_records(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "cities", "-"], input_text='[{"country": 1}]')
    assert_DATA_ERROR(result)


@mark_cli
def test_cities_rejects_invalid_json(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "cities", "-"], input_text="[oops")
    assert_DATA_ERROR(result)
    assert "Invalid JSON in <stdin>" in result.output


@mark_cli
def test_cities_missing_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "cities", "nope.json"])
    assert_FILE_NOT_FOUND(result)


@mark_cli
def test_merge_objects_and_arrays(tmp_path: Path) -> None:
    (tmp_path / "a.json").write_text('{"a": 1, "b": 2}', encoding="utf-8")
    (tmp_path / "b.json").write_text('[{"a": 3}, {"c": 4.5}]', encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "--no-config", "merge", "a.json", "b.json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"a": 4, "b": 2, "c": 4.5}


@mark_cli
def test_merge_rejects_non_numbers(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "merge"], input_text='{"a": "1"}')
    assert_DATA_ERROR(result)


@mark_cli
def test_word_from_stdin() -> None:
    result = run_cli(["--no-color", "word"], input_text='{"H": [0], "e": [1], "l": [2, 3], "o": [4]}')
    assert_SUCCESS(result)
    assert result.output.strip() == "Hello"


@mark_cli
def test_word_rejects_negative_positions() -> None:
    result = run_cli(["--no-color", "word", "-"], input_text='{"a": [-1]}')
    assert_DATA_ERROR(result)
