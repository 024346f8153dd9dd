# topmark:header:start
#
#   project      : ObjKit
#   file         : test_cli_tickets.py
#   file_relpath : tests/cli/test_cli_tickets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `tickets` command exit codes and output."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_served_queue() -> None:
    result = run_cli(["--no-color", "tickets", "25", "25", "50"])
    assert_SUCCESS(result)
    assert result.output.strip() == "true"


@mark_cli
def test_unserved_queue_exits_with_failure() -> None:
    result = run_cli(["--no-color", "tickets", "25", "100"])
    assert_FAILURE(result)
    assert result.output.strip() == "false"


@mark_cli
def test_json_output() -> None:
    result = run_cli(["--no-color", "tickets", "--format", "json", "25", "50"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"queue": [25, 50], "served": True}


@mark_cli
def test_invalid_bill_is_rejected_by_click() -> None:
    result = run_cli(["--no-color", "tickets", "25", "20"])
    assert result.exit_code == 2
