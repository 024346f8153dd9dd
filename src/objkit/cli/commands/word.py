# topmark:header:start
#
#   project      : ObjKit
#   file         : word.py
#   file_relpath : src/objkit/cli/commands/word.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit `word` command: assemble a word from a JSON letter -> positions map."""

from __future__ import annotations

from typing import Any

import click

from objkit.cli.cmd_common import get_console
from objkit.cli.errors import ObjkitDataError
from objkit.cli.io import read_json_source
from objkit.objects import make_word


def _validate_letters(data: Any) -> dict[str, list[int]]:
    if not isinstance(data, dict):
        raise ObjkitDataError("Expected a JSON object mapping letters to position arrays")
    for letter, positions in data.items():
        if not isinstance(positions, list) or not all(
            isinstance(p, int) and not isinstance(p, bool) and p >= 0 for p in positions
        ):
            raise ObjkitDataError(f"Positions for {letter!r} must be non-negative integers")
    return data


@click.command(
    name="word",
    help="Build a word from a JSON object of letter -> positions.",
)
@click.argument("source", required=False, default="-")
@click.pass_context
def word_command(ctx: click.Context, source: str) -> None:
    console = get_console(ctx)
    console.print(make_word(_validate_letters(read_json_source(source))))
