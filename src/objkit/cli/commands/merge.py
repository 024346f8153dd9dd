# topmark:header:start
#
#   project      : ObjKit
#   file         : merge.py
#   file_relpath : src/objkit/cli/commands/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit `merge` command.

Sums JSON objects of numbers key-wise. Each SOURCE holds either one object or
an array of objects; ``-`` reads STDIN.
"""

from __future__ import annotations

from typing import Any

import click

from objkit.cli.cmd_common import get_config, get_console
from objkit.cli.errors import ObjkitDataError
from objkit.cli.io import read_json_source
from objkit.objects import merge_objects
from objkit.serialization import get_json


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _collect_objects(source: str, data: Any) -> list[dict[str, float]]:
    items: list[Any] = data if isinstance(data, list) else [data]
    for item in items:
        if not isinstance(item, dict) or not all(_is_number(v) for v in item.values()):
            raise ObjkitDataError(f"{source}: expected JSON object(s) with numeric values")
    return items


@click.command(
    name="merge",
    help="Sum JSON objects of numbers key-wise.",
)
@click.argument("sources", nargs=-1)
@click.pass_context
def merge_command(ctx: click.Context, sources: tuple[str, ...]) -> None:
    console = get_console(ctx)
    config = get_config(ctx)
    objects: list[dict[str, float]] = []
    for source in sources or ("-",):
        objects.extend(_collect_objects(source, read_json_source(source)))
    console.print(get_json(merge_objects(objects), config=config))
