# topmark:header:start
#
#   project      : ObjKit
#   file         : cities.py
#   file_relpath : src/objkit/cli/commands/cities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit `cities` command.

Reads a JSON array of ``{"country": ..., "city": ...}`` records and prints it
sorted by country, then city. Collation follows ``[collation].locale``.
"""

from __future__ import annotations

from typing import Any

import click

from objkit.cli.cmd_common import get_config, get_console
from objkit.cli.errors import ObjkitDataError
from objkit.cli.io import read_json_source
from objkit.grouping import sort_cities_array
from objkit.serialization import get_json


def _validate_cities(data: Any) -> list[dict[str, str]]:
    if not isinstance(data, list):
        raise ObjkitDataError("Expected a JSON array of city records")
    for index, record in enumerate(data):
        if not (
            isinstance(record, dict)
            and isinstance(record.get("country"), str)
            and isinstance(record.get("city"), str)
        ):
            raise ObjkitDataError(
                f"Record {index} must be an object with string 'country' and 'city' fields"
            )
    return data


@click.command(
    name="cities",
    help="Sort a JSON array of {country, city} records.",
)
@click.argument("source", required=False, default="-")
@click.pass_context
def cities_command(ctx: click.Context, source: str) -> None:
    console = get_console(ctx)
    config = get_config(ctx)
    cities = _validate_cities(read_json_source(source))
    ordered = sort_cities_array(cities, locale_name=config.collation_locale)
    console.print(get_json(ordered, config=config))
