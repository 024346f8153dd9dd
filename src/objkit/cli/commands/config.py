# topmark:header:start
#
#   project      : ObjKit
#   file         : config.py
#   file_relpath : src/objkit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit `config` command.

Prints the effective configuration after merging defaults, discovered files,
and ``--config`` files, as TOML (or JSON with ``--format json``).
"""

from __future__ import annotations

import click

from objkit.cli.cmd_common import get_config, get_console, get_effective_verbosity
from objkit.cli.options import output_format_option
from objkit.config.loaders import to_toml
from objkit.core.formats import OutputFormat, is_machine_format
from objkit.serialization import get_json


@click.command(
    name="config",
    help="Show the effective configuration.",
)
@output_format_option
@click.pass_context
def config_command(ctx: click.Context, output_format: OutputFormat | None) -> None:
    console = get_console(ctx)
    config = get_config(ctx)
    data = config.to_toml_dict()

    if is_machine_format(output_format):
        console.print(get_json(data, config=config))
        return

    if get_effective_verbosity(ctx) > 0:
        for source in config.config_files:
            console.print(f"# source: {source}")
    console.print(to_toml(data).rstrip("\n"))
