# topmark:header:start
#
#   project      : ObjKit
#   file         : tickets.py
#   file_relpath : src/objkit/cli/commands/tickets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit `tickets` command.

Runs the ticket line simulation for the given bills and prints ``true`` or
``false``. A queue that cannot be served exits with ``ExitCode.FAILURE``.
"""

from __future__ import annotations

import click

from objkit.cli.cmd_common import get_config, get_console
from objkit.cli.options import output_format_option
from objkit.core.exit_codes import ExitCode
from objkit.core.formats import OutputFormat, is_machine_format
from objkit.serialization import get_json
from objkit.tickets import sell_tickets


@click.command(
    name="tickets",
    help="Check whether a queue of 25/50/100 bills can be given change.",
)
@click.argument("bills", nargs=-1, required=True, type=click.Choice(["25", "50", "100"]))
@output_format_option
@click.pass_context
def tickets_command(
    ctx: click.Context,
    bills: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    console = get_console(ctx)
    queue = [int(b) for b in bills]
    served = sell_tickets(queue)

    if is_machine_format(output_format):
        console.print(get_json({"queue": queue, "served": served}, config=get_config(ctx)))
    else:
        console.print("true" if served else "false")

    if not served:
        ctx.exit(ExitCode.FAILURE)
