# topmark:header:start
#
#   project      : ObjKit
#   file         : version.py
#   file_relpath : src/objkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit `version` command.

Prints the current ObjKit version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from objkit.cli.cmd_common import get_console, get_effective_verbosity
from objkit.cli.options import output_format_option
from objkit.constants import OBJKIT_VERSION
from objkit.core.formats import OutputFormat
from objkit.serialization import get_json


@click.command(
    name="version",
    help="Show the current version of ObjKit.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat | None) -> None:
    """Show the current version of ObjKit.

    Args:
        ctx (click.Context): Click context carrying the shared console.
        output_format (OutputFormat | None): Optional output format (text or json).
    """
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(get_json({"version": OBJKIT_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("ObjKit version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(OBJKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(OBJKIT_VERSION, bold=True))
