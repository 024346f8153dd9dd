# topmark:header:start
#
#   project      : ObjKit
#   file         : main.py
#   file_relpath : src/objkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit CLI: a Click group with one subcommand per tool.

Group-level options are resolved once and placed into ``ctx.obj``:
``console``, ``verbosity_level``, ``color_enabled``, ``config_files`` and
``no_config``. Configuration itself is loaded lazily by
`objkit.cli.cmd_common.get_config`, so commands that do not need it never
touch the filesystem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objkit.cli.color import ColorMode, resolve_color_mode
from objkit.cli.commands.cities import cities_command
from objkit.cli.commands.config import config_command
from objkit.cli.commands.merge import merge_command
from objkit.cli.commands.selector import selector_command
from objkit.cli.commands.tickets import tickets_command
from objkit.cli.commands.version import version_command
from objkit.cli.commands.word import word_command
from objkit.cli.console import ClickConsole
from objkit.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from objkit.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

    from objkit.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, color, config sources) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_files (tuple[Path, ...]): Explicit ``--config`` files, in order.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_files"] = config_files
    ctx.obj["no_config"] = no_config
    logger.debug(
        "CLI state: verbosity=%d color=%s config_files=%s no_config=%s",
        ctx.obj["verbosity_level"],
        enable_color,
        [str(p) for p in config_files],
        no_config,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ObjKit CLI",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the ObjKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'objkit selector element:div class:menu' to build a selector.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(selector_command)

cli.add_command(tickets_command)

cli.add_command(cities_command)

cli.add_command(merge_command)

cli.add_command(word_command)

if __name__ == "__main__":
    cli()
