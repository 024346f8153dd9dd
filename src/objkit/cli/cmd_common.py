# topmark:header:start
#
#   project      : ObjKit
#   file         : cmd_common.py
#   file_relpath : src/objkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers to fetch the shared state (console, verbosity, configuration)
that the group callback stores on ``ctx.obj``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from objkit.cli.errors import ObjkitConfigError, ObjkitFileNotFoundError
from objkit.config import MutableConfig
from objkit.config.loaders import ConfigLoadError
from objkit.config.logging import get_logger

if TYPE_CHECKING:
    from objkit.cli.console import ConsoleLike
    from objkit.config import Config

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the group callback."""
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (negative when quiet, 0 by default)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_config(ctx: click.Context) -> Config:
    """Return the merged configuration, loading it on first use.

    Raises:
        ObjkitFileNotFoundError: If an explicit ``--config`` file does not exist.
        ObjkitConfigError: If an explicit ``--config`` file is not valid TOML.
    """
    cached: Config | None = ctx.obj.get("config")
    if cached is not None:
        return cached

    extra: tuple[Path, ...] = tuple(ctx.obj.get("config_files", ()))
    for path in extra:
        if not path.is_file():
            raise ObjkitFileNotFoundError(f"Config file not found: {path}")
    try:
        merged = MutableConfig.load_merged(
            cwd=Path.cwd(),
            extra_files=extra,
            no_config=bool(ctx.obj.get("no_config", False)),
        )
    except ConfigLoadError as exc:
        raise ObjkitConfigError(str(exc)) from exc

    config = merged.freeze()
    logger.debug("Effective config: %r", config)
    ctx.obj["config"] = config
    _report_diagnostics(ctx, config)
    return config


def _report_diagnostics(ctx: click.Context, config: Config) -> None:
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    if vlevel < 0:
        return
    for diag in config.diagnostics:
        console.warn(f"[{diag.level.value}] {diag.message}")
    if vlevel > 1:
        sources = ", ".join(str(p) for p in config.config_files)
        console.warn(f"Config sources: {sources}")
