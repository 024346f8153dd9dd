# topmark:header:start
#
#   project      : ObjKit
#   file         : errors.py
#   file_relpath : src/objkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ObjKit CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They prefer the project console when one is present
in the Click context (see `show()`); otherwise Click's default styling is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from objkit.core.exit_codes import ExitCode


class ObjkitCliError(click.ClickException):
    """Base class for all ObjKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ObjkitUsageError(ObjkitCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ObjkitDataError(ObjkitCliError):
    """Error for rejected input data (malformed JSON, invalid selector parts)."""

    exit_code = ExitCode.DATA_ERROR


class ObjkitFileNotFoundError(ObjkitCliError):
    """Error when an input or config path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ObjkitConfigError(ObjkitCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
