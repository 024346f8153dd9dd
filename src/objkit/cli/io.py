# topmark:header:start
#
#   project      : ObjKit
#   file         : io.py
#   file_relpath : src/objkit/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON input handling for Click commands.

Commands accept a path or ``-`` (STDIN). This module reads the text, parses
it, and translates failures into CLI errors with the proper exit codes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from objkit.cli.errors import ObjkitDataError, ObjkitFileNotFoundError
from objkit.config.logging import get_logger

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def read_text_source(source: str) -> str:
    """Return the text of ``source`` (a file path, or ``-`` for STDIN).

    Raises:
        ObjkitFileNotFoundError: If the path does not exist or is not a file.
    """
    if source == STDIN_SENTINEL:
        return click.get_text_stream("stdin").read()
    path = Path(source)
    if not path.is_file():
        raise ObjkitFileNotFoundError(f"File not found: {source}")
    logger.debug("Reading %s", path)
    return path.read_text(encoding="utf-8")


def read_json_source(source: str) -> Any:
    """Read and parse a JSON document from ``source``.

    Raises:
        ObjkitFileNotFoundError: If the path does not exist.
        ObjkitDataError: If the content is not valid JSON.
    """
    text = read_text_source(source)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        name = "<stdin>" if source == STDIN_SENTINEL else source
        raise ObjkitDataError(f"Invalid JSON in {name}: {exc}") from exc
