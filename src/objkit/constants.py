# topmark:header:start
#
#   project      : ObjKit
#   file         : constants.py
#   file_relpath : src/objkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

OBJKIT_VERSION: str = get_version("objkit")

# Config files discovered in the working directory (lowest precedence first)
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.objkit"
OBJKIT_TOML_NAME: str = "objkit.toml"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV: str = "OBJKIT_LOG_LEVEL"

# Price of one ticket in the change-making simulation
TICKET_PRICE: int = 25
