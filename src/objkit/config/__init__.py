# topmark:header:start
#
#   project      : ObjKit
#   file         : __init__.py
#   file_relpath : src/objkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit configuration: TOML loading, layered merging and the runtime `Config` snapshot."""

from __future__ import annotations

from objkit.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
    "default_config",
]


def default_config() -> Config:
    """Return a `Config` built purely from the runtime defaults (no I/O)."""
    return MutableConfig.from_defaults().freeze()
