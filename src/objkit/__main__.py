# topmark:header:start
#
#   project      : ObjKit
#   file         : __main__.py
#   file_relpath : src/objkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ObjKit via ``python -m objkit``.

It delegates directly to :func:`objkit.cli.main.cli`, so the console script and
the module interface share a single CLI entry point.

Examples:
    Build a selector using the module interface::

        python -m objkit selector element:div class:menu
"""

from __future__ import annotations

from objkit.cli.main import cli

if __name__ == "__main__":
    cli()
