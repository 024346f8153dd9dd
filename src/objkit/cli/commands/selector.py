# topmark:header:start
#
#   project      : ObjKit
#   file         : selector.py
#   file_relpath : src/objkit/cli/commands/selector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ObjKit `selector` command.

Builds a CSS selector from ``category:name`` parts applied in order, e.g.::

    objkit selector element:div id:main class:menu pseudo-element:before

Ordering and uniqueness are validated exactly as with the Python builder.
"""

from __future__ import annotations

import click

from objkit.cli.cmd_common import get_config, get_console
from objkit.cli.errors import ObjkitDataError, ObjkitUsageError
from objkit.cli.options import output_format_option
from objkit.config.logging import get_logger
from objkit.core.errors import SelectorError
from objkit.core.formats import OutputFormat, is_machine_format
from objkit.selector import SelectorBuilder, SelectorCategory
from objkit.serialization import get_json

logger = get_logger(__name__)


def parse_part(raw: str) -> tuple[SelectorCategory, str]:
    """Split a ``category:name`` token.

    Only the first ``:`` separates the category, so names such as
    ``nth-child(2)`` or ``href$=".pdf"`` pass through unchanged.

    Raises:
        ObjkitUsageError: If the token has no ``:``, an empty name, or an unknown category.
    """
    head, sep, name = raw.partition(":")
    if not sep or not name:
        raise ObjkitUsageError(f"Selector part must look like 'category:name', got {raw!r}")
    category = SelectorCategory.parse(head)
    if category is None:
        known = ", ".join(c.key for c in SelectorCategory)
        raise ObjkitUsageError(f"Unknown selector category {head!r} (expected one of: {known})")
    return category, name


@click.command(
    name="selector",
    help="Build a CSS selector from ordered category:name parts.",
)
@click.argument("parts", nargs=-1, required=True)
@output_format_option
@click.pass_context
def selector_command(
    ctx: click.Context,
    parts: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """Build a selector from ``parts``.

    Args:
        ctx (click.Context): Click context carrying the shared console.
        parts (tuple[str, ...]): ``category:name`` tokens, in order.
        output_format (OutputFormat | None): Optional output format (text or json).
    """
    console = get_console(ctx)
    parsed = [parse_part(raw) for raw in parts]
    logger.debug("Selector parts: %s", [(c.key, n) for c, n in parsed])

    builder = SelectorBuilder()
    for index, (category, name) in enumerate(parsed, start=1):
        try:
            builder.add(category, name)
        except SelectorError as exc:
            raise ObjkitDataError(f"{exc} (part {index}: {parts[index - 1]!r})") from exc

    if is_machine_format(output_format):
        payload = {
            "selector": builder.stringify(),
            "fragments": list(builder.fragments),
            "categories": list(builder.categories),
        }
        console.print(get_json(payload, config=get_config(ctx)))
    else:
        console.print(builder.stringify())
