# topmark:header:start
#
#   project      : ObjKit
#   file         : errors.py
#   file_relpath : src/objkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for ObjKit.

These exceptions are raised by the typed API and are independent of Click.
The CLI translates them into `objkit.cli.errors` exceptions carrying exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selector.categories import SelectorCategory


class ObjkitError(Exception):
    """Base class for all ObjKit library errors."""


class SelectorError(ObjkitError, ValueError):
    """A selector part was rejected by the builder.

    Attributes:
        category (SelectorCategory): Category of the part that was rejected.
    """

    default_message: str = "Invalid selector part"

    def __init__(self, category: SelectorCategory, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.category = category


class OrderViolation(SelectorError):
    """A selector part was added after a part of a higher-ranked category."""

    default_message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


class DuplicateSingleton(SelectorError):
    """A second element, id or pseudo-element part was added to the same selector."""

    default_message = (
        "Element, id and pseudo-element should not occur more than once inside the selector"
    )
