# topmark:header:start
#
#   project      : ObjKit
#   file         : __init__.py
#   file_relpath : src/objkit/selector/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fluent CSS selector builder.

Typical usage:
    ```python
    from objkit.selector import css_selector_builder as css

    sel = css.element("div").id("main").class_("a").pseudo_element("before")
    assert sel.stringify() == "div#main.a::before"
    ```
"""

from __future__ import annotations

from objkit.core.errors import DuplicateSingleton, OrderViolation, SelectorError
from objkit.selector.builder import (
    CssSelectorFactory,
    SelectorBuilder,
    SelectorLike,
    combine,
    css_selector_builder,
)
from objkit.selector.categories import SelectorCategory

__all__ = [
    "CssSelectorFactory",
    "DuplicateSingleton",
    "OrderViolation",
    "SelectorBuilder",
    "SelectorCategory",
    "SelectorError",
    "SelectorLike",
    "combine",
    "css_selector_builder",
]
