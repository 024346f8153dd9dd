# topmark:header:start
#
#   project      : ObjKit
#   file         : shapes.py
#   file_relpath : src/objkit/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Simple geometric value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass
class Rectangle:
    """Axis-aligned rectangle."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> dict[str, float]:
        """Return the JSON-friendly fields (the area is derived, not stored)."""
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rectangle:
        """Build a rectangle from parsed fields; extra keys are ignored."""
        return cls(width=data["width"], height=data["height"])
