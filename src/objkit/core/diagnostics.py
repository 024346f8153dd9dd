# topmark:header:start
#
#   project      : ObjKit
#   file         : diagnostics.py
#   file_relpath : src/objkit/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected while loading configuration.

    Ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Append-only collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, message: str) -> None:
        """Record a diagnostic with the given severity."""
        self.items.append(Diagnostic(level=level, message=message))

    def add_warning(self, message: str) -> None:
        """Record a warning diagnostic."""
        self.add(DiagnosticLevel.WARNING, message)

    def extend(self, other: DiagnosticLog) -> None:
        """Append all diagnostics of ``other``, keeping their order."""
        self.items.extend(other.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
