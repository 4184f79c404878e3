"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ci3lint.text import Position, PositionRange


class Severity(StrEnum):
    """Diagnostic severity. Informational only; nothing blocks on it."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Positioned issue reported by one rule against one document snapshot."""

    range: PositionRange
    message: str
    severity: Severity
    rule_id: str
    code: str | None = None
    hint: str | None = None
    category: str | None = None

    @property
    def start(self) -> Position:
        return self.range[0]

    @property
    def end(self) -> Position:
        return self.range[1]
