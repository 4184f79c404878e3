"""Offset to line/column mapping over one source snapshot."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import TypeAlias

from ci3lint.text.text import TextRange, TextSize


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/column position."""

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.column < 0:
            raise ValueError("Position line and column cannot be negative")

    def display(self) -> str:
        """One-based `line:column` for terminal output."""
        return f"{self.line + 1}:{self.column + 1}"


START: Position = Position(0, 0)

PositionRange: TypeAlias = tuple[Position, Position]


LINE_BREAK_PATTERN: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


def offset_to_position(text: str, offset: int | TextSize) -> Position:
    """Map a character offset in `text` to a zero-based position.

    `\\r\\n`, a lone `\\r` and a lone `\\n` each end one line. An offset
    between the `\\r` and `\\n` of a pair maps to the end of that line.
    `offset == len(text)` maps to end-of-file.
    """
    value = offset.value if isinstance(offset, TextSize) else offset
    if value < 0 or value > len(text):
        raise ValueError(f"Offset {value} is outside text of length {len(text)}")
    if 0 < value < len(text) and text[value - 1] == "\r" and text[value] == "\n":
        value -= 1
    line = 0
    line_start = 0
    for line_break in LINE_BREAK_PATTERN.finditer(text, 0, value):
        line += 1
        line_start = line_break.end()
    return Position(line=line, column=value - line_start)


def range_from_match(text: str, offset: int | TextSize, length: int | TextSize) -> PositionRange:
    """Map `offset`/`length` in `text` to a `(start, end)` position pair."""
    start = offset.value if isinstance(offset, TextSize) else offset
    size = length.value if isinstance(length, TextSize) else length
    if size < 0:
        raise ValueError("Match length cannot be negative")
    return (offset_to_position(text, start), offset_to_position(text, start + size))


def range_from_text_range(text: str, range: TextRange) -> PositionRange:
    return range_from_match(text, range.start, range.len())
