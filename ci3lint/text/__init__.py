"""Source text offsets, ranges and positions."""

from ci3lint.text.position import (
    START,
    Position,
    PositionRange,
    offset_to_position,
    range_from_match,
    range_from_text_range,
)
from ci3lint.text.text import ZERO, TextRange, TextSize, slice_text_range

__all__ = [
    "START",
    "ZERO",
    "Position",
    "PositionRange",
    "TextRange",
    "TextSize",
    "offset_to_position",
    "range_from_match",
    "range_from_text_range",
    "slice_text_range",
]
