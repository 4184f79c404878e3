import pytest

from ci3lint.text import (
    Position,
    TextRange,
    TextSize,
    offset_to_position,
    range_from_match,
    range_from_text_range,
    slice_text_range,
)


def test_offset_zero_is_start_of_file() -> None:
    assert offset_to_position("<?php\nclass A {}", 0) == Position(0, 0)


def test_offset_at_end_of_file() -> None:
    text = "<?php\nclass A {}\n"

    assert offset_to_position(text, len(text)) == Position(2, 0)
    assert offset_to_position("abc", 3) == Position(0, 3)


def test_offset_counts_line_breaks_before_it() -> None:
    text = "<?php\n\nclass Blog {\n  }"

    assert offset_to_position(text, text.index("class")) == Position(2, 0)
    assert offset_to_position(text, text.index("Blog")) == Position(2, 6)
    assert offset_to_position(text, text.index("}")) == Position(3, 2)


def test_newline_character_belongs_to_its_line() -> None:
    assert offset_to_position("ab\ncd", 2) == Position(0, 2)
    assert offset_to_position("ab\ncd", 3) == Position(1, 0)


def test_crlf_counts_one_line_break() -> None:
    text = "a\r\nb"

    assert offset_to_position(text, 1) == Position(0, 1)
    assert offset_to_position(text, 3) == Position(1, 0)
    assert offset_to_position(text, 4) == Position(1, 1)


def test_offset_inside_crlf_maps_to_end_of_line() -> None:
    assert offset_to_position("a\r\nb", 2) == Position(0, 1)


def test_lone_carriage_return_is_a_line_break() -> None:
    assert offset_to_position("a\rb", 2) == Position(1, 0)
    assert offset_to_position("a\r\rb", 3) == Position(2, 0)


def test_classic_mac_line_endings_position_class_declaration() -> None:
    text = "<?php\rclass Blog {}\r"

    assert offset_to_position(text, text.index("class")) == Position(1, 0)
    assert offset_to_position(text, len(text)) == Position(2, 0)


def test_mixed_line_endings() -> None:
    text = "a\nb\r\nc\rd"

    assert offset_to_position(text, text.index("d")) == Position(3, 0)


def test_accepts_text_size_offsets() -> None:
    assert offset_to_position("x\ny", TextSize(2)) == Position(1, 0)


def test_offset_outside_text_is_rejected() -> None:
    with pytest.raises(ValueError, match="outside text"):
        offset_to_position("abc", 4)
    with pytest.raises(ValueError, match="outside text"):
        offset_to_position("abc", -1)


def test_range_from_match_spans_offset_plus_length() -> None:
    text = "<?php class Blog {}"

    start, end = range_from_match(text, 6, len("class Blog"))

    assert start == Position(0, 6)
    assert end == Position(0, 16)


def test_range_from_match_can_cross_lines() -> None:
    text = "ab\ncd"

    assert range_from_match(text, 1, 3) == (Position(0, 1), Position(1, 1))


def test_zero_length_range_is_degenerate() -> None:
    assert range_from_match("", 0, 0) == (Position(0, 0), Position(0, 0))


def test_range_from_text_range_matches_sliced_text() -> None:
    text = "one\ntwo three"
    text_range = TextRange.at(TextSize(8), TextSize(5))

    assert slice_text_range(text, text_range) == "three"
    assert range_from_text_range(text, text_range) == (Position(1, 4), Position(1, 9))


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError, match="start > end"):
        TextRange(3, 1)
    with pytest.raises(ValueError, match="cannot be negative"):
        TextSize(-1)
    assert TextRange.empty(TextSize(4)).is_empty()


def test_position_display_is_one_based() -> None:
    assert Position(0, 0).display() == "1:1"
    assert Position(4, 9).display() == "5:10"
