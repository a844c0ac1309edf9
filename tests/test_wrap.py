"""Tests for pi.columnize.wrap -- splitting cells into extension lines."""

from __future__ import annotations

from pi.columnize.width import char_width, visible_width
from pi.columnize.wrap import split_cell, wrap_row


# ---------------------------------------------------------------------------
# split_cell
# ---------------------------------------------------------------------------


class TestSplitCell:
    def test_fitting_text_unchanged(self) -> None:
        assert split_cell("short", 10) == ("short", "")

    def test_exact_fit_unchanged(self) -> None:
        assert split_cell("hello", 5) == ("hello", "")

    def test_splits_at_last_whitespace(self) -> None:
        assert split_cell("hello world", 8) == ("hello", "world")

    def test_whitespace_on_boundary(self) -> None:
        assert split_cell("hello world", 5) == ("hello", "world")

    def test_prefers_rightmost_whitespace(self) -> None:
        assert split_cell("a b c defgh", 6) == ("a b c", "defgh")

    def test_hard_break_without_whitespace(self) -> None:
        assert split_cell("abcdefghij", 4) == ("abcd", "efghij")

    def test_remainder_is_trimmed(self) -> None:
        assert split_cell("abc    def", 3) == ("abc", "def")

    def test_wide_glyph_wider_than_column_emitted_alone(self) -> None:
        assert split_cell("世界", 1) == ("世", "界")

    def test_wide_glyphs_split_by_display_width(self) -> None:
        assert split_cell("世界世", 4) == ("世界", "世")

    def test_non_positive_width_leaves_text(self) -> None:
        assert split_cell("abc", 0) == ("abc", "")

    def test_custom_measure(self) -> None:
        assert split_cell("世界世", 2, char_width) == ("世界", "世")


# ---------------------------------------------------------------------------
# wrap_row
# ---------------------------------------------------------------------------


class TestWrapRow:
    def test_row_that_fits_is_single_line(self) -> None:
        assert wrap_row(["a", "b"], [1, 1]) == [["a", "b"]]

    def test_extension_line_for_long_cell(self) -> None:
        assert wrap_row(["id", "one two three"], [2, 7]) == [
            ["id", "one two"],
            ["", "three"],
        ]

    def test_several_columns_wrap_together(self) -> None:
        assert wrap_row(["aaaa bbbb", "cc"], [4, 1]) == [
            ["aaaa", "c"],
            ["bbbb", "c"],
        ]

    def test_columns_finish_at_different_times(self) -> None:
        rows = wrap_row(["x y z", "ab"], [1, 2])
        assert rows == [["x", "ab"], ["y", ""], ["z", ""]]

    def test_fields_past_widths_are_not_split(self) -> None:
        assert wrap_row(["a", "long text here"], [1]) == [["a", "long text here"]]

    def test_every_rendered_cell_fits(self) -> None:
        widths = [10, 6, 15]
        fields = [
            "short",
            "unbreakablecontent",
            "a long sentence that should wrap over several lines of output",
        ]
        rows = wrap_row(fields, widths)
        assert len(rows) > 1
        for row in rows:
            assert len(row) == len(fields)
            for value, width in zip(row, widths):
                assert visible_width(value) <= width

    def test_no_content_lost(self) -> None:
        text = "the quick brown fox jumps over the lazy dog"
        rows = wrap_row([text], [9])
        assert " ".join(row[0] for row in rows) == text

    def test_empty_row(self) -> None:
        assert wrap_row([""], [0]) == [[""]]
