"""Tests for pi.columnize.tokenize."""

from pi.columnize.tokenize import split_lines, tokenize


class TestTokenize:
    def test_splits_and_trims(self) -> None:
        assert tokenize("Column A | Column B | Column C", "|") == [
            "Column A",
            "Column B",
            "Column C",
        ]

    def test_varied_spacing(self) -> None:
        assert tokenize("x|y|          z", "|") == ["x", "y", "z"]

    def test_empty_line_is_one_empty_field(self) -> None:
        assert tokenize("", "|") == [""]

    def test_empty_fields_kept_without_replacement(self) -> None:
        assert tokenize("a | | c", "|") == ["a", "", "c"]

    def test_empty_replacement(self) -> None:
        assert tokenize("a ||  | d", "|", empty="-") == ["a", "-", "-", "d"]

    def test_literal_delimiter_not_regex(self) -> None:
        assert tokenize("a.b.c", ".") == ["a", "b", "c"]

    def test_multi_character_delimiter(self) -> None:
        assert tokenize("key :: value :: x|y", "::") == ["key", "value", "x|y"]

    def test_empty_delimiter_does_not_split(self) -> None:
        assert tokenize(" a | b ", "") == ["a | b"]

    def test_trailing_delimiter_yields_empty_field(self) -> None:
        assert tokenize("a | b |", "|") == ["a", "b", ""]


class TestSplitLines:
    def test_splits_on_newlines(self) -> None:
        assert split_lines("a | b\nc | d") == ["a | b", "c | d"]

    def test_empty_block(self) -> None:
        assert split_lines("") == [""]

    def test_keeps_empty_lines(self) -> None:
        assert split_lines("a\n\nb") == ["a", "", "b"]
