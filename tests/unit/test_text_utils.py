"""Unit tests for the text utilities."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from html2mark.colors import Paint, paint
from html2mark.utils.text import collapse, strip_markup, visible_length


@pytest.mark.unit
class TestCollapse:
    """Test whitespace collapsing."""

    def test_runs_become_single_spaces(self):
        assert collapse("Text\nwith    whitespaces\t") == "Text with whitespaces "

    def test_all_ascii_whitespace_is_folded(self):
        assert collapse("a \t\n\r\f\vb") == "a b"

    def test_nbsp_is_preserved(self):
        assert collapse("a\xa0\xa0 b") == "a\xa0\xa0 b"

    def test_strip_leading(self):
        assert collapse("  \nText ", strip_leading=True) == "Text "

    def test_strip_trailing(self):
        assert collapse(" Text\t\t", strip_trailing=True) == " Text"

    def test_strip_both(self):
        assert collapse("\n\tSome\n\ttext  ", strip_leading=True, strip_trailing=True) == "Some text"

    def test_whitespace_only(self):
        assert collapse(" \n\t ") == " "
        assert collapse(" \n\t ", strip_leading=True, strip_trailing=True) == ""

    def test_empty(self):
        assert collapse("") == ""

    @pytest.mark.fuzzing
    @given(st.text(), st.booleans(), st.booleans())
    def test_idempotent(self, text, strip_leading, strip_trailing):
        once = collapse(text, strip_leading, strip_trailing)
        assert collapse(once, strip_leading, strip_trailing) == once

    @pytest.mark.fuzzing
    @given(st.text())
    def test_no_whitespace_runs_remain(self, text):
        result = collapse(text)
        assert "  " not in result
        assert not any(char in result for char in "\t\n\r\f\v")


@pytest.mark.unit
class TestVisibleLength:
    """Test visible width measurement."""

    def test_plain_ascii(self):
        assert visible_length("Text") == 4

    def test_cyrillic_counts_codepoints(self):
        assert visible_length("Далеко-далеко") == 13

    def test_escape_codes_are_zero_width(self):
        assert visible_length("\x1b[00;36mText\x1b[0m") == 4

    def test_span_markers_are_zero_width(self):
        assert visible_length(paint(Paint.EMPHASIS, "Text")) == 4

    def test_strip_markup_removes_both_kinds(self):
        text = "\x1b[0m" + paint(Paint.LINK, "a") + "\x1b[01;37mb"
        assert strip_markup(text) == "ab"
