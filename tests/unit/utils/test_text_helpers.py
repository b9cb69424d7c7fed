#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_text_helpers.py
"""Unit tests for mdfmt.utils.text."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdfmt.utils.text import (
    clean_without_trim,
    escape_url,
    expand_leading_tabs,
    fence_language,
    indent_lines,
    is_number,
    needs_escaping,
    string_width,
    terminal_string_width,
)


@pytest.mark.unit
class TestCleanWithoutTrim:
    """Tests for whitespace normalization."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", ""),
            ("plain", "plain"),
            ("  a\n\tb  ", " a b "),
            ("a\r\nb", "a b"),
            ("a  \n  b", "a b"),
            ("\n", " "),
        ],
    )
    def test_examples(self, text, expected):
        assert clean_without_trim(text) == expected

    @given(st.text(alphabet=" \t\r\nab*", max_size=40))
    def test_no_control_whitespace_or_double_spaces(self, text):
        cleaned = clean_without_trim(text)
        assert not any(char in cleaned for char in "\n\r\t")
        assert "  " not in cleaned

    @given(st.text(max_size=40))
    def test_idempotent(self, text):
        once = clean_without_trim(text)
        assert clean_without_trim(once) == once

    @given(st.text(alphabet=st.characters(blacklist_characters=" \t\r\n"), max_size=40))
    def test_text_without_whitespace_unchanged(self, text):
        assert clean_without_trim(text) == text


@pytest.mark.unit
class TestEscaping:
    """Tests for the per-fragment escape decision."""

    @pytest.mark.parametrize("char", list("\\`*_{}[]()#+-<>"))
    def test_structural_characters(self, char):
        assert needs_escaping(char, "word")

    def test_exclamation_never_escaped(self):
        assert not needs_escaping("!", "")

    @pytest.mark.parametrize(
        "last,expected",
        [("5", True), ("123", True), ("", True), ("a", False), ("5a", False)],
    )
    def test_dot_after_number(self, last, expected):
        assert needs_escaping(".", last) is expected

    @given(st.text(min_size=2, max_size=20), st.text(max_size=5))
    def test_multi_character_fragments_never_escaped(self, text, last):
        assert not needs_escaping(text, last)

    def test_is_number(self):
        assert is_number("0123456789")
        assert is_number("")
        assert not is_number("1.5")
        assert not is_number("٣")

    def test_escape_url_doubles_backslashes(self):
        assert escape_url("a\\b\\\\c") == "a\\\\b\\\\\\\\c"
        assert escape_url("http://x") == "http://x"


@pytest.mark.unit
class TestFenceAndIndent:
    """Tests for fence language extraction and line indenting."""

    @pytest.mark.parametrize(
        "info,expected",
        [
            ("", ""),
            ("python", "python"),
            (".python", "python"),
            ("go linenos=true", "go"),
            (". rust", "rust"),
            ("  .js  ", "js"),
        ],
    )
    def test_fence_language(self, info, expected):
        assert fence_language(info) == expected

    def test_indent_lines_skips_empty_lines(self):
        assert indent_lines("a\n\nb", "\t") == "\ta\n\n\tb"

    def test_indent_lines_empty(self):
        assert indent_lines("", "  ") == ""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("\tz", "    z"),
            ("  \tz", "    z"),
            ("\t\t-\tx", "        -\tx"),
            ("1.\t```", "1.\t```"),
            ("\t", "    "),
            ("", ""),
        ],
    )
    def test_expand_leading_tabs(self, line, expected):
        assert expand_leading_tabs(line) == expected


@pytest.mark.unit
class TestWidths:
    """Tests for terminal cell width measurement."""

    @pytest.mark.parametrize("text,width", [("", 0), ("abc", 3), ("é", 1), ("日本", 4)])
    def test_string_width(self, text, width):
        assert string_width(text) == width

    def test_terminal_width_ignores_bold_sequences(self):
        assert terminal_string_width("\x1b[1m**ab**\x1b[0m") == 6

    def test_terminal_width_plain_text(self):
        assert terminal_string_width("Title") == 5
