"""Tests for textbox.word_break -- word-break classification."""

from __future__ import annotations

import pytest

from textbox.word_break import (
    codepoint_to_word_break_property,
    is_word_character,
    is_word_codepoint,
)


class TestWordBreakProperty:
    """Codepoints map to their UAX #29 word-break property."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("a", "ALetter"),
            ("Z", "ALetter"),
            ("é", "ALetter"),
            ("\u4e16", "ALetter"),
            ("\u3042", "ALetter"),
            ("7", "Numeric"),
            ("\u0663", "Numeric"),
            ("\u05d0", "Hebrew_Letter"),
            ("\u30a2", "Katakana"),
            ("\r", "CR"),
            ("\n", "LF"),
            ("\u2028", "Newline"),
            (" ", "WSegSpace"),
            ("'", "Single_Quote"),
            ('"', "Double_Quote"),
            (".", "MidNumLet"),
            (":", "MidLetter"),
            (",", "MidNum"),
            ("_", "ExtendNumLet"),
            ("\u200d", "ZWJ"),
            ("\u0301", "Extend"),
            ("\u00ad", "Format"),
            ("\U0001f1e6", "Regional_Indicator"),
            ("!", "Other"),
            ("\u00a0", "Other"),
        ],
    )
    def test_property(self, char: str, expected: str) -> None:
        assert codepoint_to_word_break_property(ord(char)) == expected


class TestIsWordCodepoint:
    """Only letters and digits are part of a word."""

    @pytest.mark.parametrize("char", ["a", "é", "5", "\u05d0", "\u30a2", "\u4e16"])
    def test_word_codepoints(self, char: str) -> None:
        assert is_word_codepoint(ord(char))

    @pytest.mark.parametrize(
        "char", [" ", "\t", "\n", ",", ".", "'", "_", "-", "\u0301", "\u200d", "\U0001f1e6"]
    )
    def test_non_word_codepoints(self, char: str) -> None:
        assert not is_word_codepoint(ord(char))


class TestIsWordCharacter:
    """is_word_character decodes at a byte offset first."""

    def test_letter_and_space(self) -> None:
        assert is_word_character(b"a b", 0)
        assert not is_word_character(b"a b", 1)

    def test_multibyte_letter(self) -> None:
        buf = "xé".encode()
        assert is_word_character(buf, 1)

    def test_end_of_buffer_is_not_a_word(self) -> None:
        assert not is_word_character(b"ab", 2)

    def test_invalid_byte_is_not_a_word(self) -> None:
        assert not is_word_character(b"\xffa", 0)
