"""Tests for textbox.glyph -- glyph navigation and width."""

from __future__ import annotations

from textbox.glyph import (
    Glyph,
    glyph_next,
    glyph_previous,
    glyph_width,
    is_combining,
    is_full_width,
    iter_glyphs,
    text_columns,
)

WIDE = "\u4e16"  # CJK ideograph, 3 bytes, 2 columns
ACUTE = "\u0301"  # combining acute accent, 2 bytes


def _boundaries(buffer: bytes) -> list[int]:
    offsets = []
    offset = 0
    while offset < len(buffer):
        offsets.append(offset)
        offset = glyph_next(buffer, offset)
    return offsets


class TestGlyphNext:
    """glyph_next returns the end of the glyph at the offset."""

    def test_ascii(self) -> None:
        assert glyph_next(b"abc", 0) == 1

    def test_multibyte(self) -> None:
        buf = f"a{WIDE}b".encode()
        assert glyph_next(buf, 1) == 4

    def test_absorbs_combining_marks(self) -> None:
        buf = f"e{ACUTE}x".encode()
        assert glyph_next(buf, 0) == 3

    def test_line_break_does_not_absorb_combining_mark(self) -> None:
        buf = f"\n{ACUTE}".encode()
        assert glyph_next(buf, 0) == 1

    def test_at_end_returns_length(self) -> None:
        assert glyph_next(b"ab", 2) == 2

    def test_invalid_encoding_is_noop(self) -> None:
        assert glyph_next(b"a\xffb", 1) == 1


class TestGlyphPrevious:
    """glyph_previous returns the start of the glyph ending at the offset."""

    def test_ascii(self) -> None:
        assert glyph_previous(b"abc", 2) == 1

    def test_multibyte(self) -> None:
        buf = f"a{WIDE}".encode()
        assert glyph_previous(buf, 4) == 1
        assert glyph_previous(buf, 1) == 0

    def test_four_byte_codepoint(self) -> None:
        buf = "a\U0001F600".encode()
        assert glyph_previous(buf, 5) == 1

    def test_steps_over_combining_marks(self) -> None:
        buf = f"xe{ACUTE}{ACUTE}".encode()
        assert glyph_previous(buf, len(buf)) == 1

    def test_at_start_returns_zero(self) -> None:
        assert glyph_previous(b"abc", 0) == 0

    def test_invalid_encoding_steps_back_one_byte(self) -> None:
        assert glyph_previous(b"a\xff", 2) == 1

    def test_stops_at_mark_after_control(self) -> None:
        buf = f"\n{ACUTE}".encode()
        assert glyph_previous(buf, len(buf)) == 1

    def test_stops_at_mark_after_undecodable_byte(self) -> None:
        buf = b"\xff" + ACUTE.encode()
        assert glyph_previous(buf, len(buf)) == 1


class TestRoundTrip:
    """glyph_previous undoes glyph_next at every glyph boundary."""

    def test_mixed_text(self) -> None:
        buf = f"aé{WIDE}\U0001F600e{ACUTE}\nz".encode()
        for offset in _boundaries(buf):
            assert glyph_previous(buf, glyph_next(buf, offset)) == offset

    def test_boundaries_of_mixed_text(self) -> None:
        buf = f"a{WIDE}e{ACUTE}".encode()
        assert _boundaries(buf) == [0, 1, 4]


class TestWidth:
    """Full-width codepoints take two columns, everything else one."""

    def test_is_full_width(self) -> None:
        assert is_full_width(0x4E16)
        assert not is_full_width(ord("a"))

    def test_is_combining(self) -> None:
        assert is_combining(0x0301)
        assert not is_combining(ord("a"))
        assert not is_combining(0x0A)

    def test_glyph_width(self) -> None:
        buf = f"a{WIDE}".encode()
        assert glyph_width(buf, 0) == 1
        assert glyph_width(buf, 1) == 2

    def test_emoji_is_wide(self) -> None:
        assert glyph_width("\U0001F600".encode(), 0) == 2

    def test_undecodable_width_is_zero(self) -> None:
        assert glyph_width(b"\xff", 0) == 0


class TestIterGlyphs:
    """iter_glyphs walks the buffer glyph by glyph."""

    def test_spans_and_widths(self) -> None:
        buf = f"a{WIDE}".encode()
        assert list(iter_glyphs(buf)) == [Glyph(0, 1, 1), Glyph(1, 4, 2)]

    def test_invalid_byte_is_a_zero_width_glyph(self) -> None:
        assert list(iter_glyphs(b"a\xffb")) == [
            Glyph(0, 1, 1),
            Glyph(1, 2, 0),
            Glyph(2, 3, 1),
        ]

    def test_text_columns(self) -> None:
        buf = f"a{WIDE}e{ACUTE}".encode()
        assert text_columns(buf) == 4
        assert text_columns(buf, 0, 4) == 3
