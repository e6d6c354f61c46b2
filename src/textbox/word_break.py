"""Word-break classification used for word-wise cursor jumps.

Maps codepoints to their Unicode word-break property (UAX #29) from a few
explicit tables plus the general category reported by ``unicodedata``.
Only the letter-like and numeric properties count as part of a word.
"""

from __future__ import annotations

import unicodedata
from typing import Literal

from textbox.codepoint import Buffer, InvalidEncoding, decode_codepoint

WordBreakProperty = Literal[
    "CR",
    "LF",
    "Newline",
    "Extend",
    "ZWJ",
    "Regional_Indicator",
    "Format",
    "Katakana",
    "Hebrew_Letter",
    "ALetter",
    "Single_Quote",
    "Double_Quote",
    "MidNumLet",
    "MidLetter",
    "MidNum",
    "Numeric",
    "ExtendNumLet",
    "WSegSpace",
    "Other",
]

WORD_PROPERTIES: frozenset[WordBreakProperty] = frozenset(
    {"ALetter", "Hebrew_Letter", "Katakana", "Numeric"}
)

# ---------------------------------------------------------------------------
# Explicit tables
# ---------------------------------------------------------------------------

_SINGLE_CODEPOINTS: dict[int, WordBreakProperty] = {
    0x000D: "CR",
    0x000A: "LF",
    0x000B: "Newline",
    0x000C: "Newline",
    0x0085: "Newline",
    0x2028: "Newline",
    0x2029: "Newline",
    0x200D: "ZWJ",
    0x200C: "Extend",
    0x0027: "Single_Quote",
    0x0022: "Double_Quote",
    # MidNumLet
    0x002E: "MidNumLet",
    0x2018: "MidNumLet",
    0x2019: "MidNumLet",
    0x2024: "MidNumLet",
    0xFE52: "MidNumLet",
    0xFF07: "MidNumLet",
    0xFF0E: "MidNumLet",
    # MidLetter
    0x003A: "MidLetter",
    0x00B7: "MidLetter",
    0x0387: "MidLetter",
    0x055F: "MidLetter",
    0x05F4: "MidLetter",
    0x2027: "MidLetter",
    0xFE13: "MidLetter",
    0xFE55: "MidLetter",
    0xFF1A: "MidLetter",
    # MidNum
    0x002C: "MidNum",
    0x003B: "MidNum",
    0x037E: "MidNum",
    0x0589: "MidNum",
    0x060C: "MidNum",
    0x060D: "MidNum",
    0x066C: "MidNum",
    0x07F8: "MidNum",
    0x2044: "MidNum",
    0xFE10: "MidNum",
    0xFE14: "MidNum",
    0xFE50: "MidNum",
    0xFE54: "MidNum",
    0xFF0C: "MidNum",
    0xFF1B: "MidNum",
    0x066B: "Numeric",
    0x202F: "ExtendNumLet",
}

_RANGES: tuple[tuple[int, int, WordBreakProperty], ...] = (
    (0x1F1E6, 0x1F1FF, "Regional_Indicator"),
    (0x1F3FB, 0x1F3FF, "Extend"),  # emoji skin tone modifiers
    (0x05D0, 0x05EA, "Hebrew_Letter"),
    (0x05EF, 0x05F2, "Hebrew_Letter"),
    (0xFB1D, 0xFB1D, "Hebrew_Letter"),
    (0xFB1F, 0xFB28, "Hebrew_Letter"),
    (0xFB2A, 0xFB4F, "Hebrew_Letter"),
    (0x3031, 0x3035, "Katakana"),
    (0x309B, 0x309C, "Katakana"),
    (0x30A0, 0x30FA, "Katakana"),
    (0x30FC, 0x30FF, "Katakana"),
    (0x31F0, 0x31FF, "Katakana"),
    (0x32D0, 0x32FE, "Katakana"),
    (0x3300, 0x3357, "Katakana"),
    (0xFF66, 0xFF9D, "Katakana"),
    (0x1B000, 0x1B000, "Katakana"),
)

# Spaces that do not break words.
_NO_BREAK_SPACES = frozenset({0x00A0, 0x2007, 0x202F})


def codepoint_to_word_break_property(codepoint: int) -> WordBreakProperty:
    """Return the word-break property of *codepoint*."""
    prop = _SINGLE_CODEPOINTS.get(codepoint)
    if prop is not None:
        return prop

    for low, high, range_prop in _RANGES:
        if low <= codepoint <= high:
            return range_prop

    try:
        category = unicodedata.category(chr(codepoint))
    except ValueError:
        return "Other"

    if category in ("Mn", "Me", "Mc"):
        return "Extend"
    if category == "Cf":
        return "Format"
    if category == "Nd":
        return "Numeric"
    if category == "Pc":
        return "ExtendNumLet"
    if category == "Zs":
        return "Other" if codepoint in _NO_BREAK_SPACES else "WSegSpace"
    # Ideographs and kana are grouped with letters so that runs of CJK text
    # behave as words.
    if category.startswith("L") or category == "Nl":
        return "ALetter"
    return "Other"


def is_word_codepoint(codepoint: int) -> bool:
    """Return ``True`` if *codepoint* takes part in a word.

    Extend, Format, ZWJ and Regional_Indicator are deliberately excluded:
    their boundary behaviour depends on context.
    """
    return codepoint_to_word_break_property(codepoint) in WORD_PROPERTIES


def is_word_character(buffer: Buffer, offset: int) -> bool:
    """Return ``True`` if the codepoint at *offset* in *buffer* is a word codepoint."""
    try:
        codepoint, _ = decode_codepoint(buffer, offset)
    except InvalidEncoding:
        return False
    return is_word_codepoint(codepoint)
