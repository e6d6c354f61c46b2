"""Terminal width helpers for rendered text box lines.

Measures visible widths (ignoring ANSI / APC sequences) and cuts strings
to a number of columns at grapheme boundaries.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth

# Zero-width marker a host TUI uses to place the hardware cursor.
CURSOR_MARKER = "\x1b_tb:c\x07"

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"        # CSI
    r"|\x1b\]8;;[^\x07]*\x07"       # OSC 8
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0

    first = g[0]
    cp = ord(first)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0

    if len(g) > 1:
        for ch in g:
            code = ord(ch)
            # VS16 / ZWJ / regional indicators force emoji presentation
            if code in (0xFE0F, 0x200D) or 0x1F1E6 <= code <= 0x1F1FF:
                return 2
        if unicodedata.category(first).startswith("M"):
            return 0

    return max(_wcwidth.wcwidth(first), 0)


def _column_width(g: str) -> int:
    # Tabs render as three columns, matching visible_width.
    return 3 if g == "\t" else grapheme_width(g)


def strip_ansi(text: str) -> str:
    """Remove CSI, OSC 8 and APC sequences from *text*."""
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    Escape sequences do not count and tabs count as 3 columns.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0
    stripped = stripped.replace("\t", "   ")

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def take_columns(text: str, max_cols: int) -> str:
    """Return the longest prefix of plain *text* fitting in *max_cols* columns."""
    if max_cols <= 0:
        return ""
    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = _column_width(g)
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
    return "".join(result)


def take_last_columns(text: str, max_cols: int) -> str:
    """Return the longest suffix of plain *text* fitting in *max_cols* columns."""
    if max_cols <= 0:
        return ""
    result: list[str] = []
    cols = 0
    for g in reversed(list(grapheme.graphemes(text))):
        w = _column_width(g)
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
    return "".join(reversed(result))


def pad_to_width(line: str, width: int) -> str:
    """Right-pad *line* with spaces to *width* visible columns."""
    return line + " " * max(0, width - visible_width(line))
