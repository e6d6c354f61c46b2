"""Glyph navigation over UTF-8 byte buffers.

A glyph is one width-bearing codepoint together with the zero-width
combining codepoints that follow it.  Offsets are byte offsets; every
function here degrades to a no-op on malformed input instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

import wcwidth as _wcwidth

from textbox.codepoint import Buffer, InvalidEncoding, decode_codepoint, is_control

logger = logging.getLogger(__name__)

# Longest UTF-8 sequence, in bytes.
_MAX_SEQUENCE = 4


@dataclass(frozen=True)
class Glyph:
    """A ``[start, end)`` byte span of one glyph and its display width."""

    start: int
    end: int
    width: int


def is_full_width(codepoint: int) -> bool:
    """Return ``True`` if *codepoint* occupies two terminal columns."""
    return _wcwidth.wcwidth(chr(codepoint)) == 2


def is_combining(codepoint: int) -> bool:
    """Return ``True`` for zero-width codepoints that attach to the previous glyph."""
    if is_control(codepoint):
        return False
    return _wcwidth.wcwidth(chr(codepoint)) == 0


def _codepoint_at(buffer: Buffer, offset: int) -> int | None:
    try:
        codepoint, _ = decode_codepoint(buffer, offset)
    except InvalidEncoding:
        return None
    return codepoint


def _codepoint_start_before(buffer: Buffer, offset: int) -> int:
    """Return the start of the longest valid codepoint ending exactly at *offset*.

    Falls back to ``offset - 1`` when no candidate decodes to *offset*.
    """
    found: int | None = None
    for start in range(offset - 1, max(offset - _MAX_SEQUENCE, 0) - 1, -1):
        try:
            _, end = decode_codepoint(buffer, start)
        except InvalidEncoding:
            continue
        if end == offset:
            found = start
    if found is None:
        logger.debug("no codepoint ends at byte %d, stepping back one byte", offset)
        return offset - 1
    return found


def glyph_next(buffer: Buffer, offset: int) -> int:
    """Return the byte offset just past the glyph starting at *offset*.

    Returns *offset* unchanged when nothing decodes there.
    """
    size = len(buffer)
    if offset >= size:
        return size
    offset = max(offset, 0)

    try:
        codepoint, end = decode_codepoint(buffer, offset)
    except InvalidEncoding as exc:
        logger.debug("glyph_next stopped: %s", exc)
        return offset

    # Line breaks and other controls never carry combining marks.
    if is_control(codepoint):
        return end

    while end < size:
        following = _codepoint_at(buffer, end)
        if following is None or not is_combining(following):
            break
        _, end = decode_codepoint(buffer, end)
    return end


def glyph_previous(buffer: Buffer, offset: int) -> int:
    """Return the byte offset where the glyph ending at *offset* starts."""
    if offset <= 0:
        return 0
    offset = min(offset, len(buffer))

    start = _codepoint_start_before(buffer, offset)
    while start > 0:
        codepoint = _codepoint_at(buffer, start)
        if codepoint is None or not is_combining(codepoint):
            break
        previous = _codepoint_start_before(buffer, start)
        base = _codepoint_at(buffer, previous)
        # Controls and undecodable bytes never carry marks.
        if base is None or is_control(base):
            break
        start = previous
    return start


def glyph_width(buffer: Buffer, offset: int) -> int:
    """Display width of the glyph at *offset*: 2 if full width, 1 otherwise, 0 if undecodable."""
    codepoint = _codepoint_at(buffer, offset)
    if codepoint is None:
        return 0
    return 2 if is_full_width(codepoint) else 1


def iter_glyphs(buffer: Buffer, start: int = 0, end: int | None = None) -> Iterator[Glyph]:
    """Yield the glyphs of ``buffer[start:end]`` in order.

    An undecodable byte is yielded as a one-byte glyph of width 0 so that
    iteration always makes progress.
    """
    stop = len(buffer) if end is None else min(end, len(buffer))
    offset = max(start, 0)
    while offset < stop:
        nxt = glyph_next(buffer, offset)
        if nxt == offset:
            yield Glyph(offset, offset + 1, 0)
            offset += 1
            continue
        nxt = min(nxt, stop)
        yield Glyph(offset, nxt, glyph_width(buffer, offset))
        offset = nxt


def text_columns(buffer: Buffer, start: int = 0, end: int | None = None) -> int:
    """Total display width of ``buffer[start:end]`` in terminal columns."""
    return sum(glyph.width for glyph in iter_glyphs(buffer, start, end))
