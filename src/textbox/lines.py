"""Logical line handling for the text buffer.

Lines are never stored: they are recomputed from the buffer whenever they
are needed so they cannot go stale.
"""

from __future__ import annotations

from textbox.codepoint import Buffer
from textbox.glyph import glyph_next, glyph_previous

LINE_BREAK = 0x0A


def split_lines(buffer: Buffer) -> list[bytes]:
    """Split *buffer* on ``\\n``.

    An empty buffer yields no lines.  A buffer ending in ``\\n`` yields a
    trailing empty line, so ``b"\\n".join(split_lines(b))`` is always ``b``.
    """
    if not buffer:
        return []
    return bytes(buffer).split(b"\n")


def locate_cursor(lines: list[bytes], cursor: int) -> tuple[int, int]:
    """Return ``(line_index, byte_offset_in_line)`` for a buffer offset."""
    line_index = 0
    remainder = cursor
    for line in lines:
        if remainder <= len(line):
            break
        remainder -= len(line) + 1
        line_index += 1
    return line_index, remainder


def line_bounds(buffer: Buffer, offset: int) -> tuple[int, int]:
    """Return the ``[start, end)`` byte range of the logical line containing *offset*.

    *end* is the offset of the terminating ``\\n`` (or ``len(buffer)``).
    """
    data = bytes(buffer)
    offset = max(0, min(offset, len(data)))
    start = data.rfind(b"\n", 0, offset) + 1
    end = data.find(b"\n", offset)
    if end == -1:
        end = len(data)
    return start, end


def clamp_cursor(buffer: Buffer, cursor: int) -> int:
    """Clamp *cursor* into ``[0, len(buffer)]`` and onto a glyph boundary.

    A cursor left between a base character and its combining marks moves
    back to the start of that glyph.
    """
    cursor = max(0, min(cursor, len(buffer)))
    # Step back off UTF-8 continuation bytes (0b10xxxxxx), at most three.
    steps = 0
    while steps < 3 and 0 < cursor < len(buffer) and (buffer[cursor] & 0xC0) == 0x80:
        cursor -= 1
        steps += 1
    if 0 < cursor < len(buffer):
        end = glyph_next(buffer, cursor)
        if end > cursor:
            cursor = glyph_previous(buffer, end)
    return cursor
