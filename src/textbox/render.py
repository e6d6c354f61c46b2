"""Projection of buffer + cursor into per-line render fragments.

Pure functions: nothing here writes back to the caller's state.  The
cursor is clamped locally for the duration of one projection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from textbox.codepoint import Buffer
from textbox.glyph import glyph_next
from textbox.lines import clamp_cursor, locate_cursor, split_lines
from textbox.utils import visible_width

# Shown in place of the cursor glyph when the cursor sits at end of line.
END_OF_LINE_CURSOR = " "


@dataclass
class LineFragment:
    """One rendered line, split around the cursor when it carries it."""

    before: str
    at_cursor: str = ""
    after: str = ""
    has_cursor: bool = False

    @property
    def text(self) -> str:
        return self.before + self.at_cursor + self.after


@dataclass
class Projection:
    lines: list[LineFragment] = field(default_factory=list)
    is_placeholder: bool = False
    cursor_line: int = 0
    cursor_column: int = 0


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def mask(data: bytes, password_char: str) -> str:
    """Replace every byte of *data* with *password_char*."""
    return password_char * len(data)


def _visible(data: bytes, password: bool, password_char: str) -> str:
    return mask(data, password_char) if password else _decode(data)


def project(
    content: Buffer,
    cursor: int,
    *,
    password: bool = False,
    password_char: str = "•",
    placeholder: str = "",
) -> Projection:
    """Split *content* into renderable lines with the cursor located.

    An empty buffer with a placeholder yields a single placeholder line and
    ``is_placeholder=True``; the placeholder carries no cursor glyph.
    """
    if not content and placeholder:
        return Projection(
            lines=[LineFragment(before=placeholder)],
            is_placeholder=True,
        )

    lines = split_lines(content) or [b""]
    cursor = clamp_cursor(content, cursor)
    cursor_line, index = locate_cursor(lines, cursor)

    fragments: list[LineFragment] = []
    cursor_column = 0
    for i, line in enumerate(lines):
        if i != cursor_line:
            fragments.append(LineFragment(before=_visible(line, password, password_char)))
            continue

        glyph_end = glyph_next(line, index) if index < len(line) else index
        before = _visible(line[:index], password, password_char)
        if glyph_end > index:
            at_cursor = _visible(line[index:glyph_end], password, password_char)
        else:
            at_cursor = END_OF_LINE_CURSOR
        after = _visible(line[glyph_end:], password, password_char)

        cursor_column = visible_width(before)

        fragments.append(
            LineFragment(
                before=before,
                at_cursor=at_cursor,
                after=after,
                has_cursor=True,
            )
        )

    return Projection(
        lines=fragments,
        is_placeholder=False,
        cursor_line=cursor_line,
        cursor_column=cursor_column,
    )
