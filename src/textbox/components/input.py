"""Input component - editable single/multi-line text box.

Edits a caller-owned UTF-8 buffer in place through a byte-offset cursor,
moving by glyphs so multi-byte, full-width and combining characters are
never split.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from textbox.codepoint import is_control
from textbox.events import InputEvent, event_for_input
from textbox.glyph import glyph_next, glyph_previous
from textbox.keybindings import InputKeybindingsManager, get_input_keybindings
from textbox.keys import is_key_release
from textbox.lines import LINE_BREAK, clamp_cursor, line_bounds
from textbox.options import InputOptions, InputState, RenderState, default_transform
from textbox.render import LineFragment, project
from textbox.utils import (
    CURSOR_MARKER,
    pad_to_width,
    take_columns,
    take_last_columns,
    visible_width,
)
from textbox.word_break import is_word_character

logger = logging.getLogger(__name__)

_PASTE_START = "\x1b[200~"
_PASTE_END = "\x1b[201~"


@dataclass
class Box:
    """A rectangle in cells, relative to the component's top-left corner."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class Input:
    """Text box over a caller-owned :class:`~textbox.options.InputState`.

    Every event handler re-clamps the cursor first, since the host may
    have edited the buffer since the last call.
    """

    def __init__(
        self,
        options: InputOptions | None = None,
        keybindings: InputKeybindingsManager | None = None,
    ) -> None:
        self.options = options if options is not None else InputOptions()
        self._keybindings = keybindings

        # Focusable interface
        self.focused: bool = False
        self.hovered: bool = False

        self.box = Box()
        self.cursor_box = Box()

        # Bracketed paste mode
        self._paste_buffer: str = ""
        self._is_in_paste: bool = False

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> InputState:
        return self.options.state

    @property
    def _content(self) -> bytearray:
        return self.options.state.content

    @property
    def _cursor(self) -> int:
        return self.options.state.cursor_position

    @_cursor.setter
    def _cursor(self, value: int) -> None:
        self.options.state.cursor_position = value

    def get_value(self) -> str:
        return self.state.text

    def set_value(self, value: str) -> None:
        self.state.set_text(value)

    def _clamp_cursor(self) -> None:
        self._cursor = clamp_cursor(self._content, self._cursor)

    def _notify_change(self) -> None:
        if self.options.on_change:
            self.options.on_change(self.state.text)

    # ------------------------------------------------------------------
    # Event intake
    # ------------------------------------------------------------------

    def on_event(self, event: InputEvent) -> bool:
        """Apply *event*; return ``True`` if it was consumed."""
        self._clamp_cursor()

        kind = event.kind
        if kind == "return":
            return self._handle_return()
        if kind == "character":
            return self._handle_character(event.text)
        if kind == "backspace":
            return self._handle_backspace()
        if kind == "delete":
            return self._handle_delete()
        if kind == "arrow_up":
            return self._handle_arrow_up()
        if kind == "arrow_down":
            return self._handle_arrow_down()
        if kind == "arrow_left":
            return self._handle_arrow_left()
        if kind == "arrow_right":
            return self._handle_arrow_right()
        if kind == "word_left":
            return self._handle_word_left()
        if kind == "word_right":
            return self._handle_word_right()
        if kind == "home":
            return self._handle_home()
        if kind == "end":
            return self._handle_end()
        return False

    def handle_input(self, data: str) -> bool:
        """Handle raw terminal input; return ``True`` if it was consumed."""
        if _PASTE_START in data:
            self._is_in_paste = True
            self._paste_buffer = ""
            data = data.replace(_PASTE_START, "")

        if self._is_in_paste:
            self._paste_buffer += data
            end_index = self._paste_buffer.find(_PASTE_END)
            if end_index == -1:
                return True
            pasted = self._paste_buffer[:end_index]
            remaining = self._paste_buffer[end_index + len(_PASTE_END):]
            self._is_in_paste = False
            self._paste_buffer = ""
            self._handle_paste(pasted)
            if remaining:
                self.handle_input(remaining)
            return True

        if is_key_release(data):
            return False

        kb = self._keybindings or get_input_keybindings()
        event = event_for_input(data, kb)
        if event is None:
            logger.debug("ignoring unbound input %r", data)
            return False
        return self.on_event(event)

    def _handle_paste(self, pasted: str) -> None:
        text = pasted.replace("\r\n", "\n").replace("\r", "\n")
        if not self.options.multiline:
            text = text.replace("\n", "")
        text = "".join(ch for ch in text if ch in "\n\t" or not is_control(ord(ch)))
        if text:
            self.on_event(InputEvent.character(text))

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def _delete_forward(self) -> bool:
        """Remove the glyph under the cursor without notifying."""
        start = self._cursor
        if start >= len(self._content):
            return False
        end = glyph_next(self._content, start)
        if end == start:
            logger.debug("delete refused at byte %d: undecodable content", start)
            return False
        del self._content[start:end]
        return True

    def _handle_character(self, character: str) -> bool:
        """Insert *character* one codepoint at a time.

        The length limit is checked before each codepoint, so a paste
        stops once the content reaches ``max_length``.  ``on_change``
        fires once for the whole text.
        """
        if not character:
            return False
        options = self.options
        content = self._content

        changed = False
        for ch in character:
            if options.max_length is not None and len(content) >= options.max_length:
                logger.debug("insert dropped: content at max length %d", options.max_length)
                break
            if (
                not options.insert
                and self._cursor < len(content)
                and content[self._cursor] != LINE_BREAK
            ):
                self._delete_forward()

            data = ch.encode("utf-8")
            cursor = self._cursor
            content[cursor:cursor] = data
            self._cursor = cursor + len(data)
            changed = True

        if changed:
            self._notify_change()
        return True

    def _handle_delete(self) -> bool:
        if not self._delete_forward():
            return False
        self._notify_change()
        return True

    def _handle_backspace(self) -> bool:
        end = self._cursor
        if end == 0:
            return False
        start = glyph_previous(self._content, end)
        del self._content[start:end]
        self._cursor = start
        self._notify_change()
        return True

    def _handle_return(self) -> bool:
        if self.options.multiline:
            self._handle_character("\n")
        if self.options.on_submit:
            self.options.on_submit(self.state.text)
        return True

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------

    def _handle_arrow_up(self) -> bool:
        # No vertical movement here: a wrapping container owns it.  At the
        # very end of the buffer the event is left for the container.
        return self._cursor != len(self._content)

    def _handle_arrow_down(self) -> bool:
        return self._cursor != len(self._content)

    def _handle_arrow_left(self) -> bool:
        if self._cursor == 0:
            return False
        self._cursor = glyph_previous(self._content, self._cursor)
        return True

    def _handle_arrow_right(self) -> bool:
        if self._cursor == len(self._content):
            return False
        self._cursor = glyph_next(self._content, self._cursor)
        return True

    def _handle_word_left(self) -> bool:
        content = self._content
        if self._cursor == 0:
            return False

        # Skip non-word glyphs, then the word itself.
        while self._cursor:
            previous = glyph_previous(content, self._cursor)
            if is_word_character(content, previous):
                break
            self._cursor = previous
        while self._cursor:
            previous = glyph_previous(content, self._cursor)
            if not is_word_character(content, previous):
                break
            self._cursor = previous
        return True

    def _handle_word_right(self) -> bool:
        content = self._content
        size = len(content)
        if self._cursor == size:
            return False

        # Move until entering a word, then to its end.
        while self._cursor < size:
            nxt = glyph_next(content, self._cursor)
            if nxt == self._cursor:
                break
            self._cursor = nxt
            if is_word_character(content, self._cursor):
                break
        while self._cursor < size:
            if not is_word_character(content, self._cursor):
                break
            nxt = glyph_next(content, self._cursor)
            if nxt == self._cursor:
                break
            self._cursor = nxt
        return True

    def _handle_home(self) -> bool:
        start, _ = line_bounds(self._content, self._cursor)
        self._cursor = start
        return True

    def _handle_end(self) -> bool:
        _, end = line_bounds(self._content, self._cursor)
        self._cursor = end
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, width: int) -> list[str]:
        options = self.options
        state = options.state
        width = max(1, width)

        projection = project(
            state.content,
            state.cursor_position,
            password=options.password,
            password_char=options.password_char,
            placeholder=options.placeholder,
        )

        marker = CURSOR_MARKER if self.focused else ""
        show_cursor = self.focused or self.hovered
        lines: list[str] = []

        if projection.is_placeholder:
            placeholder = take_columns(projection.lines[0].text, width)
            lines.append(pad_to_width(marker + placeholder, width))
            self.cursor_box = Box(0, 0, 1, 1)
        else:
            for row, fragment in enumerate(projection.lines):
                if not fragment.has_cursor:
                    lines.append(pad_to_width(take_columns(fragment.text, width), width))
                    continue

                before, at_cursor, after = _fit_cursor_line(fragment, width)
                scrolled = visible_width(fragment.before) - visible_width(before)
                if show_cursor and at_cursor:
                    cursor_text = options.theme.cursor(at_cursor)
                else:
                    cursor_text = at_cursor
                lines.append(pad_to_width(before + marker + cursor_text + after, width))
                self.cursor_box = Box(
                    projection.cursor_column - scrolled,
                    row,
                    max(1, visible_width(at_cursor)),
                    1,
                )

        transform = options.transform or default_transform
        result = transform(
            RenderState(
                element=lines,
                hovered=self.hovered,
                focused=self.focused,
                is_placeholder=projection.is_placeholder,
                theme=options.theme,
            )
        )
        self.box = Box(0, 0, width, len(result))
        return result


def _fit_cursor_line(fragment: LineFragment, width: int) -> tuple[str, str, str]:
    """Scroll the cursor line horizontally so the cursor glyph stays visible.

    A cursor glyph wider than the line is dropped along with the rest of
    the line.
    """
    before, at_cursor, after = fragment.before, fragment.at_cursor, fragment.after
    cursor_width = max(1, visible_width(at_cursor))
    if cursor_width > width:
        return "", "", ""
    if visible_width(before) + cursor_width + visible_width(after) <= width:
        return before, at_cursor, after

    before = take_last_columns(before, width - cursor_width)
    after = take_columns(after, width - visible_width(before) - cursor_width)
    return before, at_cursor, after
