"""Input events consumed by the text box."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from textbox.keybindings import InputAction, InputKeybindingsManager, get_input_keybindings
from textbox.keys import decode_printable

EventKind = Literal[
    "character",
    "return",
    "backspace",
    "delete",
    "arrow_up",
    "arrow_down",
    "arrow_left",
    "arrow_right",
    "word_left",
    "word_right",
    "home",
    "end",
]


@dataclass(frozen=True)
class InputEvent:
    """A discriminated input event; ``text`` is only meaningful for characters."""

    kind: EventKind
    text: str = ""

    @classmethod
    def character(cls, text: str) -> InputEvent:
        return cls("character", text)

    @property
    def is_character(self) -> bool:
        return self.kind == "character"


RETURN = InputEvent("return")
BACKSPACE = InputEvent("backspace")
DELETE = InputEvent("delete")
ARROW_UP = InputEvent("arrow_up")
ARROW_DOWN = InputEvent("arrow_down")
ARROW_LEFT = InputEvent("arrow_left")
ARROW_RIGHT = InputEvent("arrow_right")
WORD_LEFT = InputEvent("word_left")
WORD_RIGHT = InputEvent("word_right")
HOME = InputEvent("home")
END = InputEvent("end")

# Checked in order; the first matching action wins.
_ACTION_EVENTS: dict[InputAction, InputEvent] = {
    "submit": RETURN,
    "deleteCharBackward": BACKSPACE,
    "deleteCharForward": DELETE,
    "cursorWordLeft": WORD_LEFT,
    "cursorWordRight": WORD_RIGHT,
    "cursorLeft": ARROW_LEFT,
    "cursorRight": ARROW_RIGHT,
    "cursorUp": ARROW_UP,
    "cursorDown": ARROW_DOWN,
    "cursorLineStart": HOME,
    "cursorLineEnd": END,
}


def has_control_chars(data: str) -> bool:
    """Return ``True`` if *data* contains C0/C1 control characters or DEL."""
    return any(
        ord(ch) < 32 or ord(ch) == 0x7F or 0x80 <= ord(ch) <= 0x9F
        for ch in data
    )


def event_for_input(
    data: str,
    keybindings: InputKeybindingsManager | None = None,
) -> InputEvent | None:
    """Translate raw terminal input into an :class:`InputEvent`.

    Returns ``None`` for input the text box has no event for (unbound
    shortcuts, stray escape sequences).
    """
    if not data:
        return None
    kb = keybindings or get_input_keybindings()

    action = kb.resolve(data, _ACTION_EVENTS)
    if action is not None:
        return _ACTION_EVENTS[action]

    printable = decode_printable(data)
    if printable is not None:
        return InputEvent.character(printable)

    if not has_control_chars(data):
        return InputEvent.character(data)
    return None
