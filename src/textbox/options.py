"""Configuration and caller-owned state for the text box."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass
class InputState:
    """Caller-owned storage: the UTF-8 content and the cursor byte offset.

    The text box mutates this object in place and never keeps a copy, so
    the host stays the single source of truth and may edit it between
    calls.
    """

    content: bytearray = field(default_factory=bytearray)
    cursor_position: int = 0

    @classmethod
    def from_text(cls, text: str, cursor_position: int | None = None) -> InputState:
        content = bytearray(text.encode("utf-8"))
        cursor = len(content) if cursor_position is None else cursor_position
        return cls(content=content, cursor_position=cursor)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def set_text(self, text: str) -> None:
        """Replace the content in place, keeping the cursor within bounds."""
        self.content[:] = text.encode("utf-8")
        self.cursor_position = min(self.cursor_position, len(self.content))


def _reverse(text: str) -> str:
    return f"\x1b[7m{text}\x1b[27m"


def _dim(text: str) -> str:
    return f"\x1b[2m{text}\x1b[22m"


@dataclass
class InputTheme:
    """Styling functions applied while rendering."""

    cursor: Callable[[str], str] = _reverse
    placeholder: Callable[[str], str] = _dim


@dataclass
class RenderState:
    """What the render-transform hook receives."""

    element: list[str]
    hovered: bool
    focused: bool
    is_placeholder: bool
    theme: InputTheme = field(default_factory=InputTheme)


def default_transform(state: RenderState) -> list[str]:
    """Dim the placeholder; leave edited text untouched."""
    if state.is_placeholder:
        return [state.theme.placeholder(line) for line in state.element]
    return state.element


@dataclass
class InputOptions:
    """Options for :class:`~textbox.components.input.Input`.

    Values are read on every call; the host may change them at any time.
    ``max_length`` counts bytes of UTF-8 content, ``None`` means unlimited.
    ``insert=False`` selects overwrite mode.
    """

    state: InputState = field(default_factory=InputState)
    multiline: bool = False
    insert: bool = True
    password: bool = False
    password_char: str = "•"
    max_length: int | None = None
    placeholder: str = ""
    transform: Callable[[RenderState], list[str]] | None = None
    on_change: Callable[[str], None] | None = None
    on_submit: Callable[[str], None] | None = None
    theme: InputTheme = field(default_factory=InputTheme)
