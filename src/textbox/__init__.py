"""textbox: Unicode-aware editable text box engine for terminal UIs."""

# Codepoints
from textbox.codepoint import InvalidEncoding, decode_codepoint, is_control

# Components
from textbox.components import Box, Input

# Events
from textbox.events import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    BACKSPACE,
    DELETE,
    END,
    HOME,
    RETURN,
    WORD_LEFT,
    WORD_RIGHT,
    EventKind,
    InputEvent,
    event_for_input,
)

# Glyphs
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

# Keybindings
from textbox.keybindings import (
    DEFAULT_INPUT_KEYBINDINGS,
    InputAction,
    InputKeybindingsManager,
    get_input_keybindings,
    set_input_keybindings,
)

# Keyboard input handling
from textbox.keys import Key, KeyId, is_key_release, matches_key, parse_key

# Lines
from textbox.lines import clamp_cursor, line_bounds, locate_cursor, split_lines

# Options and state
from textbox.options import (
    InputOptions,
    InputState,
    InputTheme,
    RenderState,
    default_transform,
)

# Rendering
from textbox.render import LineFragment, Projection, mask, project

# Utilities
from textbox.utils import CURSOR_MARKER, visible_width

# Word breaks
from textbox.word_break import (
    WordBreakProperty,
    codepoint_to_word_break_property,
    is_word_character,
    is_word_codepoint,
)

__all__ = [
    # Codepoints
    "InvalidEncoding",
    "decode_codepoint",
    "is_control",
    # Components
    "Box",
    "Input",
    # Events
    "ARROW_DOWN",
    "ARROW_LEFT",
    "ARROW_RIGHT",
    "ARROW_UP",
    "BACKSPACE",
    "DELETE",
    "END",
    "HOME",
    "RETURN",
    "WORD_LEFT",
    "WORD_RIGHT",
    "EventKind",
    "InputEvent",
    "event_for_input",
    # Glyphs
    "Glyph",
    "glyph_next",
    "glyph_previous",
    "glyph_width",
    "is_combining",
    "is_full_width",
    "iter_glyphs",
    "text_columns",
    # Keybindings
    "DEFAULT_INPUT_KEYBINDINGS",
    "InputAction",
    "InputKeybindingsManager",
    "get_input_keybindings",
    "set_input_keybindings",
    # Keys
    "Key",
    "KeyId",
    "is_key_release",
    "matches_key",
    "parse_key",
    # Lines
    "clamp_cursor",
    "line_bounds",
    "locate_cursor",
    "split_lines",
    # Options
    "InputOptions",
    "InputState",
    "InputTheme",
    "RenderState",
    "default_transform",
    # Rendering
    "LineFragment",
    "Projection",
    "mask",
    "project",
    # Utilities
    "CURSOR_MARKER",
    "visible_width",
    # Word breaks
    "WordBreakProperty",
    "codepoint_to_word_break_property",
    "is_word_character",
    "is_word_codepoint",
]
