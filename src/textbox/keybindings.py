"""Text box keybindings manager."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from textbox.keys import KeyId, matches_key

InputAction = Literal[
    # Cursor movement
    "cursorUp",
    "cursorDown",
    "cursorLeft",
    "cursorRight",
    "cursorWordLeft",
    "cursorWordRight",
    "cursorLineStart",
    "cursorLineEnd",
    # Deletion
    "deleteCharBackward",
    "deleteCharForward",
    # Text input
    "submit",
]

InputKeybindingsConfig = dict[InputAction, KeyId | list[KeyId]]

DEFAULT_INPUT_KEYBINDINGS: dict[InputAction, KeyId | list[KeyId]] = {
    # Cursor movement
    "cursorUp": "up",
    "cursorDown": "down",
    "cursorLeft": ["left", "ctrl+b"],
    "cursorRight": ["right", "ctrl+f"],
    "cursorWordLeft": ["alt+left", "ctrl+left", "alt+b"],
    "cursorWordRight": ["alt+right", "ctrl+right", "alt+f"],
    "cursorLineStart": ["home", "ctrl+a"],
    "cursorLineEnd": ["end", "ctrl+e"],
    # Deletion
    "deleteCharBackward": "backspace",
    "deleteCharForward": ["delete", "ctrl+d"],
    # Text input
    "submit": "enter",
}


def _as_list(keys: KeyId | list[KeyId]) -> list[KeyId]:
    return list(keys) if isinstance(keys, list) else [keys]


class InputKeybindingsManager:
    """Maps raw terminal input to text box actions.

    A user config replaces the default keys of each action it names and
    leaves the other actions bound as in :data:`DEFAULT_INPUT_KEYBINDINGS`.
    """

    def __init__(self, config: InputKeybindingsConfig | None = None) -> None:
        self._bindings: dict[InputAction, list[KeyId]] = {}
        self.set_config(config or {})

    def set_config(self, config: InputKeybindingsConfig) -> None:
        """Replace the user configuration."""
        merged = {**DEFAULT_INPUT_KEYBINDINGS, **config}
        self._bindings = {action: _as_list(keys) for action, keys in merged.items()}

    def matches(self, data: str, action: InputAction) -> bool:
        """Check if input matches a specific action."""
        return any(matches_key(data, key) for key in self._bindings.get(action, ()))

    def resolve(self, data: str, actions: Iterable[InputAction]) -> InputAction | None:
        """Return the first of *actions* bound to *data*, or ``None``."""
        for action in actions:
            if self.matches(data, action):
                return action
        return None

    def get_keys(self, action: InputAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return list(self._bindings.get(action, []))


_global_input_keybindings: InputKeybindingsManager | None = None


def get_input_keybindings() -> InputKeybindingsManager:
    global _global_input_keybindings
    if _global_input_keybindings is None:
        _global_input_keybindings = InputKeybindingsManager()
    return _global_input_keybindings


def set_input_keybindings(manager: InputKeybindingsManager | None) -> None:
    """Install *manager* process-wide; ``None`` restores the defaults on next use."""
    global _global_input_keybindings
    _global_input_keybindings = manager
