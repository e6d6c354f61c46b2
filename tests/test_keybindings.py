"""Tests for textbox.keybindings -- text box keybindings manager."""

from __future__ import annotations

from textbox.keybindings import (
    DEFAULT_INPUT_KEYBINDINGS,
    InputKeybindingsManager,
    get_input_keybindings,
    set_input_keybindings,
)


class TestDefaultInputKeybindings:
    """DEFAULT_INPUT_KEYBINDINGS covers every text box action."""

    def test_has_cursor_movement_actions(self) -> None:
        for action in [
            "cursorUp", "cursorDown", "cursorLeft", "cursorRight",
            "cursorWordLeft", "cursorWordRight",
            "cursorLineStart", "cursorLineEnd",
        ]:
            assert action in DEFAULT_INPUT_KEYBINDINGS, f"Missing action: {action}"

    def test_has_edit_actions(self) -> None:
        assert "deleteCharBackward" in DEFAULT_INPUT_KEYBINDINGS
        assert "deleteCharForward" in DEFAULT_INPUT_KEYBINDINGS
        assert "submit" in DEFAULT_INPUT_KEYBINDINGS


class TestInputKeybindingsManager:
    """The manager resolves raw input to actions."""

    def test_default_match(self) -> None:
        kb = InputKeybindingsManager()
        assert kb.matches("\x1b[D", "cursorLeft")
        assert kb.matches("\x1b[1;5D", "cursorWordLeft")
        assert kb.matches("\r", "submit")

    def test_no_match(self) -> None:
        kb = InputKeybindingsManager()
        assert not kb.matches("a", "submit")

    def test_get_keys_normalises_single_key_to_list(self) -> None:
        kb = InputKeybindingsManager()
        assert kb.get_keys("submit") == ["enter"]

    def test_override_replaces_default(self) -> None:
        kb = InputKeybindingsManager({"submit": "ctrl+s"})
        assert kb.matches("\x13", "submit")
        assert not kb.matches("\r", "submit")

    def test_override_keeps_other_defaults(self) -> None:
        kb = InputKeybindingsManager({"submit": "ctrl+s"})
        assert kb.matches("\x7f", "deleteCharBackward")

    def test_resolve_returns_first_bound_action(self) -> None:
        kb = InputKeybindingsManager({"cursorLeft": ["left", "ctrl+left"]})
        assert kb.resolve("\x1b[1;5D", ["cursorWordLeft", "cursorLeft"]) == "cursorWordLeft"
        assert kb.resolve("\x1b[1;5D", ["cursorLeft", "cursorWordLeft"]) == "cursorLeft"
        assert kb.resolve("x", ["cursorLeft"]) is None

    def test_get_keys_returns_copy(self) -> None:
        kb = InputKeybindingsManager()
        kb.get_keys("submit").append("ctrl+s")
        assert kb.get_keys("submit") == ["enter"]

    def test_set_config(self) -> None:
        kb = InputKeybindingsManager()
        kb.set_config({"cursorLeft": ["ctrl+p"]})
        assert kb.matches("\x10", "cursorLeft")
        assert not kb.matches("\x1b[D", "cursorLeft")


class TestGlobalKeybindings:
    """get/set_input_keybindings manage a process-wide instance."""

    def test_get_returns_singleton(self) -> None:
        assert get_input_keybindings() is get_input_keybindings()

    def test_set_replaces_instance(self) -> None:
        custom = InputKeybindingsManager({"submit": "ctrl+s"})
        try:
            set_input_keybindings(custom)
            assert get_input_keybindings() is custom
        finally:
            set_input_keybindings(None)
        assert get_input_keybindings() is not custom
