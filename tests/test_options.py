"""Tests for text box options, state and themes."""

from __future__ import annotations

from textbox.options import (
    InputOptions,
    InputState,
    InputTheme,
    RenderState,
    default_transform,
)


class TestInputState:
    """InputState is the caller-owned buffer and cursor."""

    def test_defaults(self) -> None:
        state = InputState()
        assert state.content == bytearray()
        assert state.cursor_position == 0

    def test_from_text_puts_cursor_at_end(self) -> None:
        state = InputState.from_text("世a")
        assert state.content == "世a".encode()
        assert state.cursor_position == 4

    def test_from_text_explicit_cursor(self) -> None:
        assert InputState.from_text("abc", 1).cursor_position == 1

    def test_text_replaces_invalid_bytes(self) -> None:
        state = InputState(content=bytearray(b"a\xff"))
        assert state.text == "a\ufffd"

    def test_set_text_is_in_place(self) -> None:
        state = InputState.from_text("hello")
        content = state.content
        state.set_text("hi")
        assert state.content is content
        assert state.content == b"hi"
        assert state.cursor_position == 2

    def test_set_text_keeps_cursor_when_in_range(self) -> None:
        state = InputState.from_text("hello", 1)
        state.set_text("world")
        assert state.cursor_position == 1


class TestInputOptions:
    def test_defaults(self) -> None:
        options = InputOptions()
        assert options.insert is True
        assert options.multiline is False
        assert options.password is False
        assert options.max_length is None
        assert options.on_change is None
        assert options.on_submit is None
        assert options.transform is None

    def test_each_instance_has_its_own_state(self) -> None:
        assert InputOptions().state is not InputOptions().state


class TestThemeAndTransform:
    """The default theme styles the cursor and placeholder."""

    def test_default_cursor_is_reverse_video(self) -> None:
        assert InputTheme().cursor("x") == "\x1b[7mx\x1b[27m"

    def test_default_placeholder_is_dim(self) -> None:
        assert InputTheme().placeholder("x") == "\x1b[2mx\x1b[22m"

    def test_default_transform_dims_placeholder(self) -> None:
        state = RenderState(element=["hint"], hovered=False, focused=False, is_placeholder=True)
        assert default_transform(state) == ["\x1b[2mhint\x1b[22m"]

    def test_default_transform_leaves_content(self) -> None:
        state = RenderState(element=["text"], hovered=True, focused=True, is_placeholder=False)
        assert default_transform(state) == ["text"]
