"""Text box components."""

from textbox.components.input import Box, Input

__all__ = [
    "Box",
    "Input",
]
