"""A single-line text input box."""

from __future__ import annotations

from typing import Union

from .sprite import Rect

OUTLINE_THICKNESS = 2
BACKSPACE = 8


class TextField:
    """An editable box that accepts printable ASCII characters."""

    def __init__(self, size: tuple[float, float], position: tuple[float, float]) -> None:
        self.size = size
        self.position = position
        self.is_active = False
        self.text = ""
        width, height = size
        x, y = position
        self._bounds = Rect(
            x - OUTLINE_THICKNESS,
            y - OUTLINE_THICKNESS,
            width + 2 * OUTLINE_THICKNESS,
            height + 2 * OUTLINE_THICKNESS,
        )

    def handle_input(self, code: Union[int, str]) -> None:
        """Apply one typed character: backspace deletes, printable ASCII appends."""
        if isinstance(code, str):
            code = ord(code)
        if code == BACKSPACE and self.text:
            self.text = self.text[:-1]
        elif 31 < code < 128:
            self.text += chr(code)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point falls on the box, outline included."""
        return self._bounds.contains(x, y)