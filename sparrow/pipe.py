"""Obstacles that scroll from the right edge of the window to the left."""

from __future__ import annotations

import copy as _copy
import dataclasses
from typing import Optional

from .sprite import Mask, Sprite

START_X = 600
FLOOR_Y = 760
SCROLL_STEP = 2

PIPE_SIZES: dict[str, tuple[int, int]] = {
    "flag": (100, 240),
    "mother": (100, 250),
    "veza": (90, 260),
    "korona": (150, 250),
    "lavra": (300, 200),
    "zoloti": (250, 140),
    "triumf": (170, 250),
    "palaz": (400, 120),
    "kse": (240, 230),
    "kmda": (280, 190),
    "hymera": (240, 180),
    "arka": (250, 150),
    "river": (330, 180),
}

_SOLID = Mask.from_rows(["#"])


class Pipe:
    """A landmark hanging from the top or standing on the ground."""

    def __init__(self, kind: str, is_top: bool, mask: Optional[Mask] = None) -> None:
        if mask is None:
            mask = _SOLID
        self.kind = kind
        self.is_top = is_top
        self.scored = False
        self.x = START_X
        width, height = PIPE_SIZES.get(kind, (mask.width, mask.height))
        self.y = 0 if is_top else int(FLOOR_Y - height)
        self.sprite = Sprite(mask, self.x, self.y, float(width), float(height))

    def update_position(self) -> None:
        """Scroll one step to the left."""
        self.x -= SCROLL_STEP
        self.sprite.x = self.x
        self.sprite.y = self.y

    def is_off_screen(self) -> bool:
        return self.x + self.sprite.width < 0

    def copy(self) -> Pipe:
        """An independent pipe with the same look, place and state."""
        twin = _copy.copy(self)
        twin.sprite = dataclasses.replace(self.sprite)
        return twin