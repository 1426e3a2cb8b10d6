"""The player's bird: gravity, flapping and collisions."""

from __future__ import annotations

from typing import Optional, Sequence

from .sprite import Mask, Sprite, pixel_perfect_collision

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 800
BIRD_SIZE = 100.0
START_X = 100
START_Y = 100
GRAVITY = 1
LIFT = -13
TICK_PERIOD = 13
FALLING_SPEED = 13
WING_UP_TICK = 7

_SOLID = Mask.from_rows(["#"])


class Bird:
    """A sprite pulled down by gravity that can flap upwards.

    The three masks are the wings-down frame, the gliding frame and the
    wings-up frame, in that order.
    """

    def __init__(self, masks: Optional[Sequence[Mask]] = None) -> None:
        if masks is None:
            masks = (_SOLID, _SOLID, _SOLID)
        if len(masks) != 3:
            raise ValueError("a bird needs exactly three frames")
        self.masks = tuple(masks)
        self.speed = 0
        self.x = START_X
        self.y = START_Y
        self.tick = 0
        self.sprite = Sprite(self.masks[0], self.x, self.y, BIRD_SIZE, BIRD_SIZE)

    def reset(self) -> None:
        self.x = START_X
        self.y = START_Y
        self.sprite.mask = self.masks[1]
        self._place()
        self.speed = 0

    def flap(self) -> None:
        self.speed = LIFT

    def update_position(self) -> None:
        """Advance one frame of falling, keeping the bird within the window."""
        self.tick = (self.tick + 1) % TICK_PERIOD
        self.speed += GRAVITY
        self.y = min(max(self.y + self.speed, 0), WINDOW_HEIGHT)
        self._place()

    def collides_with_borders(self) -> bool:
        bounds = self.sprite.bounds()
        return bounds.top <= 0 or bounds.bottom >= WINDOW_HEIGHT

    def collides_with(self, other: Sprite) -> bool:
        return pixel_perfect_collision(self.sprite, other)

    def set_sprite(self) -> None:
        """Pick the animation frame for the current speed and tick."""
        if self.speed > FALLING_SPEED:
            self.sprite.mask = self.masks[1]
        elif self.tick >= WING_UP_TICK:
            self.sprite.mask = self.masks[0]
        else:
            self.sprite.mask = self.masks[2]

    def _place(self) -> None:
        self.sprite.x = self.x
        self.sprite.y = self.y