"""Rectangles, alpha masks and sprites with pixel-perfect collision tests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import product
from typing import Iterable, Optional, Sequence, Union

_TRANSPARENT_CHARS = frozenset(" .")


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersection(self, other: Rect) -> Optional[Rect]:
        """Return the overlapping area, or None when the rectangles do not overlap."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; left and top edges are inclusive."""
        return self.left <= x < self.right and self.top <= y < self.bottom


Cell = Union[str, int, bool]


@dataclass(frozen=True)
class Mask:
    """Per-pixel alpha values of an image, row by row."""

    alphas: tuple[tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Union[str, Sequence[Cell]]]) -> Mask:
        """Build a mask from rows of alpha values, booleans or characters.

        In a string row a space or a dot is transparent; any other character
        is fully opaque.
        """
        built = tuple(tuple(_alpha_of(cell) for cell in row) for row in rows)
        if len({len(row) for row in built}) > 1:
            raise ValueError("all rows of a mask must have the same length")
        return cls(built)

    @property
    def width(self) -> int:
        return len(self.alphas[0]) if self.alphas else 0

    @property
    def height(self) -> int:
        return len(self.alphas)

    def alpha(self, x: int, y: int) -> int:
        """Alpha at a pixel; pixels outside the mask are transparent."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.alphas[y][x]
        return 0

    def opaque(self, x: int, y: int) -> bool:
        return self.alpha(x, y) > 0


def _alpha_of(cell: Cell) -> int:
    if isinstance(cell, str):
        return 0 if cell in _TRANSPARENT_CHARS else 255
    if isinstance(cell, bool):
        return 255 if cell else 0
    if not 0 <= cell <= 255:
        raise ValueError(f"alpha out of range: {cell}")
    return int(cell)


@dataclass
class Sprite:
    """A mask drawn at a position and stretched to a displayed size."""

    mask: Mask
    x: float = 0.0
    y: float = 0.0
    width: Optional[float] = field(default=None)
    height: Optional[float] = field(default=None)

    def __post_init__(self) -> None:
        if self.width is None:
            self.width = float(self.mask.width)
        if self.height is None:
            self.height = float(self.mask.height)

    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def alpha_at(self, x: int, y: int) -> int:
        """Alpha of the mask pixel drawn at the given window coordinates."""
        scale_x = self.width / self.mask.width if self.mask.width else 1.0
        scale_y = self.height / self.mask.height if self.mask.height else 1.0
        local_x = int(int(x - self.x) / scale_x)
        local_y = int(int(y - self.y) / scale_y)
        return self.mask.alpha(local_x, local_y)


def pixel_perfect_collision(first: Sprite, second: Sprite) -> bool:
    """Whether two sprites share a pixel that is opaque in both."""
    overlap = first.bounds().intersection(second.bounds())
    if overlap is None:
        return False
    xs = range(int(overlap.left), math.ceil(overlap.right))
    ys = range(int(overlap.top), math.ceil(overlap.bottom))
    return any(
        first.alpha_at(x, y) > 0 and second.alpha_at(x, y) > 0
        for x, y in product(xs, ys)
    )