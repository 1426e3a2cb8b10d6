"""A fixed set of obstacle pairs handed out at random per difficulty."""

from __future__ import annotations

import random
from typing import Callable, Optional

from .pipe import Pipe
from .sprite import Mask

MaskLoader = Callable[[str, bool], Mask]

LEVEL_KINDS: dict[int, tuple[str, ...]] = {
    1: ("palaz", "kmda", "kse", "river", "hymera"),
    2: ("lavra", "arka", "korona", "zoloti"),
    3: ("veza", "flag", "mother", "triumf"),
}


class PipePool:
    """Hands out bottom and top pipes alternately, picking a random kind per pair."""

    def __init__(
        self,
        loader: Optional[MaskLoader] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.level = 0
        self._rng = rng if rng is not None else random.Random()
        self._index = 1
        self._levels: dict[int, list[Pipe]] = {}
        for level in (3, 2, 1):
            pipes = []
            for kind in LEVEL_KINDS[level]:
                for is_top in (False, True):
                    mask = loader(kind, is_top) if loader is not None else None
                    pipes.append(Pipe(kind, is_top, mask))
            self._levels[level] = pipes

    def choose_level(self, level: int) -> None:
        self.level = level

    def get_pipe(self) -> Pipe:
        """Next pipe: a random bottom pipe, then the matching top pipe."""
        pipes = self._levels.get(self.level)
        if pipes is None:
            raise ValueError(f"unknown difficulty level: {self.level}")
        if self._index % 2 == 1:
            self._index = self._rng.randrange(len(pipes) // 2) * 2
        else:
            self._index += 1
        return pipes[self._index]

    def reset_pipe(self, pipe: Pipe) -> None:
        pipe.scored = False

    def reset(self) -> None:
        """Start the next handout with a fresh bottom pipe."""
        self._index = 1