"""One round of play: the bird, the scrolling pipes and the score."""

from __future__ import annotations

import random
from typing import Optional

from .bird import Bird
from .pipe import Pipe
from .pipe_pool import PipePool
from .score import Score

MIN_SPAWN_OFFSET = 10
SPAWN_OFFSET_SPAN = 56


class Game:
    """Advances the world frame by frame and decides when the round ends."""

    def __init__(
        self,
        pipe_pool: Optional[PipePool] = None,
        bird: Optional[Bird] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.pipe_pool = pipe_pool if pipe_pool is not None else PipePool(rng=self._rng)
        self.bird = bird if bird is not None else Bird()
        self.score = Score()
        self.pipes: list[Pipe] = []
        self.difficulty = 0
        self.next_pipe_time = 0
        self.game_ticks = 0
        self.game_running = False

    def start(self) -> None:
        self.bird.reset()
        self.pipes.clear()
        self.score.reset()
        self.next_pipe_time = 0
        self.game_ticks = 0
        self.game_running = True
        self.pipe_pool.reset()
        self.pipe_pool.choose_level(self.difficulty)

    def update(self) -> None:
        """Advance one frame: move everything, score, spawn and check for the end."""
        self.bird.update_position()

        kept: list[Pipe] = []
        bird_width = self.bird.sprite.bounds().width
        for index, pipe in enumerate(self.pipes):
            pipe.update_position()
            if self.bird.collides_with(pipe.sprite):
                self.pipes = kept + self.pipes[index:]
                self.game_running = False
                return
            if not pipe.is_top and not pipe.scored and bird_width > pipe.x + pipe.sprite.width:
                self.score.increase()
                pipe.scored = True
            if not pipe.is_off_screen():
                kept.append(pipe)
        self.pipes = kept

        if self.game_ticks >= self.next_pipe_time:
            bottom = self.pipe_pool.get_pipe()
            top = self.pipe_pool.get_pipe()
            self.pipes.append(bottom.copy())
            self.pipes.append(top.copy())
            offset = MIN_SPAWN_OFFSET + self._rng.randrange(SPAWN_OFFSET_SPAN)
            self.next_pipe_time = int(self.next_pipe_time + bottom.sprite.width / 2 + offset)

        if self.bird.collides_with_borders():
            self.game_running = False
        else:
            self.game_ticks += 1

    def set_difficulty(self, level: int) -> None:
        self.difficulty = level