"""Screens the game can show and the state shared between them."""

from dataclasses import dataclass
from enum import Enum


class GameState(Enum):
    MENU = 0
    LEADER_BOARD = 1
    GAME = 2
    END_SCREEN = 3


@dataclass
class Session:
    """The current screen and the chosen difficulty, shared by all widgets."""

    state: GameState = GameState.MENU
    difficulty: int = 0

    def switch(self, state: GameState) -> None:
        self.state = state