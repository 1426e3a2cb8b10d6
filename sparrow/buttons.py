"""Clickable buttons that change the shared game session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .sprite import Rect
from .state import GameState, Session

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 80

_DIFFICULTY_LEVELS = {"Easy": 1, "Medium": 2}
_HARDEST = 3


class Button(ABC):
    """A labelled rectangle that reacts to clicks."""

    def __init__(self, label: str, position: tuple[float, float], session: Session) -> None:
        self.label = label
        self.position = position
        self.session = session
        x, y = position
        self.rect = Rect(x, y, BUTTON_WIDTH, BUTTON_HEIGHT)

    @property
    def center(self) -> tuple[float, float]:
        return (self.rect.left + self.rect.width / 2, self.rect.top + self.rect.height / 2)

    def contains(self, x: float, y: float) -> bool:
        return self.rect.contains(x, y)

    @abstractmethod
    def on_click(self) -> None:
        """React to a click on the button."""


class DifficultyButton(Button):
    """Starts a round at the difficulty named by the label."""

    def on_click(self) -> None:
        self.session.switch(GameState.GAME)
        self.session.difficulty = _DIFFICULTY_LEVELS.get(self.label, _HARDEST)


class LeaderBoardButton(Button):
    def on_click(self) -> None:
        self.session.switch(GameState.LEADER_BOARD)


class BackButton(Button):
    def on_click(self) -> None:
        self.session.switch(GameState.MENU)


class MenuButton(Button):
    def on_click(self) -> None:
        self.session.switch(GameState.MENU)


class RestartButton(Button):
    def on_click(self) -> None:
        self.session.switch(GameState.GAME)


class EndButton(Button):
    """Quits the program."""

    def on_click(self) -> None:
        raise SystemExit(0)