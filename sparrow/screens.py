"""The main menu and the end-of-round screen."""

from __future__ import annotations

from .buttons import (
    Button,
    DifficultyButton,
    EndButton,
    LeaderBoardButton,
    MenuButton,
    RestartButton,
)
from .state import Session
from .textfield import TextField


def _click_buttons(buttons: list[Button], x: float, y: float) -> None:
    for button in buttons:
        if button.contains(x, y):
            button.on_click()


class Menu:
    """Difficulty choice, leaderboard access and the player's name."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.name_field = TextField((200, 50), (350, 590))
        self.buttons: list[Button] = [
            DifficultyButton("Easy", (100, 420), session),
            DifficultyButton("Medium", (100, 520), session),
            DifficultyButton("Hard", (100, 620), session),
            LeaderBoardButton("Leaderboard", (350, 490), session),
        ]

    def click(self, x: float, y: float) -> None:
        """Handle a left click: focus the name field and press any button hit."""
        self.name_field.is_active = self.name_field.contains(x, y)
        _click_buttons(self.buttons, x, y)


class EndScreen:
    """Choices shown after a round ends."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.buttons: list[Button] = [
            MenuButton("Menu", (60, 565), session),
            RestartButton("Restart", (340, 75), session),
            EndButton("Exit", (60, 670), session),
        ]

    def click(self, x: float, y: float) -> None:
        _click_buttons(self.buttons, x, y)