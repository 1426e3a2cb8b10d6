"""Best scores per player, kept in a plain text file."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .buttons import BackButton
from .state import Session

DEFAULT_PATH = "statistics.txt"
TOP_COUNT = 10
ANONYMOUS = "Noname"


class LeaderBoard:
    """Stores each player's best score and lists the top entries."""

    def __init__(self, session: Session, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self.session = session
        self.path = Path(path)
        self.scores: dict[str, int] = {}
        self.button = BackButton("Back", (200, 670), session)

    def _load(self) -> None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        tokens = iter(text.split())
        for name, raw in zip(tokens, tokens):
            try:
                score = int(raw)
            except ValueError:
                break
            self.scores[name] = score

    def display(self) -> list[tuple[str, int]]:
        """Reload the file and return the best entries, highest first."""
        self._load()
        ranked = sorted(self.scores.items(), key=lambda item: item[1], reverse=True)
        return ranked[:TOP_COUNT]

    def add(self, name: str, score: int) -> None:
        """Record a score, keeping only the player's best, and save the file."""
        if not name:
            name = ANONYMOUS
        if not self.scores:
            self._load()
        if name not in self.scores or score > self.scores[name]:
            self.scores[name] = score
        with self.path.open("w", encoding="utf-8") as handle:
            for entry, value in self.scores.items():
                handle.write(f"{entry} {value}\n")