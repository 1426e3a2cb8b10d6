"""The running score of a round."""

from dataclasses import dataclass


@dataclass
class Score:
    """Number of obstacles passed in the current round."""

    value: int = 0

    def increase(self) -> None:
        self.value += 1

    def reset(self) -> None:
        self.value = 0