"""The apple the snake chases."""

from __future__ import annotations

import random

BOARD_WIDTH = 16
BOARD_HEIGHT = 14
START_LOCATION: tuple[int, int] = (10, 7)


class Apple:
    """An apple at a single cell of the board."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.location: tuple[int, int] = START_LOCATION

    def place(self) -> None:
        """Move the apple to a random cell on the board."""
        x = self.rng.randint(0, BOARD_WIDTH - 1)
        y = self.rng.randint(0, BOARD_HEIGHT - 1)
        self.location = (x, y)

    def reset(self) -> None:
        """Put the apple back at its starting cell."""
        self.location = START_LOCATION