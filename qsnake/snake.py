"""The snake: a list of grid cells led by its head."""

from __future__ import annotations

Cell = tuple[int, int]

START_BODY: tuple[Cell, ...] = ((5, 7), (4, 7), (3, 7))
START_DIRECTION = "R"

_STEPS: dict[str, Cell] = {
    "R": (1, 0),
    "L": (-1, 0),
    "U": (0, 1),
    "D": (0, -1),
}


class Snake:
    """A snake on the board, moving one cell per shift in its current direction."""

    def __init__(self) -> None:
        self.body: list[Cell] = list(START_BODY)
        self.direction: str = START_DIRECTION

    @property
    def head(self) -> Cell:
        """The cell the snake's head occupies."""
        return self.body[0]

    def grow(self) -> None:
        """Add one segment behind the tail, following the line of the last two segments."""
        if len(self.body) < 2:
            return
        (last_x, last_y), (prev_x, prev_y) = self.body[-1], self.body[-2]
        if last_x == prev_x + 1 or last_x == prev_x - 1:
            self.body.append((last_x - 1, last_y))
        elif last_y == prev_y + 1:
            self.body.append((last_x, last_y + 1))
        elif last_y == prev_y - 1:
            self.body.append((last_x, last_y - 1))

    def shift(self) -> None:
        """Move the head one cell in the current direction; every segment follows the one before it."""
        step = _STEPS.get(self.direction)
        if step is None or not self.body:
            return
        head_x, head_y = self.body[0]
        new_head = (head_x + step[0], head_y + step[1])
        self.body = [new_head, *self.body[:-1]]

    def reset(self) -> None:
        """Put the snake back at its starting cells, heading right."""
        self.body = list(START_BODY)
        self.direction = START_DIRECTION