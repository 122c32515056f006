"""The game loop: board state, collisions, apples and the record of played frames."""

from __future__ import annotations

import math
import time
from pathlib import Path
from typing import Callable

from qsnake.agent import DEFAULT_Q_TABLE_PATH, Agent
from qsnake.apple import BOARD_HEIGHT, BOARD_WIDTH, Apple
from qsnake.snake import Snake
from qsnake.timer import MoveTimer

EMPTY = 0
SNAKE_CELL = 1
APPLE_CELL = 2
FRAME_SEPARATOR = "==="
APPLE_MIN_DISTANCE = 3.0
TICK_DELAY = 0.030
DEFAULT_FRAMES_PATH = "game_frames.txt"
DEFAULT_BEST_PATH = "max.txt"

Board = list[list[int]]


def _empty_board() -> Board:
    return [[EMPTY] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)]


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return []


class Game:
    """Drives one snake, one apple and the agent steering them, recording every frame."""

    def __init__(
        self,
        snake: Snake,
        timer: MoveTimer,
        apple: Apple,
        agent: Agent,
        frames_path: str | Path = DEFAULT_FRAMES_PATH,
        best_path: str | Path = DEFAULT_BEST_PATH,
        q_table_path: str | Path = DEFAULT_Q_TABLE_PATH,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.snake = snake
        self.timer = timer
        self.apple = apple
        self.agent = agent
        self.frames_path = Path(frames_path)
        self.best_path = Path(best_path)
        self.q_table_path = Path(q_table_path)
        self.sleep = sleep
        self.board: Board = _empty_board()
        self.apples_eaten = 0
        self.max_apples = 0
        self.running = True

    @property
    def direction(self) -> str:
        """The snake's current direction."""
        return self.snake.direction

    def set_board(self) -> None:
        """Redraw the board from the snake's cells and the apple."""
        self.board_reset()
        for x, y in self.snake.body:
            if 0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT:
                self.board[y][x] = SNAKE_CELL
        apple_x, apple_y = self.apple.location
        self.board[apple_y][apple_x] = APPLE_CELL

    def update_board(self) -> None:
        """Wait a tick; when the timer fires, move the snake and let the agent act and learn."""
        self.sleep(TICK_DELAY)
        if not self.timer.update():
            return

        self.snake.shift()

        if self.self_collision() or self.wall_collision():
            self.agent.update_q()
            self.agent.save_q_table(self.q_table_path)
            self.running = False
            self.results()

        if self.snake.head == self.apple.location:
            self.apples_eaten += 1
            self.snake.grow()
            self.apple_radius()

        self.agent.master_move()
        self.agent.update_q()
        self.snake.direction = self.agent.move

    def wall_collision(self) -> bool:
        """Whether the head has left the board."""
        x, y = self.snake.head
        return x in (BOARD_WIDTH, -1) or y in (BOARD_HEIGHT, -1)

    def apple_radius(self) -> None:
        """Re-place the apple until it lies further than the minimum distance from the head."""
        head_x, head_y = self.snake.head

        def distance() -> float:
            apple_x, apple_y = self.apple.location
            return math.hypot(head_x - apple_x, head_y - apple_y)

        while distance() <= APPLE_MIN_DISTANCE:
            self.apple.place()

    def apple_eaten(self) -> None:
        """Count the apple and grow the snake if the head is on it."""
        if self.snake.head == self.apple.location:
            self.apples_eaten += 1
            self.snake.grow()

    def self_collision(self) -> bool:
        """Whether the head shares a cell with the rest of the body."""
        return self.snake.head in self.snake.body[1:]

    def show_board(self) -> None:
        """Append the board as one frame to the frames file."""
        rows = "".join("".join(map(str, row)) + "\n" for row in self.board)
        with self.frames_path.open("a", encoding="utf-8") as frames:
            frames.write(rows + FRAME_SEPARATOR + "\n")

    def board_reset(self) -> None:
        """Clear every cell of the board."""
        self.board = _empty_board()

    def game_reset(self) -> None:
        """Switch the game back on."""
        self.running = True

    def results(self) -> None:
        """Record the score, keep the longest game's frames, and clear the current frames."""
        self.max_apples = max(self.max_apples, self.apples_eaten)
        self.apples_eaten = 0

        current = _read_lines(self.frames_path)
        best = _read_lines(self.best_path)
        if len(current) > len(best):
            self.best_path.write_text(
                "".join(line + "\n" for line in current), encoding="utf-8"
            )

        self.frames_path.write_text("", encoding="utf-8")