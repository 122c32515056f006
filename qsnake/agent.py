"""A Q-learning agent that steers the snake, mixing a greedy heuristic with learned values."""

from __future__ import annotations

import math
import random
from pathlib import Path
from typing import NamedTuple

from qsnake.apple import BOARD_HEIGHT, BOARD_WIDTH, Apple
from qsnake.snake import Cell, Snake

ACTIONS: tuple[str, ...] = ("R", "L", "U", "D")
REVERSE: dict[str, str] = {"R": "L", "L": "R", "U": "D", "D": "U"}
STEPS: dict[str, Cell] = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}

REWARD_APPLE = 10.0
REWARD_DEATH = -10.0
REWARD_STEP = -0.1

DEFAULT_EPSILON = 0.98
EPSILON_FLOOR = 0.85
EPSILON_DECAY = 0.9995
DEFAULT_ALPHA = 0.1
DEFAULT_GAMMA = 0.9
INITIAL_Q = 1.0
DEFAULT_Q_TABLE_PATH = "qtable.dat"

QTable = dict["State", dict[str, float]]


class State(NamedTuple):
    """What the agent sees: where the apple lies, where it heads, and which turns are fatal."""

    dx: int
    dy: int
    direction: str
    danger_right: bool
    danger_left: bool
    danger_up: bool
    danger_down: bool


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Agent:
    """Chooses the snake's next move and learns from the outcome."""

    def __init__(
        self,
        snake: Snake,
        apple: Apple,
        rng: random.Random | None = None,
        q_table_path: str | Path | None = DEFAULT_Q_TABLE_PATH,
    ) -> None:
        self.snake = snake
        self.apple = apple
        self.rng = rng if rng is not None else random.Random()
        self.epsilon = DEFAULT_EPSILON
        self.alpha = DEFAULT_ALPHA
        self.gamma = DEFAULT_GAMMA
        self.q_table: QTable = {}
        self.move: str = snake.direction
        # Head and apple positions as last seen by the heuristic; the state is built from these.
        self._head: Cell = snake.head
        self._target: Cell = apple.location
        self.state: State = self.get_state()
        self.prev_state: State = self.state
        if q_table_path is not None:
            self.load_q_table(q_table_path)

    def _distance_after(self, action: str) -> float:
        step_x, step_y = STEPS[action]
        head_x, head_y = self._head
        apple_x, apple_y = self._target
        return math.hypot(head_x + step_x - apple_x, head_y + step_y - apple_y)

    def decision(self) -> None:
        """Pick the non-reversing move that brings the head closest to the apple without biting itself."""
        self._head = self.snake.head
        self._target = self.apple.location
        radii = {action: self._distance_after(action) for action in ACTIONS}

        forbidden = REVERSE.get(self.snake.direction)
        if forbidden is not None:
            allowed = sorted(action for action in ACTIONS if action != forbidden)
            candidates = sorted(radii[action] for action in allowed)
            choice = int(candidates[0])
            for action in allowed:
                whole = int(radii[action])
                if whole != choice:
                    continue
                if self.self_collision(action):
                    value = float(whole)
                    if value in candidates:
                        candidates.remove(value)
                    if candidates:
                        choice = int(candidates[0])
                else:
                    self.move = action
                    break

        self.get_state()
        self.prev_state = self.state

    def self_collision(self, move: str) -> bool:
        """Whether moving the snake one cell in `move` would put its head on its own body."""
        step = STEPS.get(move)
        body = self.snake.body
        if step is None or not body:
            return False
        head_x, head_y = body[0]
        new_head = (head_x + step[0], head_y + step[1])
        return new_head in body[:-1]

    def master_move(self) -> None:
        """Choose the next move: the heuristic with probability epsilon, else the Q-table."""
        self.get_state()
        self.prev_state = self.state
        if self.rng.random() <= self.epsilon:
            self.decision()
        else:
            self.q_decision()

    def get_state(self) -> State:
        """Build, store and return the current state."""
        head_x, head_y = self._head
        apple_x, apple_y = self._target
        direction = self.snake.direction
        self.state = State(
            _sign(apple_x - head_x),
            _sign(apple_y - head_y),
            direction,
            direction != "L" and self.self_collision("R"),
            direction != "R" and self.self_collision("L"),
            direction != "D" and self.self_collision("U"),
            direction != "U" and self.self_collision("D"),
        )
        return self.state

    def q_decision(self) -> None:
        """Pick the non-reversing move with the highest Q-value for the current state."""
        self.get_state()
        self.prev_state = self.state

        values = self.q_table.setdefault(self.state, {})
        if not values:
            values.update(dict.fromkeys(ACTIONS, INITIAL_Q))

        direction = self.snake.direction
        best_move = direction
        best_q = -math.inf
        for action in ACTIONS:
            if REVERSE.get(direction) == action:
                continue
            q = values.setdefault(action, 0.0)
            if q > best_q:
                best_q = q
                best_move = action
        self.move = best_move

    def update_q(self) -> None:
        """Reward the last move and update its Q-value; decay epsilon towards its floor."""
        self.get_state()
        head = self.snake.head
        reward = REWARD_STEP
        terminal = False

        if head in self.snake.body[1:]:
            reward = REWARD_DEATH
            terminal = True
        elif head[0] in (BOARD_WIDTH, -1) or head[1] in (BOARD_HEIGHT, -1):
            reward = REWARD_DEATH
            terminal = True

        if not terminal and head == self.apple.location:
            reward = REWARD_APPLE

        max_future_q = 0.0
        if not terminal:
            future = self.q_table.setdefault(self.state, {})
            for action in ACTIONS:
                max_future_q = max(max_future_q, future.setdefault(action, 0.0))

        values = self.q_table.setdefault(self.prev_state, {})
        current = values.setdefault(self.move, 0.0)
        values[self.move] = current + self.alpha * (
            reward + self.gamma * max_future_q - current
        )

        if self.epsilon > EPSILON_FLOOR:
            self.epsilon *= EPSILON_DECAY

    def save_q_table(self, path: str | Path) -> None:
        """Write the Q-table as text, one state per line."""
        lines = []
        for state, values in sorted(self.q_table.items()):
            fields = [
                str(state.dx),
                str(state.dy),
                state.direction,
                *(str(int(flag)) for flag in state[3:]),
            ]
            for action, q in sorted(values.items()):
                fields.extend((action, f"{q:g}"))
            lines.append(" ".join(fields) + " \n")
        Path(path).write_text("".join(lines), encoding="utf-8")

    def load_q_table(self, path: str | Path) -> None:
        """Replace the Q-table with the one stored at `path`; leave it alone if there is no file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return

        self.q_table.clear()
        for line in text.splitlines():
            tokens = line.split()
            if len(tokens) < 7:
                continue
            try:
                state = State(
                    int(tokens[0]),
                    int(tokens[1]),
                    tokens[2][0],
                    *(bool(int(token)) for token in tokens[3:7]),
                )
            except ValueError:
                continue
            values = self.q_table.setdefault(state, {})
            pairs = tokens[7:]
            for action, raw in zip(pairs[::2], pairs[1::2]):
                try:
                    values[action[0]] = float(raw)
                except ValueError:
                    break