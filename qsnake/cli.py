"""Command line entry point that trains the agent over many games."""

from __future__ import annotations

import argparse
import random
import sys
from typing import TextIO

from qsnake.agent import DEFAULT_Q_TABLE_PATH, Agent
from qsnake.apple import Apple
from qsnake.game import DEFAULT_BEST_PATH, DEFAULT_FRAMES_PATH, Game
from qsnake.snake import Snake
from qsnake.timer import MoveTimer

DEFAULT_EPISODES = 500


def run_training(
    game: Game,
    snake: Snake,
    apple: Apple,
    episodes: int = DEFAULT_EPISODES,
    out: TextIO | None = None,
) -> int:
    """Play `episodes` games back to back, reporting after each; return the best apple count."""
    stream = out if out is not None else sys.stdout
    for counter in range(1, episodes + 1):
        while game.running:
            game.set_board()
            game.show_board()
            game.update_board()
        print(
            f"game: {counter}, Best game overall has {game.max_apples} eaten",
            file=stream,
        )
        snake.reset()
        apple.reset()
        game.game_reset()
    return game.max_apples


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="qsnake", description="Train a Q-learning agent to play snake."
    )
    parser.add_argument("--episodes", type=int, default=DEFAULT_EPISODES)
    parser.add_argument("--frames", default=DEFAULT_FRAMES_PATH)
    parser.add_argument("--best", default=DEFAULT_BEST_PATH)
    parser.add_argument("--qtable", default=DEFAULT_Q_TABLE_PATH)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Ask for confirmation, then train for the requested number of games."""
    args = _parse_args(argv)

    rng = random.Random()
    snake = Snake()
    timer = MoveTimer()
    apple = Apple(rng)
    agent = Agent(snake, apple, rng, args.qtable)
    game = Game(
        snake,
        timer,
        apple,
        agent,
        frames_path=args.frames,
        best_path=args.best,
        q_table_path=args.qtable,
    )

    print("begin? hit Y", flush=True)
    answer = sys.stdin.readline().strip()
    if answer[:1] in ("Y", "y"):
        run_training(game, snake, apple, args.episodes, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())