import io
import random

from qsnake.agent import Agent
from qsnake.apple import Apple
from qsnake.cli import main, run_training
from qsnake.game import Game
from qsnake.snake import START_BODY, Snake
from qsnake.timer import MoveTimer


def make_game(tmp_path):
    rng = random.Random(3)
    snake = Snake()
    apple = Apple(rng)
    agent = Agent(snake, apple, rng, q_table_path=None)
    game = Game(
        snake,
        MoveTimer(interval=0.0),
        apple,
        agent,
        frames_path=tmp_path / "frames.txt",
        best_path=tmp_path / "best.txt",
        q_table_path=tmp_path / "qtable.dat",
        sleep=lambda _seconds: None,
    )
    return game, snake, apple


def test_run_training_reports_and_resets(tmp_path):
    game, snake, apple = make_game(tmp_path)
    game.running = False
    snake.body = [(1, 1), (0, 1), (0, 2)]
    apple.location = (2, 2)
    out = io.StringIO()
    best = run_training(game, snake, apple, 1, out)
    assert best == 0
    assert out.getvalue() == "game: 1, Best game overall has 0 eaten\n"
    assert snake.body == list(START_BODY)
    assert apple.location == (10, 7)
    assert game.running is True


def test_run_training_plays_until_wall(tmp_path):
    game, snake, apple = make_game(tmp_path)
    snake.body = [(15, 7), (14, 7), (13, 7)]
    out = io.StringIO()
    run_training(game, snake, apple, 1, out)
    best_lines = (tmp_path / "best.txt").read_text().splitlines()
    assert len(best_lines) == 15
    assert best_lines[-1] == "==="
    assert out.getvalue().startswith("game: 1,")
    assert (tmp_path / "qtable.dat").exists()
    assert snake.head == (5, 7)


def test_main_declined(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output.startswith("begin? hit Y")
    assert "game:" not in output


def test_main_accepted_with_no_episodes(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n"))
    assert main(["--episodes", "0"]) == 0
    output = capsys.readouterr().out
    assert "game:" not in output
    assert not (tmp_path / "max.txt").exists()


def test_main_handles_empty_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "game:" not in capsys.readouterr().out