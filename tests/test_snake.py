import pytest

from qsnake.snake import Snake


def test_initial_state():
    snake = Snake()
    assert snake.body == [(5, 7), (4, 7), (3, 7)]
    assert snake.direction == "R"
    assert snake.head == (5, 7)


@pytest.mark.parametrize(
    "direction, step",
    [("R", (1, 0)), ("L", (-1, 0)), ("U", (0, 1)), ("D", (0, -1))],
)
def test_shift_moves_head_and_body_follows(direction, step):
    snake = Snake()
    snake.direction = direction
    before = list(snake.body)
    snake.shift()
    assert snake.head == (before[0][0] + step[0], before[0][1] + step[1])
    assert snake.body[1:] == before[:-1]
    assert len(snake.body) == len(before)


def test_shift_with_unknown_direction_does_nothing():
    snake = Snake()
    snake.direction = "X"
    before = list(snake.body)
    snake.shift()
    assert snake.body == before


def test_grow_horizontal_tail():
    snake = Snake()
    snake.grow()
    assert len(snake.body) == 4
    assert snake.body[-1] == (2, 7)


def test_grow_vertical_tail_up():
    snake = Snake()
    snake.body = [(5, 5), (5, 6)]
    snake.grow()
    assert snake.body[-1] == (5, 6 + 1)


def test_grow_vertical_tail_down():
    snake = Snake()
    snake.body = [(5, 6), (5, 5)]
    snake.grow()
    assert snake.body[-1] == (5, 5 - 1)


def test_grow_without_line_adds_nothing():
    snake = Snake()
    snake.body = [(5, 5), (5, 5)]
    snake.grow()
    assert snake.body == [(5, 5), (5, 5)]


def test_reset_restores_start():
    snake = Snake()
    snake.direction = "U"
    snake.shift()
    snake.grow()
    snake.reset()
    assert snake.body == Snake().body
    assert snake.direction == "R"