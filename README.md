# qsnake

A snake game on a 16 by 14 board that plays itself. An agent picks each move,
either by a greedy rule that steers the head toward the apple while avoiding
its own body, or by the best value in a learned Q-table. After every move the
agent updates the Q-table. When a game ends, the table is saved so the next
run starts from what was already learned.

## Installing

```
pip install .
```

## Running

```
qsnake
```

The program asks `begin? hit Y`. Answer `Y` or `y` and it plays 500 games one
after another; any other answer ends it without playing. After each game it
prints a line such as

```
game: 3, Best game overall has 4 eaten
```

Options:

- `--episodes N`: number of games to play (default 500).
- `--qtable PATH`: where the Q-table is loaded from and saved to
  (default `qtable.dat`).
- `--frames PATH`: where the frames of the current game go
  (default `game_frames.txt`).
- `--best PATH`: where the frames of the longest game go (default `max.txt`).

## Files it writes

By default all files go in the current directory:

- `qtable.dat`: the Q-table. It is loaded at start when it exists and saved
  each time a game ends. Each line holds one state (apple direction `dx dy`,
  the snake's direction, and four `0`/`1` danger flags for right, left, up and
  down), followed by pairs of move letter and value.
- `game_frames.txt`: every board of the game being played, one row of digits
  per line (`0` empty, `1` snake, `2` apple), with `===` after each board.
  It is emptied after each game.
- `max.txt`: the frames of the longest game so far, measured in lines.

## Using it from Python

The parts can be put together by hand:

- `qsnake.snake.Snake`: the body as a list of cells, its `direction`
  (`"R"`, `"L"`, `"U"`, `"D"`), `head`, `shift()`, `grow()` and `reset()`.
- `qsnake.apple.Apple`: its `location`, `place()` to move it to a random cell
  and `reset()`. It takes an optional `random.Random`.
- `qsnake.timer.MoveTimer`: `update()` is true once each interval
  (30 ms by default); `total_time()` gives seconds since creation. The clock
  can be passed in.
- `qsnake.agent.Agent`: `master_move()` chooses the next move into `move`,
  `update_q()` learns from the result, and `save_q_table()` /
  `load_q_table()` store the table. Pass `q_table_path=None` to start with an
  empty table.
- `qsnake.game.Game`: `set_board()`, `show_board()` and `update_board()` run
  one step; `running` turns false when the snake hits a wall or itself.
- `qsnake.cli.run_training(game, snake, apple, episodes, out)` plays the given
  number of games, writes its progress lines to `out`, and returns the best
  apple count.

## What it does not do

There is no screen: the game is not drawn in a window or terminal. Boards are
only written as digits to the frames files, to be read afterwards.

## Tests

```
pip install .[test]
pytest
```