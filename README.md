# pacmaze

A small arcade game. You steer a yellow chomper through a walled maze and
eat the pellets. Each pellet is worth 10 points.

## Installing

```
pip install .
```

This installs pygame, which opens the window and reads the keyboard.

## Playing

```
pacmaze
```

A 700 by 750 window titled "Pacman!" opens and the game runs at 60 frames
per second. The command takes no options apart from `--help`.

- The arrow keys turn the player up, down, left or right. When several are
  held, up wins over down, down over left, and left over right. The player
  keeps moving in the last direction chosen and stops when the next step
  would enter a wall.
- Once the game is over, the screen shows "GAME OVER" and pressing R starts
  a new game. The new game has a fresh maze and a player moving at speed 5.
- Close the window to quit.

## Using it from code

The game logic works without a window, so it can be driven directly.

- `pacmaze.maze.Maze` holds a 23 by 21 grid (`Maze.ROWS`, `Maze.COLS`) of
  `MazeCell` values: `EMPTY`, `WALL`, `PELLET` and `POWER_PELLET`.
  `tile(row, col)` returns a cell. `collect_pellet(row, col)` turns a pellet
  into empty floor and leaves other cells alone. Both raise `IndexError` for
  a row or column outside the grid. `draw(surface, tile_size)` paints walls
  and pellets onto a pygame surface, with tiles of `Maze.TILE_SIZE` (32)
  pixels by default.
- `pacmaze.player.Pacman(start_x, start_y, speed)` is the player. It starts
  at the centre of the tile at column `start_x` and row `start_y`; the
  defaults are column 10, row 17 and speed 4. It has 3 lives and a score of
  0. Its `x`, `y`, `position`, `direction`, `speed`, `score`, `lives` and
  `game_over` attributes describe its state.
  - `update(maze, pressed)` advances the player by one frame. `pressed`
    holds the `Direction` values (`UP`, `DOWN`, `LEFT`, `RIGHT`) whose keys
    are down.
  - `on_collision()` costs a life and sets `game_over` when none are left.
  - `draw(surface)` and `draw_score(surface)` render the player and the
    score text.
- `pacmaze.game.Game` holds one `pacman` and one `maze`.
  `step(pressed, restart)` advances one frame; the restart request takes
  effect only once the game is over. `draw(surface)` renders the frame.
  `main()` runs the window loop described above.

```python
from pacmaze.game import Game
from pacmaze.player import Direction

game = Game()
for _ in range(10):
    game.step({Direction.LEFT})
print(game.pacman.score)
```

## What it does not do

- There are no ghosts. Nothing in the game calls `Pacman.on_collision()`,
  so in play the game never reaches game over on its own.
- Power pellets exist as a `MazeCell` kind but the maze contains none, and
  eating one would have no special effect.
- Clearing every pellet does not end the level or start a new one.
- The score is not shown while playing. `Game.draw` does not call
  `Pacman.draw_score`.
- The openings at the maze's sides do not wrap around. `Maze.tile` raises
  `IndexError` for tiles outside the grid, and so does `Pacman.update` when
  the player steps out past the right-hand edge.

## Running the tests

```
pip install ".[test]"
pytest
```