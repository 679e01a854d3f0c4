"""The maze grid: walls, pellets and empty floor."""

from __future__ import annotations

import enum

import pygame

WALL_COLOR = (0, 121, 241)
PELLET_COLOR = (253, 249, 0)

_LAYOUT = (
    "#####################",
    "#.........#.........#",
    "#.###.###.#.###.###.#",
    "#.###.###.#.###.###.#",
    "#...................#",
    "#.###.#.#####.#.###.#",
    "#.....#...#...#.....#",
    "#####.### # ###.#####",
    "    #.#       #.#    ",
    "#####.# ## ## #.#####",
    "     .  #   #  .     ",
    "#####.# #   # #.#####",
    "    #.# ##### #.#    ",
    "    #.#       #.#    ",
    "#####.# ##### #.#####",
    "#.........#.........#",
    "#.###.###.#.###.###.#",
    "#..##..... .....##..#",
    "##.##.#.#####.#.##.##",
    "#.....#...#...#.....#",
    "#.#######.#.#######.#",
    "#...................#",
    "#####################",
)


class MazeCell(enum.Enum):
    """What occupies one tile of the maze."""

    EMPTY = " "
    WALL = "#"
    PELLET = "."
    POWER_PELLET = "o"


class Maze:
    """A fixed 23 x 21 maze whose pellets can be eaten."""

    ROWS = 23
    COLS = 21
    TILE_SIZE = 32

    def __init__(self) -> None:
        self._grid = [[MazeCell(ch) for ch in line] for line in _LAYOUT]

    def _check(self, row: int, col: int) -> None:
        if not 0 <= row < self.ROWS:
            raise IndexError(f"Improper row input: {row}")
        if not 0 <= col < self.COLS:
            raise IndexError(f"Improper column input: {col}")

    def tile(self, row: int, col: int) -> MazeCell:
        """Return the cell at the given row and column."""
        self._check(row, col)
        return self._grid[row][col]

    def collect_pellet(self, row: int, col: int) -> None:
        """Clear a pellet from the given tile; other cells are left alone."""
        self._check(row, col)
        if self._grid[row][col] is MazeCell.PELLET:
            self._grid[row][col] = MazeCell.EMPTY

    def draw(self, surface: pygame.Surface, tile_size: int = TILE_SIZE) -> None:
        """Draw walls as squares and pellets as small dots."""
        radius = tile_size / 10.0
        center = tile_size // 2
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                x = col * tile_size
                y = row * tile_size
                if cell is MazeCell.WALL:
                    pygame.draw.rect(surface, WALL_COLOR, (x, y, tile_size, tile_size))
                elif cell is MazeCell.PELLET:
                    pygame.draw.circle(
                        surface, PELLET_COLOR, (x + center, y + center), radius
                    )