"""The player-controlled Pacman."""

from __future__ import annotations

import enum
import math
from collections.abc import Collection

import pygame

from pacmaze.maze import Maze, MazeCell

PACMAN_COLOR = (253, 249, 0)
TEXT_COLOR = (255, 255, 255)
PELLET_SCORE = 10


class Direction(enum.Enum):
    """A movement direction, listed in the order key presses take priority."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Pacman:
    """Pacman's position, heading, score and lives."""

    def __init__(self, start_x: int = 10, start_y: int = 17, speed: int = 4) -> None:
        half = Maze.TILE_SIZE / 2.0
        self.x = float(start_x * Maze.TILE_SIZE + half)
        self.y = float(start_y * Maze.TILE_SIZE + half)
        self.direction: Direction | None = None
        self.speed = speed
        self.score = 0
        self.lives = 3
        self.game_over = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def update(self, maze: Maze, pressed: Collection[Direction] = ()) -> None:
        """Steer by the pressed directions, move unless blocked, eat pellets."""
        chosen = next((d for d in Direction if d in pressed), None)
        if chosen is not None:
            self.direction = chosen
        dx, dy = self.direction.value if self.direction else (0, 0)

        next_x = self.x + dx * self.speed
        next_y = self.y + dy * self.speed
        col = int(next_x / Maze.TILE_SIZE)
        row = int(next_y / Maze.TILE_SIZE)

        cell = maze.tile(row, col)
        if cell is not MazeCell.WALL:
            self.x, self.y = next_x, next_y
        if cell is MazeCell.PELLET:
            maze.collect_pellet(row, col)
            self.score += PELLET_SCORE

    def draw(self, surface: pygame.Surface) -> None:
        """Draw Pacman as a disc with a mouth facing right."""
        radius = Maze.TILE_SIZE / 3.0
        segments = 30
        start, end = 45.0, 315.0
        points = [(self.x, self.y)]
        for i in range(segments + 1):
            angle = math.radians(start + (end - start) * i / segments)
            points.append(
                (self.x + radius * math.cos(angle), self.y + radius * math.sin(angle))
            )
        pygame.draw.polygon(surface, PACMAN_COLOR, points)

    def draw_score(self, surface: pygame.Surface) -> None:
        """Write the current score below the maze."""
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, 20)
        surface.blit(font.render(f"Score: {self.score}", True, TEXT_COLOR), (10, 750))

    def on_collision(self) -> None:
        """Lose a life, ending the game when none are left."""
        self.lives -= 1
        if self.lives <= 0:
            self.game_over = True
        self.x, self.y = 10.0, 17.0