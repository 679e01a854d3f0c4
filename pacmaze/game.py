"""Game state and the window loop."""

from __future__ import annotations

import argparse
from collections.abc import Collection, Sequence

import pygame

from pacmaze.maze import Maze
from pacmaze.player import Direction, Pacman

WINDOW_SIZE = (700, 750)
FPS = 60
BACKGROUND = (0, 0, 0)
GAME_OVER_COLOR = (230, 41, 55)
TEXT_COLOR = (255, 255, 255)

_KEYS = {
    Direction.UP: pygame.K_UP,
    Direction.DOWN: pygame.K_DOWN,
    Direction.LEFT: pygame.K_LEFT,
    Direction.RIGHT: pygame.K_RIGHT,
}


class Game:
    """One Pacman in one maze, with restart after game over."""

    def __init__(self) -> None:
        self.pacman = Pacman()
        self.maze = Maze()

    def step(self, pressed: Collection[Direction] = (), restart: bool = False) -> None:
        """Advance one frame; a restart request only counts once the game is over."""
        if not self.pacman.game_over:
            self.pacman.update(self.maze, pressed)
        if self.pacman.game_over and restart:
            self.pacman = Pacman(10, 17, 5)
            self.maze = Maze()

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current frame."""
        surface.fill(BACKGROUND)
        if self.pacman.game_over:
            if not pygame.font.get_init():
                pygame.font.init()
            surface.blit(
                pygame.font.Font(None, 40).render("GAME OVER", True, GAME_OVER_COLOR),
                (250, 350),
            )
            surface.blit(
                pygame.font.Font(None, 20).render("Press R to Restart", True, TEXT_COLOR),
                (250, 400),
            )
        else:
            self.pacman.draw(surface)
            self.maze.draw(surface)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="pacmaze", description="Play Pacman.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Pacman!")
        clock = pygame.time.Clock()
        game = Game()
        running = True
        while running:
            restart = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    restart = True
            if not running:
                break
            keys = pygame.key.get_pressed()
            pressed = {d for d, key in _KEYS.items() if keys[key]}
            game.step(pressed, restart)
            game.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0