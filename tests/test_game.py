from unittest import mock

import pygame
import pytest

from pacmaze.game import GAME_OVER_COLOR, Game, main
from pacmaze.maze import WALL_COLOR, Maze, MazeCell
from pacmaze.player import Direction


def _end_game(game):
    while not game.pacman.game_over:
        game.pacman.on_collision()


def test_step_moves_pacman():
    game = Game()
    game.step({Direction.LEFT})
    assert game.pacman.score == 10
    assert game.maze.tile(17, 9) is MazeCell.EMPTY


def test_restart_ignored_while_playing():
    game = Game()
    game.step({Direction.LEFT}, restart=True)
    assert game.pacman.score == 10
    assert game.pacman.speed == 4


def test_no_movement_after_game_over():
    game = Game()
    _end_game(game)
    position = game.pacman.position
    game.step({Direction.RIGHT})
    assert game.pacman.position == position
    assert game.pacman.game_over is True


def test_restart_after_game_over():
    game = Game()
    game.step({Direction.LEFT})
    _end_game(game)
    game.step(set(), restart=True)
    assert game.pacman.game_over is False
    assert game.pacman.lives == 3
    assert game.pacman.score == 0
    assert game.pacman.speed == 5
    assert game.maze.tile(17, 9) is MazeCell.PELLET


def test_draw_playing_shows_maze():
    surface = pygame.Surface((700, 750))
    Game().draw(surface)
    half = Maze.TILE_SIZE // 2
    assert tuple(surface.get_at((half, half)))[:3] == WALL_COLOR


def test_draw_game_over_shows_text():
    game = Game()
    _end_game(game)
    surface = pygame.Surface((700, 750))
    surface.fill(WALL_COLOR)
    game.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)
    red = [
        (x, y)
        for x in range(250, 450, 2)
        for y in range(350, 390, 2)
        if tuple(surface.get_at((x, y)))[:3] == GAME_OVER_COLOR
    ]
    assert len(red) > 0


def test_main_exits_on_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main([]) == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2