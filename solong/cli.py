"""Command line entry point: validate a ``.ber`` map and play it."""

from __future__ import annotations

import os
import sys
from typing import Sequence

import pygame

from solong.fmt import printf
from solong.game import (
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Game,
)
from solong.maploader import MapError, MapNameError, load_map
from solong.pathfind import check_path
from solong.render import Renderer, window_size
from solong.validate import validate_map

FRAMES_PER_SECOND = 60
BONUS_FLAG = "--bonus"

_KEYCODES = {
    pygame.K_a: KEY_LEFT,
    pygame.K_s: KEY_DOWN,
    pygame.K_d: KEY_RIGHT,
    pygame.K_w: KEY_UP,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def prepare_game(path: str | os.PathLike[str], bonus: bool = False) -> Game:
    """Load and check the map at ``path`` and return a game ready to play."""
    lines, width, height = load_map(path)
    coins = validate_map(lines, width, height, with_enemies=bonus)
    check_path(lines, coins)
    return Game.from_lines(lines, bonus=bonus)


def _run(game: Game) -> None:
    height = len(game.grid)
    width = len(game.grid[0]) if height else 0
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(width, height))
        pygame.display.set_caption("so_long_bonus" if game.bonus else "so_long")
        renderer = Renderer(game)
        clock = pygame.time.Clock()
        while not game.closed:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.closed = True
                elif event.type == pygame.KEYDOWN:
                    keycode = _KEYCODES.get(event.key)
                    if keycode is not None:
                        game.key_press(keycode)
            game.tick()
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = BONUS_FLAG in args
    paths = [arg for arg in args if arg != BONUS_FLAG]
    if len(paths) != 1:
        return 1
    try:
        game = prepare_game(paths[0], bonus=bonus)
    except MapNameError as exc:
        printf("%s\n", str(exc))
        return 1
    except MapError as exc:
        if isinstance(exc.__cause__, OSError):
            printf("%s\n", str(exc))
            return 0
        printf("Error\n%s\n", str(exc))
        return 1
    _run(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())