"""Drawing a game onto a pygame surface, one texture per tile."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

import pygame

from solong.game import Direction, Game, Status
from solong.validate import COIN, ENEMY, EXIT, PLAYER, WALL

TILE_SIZE = 106
TEXTURE_SUFFIX = ".XPM"
BASE_TEXTURE_DIR = Path("textures")
BONUS_TEXTURE_DIR = Path("so_long_bonus") / "textures"

FLOOR = "floor"
BOX = "box"
PLAYER_RIGHT = "player"
PLAYER_LEFT = "player_2"
COIN_STILL = "coin3"
DOOR = "door"
ENEMY_SPRITE = "boom"
WIN = "win"
LOSE = "lose"
BACKGROUND = "BG"
COIN_FRAME_NAMES = ("1", "2", "3", "4", "5", "6")

TEXTURE_NAMES = (
    BACKGROUND,
    PLAYER_RIGHT,
    PLAYER_LEFT,
    BOX,
    COIN_STILL,
    DOOR,
    WIN,
    FLOOR,
    LOSE,
    ENEMY_SPRITE,
) + COIN_FRAME_NAMES

COUNTER_LABEL = "Count_Mouve : "
COUNTER_LABEL_POS = (0, 0)
COUNTER_VALUE_POS = (153, 0)
TEXT_COLOUR = (255, 255, 255)

_OVERLAY_SIZES = {WIN: (300, 200), LOSE: (500, 500)}

_FALLBACK_COLOURS = {
    BACKGROUND: (20, 20, 20),
    FLOOR: (60, 60, 60),
    BOX: (120, 80, 40),
    PLAYER_RIGHT: (40, 120, 220),
    PLAYER_LEFT: (40, 100, 200),
    COIN_STILL: (230, 200, 40),
    DOOR: (40, 180, 60),
    WIN: (250, 250, 250),
    LOSE: (200, 30, 30),
    ENEMY_SPRITE: (220, 60, 20),
    "1": (230, 200, 40),
    "2": (235, 205, 50),
    "3": (240, 210, 60),
    "4": (245, 215, 70),
    "5": (240, 210, 60),
    "6": (235, 205, 50),
}


def window_size(width: int, height: int, tile_size: int = TILE_SIZE) -> tuple[int, int]:
    """Return the pixel size of a window showing ``width`` x ``height`` tiles."""
    return width * tile_size, height * tile_size


def _fallback(name: str, tile_size: int) -> pygame.Surface:
    surface = pygame.Surface(_OVERLAY_SIZES.get(name, (tile_size, tile_size)))
    surface.fill(_FALLBACK_COLOURS.get(name, (128, 128, 128)))
    return surface


def _load_textures(directory: Path, tile_size: int) -> dict[str, pygame.Surface]:
    textures: dict[str, pygame.Surface] = {}
    for name in TEXTURE_NAMES:
        path = directory / f"{name}{TEXTURE_SUFFIX}"
        try:
            textures[name] = pygame.image.load(os.fspath(path))
        except (pygame.error, FileNotFoundError, OSError):
            textures[name] = _fallback(name, tile_size)
    return textures


def _centred(total: int, size: int) -> int:
    # Truncates toward zero, as integer division does for the overlay offsets.
    return int((total - size) / 2)


class Renderer:
    """Draws a :class:`Game` tile by tile, with its overlays and counter."""

    def __init__(
        self,
        game: Game,
        textures: Mapping[str, pygame.Surface] | None = None,
        tile_size: int = TILE_SIZE,
        texture_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        self.game = game
        self.tile_size = tile_size
        if textures is None:
            directory = Path(
                texture_dir
                if texture_dir is not None
                else (BONUS_TEXTURE_DIR if game.bonus else BASE_TEXTURE_DIR)
            )
            self.textures = _load_textures(directory, tile_size)
        else:
            self.textures = {
                name: textures.get(name) or _fallback(name, tile_size)
                for name in TEXTURE_NAMES
            }
        self._font: pygame.font.Font | None = None

    def tile_at(self, row: int, col: int) -> str | None:
        """Return the texture drawn over the floor at a cell, or ``None``."""
        tile = self.game.grid[row][col]
        if tile == WALL:
            return BOX
        if tile == PLAYER:
            return PLAYER_RIGHT if self.game.facing is Direction.RIGHT else PLAYER_LEFT
        if tile == COIN:
            if self.game.bonus:
                return COIN_FRAME_NAMES[self.game.coin_frame % len(COIN_FRAME_NAMES)]
            return COIN_STILL
        if tile == EXIT:
            return DOOR
        if tile == ENEMY and self.game.bonus:
            return ENEMY_SPRITE
        return None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the whole board, the counter and any end-of-game overlay."""
        size = self.tile_size
        for r, row in enumerate(self.game.grid):
            for c in range(len(row)):
                position = (c * size, r * size)
                surface.blit(self.textures[FLOOR], position)
                name = self.tile_at(r, c)
                if name is not None:
                    surface.blit(self.textures[name], position)
        if self.game.bonus:
            self._draw_counter(surface)
        if self.game.status is Status.WON:
            self._draw_overlay(surface, WIN)
        elif self.game.bonus and self.game.status is Status.LOST:
            self._draw_overlay(surface, LOSE)

    def _draw_overlay(self, surface: pygame.Surface, name: str) -> None:
        image = self.textures[name]
        width, height = surface.get_size()
        surface.blit(
            image,
            (
                _centred(width, image.get_width()),
                _centred(height, image.get_height()),
            ),
        )

    def _draw_counter(self, surface: pygame.Surface) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 24)
        label = self._font.render(COUNTER_LABEL, True, TEXT_COLOUR)
        value = self._font.render(str(self.game.moves), True, TEXT_COLOUR)
        surface.blit(value, COUNTER_VALUE_POS)
        surface.blit(label, COUNTER_LABEL_POS)