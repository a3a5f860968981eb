"""Structural checks on a loaded map: tiles, shape and surrounding walls."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from solong.maploader import MapError

WALL = "1"
EMPTY = "0"
PLAYER = "P"
EXIT = "E"
COIN = "C"
ENEMY = "M"

BASE_TILES = frozenset({EXIT, PLAYER, WALL, EMPTY, COIN})
BONUS_TILES = BASE_TILES | {ENEMY}


def _row(line: str) -> str:
    """Return the tiles of ``line`` without its newline."""
    return line.split("\n", 1)[0]


def check_tiles(lines: Sequence[str], with_enemies: bool = False) -> int:
    """Check tile characters and counts; return the number of coins.

    Every tile must be known (``M`` only when ``with_enemies`` is set), there
    must be exactly one player and one exit, and with enemies at least one
    enemy.
    """
    allowed = BONUS_TILES if with_enemies else BASE_TILES
    counts: Counter[str] = Counter()
    for line in lines:
        for tile in _row(line):
            if tile not in allowed:
                raise MapError()
            counts[tile] += 1
    if counts[PLAYER] != 1 or counts[EXIT] != 1:
        raise MapError()
    if with_enemies and counts[ENEMY] == 0:
        raise MapError()
    return counts[COIN]


def _check_shape(lines: Sequence[str]) -> None:
    if not lines:
        raise MapError()
    lengths = {len(_row(line)) for line in lines}
    if len(lengths) != 1:
        raise MapError()
    if lines[-1].endswith("\n"):
        raise MapError()


def check_walls(lines: Sequence[str], width: int, height: int) -> None:
    """Check that the first and last rows and both side columns are walls."""
    last = height - 1
    for index, line in enumerate(lines):
        row = _row(line)
        if not row:
            continue
        if index in (0, last) and any(tile != WALL for tile in row):
            raise MapError()
        if width < 1 or width > len(row):
            raise MapError()
        if row[0] != WALL or row[width - 1] != WALL:
            raise MapError()


def validate_map(
    lines: Sequence[str], width: int, height: int, with_enemies: bool = False
) -> int:
    """Run every structural check on the map; return the number of coins."""
    coins = check_tiles(lines, with_enemies)
    _check_shape(lines)
    check_walls(lines, width, height)
    return coins