"""Reachability checks: can the player get to the exit and to every coin."""

from __future__ import annotations

from typing import Iterator, Sequence

from solong.maploader import MapError
from solong.validate import COIN, EMPTY, EXIT, PLAYER

REACHED = "A"

_Grid = list[list[str]]


def _neighbours(row: int, col: int) -> Iterator[tuple[int, int]]:
    yield row, col + 1
    yield row, col - 1
    yield row + 1, col
    yield row - 1, col


def _at(grid: _Grid, row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _neighbour_tiles(grid: _Grid, row: int, col: int) -> list[str | None]:
    return [_at(grid, r, c) for r, c in _neighbours(row, col)]


def _mark_empty_neighbours(grid: _Grid, row: int, col: int) -> None:
    for r, c in _neighbours(row, col):
        if _at(grid, r, c) == EMPTY:
            grid[r][c] = REACHED


def _visit(grid: _Grid, row: int, col: int) -> tuple[bool, bool]:
    """Spread from one cell; return ``(found_empty, touches_exit)``."""
    found_empty = False
    touches_exit = False
    cell = grid[row][col]
    if cell in (PLAYER, REACHED):
        found_empty = EMPTY in _neighbour_tiles(grid, row, col)
        _mark_empty_neighbours(grid, row, col)
        if EXIT in _neighbour_tiles(grid, row, col):
            touches_exit = True
    if cell == COIN:
        if REACHED in _neighbour_tiles(grid, row, col):
            _mark_empty_neighbours(grid, row, col)
        if EXIT in _neighbour_tiles(grid, row, col):
            touches_exit = True
    return found_empty, touches_exit


def flood_fill(lines: Sequence[str]) -> tuple[list[str], bool]:
    """Mark every empty tile the player can reach with ``A``.

    Returns the marked rows (newlines kept) and whether the exit was found
    next to a reached tile, the player, or a coin. The input is not changed.
    Coins pass the fill on only when they touch an already reached tile.
    """
    grid: _Grid = [list(line) for line in lines]
    exit_reached = False
    row = 0
    while row < len(grid):
        found_empty = False
        for col in range(len(grid[row])):
            found, touches_exit = _visit(grid, row, col)
            found_empty = found_empty or found
            exit_reached = exit_reached or touches_exit
        # A new tile was reached: sweep again, starting below the top wall.
        row = 1 if found_empty else row + 1
    return ["".join(cells) for cells in grid], exit_reached


def _count_reachable_coins(grid: Sequence[str]) -> int:
    cells: _Grid = [list(line) for line in grid]
    return sum(
        1
        for row, line in enumerate(cells)
        for col, tile in enumerate(line)
        if tile == COIN
        and any(t in (REACHED, PLAYER) for t in _neighbour_tiles(cells, row, col))
    )


def check_path(lines: Sequence[str], coin_total: int) -> int:
    """Check that the exit and all ``coin_total`` coins can be reached.

    Returns the number of reachable coins. Raises :class:`MapError` when the
    exit cannot be reached, when some coin cannot be reached, or when the map
    has no reachable coin at all.
    """
    grid, exit_reached = flood_fill(lines)
    if not exit_reached:
        raise MapError()
    coins = _count_reachable_coins(grid)
    if coins != coin_total or coins < 1:
        raise MapError()
    return coins