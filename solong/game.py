"""Game state and rules: player moves, coins, exit, enemies and animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from solong.fmt import printf
from solong.maploader import MapError
from solong.validate import COIN, EMPTY, ENEMY, EXIT, PLAYER, WALL

KEY_LEFT = 0
KEY_DOWN = 1
KEY_RIGHT = 2
KEY_UP = 13
KEY_ESCAPE = 53

ENEMY_PERIOD = 20
COIN_FRAME_PERIOD = 10
COIN_FRAMES = 6

_ENEMY_BLOCKERS = frozenset({WALL, COIN, EXIT, ENEMY})


class Direction(Enum):
    """A step on the grid as ``(row offset, column offset)``."""

    RIGHT = (0, 1)
    UP = (-1, 0)
    LEFT = (0, -1)
    DOWN = (1, 0)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


KEY_DIRECTIONS = {
    KEY_RIGHT: Direction.RIGHT,
    KEY_UP: Direction.UP,
    KEY_LEFT: Direction.LEFT,
    KEY_DOWN: Direction.DOWN,
}


class Status(Enum):
    """Where the game stands."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class Game:
    """A running game on a grid of tiles.

    With ``bonus`` set, enemies (``M``) kill the player, move on every
    :meth:`tick` period and the coin animation advances; without it the move
    count is printed after every movement key.
    """

    grid: list[list[str]]
    bonus: bool = False
    coin_total: int = 0
    coins: int = 0
    moves: int = 0
    status: Status = Status.PLAYING
    facing: Direction = Direction.LEFT
    closed: bool = False
    coin_frame: int = 0
    _enemy_heading_left: bool = field(default=False, repr=False)
    _enemy_ticks: int = field(default=0, repr=False)
    _frame_ticks: int = field(default=0, repr=False)

    @classmethod
    def from_lines(cls, lines: Iterable[str], bonus: bool = False) -> "Game":
        """Build a game from map rows; newlines at the row ends are dropped."""
        grid = [list(line.split("\n", 1)[0]) for line in lines]
        game = cls(grid=grid, bonus=bonus)
        if game.player is None:
            raise MapError()
        game.coin_total = sum(row.count(COIN) for row in grid)
        return game

    @property
    def player(self) -> tuple[int, int] | None:
        """The player's ``(row, column)``, or ``None`` once it left the board."""
        for r, row in enumerate(self.grid):
            for c, tile in enumerate(row):
                if tile == PLAYER:
                    return r, c
        return None

    def _at(self, row: int, col: int) -> str | None:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return None

    def rows(self) -> list[str]:
        """Return the current board as strings, one per row."""
        return ["".join(row) for row in self.grid]

    def move(self, direction: Direction) -> bool:
        """Try to move the player; return whether the move counted."""
        if self.status is not Status.PLAYING:
            return False
        moved = self._step_player(direction)
        if self.status is Status.PLAYING and direction in (
            Direction.LEFT,
            Direction.RIGHT,
        ):
            self.facing = direction
        return moved

    def _step_player(self, direction: Direction) -> bool:
        position = self.player
        if position is None:
            return False
        row, col = position
        t_row, t_col = row + direction.d_row, col + direction.d_col
        target = self._at(t_row, t_col)
        if target in (EMPTY, COIN):
            if target == COIN:
                self.coins += 1
            self.grid[row][col] = EMPTY
            self.grid[t_row][t_col] = PLAYER
            self.moves += 1
            return True
        if self.bonus and target == ENEMY:
            self.moves += 1
            self.grid[row][col] = EMPTY
            self.status = Status.LOST
            return True
        if target == EXIT and self.coins == self.coin_total:
            self.moves += 1
            self.grid[row][col] = EMPTY
            self.status = Status.WON
            return True
        return False

    def key_press(self, keycode: int) -> bool:
        """Handle a key code; return whether it was acted upon."""
        if keycode == KEY_ESCAPE:
            self.closed = True
            return True
        direction = KEY_DIRECTIONS.get(keycode)
        if direction is None or self.status is not Status.PLAYING:
            return False
        self.move(direction)
        if not self.bonus:
            printf("%d\n", self.moves)
        return True

    def _enemy_to(self, row: list[str], src: int, dst: int) -> None:
        if row[dst] == PLAYER:
            self.status = Status.LOST
        row[src] = EMPTY
        row[dst] = ENEMY

    def step_enemies(self) -> None:
        """Move at most one enemy in each row, sweeping rows top to bottom.

        Enemies go right until blocked, then left until blocked; the heading
        is shared by all enemies. Walls, coins, the exit and other enemies
        block; stepping onto the player ends the game.
        """
        for row in self.grid:
            for t, tile in enumerate(row):
                if tile != ENEMY:
                    continue
                right = row[t + 1] if t + 1 < len(row) else None
                left = row[t - 1] if t > 0 else None
                if (
                    not self._enemy_heading_left
                    and right is not None
                    and right not in _ENEMY_BLOCKERS
                ):
                    self._enemy_to(row, t, t + 1)
                    break
                if left is not None and left not in _ENEMY_BLOCKERS:
                    self._enemy_to(row, t, t - 1)
                    self._enemy_heading_left = True
                    break
                self._enemy_heading_left = False

    def tick(self) -> None:
        """Advance one frame: coin animation and, periodically, enemies.

        Does nothing outside bonus mode.
        """
        if not self.bonus:
            return
        if self.status is not Status.WON:
            if self._frame_ticks == COIN_FRAME_PERIOD:
                self._frame_ticks = 0
                self.coin_frame = (self.coin_frame + 1) % COIN_FRAMES
            self._frame_ticks += 1
        if self._enemy_ticks == ENEMY_PERIOD and self.status is not Status.WON:
            self.step_enemies()
            self._enemy_ticks = 0
        self._enemy_ticks += 1