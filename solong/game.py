"""Game state: the player walks the map, gathers collectibles and leaves."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, Sequence, TextIO

from .mapfile import PathType, count_map_lines, find_player, first_line_size, load_map
from .validation import count_collectibles

_WALKABLE = frozenset("0PC")
_DRAWN = frozenset("1CE")


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 97
    D = 100
    S = 115
    W = 119
    ESCAPE = 65307


_MOVES = {Key.W: (-1, 0), Key.S: (1, 0), Key.A: (0, -1), Key.D: (0, 1)}


class Game:
    """A running game on a grid of ``lines`` rows and ``width`` columns."""

    def __init__(
        self,
        grid: Sequence[str],
        lines: Optional[int] = None,
        width: Optional[int] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.grid = [list(row) for row in grid]
        self.lines = len(self.grid) if lines is None else lines
        if width is None:
            width = len(self.grid[0]) if self.grid else 0
        self.width = width
        start = find_player(grid)
        self.row = start.y
        self.col = start.x
        self.total = count_collectibles([row[: self.width] for row in grid[: self.lines]])
        self.collected = 0
        self.moves = 0
        self.finished = False
        self.won = False
        self._output = output

    @classmethod
    def from_file(cls, path: PathType) -> "Game":
        """Start a game on the map stored at ``path``."""
        grid = load_map(path)
        return cls(grid, count_map_lines(path), first_line_size(path))

    def _cell(self, row: int, col: int) -> Optional[str]:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return None

    def press(self, key: int) -> bool:
        """Handle a key press; return True when the player moved.

        Escape ends the game. Stepping onto the exit is only possible once
        every collectible is gathered, and it ends the game as won.
        """
        if self.finished:
            return False
        try:
            key = Key(key)
        except ValueError:
            return False
        if key is Key.ESCAPE:
            self.finished = True
            return False
        d_row, d_col = _MOVES[key]
        row, col = self.row + d_row, self.col + d_col
        target = self._cell(row, col)
        index, limit = (row, self.lines) if d_row else (col, self.width)
        if target in _WALKABLE and 0 <= index < limit:
            self.row, self.col = row, col
            if target == "C":
                self.collected += 1
                self.grid[row][col] = "0"
            self.moves += 1
            out = sys.stdout if self._output is None else self._output
            print(f"your move:{self.moves}", file=out)
            return True
        if target == "E" and self.collected == self.total:
            self.row, self.col = row, col
            self.finished = True
            self.won = True
            return True
        return False

    def render(self) -> list[str]:
        """The visible map: walls, collectibles, exit, floor and the player 'P'."""
        rows = []
        for row_index, row in enumerate(self.grid[: self.lines]):
            tiles = [cell if cell in _DRAWN else "0" for cell in row[: self.width]]
            if row_index == self.row and 0 <= self.col < len(tiles):
                tiles[self.col] = "P"
            rows.append("".join(tiles))
        return rows