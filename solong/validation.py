"""Checks that a map is well formed and playable."""

from __future__ import annotations

from typing import Iterable, Sequence

from .mapfile import (
    MapError,
    PathType,
    Position,
    count_map_lines,
    find_player,
    first_line_size,
    load_map,
)

VALID_CHARS = frozenset("01CEP\n")
COIN_PASSABLE = frozenset("P0C")
EXIT_PASSABLE = frozenset("P0CE")

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def check_all_lines(grid: Sequence[str], width: int) -> bool:
    """True when every row is exactly ``width`` characters long."""
    return all(len(row) == width for row in grid)


def check_walls(grid: Sequence[str], width: int, height: int) -> bool:
    """True when the border of the ``width`` by ``height`` area is made of walls.

    The rows are expected to be ``width`` long already. As in the checked
    layout, the bottom-right corner is not inspected, and an area with a single
    row or column passes.
    """
    last_row = height - 1
    last_col = width - 1
    if last_row <= 0 or last_col <= 0:
        return True
    sides = all(row[0] == "1" and row[last_col] == "1" for row in grid[:last_row])
    top = all(cell == "1" for cell in grid[0][:last_col])
    bottom = all(cell == "1" for cell in grid[last_row][:last_col])
    return sides and top and bottom


def count_collectibles(grid: Sequence[str]) -> int:
    """Number of collectibles 'C' in the grid."""
    return sum(row.count("C") for row in grid)


def check_valid_chars(grid: Sequence[str], width: int) -> bool:
    """True when the first ``width`` cells of each row hold only map characters."""
    return all(
        len(row) >= width and all(cell in VALID_CHARS for cell in row[:width])
        for row in grid
    )


def has_collectible(grid: Sequence[str]) -> bool:
    """True when the grid holds at least one collectible."""
    return any("C" in row for row in grid)


def check_player_and_exit(grid: Sequence[str]) -> bool:
    """True when there is exactly one player and exactly one exit."""
    exits = sum(row.count("E") for row in grid)
    players = sum(row.count("P") for row in grid)
    return exits == 1 and players == 1


def flood_fill(
    grid: Sequence[str], start: Position, passable: Iterable[str]
) -> set[Position]:
    """Cells reachable from ``start`` by orthogonal steps over ``passable`` cells."""
    allowed = frozenset(passable)
    reached: set[Position] = set()
    pending = [start]
    while pending:
        pos = pending.pop()
        if pos in reached:
            continue
        if not (0 <= pos.y < len(grid) and 0 <= pos.x < len(grid[pos.y])):
            continue
        if grid[pos.y][pos.x] not in allowed:
            continue
        reached.add(pos)
        pending.extend(Position(pos.x + dx, pos.y + dy) for dx, dy in _STEPS)
    return reached


def check_paths(grid: Sequence[str]) -> bool:
    """True when the player can reach every collectible and exactly one exit.

    Collectibles are reached without crossing the exit; the exit may be
    reached through any floor, collectible or start cell.
    """
    start = find_player(grid)
    coins = flood_fill(grid, start, COIN_PASSABLE)
    coins_reached = sum(1 for pos in coins if grid[pos.y][pos.x] == "C")
    area = flood_fill(grid, start, EXIT_PASSABLE)
    exits_reached = sum(1 for pos in area if grid[pos.y][pos.x] == "E")
    return coins_reached == count_collectibles(grid) and exits_reached == 1


def validate_map(path: PathType) -> list[str]:
    """Load the map at ``path`` and check it; return its rows or raise MapError."""
    grid = load_map(path)
    width = first_line_size(path)
    height = count_map_lines(path)
    if not check_valid_chars(grid, width):
        raise MapError("map contains invalid characters")
    if not check_all_lines(grid, width):
        raise MapError("map is not rectangular")
    if not check_walls(grid, width, height):
        raise MapError("map is not surrounded by walls")
    if not check_player_and_exit(grid):
        raise MapError("map needs exactly one player and one exit")
    if not has_collectible(grid):
        raise MapError("map has no collectible")
    return grid