"""Reading map files into grids of rows."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Sequence, TextIO, Union

PathType = Union[str, "PathLike[str]"]


class MapError(Exception):
    """A map file is missing, unreadable or malformed."""


@dataclass(frozen=True)
class Position:
    """A cell of the grid: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, each with its newline if it has one."""
    while True:
        line = stream.readline()
        if not line:
            return
        yield line


def _read_text(path: PathType) -> str:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise MapError(f"cannot read map file {path!s}: {exc.strerror}") from exc


def count_map_lines(path: PathType) -> int:
    """Number of newline characters in the file."""
    return _read_text(path).count("\n")


def first_line_size(path: PathType) -> int:
    """Number of characters before the first newline of the file."""
    return len(_read_text(path).split("\n", 1)[0])


def load_map(path: PathType) -> list[str]:
    """Read a map file into its rows, without newlines.

    A line holding nothing but a newline makes the map invalid.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            lines = list(read_lines(handle))
    except OSError as exc:
        raise MapError(f"cannot read map file {path!s}: {exc.strerror}") from exc
    if any(line == "\n" for line in lines):
        raise MapError("map contains an empty line")
    return [row for row in "".join(lines).split("\n") if row]


def find_player(grid: Sequence[str]) -> Position:
    """Position of the player 'P'; when there are several, the last one found."""
    found = None
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == "P":
                found = Position(x, y)
    if found is None:
        raise MapError("map has no player")
    return found