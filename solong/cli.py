"""Command line entry: check a map file and play it from the keyboard."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .game import Game, Key
from .mapfile import MapError, PathType
from .validation import validate_map

_ESCAPE_CHAR = "\x1b"


def check_extension(path: str) -> bool:
    """True when the map file name ends in '.ber'."""
    return path.endswith(".ber")


def check_nonempty(path: PathType) -> bool:
    """True when the file holds at least one byte; MapError if it cannot be read."""
    try:
        with open(path, "rb") as handle:
            return bool(handle.read(1))
    except OSError as exc:
        raise MapError(f"cannot open {path!s}: {exc.strerror}") from exc


def _error(stream: TextIO) -> int:
    stream.write("Error\n")
    return 1


def _show(game: Game, stream: TextIO) -> None:
    stream.write("\n".join(game.render()) + "\n")


def _play(game: Game, keys: TextIO, screen: TextIO) -> None:
    _show(game, screen)
    for line in keys:
        for char in line:
            key = Key.ESCAPE if char == _ESCAPE_CHAR else ord(char)
            if game.press(key) and not game.finished:
                _show(game, screen)
            if game.finished:
                return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _error(sys.stderr)
    path = args[0]
    if not check_extension(path):
        return _error(sys.stdout)
    try:
        if not check_nonempty(path):
            return _error(sys.stdout)
        validate_map(path)
        game = Game.from_file(path)
    except MapError:
        return _error(sys.stderr)
    _play(game, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())