"""Plain text maze layout.

A layout is a rectangular block of equal-length lines using ``' '`` for floor,
``'#'`` for wall and ``'X'`` for exit. Trailing newlines are ignored; anything
else outside that alphabet, a ragged row, or an empty block is rejected.
"""

import os
from typing import Iterable, List, Union

from troll_maze.errors import FormatError
from troll_maze.maze import Maze
from troll_maze.types import CHAR_TO_TILE, Tile


def load_from_lines(lines: Iterable[str]) -> Maze:
    """Parse a text layout into a :class:`Maze` with no trolls.

    Raises:
        FormatError: On an unknown character, ragged rows or an empty layout.
    """
    tiles: List[List[Tile]] = []
    for row, raw in enumerate(lines):
        line = raw.rstrip("\r\n")
        parsed: List[Tile] = []
        for col, char in enumerate(line):
            tile = CHAR_TO_TILE.get(char)
            if tile is None:
                raise FormatError(f"Bad maze character {char!r} at line {row + 1}, column {col + 1}")
            parsed.append(tile)
        if tiles and len(parsed) != len(tiles[0]):
            raise FormatError(
                f"Line {row + 1} has length {len(parsed)}, expected {len(tiles[0])}"
            )
        tiles.append(parsed)

    if not tiles or not tiles[0]:
        raise FormatError("Maze layout is empty")
    return Maze(tiles)


def load_from_file(path: Union[str, os.PathLike[str]]) -> Maze:
    with open(path, encoding="utf-8") as f:
        return load_from_lines(f.readlines())


def save_to_file(maze: Maze, path: Union[str, os.PathLike[str]]) -> None:
    """Write the tile layout of ``maze`` (trolls excluded), one row per line."""
    with open(path, "w", encoding="utf-8") as f:
        for line in maze.to_lines():
            f.write(line + "\n")
