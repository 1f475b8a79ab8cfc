"""Common enumerations and type aliases.

``Direction`` is the 4-way movement vocabulary shared by the player, the
trolls, the generator and the pathfinder. ``Tile`` classifies a single grid
cell.
"""

from enum import StrEnum, auto
from typing import Tuple


Offset = Tuple[int, int]
"""Raw ``(drow, dcol)`` displacement."""


class Direction(StrEnum):
    """Cardinal direction.

    Member order (North, East, South, West) is the canonical iteration order
    used for adjacency scans and random draws.
    """

    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()

    def numeric(self) -> Offset:
        """Return the unit ``(drow, dcol)`` step for this direction."""
        return _NUMERIC[self]

    def flip(self) -> "Direction":
        """Return the opposite direction."""
        return _FLIP[self]

    @property
    def glyph(self) -> str:
        """Single-character arrow used by the text renderer."""
        return _GLYPH[self]


_NUMERIC: dict[Direction, Offset] = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}

_FLIP: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_GLYPH: dict[Direction, str] = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}

DIRECTIONS: list[Direction] = list(Direction)


class Tile(StrEnum):
    """Immutable classification of one grid cell."""

    FLOOR = auto()
    WALL = auto()
    EXIT = auto()

    @property
    def char(self) -> str:
        """Character used for this tile in the plain text layout."""
        return TILE_TO_CHAR[self]


TILE_TO_CHAR: dict[Tile, str] = {
    Tile.FLOOR: " ",
    Tile.WALL: "#",
    Tile.EXIT: "X",
}

CHAR_TO_TILE: dict[str, Tile] = {char: tile for tile, char in TILE_TO_CHAR.items()}
