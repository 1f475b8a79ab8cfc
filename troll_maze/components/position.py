"""Position component.

Immutable signed grid coordinates, hashable so they can key the maze's troll
map and the pathfinder's search grid.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def __add__(self, other: Union["Position", Tuple[int, int]]) -> "Position":
        if isinstance(other, Position):
            return Position(self.row + other.row, self.col + other.col)
        drow, dcol = other
        return Position(self.row + drow, self.col + dcol)
