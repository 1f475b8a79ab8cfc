"""Grid storage and position helpers.

``Grid`` is the rectangular container behind both the maze tiles and the
pathfinder's search nodes. The free functions are pure and lightweight to keep
inner loops fast.
"""

from typing import Callable, Generic, Iterator, List, Sequence, Tuple, TypeVar

from troll_maze.components import Position
from troll_maze.errors import ContractViolation
from troll_maze.types import DIRECTIONS, Direction

T = TypeVar("T")
U = TypeVar("U")


class Grid(Generic[T]):
    """Rectangular array addressed by :class:`Position`.

    Out-of-range access raises :class:`ContractViolation`; negative indices are
    rejected rather than wrapping around.
    """

    def __init__(self, rows: Sequence[Sequence[T]]) -> None:
        if not rows or not rows[0]:
            raise ContractViolation("Grid must be at least 1x1")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ContractViolation("Grid rows must all have the same length")
        self._cells: List[List[T]] = [list(row) for row in rows]
        self.height: int = len(self._cells)
        self.width: int = width

    @classmethod
    def filled(cls, height: int, width: int, value: T) -> "Grid[T]":
        """Create a ``height`` x ``width`` grid with every cell set to ``value``."""
        return cls([[value] * width for _ in range(height)])

    def map(self, fn: Callable[[T], U]) -> "Grid[U]":
        """Return a new grid of the same shape with ``fn`` applied to each cell."""
        return Grid([[fn(cell) for cell in row] for row in self._cells])

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def __getitem__(self, pos: Position) -> T:
        self._check_bounds(pos)
        return self._cells[pos.row][pos.col]

    def __setitem__(self, pos: Position, value: T) -> None:
        self._check_bounds(pos)
        self._cells[pos.row][pos.col] = value

    def rows(self) -> Iterator[Tuple[T, ...]]:
        """Yield each row as a tuple, top to bottom."""
        for row in self._cells:
            yield tuple(row)

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield Position(row, col)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self.height}x{self.width})"

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise ContractViolation(
                f"Out of bounds: {pos} for grid {self.height}x{self.width}"
            )


def adjacencies(pos: Position) -> Iterator[Position]:
    """Yield the four neighbours of ``pos`` in North, East, South, West order."""
    for direction in DIRECTIONS:
        yield pos + direction.numeric()


def direction_to(a: Position, b: Position) -> Direction:
    """Return the dominant-axis direction pointing from ``a`` back towards ``b``.

    Horizontal wins only when its distance is strictly larger; ties resolve to
    the vertical axis.
    """
    dx = a.col - b.col
    dy = a.row - b.row
    if abs(dx) > abs(dy):
        return Direction.WEST if dx >= 0 else Direction.EAST
    return Direction.NORTH if dy >= 0 else Direction.SOUTH
