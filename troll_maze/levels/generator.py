"""Hunt-and-Kill perfect maze generation.

The tile grid for an ``h`` x ``w`` cell maze has ``2h + 1`` rows and
``2w + 1`` columns. Cell centres sit on odd/odd coordinates; every other tile
is a potential wall between cells. Generation starts fully walled, carves the
exit at ``(1, 0)`` and the first cell at ``(1, 1)``, then alternates:

* **hunt**: scan cell rows (never revisiting a finished row) for the first
  cell whose centre is still wall, and graft it onto a random visited
  neighbour;
* **kill**: random-walk from that cell through unvisited neighbours, carving
  as it goes, until it is boxed in.

Every carve joins an unvisited cell to the visited tree, so the result is a
spanning tree over the cells: ``h * w - 1`` passages and no cycles.
"""

import logging
import random
from typing import Iterator, List, Optional

from troll_maze.components import Position
from troll_maze.errors import ContractViolation, InvalidArgument
from troll_maze.maze import Maze
from troll_maze.types import DIRECTIONS, Tile


_LOGGER = logging.getLogger(__name__)

EXIT_POSITION = Position(1, 0)
FIRST_CELL = Position(1, 1)


def cell_center(cell_row: int, cell_col: int) -> Position:
    """Tile position of the centre of cell ``(cell_row, cell_col)``."""
    return Position(2 * cell_row + 1, 2 * cell_col + 1)


def _neighbour_cells(maze: Maze, center: Position) -> Iterator[Position]:
    """Yield in-bounds neighbouring cell centres in North, East, South, West order."""
    for direction in DIRECTIONS:
        drow, dcol = direction.numeric()
        neighbour = center + (2 * drow, 2 * dcol)
        if maze.in_bounds(neighbour):
            yield neighbour


def _carve_between(maze: Maze, a: Position, b: Position) -> None:
    midway = Position((a.row + b.row) // 2, (a.col + b.col) // 2)
    maze.set_tile(midway, Tile.FLOOR)


class _HuntAndKill:
    def __init__(
        self, height: int, width: int, rng: random.Random, log: logging.Logger
    ) -> None:
        self.height = height
        self.width = width
        self.rng = rng
        self.log = log
        self.finished_row = 0
        self.maze = Maze([[Tile.WALL] * (2 * width + 1) for _ in range(2 * height + 1)])

    def run(self) -> Maze:
        self.maze.set_tile(EXIT_POSITION, Tile.EXIT)
        self.maze.set_tile(FIRST_CELL, Tile.FLOOR)
        while (start := self.hunt()) is not None:
            self.graft(start)
            self.kill(start)
        return self.maze

    def hunt(self) -> Optional[Position]:
        while self.finished_row < self.height:
            for cell_col in range(self.width):
                center = cell_center(self.finished_row, cell_col)
                if self.maze.tile_at(center) == Tile.WALL:
                    return center
            self.finished_row += 1
        return None

    def graft(self, center: Position) -> None:
        visited: List[Position] = [
            n for n in _neighbour_cells(self.maze, center)
            if self.maze.tile_at(n) == Tile.FLOOR
        ]
        if not visited:
            raise ContractViolation(f"Hunted cell {center} has no visited neighbour")
        target = self.rng.choice(visited)
        _carve_between(self.maze, center, target)
        self.log.debug("Grafted %s onto %s", center, target)

    def kill(self, center: Position) -> None:
        current = center
        while True:
            self.maze.set_tile(current, Tile.FLOOR)
            unvisited: List[Position] = [
                n for n in _neighbour_cells(self.maze, current)
                if self.maze.tile_at(n) == Tile.WALL
            ]
            if not unvisited:
                return
            nxt = self.rng.choice(unvisited)
            _carve_between(self.maze, current, nxt)
            current = nxt


def generate(
    height: int,
    width: int,
    rng: random.Random,
    logger: Optional[logging.Logger] = None,
) -> Maze:
    """Generate a perfect maze of ``height`` x ``width`` cells.

    Args:
        height: Cell rows, at least 1.
        width: Cell columns, at least 1.
        rng: Random stream; identical seeds yield identical mazes.
        logger: Optional logger; defaults to the module logger.

    Returns:
        Maze: A fresh maze with no trolls and a single exit at ``(1, 0)``.

    Raises:
        InvalidArgument: If either dimension is below 1.
    """
    log = logger or _LOGGER
    if height < 1 or width < 1:
        raise InvalidArgument(f"Maze dimensions must be positive, got {height}x{width}")
    maze = _HuntAndKill(height, width, rng, log).run()
    log.info("Generated %dx%d cell maze (%dx%d tiles)", height, width, maze.height, maze.width)
    return maze
