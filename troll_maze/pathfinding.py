"""Uniform-cost shortest path to the nearest exit.

Every step costs 1, so the search degenerates to breadth-first layering; the
priority queue keeps it correct should weighted terrain ever appear. The first
time an exit is popped its route is optimal.

The search never mutates the maze. Wall tiles and off-grid positions are
impassable; an unreachable exit is reported as an empty path, not an error.
"""

import heapq
import logging
from dataclasses import dataclass
from itertools import count
from typing import List, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from troll_maze.components import Position
from troll_maze.maze import Maze
from troll_maze.types import DIRECTIONS, Direction, Tile
from troll_maze.utils.grid import Grid


_LOGGER = logging.getLogger(__name__)

# (cost, insertion order, position, arrived_from)
HeapEntry = Tuple[int, int, Position, Direction]


@dataclass
class SearchNode:
    """Per-cell search bookkeeping.

    Attributes:
        cost: Finalized cost from the start, ``None`` while unvisited.
        arrived_from: Direction to step in to move one cell back towards the start.
    """

    cost: Optional[int] = None
    arrived_from: Direction = Direction.NORTH


def pathfind(
    maze: Maze, start: Position, logger: Optional[logging.Logger] = None
) -> PVector[Position]:
    """Return the shortest route from ``start`` to any exit.

    Args:
        maze: Maze to search; left untouched.
        start: Starting position (must be in bounds).
        logger: Optional logger; defaults to the module logger.

    Returns:
        PVector[Position]: Positions after ``start`` up to and including the
        exit, each 4-adjacent to the previous one. Empty if no exit is
        reachable or ``start`` is itself the exit.
    """
    log = logger or _LOGGER
    nodes: Grid[SearchNode] = maze.map.map(lambda _: SearchNode())
    order = count()
    heap: List[HeapEntry] = [(0, next(order), start, Direction.NORTH)]
    exit_pos: Optional[Position] = None

    while heap:
        cost, _, pos, arrived_from = heapq.heappop(heap)
        log.debug("Considering cell %s at cost %d", pos, cost)
        if maze.tile_at(pos) == Tile.EXIT:
            nodes[pos].arrived_from = arrived_from
            nodes[pos].cost = cost
            exit_pos = pos
            break

        node = nodes[pos]
        if node.cost is not None and node.cost <= cost:
            continue
        node.cost = cost
        node.arrived_from = arrived_from

        for direction in DIRECTIONS:
            next_pos = pos + direction.numeric()
            if not maze.in_bounds(next_pos) or maze.tile_at(next_pos) == Tile.WALL:
                continue
            heapq.heappush(heap, (cost + 1, next(order), next_pos, direction.flip()))

    if exit_pos is None:
        log.warning("Couldn't find a path from %s to an exit", start)
        return pvector()

    path: List[Position] = []
    current = exit_pos
    while current != start:
        path.append(current)
        current = current + nodes[current].arrived_from.numeric()
    path.reverse()
    log.debug("Path from %s: %s", start, path)
    return pvector(path)
