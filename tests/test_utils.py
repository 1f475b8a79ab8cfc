import random
from collections import deque
from typing import Dict, Iterable, List, Optional, Sequence

from troll_maze.components import Position
from troll_maze.levels.loader import load_from_lines
from troll_maze.maze import Maze
from troll_maze.types import Tile


# 5x5 layout with a single route from the bottom corridor to the exit.
FIXED_LAYOUT: List[str] = [
    "#####",
    "X   #",
    "### #",
    "#   #",
    "#####",
]

# 4x9 layout: row 2 is an open corridor from (2, 2) to (2, 6).
CORRIDOR_LAYOUT: List[str] = [
    "#########",
    "#########",
    "##     ##",
    "#########",
]


class ScriptedRandom(random.Random):
    """``random.Random`` whose ``choice`` returns a scripted sequence."""

    def __init__(self, choices: Iterable[object], seed: int = 0) -> None:
        super().__init__(seed)
        self._choices: List[object] = list(choices)

    def choice(self, seq):  # type: ignore[override]
        if not self._choices:
            raise AssertionError("ScriptedRandom ran out of scripted choices")
        value = self._choices.pop(0)
        assert value in seq, f"scripted {value!r} not among {list(seq)!r}"
        return value

    @property
    def remaining(self) -> int:
        return len(self._choices)


def make_maze(layout: Sequence[str]) -> Maze:
    return load_from_lines(layout)


def bfs_distances(maze: Maze, start: Position) -> Dict[Position, int]:
    """Independent breadth-first step counts over non-wall tiles."""
    dist: Dict[Position, int] = {start: 0}
    queue: deque[Position] = deque([start])
    while queue:
        pos = queue.popleft()
        if maze.tile_at(pos) == Tile.EXIT and pos != start:
            continue
        for drow, dcol in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = Position(pos.row + drow, pos.col + dcol)
            if not maze.in_bounds(nxt) or nxt in dist:
                continue
            if maze.tile_at(nxt) == Tile.WALL:
                continue
            dist[nxt] = dist[pos] + 1
            queue.append(nxt)
    return dist


def bfs_exit_distance(maze: Maze, start: Position) -> Optional[int]:
    dist = bfs_distances(maze, start)
    exits = [d for pos, d in dist.items() if maze.tile_at(pos) == Tile.EXIT]
    return min(exits) if exits else None


def is_adjacent(a: Position, b: Position) -> bool:
    return abs(a.row - b.row) + abs(a.col - b.col) == 1

