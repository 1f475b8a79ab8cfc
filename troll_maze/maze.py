"""Mutable maze world.

The :class:`Maze` owns the tile grid and the position-keyed troll map. Unlike
an entity registry, the troll map is keyed by :class:`Position`, so two trolls
can never share a cell: :meth:`Maze.add_troll` on an occupied cell replaces the
previous occupant.

All terrain mutation during play goes through :meth:`Maze.push`, which both
the player and charging trolls use.
"""

import logging
import random
from typing import Dict, Iterator, Optional, Sequence, Tuple

from troll_maze.components import Position, Troll
from troll_maze.config import MAX_FLOOR_DRAWS
from troll_maze.errors import ExhaustedRetries
from troll_maze.types import Direction, Tile
from troll_maze.utils.grid import Grid


_LOGGER = logging.getLogger(__name__)


class Maze:
    """Tile grid plus trolls.

    Attributes:
        map (Grid[Tile]): Tile storage, at least 1x1.
        trolls (Dict[Position, Troll]): Trolls keyed by their current cell.
    """

    def __init__(self, tiles: Sequence[Sequence[Tile]]) -> None:
        self.map: Grid[Tile] = Grid(tiles)
        self.trolls: Dict[Position, Troll] = {}

    @property
    def height(self) -> int:
        return self.map.height

    @property
    def width(self) -> int:
        return self.map.width

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the tile grid."""
        return self.map.in_bounds(pos)

    def tile_at(self, pos: Position) -> Tile:
        """Return the tile at ``pos``; raises ``ContractViolation`` if out of bounds."""
        return self.map[pos]

    def set_tile(self, pos: Position, tile: Tile) -> None:
        self.map[pos] = tile

    def add_troll(self, pos: Position, troll: Troll) -> None:
        """Place ``troll`` at ``pos``, replacing any troll already there."""
        self.trolls[pos] = troll

    def iter_trolls(self) -> Iterator[Tuple[Position, Troll]]:
        """Yield ``(position, troll)`` pairs sorted by position."""
        for pos in sorted(self.trolls):
            yield pos, self.trolls[pos]

    def living_trolls(self) -> Iterator[Tuple[Position, Troll]]:
        for pos, troll in self.iter_trolls():
            if troll.alive:
                yield pos, troll

    def push(
        self, pos: Position, direction: Direction, logger: Optional[logging.Logger] = None
    ) -> None:
        """Slide the wall at ``pos`` one cell along ``direction``.

        The far cell is ``pos + direction``. If it lies outside the grid nothing
        happens. Otherwise any troll standing on ``pos`` is crushed
        (``alive = False``), and if the far cell is floor the two tiles swap:
        ``pos`` opens up and the far cell becomes wall. A far wall or exit
        leaves the tiles untouched.
        """
        log = logger or _LOGGER
        far = pos + direction.numeric()
        if not self.in_bounds(far):
            return

        occupant = self.trolls.get(pos)
        if occupant is not None:
            log.debug("Troll at %s crushed by push towards %s", pos, direction)
            occupant.alive = False

        if self.tile_at(far) == Tile.FLOOR:
            self.set_tile(far, Tile.WALL)
            self.set_tile(pos, Tile.FLOOR)
            log.debug("Pushed wall from %s to %s", pos, far)

    def random_floor_tile(
        self, rng: random.Random, max_draws: int = MAX_FLOOR_DRAWS
    ) -> Position:
        """Draw uniformly random positions until one is a floor tile.

        Raises:
            ExhaustedRetries: If ``max_draws`` draws all miss the floor.
        """
        for _ in range(max_draws):
            pos = Position(rng.randrange(self.height), rng.randrange(self.width))
            if self.tile_at(pos) == Tile.FLOOR:
                return pos
        raise ExhaustedRetries(f"No floor tile found after {max_draws} draws")

    def exits(self) -> Iterator[Position]:
        for pos in self.map.positions():
            if self.map[pos] == Tile.EXIT:
                yield pos

    def to_lines(self) -> list[str]:
        """Serialize the tiles (trolls excluded) to the plain text layout."""
        return ["".join(tile.char for tile in row) for row in self.map.rows()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self.map == other.map and self.trolls == other.trolls

    def __repr__(self) -> str:
        return f"Maze({self.height}x{self.width}, trolls={len(self.trolls)})"
