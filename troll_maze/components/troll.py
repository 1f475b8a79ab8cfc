"""Troll component and its per-tick state machine.

A troll is stored in :attr:`troll_maze.maze.Maze.trolls` keyed by its current
position. The mutable fields (``facing``, ``alive``, ``state``) are changed
only by :meth:`Troll.update`, except for ``alive`` which the wall-push
mechanic clears when it crushes an occupant.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple, Union

from troll_maze.components.position import Position
from troll_maze.config import STUN_TICKS
from troll_maze.errors import ContractViolation, InvalidArgument
from troll_maze.types import DIRECTIONS, Direction, Tile

if TYPE_CHECKING:
    from troll_maze.maze import Maze


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wandering:
    """Random walk; looks ahead for the player every tick."""


@dataclass(frozen=True)
class Charging:
    """Running in a straight line along ``facing``."""


@dataclass(frozen=True)
class Stunned:
    """Recovering from a wall impact.

    Attributes:
        ticks: Remaining ticks, always positive.
    """

    ticks: int

    def __post_init__(self) -> None:
        if self.ticks <= 0:
            raise InvalidArgument(f"Stunned ticks must be positive, got {self.ticks}")


TrollState = Union[Wandering, Charging, Stunned]


@dataclass
class Troll:
    """Pursuing agent.

    Attributes:
        facing: Direction the troll looks and charges in.
        alive: ``False`` once crushed by a push; dead trolls never act again.
        state: Current AI state.
    """

    facing: Direction
    alive: bool = True
    state: TrollState = field(default_factory=Wandering)

    @classmethod
    def with_random_facing(cls, rng: random.Random) -> "Troll":
        """Create a wandering troll with a uniformly random facing."""
        return cls(facing=rng.choice(DIRECTIONS))

    def update(
        self,
        pos: Position,
        maze: "Maze",
        player_pos: Position,
        rng: random.Random,
        logger: Optional[logging.Logger] = None,
    ) -> Tuple[Position, bool]:
        """Advance this troll by one tick.

        Args:
            pos: The troll's current position.
            maze: Live maze; may be mutated through a push while charging.
            player_pos: Current player position.
            rng: Shared random stream (one draw per wandering tick).
            logger: Optional logger; defaults to the module logger.

        Returns:
            Tuple[Position, bool]: The troll's new position and whether it
            caught the player.

        Raises:
            ContractViolation: If a step would leave the map.
        """
        log = logger or _LOGGER
        if not self.alive:
            return pos, False

        if isinstance(self.state, Wandering):
            return self._wander(pos, maze, player_pos, rng)
        if isinstance(self.state, Charging):
            return self._charge(pos, maze, player_pos, log)

        ticks = self.state.ticks - 1
        self.state = Wandering() if ticks == 0 else Stunned(ticks)
        return pos, False

    def _wander(
        self,
        pos: Position,
        maze: "Maze",
        player_pos: Position,
        rng: random.Random,
    ) -> Tuple[Position, bool]:
        direction = rng.choice(DIRECTIONS)
        if direction == self.facing:
            new_pos = pos + direction.numeric()
            if not maze.in_bounds(new_pos):
                raise ContractViolation(f"Troll at {pos} wandered off the map")
            if new_pos == player_pos:
                return new_pos, True
            if maze.tile_at(new_pos) == Tile.FLOOR:
                pos = new_pos
        else:
            self.facing = direction

        if self._can_see(pos, maze, player_pos):
            self.state = Charging()
        return pos, False

    def _can_see(self, pos: Position, maze: "Maze", player_pos: Position) -> bool:
        probe = pos + self.facing.numeric()
        while maze.in_bounds(probe):
            if probe == player_pos:
                return True
            if maze.tile_at(probe) != Tile.FLOOR:
                return False
            probe = probe + self.facing.numeric()
        return False

    def _charge(
        self,
        pos: Position,
        maze: "Maze",
        player_pos: Position,
        log: logging.Logger,
    ) -> Tuple[Position, bool]:
        new_pos = pos + self.facing.numeric()
        if not maze.in_bounds(new_pos):
            raise ContractViolation(f"Troll at {pos} charged off the map")
        if new_pos == player_pos:
            return new_pos, True

        tile = maze.tile_at(new_pos)
        if tile == Tile.FLOOR:
            return new_pos, False
        if tile == Tile.WALL:
            log.debug("Troll at %s hit the wall at %s", pos, new_pos)
            maze.push(new_pos, self.facing, logger=log)
            self.state = Stunned(STUN_TICKS)
        else:
            self.state = Wandering()
        return pos, False

    @property
    def glyph(self) -> str:
        return self.facing.glyph
