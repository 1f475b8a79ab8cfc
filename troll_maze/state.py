"""Game session state.

:class:`Game` bundles everything a tick reads and writes: the maze (which owns
the trolls), the player, and the single shared random stream. It is mutated in
place by :func:`troll_maze.step.step`; ``win`` and ``lose`` are mutually
exclusive terminal markers.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Optional, Set

from pyrsistent import pmap
from pyrsistent.typing import PMap

from troll_maze.components import Player, Position, Troll
from troll_maze.config import GameConfig
from troll_maze.errors import ExhaustedRetries
from troll_maze.levels.generator import generate
from troll_maze.maze import Maze


_LOGGER = logging.getLogger(__name__)

_MAX_PLACEMENT_ATTEMPTS = 1_000


@dataclass
class Game:
    """Mutable game session.

    Attributes:
        maze (Maze): Tiles and trolls.
        player (Player): The controlled agent.
        rng (random.Random): Shared stream for every troll's wandering draw.
        turn (int): Completed ticks.
        win (bool): True once the player stands on an exit.
        lose (bool): True once a troll caught the player.
        message (str | None): Human-readable outcome.
    """

    maze: Maze
    player: Player
    rng: random.Random
    turn: int = 0
    win: bool = False
    lose: bool = False
    message: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.win or self.lose

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary for diagnostics."""
        return pmap(
            {
                "size": (self.maze.height, self.maze.width),
                "player": self.player.position,
                "trolls": sum(1 for _ in self.maze.living_trolls()),
                "turn": self.turn,
                "win": self.win,
                "lose": self.lose,
                "message": self.message,
            }
        )


def _free_floor_tile(
    maze: Maze, rng: random.Random, taken: Set[Position], log: logging.Logger
) -> Position:
    for _ in range(_MAX_PLACEMENT_ATTEMPTS):
        pos = maze.random_floor_tile(rng)
        if pos not in taken:
            return pos
        log.debug("Floor tile %s already occupied, drawing again", pos)
    raise ExhaustedRetries(
        f"No free floor tile found after {_MAX_PLACEMENT_ATTEMPTS} attempts"
    )


def populate(
    maze: Maze,
    num_trolls: int,
    rng: random.Random,
    logger: Optional[logging.Logger] = None,
) -> Player:
    """Place the player and ``num_trolls`` trolls on distinct floor tiles."""
    log = logger or _LOGGER
    player = Player(position=maze.random_floor_tile(rng))
    taken: Set[Position] = {player.position}
    for _ in range(num_trolls):
        pos = _free_floor_tile(maze, rng, taken, log)
        maze.add_troll(pos, Troll.with_random_facing(rng))
        taken.add(pos)
    log.info("Placed player at %s and %d trolls", player.position, num_trolls)
    return player


def new_game(config: GameConfig, logger: Optional[logging.Logger] = None) -> Game:
    """Generate a maze and populate it according to ``config``."""
    rng = random.Random(config.seed)
    maze = generate(config.height, config.width, rng, logger=logger)
    player = populate(maze, config.num_trolls, rng, logger=logger)
    return Game(maze=maze, player=player, rng=rng)
