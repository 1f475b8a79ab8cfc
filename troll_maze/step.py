"""Tick orchestration.

One tick is one accepted player command followed by one troll sweep:

1. Terminal games are returned unchanged.
2. Move actions go through :func:`movement_system` (which may push a wall).
3. Reaching an exit wins immediately; trolls do not act on that tick.
4. Otherwise every troll updates once via :func:`troll_system`.
5. The turn counter advances.
"""

import logging
from typing import Optional

from pyrsistent.typing import PVector

from troll_maze.actions import ACTION_TO_DIRECTION, MOVE_ACTIONS, Action
from troll_maze.components import Position
from troll_maze.pathfinding import pathfind
from troll_maze.state import Game
from troll_maze.systems.movement import movement_system
from troll_maze.systems.troll import troll_system
from troll_maze.types import Tile


_LOGGER = logging.getLogger(__name__)


def step(game: Game, action: Action, logger: Optional[logging.Logger] = None) -> Game:
    """Advance ``game`` by one tick in place and return it.

    Raises:
        ValueError: If ``action`` is not a known :class:`Action`.
    """
    log = logger or _LOGGER
    if game.is_terminal:
        return game

    if action in MOVE_ACTIONS:
        if movement_system(game.maze, game.player, ACTION_TO_DIRECTION[action], logger=log):
            return _lose(game, log)
    elif action != Action.WAIT:
        raise ValueError(f"Action is not valid: {action!r}")

    if game.maze.tile_at(game.player.position) == Tile.EXIT:
        game.win = True
        game.message = "You escaped the maze!"
        game.turn += 1
        log.info("Player escaped after %d turns", game.turn)
        return game

    if troll_system(game.maze, game.player.position, game.rng, logger=log):
        return _lose(game, log)

    game.turn += 1
    return game


def _lose(game: Game, log: logging.Logger) -> Game:
    game.lose = True
    game.message = "A troll caught you!"
    game.turn += 1
    log.info("Player caught after %d turns", game.turn)
    return game


def hint(game: Game, logger: Optional[logging.Logger] = None) -> Optional[Position]:
    """Return the next cell on the shortest route to the exit, if any."""
    path: PVector[Position] = pathfind(game.maze, game.player.position, logger=logger)
    return path[0] if path else None
