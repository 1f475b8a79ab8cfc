"""Troll sweep system.

Runs one :meth:`Troll.update` for every troll present at the start of the
sweep, in position order so seeded games replay identically. Moves are applied
to the position-keyed map immediately, so a later troll in the same sweep sees
terrain pushed and cells vacated by earlier ones. A troll moving onto another
troll's cell replaces it; the replaced troll is then skipped.
"""

import logging
import random
from typing import Optional

from troll_maze.components import Position
from troll_maze.maze import Maze


_LOGGER = logging.getLogger(__name__)


def troll_system(
    maze: Maze,
    player_pos: Position,
    rng: random.Random,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Update every troll once.

    Args:
        maze: Live maze; trolls are re-keyed in place.
        player_pos: Player position for this tick.
        rng: Shared random stream.
        logger: Optional logger; defaults to the module logger.

    Returns:
        bool: True if any troll caught the player.
    """
    log = logger or _LOGGER
    captured = False
    for pos, troll in list(maze.iter_trolls()):
        if maze.trolls.get(pos) is not troll:
            continue  # replaced earlier in this sweep
        new_pos, caught = troll.update(pos, maze, player_pos, rng, logger=log)
        if new_pos != pos:
            del maze.trolls[pos]
            maze.add_troll(new_pos, troll)
        if caught:
            log.info("Troll from %s caught the player at %s", pos, new_pos)
            captured = True
    return captured
