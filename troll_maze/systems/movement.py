"""Player movement system.

The player turns to face ``direction`` and then:

1. Wall ahead: pushes it with :meth:`Maze.push` (the same mechanic charging
   trolls use) and stays put.
2. Floor or exit ahead: steps onto it.
3. Off the grid: stays put.

Stepping onto a living troll's cell is reported as a capture.
"""

import logging
from typing import Optional

from troll_maze.components import Player
from troll_maze.maze import Maze
from troll_maze.types import Direction, Tile


def movement_system(
    maze: Maze,
    player: Player,
    direction: Direction,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Move ``player`` one cell along ``direction``.

    Returns:
        bool: True if the player walked into a living troll.
    """
    player.facing = direction
    next_pos = player.position + direction.numeric()
    if not maze.in_bounds(next_pos):
        return False

    if maze.tile_at(next_pos) == Tile.WALL:
        maze.push(next_pos, direction, logger=logger)
        return False

    player.position = next_pos
    troll = maze.trolls.get(next_pos)
    return troll is not None and troll.alive
