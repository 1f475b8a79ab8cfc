"""Plain text rendering.

Overlays trolls and the player on the tile layout. No colour or cursor escape
codes are emitted; terminal front ends add those themselves.
"""

from typing import List, Optional

from troll_maze.components import PLAYER_GLYPH, Player
from troll_maze.maze import Maze

DEAD_TROLL_GLYPH = "*"


def render_lines(maze: Maze, player: Optional[Player] = None) -> List[str]:
    """Return one string per tile row.

    Living trolls are drawn as the arrow of their facing, dead trolls as
    ``*`` and the player as ``@`` (the player is drawn last).
    """
    canvas: List[List[str]] = [list(line) for line in maze.to_lines()]
    for pos, troll in maze.iter_trolls():
        canvas[pos.row][pos.col] = troll.glyph if troll.alive else DEAD_TROLL_GLYPH
    if player is not None:
        canvas[player.position.row][player.position.col] = PLAYER_GLYPH
    return ["".join(row) for row in canvas]
