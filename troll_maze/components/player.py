"""Player component."""

from dataclasses import dataclass

from troll_maze.components.position import Position
from troll_maze.types import Direction


PLAYER_GLYPH = "@"


@dataclass
class Player:
    """The human-controlled agent.

    Attributes:
        position: Current grid position.
        facing: Direction of the last move attempt.
    """

    position: Position
    facing: Direction = Direction.EAST
