"""Action enumerations.

:class:`Action` is the string enum consumed by :func:`troll_maze.step.step`;
:class:`GymAction` is the stable integer mirror used by the Gymnasium
environment.
"""

from enum import IntEnum, StrEnum, auto

from troll_maze.types import Direction


class Action(StrEnum):
    """Player commands.

    Members:
        UP, DOWN, LEFT, RIGHT: Move (or push) one cell.
        WAIT: Stay put; trolls still act.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_TO_DIRECTION: dict[Action, Direction] = {
    Action.UP: Direction.NORTH,
    Action.DOWN: Direction.SOUTH,
    Action.LEFT: Direction.WEST,
    Action.RIGHT: Direction.EAST,
}


class GymAction(IntEnum):
    """Stable integer mapping for Gymnasium ``Discrete`` spaces."""

    UP = 0
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()
