"""Component aggregates.

Re-exports the value types systems operate on: :class:`Position`, the
:class:`Troll` agent with its AI states, and the :class:`Player`.
"""

from .player import PLAYER_GLYPH, Player
from .position import Position
from .troll import Charging, Stunned, Troll, TrollState, Wandering

__all__ = [
    "Charging",
    "PLAYER_GLYPH",
    "Player",
    "Position",
    "Stunned",
    "Troll",
    "TrollState",
    "Wandering",
]
