"""Game configuration and tuning constants."""

from dataclasses import dataclass
from typing import Optional

from troll_maze.errors import InvalidArgument


STUN_TICKS = 3
"""Ticks a troll stays stunned after charging into a wall."""

MAX_FLOOR_DRAWS = 10_000
"""Upper bound on rejection-sampling draws in ``Maze.random_floor_tile``."""


@dataclass(frozen=True)
class GameConfig:
    """Parameters for :func:`troll_maze.state.new_game`.

    Attributes:
        height: Maze height in cells (the tile grid has ``2 * height + 1`` rows).
        width: Maze width in cells (the tile grid has ``2 * width + 1`` columns).
        num_trolls: Number of trolls placed on random floor tiles.
        seed: Seed for the shared ``random.Random`` stream. ``None`` seeds from
            the OS.
    """

    height: int = 10
    width: int = 20
    num_trolls: int = 3
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.height < 1 or self.width < 1:
            raise InvalidArgument(
                f"Maze dimensions must be positive, got {self.height}x{self.width}"
            )
        if self.num_trolls < 0:
            raise InvalidArgument(
                f"Troll count must be non-negative, got {self.num_trolls}"
            )
        # Player plus trolls need distinct floor tiles; a perfect maze has
        # h * w cells plus h * w - 1 passages.
        if self.num_trolls + 1 > 2 * self.height * self.width - 1:
            raise InvalidArgument(
                f"{self.num_trolls} trolls do not fit in a "
                f"{self.height}x{self.width} maze"
            )
