"""Gymnasium environment wrapper for the troll maze.

Observation: ``np.ndarray`` of shape ``(2 * height + 1, 2 * width + 1)`` and
dtype ``int8`` holding one cell code per tile (see :data:`CELL_CODES`), with
trolls and the player drawn over the terrain.

Reward is ``+1`` on escape, ``-1`` on capture and ``0`` otherwise.
``terminated`` is ``True`` on escape, ``truncated`` on capture.

Usage:

``env = TrollMazeEnv(height=5, width=5, num_trolls=2, seed=0)``
"""

import logging
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from troll_maze.actions import Action
from troll_maze.config import GameConfig
from troll_maze.state import Game, new_game
from troll_maze.step import step
from troll_maze.types import Tile
from troll_maze.utils.render import render_lines

ObsType = np.ndarray

CELL_CODES: Dict[str, int] = {
    Tile.FLOOR: 0,
    Tile.WALL: 1,
    Tile.EXIT: 2,
    "player": 3,
    "troll": 4,
    "dead_troll": 5,
}


def observation_array(game: Game) -> np.ndarray:
    """Encode ``game`` as an ``int8`` array of :data:`CELL_CODES`."""
    maze = game.maze
    obs = np.empty((maze.height, maze.width), dtype=np.int8)
    for pos in maze.map.positions():
        obs[pos.row, pos.col] = CELL_CODES[maze.tile_at(pos)]
    for pos, troll in maze.iter_trolls():
        obs[pos.row, pos.col] = CELL_CODES["troll" if troll.alive else "dead_troll"]
    obs[game.player.position.row, game.player.position.col] = CELL_CODES["player"]
    return obs


class TrollMazeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` over a freshly generated maze per episode.

    The action space is ``Discrete(len(Action))``; see :mod:`troll_maze.actions`.
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        render_mode: str = "ansi",
        logger: Optional[logging.Logger] = None,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: Only ``"ansi"`` (plain text) is supported.
            logger: Optional logger forwarded to the simulation.
            **kwargs: Forwarded to :class:`GameConfig` (height, width, num_trolls, seed).
        """
        self.config = GameConfig(**kwargs)
        self.render_mode = render_mode
        self._logger = logger
        self._seed = self.config.seed
        self.game: Optional[Game] = None

        rows = 2 * self.config.height + 1
        cols = 2 * self.config.width + 1
        self.observation_space = spaces.Box(
            low=0, high=max(CELL_CODES.values()), shape=(rows, cols), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Overrides the configured seed for this and later episodes.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._seed = seed
        config = GameConfig(
            height=self.config.height,
            width=self.config.width,
            num_trolls=self.config.num_trolls,
            seed=self._seed,
        )
        self.game = new_game(config, logger=self._logger)
        if self._seed is not None:
            # Next reset produces a different maze while staying reproducible.
            self._seed += 1
        return observation_array(self.game), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one tick.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.game is not None, "Call reset() before step()"
        if not 0 <= int(action) < len(Action):
            raise ValueError(f"Invalid action: {action}")
        step_action: Action = list(Action)[int(action)]

        step(self.game, step_action, logger=self._logger)
        reward = 1.0 if self.game.win else -1.0 if self.game.lose else 0.0
        return (
            observation_array(self.game),
            reward,
            self.game.win,
            self.game.lose,
            self._get_info(),
        )

    def render(self) -> Optional[str]:  # type: ignore[override]
        assert self.game is not None
        if self.render_mode != "ansi":
            raise NotImplementedError(f"Render mode '{self.render_mode}' not supported.")
        return "\n".join(render_lines(self.game.maze, self.game.player))

    def _get_info(self) -> Dict[str, object]:
        assert self.game is not None
        return dict(self.game.description)
