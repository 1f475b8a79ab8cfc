import logging
import random
from typing import List

import pytest

from tests.test_utils import FIXED_LAYOUT, ScriptedRandom, make_maze
from troll_maze.actions import Action
from troll_maze.components import Charging, Player, Position, Troll
from troll_maze.config import GameConfig
from troll_maze.errors import InvalidArgument
from troll_maze.state import Game, new_game, populate
from troll_maze.step import hint, step
from troll_maze.types import Direction, Tile
from troll_maze.utils.render import render_lines


def make_game(player_pos: Position, rng: random.Random) -> Game:
    return Game(maze=make_maze(FIXED_LAYOUT), player=Player(player_pos), rng=rng)


def test_walk_to_exit_wins() -> None:
    game = make_game(Position(1, 1), ScriptedRandom([]))
    step(game, Action.LEFT)
    assert game.win and not game.lose
    assert game.turn == 1
    assert game.message is not None


def test_terminal_game_is_unchanged() -> None:
    game = make_game(Position(1, 1), ScriptedRandom([]))
    step(game, Action.LEFT)
    step(game, Action.RIGHT)
    assert game.player.position == Position(1, 0)
    assert game.turn == 1


def test_wait_runs_troll_sweep() -> None:
    game = make_game(Position(3, 1), ScriptedRandom([Direction.WEST]))
    troll = Troll(facing=Direction.WEST)
    game.maze.add_troll(Position(3, 3), troll)
    step(game, Action.WAIT)
    # The troll stepped west and now sees the player along row 3.
    assert list(game.maze.trolls) == [Position(3, 2)]
    assert troll.state == Charging()
    assert game.turn == 1 and not game.is_terminal

    step(game, Action.WAIT)
    assert game.lose
    assert game.turn == 2


def test_walking_into_troll_loses() -> None:
    game = make_game(Position(3, 1), ScriptedRandom([]))
    game.maze.add_troll(Position(3, 2), Troll(facing=Direction.NORTH))
    step(game, Action.RIGHT)
    assert game.lose


def test_player_push_opens_wall() -> None:
    game = make_game(Position(3, 1), ScriptedRandom([]))
    step(game, Action.UP)
    assert game.player.position == Position(3, 1)
    assert game.player.facing == Direction.NORTH
    assert game.maze.tile_at(Position(2, 1)) == Tile.FLOOR
    assert game.maze.tile_at(Position(1, 1)) == Tile.WALL
    # The wall slid onto (1, 1), sealing the only way to the exit.
    assert hint(game) is None

    step(game, Action.UP)
    assert game.player.position == Position(2, 1)
    assert game.turn == 2


def test_invalid_action_raises() -> None:
    game = make_game(Position(3, 1), ScriptedRandom([]))
    with pytest.raises(ValueError):
        step(game, "jump")  # type: ignore[arg-type]


def test_hint_points_along_shortest_path() -> None:
    game = make_game(Position(3, 1), ScriptedRandom([]))
    assert hint(game) == Position(3, 2)


def test_hint_none_when_sealed() -> None:
    game = Game(
        maze=make_maze(["#####", "X # #", "#####"]),
        player=Player(Position(1, 3)),
        rng=ScriptedRandom([]),
    )
    assert hint(game) is None


def test_new_game_places_everyone_on_distinct_floor() -> None:
    game = new_game(GameConfig(height=4, width=5, num_trolls=4, seed=3))
    occupied = [game.player.position] + list(game.maze.trolls)
    assert len(set(occupied)) == 5
    for pos in occupied:
        assert game.maze.tile_at(pos) == Tile.FLOOR
    assert game.description["trolls"] == 4


def test_new_game_is_reproducible() -> None:
    config = GameConfig(height=4, width=4, num_trolls=2, seed=11)
    a = new_game(config)
    b = new_game(config)
    for _ in range(10):
        step(a, Action.WAIT)
        step(b, Action.WAIT)
    assert render_lines(a.maze, a.player) == render_lines(b.maze, b.player)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"height": 0},
        {"width": -2},
        {"num_trolls": -1},
        {"height": 1, "width": 1, "num_trolls": 1},
    ],
)
def test_config_validation(kwargs: dict[str, int]) -> None:
    with pytest.raises(InvalidArgument):
        GameConfig(**kwargs)


def test_render_overlays() -> None:
    maze = make_maze(FIXED_LAYOUT)
    maze.add_troll(Position(3, 3), Troll(facing=Direction.NORTH))
    maze.add_troll(Position(1, 2), Troll(facing=Direction.EAST, alive=False))
    lines = render_lines(maze, Player(Position(3, 1)))
    assert lines == [
        "#####",
        "X * #",
        "### #",
        "#@ ^#",
        "#####",
    ]


def test_largest_fitting_troll_count_fills_every_floor_tile() -> None:
    # A 1x2 maze has two cells and one passage between them.
    game = new_game(GameConfig(height=1, width=2, num_trolls=2, seed=5))
    occupied = {game.player.position, *game.maze.trolls}
    floor = {
        pos for pos in game.maze.map.positions()
        if game.maze.tile_at(pos) == Tile.FLOOR
    }
    assert occupied == floor
    assert len(occupied) == 3
    with pytest.raises(InvalidArgument):
        GameConfig(height=1, width=2, num_trolls=3)


class _ScriptedDraws(ScriptedRandom):
    """Also scripts ``randrange`` so tile draws are deterministic."""

    def __init__(self, choices: List[object], ranges: List[int]) -> None:
        super().__init__(choices)
        self._ranges = list(ranges)

    def randrange(self, *args, **kwargs):  # type: ignore[override]
        return self._ranges.pop(0)


def test_populate_logs_occupied_redraw(caplog: pytest.LogCaptureFixture) -> None:
    maze = make_maze(["####", "#  #", "####"])
    # Player on (1, 1); the troll's first draw repeats it, the second lands on (1, 2).
    rng = _ScriptedDraws([Direction.NORTH], [1, 1, 1, 1, 1, 2])
    logger = logging.getLogger("tests.populate")
    with caplog.at_level(logging.DEBUG, logger="tests.populate"):
        player = populate(maze, 1, rng, logger=logger)
    assert player.position == Position(1, 1)
    assert list(maze.trolls) == [Position(1, 2)]
    redraws = [r for r in caplog.records if "already occupied" in r.getMessage()]
    assert len(redraws) == 1
    assert redraws[0].levelno == logging.DEBUG
