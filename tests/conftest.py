import os
import random
from typing import Iterable, List, Optional

import pytest

from tank_arena.core.game import Game
from tank_arena.core.rules import GameRules
from tank_arena.core.tank import Direction, Tank
from tank_arena.core.world import ArenaSettings, World

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class ScriptedRandom(random.Random):
    """Random source that replays queued values before falling back to a seed."""

    def __init__(
        self,
        values: Iterable[float] = (),
        choices: Iterable[Direction] = (),
        rows: Iterable[int] = (),
        seed: int = 0,
    ) -> None:
        super().__init__(seed)
        self._values: List[float] = list(values)
        self._choices: List[Direction] = list(choices)
        self._rows: List[int] = list(rows)

    def random(self) -> float:
        if self._values:
            return self._values.pop(0)
        return super().random()

    def choice(self, seq):
        if self._choices:
            return self._choices.pop(0)
        return super().choice(seq)

    def randint(self, a: int, b: int) -> int:
        if self._rows:
            return self._rows.pop(0)
        return super().randint(a, b)


def make_open_game(
    rules: Optional[GameRules] = None,
    width: int = 20,
    height: int = 10,
) -> Game:
    """Game with no walls and no enemies, ready for hand-placed scenarios."""

    game = Game(
        settings=ArenaSettings(width=width, height=height, wall_count=0, seed=11),
        rules=rules or GameRules(activation_chance=0.0, respawn_chance=0.0),
    )
    game.world.clear_walls()
    game.enemies = []
    game.bullets = []
    return game


def place_enemy(game: Game, x: int, y: int, heading: Direction = Direction.LEFT) -> Tank:
    enemy = Tank(f"Enemy at {x},{y}", x, y, heading=heading, ident=x * 100 + y)
    game.enemies.append(enemy)
    return enemy


@pytest.fixture
def open_settings() -> ArenaSettings:
    """Provide a small arena without random walls."""

    return ArenaSettings(width=20, height=10, wall_count=0, seed=1234)


@pytest.fixture
def open_world(open_settings: ArenaSettings) -> World:
    world = World(open_settings)
    world.clear_walls()
    return world


@pytest.fixture
def open_game() -> Game:
    return make_open_game()
