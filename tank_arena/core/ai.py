"""Reactive enemy tank behaviour."""

from __future__ import annotations

import random
from typing import Optional

from tank_arena.core.rules import DEFAULT_RULES, GameRules
from tank_arena.core.tank import HEADINGS, Direction, Tank
from tank_arena.core.world import World


class EnemyAI:
    """Chase the player along the dominant axis, with some random wandering.

    The decision only looks at the current positions; nothing is remembered
    between ticks.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        rules: GameRules = DEFAULT_RULES,
    ) -> None:
        self._rng = rng or random.Random()
        self.rules = rules

    def is_eligible(self) -> bool:
        """Roll whether an enemy gets to act this tick."""

        return self._rng.random() < self.rules.activation_chance

    def step(self, enemy: Tank, target: Tank, world: World) -> bool:
        """Move ``enemy`` and return True when it should fire."""

        if self._rng.random() < self.rules.wander_chance:
            self._wander(enemy, world)
        else:
            enemy.heading = self.pursuit_heading(enemy, target)
            if not enemy.move(world):
                self._wander(enemy, world)

        aligned = enemy.x == target.x or enemy.y == target.y
        return aligned and self._rng.random() < self.rules.fire_chance

    @staticmethod
    def pursuit_heading(enemy: Tank, target: Tank) -> Direction:
        diff_x = target.x - enemy.x
        diff_y = target.y - enemy.y
        if abs(diff_x) > abs(diff_y):
            return Direction.RIGHT if diff_x > 0 else Direction.LEFT
        return Direction.DOWN if diff_y > 0 else Direction.UP

    def _wander(self, enemy: Tank, world: World) -> None:
        enemy.heading = self._rng.choice(HEADINGS)
        enemy.move(world)
