"""Enemy population: initial roster and probabilistic reinforcements."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from tank_arena.core.rules import DEFAULT_RULES, GameRules
from tank_arena.core.tank import Direction, Tank
from tank_arena.core.world import World

logger = logging.getLogger(__name__)


class SpawnPolicy:
    """Place enemies on the right-hand interior column."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        rules: GameRules = DEFAULT_RULES,
    ) -> None:
        self._rng = rng or random.Random()
        self.rules = rules
        self._spawned = 0

    def spawn(self, world: World) -> Tank:
        x = world.width - 2
        y = self._rng.randint(1, world.height - 2)
        if world.is_wall(x, y):
            # Single nudge; the new row is not checked again.
            y += 1
        self._spawned += 1
        enemy = Tank(
            name=f"Enemy {self._spawned}",
            x=x,
            y=y,
            heading=Direction.LEFT,
            ident=self._rng.getrandbits(32),
        )
        logger.debug("Spawned %s at (%d, %d)", enemy.name, x, y)
        return enemy

    def initial(self, world: World) -> List[Tank]:
        self._spawned = 0
        return [self.spawn(world) for _ in range(self.rules.enemy_count)]

    def maybe_respawn(self, world: World, enemies: Sequence[Tank]) -> Optional[Tank]:
        """Return a reinforcement when the roster is short and the roll succeeds."""

        if len(enemies) >= self.rules.enemy_count:
            return None
        if self._rng.random() >= self.rules.respawn_chance:
            return None
        return self.spawn(world)
