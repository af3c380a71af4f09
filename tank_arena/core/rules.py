"""Fixed gameplay constants shared by the simulation components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameRules:
    """Tuning values for one arena session."""

    enemy_count: int = 3
    kill_reward: int = 100
    player_move_delay: int = 2  # ticks between player moves
    tick_interval: float = 0.07  # seconds
    activation_chance: float = 0.25  # per enemy, per tick
    wander_chance: float = 0.2
    fire_chance: float = 0.1
    respawn_chance: float = 0.05

    @property
    def tick_interval_ms(self) -> int:
        return int(round(self.tick_interval * 1000))


DEFAULT_RULES = GameRules()
