"""Fixed-tick simulation of one arena session."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from tank_arena.core.ai import EnemyAI
from tank_arena.core.rules import DEFAULT_RULES, GameRules
from tank_arena.core.spawn import SpawnPolicy
from tank_arena.core.tank import Bullet, Direction, Tank
from tank_arena.core.world import PLAYER_START_X, ArenaSettings, Point, World

logger = logging.getLogger(__name__)

TANK_GLYPHS = {
    Direction.UP: "▲",
    Direction.DOWN: "▼",
    Direction.LEFT: "◄",
    Direction.RIGHT: "►",
}
BULLET_GLYPH = "•"


@dataclass
class TickReport:
    """What happened during a single update pass."""

    destroyed_walls: List[Point] = field(default_factory=list)
    kills: List[Tank] = field(default_factory=list)
    spawned: List[Tank] = field(default_factory=list)
    shots: List[Bullet] = field(default_factory=list)
    player_moved: bool = False
    death_cause: Optional[str] = None


class Game:
    """Own the world, the tanks and the bullets of one play-through."""

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        rules: Optional[GameRules] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or ArenaSettings(seed=seed)
        self.rules = rules or DEFAULT_RULES
        if rng is None:
            rng = random.Random(seed if seed is not None else self.settings.seed)
        self.rng = rng
        self.ai = EnemyAI(rng, self.rules)
        self.spawner = SpawnPolicy(rng, self.rules)
        self.reset()

    # ------------------------------------------------------------------
    # Session lifecycle
    def reset(self) -> None:
        """Start over with a fresh arena, roster and score."""

        self.world = World(self.settings, self.rng)
        self.player = Tank(
            "Player",
            PLAYER_START_X,
            self.settings.height // 2,
            heading=Direction.RIGHT,
        )
        self.bullets: List[Bullet] = []
        self.score = 0
        self.over = False
        self.death_cause: Optional[str] = None
        self.player_move_cooldown = 0
        self.enemies: List[Tank] = self.spawner.initial(self.world)
        logger.info(
            "New session: %d walls, %d enemies", len(self.world.walls), len(self.enemies)
        )

    def end(self, cause: str) -> None:
        if self.over:
            return
        self.over = True
        self.death_cause = cause
        logger.info("Player destroyed (%s) with score %d", cause, self.score)

    # ------------------------------------------------------------------
    # Player actions
    def steer(self, heading: Direction) -> None:
        self.player.turn(heading)

    def fire(self, shooter: Tank, report: Optional[TickReport] = None) -> Optional[Bullet]:
        """Launch a bullet one cell ahead of ``shooter``.

        A bullet spawned straight into a wall destroys it and is not kept.
        """

        bullet = Bullet(shooter.x, shooter.y, shooter.heading)
        destroyed = bullet.advance(self.world)
        if destroyed is not None:
            logger.debug("%s blasted wall at (%d, %d)", shooter.name, *destroyed)
            if report is not None:
                report.destroyed_walls.append(destroyed)
        if not bullet.active:
            return None
        self.bullets.append(bullet)
        if report is not None:
            report.shots.append(bullet)
        return bullet

    # ------------------------------------------------------------------
    # Simulation
    def tick(self) -> TickReport:
        report = TickReport()
        if self.over:
            return report
        self._advance_bullets(report)
        self._advance_player(report)
        self._advance_enemies(report)
        self._resolve_tank_collisions(report)
        self._resolve_enemy_hits(report)
        self._resolve_player_hits(report)
        self._replenish(report)
        return report

    def _advance_bullets(self, report: TickReport) -> None:
        for bullet in self.bullets:
            destroyed = bullet.advance(self.world)
            if destroyed is not None:
                report.destroyed_walls.append(destroyed)
        self.bullets = [bullet for bullet in self.bullets if bullet.active]

    def _advance_player(self, report: TickReport) -> None:
        if self.player_move_cooldown <= 0:
            report.player_moved = self.player.move(self.world)
            self.player_move_cooldown = self.rules.player_move_delay
        else:
            self.player_move_cooldown -= 1

    def _advance_enemies(self, report: TickReport) -> None:
        for enemy in self.enemies:
            if not self.ai.is_eligible():
                continue
            if self.ai.step(enemy, self.player, self.world):
                self.fire(enemy, report)

    def _resolve_tank_collisions(self, report: TickReport) -> None:
        if any(enemy.position == self.player.position for enemy in self.enemies):
            report.death_cause = "collision"
            self.end("collision")

    def _resolve_enemy_hits(self, report: TickReport) -> None:
        survivors: List[Tank] = []
        for enemy in self.enemies:
            hit = False
            for bullet in self.bullets:
                if bullet.active and bullet.position == enemy.position:
                    # First matching bullet takes the kill.
                    bullet.deactivate()
                    hit = True
                    break
            if hit:
                self.score += self.rules.kill_reward
                report.kills.append(enemy)
                logger.debug("%s destroyed, score %d", enemy.name, self.score)
            else:
                survivors.append(enemy)
        self.enemies = survivors

    def _resolve_player_hits(self, report: TickReport) -> None:
        for bullet in self.bullets:
            if bullet.active and bullet.position == self.player.position:
                if report.death_cause is None:
                    report.death_cause = "bullet"
                self.end("bullet")
                return

    def _replenish(self, report: TickReport) -> None:
        enemy = self.spawner.maybe_respawn(self.world, self.enemies)
        if enemy is not None:
            self.enemies.append(enemy)
            report.spawned.append(enemy)

    # ------------------------------------------------------------------
    # Text rendering
    def render(self) -> str:
        grid = self.world.copy_grid()
        for bullet in self.bullets:
            grid[bullet.y][bullet.x] = BULLET_GLYPH
        for enemy in self.enemies:
            if self.world.is_inside(enemy.x, enemy.y):
                grid[enemy.y][enemy.x] = TANK_GLYPHS[enemy.heading]
        grid[self.player.y][self.player.x] = TANK_GLYPHS[self.player.heading]
        return "\n".join("".join(row) for row in grid)
