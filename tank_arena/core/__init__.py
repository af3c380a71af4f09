"""Core simulation for Tank Arena, independent of rendering."""

from tank_arena.core.ai import EnemyAI
from tank_arena.core.game import Game, TickReport
from tank_arena.core.rules import GameRules
from tank_arena.core.session import Command, GameSession, SessionState
from tank_arena.core.spawn import SpawnPolicy
from tank_arena.core.tank import Bullet, Direction, Tank
from tank_arena.core.world import ArenaSettings, Point, World

__all__ = [
    "ArenaSettings",
    "Bullet",
    "Command",
    "Direction",
    "EnemyAI",
    "Game",
    "GameRules",
    "GameSession",
    "Point",
    "SessionState",
    "SpawnPolicy",
    "Tank",
    "TickReport",
    "World",
]
