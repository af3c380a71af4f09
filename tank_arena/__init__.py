"""Top-level package for the Tank Arena grid shooter."""

__version__ = "1.0.0"

from tank_arena.core import (
    ArenaSettings,
    Bullet,
    Command,
    Direction,
    Game,
    GameRules,
    GameSession,
    SessionState,
    Tank,
    TickReport,
    World,
)

__all__ = [
    "ArenaSettings",
    "Bullet",
    "Command",
    "Direction",
    "Game",
    "GameRules",
    "GameSession",
    "SessionState",
    "Tank",
    "TickReport",
    "World",
]

__all__.append("__version__")

try:
    from tank_arena.pygame import PygameArena, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameArena = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the optional pygame dependency. "
            "Install pygame to enable graphical gameplay."
        )

    __all__.extend(["PygameArena", "run_pygame"])
else:
    __all__.extend(["PygameArena", "run_pygame"])
