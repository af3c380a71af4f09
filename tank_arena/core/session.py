"""Session state machine decoupled from rendering and input devices."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from tank_arena.core.game import Game, TickReport
from tank_arena.core.tank import Direction

logger = logging.getLogger(__name__)


class Command(Enum):
    """Input events delivered by a front end."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    QUIT = "quit"
    OTHER = "other"


class SessionState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


_STEERING = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}


class GameSession:
    """Drive a :class:`Game` from ticks and input commands."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game or Game()
        self.state = SessionState.PLAYING
        self.running = True
        self.ticks = 0
        self.sessions_played = 1
        self.last_report: Optional[TickReport] = None
        # The fatal tick still shows the board; the next tick shows game over.
        self.board_visible = True

    # ------------------------------------------------------------------
    # Properties
    @property
    def score(self) -> int:
        return self.game.score

    def is_playing(self) -> bool:
        return self.state is SessionState.PLAYING

    # ------------------------------------------------------------------
    # Input
    def handle(self, command: Command) -> None:
        if command is Command.QUIT:
            logger.info("Quit requested after %d ticks", self.ticks)
            self.running = False
            return

        if self.state is SessionState.GAME_OVER:
            self.restart()
            return

        heading = _STEERING.get(command)
        if heading is not None:
            self.game.steer(heading)
        elif command is Command.FIRE:
            self.game.fire(self.game.player)

    def restart(self) -> None:
        self.game.reset()
        self.state = SessionState.PLAYING
        self.last_report = None
        self.board_visible = True
        self.sessions_played += 1

    # ------------------------------------------------------------------
    # Clock
    def tick(self) -> Optional[TickReport]:
        """Advance the simulation one step; does nothing after game over."""

        if self.state is SessionState.GAME_OVER:
            self.board_visible = False
            return None
        self.ticks += 1
        report = self.game.tick()
        self.last_report = report
        if self.game.over:
            self.state = SessionState.GAME_OVER
        return report


__all__ = ["Command", "GameSession", "SessionState"]
