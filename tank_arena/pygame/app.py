"""Pygame-powered shell around the arena simulation."""

from __future__ import annotations

import logging
from typing import Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Tank Arena."
    ) from exc

from tank_arena.core.game import Game
from tank_arena.core.rules import DEFAULT_RULES, GameRules
from tank_arena.core.session import Command, GameSession
from tank_arena.core.world import ArenaSettings
from tank_arena.pygame.config import load_user_settings
from tank_arena.pygame.display import CellDisplay
from tank_arena.pygame.input import InputHandler
from tank_arena.pygame.keybindings import help_line, load_bindings
from tank_arena.ui.renderer import draw_frame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1
HUD_ROWS = 1
HUD_SLACK_COLUMNS = 4


class PygameArena:
    """Window, clock and keyboard wired to a :class:`GameSession`."""

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        rules: Optional[GameRules] = None,
        seed: Optional[int] = None,
        cell_size: int = 24,
        debug: bool = False,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.debug = debug
        self.rules = rules or DEFAULT_RULES
        self._user_settings = load_user_settings()
        stored_cell_size = self._user_settings.get("cell_size")
        if isinstance(stored_cell_size, int) and stored_cell_size >= 8:
            cell_size = stored_cell_size

        game = Game(settings=settings, rules=self.rules, seed=seed)
        self.session = GameSession(game)
        self.input = InputHandler(load_bindings(self._user_settings.get("keybindings")))
        self.display = CellDisplay(
            columns=game.world.width + HUD_SLACK_COLUMNS,
            rows=game.world.height + HUD_ROWS,
            cell_size=cell_size,
            caption="Tank Arena",
        )
        logger.info("Controls: %s", help_line(self.input.bindings))

    @property
    def running(self) -> bool:
        return self.session.running

    @running.setter
    def running(self, value: bool) -> None:
        self.session.running = value

    # ------------------------------------------------------------------
    # Game Loop helpers
    def run(self) -> None:
        """Consume tick and key events from one queue until quit."""

        pygame.time.set_timer(TICK_EVENT, self.rules.tick_interval_ms)
        try:
            draw_frame(self.display, self.session)
            while self.session.running:
                self.process_event(pygame.event.wait())
        finally:
            pygame.time.set_timer(TICK_EVENT, 0)
            pygame.quit()

    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == TICK_EVENT:
            self._on_tick()
            return
        command = self.input.translate(event)
        if command is not None:
            self._on_command(command)

    def _on_tick(self) -> None:
        report = self.session.tick()
        if self.debug and report is not None and (report.kills or report.death_cause):
            logger.debug(
                "Tick %d: kills=%d death=%s score=%d",
                self.session.ticks,
                len(report.kills),
                report.death_cause,
                self.session.score,
            )
        draw_frame(self.display, self.session)

    def _on_command(self, command: Command) -> None:
        was_playing = self.session.is_playing()
        self.session.handle(command)
        if not was_playing and self.session.is_playing():
            logger.info("Restarted; session #%d", self.session.sessions_played)


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameArena(**kwargs)
    app.run()


__all__ = ["PygameArena", "TICK_EVENT", "run_pygame"]
