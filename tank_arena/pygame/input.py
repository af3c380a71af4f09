"""Input handling for the pygame client."""

from __future__ import annotations

from typing import Optional

import pygame

from tank_arena.core.session import Command
from tank_arena.pygame.keybindings import KeyBindings, command_map, default_bindings


class InputHandler:
    """Translate pygame events into session commands."""

    def __init__(self, bindings: Optional[KeyBindings] = None) -> None:
        self.bindings = bindings or default_bindings()
        self._commands = command_map(self.bindings)

    def translate(self, event: pygame.event.Event) -> Optional[Command]:
        if event.type == pygame.QUIT:
            return Command.QUIT
        if event.type == pygame.KEYDOWN:
            return self._commands.get(event.key, Command.OTHER)
        return None


__all__ = ["InputHandler"]
