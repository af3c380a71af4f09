"""Keyboard bindings for the Tank Arena pygame client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pygame

from tank_arena.core.session import Command


@dataclass
class KeyBindings:
    up: int
    down: int
    left: int
    right: int
    fire: int
    quit: int


BINDING_FIELDS: List[tuple[str, str]] = [
    ("Move Up", "up"),
    ("Move Down", "down"),
    ("Move Left", "left"),
    ("Move Right", "right"),
    ("Fire", "fire"),
    ("Exit", "quit"),
]


def default_bindings() -> KeyBindings:
    return KeyBindings(
        up=pygame.K_UP,
        down=pygame.K_DOWN,
        left=pygame.K_LEFT,
        right=pygame.K_RIGHT,
        fire=pygame.K_SPACE,
        quit=pygame.K_ESCAPE,
    )


def load_bindings(data: Optional[Dict[str, Any]]) -> KeyBindings:
    """Overlay persisted key codes or key names onto the defaults."""
    bindings = default_bindings()
    if not isinstance(data, dict):
        return bindings
    for _, field in BINDING_FIELDS:
        raw = data.get(field)
        if raw is None:
            continue
        if isinstance(raw, str):
            try:
                setattr(bindings, field, pygame.key.key_code(raw))
            except ValueError:
                continue
            continue
        try:
            setattr(bindings, field, int(raw))
        except (TypeError, ValueError):
            continue
    return bindings


def command_map(bindings: KeyBindings) -> Dict[int, Command]:
    return {
        bindings.up: Command.UP,
        bindings.down: Command.DOWN,
        bindings.left: Command.LEFT,
        bindings.right: Command.RIGHT,
        bindings.fire: Command.FIRE,
        bindings.quit: Command.QUIT,
    }


def format_key(key: int) -> str:
    return pygame.key.name(key).upper()


def help_line(bindings: KeyBindings) -> str:
    return "  ".join(
        f"{label}: {format_key(getattr(bindings, field))}" for label, field in BINDING_FIELDS
    )


__all__ = [
    "BINDING_FIELDS",
    "KeyBindings",
    "command_map",
    "default_bindings",
    "format_key",
    "help_line",
    "load_bindings",
]
