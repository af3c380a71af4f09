"""Pygame front end for Tank Arena."""

from tank_arena.pygame.app import PygameArena, run_pygame

__all__ = ["PygameArena", "run_pygame"]
