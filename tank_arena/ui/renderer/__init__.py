"""Rendering helpers shared by the cell-based front ends."""

from .scene import (
    draw_board,
    draw_border,
    draw_bullets,
    draw_frame,
    draw_game_over,
    draw_hud,
    draw_number,
    draw_tanks,
    draw_text,
    draw_walls,
)

__all__ = [
    "draw_board",
    "draw_border",
    "draw_bullets",
    "draw_frame",
    "draw_game_over",
    "draw_hud",
    "draw_number",
    "draw_tanks",
    "draw_text",
    "draw_walls",
]
