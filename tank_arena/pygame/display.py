"""Pygame surface that behaves like a character terminal."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from tank_arena.ui.canvas import Palette

PALETTE_COLORS: Dict[Palette, Tuple[int, int, int]] = {
    Palette.WHITE: (230, 230, 230),
    Palette.MAGENTA: (200, 80, 200),
    Palette.GREEN: (96, 210, 96),
    Palette.RED: (230, 70, 70),
    Palette.YELLOW: (240, 220, 90),
    Palette.CYAN: (90, 210, 230),
}
BACKGROUND = (10, 12, 20)
FONT_NAMES = "dejavusansmono,consolas,menlo,couriernew"


class CellDisplay:
    """Grid of fixed-size character cells drawn onto the pygame window."""

    def __init__(
        self,
        *,
        columns: int,
        rows: int,
        cell_size: int,
        caption: str,
        surface: Optional[pygame.Surface] = None,
    ) -> None:
        self.columns = columns
        self.rows = rows
        self.cell_size = cell_size
        self.cell_width = max(4, int(cell_size * 0.6))
        size = (columns * self.cell_width, rows * cell_size)
        if surface is None:
            try:
                surface = pygame.display.set_mode(size)
            except pygame.error as exc:
                raise RuntimeError(f"Unable to open a {size[0]}x{size[1]} window: {exc}") from exc
            pygame.display.set_caption(caption)
        self.screen = surface
        self.font = pygame.font.SysFont(FONT_NAMES, cell_size - 4)
        self._glyph_cache: Dict[Tuple[str, Palette], pygame.Surface] = {}

    # ------------------------------------------------------------------
    def clear(self) -> None:
        self.screen.fill(BACKGROUND)

    def set_cell(self, x: int, y: int, char: str, color: Palette) -> None:
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            return
        glyph = self._glyph(char, color)
        rect = glyph.get_rect()
        rect.center = (
            x * self.cell_width + self.cell_width // 2,
            y * self.cell_size + self.cell_size // 2,
        )
        self.screen.blit(glyph, rect)

    def flush(self) -> None:
        pygame.display.flip()

    # ------------------------------------------------------------------
    def _glyph(self, char: str, color: Palette) -> pygame.Surface:
        key = (char, color)
        glyph = self._glyph_cache.get(key)
        if glyph is None:
            glyph = self.font.render(char, True, PALETTE_COLORS[color])
            self._glyph_cache[key] = glyph
        return glyph


__all__ = ["CellDisplay", "PALETTE_COLORS"]
