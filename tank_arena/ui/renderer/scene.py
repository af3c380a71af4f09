"""Frame composition for any character-cell canvas."""

from __future__ import annotations

from tank_arena.core.game import BULLET_GLYPH, TANK_GLYPHS, Game
from tank_arena.core.session import GameSession
from tank_arena.core.tank import Tank
from tank_arena.ui.canvas import CellCanvas, Palette

WALL_GLYPH = "▓"
HELP_TEXT = "ESC:Exit SPACE:Fire"
GAME_OVER_TEXT = "GAME OVER"


def draw_text(canvas: CellCanvas, x: int, y: int, text: str, color: Palette) -> None:
    for offset, char in enumerate(text):
        canvas.set_cell(x + offset, y, char, color)


def draw_number(canvas: CellCanvas, x: int, y: int, number: int, color: Palette) -> None:
    digits = []
    if number == 0:
        digits.append("0")
    while number > 0:
        digits.insert(0, chr(ord("0") + number % 10))
        number //= 10
    draw_text(canvas, x, y, "".join(digits), color)


def draw_border(canvas: CellCanvas, game: Game) -> None:
    width = game.world.width
    height = game.world.height
    for x in range(width):
        canvas.set_cell(x, 0, "─", Palette.WHITE)
        canvas.set_cell(x, height - 1, "─", Palette.WHITE)
    for y in range(height):
        canvas.set_cell(0, y, "│", Palette.WHITE)
        canvas.set_cell(width - 1, y, "│", Palette.WHITE)


def draw_walls(canvas: CellCanvas, game: Game) -> None:
    for point in game.world.walls:
        canvas.set_cell(point.x, point.y, WALL_GLYPH, Palette.MAGENTA)


def draw_tank(canvas: CellCanvas, tank: Tank, color: Palette) -> None:
    canvas.set_cell(tank.x, tank.y, TANK_GLYPHS[tank.heading], color)


def draw_tanks(canvas: CellCanvas, game: Game) -> None:
    draw_tank(canvas, game.player, Palette.GREEN)
    for enemy in game.enemies:
        draw_tank(canvas, enemy, Palette.RED)


def draw_bullets(canvas: CellCanvas, game: Game) -> None:
    for bullet in game.bullets:
        canvas.set_cell(bullet.x, bullet.y, BULLET_GLYPH, Palette.YELLOW)


def draw_hud(canvas: CellCanvas, game: Game) -> None:
    width = game.world.width
    row = game.world.height
    draw_text(canvas, 1, row, HELP_TEXT, Palette.WHITE)
    draw_text(canvas, width - 10, row, "Score:", Palette.CYAN)
    draw_number(canvas, width - 3, row, game.score, Palette.CYAN)


def draw_board(canvas: CellCanvas, game: Game) -> None:
    canvas.clear()
    draw_border(canvas, game)
    draw_walls(canvas, game)
    draw_tanks(canvas, game)
    draw_bullets(canvas, game)
    draw_hud(canvas, game)
    canvas.flush()


def draw_game_over(canvas: CellCanvas, game: Game) -> None:
    width = game.world.width
    middle = game.world.height // 2
    canvas.clear()
    draw_text(canvas, width // 2 - len(GAME_OVER_TEXT) // 2, middle, GAME_OVER_TEXT, Palette.RED)
    draw_text(canvas, width // 2 - 6, middle + 1, "Score:", Palette.WHITE)
    draw_number(canvas, width // 2 + 1, middle + 1, game.score, Palette.WHITE)
    canvas.flush()


def draw_frame(canvas: CellCanvas, session: GameSession) -> None:
    if session.board_visible:
        draw_board(canvas, session.game)
    else:
        draw_game_over(canvas, session.game)


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
