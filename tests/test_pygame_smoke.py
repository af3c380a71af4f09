import json

import pygame
import pytest
from conftest import make_open_game, place_enemy

from tank_arena import ArenaSettings, PygameArena
from tank_arena.core.session import Command, GameSession
from tank_arena.pygame import config
from tank_arena.pygame.app import TICK_EVENT
from tank_arena.pygame.input import InputHandler
from tank_arena.pygame.keybindings import default_bindings, load_bindings
from tank_arena.ui.canvas import TextCanvas


@pytest.fixture
def headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(config, "_SETTINGS_PATH", tmp_path / "user_settings.json", raising=False)
    return tmp_path


@pytest.mark.smoke
def test_pygame_client_initialises(headless) -> None:
    """Ensure the graphical client can boot in a headless environment."""

    app = None
    try:
        app = PygameArena(settings=ArenaSettings(seed=5), seed=5)
        assert app.session.is_playing()
        assert app.display.columns == app.session.game.world.width + 4
        assert app.display.rows == app.session.game.world.height + 1
    finally:
        if app:
            app.running = False
        pygame.quit()


@pytest.mark.smoke
def test_events_drive_the_session(headless) -> None:
    app = None
    try:
        app = PygameArena(settings=ArenaSettings(seed=7), seed=7)
        app.process_event(pygame.event.Event(TICK_EVENT))
        assert app.session.ticks == 1

        app.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
        assert app.session.game.player.heading.name == "UP"

        app.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        assert app.running is False
    finally:
        pygame.quit()


@pytest.mark.smoke
def test_collision_tick_shows_board_then_game_over(headless) -> None:
    app = None
    try:
        app = PygameArena(settings=ArenaSettings(seed=3), seed=3)
        game = make_open_game()
        game.player.x, game.player.y = 2, 5
        place_enemy(game, 3, 5)
        app.session = GameSession(game)
        app.display = TextCanvas(game.world.width + 4, game.world.height + 1)

        app.process_event(pygame.event.Event(TICK_EVENT))
        assert not app.session.is_playing()
        assert "GAME OVER" not in app.display.render()
        assert app.display.char_at(3, 5) == "►"

        app.process_event(pygame.event.Event(TICK_EVENT))
        assert "GAME OVER" in app.display.render()
    finally:
        pygame.quit()


@pytest.mark.smoke
def test_user_settings_override_cell_size_and_keys(headless) -> None:
    (headless / "user_settings.json").write_text(
        json.dumps({"cell_size": 16, "keybindings": {"fire": int(pygame.K_f)}}),
        encoding="utf-8",
    )
    app = None
    try:
        app = PygameArena(settings=ArenaSettings(seed=3), seed=3)
        assert app.display.cell_size == 16
        assert app.input.bindings.fire == pygame.K_f
    finally:
        pygame.quit()


def test_load_bindings_ignores_bad_values() -> None:
    bindings = load_bindings({"fire": int(pygame.K_f), "left": [1], "up": None})
    defaults = default_bindings()

    assert bindings.fire == pygame.K_f
    assert bindings.left == defaults.left
    assert bindings.up == defaults.up
    assert load_bindings(None) == defaults


def test_input_handler_translation() -> None:
    handler = InputHandler()

    assert handler.translate(pygame.event.Event(pygame.QUIT)) is Command.QUIT
    assert handler.translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)) is Command.FIRE
    assert handler.translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x)) is Command.OTHER
    assert handler.translate(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE)) is None


def test_load_user_settings_handles_missing_and_malformed(tmp_path) -> None:
    missing = tmp_path / "missing.json"
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]", encoding="utf-8")

    assert config.load_user_settings(missing) == {}
    assert config.load_user_settings(broken) == {}
    assert config.load_user_settings(listed) == {}
