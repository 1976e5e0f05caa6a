import os
import shutil
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from monkeytyper.app import App, translate_key
from monkeytyper.enums import GameState
from monkeytyper.game import Assets, Key


def _bundled_font() -> Path:
    return Path(pygame.__file__).parent / pygame.font.get_default_font()


@pytest.fixture
def root(tmp_path):
    fonts = tmp_path / "assets" / "fonts"
    fonts.mkdir(parents=True)
    shutil.copy(_bundled_font(), fonts / "arial.ttf")
    return tmp_path


@pytest.fixture
def app(root):
    application = App(Assets(root))
    pygame.event.clear()
    yield application
    pygame.quit()


def _press(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key, unicode="", mod=0, scancode=0))


@pytest.mark.parametrize(
    "code, expected",
    [
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_RETURN, Key.ENTER),
        (pygame.K_KP_ENTER, Key.ENTER),
        (pygame.K_BACKSPACE, Key.BACKSPACE),
        (pygame.K_UP, Key.UP),
        (pygame.K_DOWN, Key.DOWN),
    ],
)
def test_translate_control_keys(code, expected):
    assert translate_key(code, "") == (expected, "")


def test_translate_letters_are_lowercase():
    assert translate_key(pygame.K_a, "A") == (Key.LETTER, "a")
    assert translate_key(pygame.K_z, "z") == (Key.LETTER, "z")


def test_translate_other_key():
    key, _ = translate_key(pygame.K_1, "1")
    assert key is Key.OTHER


def test_app_starts_in_menu_when_font_present(app):
    assert app.running is True
    assert app.game.state is GameState.MENU


def test_app_does_not_run_without_font(tmp_path):
    application = App(Assets(tmp_path))
    try:
        assert application.running is False
    finally:
        pygame.quit()


def test_quit_event_stops_app(app):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    app.process_events()
    assert app.running is False


def test_down_key_moves_selection(app):
    _press(pygame.K_DOWN)
    app.process_events()
    assert app.game.selected_index == 1


def test_letters_are_typed_during_game(app):
    app.game.state = GameState.GAME
    _press(pygame.K_c)
    _press(pygame.K_a)
    _press(pygame.K_t)
    app.process_events()
    assert app.game.current_input == "cat"


def test_escape_pauses_game(app):
    app.game.state = GameState.GAME
    _press(pygame.K_ESCAPE)
    app.process_events()
    assert app.game.state is GameState.PAUSE


def test_render_fills_background(app):
    app.render()
    assert tuple(app.screen.get_at((0, 0)))[:3] == (30, 30, 30)


@pytest.mark.parametrize("state", list(GameState))
def test_render_every_screen_keeps_state(app, state):
    app.game.state = state
    app.render()
    assert app.game.state is state
    assert app.screen.get_size() == (800, 600)


def test_render_leaderboard_reads_file(app, root):
    data = root / "assets" / "data"
    data.mkdir(parents=True)
    (data / "leaderboard.csv").write_text("10;2024-01-01 10:00:00\n30;2024-01-02 10:00:00\n")
    app.game.state = GameState.LEADERBOARD
    app.render()
    assert [entry.score for entry in app.game.leaderboard] == ["30", "10"]