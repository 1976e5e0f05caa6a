"""Game state and rules, independent of any window or renderer."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from pathlib import Path

from monkeytyper.button import Button, layout_buttons, select_button
from monkeytyper.enums import Difficulty, GameState, WordPackage
from monkeytyper.storage import (
    LeaderboardEntry,
    SavedGame,
    SaveGameError,
    load_leaderboard,
    load_saved_game,
    load_words,
    write_leaderboard,
    write_saved_game,
)
from monkeytyper.word import Word

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

BUTTON_WIDTH = 200.0
BUTTON_HEIGHT = 50.0
BUTTON_SPACING = 20.0

POINTS_PER_WORD = 10
DEFAULT_FONT = "arial.ttf"

_MENU_LAYOUTS: dict[GameState, tuple[tuple[str, ...], float]] = {
    GameState.MENU: (("Play", "Settings", "Leaderboard", "Load Game"), 200),
    GameState.GAME_OVER: (("Play Again", "Main Menu"), 300),
    GameState.PAUSE: (("Continue", "Save Game", "Main Menu"), 200),
    GameState.SETTINGS: (("Difficulty", "Word Package", "Font", "Back to Menu"), 200),
    GameState.SETTINGS_DIFFICULTY: (("Easy", "Medium", "Hard", "Back"), 200),
    GameState.SETTINGS_WORD_PACKAGE: (("English Words", "Polish Words", "Back"), 200),
    GameState.SETTINGS_FONT: (("Arial", "Calibri", "Consolas", "Back"), 200),
}

_DIFFICULTY_CHOICES = {
    "Easy": Difficulty.EASY,
    "Medium": Difficulty.MEDIUM,
    "Hard": Difficulty.HARD,
}
_PACKAGE_CHOICES = {
    "English Words": WordPackage.ENGLISH,
    "Polish Words": WordPackage.POLISH,
}
_FONT_CHOICES = {
    "Arial": "arial.ttf",
    "Calibri": "calibri.ttf",
    "Consolas": "consolas.ttf",
}


class Key(Enum):
    """Keys the game reacts to."""

    ESCAPE = auto()
    ENTER = auto()
    BACKSPACE = auto()
    UP = auto()
    DOWN = auto()
    LETTER = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Assets:
    """Locations of the files the game reads and writes, below one root."""

    root: Path = Path(".")

    @property
    def fonts_dir(self) -> Path:
        return self.root / "assets" / "fonts"

    @property
    def leaderboard_path(self) -> Path:
        return self.root / "assets" / "data" / "leaderboard.csv"

    @property
    def savegame_path(self) -> Path:
        return self.root / "assets" / "data" / "savegame.txt"

    @property
    def background_path(self) -> Path:
        return self.root / "assets" / "background.png"

    @property
    def logo_path(self) -> Path:
        return self.root / "assets" / "logo.png"

    @property
    def score_sound_path(self) -> Path:
        return self.root / "assets" / "sounds" / "score.mp3"


class Game:
    """The typing game: menus, falling words, score and health."""

    def __init__(
        self,
        assets: Assets | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        window_width: int = WINDOW_WIDTH,
        on_score: Callable[[], None] | None = None,
    ) -> None:
        self.assets = assets or Assets()
        self.rng = rng or random.Random()
        self.clock = clock
        self.window_width = window_width
        self.on_score = on_score

        self.menus: dict[GameState, list[Button]] = {
            state: layout_buttons(
                texts, top, window_width, BUTTON_WIDTH, BUTTON_HEIGHT, BUTTON_SPACING
            )
            for state, (texts, top) in _MENU_LAYOUTS.items()
        }
        self._handlers: dict[GameState, Callable[[str], None]] = {
            GameState.MENU: self._on_menu,
            GameState.PAUSE: self._on_pause,
            GameState.GAME_OVER: self._on_game_over,
            GameState.SETTINGS: self._on_settings,
            GameState.SETTINGS_DIFFICULTY: self._on_difficulty,
            GameState.SETTINGS_WORD_PACKAGE: self._on_word_package,
            GameState.SETTINGS_FONT: self._on_font,
        }

        self.state = GameState.MENU
        self.last_word_spawn = self.clock()
        self.score = 0
        self.difficulty = Difficulty.EASY
        self.health = self.difficulty.max_health()
        self.words: list[Word] = []
        self.current_input = ""
        self.selected_index = 0
        self.leaderboard: list[LeaderboardEntry] = []
        self.load_leaderboard()
        self.word_package = WordPackage.ENGLISH
        self.word_list: list[str] = []
        self.load_word_package()
        self.current_font = DEFAULT_FONT

    def buttons(self) -> list[Button] | None:
        """Buttons of the current screen, or None if it has none."""
        return self.menus.get(self.state)

    def handle_key(self, key: Key, char: str = "") -> None:
        """React to one key press; ``char`` is the letter for ``Key.LETTER``."""
        if key is Key.ESCAPE:
            if self.state is GameState.GAME:
                self.state = GameState.PAUSE
            elif self.state is GameState.PAUSE:
                self.state = GameState.GAME
            elif self.state is not GameState.MENU:
                self.state = GameState.MENU
                self.reset()
            return

        if self.state is GameState.GAME:
            if key is Key.ENTER:
                if self.current_input:
                    self.check_word()
                    self.current_input = ""
            elif key is Key.BACKSPACE:
                self.current_input = self.current_input[:-1]
            elif key is Key.LETTER:
                letter = char.lower()
                if len(letter) == 1 and "a" <= letter <= "z":
                    self.current_input += letter
            return

        buttons = self.buttons()
        if not buttons:
            return
        if key is Key.UP:
            self.selected_index = (self.selected_index - 1) % len(buttons)
        elif key is Key.DOWN:
            self.selected_index = (self.selected_index + 1) % len(buttons)
        elif key is Key.ENTER and 0 <= self.selected_index < len(buttons):
            selected = buttons[self.selected_index].text
            self.selected_index = 0
            self._handlers[self.state](selected)

    def tick(self, now: float) -> None:
        """Advance one frame at time ``now`` (seconds on the game clock)."""
        if self.state is GameState.GAME:
            if now - self.last_word_spawn > self.difficulty.spawn_interval():
                self.spawn_word()
                self.last_word_spawn = now

            for word in self.words:
                word.update()

            kept = []
            for word in self.words:
                if word.is_off_screen(self.window_width):
                    self.decrease_health()
                else:
                    kept.append(word)
            self.words = kept

        buttons = self.buttons()
        if buttons:
            select_button(buttons, self.selected_index)

    def reset(self) -> None:
        """Start a fresh round with the current settings."""
        self.words = []
        self.current_input = ""
        self.score = 0
        self.health = self.difficulty.max_health()
        self.last_word_spawn = self.clock()

    def decrease_health(self) -> None:
        """Lose one health; at zero the round ends and the score is recorded."""
        self.health -= 1
        if self.health <= 0:
            self.state = GameState.GAME_OVER
            self.save_score()

    def check_word(self) -> None:
        """Score the typed input if it matches a word on screen, else lose health."""
        for i, word in enumerate(self.words):
            if word.text == self.current_input:
                del self.words[i]
                self.score = int(
                    self.score + POINTS_PER_WORD * self.difficulty.score_multiplier()
                )
                if self.on_score is not None:
                    self.on_score()
                return
        self.decrease_health()

    def spawn_word(self) -> None:
        """Add a random word from the word list at the left edge."""
        if not self.word_list:
            return
        text = self.rng.choice(self.word_list)
        y = float(self.rng.randint(50, 500))
        self.words.append(Word(text, 0.0, y, self.difficulty.word_speed()))

    def load_word_package(self) -> None:
        """Read the word list of the current word package."""
        self.word_list = load_words(self.assets.root / self.word_package.filename())

    def load_leaderboard(self) -> None:
        """Read the leaderboard file, best score first."""
        self.leaderboard = load_leaderboard(self.assets.leaderboard_path)

    def load_game(self) -> bool:
        """Restore the saved game; False if there is none or it is unreadable."""
        try:
            saved = load_saved_game(self.assets.savegame_path)
        except SaveGameError:
            return False
        if saved.score is not None:
            self.score = saved.score
        if saved.health is not None:
            self.health = saved.health
        if saved.difficulty is not None:
            self.difficulty = saved.difficulty
        if saved.word_package is not None:
            self.word_package = saved.word_package
        if saved.words is not None:
            self.words = saved.words
        return True

    def save_game(self) -> None:
        """Write the round in progress to the save file."""
        saved = SavedGame(
            score=self.score,
            health=self.health,
            difficulty=self.difficulty,
            word_package=self.word_package,
            words=list(self.words),
        )
        try:
            write_saved_game(self.assets.savegame_path, saved)
        except OSError:
            pass

    def save_score(self) -> None:
        """Append the current score with the local time and rewrite the leaderboard."""
        date = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self.leaderboard.append(LeaderboardEntry(str(self.score), date))
        try:
            write_leaderboard(self.assets.leaderboard_path, self.leaderboard)
        except OSError:
            pass

    def select_font(self, font_name: str) -> bool:
        """Switch to a font file from the fonts directory if it exists."""
        if (self.assets.fonts_dir / font_name).is_file():
            self.current_font = font_name
            return True
        return False

    def _on_menu(self, selected: str) -> None:
        if selected == "Play":
            self.state = GameState.GAME
            self.reset()
        elif selected == "Settings":
            self.state = GameState.SETTINGS
        elif selected == "Leaderboard":
            self.state = GameState.LEADERBOARD
        elif selected == "Load Game" and self.load_game():
            self.state = GameState.GAME

    def _on_pause(self, selected: str) -> None:
        if selected == "Continue":
            self.state = GameState.GAME
        elif selected == "Save Game":
            self.save_game()
            self.state = GameState.MENU
        elif selected == "Main Menu":
            self.state = GameState.MENU
            self.reset()

    def _on_game_over(self, selected: str) -> None:
        if selected == "Play Again":
            self.state = GameState.GAME
            self.reset()
        elif selected == "Main Menu":
            self.state = GameState.MENU
            self.reset()

    def _on_settings(self, selected: str) -> None:
        targets = {
            "Difficulty": GameState.SETTINGS_DIFFICULTY,
            "Word Package": GameState.SETTINGS_WORD_PACKAGE,
            "Font": GameState.SETTINGS_FONT,
            "Back to Menu": GameState.MENU,
        }
        self.state = targets.get(selected, self.state)

    def _on_difficulty(self, selected: str) -> None:
        if selected in _DIFFICULTY_CHOICES:
            self.difficulty = _DIFFICULTY_CHOICES[selected]
        self.state = GameState.SETTINGS

    def _on_word_package(self, selected: str) -> None:
        if selected in _PACKAGE_CHOICES:
            self.word_package = _PACKAGE_CHOICES[selected]
            self.load_word_package()
        self.state = GameState.SETTINGS

    def _on_font(self, selected: str) -> None:
        if selected in _FONT_CHOICES:
            self.select_font(_FONT_CHOICES[selected])
        self.state = GameState.SETTINGS