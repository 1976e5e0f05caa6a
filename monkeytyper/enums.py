"""Game states, difficulty levels and word packages."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class GameState(Enum):
    """The screen the game is currently showing."""

    MENU = auto()
    GAME = auto()
    GAME_OVER = auto()
    SETTINGS = auto()
    SETTINGS_DIFFICULTY = auto()
    SETTINGS_WORD_PACKAGE = auto()
    SETTINGS_FONT = auto()
    LEADERBOARD = auto()
    PAUSE = auto()


class Difficulty(IntEnum):
    """Difficulty level; the integer value is what save files store."""

    EASY = 0
    MEDIUM = 1
    HARD = 2

    def word_speed(self) -> float:
        """Horizontal distance a word travels each frame."""
        return _WORD_SPEED[self]

    def spawn_interval(self) -> float:
        """Seconds between two spawned words."""
        return _SPAWN_INTERVAL[self]

    def score_multiplier(self) -> float:
        """Factor applied to the points for a typed word."""
        return _SCORE_MULTIPLIER[self]

    def max_health(self) -> int:
        """Health the player starts a round with."""
        return _MAX_HEALTH[self]

    def label(self) -> str:
        """Name shown to the player."""
        return self.name.capitalize()


_WORD_SPEED = {Difficulty.EASY: 2.0, Difficulty.MEDIUM: 3.0, Difficulty.HARD: 4.0}
_SPAWN_INTERVAL = {Difficulty.EASY: 2.0, Difficulty.MEDIUM: 1.5, Difficulty.HARD: 1.0}
_SCORE_MULTIPLIER = {Difficulty.EASY: 1.0, Difficulty.MEDIUM: 1.3, Difficulty.HARD: 1.5}
_MAX_HEALTH = {Difficulty.EASY: 3, Difficulty.MEDIUM: 2, Difficulty.HARD: 1}


class WordPackage(IntEnum):
    """Word list to draw words from; the integer value is what save files store."""

    ENGLISH = 0
    POLISH = 1

    def label(self) -> str:
        """Name shown to the player."""
        return self.name.capitalize()

    def filename(self) -> str:
        """Relative path of the word list file."""
        return f"assets/packages/words_{self.name.lower()}.txt"