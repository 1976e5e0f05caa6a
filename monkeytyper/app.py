"""The game window: input, drawing and the main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import pygame

from monkeytyper import button as button_module
from monkeytyper import word as word_module
from monkeytyper.button import Button
from monkeytyper.enums import GameState
from monkeytyper.game import WINDOW_HEIGHT, WINDOW_WIDTH, Assets, Game, Key

Color = tuple[int, ...]

TITLE = "Monkey Typer"
FRAME_RATE = 60
BACKGROUND_COLOR: Color = (30, 30, 30)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)
HINT_COLOR: Color = (200, 200, 200)
OUTLINE_COLOR: Color = (0, 0, 0)
TEXT_OUTLINE = 2
BUTTON_OUTLINE = 2
LOGO_WIDTH = 300.0
LEADERBOARD_ROWS = 10
SOUND_VOLUME = 0.5

DIFFICULTY_HELP = (
    "Easy: 3 health, slow speed, multiplier 1x\n"
    "Medium: 2 health, medium speed, multiplier 1.3x\n"
    "Hard: 1 health, fast speed, multiplier 1.5x"
)

_SIMPLE_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}

_OUTLINE_OFFSETS = [
    (dx, dy)
    for dx in (-TEXT_OUTLINE, 0, TEXT_OUTLINE)
    for dy in (-TEXT_OUTLINE, 0, TEXT_OUTLINE)
    if (dx, dy) != (0, 0)
]


def translate_key(key: int, unicode: str = "") -> tuple[Key, str]:
    """Map a pygame key code to a game key and, for letters, the lowercase letter."""
    if key in _SIMPLE_KEYS:
        return _SIMPLE_KEYS[key], ""
    if pygame.K_a <= key <= pygame.K_z:
        return Key.LETTER, chr(key)
    return Key.OTHER, unicode


class App:
    """A window that shows a Game and feeds it keyboard input."""

    def __init__(self, assets: Assets | None = None) -> None:
        pygame.init()
        self.assets = assets or Assets()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.frame_clock = pygame.time.Clock()
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}
        self.sound = self._load_sound()
        self.game = Game(self.assets, window_width=WINDOW_WIDTH, on_score=self._play_score)
        self.running = self._font_available(self.game.current_font)
        self.background = self._load_background()
        self.logo = self._load_logo()

    # -- resources -------------------------------------------------------

    def _font_available(self, name: str) -> bool:
        try:
            pygame.font.Font(str(self.assets.fonts_dir / name), 24)
        except (OSError, pygame.error, FileNotFoundError):
            return False
        return True

    def _font(self, size: int) -> pygame.font.Font:
        name = self.game.current_font
        cached = self._fonts.get((name, size))
        if cached is None:
            try:
                cached = pygame.font.Font(str(self.assets.fonts_dir / name), size)
            except (OSError, pygame.error, FileNotFoundError):
                cached = pygame.font.Font(None, size)
            self._fonts[(name, size)] = cached
        return cached

    def _load_sound(self) -> pygame.mixer.Sound | None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            sound = pygame.mixer.Sound(str(self.assets.score_sound_path))
        except (pygame.error, OSError, FileNotFoundError):
            return None
        sound.set_volume(SOUND_VOLUME)
        return sound

    def _play_score(self) -> None:
        if self.sound is not None:
            self.sound.play()

    def _load_image(self, path: Path) -> pygame.Surface | None:
        try:
            return pygame.image.load(str(path))
        except (pygame.error, OSError, FileNotFoundError):
            return None

    def _load_background(self) -> pygame.Surface | None:
        image = self._load_image(self.assets.background_path)
        if image is None:
            return None
        width, height = image.get_size()
        scale = max(WINDOW_WIDTH / width, WINDOW_HEIGHT / height)
        return pygame.transform.smoothscale(
            image, (round(width * scale), round(height * scale))
        )

    def _load_logo(self) -> pygame.Surface | None:
        image = self._load_image(self.assets.logo_path)
        if image is None:
            return None
        width, height = image.get_size()
        scale = LOGO_WIDTH / width
        return pygame.transform.smoothscale(
            image, (round(width * scale), round(height * scale))
        )

    # -- events ----------------------------------------------------------

    def process_events(self) -> None:
        """Handle every pending window event."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                key, char = translate_key(event.key, getattr(event, "unicode", ""))
                self.game.handle_key(key, char)

    # -- drawing ---------------------------------------------------------

    def _draw_text(
        self,
        content: str,
        size: int,
        color: Color,
        position: tuple[float, float],
        center_x: bool = False,
    ) -> None:
        font = self._font(size)
        lines = content.split("\n")
        rendered = [
            (font.render(line, True, color), font.render(line, True, OUTLINE_COLOR))
            for line in lines
        ]
        block_width = max(surface.get_width() for surface, _ in rendered)
        x = (WINDOW_WIDTH - block_width) / 2 if center_x else position[0]
        y = position[1]
        for surface, outline in rendered:
            for dx, dy in _OUTLINE_OFFSETS:
                self.screen.blit(outline, (x + dx, y + dy))
            self.screen.blit(surface, (x, y))
            y += font.get_linesize()

    def _draw_button(self, button: Button) -> None:
        x, y = button.position
        width, height = button.size
        outer = pygame.Rect(
            round(x - BUTTON_OUTLINE),
            round(y - BUTTON_OUTLINE),
            round(width + 2 * BUTTON_OUTLINE),
            round(height + 2 * BUTTON_OUTLINE),
        )
        pygame.draw.rect(self.screen, button.outline_color(), outer)
        pygame.draw.rect(
            self.screen, button.fill_color(), pygame.Rect(round(x), round(y), round(width), round(height))
        )
        label = self._font(button_module.FONT_SIZE).render(button.text, True, button.text_color())
        self.screen.blit(
            label,
            (x + (width - label.get_width()) / 2, y + (height - label.get_height()) / 2),
        )

    def _draw_buttons(self, state: GameState) -> None:
        for button in self.game.menus.get(state, []):
            self._draw_button(button)

    def _render_menu(self) -> None:
        if self.logo is not None:
            self.screen.blit(self.logo, ((WINDOW_WIDTH - self.logo.get_width()) / 2, 10))
        self._draw_buttons(GameState.MENU)

    def _render_game(self) -> None:
        game = self.game
        font = self._font(word_module.FONT_SIZE)
        for word in game.words:
            color = word.color(WINDOW_WIDTH)
            surface = font.render(word.text, True, color)
            outline = font.render(word.text, True, OUTLINE_COLOR)
            for dx, dy in _OUTLINE_OFFSETS:
                self.screen.blit(outline, (word.x + dx, word.y + dy))
            self.screen.blit(surface, (word.x, word.y))

        self._draw_text(game.current_input, 24, GREEN, (10, 550))
        self._draw_text(f"Score: {game.score}", 24, WHITE, (650, 550))
        self._draw_text(f"Health: {game.health}", 24, RED, (10, 20))
        self._draw_text(f"Difficulty: {game.difficulty.label()}", 24, YELLOW, (650, 20))

    def _render_pause(self) -> None:
        self._render_game()
        darken = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        darken.fill((0, 0, 0, 150))
        self.screen.blit(darken, (0, 0))
        self._draw_text("Game Paused", 60, WHITE, (0, 100), True)
        self._draw_buttons(GameState.PAUSE)

    def _render_game_over(self) -> None:
        self._draw_text("Game Over!", 60, RED, (0, 150), True)
        self._draw_text(f"Achieved score: {self.game.score}", 30, WHITE, (0, 220), True)
        self._draw_buttons(GameState.GAME_OVER)

    def _render_settings(self) -> None:
        self._draw_text("Settings", 60, WHITE, (0, 100), True)
        self._draw_buttons(GameState.SETTINGS)
        current = f"Current: {self.game.difficulty.label()}, {self.game.word_package.label()}"
        self._draw_text(current, 24, YELLOW, (0, 500), True)

    def _render_difficulty(self) -> None:
        self._draw_text("Select Difficulty", 60, WHITE, (0, 100), True)
        self._draw_buttons(GameState.SETTINGS_DIFFICULTY)
        self._draw_text(DIFFICULTY_HELP, 20, YELLOW, (0, 475), True)

    def _render_word_package(self) -> None:
        self._draw_text("Select Word Package", 60, WHITE, (0, 100), True)
        self._draw_buttons(GameState.SETTINGS_WORD_PACKAGE)

    def _render_font(self) -> None:
        self._draw_text("Select Font", 60, WHITE, (0, 100), True)
        self._draw_buttons(GameState.SETTINGS_FONT)
        self._draw_text(f"Current: {self.game.current_font}", 24, YELLOW, (0, 475), True)

    def _render_leaderboard(self) -> None:
        self.game.load_leaderboard()
        self._draw_text("Leaderboard", 60, WHITE, (0, 50), True)
        self._draw_text("Rank", 24, YELLOW, (100, 120))
        self._draw_text("Score", 24, YELLOW, (250, 120))
        self._draw_text("Date", 24, YELLOW, (400, 120))

        y = 170.0
        for rank, entry in enumerate(self.game.leaderboard[:LEADERBOARD_ROWS], start=1):
            self._draw_text(str(rank), 24, WHITE, (100, y))
            self._draw_text(entry.score, 24, WHITE, (250, y))
            self._draw_text(entry.date, 24, WHITE, (400, y))
            y += 40.0

        self._draw_text("Press ESC to return to menu", 20, HINT_COLOR, (0, 550), True)

    def render(self) -> None:
        """Draw the current screen and show it."""
        self.screen.fill(BACKGROUND_COLOR)
        if self.background is not None:
            self.screen.blit(self.background, (0, 0))

        screens = {
            GameState.MENU: self._render_menu,
            GameState.GAME: self._render_game,
            GameState.PAUSE: self._render_pause,
            GameState.GAME_OVER: self._render_game_over,
            GameState.SETTINGS: self._render_settings,
            GameState.SETTINGS_DIFFICULTY: self._render_difficulty,
            GameState.SETTINGS_WORD_PACKAGE: self._render_word_package,
            GameState.SETTINGS_FONT: self._render_font,
            GameState.LEADERBOARD: self._render_leaderboard,
        }
        screens[self.game.state]()
        pygame.display.flip()

    # -- loop ------------------------------------------------------------

    def run(self) -> None:
        """Run the game until the window is closed."""
        try:
            while self.running:
                self.process_events()
                self.game.tick(self.game.clock())
                self.render()
                self.frame_clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="monkeytyper", description="A typing game.")
    parser.add_argument(
        "--root",
        default=".",
        help="directory that holds the assets folder (default: current directory)",
    )
    args = parser.parse_args(argv)
    App(Assets(Path(args.root))).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())