"""A word drifting across the playfield."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]

GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)
RED: Color = (255, 0, 0)

FONT_SIZE = 30


@dataclass
class Word:
    """A word at a position moving right at a fixed speed."""

    text: str
    x: float
    y: float
    speed: float

    def update(self) -> None:
        """Advance the word by one frame."""
        self.x += self.speed

    def is_off_screen(self, width: float) -> bool:
        """True once the word has passed the right edge."""
        return self.x > width

    def color(self, window_width: float) -> Color:
        """Colour for the word, warning as it nears the right edge."""
        share = self.x / window_width
        if share >= 0.75:
            return RED
        if share >= 0.50:
            return YELLOW
        return GREEN