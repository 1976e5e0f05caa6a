"""Menu buttons and their layout."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

Color = tuple[int, int, int]

FONT_SIZE = 24


@dataclass
class Button:
    """A labelled rectangle that may be highlighted as selected."""

    position: tuple[float, float]
    size: tuple[float, float]
    text: str
    selected: bool = False

    def fill_color(self) -> Color:
        """Background colour of the rectangle."""
        return (0, 120, 0) if self.selected else (45, 45, 45)

    def outline_color(self) -> Color:
        """Colour of the rectangle's border."""
        return (0, 200, 0) if self.selected else (100, 100, 100)

    def text_color(self) -> Color:
        """Colour of the label."""
        return (255, 255, 255) if self.selected else (220, 220, 220)


def layout_buttons(
    texts: Iterable[str],
    margin_top: float,
    window_width: float,
    width: float,
    height: float,
    spacing: float,
) -> list[Button]:
    """Stack buttons vertically, centred horizontally in the window."""
    x = (window_width - width) / 2
    return [
        Button((x, margin_top + i * (height + spacing)), (width, height), text)
        for i, text in enumerate(texts)
    ]


def select_button(buttons: Iterable[Button], index: int) -> None:
    """Mark the button at ``index`` as selected and every other one as not."""
    for i, button in enumerate(buttons):
        button.selected = i == index