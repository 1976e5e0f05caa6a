import pytest

from monkeytyper.word import GREEN, RED, YELLOW, Word


def test_update_moves_by_speed():
    word = Word("monkey", 10.0, 120.0, 3.0)
    word.update()
    word.update()
    assert word.x == pytest.approx(16.0)
    assert word.y == 120.0


def test_update_keeps_text_and_speed():
    word = Word("banana", 0.0, 50.0, 2.0)
    word.update()
    assert word.text == "banana"
    assert word.speed == 2.0


@pytest.mark.parametrize("x, expected", [(799.0, False), (800.0, False), (800.5, True)])
def test_is_off_screen(x, expected):
    assert Word("a", x, 0.0, 1.0).is_off_screen(800) is expected


def test_word_leaves_screen_after_enough_updates():
    word = Word("a", 0.0, 0.0, 4.0)
    frames = 0
    while not word.is_off_screen(800):
        word.update()
        frames += 1
    assert word.x > 800
    assert word.x - word.speed <= 800
    assert frames > 0


@pytest.mark.parametrize(
    "x, expected",
    [(0.0, GREEN), (399.0, GREEN), (400.0, YELLOW), (599.0, YELLOW), (600.0, RED), (900.0, RED)],
)
def test_color_thresholds(x, expected):
    assert Word("a", x, 0.0, 1.0).color(800) == expected


def test_colors_are_distinct():
    assert len({GREEN, YELLOW, RED}) == 3
    assert Word("a", 0.0, 0.0, 1.0).color(100) != Word("a", 99.0, 0.0, 1.0).color(100)