"""Word lists, the leaderboard file and saved games."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from monkeytyper.enums import Difficulty, WordPackage
from monkeytyper.word import Word

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class SaveGameError(Exception):
    """A saved game could not be read."""


@dataclass
class LeaderboardEntry:
    """One finished round: its score and when it ended, both as stored."""

    score: str
    date: str


@dataclass
class SavedGame:
    """The state stored in a save file; fields absent from the file are None."""

    score: int | None = None
    health: int | None = None
    difficulty: Difficulty | None = None
    word_package: WordPackage | None = None
    words: list[Word] | None = field(default=None)


def _parse_int(text: str) -> int:
    """Read a leading integer as a C ``int``, ignoring what follows it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    """Read a leading floating-point number, ignoring what follows it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group(1))


def _split_fields(line: str, separator: str = ";") -> list[str]:
    """Split a line the way repeated delimited reads do: no trailing empty field."""
    parts = line.split(separator)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _lines(path: Path) -> list[str]:
    text = path.read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _format_number(value: float) -> str:
    return f"{value:g}"


def load_words(path: str | Path) -> list[str]:
    """Return the whitespace-separated words of a word list, or none if it is missing."""
    try:
        return Path(path).read_text(encoding="utf-8").split()
    except OSError:
        return []


def _score_key(entry: LeaderboardEntry) -> tuple[bool, int]:
    try:
        return (False, -_parse_int(entry.score))
    except ValueError:
        return (True, 0)


def load_leaderboard(path: str | Path) -> list[LeaderboardEntry]:
    """Read ``score;date`` lines, best score first; a missing file gives none."""
    try:
        lines = _lines(Path(path))
    except OSError:
        return []
    entries = [
        LeaderboardEntry(*parts)
        for parts in map(_split_fields, lines)
        if len(parts) == 2
    ]
    entries.sort(key=_score_key)
    return entries


def write_leaderboard(path: str | Path, entries: Iterable[LeaderboardEntry]) -> None:
    """Replace the leaderboard file with the given entries."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        for entry in entries:
            handle.write(f"{entry.score};{entry.date}\n")


def _read_words(lines: Iterator[str], count: int) -> list[Word]:
    words = []
    for _ in range(count):
        line = next(lines, None)
        if line is None:
            continue
        parts = _split_fields(line)
        if len(parts) < 4:
            raise ValueError(f"incomplete word entry: {line!r}")
        words.append(
            Word(parts[0], _parse_float(parts[1]), _parse_float(parts[2]), _parse_float(parts[3]))
        )
    return words


def load_saved_game(path: str | Path) -> SavedGame:
    """Read a saved game, raising SaveGameError if it is missing or malformed."""
    try:
        lines = iter(_lines(Path(path)))
    except OSError as error:
        raise SaveGameError(f"cannot read saved game: {error}") from error

    saved = SavedGame()
    try:
        for line in lines:
            key, _, value = line.partition(":")
            if key == "Score":
                saved.score = _parse_int(value)
            elif key == "Health":
                saved.health = _parse_int(value)
            elif key == "Difficulty":
                saved.difficulty = Difficulty(_parse_int(value))
            elif key == "WordPackage":
                saved.word_package = WordPackage(_parse_int(value))
            elif key == "Words":
                saved.words = _read_words(lines, _parse_int(value))
    except ValueError as error:
        raise SaveGameError(f"malformed saved game: {error}") from error
    return saved


def write_saved_game(path: str | Path, saved: SavedGame) -> None:
    """Write a saved game; fields that are None are left out."""
    lines = []
    if saved.score is not None:
        lines.append(f"Score:{saved.score}")
    if saved.health is not None:
        lines.append(f"Health:{saved.health}")
    if saved.difficulty is not None:
        lines.append(f"Difficulty:{int(saved.difficulty)}")
    if saved.word_package is not None:
        lines.append(f"WordPackage:{int(saved.word_package)}")
    if saved.words is not None:
        lines.append(f"Words:{len(saved.words)}")
        lines.extend(
            f"{word.text};{_format_number(word.x)};{_format_number(word.y)};"
            f"{_format_number(word.speed)}"
            for word in saved.words
        )
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.writelines(f"{line}\n" for line in lines)