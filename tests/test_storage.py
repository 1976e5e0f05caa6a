import pytest

from monkeytyper.enums import Difficulty, WordPackage
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


def test_load_words_splits_on_whitespace(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple banana\n  cherry\tdate\n\nżółw\n", encoding="utf-8")
    assert load_words(path) == ["apple", "banana", "cherry", "date", "żółw"]


def test_load_words_missing_file_is_empty(tmp_path):
    assert load_words(tmp_path / "absent.txt") == []


def test_leaderboard_round_trip_sorted_best_first(tmp_path):
    path = tmp_path / "leaderboard.csv"
    entries = [
        LeaderboardEntry("10", "2024-01-01 10:00:00"),
        LeaderboardEntry("30", "2024-01-02 11:00:00"),
        LeaderboardEntry("20", "2024-01-03 12:00:00"),
    ]
    write_leaderboard(path, entries)
    loaded = load_leaderboard(path)
    assert [entry.score for entry in loaded] == ["30", "20", "10"]
    assert sorted(loaded, key=lambda e: e.date) == entries


def test_write_leaderboard_format(tmp_path):
    path = tmp_path / "leaderboard.csv"
    write_leaderboard(path, [LeaderboardEntry("13", "2024-05-06 07:08:09")])
    assert path.read_text(encoding="utf-8") == "13;2024-05-06 07:08:09\n"


def test_leaderboard_skips_lines_without_two_fields(tmp_path):
    path = tmp_path / "leaderboard.csv"
    path.write_text("5;a\njunk\n7;b;c\n\n9;d\n", encoding="utf-8")
    loaded = load_leaderboard(path)
    assert loaded == [LeaderboardEntry("9", "d"), LeaderboardEntry("5", "a")]


def test_leaderboard_trailing_separator_keeps_two_fields(tmp_path):
    path = tmp_path / "leaderboard.csv"
    path.write_text("4;x;\n", encoding="utf-8")
    assert load_leaderboard(path) == [LeaderboardEntry("4", "x")]


def test_leaderboard_unparsable_scores_kept(tmp_path):
    path = tmp_path / "leaderboard.csv"
    path.write_text("abc;x\n3;y\n8;z\n", encoding="utf-8")
    loaded = load_leaderboard(path)
    assert len(loaded) == 3
    assert [entry.score for entry in loaded[:2]] == ["8", "3"]


def test_leaderboard_missing_file_is_empty(tmp_path):
    assert load_leaderboard(tmp_path / "absent.csv") == []


def test_saved_game_round_trip(tmp_path):
    path = tmp_path / "savegame.txt"
    saved = SavedGame(
        score=120,
        health=2,
        difficulty=Difficulty.MEDIUM,
        word_package=WordPackage.POLISH,
        words=[Word("kot", 12.5, 100.0, 3.0), Word("pies", 0.0, 250.0, 3.0)],
    )
    write_saved_game(path, saved)
    assert load_saved_game(path) == saved


def test_saved_game_file_format(tmp_path):
    path = tmp_path / "savegame.txt"
    saved = SavedGame(
        score=40,
        health=3,
        difficulty=Difficulty.EASY,
        word_package=WordPackage.ENGLISH,
        words=[Word("cat", 2.5, 50.0, 2.0)],
    )
    write_saved_game(path, saved)
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Score:40",
        "Health:3",
        "Difficulty:0",
        "WordPackage:0",
        "Words:1",
        "cat;2.5;50;2",
    ]


def test_load_saved_game_partial_leaves_rest_none(tmp_path):
    path = tmp_path / "savegame.txt"
    path.write_text("Health:1\nUnknown:zzz\n", encoding="utf-8")
    saved = load_saved_game(path)
    assert saved.health == 1
    assert saved.score is None
    assert saved.words is None


def test_load_saved_game_fewer_word_lines_than_count(tmp_path):
    path = tmp_path / "savegame.txt"
    path.write_text("Words:3\ndog;1;2;3\n", encoding="utf-8")
    saved = load_saved_game(path)
    assert saved.words == [Word("dog", 1.0, 2.0, 3.0)]


def test_load_saved_game_missing_file_raises(tmp_path):
    with pytest.raises(SaveGameError):
        load_saved_game(tmp_path / "absent.txt")


@pytest.mark.parametrize(
    "content",
    [
        "Score:abc\n",
        "Health:\n",
        "Words:1\ndog;1;2\n",
        "Words:1\ndog;x;2;3\n",
        "Difficulty:7\n",
        "Score:99999999999\n",
    ],
)
def test_load_saved_game_malformed_raises(tmp_path, content):
    path = tmp_path / "savegame.txt"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SaveGameError):
        load_saved_game(path)


def test_load_saved_game_reads_leading_number(tmp_path):
    path = tmp_path / "savegame.txt"
    path.write_text("Score: 25points\n", encoding="utf-8")
    assert load_saved_game(path).score == 25