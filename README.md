# monkeytyper

A small typing game. Words slide across the window from left to right. Type a
word and press Enter to clear it before it passes the right edge. A word that
escapes costs one health point, and so does a typed word that matches nothing
on screen. When health reaches zero the game is over and the score is added to
the leaderboard.

## Installing

```
pip install .
```

This needs `pygame`. For the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

## Playing

```
monkeytyper
```

By default the game looks for its files in an `assets/` folder in the current
directory. Use `--root DIR` to name the directory that holds `assets/` instead:

```
monkeytyper --root /path/to/game
```

Files below `assets/`:

- `packages/words_english.txt`, `packages/words_polish.txt`: the word lists,
  one word per whitespace-separated token. With an empty or missing list no
  words appear.
- `fonts/arial.ttf`, `fonts/calibri.ttf`, `fonts/consolas.ttf`: the fonts.
  `arial.ttf` must be present, or the window closes straight away. A font
  chosen in the settings is only switched to if its file exists.
- `data/`: where `leaderboard.csv` and `savegame.txt` are written. The folder
  must exist; it is not created, and if it is missing nothing is saved.
- `background.png`, `logo.png`, `sounds/score.mp3`: optional background
  image, menu logo and the sound played for each cleared word.

### Controls

- Letters `a`–`z` type, Backspace deletes, Enter (or keypad Enter) submits.
- Escape pauses a running game and resumes a paused one. On any other screen
  except the main menu it goes back to the menu and resets the round.
- In menus, Up and Down move the selection and Enter chooses.

### Difficulty

| Level  | Health | Word speed (px/frame) | New word every | Points per word |
|--------|--------|-----------------------|----------------|-----------------|
| Easy   | 3      | 2                     | 2.0 s          | 10              |
| Medium | 2      | 3                     | 1.5 s          | 13              |
| Hard   | 1      | 4                     | 1.0 s          | 15              |

The Settings menu also chooses the word package (English or Polish) and the
font (Arial, Calibri or Consolas).

### Saving and the leaderboard

"Save Game" in the pause menu writes score, health, difficulty, word package
and the words on screen to `assets/data/savegame.txt` and returns to the main
menu. "Load Game" in the main menu restores them and resumes play; if there is
no save file, or it cannot be read, the menu stays where it is.

Every finished game is appended to `assets/data/leaderboard.csv` as a
`score;date` line with the local time. The Leaderboard screen shows the ten
best scores.

## Using the game logic without a window

`monkeytyper.game.Game` holds all rules and state and needs no display:

```python
from pathlib import Path
from monkeytyper.game import Assets, Game, Key
from monkeytyper.enums import GameState

game = Game(Assets(Path("/path/to/game")))
game.handle_key(Key.ENTER)          # "Play" is selected first
assert game.state is GameState.GAME
game.handle_key(Key.LETTER, "c")
game.tick(game.clock())             # advance one frame
```

`monkeytyper.storage` reads and writes the word lists
(`load_words`), the leaderboard (`load_leaderboard`, `write_leaderboard`)
and saved games (`load_saved_game`, `write_saved_game`; an unreadable save
raises `SaveGameError`). The window itself is `monkeytyper.app.App`.