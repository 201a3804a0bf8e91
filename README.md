# spacedefender

A small arcade shooter built on pygame. A formation of enemies moves
sideways across the screen and steps down each time it hits a wall. Shoot
them before any of them reaches the ground, dodge their fire and shelter
behind the barriers.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
spacedefender
```

Options:

- `--assets DIR`: directory holding the images, sounds and font
  (default: the current directory).
- `--highscore FILE`: file that stores the record (default: `highscore.dat`).

The font `font_space.ttf` and the image `background_menu.png` must be present
in the assets directory; if either is missing the command prints an error and
exits with status 1. Any other missing image or sound is simply not drawn or
played.

The record is read when the program starts. When the program quits, the score
of the last game is compared with it, and the file is overwritten if the
record was beaten.

Controls:

- **A** / **Left arrow**: move left
- **D** / **Right arrow**: move right
- **Space**: fire
- **Escape**: back to the menu

In the menu, click **NOVO JOGO** to start a game or **SAIR** to quit. Closing
the window also quits.

## Rules

- Each enemy has a type: normal (60%), rare (30%) or legendary (10%). Rarer
  types have more life and are worth more points, and both grow with the
  round number.
- The formation speeds up as enemies die and with each new round.
- Only one player shot can be in flight at a time.
- Clearing a wave gives 500 points, starts the next round and reinforces one
  barrier, or rebuilds it with one life if it had been destroyed.
- Enemy fire wears the barriers down; an enemy that touches a barrier
  destroys both itself and the barrier.
- A destroyed enemy may drop a power-up (more often for rarer types):
  - life: one extra life, up to three;
  - shots: raises `Game.max_shots` for 10 seconds;
  - speed: the ship moves faster for 5 seconds, and keeps twice its starting
    speed afterwards.
- The game goes back to the menu when you lose all your lives or when an
  enemy reaches the ground.

## Using it as a library

The game logic in `spacedefender.game` does not need a display.

- `Game` holds the whole state. Pass `rng=random.Random(seed)` for a
  reproducible game and `high_score=` to show a record.
- `Game.reset()` starts a new game; `Game.handle_key_down(key)` and
  `Game.handle_key_up(key)` take a `Key` (`LEFT`, `RIGHT`, `FIRE`, `ESCAPE`);
  `Game.handle_menu_click(x, y)` reacts to a menu click and returns the name
  of the button hit.
- `Game.update()` advances the game by one frame (100 frames per second of
  play). Sound effects it wants played are appended to `Game.sounds` as
  `Sound` values; the caller clears that list.
- `Game.state` is a `GameState` telling which screen is active.

Other pieces:

- `spacedefender.highscore.load_highscore(path)` and
  `save_highscore(score, path)` read and write the record file.
- `spacedefender.render.load_assets(directory)` loads the font, images and
  sounds, and `Renderer(surface, assets)` draws a `Game` with
  `draw_menu(game)` and `draw_game(game)`.
- `spacedefender.app.run(directory, highscore_path)` runs the full event loop.

## What it does not do

- The menu's **AJUDA** and **CONFIGURACAO** entries do nothing: there is no
  help screen and no settings screen.
- There is no game-over screen; a lost game returns straight to the menu.
- The window has a fixed size of 1280×720 and is not scaled to the screen.