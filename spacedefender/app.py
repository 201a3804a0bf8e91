"""Command-line entry point and main loop."""

from __future__ import annotations

import argparse
import os
import sys

import pygame

from .config import FPS, SCREEN_H, SCREEN_W, GameState
from .game import Game, Key, Sound
from .highscore import HIGHSCORE_FILE, load_highscore, save_highscore
from .render import TITLE, Assets, Renderer, load_assets

_KEYMAP = {
    pygame.K_a: Key.LEFT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.FIRE,
    pygame.K_ESCAPE: Key.ESCAPE,
}

_SOUND_VOLUME = {Sound.ENEMY_EXPLOSION: 0.2}
_DEFAULT_VOLUME = 0.1
MUSIC_VOLUME = 0.0


def map_key(pygame_key: int) -> Key | None:
    """Game control bound to a pygame key code, or None."""
    return _KEYMAP.get(pygame_key)


def _init_mixer() -> None:
    if pygame.mixer.get_init():
        return
    try:
        pygame.mixer.init()
    except pygame.error:
        pass


def _start_music(assets: Assets) -> None:
    if assets.music_path is None or not pygame.mixer.get_init():
        return
    try:
        pygame.mixer.music.load(str(assets.music_path))
        pygame.mixer.music.set_volume(MUSIC_VOLUME)
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass


def _play_sounds(game: Game, assets: Assets) -> None:
    for sound in game.sounds:
        sample = assets.sounds.get(sound)
        if sample is not None:
            sample.set_volume(_SOUND_VOLUME.get(sound, _DEFAULT_VOLUME))
            sample.play()
    game.sounds.clear()


def _handle_event(event, game: Game, assets: Assets) -> None:
    if game.state is GameState.MENU:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if game.handle_menu_click(*event.pos) == "new_game":
                _start_music(assets)
    elif game.state is GameState.PLAYING:
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = map_key(event.key)
            if key is None:
                return
            if event.type == pygame.KEYDOWN:
                game.handle_key_down(key)
            else:
                game.handle_key_up(key)


def run(
    directory: str | os.PathLike = ".",
    highscore_path: str | os.PathLike = HIGHSCORE_FILE,
) -> int:
    """Play until the window is closed or Quit is chosen; return the exit status."""
    pygame.init()
    try:
        _init_mixer()
        assets = load_assets(directory)
        screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption(TITLE)
        renderer = Renderer(screen, assets)

        high_score = load_highscore(highscore_path)
        game = Game(high_score=high_score)
        _start_music(assets)
        clock = pygame.time.Clock()

        while game.state is not GameState.QUIT:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.state = GameState.QUIT
                    break
                _handle_event(event, game, assets)
            if game.state is GameState.QUIT:
                break

            if game.state is GameState.MENU:
                renderer.draw_menu(game)
            elif game.state is GameState.PLAYING:
                game.update()
                renderer.draw_game(game)
            _play_sounds(game, assets)
            pygame.display.flip()
            clock.tick(FPS)

        if game.score > high_score:
            print(f"New record: {game.score}")
            save_highscore(game.score, highscore_path)
        return 0
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="spacedefender", description=TITLE)
    parser.add_argument(
        "--assets", default=".", help="directory holding images, sounds and the font"
    )
    parser.add_argument(
        "--highscore", default=HIGHSCORE_FILE, help="file that stores the record"
    )
    args = parser.parse_args(argv)
    try:
        return run(args.assets, args.highscore)
    except (FileNotFoundError, pygame.error) as exc:
        print(f"failed to start: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())