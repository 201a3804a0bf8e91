"""Loading images, sounds and font, and drawing the menu and the game scene."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .config import (
    ENEMY_W,
    FLOOR_H,
    OBJECT_H,
    OBJECT_W,
    POWERUP_H,
    POWERUP_W,
    SCREEN_H,
    SCREEN_W,
    SHIP_H,
    SHIP_W,
    SHOT_H,
    SHOT_W,
    UI_H,
    UI_W,
)
from .game import Game, Sound

FONT_FILE = "font_space.ttf"
FONT_SIZE = 35
MUSIC_FILE = "musica_fundo_jogo.ogg"

IMAGE_NAMES = (
    "background_menu",
    "nave_sprite",
    "hearts",
    "shot_sprite",
    "enemy_sprite_new",
    "enemy_shot_sprite",
    "background_jogo",
    "explosao",
    "object_um_A",
    "object_um_B",
    "object_um_C",
    "powerUp_Life",
    "powerUp_Tiros",
    "powerUp_Vel",
)
REQUIRED_IMAGES = frozenset({"background_menu"})

MENU_BACKGROUND = (20, 20, 40)
GAME_BACKGROUND = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)

TITLE = "Space Defender"
MENU_OPTIONS = (
    (0, "NOVO JOGO"),
    (40, "AJUDA"),
    (80, "CONFIGURACAO"),
    (120, "SAIR"),
)

_HEART_REGION = (0, 1, 16, 15)
_LIFE_ICON_STEP = 50


@dataclass
class Assets:
    """Everything loaded from the assets directory."""

    font: pygame.font.Font
    images: dict[str, pygame.Surface | None] = field(default_factory=dict)
    sounds: dict[Sound, pygame.mixer.Sound] = field(default_factory=dict)
    music_path: Path | None = None


def _load_image(path: Path) -> pygame.Surface:
    image = pygame.image.load(str(path))
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def load_assets(directory: str | os.PathLike = ".") -> Assets:
    """Load font, images, sounds and music from directory.

    The font and the menu background are required; any other missing
    file is left out.
    """
    base = Path(directory)
    pygame.font.init()

    font_path = base / FONT_FILE
    if not font_path.is_file():
        raise FileNotFoundError(f"font file not found: {font_path}")
    font = pygame.font.Font(str(font_path), FONT_SIZE)

    images: dict[str, pygame.Surface | None] = {}
    for name in IMAGE_NAMES:
        path = base / f"{name}.png"
        if path.is_file():
            images[name] = _load_image(path)
        elif name in REQUIRED_IMAGES:
            raise FileNotFoundError(f"image not found: {path}")
        else:
            images[name] = None

    sounds: dict[Sound, pygame.mixer.Sound] = {}
    if pygame.mixer.get_init():
        for sound in Sound:
            path = base / f"{sound.value}.wav"
            if path.is_file():
                sounds[sound] = pygame.mixer.Sound(str(path))

    music_path = base / MUSIC_FILE
    return Assets(
        font=font,
        images=images,
        sounds=sounds,
        music_path=music_path if music_path.is_file() else None,
    )


def transform_mouse_coords(
    x: float, y: float, scale: float, offset_x: float, offset_y: float
) -> tuple[int, int]:
    """Map window coordinates to game coordinates under a scale and offset."""
    return int((x - offset_x) / scale), int((y - offset_y) / scale)


class Renderer:
    """Draws game state onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, assets: Assets) -> None:
        self.surface = surface
        self.assets = assets

    # --- helpers -----------------------------------------------------

    def _image(self, name: str) -> pygame.Surface | None:
        return self.assets.images.get(name)

    def _blit_scaled(self, image, src, dest) -> None:
        sx, sy, sw, sh = (round(v) for v in src)
        region = pygame.Rect(sx, sy, sw, sh).clip(image.get_rect())
        dx, dy, dw, dh = (round(v) for v in dest)
        if region.width <= 0 or region.height <= 0 or dw <= 0 or dh <= 0:
            return
        scaled = pygame.transform.scale(image.subsurface(region), (dw, dh))
        self.surface.blit(scaled, (dx, dy))

    def _blit_whole_centered(self, image, cx, cy, w, h) -> None:
        if image is None:
            return
        self._blit_scaled(
            image,
            (0, 0, image.get_width(), image.get_height()),
            (cx - w / 2.0, cy - h / 2.0, w, h),
        )

    def _text(self, text: str, x: float, y: float, align: str) -> None:
        rendered = self.assets.font.render(text, True, TEXT_COLOR)
        rect = rendered.get_rect()
        pos = (round(x), round(y))
        if align == "left":
            rect.topleft = pos
        elif align == "right":
            rect.topright = pos
        else:
            rect.midtop = pos
        self.surface.blit(rendered, rect)

    # --- menu --------------------------------------------------------

    def draw_menu(self, game: Game) -> None:
        """Draw the title screen with its four options."""
        self.surface.fill(MENU_BACKGROUND)
        cx = SCREEN_W / 2
        self._text(TITLE, cx, SCREEN_H / 4, "centre")
        for offset, label in MENU_OPTIONS:
            self._text(label, cx, SCREEN_H / 2 + offset, "centre")

    # --- game scene --------------------------------------------------

    def draw_game(self, game: Game) -> None:
        """Draw one frame of the running match."""
        self._draw_scenario()
        self._draw_ship(game)
        self._draw_enemies(game)
        self._draw_explosions(game)
        self._draw_ship_life(game)
        self._text(f"{game.round_number}º Round", SCREEN_W / 2, 10, "centre")
        self._text(f"Score: {game.score}", 10, 10, "left")
        self._text(f"Recorde: {game.high_score}", SCREEN_W - 10, 10, "right")
        self._draw_shots(game)
        self._draw_enemy_shots(game)
        self._draw_barriers(game)
        self._draw_powerups(game)

    def _draw_scenario(self) -> None:
        self.surface.fill(GAME_BACKGROUND)
        background = self._image("background_jogo")
        if background is not None:
            self._blit_scaled(
                background,
                (0, 0, background.get_width(), background.get_height()),
                (0, 0, SCREEN_W, SCREEN_H),
            )

    def _draw_ship(self, game: Game) -> None:
        self._blit_whole_centered(
            self._image("nave_sprite"), game.ship.x, SCREEN_H - FLOOR_H, SHIP_W, SHIP_H
        )

    def _draw_ship_life(self, game: Game) -> None:
        hearts = self._image("hearts")
        if hearts is None:
            return
        for i in range(game.ship.life):
            dest = (10 + i * _LIFE_ICON_STEP, SCREEN_H - 50, UI_W, UI_H)
            self._blit_scaled(hearts, _HEART_REGION, dest)

    def _draw_enemies(self, game: Game) -> None:
        sheet = self._image("enemy_sprite_new")
        if sheet is None:
            return
        for enemy in game.enemies:
            if not enemy.active:
                continue
            frame = enemy.current_frame()
            dw = ENEMY_W
            dh = dw * (frame.sh / frame.sw)
            self._blit_scaled(
                sheet,
                (frame.sx, frame.sy, frame.sw, frame.sh),
                (enemy.x - dw / 2.0, enemy.y - dh / 2.0, dw, dh),
            )

    def _draw_explosions(self, game: Game) -> None:
        sheet = self._image("explosao")
        if sheet is None:
            return
        for explosion in game.explosions:
            if not explosion.active:
                continue
            frame = explosion.current_frame()
            self._blit_scaled(
                sheet,
                (frame.sx, frame.sy, frame.sw, frame.sh),
                (
                    explosion.x - frame.sw / 2.0,
                    explosion.y - frame.sh / 2.0,
                    frame.sw,
                    frame.sh,
                ),
            )

    def _draw_shots(self, game: Game) -> None:
        image = self._image("shot_sprite")
        for shot in game.shots:
            if shot.active:
                self._blit_whole_centered(image, shot.x, shot.y, SHOT_W, SHOT_H)

    def _draw_enemy_shots(self, game: Game) -> None:
        image = self._image("enemy_shot_sprite")
        for shot in game.enemy_shots:
            if shot.active:
                self._blit_whole_centered(image, shot.x, shot.y, SHOT_W, SHOT_H)

    def _draw_barriers(self, game: Game) -> None:
        for barrier in game.barriers:
            if barrier.active:
                self._blit_whole_centered(
                    self._image(barrier.stage.value),
                    barrier.x,
                    barrier.y,
                    OBJECT_W,
                    OBJECT_H,
                )

    def _draw_powerups(self, game: Game) -> None:
        for drop in game.powerups:
            if drop.active:
                self._blit_whole_centered(
                    self._image(drop.sprite_key()), drop.x, drop.y, POWERUP_W, POWERUP_H
                )