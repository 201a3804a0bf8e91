"""Game state, per-frame logic, collisions and input handling."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto

from .config import (
    ENEMY_H,
    ENEMY_W,
    FLOOR_H,
    FRAME_DT,
    MAX_SHOTS,
    OBJECT_H,
    OBJECT_W,
    POWERUP_H,
    POWERUP_W,
    SCREEN_H,
    SCREEN_W,
    SHIP_BASE_SPEED,
    SHIP_H,
    SHOT_H,
    SHOT_W,
    BuffType,
    GameState,
)
from .enemy import Enemy, count_alive, init_enemies, update_enemies
from .explosion import Explosion, activate_explosion, init_explosions, update_explosions
from .objects import Barrier, init_barriers, new_round_barriers, refresh_stages
from .powerup import PowerUpDrop, init_powerups, try_drop_buff, update_powerups
from .ship import Ship
from .shots import (
    EnemyShot,
    Shot,
    init_enemy_shots,
    init_shots,
    try_enemy_shot,
    update_enemy_shots,
    update_shots,
)

ROUND_CLEAR_BONUS = 500
SHOTS_BUFF_TIME = 10.0
SPEED_BUFF_TIME = 5.0
MAX_LIFE_FOR_BONUS = 2

_BUTTON_HALF_W = 100
_MENU_BUTTONS = (
    ("new_game", -15, 15),
    ("help", 25, 55),
    ("settings", 65, 95),
    ("quit", 105, 135),
)


class Key(Enum):
    """Game controls, independent of the input backend."""

    LEFT = auto()
    RIGHT = auto()
    FIRE = auto()
    ESCAPE = auto()


class Sound(Enum):
    """Sound effects the game asks to be played."""

    SHIP_SHOT = "tiro_nave"
    ENEMY_SHOT = "tiro_enemy"
    SHIP_EXPLOSION = "explosao_nave"
    ENEMY_EXPLOSION = "explosao"
    OBJECT_EXPLOSION = "explosao_objeto"


def rects_collide(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """True when two rectangles overlap; touching edges do not count."""
    return x1 + w1 > x2 and x1 < x2 + w2 and y1 + h1 > y2 and y1 < y2 + h2


def menu_button_at(x: int, y: int) -> str | None:
    """Name of the menu button under (x, y), or None."""
    cx = SCREEN_W // 2
    cy = SCREEN_H // 2
    if not cx - _BUTTON_HALF_W < x < cx + _BUTTON_HALF_W:
        return None
    for name, top, bottom in _MENU_BUTTONS:
        if cy + top < y < cy + bottom:
            return name
    return None


@dataclass
class Game:
    """Everything that changes while the game runs."""

    rng: random.Random = field(default_factory=random.Random)
    high_score: int = 0
    state: GameState = GameState.MENU
    round_number: int = 1
    score: int = 0
    ship: Ship = field(default_factory=Ship)
    enemies: list[Enemy] = field(default_factory=list)
    shots: list[Shot] = field(default_factory=init_shots)
    enemy_shots: list[EnemyShot] = field(default_factory=init_enemy_shots)
    barriers: list[Barrier] = field(default_factory=init_barriers)
    powerups: list[PowerUpDrop] = field(default_factory=init_powerups)
    explosions: list[Explosion] = field(default_factory=init_explosions)
    speed_buff_time: float = 0.0
    shots_buff_time: float = 0.0
    max_shots: int = MAX_SHOTS
    ticks: int = 0
    sounds: list[Sound] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Start a new match: fresh ship, pools, barriers and first wave."""
        self.ship = Ship()
        self.shots = init_shots()
        self.barriers = init_barriers()
        self.enemy_shots = init_enemy_shots()
        self.explosions = init_explosions()
        self.powerups = init_powerups()
        self.score = 0
        self.round_number = 1
        self.enemies = init_enemies(self.round_number, self.rng)

    # --- input -------------------------------------------------------

    def handle_key_down(self, key: Key) -> None:
        if key is Key.LEFT:
            self.ship.left = True
        elif key is Key.RIGHT:
            self.ship.right = True
        elif key is Key.FIRE:
            for shot in self.shots:
                if not shot.active:
                    shot.active = True
                    shot.x = self.ship.x - SHOT_W // 2
                    shot.y = SCREEN_H - FLOOR_H // 2 - SHIP_H
                    self.sounds.append(Sound.SHIP_SHOT)
                    break
        elif key is Key.ESCAPE:
            self.state = GameState.MENU

    def handle_key_up(self, key: Key) -> None:
        if key is Key.LEFT:
            self.ship.left = False
        elif key is Key.RIGHT:
            self.ship.right = False

    def handle_menu_click(self, x: int, y: int) -> str | None:
        """React to a click on the menu; return the button hit, if any."""
        button = menu_button_at(x, y)
        if button == "new_game":
            self.state = GameState.PLAYING
            self.reset()
        elif button == "quit":
            self.state = GameState.QUIT
        return button

    # --- frame logic -------------------------------------------------

    def update(self) -> None:
        """Advance the match by one frame."""
        self.ticks += 1
        self.ship.update()
        update_enemies(self.enemies, self.round_number)
        update_shots(self.shots)

        if try_enemy_shot(self.enemy_shots, self.enemies, self.round_number, self.rng):
            self.sounds.append(Sound.ENEMY_SHOT)
        update_enemy_shots(self.enemy_shots)
        update_explosions(self.explosions)
        update_powerups(self.powerups)

        self._tick_buffs()

        if self.enemy_reached_floor():
            self.sounds.append(Sound.SHIP_EXPLOSION)
            self.state = GameState.MENU

        if count_alive(self.enemies) == 0:
            self.round_number += 1
            self.score += ROUND_CLEAR_BONUS
            new_round_barriers(self.barriers, self.rng)
            self.enemies = init_enemies(self.round_number, self.rng)

        self.collide_enemies_barriers()
        self.collide_ship_powerups()
        self.collide_enemy_shots_barriers()
        self.collide_shots_barriers()
        self.collide_shots_enemies()
        self.collide_enemy_shots_ship()

        if self.ship.life <= 0:
            self.sounds.append(Sound.SHIP_EXPLOSION)
            self.state = GameState.MENU

    def _tick_buffs(self) -> None:
        if self.speed_buff_time > 0:
            self.speed_buff_time -= FRAME_DT
            self.ship.vel = SHIP_BASE_SPEED * 2
            if self.speed_buff_time <= 0:
                self.ship.vel = SHIP_BASE_SPEED
        if self.shots_buff_time > 0:
            self.shots_buff_time -= FRAME_DT
            self.max_shots = MAX_SHOTS + 2
            if self.shots_buff_time <= 0:
                self.max_shots = MAX_SHOTS

    def apply_buff(self, kind: BuffType) -> None:
        """Grant the effect of a collected power-up."""
        if kind is BuffType.LIFE:
            if self.ship.life <= MAX_LIFE_FOR_BONUS:
                self.ship.life += 1
        elif kind is BuffType.SHOTS:
            self.shots_buff_time = SHOTS_BUFF_TIME
        elif kind is BuffType.SPEED:
            self.speed_buff_time = SPEED_BUFF_TIME

    def _explode(self, x: float, y: float) -> None:
        if activate_explosion(self.explosions, x, y) is not None:
            self.sounds.append(Sound.ENEMY_EXPLOSION)

    # --- collisions --------------------------------------------------

    def enemy_reached_floor(self) -> bool:
        return any(
            enemy.active and enemy.y + ENEMY_H >= SCREEN_H - FLOOR_H
            for enemy in self.enemies
        )

    def collide_shots_enemies(self) -> None:
        for shot in self.shots:
            if not shot.active:
                continue
            for enemy in self.enemies:
                if not enemy.active:
                    continue
                if rects_collide(shot.x, shot.y, SHOT_W, SHOT_H,
                                 enemy.x, enemy.y, ENEMY_W, ENEMY_H):
                    shot.active = False
                    enemy.life -= 1
                    enemy.mark_damaged()
                    if enemy.life <= 0:
                        enemy.active = False
                        self.score += enemy.score
                        try_drop_buff(self.powerups, enemy, self.rng)
                        self._explode(enemy.x, enemy.y)
                    break

    def collide_enemy_shots_ship(self) -> None:
        hitbox = self.ship.hitbox()
        for shot in self.enemy_shots:
            if shot.active and rects_collide(shot.x, shot.y, SHOT_W, SHOT_H, *hitbox):
                shot.active = False
                self.ship.life -= 1

    def collide_shots_barriers(self) -> None:
        for shot in self.shots:
            if not shot.active:
                continue
            for barrier in self.barriers:
                if barrier.active and rects_collide(
                    shot.x, shot.y, SHOT_W, SHOT_H,
                    barrier.x, barrier.y, ENEMY_W, ENEMY_H,
                ):
                    shot.active = False

    def collide_enemy_shots_barriers(self) -> None:
        for shot in self.enemy_shots:
            if not shot.active:
                continue
            for barrier in self.barriers:
                if barrier.active and rects_collide(
                    shot.x, shot.y, SHOT_W, SHOT_H,
                    barrier.x, barrier.y, OBJECT_W, OBJECT_H,
                ):
                    shot.active = False
                    barrier.life -= 1
                    self.sounds.append(Sound.OBJECT_EXPLOSION)
                    refresh_stages(self.barriers)
                    if barrier.life <= 0:
                        barrier.active = False

    def collide_enemies_barriers(self) -> None:
        for enemy in self.enemies:
            if not enemy.active:
                continue
            for barrier in self.barriers:
                if barrier.active and rects_collide(
                    enemy.x, enemy.y, ENEMY_W, ENEMY_H,
                    barrier.x, barrier.y, OBJECT_W, OBJECT_H,
                ):
                    enemy.active = False
                    self._explode(enemy.x, enemy.y)
                    barrier.active = False
                    self.sounds.append(Sound.OBJECT_EXPLOSION)

    def collide_ship_powerups(self) -> None:
        hitbox = self.ship.hitbox()
        for drop in self.powerups:
            if drop.active and rects_collide(
                drop.x, drop.y, POWERUP_W, POWERUP_H, *hitbox
            ):
                drop.active = False
                self.apply_buff(drop.kind)