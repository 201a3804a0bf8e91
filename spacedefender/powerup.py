"""Power-ups dropped by destroyed enemies."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from .config import MAX_POWERUPS, SCREEN_H, BuffType, EnemyType
from .enemy import Enemy

POWERUP_FALL_SPEED = 1.5

_DROP_CHANCE = {
    EnemyType.NORMAL: 15,
    EnemyType.RARE: 30,
    EnemyType.LEGENDARY: 50,
}

# Life drops are shown with the shots sprite.
_SPRITE_KEYS = {
    BuffType.LIFE: "powerUp_Tiros",
    BuffType.SHOTS: "powerUp_Tiros",
    BuffType.SPEED: "powerUp_Vel",
}


@dataclass
class PowerUpDrop:
    """A falling power-up; x and y are its centre."""

    active: bool = False
    x: float = 0.0
    y: float = 0.0
    y_vel: float = 0.0
    kind: BuffType = BuffType.LIFE

    def sprite_key(self) -> str:
        """Name of the image this drop is drawn with."""
        return _SPRITE_KEYS[self.kind]


def init_powerups() -> list[PowerUpDrop]:
    """Return the power-up pool, all inactive."""
    return [PowerUpDrop() for _ in range(MAX_POWERUPS)]


def roll_drop(enemy_type: EnemyType, rng: random.Random) -> BuffType | None:
    """Decide whether a killed enemy drops a buff, and which one."""
    if rng.randrange(100) >= _DROP_CHANCE[enemy_type]:
        return None
    roll = rng.randrange(100)
    if roll < 20:
        return BuffType.LIFE
    if roll < 50:
        return BuffType.SHOTS
    return BuffType.SPEED


def try_drop_buff(
    powerups: Sequence[PowerUpDrop], enemy: Enemy, rng: random.Random
) -> PowerUpDrop | None:
    """Maybe spawn a power-up where the enemy died; return it if one was placed."""
    kind = roll_drop(enemy.kind, rng)
    if kind is None:
        return None
    for drop in powerups:
        if not drop.active:
            drop.active = True
            drop.x = enemy.x
            drop.y = enemy.y
            drop.y_vel = POWERUP_FALL_SPEED
            drop.kind = kind
            return drop
    return None


def update_powerups(powerups: Sequence[PowerUpDrop]) -> None:
    """Let active power-ups fall and retire those below the screen."""
    for drop in powerups:
        if drop.active:
            drop.y += drop.y_vel
            if drop.y > SCREEN_H:
                drop.active = False