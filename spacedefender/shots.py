"""Player shots and enemy shots."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from .config import ENEMY_H, ENEMY_W, MAX_ENEMIES_SHOTS, MAX_SHOTS, SCREEN_H

PLAYER_SHOT_SPEED = 10
ENEMY_SHOT_SPEED = 4


@dataclass
class Shot:
    """A shot fired upward by the player."""

    active: bool = False
    x: float = 0.0
    y: float = 0.0
    y_vel: float = PLAYER_SHOT_SPEED


@dataclass
class EnemyShot:
    """A shot fired downward by an enemy."""

    active: bool = False
    x: float = 0.0
    y: float = 0.0
    y_vel: float = 0.0


def init_shots() -> list[Shot]:
    """Return the player's shot pool, all inactive."""
    return [Shot() for _ in range(MAX_SHOTS)]


def update_shots(shots: Sequence[Shot]) -> None:
    """Move active shots up and retire those that left the top of the screen."""
    for shot in shots:
        if shot.active:
            shot.y -= shot.y_vel
        if shot.y < 0:
            shot.active = False


def init_enemy_shots() -> list[EnemyShot]:
    """Return the enemy shot pool, all inactive."""
    return [EnemyShot() for _ in range(MAX_ENEMIES_SHOTS)]


def try_enemy_shot(
    enemy_shots: Sequence[EnemyShot],
    enemies: Sequence,
    round_number: int,
    rng: random.Random,
) -> EnemyShot | None:
    """Maybe let a random enemy fire; return the shot fired, if any."""
    odds = max(50, 200 - round_number * 5)
    if rng.randrange(odds) != 0:
        return None
    shooter = enemies[rng.randrange(len(enemies))]
    if not shooter.active:
        return None
    for shot in enemy_shots:
        if not shot.active:
            shot.active = True
            shot.x = shooter.x + ENEMY_W // 2
            shot.y = shooter.y + ENEMY_H
            shot.y_vel = ENEMY_SHOT_SPEED
            return shot
    return None


def update_enemy_shots(enemy_shots: Sequence[EnemyShot]) -> None:
    """Move active enemy shots down and retire those below the screen."""
    for shot in enemy_shots:
        if shot.active:
            shot.y += shot.y_vel
            if shot.y > SCREEN_H:
                shot.active = False