"""Enemy formation: creation, movement and animation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from .config import (
    ENEMIES_BASE_SPEED,
    ENEMIES_SPEED_INCREASE,
    ENEMY_H,
    ENEMY_W,
    FRAME_DT,
    MAX_ENEMIES,
    SCREEN_W,
    EnemyType,
)

DAMAGE_FLASH_TIME = 0.10
DEFAULT_FRAME_TIME = 0.5


@dataclass(frozen=True)
class AnimationFrame:
    """A region of a sprite sheet."""

    sx: float
    sy: float
    sw: float
    sh: float


def _pair(sy: float) -> tuple[AnimationFrame, AnimationFrame]:
    return (AnimationFrame(2, sy, 14, 16), AnimationFrame(22, sy, 14, 16))


_IDLE_FRAMES = {
    EnemyType.NORMAL: _pair(203),
    EnemyType.RARE: _pair(183),
    EnemyType.LEGENDARY: _pair(223),
}
DAMAGE_FRAMES = _pair(163)

# score multiplier per round, base life, rounds per extra life
_STATS = {
    EnemyType.NORMAL: (5, 1, 4),
    EnemyType.RARE: (25, 2, 5),
    EnemyType.LEGENDARY: (50, 3, 6),
}


@dataclass
class Enemy:
    """One enemy of the formation; x and y are its centre."""

    kind: EnemyType = EnemyType.NORMAL
    x: float = 0.0
    y: float = 0.0
    score: int = 0
    life: int = 1
    active: bool = True
    x_vel: float = 1.0
    y_vel: float = ENEMY_H + 5
    frame_index: int = 0
    frame_time: float = DEFAULT_FRAME_TIME
    time_count: float = 0.0
    damage_timer: float = 0.0
    frames: tuple[AnimationFrame, ...] = ()

    def __post_init__(self) -> None:
        if not self.frames:
            self.frames = _IDLE_FRAMES[self.kind]

    @property
    def total_frames(self) -> int:
        return len(self.frames)

    def mark_damaged(self) -> None:
        """Switch to the hit animation for a short while."""
        self.damage_timer = DAMAGE_FLASH_TIME
        self.frames = DAMAGE_FRAMES
        self.frame_index = 0
        self.time_count = 0.0

    def restore_animation(self) -> None:
        """Return to the idle animation of this enemy's type."""
        self.frame_index = 0
        self.time_count = 0.0
        self.frame_time = DEFAULT_FRAME_TIME
        self.frames = _IDLE_FRAMES[self.kind]

    def current_frame(self) -> AnimationFrame:
        return self.frames[self.frame_index]


def roll_enemy_type(rng: random.Random) -> EnemyType:
    """Pick a type: 60% normal, 30% rare, 10% legendary."""
    roll = rng.randrange(10)
    if roll < 6:
        return EnemyType.NORMAL
    if roll < 9:
        return EnemyType.RARE
    return EnemyType.LEGENDARY


def make_enemy(index: int, enemy_type: EnemyType, round_number: int) -> Enemy:
    """Build the enemy at a slot of the five-column formation."""
    score_factor, base_life, life_step = _STATS[enemy_type]
    return Enemy(
        kind=enemy_type,
        x=(index % 5) * (ENEMY_W + 30) + 50,
        y=(index // 5) * (ENEMY_H + 30) + 80,
        score=score_factor * round_number,
        life=base_life + round_number // life_step,
    )


def init_enemies(round_number: int, rng: random.Random) -> list[Enemy]:
    """Build a fresh formation for a round."""
    return [make_enemy(i, roll_enemy_type(rng), round_number) for i in range(MAX_ENEMIES)]


def count_alive(enemies: Sequence[Enemy]) -> int:
    return sum(1 for enemy in enemies if enemy.active)


def _hits_wall(enemy: Enemy) -> bool:
    return enemy.x + ENEMY_W + enemy.x_vel > SCREEN_W or enemy.x + enemy.x_vel < 0


def update_enemies(enemies: Sequence[Enemy], round_number: int) -> None:
    """Advance the formation one frame: bounce, step, animate, flash timers."""
    dead = len(enemies) - count_alive(enemies)
    speed = (
        ENEMIES_BASE_SPEED
        + (round_number - 1) * 0.1
        + dead * ENEMIES_SPEED_INCREASE
    )

    alive = [enemy for enemy in enemies if enemy.active]
    if any(_hits_wall(enemy) for enemy in alive):
        for enemy in alive:
            enemy.x_vel = -enemy.x_vel
            enemy.y += enemy.y_vel

    for enemy in enemies:
        if enemy.active:
            enemy.x += enemy.x_vel * speed
            enemy.time_count += FRAME_DT
            if enemy.time_count >= enemy.frame_time:
                enemy.time_count = 0.0
                enemy.frame_index += 1
                if enemy.frame_index >= enemy.total_frames:
                    enemy.frame_index = 0
        if enemy.damage_timer > 0:
            enemy.damage_timer -= FRAME_DT
            if enemy.damage_timer <= 0:
                enemy.restore_animation()