"""Explosion animations shown where an enemy is destroyed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .config import FRAME_DT, MAX_EXPLOSIONS
from .enemy import AnimationFrame

EXPLOSION_FRAME_TIME = 0.45

EXPLOSION_FRAMES = (
    AnimationFrame(12, 13, 22, 19),
    AnimationFrame(55, 7, 35, 29),
    AnimationFrame(100, 7, 40, 32),
    AnimationFrame(148, 7, 39, 32),
    AnimationFrame(196, 6, 39, 33),
    AnimationFrame(244, 6, 39, 33),
    AnimationFrame(294, 7, 34, 33),
)


@dataclass
class Explosion:
    """One slot of the explosion pool; x and y are its centre."""

    active: bool = False
    x: float = 0.0
    y: float = 0.0
    frame_index: int = 0
    frame_time: float = EXPLOSION_FRAME_TIME
    time_count: float = 0.0
    frames: tuple[AnimationFrame, ...] = EXPLOSION_FRAMES

    @property
    def total_frames(self) -> int:
        return len(self.frames)

    def current_frame(self) -> AnimationFrame:
        return self.frames[self.frame_index]


def init_explosions() -> list[Explosion]:
    """Return the explosion pool, all inactive."""
    return [Explosion() for _ in range(MAX_EXPLOSIONS)]


def activate_explosion(
    explosions: Sequence[Explosion], x: float, y: float
) -> Explosion | None:
    """Start the first idle explosion at (x, y); return it, or None if all are busy."""
    for explosion in explosions:
        if not explosion.active:
            explosion.active = True
            explosion.x = x
            explosion.y = y
            explosion.frame_index = 0
            # A started explosion advances one frame per tick.
            explosion.frame_time = 0.0
            return explosion
    return None


def update_explosions(explosions: Sequence[Explosion]) -> None:
    """Advance running explosions and retire those whose animation ended."""
    for explosion in explosions:
        if not explosion.active:
            continue
        explosion.time_count += FRAME_DT
        if explosion.time_count >= explosion.frame_time:
            explosion.time_count = 0.0
            explosion.frame_index += 1
            if explosion.frame_index >= explosion.total_frames:
                explosion.active = False