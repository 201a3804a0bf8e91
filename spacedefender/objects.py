"""Destructible barriers that shelter the ship."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .config import FLOOR_H, OBJECT_H, OBJECT_W, OBJECTS_NUMB, SCREEN_H, SCREEN_W

BARRIER_LIFE = 3


class ObjectStage(Enum):
    """Visual damage stage of a barrier."""

    INTACT = "object_um_A"
    DAMAGED = "object_um_B"
    CRUMBLING = "object_um_C"


_STAGE_BY_LIFE = {
    3: ObjectStage.INTACT,
    2: ObjectStage.DAMAGED,
    1: ObjectStage.CRUMBLING,
}


@dataclass
class Barrier:
    """A barrier standing on the floor."""

    x: float = 0.0
    y: float = 0.0
    life: int = BARRIER_LIFE
    active: bool = True
    stage: ObjectStage = ObjectStage.INTACT


def init_barriers() -> list[Barrier]:
    """Place the barriers evenly across the screen, at full strength."""
    y = SCREEN_H - FLOOR_H - OBJECT_H
    return [
        Barrier(x=(SCREEN_W / 4.0) * (i + 1) - OBJECT_W // 2, y=y)
        for i in range(OBJECTS_NUMB)
    ]


def refresh_stages(barriers: Sequence[Barrier]) -> None:
    """Set each barrier's stage from its life; other life values keep the stage."""
    for barrier in barriers:
        stage = _STAGE_BY_LIFE.get(barrier.life)
        if stage is not None:
            barrier.stage = stage


def new_round_barriers(barriers: Sequence[Barrier], rng: random.Random) -> Barrier:
    """Reinforce or rebuild one randomly chosen barrier; return it."""
    chosen = barriers[rng.randrange(OBJECTS_NUMB - 1)]
    if chosen.active:
        chosen.life += 1
    else:
        chosen.active = True
        chosen.life = 1
    return chosen