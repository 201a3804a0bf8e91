import pytest

from spacedefender.config import FLOOR_H, OBJECT_H, OBJECTS_NUMB, SCREEN_H, SCREEN_W
from spacedefender.objects import (
    Barrier,
    ObjectStage,
    init_barriers,
    new_round_barriers,
    refresh_stages,
)


class ScriptedRng:
    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


def test_init_barriers_layout():
    barriers = init_barriers()
    assert len(barriers) == OBJECTS_NUMB
    assert all(b.active and b.life == 3 for b in barriers)
    assert all(b.stage is ObjectStage.INTACT for b in barriers)
    assert all(b.y == SCREEN_H - FLOOR_H - OBJECT_H for b in barriers)
    gaps = [b.x - a.x for a, b in zip(barriers, barriers[1:])]
    assert gaps == [pytest.approx(SCREEN_W / 4.0)] * (OBJECTS_NUMB - 1)


@pytest.mark.parametrize(
    "life, stage",
    [
        (3, ObjectStage.INTACT),
        (2, ObjectStage.DAMAGED),
        (1, ObjectStage.CRUMBLING),
    ],
)
def test_refresh_stages_follows_life(life, stage):
    barrier = Barrier(life=life, stage=ObjectStage.INTACT)
    refresh_stages([barrier])
    assert barrier.stage is stage


@pytest.mark.parametrize("life", [0, 4])
def test_refresh_stages_keeps_stage_outside_range(life):
    barrier = Barrier(life=life, stage=ObjectStage.DAMAGED)
    refresh_stages([barrier])
    assert barrier.stage is ObjectStage.DAMAGED


def test_new_round_reinforces_active_barrier():
    barriers = init_barriers()
    rng = ScriptedRng(1)
    chosen = new_round_barriers(barriers, rng)
    assert chosen is barriers[1]
    assert chosen.life == 4
    assert [b.life for b in barriers if b is not chosen] == [3, 3]


def test_new_round_rebuilds_destroyed_barrier():
    barriers = init_barriers()
    barriers[0].active = False
    barriers[0].life = 0
    chosen = new_round_barriers(barriers, ScriptedRng(0))
    assert chosen is barriers[0]
    assert chosen.active
    assert chosen.life == 1


def test_new_round_never_picks_last_barrier():
    rng = ScriptedRng(0)
    new_round_barriers(init_barriers(), rng)
    assert rng.calls == [OBJECTS_NUMB - 1]