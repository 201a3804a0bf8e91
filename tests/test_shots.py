import pytest

from spacedefender.config import (
    ENEMY_H,
    ENEMY_W,
    MAX_ENEMIES_SHOTS,
    MAX_SHOTS,
    SCREEN_H,
    EnemyType,
)
from spacedefender.enemy import make_enemy
from spacedefender.shots import (
    EnemyShot,
    Shot,
    init_enemy_shots,
    init_shots,
    try_enemy_shot,
    update_enemy_shots,
    update_shots,
)


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)
        self.ranges = []

    def randrange(self, n):
        self.ranges.append(n)
        return self.values.pop(0)


def _enemies(count=3):
    return [make_enemy(i, EnemyType.NORMAL, 1) for i in range(count)]


def test_init_shots_inactive():
    shots = init_shots()
    assert len(shots) == MAX_SHOTS
    assert all(not s.active and s.y_vel == 10 for s in shots)


def test_update_shot_moves_up():
    shot = Shot(active=True, x=5, y=300)
    update_shots([shot])
    assert shot.y == 300 - shot.y_vel
    assert shot.active


def test_update_shot_leaves_screen():
    shot = Shot(active=True, y=3)
    update_shots([shot])
    assert shot.y < 0
    assert not shot.active


def test_inactive_shot_not_moved():
    shot = Shot(active=False, y=300)
    update_shots([shot])
    assert shot.y == 300


def test_init_enemy_shots_inactive():
    shots = init_enemy_shots()
    assert len(shots) == MAX_ENEMIES_SHOTS
    assert not any(s.active for s in shots)


def test_enemy_fires_from_below_centre():
    enemies = _enemies()
    pool = init_enemy_shots()
    rng = ScriptedRng([0, 2])
    fired = try_enemy_shot(pool, enemies, 1, rng)
    assert fired is pool[0]
    assert fired.active
    assert fired.x == enemies[2].x + ENEMY_W // 2
    assert fired.y == enemies[2].y + ENEMY_H
    assert fired.y_vel == 4
    assert rng.ranges[1] == len(enemies)


def test_no_shot_when_roll_misses():
    pool = init_enemy_shots()
    assert try_enemy_shot(pool, _enemies(), 1, ScriptedRng([1])) is None
    assert not any(s.active for s in pool)


@pytest.mark.parametrize("round_number", [40, 100])
def test_odds_are_clamped(round_number):
    rng = ScriptedRng([1])
    try_enemy_shot(init_enemy_shots(), _enemies(), round_number, rng)
    assert rng.ranges == [50]


def test_odds_grow_with_rounds():
    early, late = ScriptedRng([1]), ScriptedRng([1])
    try_enemy_shot(init_enemy_shots(), _enemies(), 1, early)
    try_enemy_shot(init_enemy_shots(), _enemies(), 10, late)
    assert early.ranges[0] > late.ranges[0] >= 50


def test_dead_shooter_does_not_fire():
    enemies = _enemies()
    enemies[1].active = False
    pool = init_enemy_shots()
    assert try_enemy_shot(pool, enemies, 1, ScriptedRng([0, 1])) is None
    assert not any(s.active for s in pool)


def test_full_pool_does_not_fire():
    pool = [EnemyShot(active=True, y=10) for _ in range(3)]
    assert try_enemy_shot(pool, _enemies(), 1, ScriptedRng([0, 0])) is None
    assert all(s.y == 10 for s in pool)


def test_enemy_shot_moves_down_and_expires():
    shot = EnemyShot(active=True, y=100, y_vel=4)
    update_enemy_shots([shot])
    assert shot.y == 104
    assert shot.active
    shot.y = SCREEN_H
    update_enemy_shots([shot])
    assert not shot.active