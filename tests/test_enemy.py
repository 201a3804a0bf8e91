import random

import pytest

from spacedefender.config import MAX_ENEMIES, SCREEN_W, ENEMY_W, EnemyType
from spacedefender.enemy import (
    DAMAGE_FRAMES,
    AnimationFrame,
    Enemy,
    count_alive,
    init_enemies,
    make_enemy,
    roll_enemy_type,
    update_enemies,
)


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)

    def randrange(self, n):
        return self.values.pop(0)


@pytest.mark.parametrize(
    "roll, expected",
    [
        (0, EnemyType.NORMAL),
        (5, EnemyType.NORMAL),
        (6, EnemyType.RARE),
        (8, EnemyType.RARE),
        (9, EnemyType.LEGENDARY),
    ],
)
def test_roll_enemy_type(roll, expected):
    assert roll_enemy_type(ScriptedRng([roll])) is expected


@pytest.mark.parametrize(
    "kind, score, life",
    [
        (EnemyType.NORMAL, 5, 1),
        (EnemyType.RARE, 25, 2),
        (EnemyType.LEGENDARY, 50, 3),
    ],
)
def test_first_round_stats(kind, score, life):
    enemy = make_enemy(0, kind, 1)
    assert (enemy.score, enemy.life) == (score, life)
    assert enemy.active


def test_score_scales_with_round():
    assert make_enemy(0, EnemyType.RARE, 3).score == 3 * make_enemy(0, EnemyType.RARE, 1).score


def test_life_grows_with_rounds():
    assert make_enemy(0, EnemyType.NORMAL, 8).life > make_enemy(0, EnemyType.NORMAL, 1).life


def test_formation_layout():
    first = make_enemy(0, EnemyType.NORMAL, 1)
    assert (first.x, first.y) == (50, 80)
    right = make_enemy(1, EnemyType.NORMAL, 1)
    below = make_enemy(5, EnemyType.NORMAL, 1)
    assert right.y == first.y and right.x > first.x
    assert below.x == first.x and below.y > first.y


def test_init_enemies():
    enemies = init_enemies(1, random.Random(7))
    assert len(enemies) == MAX_ENEMIES
    assert count_alive(enemies) == MAX_ENEMIES
    assert len({(e.x, e.y) for e in enemies}) == MAX_ENEMIES


def test_count_alive():
    enemies = [make_enemy(i, EnemyType.NORMAL, 1) for i in range(4)]
    enemies[0].active = False
    enemies[2].active = False
    assert count_alive(enemies) == 2


def test_damage_and_restore():
    enemy = make_enemy(0, EnemyType.LEGENDARY, 1)
    idle = enemy.frames
    enemy.mark_damaged()
    assert enemy.frames == DAMAGE_FRAMES
    assert enemy.damage_timer == pytest.approx(0.10)
    assert enemy.current_frame() == AnimationFrame(2, 163, 14, 16)
    enemy.restore_animation()
    assert enemy.frames == idle
    assert enemy.frame_index == 0


def test_enemies_move_right():
    enemy = Enemy(x=400, y=100)
    update_enemies([enemy], 1)
    assert enemy.x > 400
    assert enemy.y == 100


def test_wall_bounce():
    enemy = Enemy(x=SCREEN_W - ENEMY_W - 0.5, y=100)
    start_y = enemy.y
    update_enemies([enemy], 1)
    assert enemy.x_vel == -1
    assert enemy.y == start_y + enemy.y_vel
    assert enemy.x < SCREEN_W - ENEMY_W


def test_bounce_moves_whole_formation():
    edge = Enemy(x=SCREEN_W - ENEMY_W - 0.5, y=100)
    middle = Enemy(x=400, y=100)
    update_enemies([edge, middle], 1)
    assert middle.x_vel == -1
    assert middle.y == edge.y
    assert middle.x < 400


def test_speed_rises_with_dead_enemies():
    full = [Enemy(x=400), Enemy(x=500, active=True)]
    thinned = [Enemy(x=400), Enemy(x=500, active=False)]
    update_enemies(full, 1)
    update_enemies(thinned, 1)
    assert thinned[0].x - 400 > full[0].x - 400


def test_speed_rises_with_round():
    early, late = Enemy(x=400), Enemy(x=400)
    update_enemies([early], 1)
    update_enemies([late], 5)
    assert late.x > early.x


def test_inactive_enemy_stays_put():
    enemy = Enemy(x=400, y=100, active=False)
    update_enemies([enemy], 1)
    assert (enemy.x, enemy.y) == (400, 100)


def test_animation_advances_and_wraps():
    enemy = Enemy(x=400)
    for _ in range(60):
        update_enemies([enemy], 1)
    assert enemy.frame_index == 1
    for _ in range(50):
        update_enemies([enemy], 1)
    assert enemy.frame_index in (0, 1)
    assert enemy.frame_index < enemy.total_frames


def test_damage_flash_expires():
    enemy = Enemy(kind=EnemyType.RARE, x=400)
    idle = enemy.frames
    enemy.mark_damaged()
    for _ in range(20):
        update_enemies([enemy], 1)
    assert enemy.frames == idle
    assert enemy.damage_timer <= 0