import random

import pytest

from aggressive_squares.animation import (
    BOSS,
    BOSS_ATTACK_SPEED,
    BOSS_DEATH_SPEED,
    ENEMY_SPEED,
    PLAYER_DEATH,
    PLAYER_IDLE,
    PLAYER_JUMP,
    PLAYER_RELOAD,
    PLAYER_RUN,
    PLAYER_SHOOT,
    PLAYER_SPEED,
    PLAYER_WALK,
    SPITTER,
    ZOMBIE_SETS,
)
from aggressive_squares.config import (
    GROUND_HEIGHT,
    HEIGHT,
    JUMP_FORCE,
    WIDTH,
    EnemyKind,
    StaminaState,
)
from aggressive_squares.entities import Boss, Enemy, Player


class _QueuedRng:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


# --- Player -----------------------------------------------------------------

def test_player_starts_on_ground():
    player = Player()
    assert player.y == HEIGHT - GROUND_HEIGHT - 65
    assert player.hp == 8
    assert player.ammo == 300
    assert player.on_ground


def test_speed_grows_with_health():
    speeds = []
    for hp in range(0, 10):
        player = Player(hp=hp)
        player.update_speed()
        speeds.append(player.speed)
    assert speeds == sorted(speeds)
    assert speeds[0] == 0
    assert speeds[4] == 1.0


def test_speed_at_full_health_matches_start():
    player = Player()
    start = player.speed
    player.update_speed()
    assert player.speed == start


def test_jump_only_from_ground():
    player = Player()
    player.jump()
    assert player.dy == JUMP_FORCE
    assert not player.on_ground
    player.dy = 1.0
    player.jump()
    assert player.dy == 1.0


def test_jump_and_land():
    player = Player()
    ground = player.y
    player.jump()
    player.apply_physics()
    assert player.y < ground
    assert not player.on_ground
    for _ in range(200):
        player.apply_physics()
    assert player.on_ground
    assert player.y == ground
    assert player.dy == 0.0


def test_stamina_cycle():
    player = Player(stamina=StaminaState.RUNNING, stamina_timer=1)
    player.update_stamina()
    assert player.stamina is StaminaState.TIRED
    assert player.stamina_timer == 4 * 60
    player.stamina_timer = 1
    player.update_stamina()
    assert player.stamina is StaminaState.COOLDOWN
    assert player.stamina_timer == 8 * 60
    player.stamina_timer = 1
    player.update_stamina()
    assert player.stamina is StaminaState.NORMAL


def test_stamina_frozen_when_dead():
    player = Player(active=False, stamina=StaminaState.RUNNING, stamina_timer=5)
    player.update_stamina()
    assert player.stamina_timer == 5
    assert player.stamina is StaminaState.RUNNING


@pytest.mark.parametrize(
    "changes, walking, expected",
    [
        ({"active": False}, False, PLAYER_DEATH),
        ({"shoot_anim_timer": 3, "reload_anim_timer": 3}, True, PLAYER_SHOOT),
        ({"reload_anim_timer": 3, "on_ground": False}, True, PLAYER_RELOAD),
        ({"on_ground": False, "stamina": StaminaState.RUNNING}, True, PLAYER_JUMP),
        ({"stamina": StaminaState.RUNNING}, True, PLAYER_RUN),
        ({"stamina": StaminaState.RUNNING}, False, PLAYER_IDLE),
        ({}, True, PLAYER_WALK),
        ({}, False, PLAYER_IDLE),
    ],
)
def test_player_animation_priority(changes, walking, expected):
    player = Player(**changes)
    player.update_animation(walking)
    assert player.animator.animation is expected


def test_player_animation_speed():
    player = Player()
    for _ in range(PLAYER_SPEED - 1):
        player.update_animation(False)
    assert player.animator.frame_index == 0
    player.update_animation(False)
    assert player.animator.frame_index == 1


def test_player_death_does_not_loop():
    player = Player(active=False)
    for _ in range(PLAYER_SPEED * len(PLAYER_DEATH) * 3):
        player.update_animation(False)
    assert player.animator.frame_index == len(PLAYER_DEATH) - 1


# --- Enemy ------------------------------------------------------------------

def test_spawn_walker():
    enemy = Enemy.spawn(500.0, _QueuedRng([1, 2, 50, 30]))
    assert enemy.kind is EnemyKind.WALKER
    assert enemy.sprite_index == 2
    assert enemy.x == 500.0 + WIDTH + 50
    assert enemy.attack_timer == 60 + 30
    assert enemy.hp == enemy.hp_max == 100
    assert enemy.animator.animation is ZOMBIE_SETS[2].walk


def test_spawn_spitter():
    enemy = Enemy.spawn(0.0, _QueuedRng([0, 10, 5]))
    assert enemy.kind is EnemyKind.SPITTER
    assert enemy.hp == enemy.hp_max == 200
    assert enemy.animator.animation is SPITTER.idle
    assert enemy.y == HEIGHT - GROUND_HEIGHT - 65


def test_spawn_ranges_with_seeded_rng():
    rng = random.Random(7)
    kinds = set()
    for _ in range(200):
        enemy = Enemy.spawn(100.0, rng)
        kinds.add(enemy.kind)
        assert 100.0 + WIDTH <= enemy.x < 100.0 + WIDTH + 100
        assert 60 <= enemy.attack_timer < 180
        assert enemy.active and not enemy.dying
    assert kinds == {EnemyKind.WALKER, EnemyKind.SPITTER}


@pytest.mark.parametrize(
    "distance, attack_timer, expected",
    [
        (300.0, 0, SPITTER.idle),
        (250.0, 0, SPITTER.idle),
        (400.0, 0, SPITTER.idle),
        (100.0, 0, SPITTER.walk),
        (600.0, 0, SPITTER.walk),
        (300.0, 151, SPITTER.attack),
    ],
)
def test_spitter_animation(distance, attack_timer, expected):
    enemy = Enemy(kind=EnemyKind.SPITTER, x=0.0, attack_timer=attack_timer)
    enemy.update_animation(Player(x=distance))
    assert enemy.animator.animation is expected


def test_enemy_hurt_and_death_animation():
    enemy = Enemy(sprite_index=1, hurt_timer=5)
    enemy.update_animation(Player())
    assert enemy.animator.animation is ZOMBIE_SETS[1].hurt
    enemy.dying = True
    for _ in range(ENEMY_SPEED * 20):
        enemy.update_animation(Player())
    assert enemy.animator.animation is ZOMBIE_SETS[1].death
    assert enemy.animator.at_last_frame


def test_walker_animation_loops():
    enemy = Enemy(sprite_index=0)
    count = len(ZOMBIE_SETS[0].walk)
    for _ in range(ENEMY_SPEED * count):
        enemy.update_animation(Player())
    assert enemy.animator.frame_index == 0
    enemy.update_animation(Player())
    assert enemy.animator.timer == 1


# --- Boss -------------------------------------------------------------------

def test_boss_defaults():
    boss = Boss()
    assert boss.hp == boss.hp_max == 1000
    assert boss.y == HEIGHT - GROUND_HEIGHT - BOSS.walk.frames[0].h
    assert not boss.active


def test_boss_attack_animation_speed():
    boss = Boss(burst_shots=3)
    for _ in range(BOSS_ATTACK_SPEED - 1):
        boss.update_animation()
    assert boss.animator.animation is BOSS.attack
    assert boss.animator.frame_index == 0
    boss.update_animation()
    assert boss.animator.frame_index == 1


def test_boss_death_holds_last_frame():
    boss = Boss(dying=True)
    for _ in range(BOSS_DEATH_SPEED * 20):
        boss.update_animation()
    assert boss.animator.animation is BOSS.death
    assert boss.animator.frame_index == len(BOSS.death) - 1


def test_boss_walks_when_idle():
    boss = Boss(burst_shots=1)
    boss.update_animation()
    boss.burst_shots = 0
    boss.update_animation()
    assert boss.animator.animation is BOSS.walk
    assert boss.animator.timer == 1