"""The player, the zombies and the boss, with their own state machines."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .animation import (
    BOSS,
    BOSS_ATTACK_SPEED,
    BOSS_DEATH_SPEED,
    BOSS_WALK_SPEED,
    ENEMY_SPEED,
    PLAYER_ACTION_SPEED,
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
    Animator,
    ZombieAnimSet,
)
from .config import (
    FPS,
    GRAVITY,
    GROUND_HEIGHT,
    HEIGHT,
    JUMP_FORCE,
    PLAYER_SCALE,
    WIDTH,
    EnemyKind,
    StaminaState,
)

SPRINT_FRAMES = 8 * FPS
TIRED_FRAMES = 4 * FPS
COOLDOWN_FRAMES = 8 * FPS

ENEMY_HEIGHT = 65
ENEMY_GROUND_Y = HEIGHT - GROUND_HEIGHT - ENEMY_HEIGHT
WALKER_HP = 100
SPITTER_HP = 200
SPIT_RANGE_MIN = 250.0
SPIT_RANGE_MAX = 400.0
SPITTER_WINDUP = 150

BOSS_HP = 1000


@dataclass
class Player:
    """The player character."""

    x: float = WIDTH // 2
    y: float = HEIGHT - GROUND_HEIGHT - PLAYER_IDLE.frames[0].h * PLAYER_SCALE
    dy: float = 0.0
    on_ground: bool = True
    active: bool = True
    direction: int = 1
    hp: int = 8
    invulnerable_timer: int = 0
    ammo: int = 300
    stamina_timer: int = 0
    speed: float = 2.0
    stamina: StaminaState = StaminaState.NORMAL
    shoot_anim_timer: int = 0
    reload_anim_timer: int = 0
    death_timer: int = -1
    animator: Animator = field(default_factory=lambda: Animator(PLAYER_IDLE))

    def update_animation(self, walking: bool) -> None:
        """Pick the animation for the current state and advance it."""
        loop = True
        if not self.active:
            animation = PLAYER_DEATH
            loop = False
        elif self.shoot_anim_timer > 0:
            animation = PLAYER_SHOOT
        elif self.reload_anim_timer > 0:
            animation = PLAYER_RELOAD
        elif not self.on_ground:
            animation = PLAYER_JUMP
        elif self.stamina is StaminaState.RUNNING and walking:
            animation = PLAYER_RUN
        elif walking:
            animation = PLAYER_WALK
        else:
            animation = PLAYER_IDLE
        self.animator.play(animation)

        current = self.animator.animation
        speed = (
            PLAYER_ACTION_SPEED
            if current is PLAYER_SHOOT or current is PLAYER_RELOAD
            else PLAYER_SPEED
        )
        self.animator.advance(speed, loop)

    def update_stamina(self) -> None:
        """Run one tick of the sprint, tired and cooldown cycle."""
        if not self.active or self.stamina is StaminaState.NORMAL:
            return
        self.stamina_timer -= 1
        if self.stamina_timer > 0:
            return
        if self.stamina is StaminaState.RUNNING:
            self.stamina = StaminaState.TIRED
            self.stamina_timer = TIRED_FRAMES
        elif self.stamina is StaminaState.TIRED:
            self.stamina = StaminaState.COOLDOWN
            self.stamina_timer = COOLDOWN_FRAMES
        else:
            self.stamina = StaminaState.NORMAL

    def update_speed(self) -> None:
        """Derive the movement multiplier from the remaining health."""
        if self.hp > 4:
            self.speed = 1.0 + (self.hp - 4) * 0.25
        elif self.hp > 0:
            self.speed = 1.0 - (4 - self.hp) * 0.25
        else:
            self.speed = 0.0

    def jump(self) -> None:
        """Leave the ground if standing on it."""
        if self.on_ground:
            self.dy = JUMP_FORCE
            self.on_ground = False

    def apply_physics(self) -> None:
        """Apply gravity and land on the ground under the current frame."""
        self.dy += GRAVITY
        self.y += self.dy
        ground_y = HEIGHT - GROUND_HEIGHT - self.animator.frame().h * PLAYER_SCALE
        if self.y > ground_y:
            self.y = ground_y
            self.on_ground = True
            self.dy = 0.0
        else:
            self.on_ground = False


@dataclass
class Enemy:
    """A zombie: a walker that chases or a spitter that keeps its distance."""

    kind: EnemyKind = EnemyKind.WALKER
    x: float = 0.0
    y: float = ENEMY_GROUND_Y
    dx: float = 0.0
    dy: float = 0.0
    active: bool = True
    on_ground: bool = True
    dying: bool = False
    hp: int = WALKER_HP
    hp_max: int = WALKER_HP
    attack_timer: int = 0
    hurt_timer: int = 0
    direction: int = 1
    sprite_index: int = 0
    animator: Animator = field(default_factory=lambda: Animator(ZOMBIE_SETS[0].walk))

    @property
    def anim_set(self) -> ZombieAnimSet:
        if self.kind is EnemyKind.SPITTER:
            return SPITTER
        return ZOMBIE_SETS[self.sprite_index]

    @classmethod
    def spawn(cls, camera_x: float, rng=None) -> Enemy:
        """Create a zombie just off the right edge of the screen."""
        rng = rng if rng is not None else random
        if rng.randrange(4) != 0:
            sprite_index = rng.randrange(3)
            enemy = cls(
                kind=EnemyKind.WALKER,
                hp=WALKER_HP,
                hp_max=WALKER_HP,
                sprite_index=sprite_index,
                animator=Animator(ZOMBIE_SETS[sprite_index].walk),
            )
        else:
            enemy = cls(
                kind=EnemyKind.SPITTER,
                hp=SPITTER_HP,
                hp_max=SPITTER_HP,
                sprite_index=0,
                animator=Animator(SPITTER.idle),
            )
        enemy.x = camera_x + WIDTH + rng.randrange(100)
        enemy.attack_timer = 60 + rng.randrange(120)
        return enemy

    def update_animation(self, player: Player) -> None:
        """Pick the animation for the current state and advance it."""
        anims = self.anim_set
        loop = True
        if self.dying:
            animation = anims.death
            loop = False
        elif self.hurt_timer > 0:
            animation = anims.hurt
        elif self.kind is EnemyKind.SPITTER:
            distance = abs(player.x - self.x)
            if self.attack_timer > SPITTER_WINDUP:
                animation = anims.attack
            elif SPIT_RANGE_MIN <= distance <= SPIT_RANGE_MAX:
                animation = anims.idle
            else:
                animation = anims.walk
        else:
            animation = anims.walk
        self.animator.play(animation)
        self.animator.advance(ENEMY_SPEED, loop)


@dataclass
class Boss:
    """The boss waiting at the end of the level."""

    x: float = 0.0
    y: float = HEIGHT - GROUND_HEIGHT - BOSS.walk.frames[0].h
    dx: float = -1.0
    dy: float = 0.0
    hp: int = BOSS_HP
    hp_max: int = BOSS_HP
    main_attack_timer: int = 120
    burst_timer: int = 0
    burst_shots: int = 0
    active: bool = False
    dying: bool = False
    direction: int = -1
    hurt_timer: int = 0
    animator: Animator = field(default_factory=lambda: Animator(BOSS.walk))

    def update_animation(self) -> None:
        """Pick the animation for the current state and advance it."""
        loop = True
        if self.dying:
            animation = BOSS.death
            loop = False
        elif self.burst_shots > 0:
            animation = BOSS.attack
        else:
            animation = BOSS.walk
        self.animator.play(animation)

        current = self.animator.animation
        if current is BOSS.attack:
            speed = BOSS_ATTACK_SPEED
        elif current is BOSS.death:
            speed = BOSS_DEATH_SPEED
        else:
            speed = BOSS_WALK_SPEED
        self.animator.advance(speed, loop)