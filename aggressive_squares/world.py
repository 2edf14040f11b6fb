"""The playing field: one level, its inhabitants and the rules tying them together."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto

from .animation import BOSS, ZOMBIE_SETS
from .config import (
    BASE_SPEED,
    ENEMY_SIZE,
    GRAVITY,
    MAX_ENEMIES,
    PLAYER_SIZE,
    WIDTH,
    ZOMBIE_SPEED,
    EnemyKind,
    ItemKind,
    Key,
    Phase,
    StaminaState,
)
from .entities import (
    ENEMY_GROUND_Y,
    SPIT_RANGE_MAX,
    SPIT_RANGE_MIN,
    SPRINT_FRAMES,
    Boss,
    Enemy,
    Player,
)
from .projectiles import (
    Item,
    Shot,
    Spit,
    drop_item,
    fire_shot,
    fire_spit,
    update_items,
    update_shots,
    update_spits,
)

INVULNERABLE_FRAMES = 180
SHAKE_FRAMES = 15
CONTACT_KNOCKBACK = 30
SPIT_KNOCKBACK = 20
SPIT_RADIUS = 7.0
DEATH_DELAY = 120

SHOT_SPEED = 10.0
SHOT_DAMAGE = 20
SHOOT_ANIM_FRAMES = 10
RELOAD_ANIM_FRAMES = 60
AMMO_PICKUP = 18

ENEMY_HITBOX_W = 41
ENEMY_HITBOX_H = 65
ENEMY_HURT_FRAMES = 15
SPITTER_COOLDOWN = 180

BOSS_WIDTH = 100
BOSS_HITBOX_H = 150
BOSS_MOUTH_Y = 100
BOSS_BURST = 6
BOSS_BURST_GAP = 15
BOSS_ATTACK_PAUSE = 240

SPAWN_INTERVAL = 120
BOSS_SPAWN_INTERVAL = 999


class GameEvent(Enum):
    """Things that happened during play that the front end may react to."""

    SHOT_FIRED = auto()
    OUT_OF_AMMO = auto()
    PLAYER_HURT = auto()
    ENEMY_HURT = auto()
    AMMO_COLLECTED = auto()
    HEALTH_COLLECTED = auto()
    PAUSE_REQUESTED = auto()


class Outcome(Enum):
    """How a round of play ended."""

    GAME_OVER = auto()
    VICTORY = auto()
    QUIT = auto()


@dataclass
class World:
    """The whole state of one round, advanced one frame at a time."""

    world_width: float
    rng: random.Random | None = None
    player: Player = field(default_factory=Player)
    boss: Boss = field(default_factory=Boss)
    enemies: list[Enemy] = field(default_factory=list)
    shots: list[Shot] = field(default_factory=list)
    spits: list[Spit] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    phase: Phase = Phase.NORMAL
    camera_x: float = 0.0
    draw_camera_x: float = 0.0
    shake_timer: int = 0
    frame_counter: int = 0
    spawn_counter: int = 0
    kills: int = 0
    keys: set[Key] = field(default_factory=set)
    events: list[GameEvent] = field(default_factory=list)
    outcome: Outcome | None = None

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()
        self.boss.x = self.world_width - WIDTH // 2

    # --- input --------------------------------------------------------------

    def handle_key_down(self, key: Key) -> Outcome | None:
        """React to a key being pressed."""
        self.keys.add(key)
        player = self.player

        if key is Key.P:
            self.events.append(GameEvent.PAUSE_REQUESTED)

        if key is Key.A:
            player.direction = -1
        elif key is Key.D:
            player.direction = 1

        if key is Key.W:
            player.jump()
        if key is Key.ESCAPE:
            self.outcome = Outcome.QUIT

        if (
            key is Key.C
            and player.stamina is StaminaState.NORMAL
            and self._walking
        ):
            player.stamina = StaminaState.RUNNING
            player.stamina_timer = SPRINT_FRAMES

        if key is Key.R:
            self.collect_item()
        if key is Key.SPACE:
            self.shoot()

        self._update_draw_camera()
        return self.outcome

    def handle_key_up(self, key: Key) -> None:
        """React to a key being released."""
        self.keys.discard(key)
        if key is Key.A and Key.D in self.keys:
            self.player.direction = 1
        elif key is Key.D and Key.A in self.keys:
            self.player.direction = -1
        self._update_draw_camera()

    @property
    def _walking(self) -> bool:
        return Key.A in self.keys or Key.D in self.keys

    # --- simulation ---------------------------------------------------------

    def tick(self) -> Outcome | None:
        """Advance the world by one frame; returns the outcome once decided."""
        player = self.player
        boss = self.boss
        self.frame_counter += 1

        if player.shoot_anim_timer > 0:
            player.shoot_anim_timer -= 1
        if player.reload_anim_timer > 0:
            player.reload_anim_timer -= 1

        if player.hp <= 0 and player.active:
            player.active = False
            player.death_timer = DEATH_DELAY
        if not player.active and player.death_timer > 0:
            player.death_timer -= 1
        if player.death_timer == 0:
            self.outcome = Outcome.GAME_OVER
            return self.outcome

        if boss.hp <= 0 and boss.active:
            boss.active = False
            boss.dying = True
        if boss.dying and boss.animator.frame_index >= len(BOSS.death) - 1:
            self.outcome = Outcome.VICTORY
            return self.outcome

        if player.active:
            self._move_player()

        player.update_animation(self._walking)
        player.apply_physics()
        self._update_camera()

        update_shots(self.shots, self.camera_x)
        update_spits(self.spits, self.camera_x)
        update_items(self.items)
        self.update_enemies()
        if boss.active or boss.dying:
            self.update_boss()

        interval = BOSS_SPAWN_INTERVAL if self.phase is Phase.BOSS_FIGHT else SPAWN_INTERVAL
        self.spawn_counter += 1
        if self.spawn_counter >= interval:
            self.spawn_enemy()
            self.spawn_counter = 0

        self._update_draw_camera()
        return self.outcome

    def _move_player(self) -> None:
        player = self.player
        if player.invulnerable_timer > 0:
            player.invulnerable_timer -= 1
        player.update_stamina()

        multiplier = 1.0
        if player.stamina is StaminaState.RUNNING:
            multiplier = 2.0
        elif player.stamina is StaminaState.TIRED:
            multiplier = 1.0 / 3.0

        self.apply_contact_damage()
        self.apply_spit_damage()

        left = self.world_width - WIDTH if self.phase is Phase.BOSS_FIGHT else 0
        right = self.world_width - PLAYER_SIZE
        step = BASE_SPEED * player.speed * multiplier
        if Key.A in self.keys and player.x > left:
            player.x -= step
        elif Key.D in self.keys and player.x < right:
            player.x += step

    def _update_camera(self) -> None:
        rightmost = self.world_width - WIDTH
        if self.phase is Phase.NORMAL:
            camera = self.player.x - WIDTH / 2.0
            if camera < 0:
                camera = 0.0
            if camera > rightmost:
                camera = rightmost
            self.camera_x = camera
            if self.player.x > rightmost:
                self.phase = Phase.BOSS_FIGHT
                self.boss.active = True
        else:
            self.camera_x = rightmost

    def _update_draw_camera(self) -> None:
        self.draw_camera_x = self.camera_x
        if self.shake_timer > 0:
            self.draw_camera_x += self.rng.randrange(10) - 5
            self.shake_timer -= 1

    def spawn_enemy(self) -> Enemy | None:
        """Bring a new zombie in from the right, unless the horde is full."""
        self.enemies[:] = [enemy for enemy in self.enemies if enemy.active]
        if len(self.enemies) >= MAX_ENEMIES:
            return None
        enemy = Enemy.spawn(self.camera_x, self.rng)
        self.enemies.append(enemy)
        return enemy

    def update_enemies(self) -> None:
        """Move, hurt and animate every zombie."""
        player = self.player
        for enemy in self.enemies:
            if not enemy.active:
                continue
            if enemy.dying:
                death = ZOMBIE_SETS[enemy.sprite_index].death
                if enemy.animator.frame_index >= len(death) - 1:
                    enemy.active = False
                enemy.update_animation(player)
                continue

            if enemy.hurt_timer > 0:
                enemy.hurt_timer -= 1

            if enemy.kind is EnemyKind.WALKER:
                self._walk_towards_player(enemy)
            else:
                self._keep_spitting_distance(enemy)

            self._check_enemy_hit(enemy)

            enemy.dy += GRAVITY
            enemy.y += enemy.dy
            if enemy.y > ENEMY_GROUND_Y:
                enemy.y = ENEMY_GROUND_Y
                enemy.on_ground = True
                enemy.dy = 0.0

            enemy.update_animation(player)
        self.enemies[:] = [enemy for enemy in self.enemies if enemy.active]

    def _walk_towards_player(self, enemy: Enemy) -> None:
        if enemy.x < self.player.x:
            enemy.x += ZOMBIE_SPEED
            enemy.direction = 1
        elif enemy.x > self.player.x:
            enemy.x -= ZOMBIE_SPEED
            enemy.direction = -1

    def _keep_spitting_distance(self, enemy: Enemy) -> None:
        offset = self.player.x - enemy.x
        distance = abs(offset)
        enemy.direction = 1 if offset > 0 else -1

        if distance > SPIT_RANGE_MAX:
            if offset > 0:
                enemy.x += ZOMBIE_SPEED * 0.75
            else:
                enemy.x -= ZOMBIE_SPEED
        elif distance < SPIT_RANGE_MIN:
            if offset > 0:
                enemy.x -= ZOMBIE_SPEED * 0.5
            else:
                enemy.x += ZOMBIE_SPEED
        elif enemy.attack_timer > 0:
            enemy.attack_timer -= 1
        else:
            fire_spit(self.spits, enemy.x, enemy.y, self.player.x, self.player.y)
            enemy.attack_timer = SPITTER_COOLDOWN

    def _check_enemy_hit(self, enemy: Enemy) -> None:
        for shot in self.shots:
            if not shot.active:
                continue
            if (
                enemy.x < shot.x < enemy.x + ENEMY_HITBOX_W
                and enemy.y < shot.y < enemy.y + ENEMY_HITBOX_H
            ):
                self.events.append(GameEvent.ENEMY_HURT)
                shot.active = False
                enemy.hp -= SHOT_DAMAGE
                enemy.hurt_timer = ENEMY_HURT_FRAMES
                if enemy.hp <= 0:
                    enemy.dying = True
                    self.kills += 1
                    chance = self.rng.randrange(4)
                    if chance == 0:
                        drop_item(self.items, enemy.x, enemy.y, ItemKind.AMMO)
                    elif chance == 1:
                        drop_item(self.items, enemy.x, enemy.y, ItemKind.HEART)
                return

    def update_boss(self) -> None:
        """Move the boss, run its spit bursts and apply hits it took."""
        boss = self.boss
        if not boss.active and not boss.dying:
            return

        if boss.active and not boss.dying:
            boss.direction = 1 if boss.dx > 0 else -1
            boss.x += boss.dx
            if boss.dx > 0 and boss.x + BOSS_WIDTH > self.world_width:
                boss.dx *= -1
            elif boss.dx < 0 and boss.x < self.world_width - WIDTH:
                boss.dx *= -1

            if boss.burst_shots <= 0:
                if boss.main_attack_timer > 0:
                    boss.main_attack_timer -= 1
                else:
                    boss.burst_shots = BOSS_BURST
                    boss.burst_timer = 0
                    boss.main_attack_timer = BOSS_ATTACK_PAUSE
            if boss.burst_shots > 0:
                if boss.burst_timer > 0:
                    boss.burst_timer -= 1
                else:
                    fire_spit(
                        self.spits,
                        boss.x + BOSS_WIDTH / 2,
                        boss.y + BOSS_MOUTH_Y,
                        self.player.x,
                        self.player.y,
                    )
                    boss.burst_shots -= 1
                    boss.burst_timer = BOSS_BURST_GAP

            for shot in self.shots:
                if (
                    shot.active
                    and boss.x < shot.x < boss.x + BOSS_WIDTH
                    and boss.y < shot.y < boss.y + BOSS_HITBOX_H
                ):
                    shot.active = False
                    boss.hp -= SHOT_DAMAGE

            if boss.hp <= 0:
                boss.dying = True
                boss.active = False

        boss.update_animation()

    # --- damage -------------------------------------------------------------

    def _hurt_player(self) -> None:
        self.player.hp -= 1
        self.player.invulnerable_timer = INVULNERABLE_FRAMES

    def apply_contact_damage(self) -> bool:
        """Hurt the player if a zombie touches them; returns whether it did."""
        player = self.player
        if player.invulnerable_timer > 0:
            return False
        for enemy in self.enemies:
            if not enemy.active:
                continue
            if (
                player.x < enemy.x + ENEMY_SIZE
                and player.x + PLAYER_SIZE > enemy.x
                and player.y < enemy.y + ENEMY_SIZE
                and player.y + PLAYER_SIZE > enemy.y
            ):
                self._hurt_player()
                self.shake_timer = SHAKE_FRAMES
                self.events.append(GameEvent.PLAYER_HURT)
                if enemy.x > player.x:
                    player.x -= CONTACT_KNOCKBACK
                else:
                    player.x += CONTACT_KNOCKBACK
                player.update_speed()
                return True
        return False

    def apply_spit_damage(self) -> bool:
        """Hurt the player if a spit hits them; returns whether it did."""
        player = self.player
        if player.invulnerable_timer > 0:
            return False
        radius = PLAYER_SIZE / 2.0
        for spit in self.spits:
            if not spit.active:
                continue
            distance = math.hypot(player.x + radius - spit.x, player.y + radius - spit.y)
            if distance < radius + SPIT_RADIUS:
                spit.active = False
                self._hurt_player()
                if spit.dx > 0:
                    player.x += SPIT_KNOCKBACK
                else:
                    player.x -= SPIT_KNOCKBACK
                player.update_speed()
                return True
        return False

    # --- actions ------------------------------------------------------------

    def collect_item(self) -> Item | None:
        """Pick up the first item within reach, if any."""
        player = self.player
        for item in self.items:
            if not item.active or abs(player.x - item.x) >= PLAYER_SIZE:
                continue
            item.active = False
            if item.kind is ItemKind.AMMO:
                player.ammo += AMMO_PICKUP
                player.reload_anim_timer = RELOAD_ANIM_FRAMES
                player.animator.frame_index = 0
                self.events.append(GameEvent.AMMO_COLLECTED)
            else:
                player.hp += 1
                self.events.append(GameEvent.HEALTH_COLLECTED)
            self.items[:] = [entry for entry in self.items if entry.active]
            return item
        return None

    def shoot(self) -> Shot | None:
        """Fire towards the held direction keys, or straight ahead."""
        player = self.player
        if player.ammo <= 0:
            self.events.append(GameEvent.OUT_OF_AMMO)
            return None
        player.ammo -= 1
        player.shoot_anim_timer = SHOOT_ANIM_FRAMES
        player.animator.frame_index = 0

        dir_x = (Key.D in self.keys) - (Key.A in self.keys)
        dir_y = (Key.S in self.keys) - (Key.W in self.keys)
        if dir_x == 0 and dir_y == 0:
            dir_x = player.direction

        magnitude = math.hypot(dir_x, dir_y)
        vel_x = dir_x / magnitude * SHOT_SPEED if magnitude > 0 else 0.0
        vel_y = dir_y / magnitude * SHOT_SPEED if magnitude > 0 else 0.0

        shot = fire_shot(
            self.shots,
            player.x + PLAYER_SIZE / 2.0,
            player.y + PLAYER_SIZE / 2.0,
            vel_x,
            vel_y,
        )
        self.events.append(GameEvent.SHOT_FIRED)
        return shot