"""Game-wide constants, state enums and user settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

WIDTH = 1280
HEIGHT = 720
FPS = 60

PLAYER_SIZE = 50
PLAYER_SCALE = 1.0
GROUND_HEIGHT = 50
GRAVITY = 0.3
JUMP_FORCE = -10.0

SHOT_SIZE = 10
ENEMY_SIZE = 20
MAX_SHOTS = 20
MAX_ENEMIES = 15
MAX_SPITS = 50
MAX_ITEMS = 10

ZOMBIE_SPEED = 1.0
BASE_SPEED = 2.0

VOLUME_STEP = 0.1


class Phase(Enum):
    """Which part of the level the game is in."""

    NORMAL = auto()
    BOSS_FIGHT = auto()


class EnemyKind(Enum):
    """The two kinds of zombie."""

    WALKER = auto()
    SPITTER = auto()


class StaminaState(Enum):
    """The player's sprint cycle."""

    NORMAL = auto()
    RUNNING = auto()
    TIRED = auto()
    COOLDOWN = auto()


class ItemKind(Enum):
    """Pickups dropped by zombies."""

    AMMO = auto()
    HEART = auto()


class Key(Enum):
    """Logical keys the game reacts to."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    C = auto()
    R = auto()
    P = auto()
    SPACE = auto()
    ESCAPE = auto()
    ENTER = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass
class Settings:
    """User-adjustable options; the volume runs from 0.0 to 1.0."""

    volume: float = 1.0

    def increase_volume(self) -> None:
        """Raise the volume one step, capped at 1.0."""
        self.volume = min(self.volume + VOLUME_STEP, 1.0)

    def decrease_volume(self) -> None:
        """Lower the volume one step, floored at 0.0."""
        self.volume = max(self.volume - VOLUME_STEP, 0.0)