"""Sprite-sheet frames, animation data and the frame-advancing animator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Frame:
    """One rectangle of a sprite sheet."""

    x: int
    y: int
    w: int
    h: int


BLANK_FRAME = Frame(0, 0, 0, 0)


@dataclass(frozen=True, eq=False)
class Animation:
    """A named sequence of frames; compared by identity."""

    name: str
    frames: tuple[Frame, ...] = ()

    def __len__(self) -> int:
        return len(self.frames)


def _anim(name: str, *rects: tuple[int, int, int, int]) -> Animation:
    return Animation(name, tuple(Frame(*rect) for rect in rects))


@dataclass
class Animator:
    """Tracks which frame of an animation is showing."""

    animation: Animation
    frame_index: int = 0
    timer: int = 0

    def play(self, animation: Animation) -> None:
        """Switch to an animation, restarting it only if it changed."""
        if animation is not self.animation:
            self.animation = animation
            self.frame_index = 0
            self.timer = 0

    def advance(self, speed: int, loop: bool) -> None:
        """Count one tick; every `speed` ticks move to the next frame."""
        self.timer += 1
        if self.timer < speed:
            return
        self.timer = 0
        count = len(self.animation)
        if count == 0:
            return
        if loop:
            self.frame_index = (self.frame_index + 1) % count
        elif self.frame_index < count - 1:
            self.frame_index += 1

    def frame(self) -> Frame:
        """The frame currently showing."""
        return self.animation.frames[self.frame_index]

    @property
    def at_last_frame(self) -> bool:
        return self.frame_index >= len(self.animation) - 1


# --- Player -----------------------------------------------------------------

PLAYER_IDLE = Animation(
    "idle", tuple(Frame(48 + i * 129 - i, 63, 41, 65) for i in range(6))
)
PLAYER_WALK = Animation(
    "walk", tuple(Frame(48 + i * 128, 190, 41, 65) for i in range(6))
)
PLAYER_RUN = Animation(
    "run", tuple(Frame(43 + i * 125, 317, 41, 65) for i in range(8))
)
# The jump sequence is nine frames long; only eight are drawn, the last is blank.
PLAYER_JUMP = Animation(
    "jump",
    tuple(Frame(53 + i * 129, 444, 41, 65) for i in range(8)) + (BLANK_FRAME,),
)
PLAYER_HURT = Animation(
    "hurt", tuple(Frame(43 + i * 129, 575, 41, 65) for i in range(2))
)
PLAYER_SHOOT = Animation(
    "shoot",
    tuple(
        Frame(21 + column * 127, 699, width, 65)
        for column, width in (
            (0, 41), (1, 50), (2, 104), (3, 104), (4, 104), (5, 104),
            (6, 41), (7, 41), (8, 41), (9, 41), (10, 41), (12, 41),
        )
    ),
)
PLAYER_RELOAD = Animation(
    "reload", tuple(Frame(43 + i * 128, 828, 41, 65) for i in range(12))
)
PLAYER_DEATH = _anim(
    "death",
    (48, 1219, 48, 65),
    (176, 1219, 52, 62),
    (304, 1219, 41, 54),
    (432, 1219, 82, 19),
)

PLAYER_SPEED = 8
PLAYER_ACTION_SPEED = 5


# --- Zombies ----------------------------------------------------------------

@dataclass(frozen=True)
class ZombieAnimSet:
    """All animations of one kind of zombie."""

    walk: Animation
    attack: Animation
    hurt: Animation
    death: Animation
    idle: Animation = field(default_factory=lambda: Animation("idle"))


ZOMBIE_SETS: tuple[ZombieAnimSet, ...] = (
    ZombieAnimSet(
        walk=_anim(
            "walk",
            (47, 62, 46, 66), (177, 61, 46, 67), (302, 61, 46, 67),
            (426, 62, 46, 65), (554, 62, 46, 67), (686, 62, 46, 67),
            (813, 63, 46, 65), (945, 63, 46, 65), (1071, 63, 46, 65),
            (1197, 62, 46, 66),
        ),
        attack=_anim(
            "attack",
            (43, 189, 49, 67), (169, 189, 49, 67), (299, 189, 49, 67),
            (430, 189, 49, 65), (559, 189, 49, 65),
        ),
        hurt=_anim(
            "hurt",
            (40, 317, 50, 67), (167, 317, 50, 67), (292, 317, 50, 67),
            (413, 317, 50, 67),
        ),
        death=_anim(
            "death",
            (50, 447, 64, 67), (180, 453, 64, 67), (302, 447, 64, 67),
            (437, 482, 64, 67), (565, 503, 64, 67),
        ),
    ),
    ZombieAnimSet(
        walk=_anim(
            "walk",
            (39, 60, 45, 68), (165, 61, 46, 67), (297, 60, 44, 68),
            (428, 60, 40, 68), (557, 60, 40, 68), (680, 60, 48, 68),
            (806, 59, 52, 69), (936, 59, 49, 69), (1065, 59, 44, 69),
            (1191, 60, 47, 68), (1320, 60, 48, 69), (1447, 60, 49, 68),
        ),
        attack=_anim(
            "attack",
            (39, 190, 50, 77), (163, 189, 50, 77), (287, 190, 50, 77),
            (423, 179, 50, 77), (549, 181, 50, 77), (685, 184, 50, 72),
            (812, 191, 51, 77), (942, 190, 50, 77), (1069, 191, 50, 77),
            (1198, 191, 50, 77),
        ),
        hurt=_anim(
            "hurt",
            (48, 318, 38, 66), (175, 317, 38, 67), (303, 318, 38, 66),
            (431, 318, 41, 67),
        ),
        death=_anim(
            "death",
            (46, 451, 80, 61), (168, 457, 80, 61), (295, 472, 80, 61),
            (410, 492, 80, 61), (536, 494, 80, 61),
        ),
    ),
    ZombieAnimSet(
        walk=_anim(
            "walk",
            (44, 63, 60, 65), (173, 64, 60, 65), (295, 64, 60, 65),
            (422, 65, 60, 65), (554, 64, 60, 65), (687, 63, 60, 65),
            (814, 64, 60, 65), (934, 65, 60, 65), (1063, 65, 60, 65),
            (1193, 64, 60, 65),
        ),
        attack=_anim(
            "attack",
            (42, 188, 56, 74), (165, 185, 56, 74), (296, 182, 56, 74),
            (432, 187, 56, 74), (560, 190, 56, 74),
        ),
        hurt=_anim(
            "hurt",
            (43, 316, 57, 70), (166, 315, 57, 70), (288, 316, 57, 70),
            (412, 316, 57, 70),
        ),
        death=_anim(
            "death",
            (36, 451, 55, 61), (161, 453, 55, 61), (279, 458, 55, 61),
            (410, 466, 55, 61), (529, 499, 55, 61),
        ),
    ),
)

SPITTER = ZombieAnimSet(
    idle=_anim(
        "idle",
        (46, 62, 35, 66), (173, 62, 37, 66), (300, 62, 37, 66),
        (428, 62, 39, 66), (554, 62, 39, 66), (682, 62, 40, 66),
    ),
    walk=_anim(
        "walk",
        (47, 191, 30, 65), (177, 191, 18, 65), (301, 191, 30, 65),
        (426, 191, 37, 65), (554, 191, 42, 64), (684, 191, 32, 64),
        (812, 191, 25, 64), (946, 191, 17, 64), (1071, 191, 26, 64),
        (1195, 191, 38, 65),
    ),
    attack=_anim("attack", (32, 319, 44, 65), (162, 322, 44, 62)),
    hurt=_anim(
        "hurt",
        (41, 450, 33, 62), (169, 456, 41, 59), (297, 454, 45, 58),
        (425, 454, 47, 58),
    ),
    death=_anim(
        "death",
        (57, 579, 37, 61), (187, 585, 34, 55), (316, 592, 31, 48),
        (416, 621, 60, 19), (541, 620, 63, 20),
    ),
)

ENEMY_SPEED = 10


# --- Boss -------------------------------------------------------------------

@dataclass(frozen=True)
class BossAnimSet:
    """The boss's animations."""

    walk: Animation
    attack: Animation
    death: Animation


BOSS = BossAnimSet(
    walk=_anim(
        "walk",
        (33, 36, 233, 402), (284, 39, 237, 402), (551, 33, 222, 408),
        (777, 37, 216, 408),
    ),
    attack=_anim(
        "attack", (29, 514, 237, 374), (295, 516, 239, 375), (558, 516, 258, 376)
    ),
    death=_anim(
        "death",
        (36, 1087, 253, 403), (319, 1096, 274, 395), (96, 1626, 300, 310),
        (607, 1210, 312, 281), (463, 1623, 492, 317),
    ),
)

BOSS_WALK_SPEED = 8
BOSS_ATTACK_SPEED = 10
BOSS_DEATH_SPEED = 18