"""Player shots, zombie spit and dropped pickups, kept in bounded pools."""

from __future__ import annotations

from dataclasses import dataclass

from .config import (
    FPS,
    GRAVITY,
    HEIGHT,
    MAX_ITEMS,
    MAX_SHOTS,
    MAX_SPITS,
    WIDTH,
    ItemKind,
)

SCREEN_MARGIN = 20
SPIT_GRAVITY = GRAVITY * 0.8
SPIT_FLIGHT_SECONDS = 1.2
ITEM_DROP_OFFSET = 20
ITEM_LIFETIME = 600


@dataclass
class Shot:
    """A bullet fired by the player."""

    x: float
    y: float
    dx: float
    dy: float
    active: bool = True


@dataclass
class Spit:
    """A gob thrown by a spitter or the boss; it falls under gravity."""

    x: float
    y: float
    dx: float
    dy: float
    active: bool = True


@dataclass
class Item:
    """A pickup lying on the ground for a limited time."""

    x: float
    y: float
    kind: ItemKind
    lifetime: int = ITEM_LIFETIME
    active: bool = True


def _prune(pool: list) -> None:
    pool[:] = [entry for entry in pool if entry.active]


def _add(pool: list, entry, capacity: int):
    _prune(pool)
    if len(pool) >= capacity:
        return None
    pool.append(entry)
    return entry


def fire_shot(shots: list[Shot], x: float, y: float, dx: float, dy: float) -> Shot | None:
    """Add a shot to the pool; returns None when the pool is full."""
    return _add(shots, Shot(x, y, dx, dy), MAX_SHOTS)


def update_shots(shots: list[Shot], camera_x: float) -> None:
    """Move every shot and drop those that left the screen."""
    for shot in shots:
        if not shot.active:
            continue
        shot.x += shot.dx
        shot.y += shot.dy
        if (
            shot.x > camera_x + WIDTH + SCREEN_MARGIN
            or shot.x < camera_x - SCREEN_MARGIN
            or shot.y < -SCREEN_MARGIN
            or shot.y > HEIGHT + SCREEN_MARGIN
        ):
            shot.active = False
    _prune(shots)


def fire_spit(
    spits: list[Spit], x: float, y: float, target_x: float, target_y: float
) -> Spit | None:
    """Throw a spit on an arc aimed at the target; None when the pool is full."""
    flight_frames = SPIT_FLIGHT_SECONDS * FPS
    dx = (target_x - x) / flight_frames
    dy = (target_y - y) / flight_frames - 0.5 * SPIT_GRAVITY * (flight_frames - 1)
    return _add(spits, Spit(x, y, dx, dy), MAX_SPITS)


def update_spits(spits: list[Spit], camera_x: float) -> None:
    """Apply gravity, move every spit and drop those that left the screen."""
    for spit in spits:
        if not spit.active:
            continue
        spit.dy += SPIT_GRAVITY
        spit.x += spit.dx
        spit.y += spit.dy
        if (
            spit.x < camera_x - SCREEN_MARGIN
            or spit.x > camera_x + WIDTH + SCREEN_MARGIN
            or spit.y > HEIGHT
        ):
            spit.active = False
    _prune(spits)


def drop_item(items: list[Item], x: float, y: float, kind: ItemKind) -> Item | None:
    """Drop a pickup just below the given point; None when the pool is full."""
    return _add(items, Item(x, y + ITEM_DROP_OFFSET, kind), MAX_ITEMS)


def update_items(items: list[Item]) -> None:
    """Age every pickup and remove the expired ones."""
    for item in items:
        if not item.active:
            continue
        item.lifetime -= 1
        if item.lifetime <= 0:
            item.active = False
    _prune(items)