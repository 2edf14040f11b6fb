import pytest

from aggressive_squares.config import HEIGHT, MAX_ITEMS, MAX_SHOTS, MAX_SPITS, WIDTH, ItemKind
from aggressive_squares.projectiles import (
    ITEM_DROP_OFFSET,
    ITEM_LIFETIME,
    drop_item,
    fire_shot,
    fire_spit,
    update_items,
    update_shots,
    update_spits,
)


def test_fire_shot_adds_shot():
    shots = []
    shot = fire_shot(shots, 10.0, 20.0, 3.0, -4.0)
    assert shots == [shot]
    assert (shot.x, shot.y, shot.dx, shot.dy, shot.active) == (10.0, 20.0, 3.0, -4.0, True)


def test_shot_pool_is_bounded():
    shots = []
    for _ in range(MAX_SHOTS):
        assert fire_shot(shots, 0, 0, 1, 0) is not None
    assert fire_shot(shots, 0, 0, 1, 0) is None
    assert len(shots) == MAX_SHOTS


def test_inactive_shot_frees_slot():
    shots = []
    for _ in range(MAX_SHOTS):
        fire_shot(shots, 0, 0, 1, 0)
    shots[3].active = False
    new = fire_shot(shots, 5, 5, 1, 0)
    assert new in shots
    assert len(shots) == MAX_SHOTS
    assert all(s.active for s in shots)


def test_update_shots_moves():
    shots = []
    shot = fire_shot(shots, 100.0, 100.0, 10.0, -2.0)
    update_shots(shots, 0.0)
    assert shot.x == 100.0 + 10.0
    assert shot.y == 100.0 - 2.0
    assert shots == [shot]


@pytest.mark.parametrize(
    "x, y, dx, dy",
    [
        (WIDTH + 15, 100, 10, 0),
        (-15, 100, -10, 0),
        (100, -15, 0, -10),
        (100, HEIGHT + 15, 0, 10),
    ],
)
def test_update_shots_removes_offscreen(x, y, dx, dy):
    shots = []
    fire_shot(shots, x, y, dx, dy)
    update_shots(shots, 0.0)
    assert shots == []


def test_update_shots_respects_camera():
    shots = []
    fire_shot(shots, 1000 + WIDTH, 100, 1, 0)
    update_shots(shots, 1000.0)
    assert len(shots) == 1


def test_spit_arcs_upward_on_level_target():
    spits = []
    spit = fire_spit(spits, 500.0, 400.0, 200.0, 400.0)
    assert spit.dy < 0
    assert spit.dx < 0


def test_spit_reaches_target_horizontally():
    spits = []
    spit = fire_spit(spits, 300.0, 300.0, 600.0, 300.0)
    for _ in range(72):
        update_spits(spits, 0.0)
    assert spit.x == pytest.approx(600.0, abs=1e-3)


def test_spit_falls_below_screen_is_removed():
    spits = []
    fire_spit(spits, 300.0, HEIGHT - 1, 300.0, HEIGHT - 1)
    for _ in range(500):
        update_spits(spits, 0.0)
    assert spits == []


def test_spit_pool_bounded():
    spits = []
    for _ in range(MAX_SPITS):
        fire_spit(spits, 0, 0, 10, 0)
    assert fire_spit(spits, 0, 0, 10, 0) is None
    assert len(spits) == MAX_SPITS


def test_drop_item_below_point():
    items = []
    item = drop_item(items, 40.0, 100.0, ItemKind.HEART)
    assert item.y == 100.0 + ITEM_DROP_OFFSET
    assert item.x == 40.0
    assert item.kind is ItemKind.HEART
    assert item.lifetime == 600


def test_item_pool_bounded():
    items = []
    for _ in range(MAX_ITEMS):
        drop_item(items, 0, 0, ItemKind.AMMO)
    assert drop_item(items, 0, 0, ItemKind.AMMO) is None
    assert len(items) == MAX_ITEMS


def test_items_expire():
    items = []
    item = drop_item(items, 0, 0, ItemKind.AMMO)
    for _ in range(ITEM_LIFETIME - 1):
        update_items(items)
    assert items == [item]
    assert item.lifetime == 1
    update_items(items)
    assert items == []
    assert item.active is False