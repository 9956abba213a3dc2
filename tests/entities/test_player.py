"""
test_player.py
--------------
Unit tests for the Player record and its jump / slide commands.

Responsibilities
----------------
- Verify the starting pose on the ground line.
- Verify jump charges are spent and exhausted correctly.
- Verify sliding halves the height and keeps the feet on the ground.
"""

import pytest

from corgi_run.core.runtime.game_settings import Ground, Physics, PlayerConfig


# ===========================================================
# Initial State
# ===========================================================

def test_starts_grounded_with_full_charges(player):
    assert player.x == PlayerConfig.X
    assert player.height == 90
    assert player.y == Ground.Y - 90
    assert player.on_ground
    assert not player.is_sliding
    assert player.jumps_left == 2


def test_hitbox_is_inset(player):
    box = player.hitbox()
    assert box.left == player.x + PlayerConfig.HITBOX_INSET
    assert box.bottom == Ground.Y - PlayerConfig.HITBOX_INSET


# ===========================================================
# Jump
# ===========================================================

def test_jump_spends_a_charge(player):
    assert player.jump()
    assert player.vy == -Physics.JUMP_POWER
    assert not player.on_ground
    assert player.jumps_left == 1


def test_double_jump_then_third_is_ignored(player):
    assert player.jump()
    assert player.jump()
    assert player.jumps_left == 0

    player.vy = -300.0
    assert not player.jump()
    assert player.vy == -300.0
    assert player.jumps_left == 0


def test_cannot_jump_while_sliding(player):
    player.start_slide()
    assert not player.jump()
    assert player.jumps_left == 2
    assert player.on_ground


# ===========================================================
# Slide
# ===========================================================

def test_slide_halves_height_and_stays_on_ground(player):
    assert player.start_slide()
    assert player.is_sliding
    assert player.height == 45
    assert player.y == Ground.Y - 45


def test_end_slide_restores_height(player):
    player.start_slide()
    assert player.end_slide()
    assert not player.is_sliding
    assert player.height == 90
    assert player.y == Ground.Y - 90


@pytest.mark.parametrize("prepare", ["airborne", "sliding"])
def test_start_slide_ignored(player, prepare):
    if prepare == "airborne":
        player.jump()
    else:
        player.start_slide()
    height = player.height

    assert not player.start_slide()
    assert player.height == height


def test_end_slide_without_sliding_is_noop(player):
    assert not player.end_slide()
    assert player.height == 90
