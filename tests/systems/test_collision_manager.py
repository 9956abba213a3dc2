"""
test_collision_manager.py
-------------------------
Unit tests for hitbox contact and the heart / hazard rules.
"""

import pytest

from corgi_run.audio.audio_port import Cue
from corgi_run.entities.entity_types import ObstacleKind
from corgi_run.entities.obstacle import Obstacle
from corgi_run.systems.collision.collision_manager import CollisionManager, CollisionResult


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def collisions(audio):
    return CollisionManager(audio)


# ===========================================================
# Contact
# ===========================================================

def test_far_obstacle_misses(collisions, player, run_state, audio):
    log = Obstacle.from_kind(ObstacleKind.LOG_HORIZONTAL, x=600)
    assert collisions.resolve(player, log, run_state) is CollisionResult.MISS
    assert run_state.lives == 3
    assert audio.cues == []


def test_hitbox_inset_forgives_edge_contact(collisions, player):
    # Player rect spans x 150..260, hitbox 160..250.
    grazing = Obstacle(ObstacleKind.LOG_VERTICAL, 255, 300, 50, 40)
    touching = Obstacle(ObstacleKind.LOG_VERTICAL, 250, 300, 50, 40)

    assert not collisions.check(player, grazing)
    assert collisions.check(player, touching)


def test_sliding_player_passes_under_bird(collisions, player):
    bird = Obstacle.from_kind(ObstacleKind.BIRD, x=player.x)
    assert collisions.check(player, bird)

    player.start_slide()
    assert not collisions.check(player, bird)


# ===========================================================
# Rules
# ===========================================================

def test_hazard_costs_a_life(collisions, player, run_state, audio, covering_obstacle):
    result = collisions.resolve(player, covering_obstacle(player), run_state)

    assert result is CollisionResult.HAZARD
    assert run_state.lives == 2
    assert audio.cues == [Cue.HIT]


def test_last_life_is_fatal(collisions, player, run_state, covering_obstacle):
    run_state.lives = 1
    result = collisions.resolve(player, covering_obstacle(player), run_state)

    assert result is CollisionResult.FATAL
    assert run_state.lives == 0
    assert run_state.is_over


def test_heart_restores_a_life(collisions, player, run_state, audio, covering_obstacle):
    run_state.lives = 2
    heart = covering_obstacle(player, ObstacleKind.HEART)

    assert collisions.resolve(player, heart, run_state) is CollisionResult.PICKUP
    assert run_state.lives == 3
    assert audio.cues == [Cue.HEART]


def test_heart_at_cap_keeps_lives_but_plays_cue(collisions, player, run_state, audio,
                                                 covering_obstacle):
    heart = covering_obstacle(player, ObstacleKind.HEART)

    assert collisions.resolve(player, heart, run_state) is CollisionResult.PICKUP
    assert run_state.lives == 3
    assert audio.cues == [Cue.HEART]
