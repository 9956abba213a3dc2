"""
test_particle_manager.py
------------------------
Unit tests for the dust emitter and particle motion.

Responsibilities
----------------
- Verify emission cadence while running on the ground.
- Verify no emission while airborne or sliding.
- Verify particle motion, fading and expiry.
"""

import pytest

from corgi_run.core.runtime.game_settings import Dust, Ground
from corgi_run.entities.particle import Particle
from corgi_run.systems.particle_manager import DustEmitter


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def emitter(rng):
    return DustEmitter(rng)


# ===========================================================
# Emission
# ===========================================================

def test_emits_on_cadence_while_running(emitter, player):
    counts = []
    for _ in range(10):
        emitter.update(0.025, player, 260)
        counts.append(len(emitter))

    assert counts == sorted(counts)
    assert counts[0] == 0
    assert counts[-1] == 5


def test_timer_zeroed_after_emission(emitter, player):
    emitter.update(0.1, player, 260)
    assert len(emitter) == 1
    assert emitter.timer == 0.0


@pytest.mark.parametrize("pose", ["airborne", "sliding"])
def test_no_emission_off_ground_or_sliding(emitter, player, pose):
    if pose == "airborne":
        player.jump()
    else:
        player.start_slide()

    for _ in range(10):
        emitter.update(0.05, player, 260)
    assert len(emitter) == 0


def test_emitted_particle_properties(emitter, player):
    p = emitter.emit(player, 260)
    assert p.x == player.x + Dust.OFFSET_X
    assert p.y == Ground.Y - Dust.OFFSET_Y
    assert p.vx == pytest.approx(-260 * Dust.SPEED_FACTOR)
    assert Dust.VY_MIN <= p.vy < Dust.VY_MAX
    assert Dust.RADIUS_MIN <= p.radius < Dust.RADIUS_MAX
    assert p.alpha == Dust.START_ALPHA


def test_reset_clears_particles(emitter, player):
    emitter.emit(player, 260)
    emitter.timer = 0.03
    emitter.reset()
    assert len(emitter) == 0
    assert emitter.timer == 0.0


# ===========================================================
# Particle Motion
# ===========================================================

def test_particle_moves_falls_and_fades():
    p = Particle(0.0, 0.0, 10.0, -20.0, radius=3)

    assert p.update(0.5)
    assert p.x == pytest.approx(5.0)
    assert p.y == pytest.approx(-10.0)
    assert p.vy == pytest.approx(-20 + 110)
    assert p.alpha == pytest.approx(0.15)


def test_faded_particles_are_removed(emitter, player):
    player.jump()
    emitter.particles.append(Particle(0, 0, 0, 0, radius=2, alpha=0.01))
    emitter.update(0.1, player, 260)
    assert len(emitter) == 0
