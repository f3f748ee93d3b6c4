import math
import random

from quadkit.emitter import Emitter
from quadkit.emitter_config import AtlasConfig, BlendMode
from quadkit.geometry import Vec2
from quadkit.presets import explosion, fire, fountain, smoke


def test_explosion_is_idle_one_shot():
    config = explosion()
    assert config.one_shot is True
    assert config.emitting is False
    assert config.amount == 30
    assert config.initial_direction_spread == 2.0 * math.pi
    assert config.gravity == Vec2(0.0, -1000.0)
    assert config.atlas == AtlasConfig(4, 4, 8, 16)
    assert config.blend_mode is BlendMode.ADDITIVE


def test_explosion_emitter_waits_for_trigger():
    emitter = Emitter(explosion(), random.Random(0))
    emitter.update(0.1)
    assert emitter.particles == []
    emitter.config.emitting = True
    emitter.update(0.01)
    assert len(emitter.particles) == 30
    assert emitter.config.emitting is False


def test_smoke_uses_first_half_of_atlas():
    config = smoke()
    assert config.atlas == AtlasConfig(4, 4, 0, 8)
    assert config.amount == 20
    assert config.blend_mode is BlendMode.ALPHA


def test_fire_settings():
    config = fire()
    assert config.initial_velocity == 300.0
    assert config.size == 20.0
    assert config.atlas == AtlasConfig(4, 4, 8, 16)
    assert config.emitting is True


def test_fountain_size_curve_starts_at_half():
    config = fountain()
    batched = config.size_curve.batch()
    assert batched.points[0] == 0.5
    assert config.initial_velocity == -50.0


def test_fountain_particles_move_downwards():
    emitter = Emitter(fountain(), random.Random(0))
    for _ in range(5):
        emitter.update(0.05)
    assert emitter.particles
    assert all(p.position.y > 0.0 for p in emitter.particles)