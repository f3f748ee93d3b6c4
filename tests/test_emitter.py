import random

from quadkit.emitter import Emitter, EmittersCache
from quadkit.emitter_config import (
    AtlasConfig,
    CircleShape,
    Color,
    ColorCurve,
    Curve,
    EmitterConfig,
)
from quadkit.geometry import Vec2


def make(**kwargs):
    return Emitter(EmitterConfig(**kwargs), random.Random(1))


def test_explosive_emitter_spawns_whole_amount():
    emitter = make(explosiveness=1.0, amount=6)
    emitter.update(0.01)
    assert len(emitter.particles) == 6
    assert emitter.particles_spawned == 6


def test_gradual_emission_spawns_fewer_than_amount():
    emitter = make(amount=8, lifetime=1.0)
    emitter.update(0.2)
    assert 0 < len(emitter.particles) < 8


def test_one_shot_stops_emitting():
    emitter = make(explosiveness=1.0, amount=5, one_shot=True)
    emitter.update(0.01)
    assert emitter.config.emitting is False
    assert len(emitter.particles) == 5


def test_not_emitting_spawns_nothing():
    emitter = make(emitting=False)
    emitter.update(0.5)
    assert emitter.particles == []


def test_particles_expire_and_respawn():
    emitter = make(explosiveness=1.0, amount=3, lifetime=1.0)
    emitter.update(0.5)
    assert len(emitter.particles) == 3
    emitter.update(0.6)
    assert emitter.particles == []
    assert emitter.particles_spawned == 0
    emitter.update(0.1)
    assert len(emitter.particles) == 3


def test_local_coords_ignore_emitter_position():
    emitter = make(explosiveness=1.0, amount=1, initial_velocity=0.0, local_coords=True)
    emitter.step(Vec2(100.0, 100.0), 0.01)
    assert emitter.particles[0].position == Vec2(0.0, 0.0)


def test_world_coords_follow_emitter_position():
    emitter = make(explosiveness=1.0, amount=1, initial_velocity=0.0)
    emitter.step(Vec2(100.0, 50.0), 0.01)
    assert emitter.particles[0].position == Vec2(100.0, 50.0)


def test_particles_move_along_initial_direction():
    emitter = make(explosiveness=1.0, amount=2)
    emitter.update(0.1)
    for particle in emitter.particles:
        assert particle.position.y < 0.0
        assert abs(particle.position.x) < 1e-9


def test_emit_ignores_amount_and_counts_twice():
    emitter = make(emitting=False, amount=1, initial_velocity=0.0)
    emitter.emit(Vec2(5.0, 5.0), 3)
    assert len(emitter.particles) == 3
    assert emitter.particles_spawned == 6
    assert all(p.position == Vec2(5.0, 5.0) for p in emitter.particles)


def test_reset_clears_particles():
    emitter = make(explosiveness=1.0, amount=4)
    emitter.update(0.1)
    emitter.reset()
    assert emitter.particles == []
    assert emitter.particles_spawned == 0


def test_atlas_sets_uv_cell_size():
    emitter = make(explosiveness=1.0, amount=2, atlas=AtlasConfig.from_range(4, 2))
    emitter.update(0.1)
    for particle in emitter.particles:
        assert particle.uv[2:] == (1.0 / 4, 1.0 / 2)
        assert 0 <= particle.frame < 8


def test_no_atlas_uses_whole_texture():
    emitter = make(explosiveness=1.0, amount=2)
    emitter.update(0.1)
    assert all(p.uv == (0.0, 0.0, 1.0, 1.0) for p in emitter.particles)


def test_new_particle_gets_start_color():
    start = Color(1.0, 0.0, 0.0, 1.0)
    emitter = make(explosiveness=1.0, amount=1, colors_curve=ColorCurve(start=start))
    emitter.update(0.1)
    assert emitter.particles[0].color == start


def test_gravity_changes_velocity():
    emitter = make(explosiveness=1.0, amount=1, initial_velocity=0.0, gravity=Vec2(0.0, 10.0))
    emitter.update(0.5)
    assert emitter.particles[0].velocity.y > 0.0


def test_update_particle_mesh_rebuilds_from_config():
    emitter = make()
    emitter.config.shape = CircleShape(4)
    emitter.update_particle_mesh()
    emitter.update(0.01)
    assert emitter.mesh == CircleShape(4).mesh()


def test_rebuild_size_curve_follows_config():
    curve = Curve(points=[(0.0, 0.5), (1.0, 0.5)])
    emitter = make()
    assert emitter.batched_size_curve is None
    emitter.config.size_curve = curve
    emitter.rebuild_size_curve()
    assert emitter.batched_size_curve == curve.batch()


def test_size_curve_scales_particles():
    curve = Curve(points=[(0.0, 0.5), (1.0, 0.5)])
    emitter = make(explosiveness=1.0, amount=1, size=10.0, size_curve=curve)
    emitter.update(0.1)
    particle = emitter.particles[0]
    assert abs(particle.size - particle.initial_size * 0.5) < 1e-9


def test_cache_recycles_one_shot_emitters():
    cache = EmittersCache(EmitterConfig(one_shot=True, explosiveness=1.0, amount=3), random.Random(2))
    cache.spawn(Vec2(1.0, 1.0))
    assert len(cache.active) == 1
    assert len(cache.cached) == EmittersCache.CACHE_DEFAULT_SIZE - 1
    cache.step(0.01)
    assert cache.active == []
    assert len(cache.cached) == EmittersCache.CACHE_DEFAULT_SIZE


def test_cache_grows_beyond_default_size():
    cache = EmittersCache(EmitterConfig(), random.Random(3))
    for _ in range(EmittersCache.CACHE_DEFAULT_SIZE + 1):
        cache.spawn(Vec2(0.0, 0.0))
    assert len(cache.active) == EmittersCache.CACHE_DEFAULT_SIZE + 1
    assert cache.cached == []