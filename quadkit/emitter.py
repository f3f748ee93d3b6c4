"""Particle emitters: spawning, simulation and recycling of particles."""

from __future__ import annotations

import dataclasses
import math
import random
from dataclasses import dataclass

from quadkit.emitter_config import BatchedCurve, Color, EmitterConfig, Mesh
from quadkit.geometry import Vec2


@dataclass
class Particle:
    """State of one live particle."""

    position: Vec2
    rotation: float
    size: float
    color: Color
    index: float
    velocity: Vec2
    angular_velocity: float
    lifetime: float
    initial_size: float
    lived: float = 0.0
    progress: float = 0.0
    frame: int = 0
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)


def _random_initial_vector(
    direction: Vec2, spread: float, velocity: float, rng: random.Random
) -> Vec2:
    angle = rng.uniform(-spread / 2.0, spread / 2.0)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    rotated = Vec2(
        direction.x * cos_a - direction.y * sin_a,
        direction.x * sin_a + direction.y * cos_a,
    )
    return rotated * velocity


def _randomized(value: float, randomness: float, rng: random.Random) -> float:
    return value - value * rng.uniform(0.0, randomness)


class Emitter:
    """Spawns particles according to an EmitterConfig and advances them in time."""

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position = Vec2(0.0, 0.0)
        self.particles_spawned = 0
        self.mesh: Mesh = config.shape.mesh()
        self.blend_mode = config.blend_mode
        self.batched_size_curve: BatchedCurve | None = None
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self._particles_current_cycle = 0
        self._mesh_dirty = False
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop every particle and restart the emission cycle."""
        self.particles.clear()
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self.particles_spawned = 0
        self._particles_current_cycle = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after the config's curve has changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def update_particle_mesh(self) -> None:
        """Rebuild the particle mesh from the config on the next update."""
        self._mesh_dirty = True

    def _emit_particle(self, offset: Vec2) -> None:
        config = self.config
        offset = offset + config.emission_shape.gen_random_point(self.rng)
        size = _randomized(config.size, config.size_randomness, self.rng)
        rotation = _randomized(
            config.initial_rotation, config.initial_rotation_randomness, self.rng
        )
        position = offset if config.local_coords else self.position + offset

        particle = Particle(
            position=position,
            rotation=rotation,
            size=size,
            color=config.colors_curve.start,
            index=float(self.particles_spawned),
            velocity=_random_initial_vector(
                config.initial_direction,
                config.initial_direction_spread,
                _randomized(
                    config.initial_velocity, config.initial_velocity_randomness, self.rng
                ),
                self.rng,
            ),
            angular_velocity=_randomized(
                config.initial_angular_velocity,
                config.initial_angular_velocity_randomness,
                self.rng,
            ),
            lifetime=_randomized(config.lifetime, config.lifetime_randomness, self.rng),
            initial_size=size,
        )
        self.particles_spawned += 1
        self._particles_current_cycle += 1
        self.particles.append(particle)

    def emit(self, pos: Vec2, n: int) -> None:
        """Immediately emit n particles, ignoring the emitting and amount settings."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn_amount(self) -> int:
        config = self.config
        if config.amount <= 0:
            return 0
        gap = (config.lifetime / config.amount) * (1.0 - config.explosiveness)
        if gap < 0.001:
            return config.amount
        return int((self._time_passed - self._last_emit_time) / gap)

    def _advance(self, particle: Particle, dt: float) -> None:
        config = self.config
        particle.velocity = particle.velocity + particle.velocity * (config.linear_accel * dt)
        particle.angular_velocity += particle.angular_velocity * config.angular_accel * dt
        particle.angular_velocity *= 1.0 - config.angular_damping

        fraction = particle.lived / particle.lifetime if particle.lifetime != 0.0 else 0.0
        particle.color = config.colors_curve.at(fraction)
        particle.position = particle.position + particle.velocity * dt
        particle.rotation += particle.angular_velocity * dt

        scale = (
            self.batched_size_curve.get(fraction)
            if self.batched_size_curve is not None
            else 1.0
        )
        particle.size = particle.initial_size * scale

        if particle.lifetime != 0.0:
            particle.progress = fraction

        particle.lived += dt
        particle.velocity = particle.velocity + config.gravity * dt

        atlas = config.atlas
        if atlas is None:
            particle.uv = (0.0, 0.0, 1.0, 1.0)
            return
        if particle.lifetime != 0.0:
            particle.frame = (
                int(particle.lived / particle.lifetime * (atlas.end_index - atlas.start_index))
                + atlas.start_index
            )
        column = particle.frame % atlas.n
        row = particle.frame // atlas.n
        particle.uv = (column / atlas.n, row / atlas.m, 1.0 / atlas.n, 1.0 / atlas.m)

    def update(self, dt: float) -> None:
        """Advance the emitter by dt seconds: spawn, simulate and retire particles."""
        config = self.config
        if self._mesh_dirty:
            self.mesh = config.shape.mesh()
            self._mesh_dirty = False
        if config.blend_mode != self.blend_mode:
            self.blend_mode = config.blend_mode

        if config.emitting:
            self._time_passed += dt
            for _ in range(self._spawn_amount()):
                self._last_emit_time = self._time_passed
                if self.particles_spawned < config.amount:
                    self._emit_particle(Vec2(0.0, 0.0))
                if len(self.particles) >= config.amount:
                    break

        if config.one_shot and self._particles_current_cycle >= config.amount:
            self._time_passed = 0.0
            self._last_emit_time = 0.0
            self._particles_current_cycle = 0
            config.emitting = False

        for particle in self.particles:
            self._advance(particle, dt)

        survivors: list[Particle] = []
        for particle in self.particles:
            expired = particle.lived >= particle.lifetime or particle.lived > config.lifetime
            if not expired:
                survivors.append(particle)
            elif particle.lived != particle.lifetime:
                self.particles_spawned -= 1
        self.particles = survivors

    def step(self, pos: Vec2, dt: float) -> None:
        """Place the emitter at pos and advance it by dt."""
        self.position = pos
        self.update(dt)


class EmittersCache:
    """Many short-lived emitters sharing one config, recycled when they stop emitting."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.cached: list[Emitter] = [
            Emitter(dataclasses.replace(config, emitting=False), self.rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self.active: list[tuple[Emitter, Vec2]] = []

    def spawn(self, pos: Vec2) -> None:
        """Start a fresh emitter at pos, reusing a cached one if available."""
        if self.cached:
            emitter = self.cached.pop()
        else:
            emitter = Emitter(dataclasses.replace(self.config), self.rng)
        emitter.update_particle_mesh()
        emitter.config.emitting = True
        emitter.reset()
        self.active.append((emitter, pos))

    def step(self, dt: float) -> None:
        """Advance every active emitter; those that stopped emitting go back to the cache."""
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self.active:
            emitter.step(pos, dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self.cached.append(emitter)
        self.active = still_active