"""Configuration types for particle emitters: curves, shapes, colors and atlases."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Any, Union

from quadkit.geometry import Vec2, polar_to_cartesian


class Interpolation(enum.Enum):
    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass
class BatchedCurve:
    """A curve sampled at fixed steps, ready for fast lookups."""

    points: list[float]

    def get(self, t: float) -> float:
        """Value of the curve at t, interpolating between neighbouring samples."""
        if not self.points:
            raise ValueError("batched curve has no points")
        count = len(self.points)
        t_scaled = t * count
        previous_ix = min(max(0, int(t_scaled)), count - 1)
        next_ix = min(previous_ix + 1, count - 1)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A curve through key points (x, y), sampled at 1/resolution steps of x."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("bezier interpolation is not supported")
        if self.resolution <= 0:
            raise ValueError("curve resolution must be positive")

        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in pairwise(self.points):
            while x <= end_x:
                t = (x - start_x) / (end_x - start_x)
                samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(samples)


@dataclass(frozen=True)
class Color:
    """An RGBA color with float channels in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __mul__(self, scalar: float) -> Color:
        return Color(self.r * scalar, self.g * scalar, self.b * scalar, self.a * scalar)

    __rmul__ = __mul__

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class ColorCurve:
    """Colors a particle passes through over its lifetime."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def at(self, t: float) -> Color:
        """Color at lifetime fraction t."""
        if t < 0.5:
            local = t * 2.0
            return self.start * (1.0 - local) + self.mid * local
        local = (t - 0.5) * 2.0
        return self.mid * (1.0 - local) + self.end * local


@dataclass(frozen=True)
class PointEmission:
    """Particles spawn exactly at the emitter position."""

    def gen_random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class RectEmission:
    """Particles spawn inside a rectangle centred on the emitter."""

    width: float
    height: float

    def gen_random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereEmission:
    """Particles spawn uniformly inside a disc centred on the emitter."""

    radius: float

    def gen_random_point(self, rng: random.Random) -> Vec2:
        rho = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return polar_to_cartesian(rho, phi)


EmissionShape = Union[PointEmission, RectEmission, SphereEmission]

Mesh = tuple[list[float], list[int]]

_VERTEX_WHITE = [1.0, 1.0, 1.0, 1.0]


@dataclass(frozen=True)
class RectangleShape:
    """A quad particle; vertices are position(3), uv(2), color(4)."""

    aspect_ratio: float = 1.0

    def mesh(self) -> Mesh:
        a = self.aspect_ratio
        corners = [(-a, -1.0, 0.0, 0.0), (a, -1.0, 1.0, 0.0), (a, 1.0, 1.0, 1.0), (-a, 1.0, 0.0, 1.0)]
        vertices: list[float] = []
        for x, y, u, v in corners:
            vertices.extend([x, y, 0.0, u, v, *_VERTEX_WHITE])
        return vertices, [0, 1, 2, 0, 2, 3]


@dataclass(frozen=True)
class CircleShape:
    """A triangle-fan disc particle with the given number of subdivisions."""

    subdivisions: int

    def mesh(self) -> Mesh:
        if self.subdivisions <= 0:
            raise ValueError("circle needs at least one subdivision")
        vertices: list[float] = [0.0, 0.0, 0.0, 0.0, 0.0, *_VERTEX_WHITE]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend([rx, ry, 0.0, rx, ry, *_VERTEX_WHITE])
            if i != self.subdivisions:
                indices.extend([0, i + 1, i + 2])
        return vertices, indices


@dataclass
class CustomMeshShape:
    """A user-supplied particle mesh."""

    vertices: list[float]
    indices: list[int]

    def mesh(self) -> Mesh:
        return list(self.vertices), list(self.indices)


ParticleShape = Union[RectangleShape, CircleShape, CustomMeshShape]


class BlendMode(enum.Enum):
    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite sheet of n columns and m rows, animating frames start_index..end_index."""

    n: int
    m: int
    start_index: int
    end_index: int

    @staticmethod
    def from_range(n: int, m: int, start: int | None = None, stop: int | None = None) -> AtlasConfig:
        """Build from a half-open frame range; open ends cover the whole sheet."""
        start_index = 0 if start is None else start
        end_index = n * m if stop is None else stop
        return AtlasConfig(n, m, start_index, end_index)


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader sources for particles."""

    vertex: str
    fragment: str


@dataclass(frozen=True)
class PostProcessing:
    """Marker asking for particles to be rendered through an offscreen pass."""


@dataclass
class EmitterConfig:
    """All the knobs of a particle emitter."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointEmission)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=lambda: RectangleShape(1.0))
    emitting: bool = True
    initial_direction: Vec2 = field(default_factory=lambda: Vec2(0.0, -1.0))
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    texture: Any = None
    atlas: AtlasConfig | None = None
    material: ParticleMaterial | None = None
    post_processing: PostProcessing | None = None