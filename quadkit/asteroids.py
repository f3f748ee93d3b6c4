"""Asteroids game logic: a ship, its bullets and splitting rocks on a wrapping screen."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from quadkit.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SPEED = 5.0
BULLET_SPEED = 7.0
BULLET_LIFETIME = 1.5
SHOT_COOLDOWN = 0.5
STEER_DEGREES = 5.0
ASTEROID_COUNT = 10


def _heading(rot_degrees: float) -> Vec2:
    rotation = math.radians(rot_degrees)
    return Vec2(math.sin(rotation), -math.cos(rotation))


@dataclass
class Ship:
    """The player's ship; rot is in degrees, zero pointing up."""

    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = field(default_factory=Vec2)

    def vertices(self) -> tuple[Vec2, Vec2, Vec2]:
        """Nose, left and right corners of the ship's triangle."""
        rotation = math.radians(self.rot)
        sin, cos = math.sin(rotation), math.cos(rotation)
        x, y = self.pos.x, self.pos.y
        half_h = SHIP_HEIGHT / 2.0
        half_b = SHIP_BASE / 2.0
        nose = Vec2(x + sin * half_h, y - cos * half_h)
        left = Vec2(x - cos * half_b - sin * half_h, y - sin * half_b + cos * half_h)
        right = Vec2(x + cos * half_b - sin * half_h, y + sin * half_b + cos * half_h)
        return nose, left, right


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


def wrap_around(v: Vec2, width: float, height: float) -> Vec2:
    """Bring a point that left the screen back in on the opposite edge."""
    x, y = v.x, v.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


class AsteroidsGame:
    """One game of asteroids on a width x height screen."""

    def __init__(
        self, width: float = 800.0, height: float = 600.0, rng: random.Random | None = None
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.ship = Ship(self._center())
        self.bullets: list[Bullet] = []
        self.asteroids: list[Asteroid] = []
        self.last_shot = 0.0
        self.gameover = False

    @property
    def won(self) -> bool:
        """True once the game is over with every asteroid destroyed."""
        return self.gameover and not self.asteroids

    def _center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    def _random_direction(self) -> Vec2:
        while True:
            v = Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0))
            if v.length() > 0.0:
                return v.normalize()

    def reset(self) -> None:
        """Start a new round with a fresh ship and a ring of asteroids."""
        self.ship = Ship(self._center())
        self.bullets = []
        self.gameover = False
        smaller = min(self.width, self.height)
        center = self._center()
        self.asteroids = [
            Asteroid(
                pos=center + self._random_direction() * smaller / 2.0,
                vel=Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0)),
                rot=0.0,
                rot_speed=self.rng.uniform(-2.0, 2.0),
                size=smaller / 10.0,
                sides=self.rng.randrange(3, 8),
            )
            for _ in range(ASTEROID_COUNT)
        ]

    def _fragment(self, asteroid: Asteroid, direction: Vec2) -> Asteroid:
        return Asteroid(
            pos=asteroid.pos,
            vel=direction.normalize() * self.rng.uniform(1.0, 3.0),
            rot=self.rng.uniform(0.0, 360.0),
            rot_speed=self.rng.uniform(-2.0, 2.0),
            size=asteroid.size * 0.8,
            sides=asteroid.sides - 1,
        )

    def update(
        self, frame_t: float, thrust: bool, left: bool, right: bool, shoot: bool
    ) -> None:
        """Advance one frame at time frame_t with the given controls held."""
        if self.gameover:
            return
        ship = self.ship
        heading = _heading(ship.rot)

        acc = -ship.vel / 100.0
        if thrust:
            acc = heading / 3.0

        if shoot and frame_t - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=frame_t,
                )
            )
            self.last_shot = frame_t

        if right:
            ship.rot += STEER_DEGREES
        elif left:
            ship.rot -= STEER_DEGREES

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > frame_t]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.gameover = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.append(
                            self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x))
                        )
                        fragments.append(
                            self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x))
                        )
                    break

        self.bullets = [
            b
            for b in self.bullets
            if b.shot_at + BULLET_LIFETIME > frame_t and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided] + fragments

        if not self.asteroids:
            self.gameover = True