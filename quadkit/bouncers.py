"""Sprites bouncing around the screen, as in a sprite-count benchmark."""

from __future__ import annotations

import random
from dataclasses import dataclass

from quadkit.emitter_config import Color
from quadkit.geometry import Vec2


@dataclass
class Bouncer:
    """A sprite moving at constant speed and reflecting off screen edges."""

    pos: Vec2
    speed: Vec2
    color: Color

    def step(
        self,
        screen_width: float,
        screen_height: float,
        sprite_width: float,
        sprite_height: float,
    ) -> None:
        """Move one frame and bounce when the sprite's centre leaves the screen."""
        self.pos = self.pos + self.speed
        centre_x = self.pos.x + sprite_width / 2.0
        centre_y = self.pos.y + sprite_height / 2.0
        if centre_x > screen_width or centre_x < 0.0:
            self.speed = Vec2(-self.speed.x, self.speed.y)
        if centre_y > screen_height or centre_y < 0.0:
            self.speed = Vec2(self.speed.x, -self.speed.y)


def spawn_burst(
    pos: Vec2, rng: random.Random | None = None, count: int = 100
) -> list[Bouncer]:
    """Create count bouncers at pos with random speeds and pastel colors."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    return [
        Bouncer(
            pos=pos,
            speed=Vec2(rng.uniform(-250.0, 250.0) / 60.0, rng.uniform(-250.0, 250.0) / 60.0),
            color=Color(
                rng.randrange(50, 240) / 255.0,
                rng.randrange(80, 240) / 255.0,
                rng.randrange(100, 240) / 255.0,
                1.0,
            ),
        )
        for _ in range(count)
    ]