"""Keyboard and wheel driven 2D camera state with smoothed rotation."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from quadkit.geometry import Vec2

_FULL_TURN = 360.0
_STEP = 0.1


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest angular distance in degrees from a0 to a1."""
    da = math.fmod(a1 - a0, _FULL_TURN)
    return math.fmod(2.0 * da, _FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate between angles along the shortest arc."""
    return a0 + short_angle_dist(a0, a1) * t


class Key(enum.Enum):
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass
class CameraState:
    """Camera target, offset, zoom and rotation (degrees) driven by input."""

    target: Vec2 = field(default_factory=Vec2)
    offset: Vec2 = field(default_factory=Vec2)
    zoom: float = 1.0
    rotation: float = 0.0
    smooth_rotation: float = 0.0

    def apply_keys(self, keys: Iterable[Key]) -> None:
        """Pan the target with WASD and the offset with the arrow keys."""
        held = set(keys)
        tx, ty = self.target
        ox, oy = self.offset
        if Key.W in held:
            ty -= _STEP
        if Key.S in held:
            ty += _STEP
        if Key.A in held:
            tx += _STEP
        if Key.D in held:
            tx -= _STEP
        if Key.LEFT in held:
            ox -= _STEP
        if Key.RIGHT in held:
            ox += _STEP
        if Key.UP in held:
            oy += _STEP
        if Key.DOWN in held:
            oy -= _STEP
        self.target = Vec2(tx, ty)
        self.offset = Vec2(ox, oy)

    def apply_wheel(self, y: float, zoom_modifier: bool) -> None:
        """Zoom with the modifier held, otherwise rotate by ten degrees per notch."""
        if y == 0.0:
            return
        if zoom_modifier:
            self.zoom *= 1.1**y
            return
        self.rotation += 10.0 * y
        if self.rotation >= _FULL_TURN:
            self.rotation -= _FULL_TURN
        elif self.rotation < 0.0:
            self.rotation += _FULL_TURN

    def smooth(self) -> float:
        """Move the smoothed rotation a tenth of the way towards the rotation."""
        self.smooth_rotation = angle_lerp(self.smooth_rotation, self.rotation, 0.1)
        return self.smooth_rotation