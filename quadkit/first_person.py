"""Mouse-look first person camera."""

from __future__ import annotations

import math

from quadkit.geometry import Vec2, Vec3

MOVE_SPEED = 0.1
LOOK_SPEED = 0.1
PITCH_LIMIT = 1.5
WORLD_UP = Vec3(0.0, 1.0, 0.0)


def front_vector(yaw: float, pitch: float) -> Vec3:
    """Unit view direction for yaw and pitch in radians."""
    return Vec3(
        math.cos(yaw) * math.cos(pitch),
        math.sin(pitch),
        math.sin(yaw) * math.cos(pitch),
    ).normalize()


class FirstPersonCamera:
    """Camera position and orientation driven by mouse movement and arrow keys."""

    def __init__(
        self,
        position: Vec3 | None = None,
        yaw: float = 1.18,
        pitch: float = 0.0,
    ) -> None:
        self.position = position if position is not None else Vec3(0.0, 1.0, 0.0)
        self.yaw = yaw
        self.pitch = pitch
        self._orient()

    def _orient(self) -> None:
        self.front = front_vector(self.yaw, self.pitch)
        self.right = self.front.cross(WORLD_UP).normalize()
        self.up = self.right.cross(self.front).normalize()

    @property
    def target(self) -> Vec3:
        """Point the camera looks at."""
        return self.position + self.front

    def look(self, mouse_delta: Vec2, dt: float) -> None:
        """Turn by a mouse movement; pitch is kept within the limit."""
        self.yaw += mouse_delta.x * dt * LOOK_SPEED
        self.pitch += mouse_delta.y * dt * -LOOK_SPEED
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))
        self._orient()

    def move(self, forward: bool, back: bool, left: bool, right: bool) -> None:
        """Step along the view and side directions for the held keys."""
        if forward:
            self.position = self.position + self.front * MOVE_SPEED
        if back:
            self.position = self.position - self.front * MOVE_SPEED
        if left:
            self.position = self.position - self.right * MOVE_SPEED
        if right:
            self.position = self.position + self.right * MOVE_SPEED