"""Breakout-style game logic in a 20 x 20 world."""

from __future__ import annotations

from dataclasses import dataclass, field

from quadkit.geometry import Rect


def _full_grid() -> list[list[bool]]:
    return [[True] * Arkanoid.BLOCKS_W for _ in range(Arkanoid.BLOCKS_H)]


@dataclass
class Arkanoid:
    """Ball, paddle and a grid of blocks; y grows downwards."""

    BLOCKS_W = 10
    BLOCKS_H = 10
    SCR_W = 20.0
    SCR_H = 20.0
    PLATFORM_WIDTH = 5.0
    PLATFORM_HEIGHT = 0.2
    PLATFORM_SPEED = 3.0

    blocks: list[list[bool]] = field(default_factory=_full_grid)
    ball_x: float = 12.0
    ball_y: float = 7.0
    dx: float = 3.5
    dy: float = -3.5
    platform_x: float = 10.0
    stick: bool = True

    def _block_rect(self, i: int, j: int) -> Rect:
        block_w = self.SCR_W / self.BLOCKS_W
        block_h = 7.0 / self.BLOCKS_H
        return Rect(i * block_w + 0.05, j * block_h + 0.05, block_w, block_h)

    def update(self, dt: float, left: bool, right: bool, launch: bool) -> None:
        """Advance one frame given the frame time and the pressed keys."""
        half = self.PLATFORM_WIDTH / 2.0
        if right and self.platform_x < self.SCR_W - half:
            self.platform_x += self.PLATFORM_SPEED * dt
        if left and self.platform_x > half:
            self.platform_x -= self.PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = self.SCR_H - 0.5
            self.stick = not launch

        if self.ball_x <= 0.0 or self.ball_x > self.SCR_W:
            self.dx = -self.dx
        on_platform = (
            self.ball_y > self.SCR_H - self.PLATFORM_HEIGHT - 0.15 / 2.0
            and self.platform_x - half <= self.ball_x <= self.platform_x + half
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy
        if self.ball_y >= self.SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if not alive:
                    continue
                rect = self._block_rect(i, j)
                if rect.left <= self.ball_x < rect.right and rect.top <= self.ball_y < rect.bottom:
                    self.dy = -self.dy
                    row[i] = False

    def remaining_blocks(self) -> int:
        return sum(sum(row) for row in self.blocks)