"""Grid snake game logic."""

from __future__ import annotations

import random
from collections import deque

Point = tuple[int, int]

UP: Point = (0, -1)
DOWN: Point = (0, 1)
RIGHT: Point = (1, 0)
LEFT: Point = (-1, 0)

_INITIAL_SPEED = 0.3


class SnakeGame:
    """A snake on a square board; it advances one cell every `speed` seconds."""

    def __init__(
        self, squares: int = 16, rng: random.Random | None = None, now: float = 0.0
    ) -> None:
        if squares <= 0:
            raise ValueError("board must have at least one square")
        self.squares = squares
        self.rng = rng if rng is not None else random.Random()
        self.time = now
        self.restart()

    def _random_point(self) -> Point:
        return (self.rng.randrange(0, self.squares), self.rng.randrange(0, self.squares))

    def restart(self) -> None:
        """Start a new game from the top-left corner."""
        self.head: Point = (0, 0)
        self.direction: Point = RIGHT
        self.body: deque[Point] = deque()
        self.fruit = self._random_point()
        self.score = 0
        self.speed = _INITIAL_SPEED
        self.last_update = self.time
        self.navigation_lock = False
        self.game_over = False

    def turn(self, direction: Point) -> bool:
        """Change direction unless reversing or already turned this step."""
        if self.game_over or self.navigation_lock:
            return False
        if direction == (-self.direction[0], -self.direction[1]):
            return False
        self.direction = direction
        self.navigation_lock = True
        return True

    def tick(self, now: float) -> bool:
        """Advance the snake if enough time has passed; True if it moved."""
        self.time = now
        if self.game_over or now - self.last_update <= self.speed:
            return False

        self.last_update = now
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction[0], self.head[1] + self.direction[1])
        if self.head == self.fruit:
            self.fruit = self._random_point()
            self.score += 100
            self.speed *= 0.9
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True
        self.navigation_lock = False
        return True