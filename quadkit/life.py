"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import enum
import random
from collections.abc import Iterable


class CellState(enum.Enum):
    ALIVE = "alive"
    DEAD = "dead"


def next_state(cell: CellState, neighbors: int) -> CellState:
    """State of a cell in the next generation given its live neighbour count."""
    if cell is CellState.ALIVE:
        if neighbors < 2 or neighbors > 3:
            return CellState.DEAD
        return CellState.ALIVE
    if neighbors == 3:
        return CellState.ALIVE
    return cell


_OFFSETS = [(i, j) for j in (-1, 0, 1) for i in (-1, 0, 1) if (i, j) != (0, 0)]


class Life:
    """A width x height grid of cells stored row by row; outside the grid is dead."""

    def __init__(
        self, width: int, height: int, cells: Iterable[CellState] | None = None
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        if cells is None:
            self.cells = [CellState.DEAD] * (width * height)
        else:
            self.cells = list(cells)
            if len(self.cells) != width * height:
                raise ValueError("cell count does not match grid size")

    @staticmethod
    def random(width: int, height: int, rng: random.Random | None = None) -> Life:
        """A grid where each cell is alive with probability one in five."""
        rng = rng if rng is not None else random.Random()
        cells = [
            CellState.ALIVE if rng.randrange(0, 5) == 0 else CellState.DEAD
            for _ in range(width * height)
        ]
        return Life(width, height, cells)

    def neighbors(self, x: int, y: int) -> int:
        """Number of live cells among the eight around (x, y)."""
        count = 0
        for i, j in _OFFSETS:
            nx, ny = x + i, y + j
            if 0 <= nx < self.width and 0 <= ny < self.height:
                if self.cells[ny * self.width + nx] is CellState.ALIVE:
                    count += 1
        return count

    def step(self) -> None:
        """Advance the grid by one generation."""
        self.cells = [
            next_state(cell, self.neighbors(*self._coords(index)))
            for index, cell in enumerate(self.cells)
        ]

    def _coords(self, index: int) -> tuple[int, int]:
        y, x = divmod(index, self.width)
        return x, y