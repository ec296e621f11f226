"""Fruit placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from term_snake.snake import Position

logger = logging.getLogger(__name__)


def free_cells(
    rows: int, columns: int, occupied: Iterable[Position],
) -> list[Position]:
    """Return every board cell not covered by *occupied*, row by row.

    Computed from the current occupancy on each call; nothing is cached
    between placements.
    """
    mask = np.ones((rows, columns), dtype=bool)
    for r, c in occupied:
        if 0 <= r < rows and 0 <= c < columns:
            mask[r, c] = False
    free_rows, free_cols = np.nonzero(mask)
    return list(zip(free_rows.tolist(), free_cols.tolist(), strict=True))


class FruitSpawner:
    """Picks fruit positions uniformly among free cells.

    Uses a NumPy RNG so that placement is reproducible when seeded.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(
        self, rows: int, columns: int, occupied: Iterable[Position],
    ) -> Position | None:
        """Return a random free cell, or ``None`` if the board is full."""
        free = free_cells(rows, columns, occupied)
        if not free:
            logger.info("No free cells left for fruit placement.")
            return None
        return free[int(self.rng.integers(len(free)))]
