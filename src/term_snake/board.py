"""Per-tick board snapshot used to build rendered frames."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from term_snake.snake import Position


class CellType(enum.IntEnum):
    """Integer codes stored in the board array."""

    EMPTY = 0
    SNAKE_HEAD = 1
    SNAKE_BODY = 2
    FRUIT = 3


class Board:
    """NumPy-backed rows × columns map of cell tags.

    A board is rebuilt from the snake and fruit on every tick and thrown
    away afterwards. Coordinates use (row, col) ordering consistent with
    NumPy indexing.
    """

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 1 or columns < 1:
            raise ValueError("Board dimensions must be at least 1×1.")
        self.rows = rows
        self.columns = columns
        self.cells = np.zeros((rows, columns), dtype=np.int8)

    @classmethod
    def build(
        cls,
        rows: int,
        columns: int,
        snake: Iterable[Position],
        fruit: Position | None,
    ) -> Board:
        """Paint a fresh board from snake segments (head first) and fruit."""
        board = cls(rows, columns)
        if fruit is not None:
            board.set(*fruit, CellType.FRUIT)
        segments = list(snake)
        for r, c in segments[1:]:
            board.set(r, c, CellType.SNAKE_BODY)
        if segments:
            board.set(*segments[0], CellType.SNAKE_HEAD)
        return board

    def get(self, row: int, col: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[row, col])

    def set(self, row: int, col: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[row, col] = cell_type

    def iter_rows(self) -> Iterable[list[CellType]]:
        """Yield each row as a list of cell types, top to bottom."""
        for r in range(self.rows):
            yield [self.get(r, c) for c in range(self.columns)]
