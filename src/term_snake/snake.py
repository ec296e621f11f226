"""Snake geometry and movement."""

from __future__ import annotations

import enum
from collections import deque

Position = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (row, col) segments.

    The head is ``segments[0]``; the tail is ``segments[-1]``. Everything
    after the head is the body, ordered from neck to tail.
    """

    def __init__(
        self,
        start_row: int,
        start_col: int,
        direction: Direction = Direction.RIGHT,
        length: int = 1,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dr, dc = direction.value
        self.segments: deque[Position] = deque(
            (start_row - dr * i, start_col - dc * i) for i in range(length)
        )
        self.direction = direction

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.segments[0]

    @property
    def body(self) -> list[Position]:
        """Return the segments behind the head, neck first."""
        return list(self.segments)[1:]

    def next_head(self) -> Position:
        """Compute the next head position without moving."""
        dr, dc = self.direction.value
        r, c = self.head
        return r + dr, c + dc

    def advance(self, grow: bool = False) -> Position | None:
        """Move the snake one step forward.

        The old head becomes the neck, so the body trails the head by
        exactly one step. Returns the vacated tail cell, or ``None`` if
        the snake grew.
        """
        self.segments.appendleft(self.next_head())
        if grow:
            return None
        return self.segments.pop()

