"""Snake game state machine and tick loop."""

from __future__ import annotations

import asyncio
import enum
import logging
import time

import numpy as np

from term_snake.board import Board, CellType
from term_snake.colors import background, color_style
from term_snake.config import SnakeOptions
from term_snake.fruit import FruitSpawner
from term_snake.keys import Key, KeyPress
from term_snake.screen import ScreenWriter
from term_snake.snake import Direction, Position, Snake

logger = logging.getLogger(__name__)

_END_SCREEN_FG = "white"
_END_SCREEN_BG = "red"

_RESTART_KEY = "r"
_QUIT_KEY = "q"

_DIRECTION_KEYS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

_DIRECTION_CHARS: dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_DURATION_UNITS = (("hour", 3600), ("minute", 60))


class Phase(enum.Enum):
    """Top-level game states."""

    INITIALIZING = "initializing"
    RUNNING = "running"
    ENDED = "ended"


def format_duration(seconds: float) -> str:
    """Render a duration as e.g. ``"1 minute, 5.2 seconds"``."""
    parts: list[str] = []
    remaining = round(max(seconds, 0.0), 1)
    for name, size in _DURATION_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{int(count)} {name}{'' if count == 1 else 's'}")
    secs = round(remaining, 1)
    if secs or not parts:
        parts.append(f"{secs:g} second{'' if secs == 1 else 's'}")
    return ", ".join(parts)


class SnakeGame:
    """Single-player snake game driven by ticks and key events.

    The game owns the snake, the fruit, the score and the phase, and
    hands every frame to a :class:`ScreenWriter`. When *loop* is given,
    each tick arms the next one with ``loop.call_later``; without a loop
    the caller drives :meth:`tick` manually.

    All mutating entry points (:meth:`tick`, :meth:`handle_key`,
    :meth:`handle_resize`, :meth:`handle_interrupt`) are meant to be
    called from the same event loop, so a tick always runs to completion
    before the next key event is handled.
    """

    def __init__(
        self,
        screen: ScreenWriter,
        options: SnakeOptions | None = None,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
        seed: int | None = None,
        autostart: bool = True,
    ) -> None:
        self.screen = screen
        self.options = options if options is not None else SnakeOptions()
        self.loop = loop
        self.rng = np.random.default_rng(seed)
        self.fruit_spawner = FruitSpawner(rng=self.rng)

        self.phase = Phase.INITIALIZING
        self.rows = 0
        self.columns = 0
        self.snake = Snake(1, 1, Direction.RIGHT)
        self.fruit: Position | None = None
        self.fruits_eaten = 0
        self.start_time = time.monotonic()
        self.play_time: float | None = None
        self.game_over_reason: str | None = None
        self.exit_code: int | None = None
        self.frame: list[str] = []

        self._pending_direction: Direction | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._cell_styles = self._build_cell_styles()

        if autostart:
            self.initialize()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Reset everything and start a new round with an immediate tick."""
        self.phase = Phase.INITIALIZING
        self._cancel_tick()

        self.rows, self.columns = self._board_size()
        self.snake = Snake(
            min(1, self.rows - 1), min(1, self.columns - 1), Direction.RIGHT,
        )
        self._pending_direction = None
        self.fruits_eaten = 0
        self.play_time = None
        self.game_over_reason = None
        self.frame = []
        self.fruit = None
        self.start_time = time.monotonic()

        if not self._place_fruit():
            return

        self.phase = Phase.RUNNING
        logger.info("New game on a %dx%d board.", self.rows, self.columns)
        self.tick()

    def _board_size(self) -> tuple[int, int]:
        rows = self.options.rows or self.screen.rows
        columns = self.options.columns or self.screen.columns
        return max(rows, 1), max(columns, 1)

    def stop(self) -> None:
        """Cancel any scheduled tick."""
        self._cancel_tick()

    def _schedule_tick(self) -> None:
        # Chained rather than periodic: a slow render delays the next tick
        # instead of queuing extra ones.
        if self.loop is None:
            return
        self._timer = self.loop.call_later(
            self.options.update_interval_s, self.tick,
        )

    def _cancel_tick(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    @property
    def direction(self) -> Direction:
        """Direction the snake will move on the next tick."""
        return self._pending_direction or self.snake.direction

    def set_direction(self, direction: Direction) -> None:
        """Request a turn for the next tick, ignoring 180° reversals."""
        if direction.opposite is self.snake.direction:
            return
        self._pending_direction = direction

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def tick(self) -> None:
        """Advance the game by one step and render the result."""
        if self.phase is not Phase.RUNNING:
            return
        self._timer = None

        if self._pending_direction is not None:
            self.snake.direction = self._pending_direction
            self._pending_direction = None

        next_head = self.snake.next_head()

        # --- boundary check ---
        if not self.in_bounds(*next_head):
            self._game_over("wall")
            return

        # --- self-collision check (look-ahead) ---
        # The tail moves out of the way unless the snake is about to grow.
        will_grow = next_head == self.fruit
        body = self.snake.body
        if not will_grow:
            body = body[:-1]
        if next_head in body:
            self._game_over("self")
            return

        # --- move ---
        self.snake.advance(grow=will_grow)
        if will_grow:
            self.fruits_eaten += 1
            if not self._place_fruit():
                return

        self.frame = self._build_frame()
        self.screen.render(self.frame)
        self._schedule_tick()

    def _place_fruit(self) -> bool:
        """Place a new fruit, ending the game when the board is full."""
        self.fruit = self.fruit_spawner.place(
            self.rows, self.columns, self.snake.segments,
        )
        if self.fruit is None:
            self._game_over("board_full")
            return False
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _build_cell_styles(self) -> dict[CellType, str]:
        term = self.screen.term
        fill = self.options.fill_char
        colors = {
            CellType.EMPTY: self.options.empty_color,
            CellType.SNAKE_HEAD: self.options.snake_head_color,
            CellType.SNAKE_BODY: self.options.snake_body_color,
            CellType.FRUIT: self.options.fruit_color,
        }
        return {
            cell: background(term, color)(fill)
            for cell, color in colors.items()
        }

    def _build_frame(self) -> list[str]:
        board = Board.build(
            self.rows, self.columns, self.snake.segments, self.fruit,
        )
        return [
            "".join(self._cell_styles[cell] for cell in row)
            for row in board.iter_rows()
        ]

    def _game_over(self, reason: str) -> None:
        """Freeze the game and show the end screen."""
        self.phase = Phase.ENDED
        self.game_over_reason = reason
        self.play_time = time.monotonic() - self.start_time
        self._cancel_tick()
        logger.info(
            "Game over (%s) with score %d, length %d, after %.1fs.",
            reason, self.fruits_eaten, len(self.snake), self.play_time,
        )

        style = color_style(self.screen.term, _END_SCREEN_FG, _END_SCREEN_BG)
        fill = self.options.fill_char
        messages = [
            f"Your score: {self.fruits_eaten}",
            f"Play time: {format_duration(self.play_time)}",
            f'Press "{_RESTART_KEY}" to play again or "{_QUIT_KEY}" to exit.',
        ]
        lines = [
            style(self.screen.center_string(line, self.columns, fill))
            for line in messages
        ]
        empty_line = style(fill * self.columns)
        padding = max(self.rows - len(lines), 0)
        top = padding // 2

        self.frame = [
            *([empty_line] * top),
            *lines,
            *([empty_line] * (padding - top)),
        ]
        self.screen.render(self.frame)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def handle_key(self, key_press: KeyPress) -> None:
        """React to a decoded key press according to the current phase."""
        if self.phase is Phase.RUNNING:
            direction = _DIRECTION_KEYS.get(key_press.name)
            if direction is None:
                direction = _DIRECTION_CHARS.get(key_press.pressed)
            if direction is not None:
                self.set_direction(direction)
        elif self.phase is Phase.ENDED:
            if key_press.pressed == _RESTART_KEY:
                self.initialize()
            elif key_press.pressed == _QUIT_KEY:
                self.screen.clear()
                self._exit(0)

    def handle_resize(self) -> None:
        """Restart on a resized terminal."""
        logger.info("Terminal resized, restarting.")
        self.initialize()

    def handle_interrupt(self) -> None:
        """Abort the game from any phase."""
        self.screen.clear()
        self._exit(1)

    def _exit(self, code: int) -> None:
        self._cancel_tick()
        self.exit_code = code
        logger.info("Exiting with status %d.", code)
