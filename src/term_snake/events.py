"""Terminal event source feeding the game through an asyncio queue."""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from blessed import Terminal

from term_snake.keys import KeyPress, decode

if TYPE_CHECKING:
    from term_snake.game import SnakeGame
    from term_snake.screen import ScreenWriter

logger = logging.getLogger(__name__)

_READ_SIZE = 1024


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press."""

    key_press: KeyPress


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal now has the given dimensions."""

    rows: int
    columns: int


@dataclass(frozen=True)
class InterruptEvent:
    """The user asked to abort (Ctrl+C)."""


Event = KeyEvent | ResizeEvent | InterruptEvent


class TerminalEvents:
    """Reads stdin and terminal signals, queueing typed events.

    Stdin is expected to be in raw mode, so every read returns the bytes
    of a single key action. Ctrl+C arrives as a byte and is queued as an
    :class:`InterruptEvent` rather than a key press.
    """

    def __init__(
        self,
        term: Terminal,
        loop: asyncio.AbstractEventLoop | None = None,
        fd: int | None = None,
    ) -> None:
        self.term = term
        self.loop = loop if loop is not None else asyncio.get_running_loop()
        self.fd = fd if fd is not None else sys.stdin.fileno()
        self.queue: asyncio.Queue[Event] = asyncio.Queue()
        self._started = False

    def start(self) -> None:
        """Begin watching stdin, SIGWINCH and SIGINT."""
        if self._started:
            return
        self.loop.add_reader(self.fd, self._on_readable)
        self.loop.add_signal_handler(signal.SIGWINCH, self._on_resize)
        self.loop.add_signal_handler(signal.SIGINT, self._on_interrupt)
        self._started = True

    def stop(self) -> None:
        """Stop watching; safe to call more than once."""
        if not self._started:
            return
        self.loop.remove_reader(self.fd)
        self.loop.remove_signal_handler(signal.SIGWINCH)
        self.loop.remove_signal_handler(signal.SIGINT)
        self._started = False

    def feed(self, chunk: bytes) -> None:
        """Decode one input chunk and queue the resulting event."""
        key_press = decode(chunk)
        if key_press.is_interrupt:
            self.queue.put_nowait(InterruptEvent())
        else:
            self.queue.put_nowait(KeyEvent(key_press))

    def _on_readable(self) -> None:
        chunk = os.read(self.fd, _READ_SIZE)
        if not chunk:
            logger.info("Input closed, no more key events.")
            self.loop.remove_reader(self.fd)
            return
        self.feed(chunk)

    def _on_resize(self) -> None:
        self.queue.put_nowait(ResizeEvent(self.term.height, self.term.width))

    def _on_interrupt(self) -> None:
        self.queue.put_nowait(InterruptEvent())


def handle_event(
    game: SnakeGame, screen: ScreenWriter, event: Event,
) -> None:
    """Route a single event to the game."""
    if isinstance(event, KeyEvent):
        game.handle_key(event.key_press)
    elif isinstance(event, ResizeEvent):
        screen.update_size(event.rows, event.columns)
        game.handle_resize()
    elif isinstance(event, InterruptEvent):
        game.handle_interrupt()


async def dispatch(
    game: SnakeGame, screen: ScreenWriter, queue: asyncio.Queue[Event],
) -> int:
    """Deliver queued events until the game asks to exit.

    Returns the game's exit status.
    """
    while game.exit_code is None:
        event = await queue.get()
        handle_event(game, screen, event)
    return game.exit_code
