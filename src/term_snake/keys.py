"""Decoding of raw terminal input chunks into logical key presses."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Key(enum.Enum):
    """Named control keys recognised by :func:`decode`."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    TAB = "tab"
    CTRL_D = "ctrl+d"
    INTERRUPT = "interrupt"


# Matched against whole chunks in order, first match wins. Entries must be
# unambiguous: comparison is exact over the whole chunk, so a lone ESC and
# ESC [ A never collide.
KEY_SEQUENCES: tuple[tuple[Key, bytes], ...] = (
    (Key.DOWN, b"\x1b[B"),
    (Key.UP, b"\x1b[A"),
    (Key.RIGHT, b"\x1b[C"),
    (Key.LEFT, b"\x1b[D"),
    (Key.SPACE, b" "),
    (Key.ENTER, b"\r"),
    (Key.BACKSPACE, b"\x7f"),
    (Key.ESCAPE, b"\x1b"),
    (Key.TAB, b"\t"),
    (Key.CTRL_D, b"\x04"),
    # Ctrl+C; raw mode delivers it as a byte instead of raising SIGINT.
    (Key.INTERRUPT, b"\x03"),
)


@dataclass(frozen=True)
class KeyPress:
    """A decoded input chunk.

    ``name`` is ``None`` when the chunk is not one of the named keys, in
    which case ``pressed`` carries the decoded text (e.g. ``"q"``).
    """

    name: Key | None
    pressed: str

    @property
    def is_interrupt(self) -> bool:
        return self.name is Key.INTERRUPT


def decode(chunk: bytes) -> KeyPress:
    """Decode one input chunk. Never raises; unknown input falls through."""
    pressed = chunk.decode("utf-8", errors="replace")
    for key, sequence in KEY_SEQUENCES:
        if chunk == sequence:
            return KeyPress(key, pressed)
    return KeyPress(None, pressed)
