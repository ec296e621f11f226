"""Differential terminal renderer."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from blessed import Terminal

from term_snake.colors import color_style

logger = logging.getLogger(__name__)

# Rows/columns consumed by the border (one cell on each side).
_BORDER_SIZE = 2


class ScreenWriter:
    """Writes fixed-width frames to the terminal, redrawing changed rows only.

    Each frame is optionally framed by a one-cell border, centered on the
    screen, and compared row by row with the previously written frame.
    Rows that are identical, styling included, are skipped entirely.

    The writer is the only component that touches the terminal.
    """

    def __init__(
        self,
        term: Terminal | None = None,
        *,
        with_border: bool = True,
        border_color: str | None = "white",
        border_bg_color: str | None = "black",
        fill_char: str = " ",
    ) -> None:
        if len(fill_char) != 1:
            raise ValueError("fill_char must be exactly one character.")
        self.term = term if term is not None else Terminal()
        self.fill_char = fill_char
        self._border_style = (
            color_style(self.term, border_color, border_bg_color)
            if with_border else None
        )
        self._screen_rows = 0
        self._screen_columns = 0
        self._previous: list[str] = []
        self.update_size()

    @property
    def border(self) -> bool:
        """Whether frames are wrapped in a border."""
        return self._border_style is not None

    @property
    def rows(self) -> int:
        """Rows available to frame content, net of the border."""
        if self.border:
            return max(self._screen_rows - _BORDER_SIZE, 0)
        return self._screen_rows

    @property
    def columns(self) -> int:
        """Columns available to frame content, net of the border."""
        if self.border:
            return max(self._screen_columns - _BORDER_SIZE, 0)
        return self._screen_columns

    def update_size(
        self, rows: int | None = None, columns: int | None = None,
    ) -> tuple[int, int]:
        """Record new terminal dimensions and force a full redraw.

        Dimensions missing from the notification are queried from the
        terminal. Returns the usable ``(rows, columns)``.
        """
        self._screen_rows = rows if rows is not None else self.term.height
        self._screen_columns = (
            columns if columns is not None else self.term.width
        )
        self._previous = []
        logger.debug(
            "Screen size is %dx%d.", self._screen_rows, self._screen_columns,
        )
        return self.rows, self.columns

    def render(self, lines: Sequence[str]) -> int:
        """Write *lines* to the screen. Returns the number of rows written.

        All lines are assumed to share the same visible width.
        """
        frame = list(lines)
        if self.border:
            frame = self.add_border(frame)
        frame = self.center_lines(frame)

        out: list[str] = []
        for index, row in enumerate(frame):
            if index < len(self._previous) and self._previous[index] == row:
                continue
            out.append(self.term.move_yx(index, 0) + row)
        written = len(out)

        if out:
            out.append(self.term.hide_cursor)
            self._write("".join(out))

        self._previous = frame
        return written

    def add_border(self, lines: Sequence[str]) -> list[str]:
        """Surround *lines* with a box-drawing frame."""
        style = self._border_style
        if style is None:
            return list(lines)
        width = len(self.term.strip_seqs(lines[0])) if lines else 0
        side = style("│")
        return [
            style("┌" + "─" * width + "┐"),
            *(side + line + side for line in lines),
            style("└" + "─" * width + "┘"),
        ]

    def center_lines(self, lines: Sequence[str]) -> list[str]:
        """Center a block of lines within the whole terminal."""
        rows, columns = self._screen_rows, self._screen_columns
        if (
            len(lines) == rows
            and lines
            and len(self.term.strip_seqs(lines[0])) == columns
        ):
            return list(lines)

        empty_line = self.fill_char * columns
        padding = max(rows - len(lines), 0)
        top = padding // 2
        return [
            *([empty_line] * top),
            *(self.center_string(line, columns) for line in lines),
            *([empty_line] * (padding - top)),
        ]

    def center_string(
        self,
        text: str,
        width: int | None = None,
        fill_char: str | None = None,
    ) -> str:
        """Pad *text* to *width* visible cells, centered.

        Text wider than *width* is truncated after its escape sequences are
        stripped, so truncated text loses its styling.
        """
        if width is None:
            width = self._screen_columns
        if width <= 0:
            raise ValueError(
                f"Line width should be bigger than 0. Received: {width}",
            )
        fill = fill_char if fill_char is not None else self.fill_char

        visible = self.term.strip_seqs(text)
        if len(visible) == width:
            return text
        if len(visible) > width:
            return visible[:width]

        padding = width - len(visible)
        return fill * (padding // 2) + text + fill * (padding - padding // 2)

    def clear(self) -> None:
        """Clear the physical screen and force a full redraw."""
        self._previous = []
        self._write(self.term.home + self.term.clear)

    def restore(self) -> None:
        """Reset attributes and show the cursor again."""
        self._previous = []
        self._write(self.term.normal + self.term.normal_cursor)

    def _write(self, data: str) -> None:
        stream = self.term.stream
        stream.write(data)
        stream.flush()
