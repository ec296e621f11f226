"""Named colors and their blessed formatting attributes."""

from __future__ import annotations

from collections.abc import Callable

from blessed import Terminal

# Public color name -> blessed color attribute.
AVAILABLE_COLORS: dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "white": "white",
    "gray": "bright_black",
    "grey": "bright_black",
    "bright_black": "bright_black",
    "bright_red": "bright_red",
    "bright_green": "bright_green",
    "bright_yellow": "bright_yellow",
    "bright_blue": "bright_blue",
    "bright_magenta": "bright_magenta",
    "bright_cyan": "bright_cyan",
    "bright_white": "bright_white",
}


def _attribute(color: str) -> str:
    try:
        return AVAILABLE_COLORS[color]
    except KeyError:
        raise ValueError(f"Unknown color name: {color!r}.") from None


def foreground(term: Terminal, color: str) -> Callable[[str], str]:
    """Return a formatter painting text in *color*."""
    return getattr(term, _attribute(color))


def background(term: Terminal, color: str) -> Callable[[str], str]:
    """Return a formatter painting the cell background in *color*."""
    return getattr(term, f"on_{_attribute(color)}")


def color_style(
    term: Terminal, fg: str | None = None, bg: str | None = None,
) -> Callable[[str], str] | None:
    """Combine an optional foreground and background into one formatter.

    Returns ``None`` when neither color is given.
    """
    if fg is not None and bg is not None:
        return getattr(term, f"{_attribute(fg)}_on_{_attribute(bg)}")
    if fg is not None:
        return foreground(term, fg)
    if bg is not None:
        return background(term, bg)
    return None
