"""Term Snake — snake in your terminal."""

from term_snake.config import SnakeOptions
from term_snake.game import Phase, SnakeGame
from term_snake.keys import Key, KeyPress, decode
from term_snake.screen import ScreenWriter
from term_snake.snake import Direction, Snake

__all__ = [
    "Direction",
    "Key",
    "KeyPress",
    "Phase",
    "ScreenWriter",
    "Snake",
    "SnakeGame",
    "SnakeOptions",
    "decode",
]
