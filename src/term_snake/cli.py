"""Command-line launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from term_snake.colors import AVAILABLE_COLORS
from term_snake.config import SnakeOptions

logger = logging.getLogger(__name__)

# Exit status for startup argument problems (mirrors argparse).
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    defaults = SnakeOptions()
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play snake in your terminal.",
    )
    parser.add_argument(
        "-s", "--speed", type=int, default=defaults.update_interval,
        help="Refresh interval in milliseconds.",
    )
    parser.add_argument(
        "-g", "--head-color", default=defaults.snake_head_color,
        help="Snake's head color.",
    )
    parser.add_argument(
        "-b", "--body-color", default=defaults.snake_body_color,
        help="Snake's body color.",
    )
    parser.add_argument(
        "-e", "--empty-color", default=defaults.empty_color,
        help="Color of an empty cell.",
    )
    parser.add_argument(
        "-f", "--fruit-color", default=defaults.fruit_color,
        help="Color of the fruit.",
    )
    parser.add_argument(
        "-u", "--filler-char", default=defaults.fill_char,
        help="Character used to build the board.",
    )
    parser.add_argument("-r", "--rows", type=int, default=None)
    parser.add_argument("-c", "--columns", type=int, default=None)
    parser.add_argument(
        "-l", "--list-colors", action="store_true",
        help="List all available colors and exit.",
    )
    parser.add_argument(
        "--no-border", action="store_true",
        help="Do not draw a border around the board.",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for reproducible fruit placement.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file (logging is off otherwise).",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _options_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace,
) -> SnakeOptions:
    try:
        return SnakeOptions(
            update_interval=args.speed,
            snake_head_color=args.head_color,
            snake_body_color=args.body_color,
            empty_color=args.empty_color,
            fruit_color=args.fruit_color,
            fill_char=args.filler_char,
            rows=args.rows,
            columns=args.columns,
        )
    except ValidationError as exc:
        messages = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        parser.error(messages)


def _configure_logging(log_file: str | None, level: str) -> None:
    # The game owns the whole screen, so never log to the terminal.
    if log_file is None:
        logging.basicConfig(handlers=[logging.NullHandler()])
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


async def _play(
    options: SnakeOptions, with_border: bool, seed: int | None,
) -> int:
    from blessed import Terminal

    from term_snake.events import TerminalEvents, dispatch
    from term_snake.game import SnakeGame
    from term_snake.screen import ScreenWriter

    term = Terminal()
    loop = asyncio.get_running_loop()
    with term.fullscreen(), term.raw():
        screen = ScreenWriter(term, with_border=with_border)
        events = TerminalEvents(term, loop=loop)
        events.start()
        game: SnakeGame | None = None
        try:
            game = SnakeGame(screen, options, loop=loop, seed=seed)
            return await dispatch(game, screen, events.queue)
        finally:
            if game is not None:
                game.stop()
            events.stop()
            screen.restore()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_file, args.log_level)

    if args.list_colors:
        print("Available colors:")  # noqa: T201
        print("\n".join(f"  {c}" for c in sorted(AVAILABLE_COLORS)))  # noqa: T201
        return EXIT_USAGE

    options = _options_from_args(parser, args)
    logger.info("Starting with %s.", options)
    return asyncio.run(_play(options, not args.no_border, args.seed))


if __name__ == "__main__":
    sys.exit(main())
