# termsnake/cli.py

"""
Command line entry point: open the terminal, play one game, tear down.

The exit status is 0 both when the snake dies and when the player quits
with Ctrl+C. It is 1 when the terminal cannot be set up.
"""

import argparse
import logging
import os
import random
import signal
from typing import List, Optional, Tuple

from rich.console import Console

from .core.driver import Outcome, TickDriver
from .core.log_config import setup_package_logging
from .core.render import SEGMENT_WIDTH, Glyphs
from .core.settings import DEFAULT_TICK_MS, GameSettings
from .core.state import GameState
from .core.surface import CursesSurface, Surface
from .exceptions import ConfigurationError, DisplayInitError

logger = logging.getLogger("termsnake")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Play Snake in the terminal. Arrow keys or WASD to steer, Ctrl+C to quit.",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=DEFAULT_TICK_MS,
        help=f"Milliseconds between two moves (default: {DEFAULT_TICK_MS}).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple placement.")
    parser.add_argument("--log-file", default=None, help="Write log records to this file.")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("TERMSNAKE_LOG_LEVEL", "WARNING"),
        help="Log level name (default: $TERMSNAKE_LOG_LEVEL or WARNING).",
    )
    return parser


def parse_settings(argv: Optional[List[str]] = None) -> GameSettings:
    """Parse the command line into GameSettings, exiting with status 2 on bad input."""
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        return GameSettings(
            tick_ms=ns.tick_ms,
            seed=ns.seed,
            log_file=ns.log_file,
            log_level=ns.log_level,
        )
    except (ConfigurationError, ValueError) as e:
        # ValueError covers pydantic's own constraint checks, e.g. a non-positive tick
        parser.error(str(e))


def play(settings: GameSettings, surface: Surface) -> Tuple[Outcome, int]:
    """Run one game on an open surface and return (outcome, score)."""
    width, height = surface.size()
    height -= 1  # Bottom row is the status bar
    if width < SEGMENT_WIDTH or height < 1:
        raise DisplayInitError(f"Terminal too small ({width}x{height + 1})")

    state = GameState(
        width,
        height,
        surface,
        rng=random.Random(settings.seed),
        glyphs=Glyphs.from_settings(settings),
    )
    driver = TickDriver(state, surface, settings.tick_interval)

    def handle_exit(sig, frame):
        """Treat SIGINT like the quit key instead of raising KeyboardInterrupt."""
        driver.request_quit()

    previous = signal.signal(signal.SIGINT, handle_exit)
    try:
        outcome = driver.run()
    finally:
        signal.signal(signal.SIGINT, previous)
    return outcome, state.score


def report_startup_error(error: DisplayInitError) -> int:
    logger.error(str(error))
    Console(stderr=True, highlight=False).print(f"[red]Error:[/red] {error}")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    settings = parse_settings(argv)
    setup_package_logging(settings.log_level, settings.log_file)
    console = Console(highlight=False)

    try:
        surface = CursesSurface.open()
    except DisplayInitError as e:
        return report_startup_error(e)

    try:
        outcome, score = play(settings, surface)
    except DisplayInitError as e:
        error = e
    else:
        error = None
    finally:
        surface.fini()

    # Reported only after teardown so the message lands on the restored terminal
    if error is not None:
        return report_startup_error(error)

    if outcome is Outcome.DIED:
        console.print("You died")
        console.print(f"Score: {score}")
    return 0
