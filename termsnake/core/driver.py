# termsnake/core/driver.py

"""
Fixed-rate game loop.

TickDriver runs the ticker in the calling thread and an input listener in a
daemon thread. The listener turns key events into change_direction() calls;
the ticker calls advance_one_step() on a monotonic schedule until the snake
dies or a quit is requested. Teardown is left to the caller.
"""

import logging
import threading
import time
from enum import Enum
from typing import Optional

from .settings import DEFAULT_TICK_MS
from .state import GameState, Heading, StepResult
from .surface import Key, Surface

logger = logging.getLogger("termsnake")

KEY_HEADINGS = {
    Key.UP: Heading.UP,
    Key.RIGHT: Heading.RIGHT,
    Key.DOWN: Heading.DOWN,
    Key.LEFT: Heading.LEFT,
}


class Outcome(Enum):
    DIED = "died"
    QUIT = "quit"


class TickDriver:
    """Drive a GameState from a surface's key events and a steady clock."""

    def __init__(
        self,
        state: GameState,
        surface: Surface,
        tick_interval: float = DEFAULT_TICK_MS / 1000.0,
        poll_timeout: float = 0.05,
    ):
        self.state = state
        self.surface = surface
        self.tick_interval = tick_interval
        self.poll_timeout = poll_timeout
        self.ticks = 0
        self._stop = threading.Event()
        self._listener: Optional[threading.Thread] = None

    def request_quit(self) -> None:
        """Stop before the next tick. Safe to call from signal handlers and other threads."""
        self._stop.set()

    def _listen(self) -> None:
        while not self._stop.is_set():
            event = self.surface.poll_event(timeout=self.poll_timeout)
            if event is None:
                continue
            if event.key is Key.QUIT:
                logger.info("Quit key pressed")
                self.request_quit()
                return
            heading = KEY_HEADINGS.get(event.key)
            if heading is not None:
                self.state.change_direction(heading)

    def run(self) -> Outcome:
        """Play until the snake dies or a quit is requested."""
        self.state.draw()

        self._listener = threading.Thread(
            target=self._listen, name="termsnake-input", daemon=True
        )
        self._listener.start()
        logger.info(f"Game loop started (tick every {self.tick_interval * 1000:.0f} ms)")

        next_tick = time.monotonic()
        try:
            while True:
                next_tick += self.tick_interval
                delay = next_tick - time.monotonic()
                if delay < 0:
                    # Running late, restart the schedule from now
                    next_tick = time.monotonic()
                    delay = 0.0
                if self._stop.wait(delay):
                    return Outcome.QUIT

                result = self.state.advance_one_step()
                self.ticks += 1
                if result is StepResult.GAME_OVER:
                    return Outcome.DIED
        finally:
            self._stop.set()
            logger.info(f"Game loop stopped after {self.ticks} ticks")

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the input listener to finish."""
        if self._listener is not None:
            self._listener.join(timeout)
