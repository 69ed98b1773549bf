# termsnake/core/state.py

"""
Game state for termsnake.

GameState owns the snake, the apple, the score and the two headings, and is
shared between the input listener and the ticker. Both go through one lock:
change_direction() queues at most one turn per tick, advance_one_step()
consumes it and moves the snake. Neither ever ends the process; a death is
reported as StepResult.GAME_OVER and the caller decides what to do with it.
"""

import logging
import random
import threading
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .render import SEGMENT_WIDTH, Glyphs, clear_state, draw_state, draw_status_label
from .surface import Surface

logger = logging.getLogger("termsnake")


class Coordinate(NamedTuple):
    x: int
    y: int


class Heading(Enum):
    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4

    @property
    def opposite(self) -> "Heading":
        return _OPPOSITES[self]

    @property
    def step(self) -> Tuple[int, int]:
        """Offset of one move; horizontal moves cover a whole segment."""
        return _STEPS[self]


_OPPOSITES = {
    Heading.NONE: Heading.NONE,
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
}

_STEPS = {
    Heading.NONE: (0, 0),
    Heading.UP: (0, -1),
    Heading.RIGHT: (SEGMENT_WIDTH, 0),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-SEGMENT_WIDTH, 0),
}


class StepResult(Enum):
    CONTINUE = "continue"
    GAME_OVER = "game_over"


def start_position(width: int, height: int) -> Coordinate:
    """Bottom row, middle column, snapped to an even x."""
    half = width // 2
    return Coordinate(half - (half % 2), height - 1)


class GameState:
    """
    Snake, apple, score and headings behind a single lock.

    The snake is stored oldest-first, so the head is the last element.
    width and height describe the playfield only; the status bar lives in
    the row just below it (y == height).
    """

    def __init__(
        self,
        width: int,
        height: int,
        surface: Optional[Surface] = None,
        *,
        snake: Optional[Iterable[Tuple[int, int]]] = None,
        apple: Optional[Tuple[int, int]] = None,
        heading: Heading = Heading.UP,
        rng: Optional[random.Random] = None,
        glyphs: Glyphs = Glyphs(),
    ):
        if width < SEGMENT_WIDTH or height < 1:
            raise ValueError(f"Board too small: {width}x{height}")
        if heading is Heading.NONE:
            raise ValueError("Initial heading must be a direction")

        self._width = width
        self._height = height
        self._surface = surface
        self._rng = rng or random.Random()
        self._glyphs = glyphs
        self._lock = threading.Lock()

        if snake is None:
            self._snake: List[Coordinate] = [start_position(width, height)]
        else:
            self._snake = [Coordinate(*segment) for segment in snake]
            if not self._snake:
                raise ValueError("Snake must have at least one segment")
        self._apple = Coordinate(*apple) if apple is not None else None
        self._score = 0
        self._pending = Heading.NONE
        self._last_applied = heading

    # Read-only views

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def snake(self) -> Tuple[Coordinate, ...]:
        with self._lock:
            return tuple(self._snake)

    @property
    def head(self) -> Coordinate:
        with self._lock:
            return self._snake[-1]

    @property
    def apple(self) -> Optional[Coordinate]:
        with self._lock:
            return self._apple

    @property
    def score(self) -> int:
        with self._lock:
            return self._score

    @property
    def heading(self) -> Heading:
        """Heading used by the most recent step."""
        with self._lock:
            return self._last_applied

    @property
    def pending_heading(self) -> Heading:
        with self._lock:
            return self._pending

    # Operations

    def change_direction(self, requested: Heading) -> None:
        """
        Queue a turn for the next tick.

        Only one turn can be queued between two ticks, and a snake longer
        than one segment cannot reverse onto itself. Anything else is
        dropped without notice.
        """
        if requested is Heading.NONE:
            return

        with self._lock:
            if self._pending is not Heading.NONE:
                logger.debug(f"Dropped {requested.name}: {self._pending.name} already queued")
                return
            if len(self._snake) > 1 and requested is self._last_applied.opposite:
                logger.debug(f"Dropped {requested.name}: reversal of {self._last_applied.name}")
                return
            self._pending = requested

    def advance_one_step(self) -> StepResult:
        """Move the snake by one step and redraw. See StepResult."""
        with self._lock:
            heading = self._pending if self._pending is not Heading.NONE else self._last_applied
            old_head = self._snake[-1]
            dx, dy = heading.step
            new_head = Coordinate(old_head.x + dx, old_head.y + dy)

            if not self._in_bounds(new_head):
                logger.info(f"Left the playfield at {tuple(new_head)} (score {self._score})")
                return StepResult.GAME_OVER

            if new_head in self._snake:
                logger.info(f"Bit itself at {tuple(new_head)} (score {self._score})")
                return StepResult.GAME_OVER

            if self._surface is not None:
                clear_state(self._surface, self._snake, self._apple, self._width, self._height)

            grow = self._apple is not None and new_head == self._apple
            if grow:
                self._score += 1
                logger.debug(f"Ate apple at {tuple(new_head)}, score {self._score}")

            self._snake.append(new_head)
            if not grow:
                del self._snake[0]

            if self._apple is None or grow:
                self._place_apple()

            if self._surface is not None:
                draw_state(
                    self._surface, self._snake, self._apple, self._score, self._height, self._glyphs
                )

            self._last_applied = heading
            self._pending = Heading.NONE
            return StepResult.CONTINUE

    def place_apple(self) -> Coordinate:
        """Put a new apple on a free cell and return it."""
        with self._lock:
            return self._place_apple()

    def draw(self) -> None:
        """Draw the status label and the current state, e.g. for the first frame."""
        if self._surface is None:
            return
        with self._lock:
            draw_status_label(self._surface, self._height, self._glyphs.score_label)
            draw_state(
                self._surface, self._snake, self._apple, self._score, self._height, self._glyphs
            )

    # Internals, called with the lock held

    def _in_bounds(self, pos: Coordinate) -> bool:
        return 0 <= pos.x <= self._width - SEGMENT_WIDTH and 0 <= pos.y < self._height

    def _place_apple(self) -> Coordinate:
        # No attempt limit: a nearly full board keeps sampling.
        while True:
            x = self._rng.randrange(self._width)
            y = self._rng.randrange(self._height)
            if x % 2 != 0:
                x += 1
            if x >= self._width - 1:
                x -= 2
            candidate = Coordinate(x, y)
            if candidate not in self._snake:
                break

        self._apple = candidate
        logger.debug(f"Placed apple at {tuple(candidate)}")
        return candidate
