# termsnake/core/surface.py

"""
Display surfaces for termsnake.

The game never talks to the terminal directly. It draws through a surface
that can set a character cell with a style, read a cell back, flush pending
changes and report key presses. CursesSurface drives a real terminal,
BufferSurface keeps everything in memory for headless runs and tests.
"""

import curses
import locale
import logging
import queue
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Tuple

from ..exceptions import DisplayInitError

logger = logging.getLogger("termsnake")

BLANK = " "

# Color pairs used by the curses backend
HEAD_COLOR_PAIR = 1
APPLE_COLOR_PAIR = 2


class Style(Enum):
    """Cell styles understood by every surface."""
    DEFAULT = "default"
    HEAD = "head"
    BODY = "body"
    APPLE = "apple"


class Key(Enum):
    """Backend-neutral key identities."""
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    QUIT = "quit"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    raw: Optional[int] = None


class Surface(Protocol):
    """What GameState and TickDriver need from a display."""

    def size(self) -> Tuple[int, int]: ...

    def set_cell(self, x: int, y: int, style: Style, char: str) -> None: ...

    def get_content(self, x: int, y: int) -> str: ...

    def show(self) -> None: ...

    def poll_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]: ...

    def fini(self) -> None: ...


class BufferSurface:
    """
    In-memory surface.

    Cells live in a dict keyed by (x, y). Key events are fed through
    push_event() and handed out by poll_event() in order. Every show() call
    snapshots the visible characters so tests can inspect past frames.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: Dict[Tuple[int, int], Tuple[str, Style]] = {}
        self.frames: List[Dict[Tuple[int, int], str]] = []
        self.closed = False
        self._events: "queue.Queue[KeyEvent]" = queue.Queue()

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, style: Style, char: str) -> None:
        if not self._in_bounds(x, y):
            return
        if char == BLANK and style is Style.DEFAULT:
            self.cells.pop((x, y), None)
        else:
            self.cells[(x, y)] = (char, style)

    def get_content(self, x: int, y: int) -> str:
        """Character at (x, y); blank inside the grid, empty string outside it."""
        if not self._in_bounds(x, y):
            return ""
        return self.cells.get((x, y), (BLANK, Style.DEFAULT))[0]

    def style_at(self, x: int, y: int) -> Style:
        return self.cells.get((x, y), (BLANK, Style.DEFAULT))[1]

    def row_text(self, y: int) -> str:
        return "".join(self.get_content(x, y) for x in range(self.width))

    def show(self) -> None:
        self.frames.append({pos: cell[0] for pos, cell in self.cells.items()})

    def push_event(self, event: KeyEvent) -> None:
        self._events.put(event)

    def poll_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        try:
            return self._events.get(timeout=timeout)
        except queue.Empty:
            return None

    def fini(self) -> None:
        self.closed = True


CURSES_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    ord('w'): Key.UP,
    ord('W'): Key.UP,
    ord('d'): Key.RIGHT,
    ord('D'): Key.RIGHT,
    ord('s'): Key.DOWN,
    ord('S'): Key.DOWN,
    ord('a'): Key.LEFT,
    ord('A'): Key.LEFT,
    3: Key.QUIT,  # Ctrl+C arrives as a key in raw mode
}


def translate_key(code: int) -> KeyEvent:
    """Map a curses key code to a KeyEvent."""
    return KeyEvent(CURSES_KEYS.get(code, Key.OTHER), code)


class CursesSurface:
    """
    Terminal surface backed by curses.

    The input listener and the ticker run in different threads and curses is
    not thread-safe, so every curses call goes through one lock. Input is
    read in non-blocking mode and poll_event() sleeps between reads instead
    of blocking inside getch() with the lock held.

    inch() only returns the low byte of a cell, which mangles the block and
    emoji glyphs, so every character written is also kept in a cell map and
    get_content() reads from there.
    """

    def __init__(
        self,
        stdscr,
        attrs: Optional[Dict[Style, int]] = None,
        poll_interval: float = 0.01,
    ):
        self.stdscr = stdscr
        self.attrs = attrs or {}
        self.poll_interval = poll_interval
        self.cells: Dict[Tuple[int, int], str] = {}
        self._io_lock = threading.Lock()
        self._closed = False

    @classmethod
    def open(cls) -> "CursesSurface":
        """Initialize the terminal and return a surface for it."""
        locale.setlocale(locale.LC_ALL, "")
        try:
            stdscr = curses.initscr()
        except curses.error as e:
            raise DisplayInitError(original_error=e) from e

        try:
            setup_terminal(stdscr)
        except curses.error as e:
            restore_terminal(stdscr)
            raise DisplayInitError("Failed to configure the terminal", e) from e

        logger.info(f"Opened curses surface ({stdscr.getmaxyx()[1]}x{stdscr.getmaxyx()[0]})")
        return cls(stdscr, style_attrs())

    def size(self) -> Tuple[int, int]:
        with self._io_lock:
            rows, cols = self.stdscr.getmaxyx()
        return cols, rows

    def set_cell(self, x: int, y: int, style: Style, char: str) -> None:
        with self._io_lock:
            rows, cols = self.stdscr.getmaxyx()
            if not (0 <= x < cols and 0 <= y < rows):
                return
            try:
                self.stdscr.addstr(y, x, char, self.attrs.get(style, curses.A_NORMAL))
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen
                pass
            if char == BLANK:
                self.cells.pop((x, y), None)
            else:
                self.cells[(x, y)] = char

    def get_content(self, x: int, y: int) -> str:
        with self._io_lock:
            rows, cols = self.stdscr.getmaxyx()
            if not (0 <= x < cols and 0 <= y < rows):
                return ""
            return self.cells.get((x, y), BLANK)

    def show(self) -> None:
        with self._io_lock:
            self.stdscr.noutrefresh()
            curses.doupdate()

    def poll_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            with self._io_lock:
                if self._closed:
                    return None
                code = self.stdscr.getch()
            if code != -1:
                return translate_key(code)
            if deadline is not None and time.monotonic() >= deadline:
                return None
            time.sleep(self.poll_interval)

    def fini(self) -> None:
        """Restore the terminal. Safe to call more than once."""
        with self._io_lock:
            if self._closed:
                return
            self._closed = True
            restore_terminal(self.stdscr)
        logger.info("Closed curses surface")


def setup_terminal(stdscr) -> None:
    """Configure terminal settings."""
    curses.raw()
    curses.noecho()
    stdscr.keypad(True)
    stdscr.nodelay(True)
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor")
    if curses.has_colors():
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(HEAD_COLOR_PAIR, curses.COLOR_GREEN, -1)
        curses.init_pair(APPLE_COLOR_PAIR, curses.COLOR_RED, -1)
    stdscr.clear()


def restore_terminal(stdscr) -> None:
    """Undo setup_terminal() and leave curses mode."""
    try:
        stdscr.keypad(False)
        curses.noraw()
        curses.echo()
        curses.curs_set(1)
    except curses.error:
        pass
    curses.endwin()


def style_attrs() -> Dict[Style, int]:
    """Curses attributes per style; needs an initialized screen."""
    if not curses.has_colors():
        return {Style.HEAD: curses.A_BOLD}
    return {
        Style.HEAD: curses.color_pair(HEAD_COLOR_PAIR),
        Style.APPLE: curses.color_pair(APPLE_COLOR_PAIR),
    }
