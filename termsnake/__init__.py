# termsnake/__init__.py

"""
termsnake: Snake in the terminal.

A single snake grows by eating apples on a character grid and dies when it
leaves the playfield or runs into itself. The game logic talks to the
display only through a surface, so the curses terminal can be swapped for
any other backend.

Public API:
- GameState: snake, apple, score and headings behind one lock
- TickDriver: fixed-rate ticker plus input listener thread
- CursesSurface / BufferSurface: terminal and in-memory display surfaces
- GameSettings: pydantic model for the tunable settings
- main(): command line entry point
"""

import logging

from .cli import main
from .core.driver import Outcome, TickDriver
from .core.settings import GameSettings
from .core.state import Coordinate, GameState, Heading, StepResult
from .core.surface import BufferSurface, CursesSurface, Key, KeyEvent, Style
from .exceptions import ConfigurationError, DisplayInitError, TermsnakeError

# Get package-level logger (configuration happens in main())
logger = logging.getLogger("termsnake")

__all__ = [
    "main",
    "Outcome",
    "TickDriver",
    "GameSettings",
    "Coordinate",
    "GameState",
    "Heading",
    "StepResult",
    "BufferSurface",
    "CursesSurface",
    "Key",
    "KeyEvent",
    "Style",
    "ConfigurationError",
    "DisplayInitError",
    "TermsnakeError",
    "logger",
]
