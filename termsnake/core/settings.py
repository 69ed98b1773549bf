# termsnake/core/settings.py

"""
Configuration settings for termsnake using Pydantic models.

GameSettings holds everything the command line can tune: the tick cadence,
the random seed used for apple placement, the glyphs drawn for the snake and
the apple, and where log records go while curses owns the terminal.
"""

import logging
from pathlib import Path
from typing import Optional, Union
from pydantic import BaseModel, Field, field_validator

from ..exceptions import ConfigurationError

FULL_BLOCK = "█"
APPLE = "\U0001F34E"

# 1000 // 22 ms, roughly 22 ticks per second.
DEFAULT_TICK_MS = 45

class GameSettings(BaseModel):
    """Settings for a single game session."""
    tick_ms: int = Field(default=DEFAULT_TICK_MS, gt=0)
    seed: Optional[int] = None  # Unseeded apple placement when None
    head_glyph: str = FULL_BLOCK
    body_glyph: str = FULL_BLOCK
    apple_glyph: str = APPLE
    score_label: str = "Score:"
    log_file: Optional[Path] = None
    log_level: str = "WARNING"

    @field_validator('head_glyph', 'body_glyph', 'apple_glyph')
    @classmethod
    def validate_glyph(cls, v: str, info) -> str:
        """Each glyph must be exactly one character."""
        if len(v) != 1:
            raise ConfigurationError(
                f"Glyph must be a single character, got {v!r}", field=info.field_name
            )
        return v

    @field_validator('score_label')
    @classmethod
    def validate_score_label(cls, v: str) -> str:
        """The label shares the status row with the score digits starting at column 7."""
        if len(v) > 6:
            raise ConfigurationError(
                f"Score label must fit in 6 columns, got {v!r}", field="score_label"
            )
        return v

    @field_validator('log_file')
    @classmethod
    def validate_log_file(cls, v: Optional[Union[str, Path]]) -> Optional[Path]:
        """Ensure the directory of the log file exists."""
        if v is None:
            return None

        path = Path(v)
        if not path.parent.exists():
            raise ConfigurationError(
                f"Log directory does not exist: {path.parent}", field="log_file"
            )
        return path.absolute()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and make sure logging knows it."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level: {v}", field="log_level")
        return level

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_ms / 1000.0
