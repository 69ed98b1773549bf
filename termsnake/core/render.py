# termsnake/core/render.py

"""
Drawing routines for the game board.

Only the cells that were drawn for the previous frame are cleared, the rest
of the screen is left alone. Each segment covers two horizontal cells since
terminal glyphs are about twice as tall as they are wide.
"""

from typing import NamedTuple, Optional, Sequence, Tuple

from .settings import APPLE, FULL_BLOCK, GameSettings
from .surface import BLANK, Style, Surface

SEGMENT_WIDTH = 2

# Score digits start here, leaving a space after the label
SCORE_COLUMN = 7


class Glyphs(NamedTuple):
    head: str = FULL_BLOCK
    body: str = FULL_BLOCK
    apple: str = APPLE
    score_label: str = "Score:"

    @classmethod
    def from_settings(cls, settings: GameSettings) -> "Glyphs":
        return cls(
            head=settings.head_glyph,
            body=settings.body_glyph,
            apple=settings.apple_glyph,
            score_label=settings.score_label,
        )


def draw_status_label(surface: Surface, status_row: int, label: str) -> None:
    for i, char in enumerate(label):
        surface.set_cell(i, status_row, Style.DEFAULT, char)


def _clear_segment(surface: Surface, pos: Tuple[int, int]) -> None:
    x, y = pos
    for dx in range(SEGMENT_WIDTH):
        surface.set_cell(x + dx, y, Style.DEFAULT, BLANK)


def clear_state(
    surface: Surface,
    snake: Sequence[Tuple[int, int]],
    apple: Optional[Tuple[int, int]],
    width: int,
    status_row: int,
) -> None:
    """Blank the apple, every segment and the score digits."""
    if apple is not None:
        _clear_segment(surface, apple)

    for segment in snake:
        _clear_segment(surface, segment)

    for x in range(SCORE_COLUMN, width):
        surface.set_cell(x, status_row, Style.DEFAULT, BLANK)


def draw_state(
    surface: Surface,
    snake: Sequence[Tuple[int, int]],
    apple: Optional[Tuple[int, int]],
    score: int,
    status_row: int,
    glyphs: Glyphs = Glyphs(),
) -> None:
    """Draw the apple, the snake (head last) and the score, then flush once."""
    if apple is not None:
        surface.set_cell(apple[0], apple[1], Style.APPLE, glyphs.apple)

    last = len(snake) - 1
    for index, (x, y) in enumerate(snake):
        if index == last:
            style, char = Style.HEAD, glyphs.head
        else:
            style, char = Style.BODY, glyphs.body
        for dx in range(SEGMENT_WIDTH):
            surface.set_cell(x + dx, y, style, char)

    for i, digit in enumerate(str(score)):
        surface.set_cell(SCORE_COLUMN + i, status_row, Style.DEFAULT, digit)

    surface.show()
