# tests/test_render.py

"""Tests for what a game draws onto its surface."""

from termsnake.core.render import SCORE_COLUMN, Glyphs, clear_state, draw_state
from termsnake.core.settings import APPLE, FULL_BLOCK, GameSettings
from termsnake.core.state import GameState, Heading, StepResult
from termsnake.core.surface import BLANK, BufferSurface, Style


class TestInitialFrame:
    """Test the frame drawn before the first tick."""

    def test_status_row_shows_score_label(self, surface):
        state = GameState(20, 10, surface)
        state.draw()
        assert surface.row_text(10).startswith("Score: 0")
        assert len(surface.frames) == 1

    def test_head_covers_two_cells(self, surface):
        state = GameState(20, 10, surface)
        state.draw()
        assert surface.get_content(10, 9) == FULL_BLOCK
        assert surface.get_content(11, 9) == FULL_BLOCK
        assert surface.style_at(10, 9) is Style.HEAD
        assert surface.style_at(11, 9) is Style.HEAD
        assert surface.get_content(12, 9) == BLANK


class TestTickFrames:
    """Test the frames drawn by advance_one_step()."""

    def test_move_clears_old_cells(self, surface):
        state = GameState(20, 10, surface, apple=(0, 0))
        state.draw()
        state.advance_one_step()

        assert surface.get_content(10, 9) == BLANK
        assert surface.get_content(11, 9) == BLANK
        assert surface.style_at(10, 8) is Style.HEAD
        assert surface.get_content(0, 0) == APPLE
        assert surface.style_at(0, 0) is Style.APPLE
        assert len(surface.frames) == 2

    def test_growth_draws_body_and_score(self, surface, scripted_random):
        state = GameState(
            20, 10, surface, apple=(12, 9), heading=Heading.RIGHT,
            rng=scripted_random([2, 3]),
        )
        state.draw()
        state.advance_one_step()

        assert surface.style_at(10, 9) is Style.BODY
        assert surface.style_at(11, 9) is Style.BODY
        assert surface.style_at(12, 9) is Style.HEAD
        assert surface.style_at(13, 9) is Style.HEAD
        assert surface.get_content(2, 3) == APPLE
        assert surface.get_content(SCORE_COLUMN, 10) == "1"
        assert surface.row_text(10).startswith("Score: 1")

    def test_game_over_draws_nothing(self, surface):
        state = GameState(20, 10, surface, snake=[(10, 0)], apple=(0, 5))
        state.draw()
        before = dict(surface.cells)

        assert state.advance_one_step() is StepResult.GAME_OVER
        assert len(surface.frames) == 1
        assert surface.cells == before

    def test_custom_glyphs(self, surface):
        settings = GameSettings(head_glyph="@", body_glyph="o", apple_glyph="*")
        state = GameState(
            20, 10, surface, snake=[(6, 5), (8, 5)], apple=(0, 0),
            heading=Heading.RIGHT, glyphs=Glyphs.from_settings(settings),
        )
        state.advance_one_step()
        assert surface.row_text(5)[8:12] == "oo@@"
        assert surface.get_content(0, 0) == "*"


class TestDrawFunctions:
    """Test the drawing helpers on their own."""

    def test_clear_state_blanks_score_digits_only(self):
        surface = BufferSurface(20, 3)
        draw_state(surface, [(0, 0)], (4, 1), 123, 2)
        for i, char in enumerate("Score:"):
            surface.set_cell(i, 2, Style.DEFAULT, char)
        assert surface.row_text(2).startswith("Score: 123")

        clear_state(surface, [(0, 0)], (4, 1), 20, 2)
        assert surface.row_text(2).rstrip() == "Score:"
        assert surface.get_content(0, 0) == BLANK
        assert surface.get_content(4, 1) == BLANK

    def test_draw_state_flushes_once(self):
        surface = BufferSurface(10, 3)
        draw_state(surface, [(0, 0), (2, 0), (4, 0)], None, 0, 2)
        assert len(surface.frames) == 1
        assert surface.style_at(4, 0) is Style.HEAD
        assert surface.style_at(0, 0) is Style.BODY
