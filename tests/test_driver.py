# tests/test_driver.py

"""
Tests for the tick driver.

These run real threads with short tick intervals; the boards are sized so
the outcome does not depend on exact timing.
"""

from termsnake.core.driver import Outcome, TickDriver
from termsnake.core.state import Coordinate, GameState, Heading
from termsnake.core.surface import BufferSurface, Key, KeyEvent


def make_game(width, height, tick_interval):
    surface = BufferSurface(width, height + 1)
    state = GameState(width, height, surface, apple=(0, 0))
    driver = TickDriver(state, surface, tick_interval=tick_interval, poll_timeout=0.01)
    return state, surface, driver


class TestTickDriver:
    """Test the TickDriver class."""

    def test_runs_until_snake_leaves_board(self):
        state, surface, driver = make_game(20, 10, 0.001)

        assert driver.run() is Outcome.DIED
        # Nine moves to reach the top row, the tenth leaves the board
        assert driver.ticks == 10
        assert state.head == Coordinate(10, 0)
        assert len(surface.frames) == 10  # initial frame plus nine moves

    def test_other_keys_are_ignored(self):
        state, surface, driver = make_game(20, 10, 0.001)
        surface.push_event(KeyEvent(Key.OTHER, ord('x')))

        assert driver.run() is Outcome.DIED
        assert state.heading is Heading.UP

    def test_arrow_key_turns_snake(self):
        state, surface, driver = make_game(40, 30, 0.05)
        surface.push_event(KeyEvent(Key.RIGHT))

        assert driver.run() is Outcome.DIED
        assert state.heading is Heading.RIGHT
        assert state.head.x == 38

    def test_quit_key_stops_game(self):
        state, surface, driver = make_game(40, 30, 0.05)
        surface.push_event(KeyEvent(Key.QUIT))

        assert driver.run() is Outcome.QUIT
        assert driver.ticks < 29

    def test_request_quit_before_run(self):
        state, surface, driver = make_game(20, 10, 0.01)
        driver.request_quit()

        assert driver.run() is Outcome.QUIT
        assert driver.ticks == 0
        assert len(surface.frames) == 1
        assert state.head == Coordinate(10, 9)

    def test_listener_stops_with_game(self):
        state, surface, driver = make_game(20, 10, 0.001)
        driver.run()
        driver.join(timeout=1.0)
        assert not driver._listener.is_alive()
