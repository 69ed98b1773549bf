# tests/conftest.py

"""Shared fixtures for the termsnake tests."""

import random

import pytest

from termsnake.core.surface import BufferSurface


class ScriptedRandom(random.Random):
    """Random source that hands out a fixed sequence from randrange()."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, *args, **kwargs):
        return self.values.pop(0)


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def surface():
    """A 20x11 terminal: a 20x10 playfield plus the status row."""
    return BufferSurface(20, 11)
