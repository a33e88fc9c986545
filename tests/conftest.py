"""Shared fixtures for the engine tests."""

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class ScriptedRandom:
    """random.Random stand-in that replays fixed draws.

    randrange() pops from ints, random() pops from floats, in call order.
    """

    def __init__(self, ints=(), floats=()):
        self.ints = list(ints)
        self.floats = list(floats)

    def randrange(self, *args):
        return self.ints.pop(0)

    def random(self):
        return self.floats.pop(0)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
