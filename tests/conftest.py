import random

import pytest

from topdown_shooter.game import Game
from topdown_shooter.helpers import Bounds


class FakeSound:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


class MemoryStore:
    def __init__(self, **values):
        self.values = dict(values)
        self.writes = []

    def get(self, key, default=0):
        return self.values.get(key, default)

    def set(self, key, value):
        self.values[key] = value
        self.writes.append((key, value))


class FixedRandom:
    """Stands in for random.Random where a test needs one exact draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def bounds():
    return Bounds(800, 600)


@pytest.fixture
def sound():
    return FakeSound()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def game(sound, store):
    g = Game(sound=sound, store=store, width=800, height=600, rng=random.Random(1234))
    g.start()
    return g
