import random
from typing import NamedTuple

import pygame


class Bounds(NamedTuple):
    width: float
    height: float


def clamp(v, a, b):
    return max(a, min(b, v))


def rand(lo, hi, rng=random):
    return rng.random() * (hi - lo) + lo


def dist2(a, b):
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def touching(a, b):
    """Circle overlap of two entities, radius = size / 2."""
    r = a.size * 0.5 + b.size * 0.5
    return dist2(a.pos, b.pos) <= r * r


def direction(dx, dy):
    v = pygame.Vector2(dx, dy)
    if v.length_squared() == 0:
        return pygame.Vector2(0, 0)
    return v.normalize()
