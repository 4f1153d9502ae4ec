import pygame

from .entities import Intent
from .helpers import direction

TOUCH_DEAD_ZONE = 6
TOUCH_SPEED = 0.9

LEFT = (pygame.K_LEFT, pygame.K_a)
RIGHT = (pygame.K_RIGHT, pygame.K_d)
UP = (pygame.K_UP, pygame.K_w)
DOWN = (pygame.K_DOWN, pygame.K_s)
FIRE = (pygame.K_SPACE, pygame.K_z)


def _held(keys, codes):
    return any(keys[k] for k in codes)


def intent_from_keys(keys):
    """Build an Intent from a ``pygame.key.get_pressed()`` style mapping."""
    dx = _held(keys, RIGHT) - _held(keys, LEFT)
    dy = _held(keys, DOWN) - _held(keys, UP)
    return Intent.from_axes(dx, dy, _held(keys, FIRE))


def intent_toward(origin, target, fire=True):
    """Steer towards a pointer/touch target, slightly slower than the keyboard."""
    v = pygame.Vector2(target) - pygame.Vector2(origin)
    if v.length() <= TOUCH_DEAD_ZONE:
        return Intent(pygame.Vector2(0, 0), fire)
    return Intent(direction(v.x, v.y) * TOUCH_SPEED, fire)
