"""Top-down arcade shooter built on pygame."""
from .entities import Bullet, Enemy, EnemyKind, Intent, Owner, Particle, Player, Powerup, PowerupKind
from .game import Game

__version__ = "1.0.0"
