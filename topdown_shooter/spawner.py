"""Difficulty curve and everything that adds entities to a running game.

The functions that spawn take the ``Game`` as first argument and push into its
collections; they use ``game.rng`` so a seeded game spawns the same world.
"""
import logging
import math

from .entities import Enemy, EnemyKind, Particle, Powerup, PowerupKind
from .helpers import rand
from .settings import (
    BOSS_SPEED, FEATURES, MAX_WAVE_SIZE, POWERUP_DROP_CHANCE, SPAWN_INTERVAL_MIN,
)

log = logging.getLogger(__name__)

# cumulative probability, kind, spawn margin from the side walls, spawn y
WAVE_TABLE = (
    (0.7, EnemyKind.BASIC, 40, -40),
    (0.9, EnemyKind.SHOOTER, 60, -80),
    (1.0, EnemyKind.BIG, 80, -120),
)


def spawn_interval(base, score, level):
    return max(SPAWN_INTERVAL_MIN, base - score * 0.4 - level * 20)


def wave_size(level, score):
    return min(MAX_WAVE_SIZE, 1 + level // 2 + math.floor(score / 200))


def pick_enemy_kind(r):
    for edge, kind, margin, y in WAVE_TABLE:
        if r < edge:
            return kind, margin, y
    return WAVE_TABLE[-1][1:]


def spawn_wave(game, count=1):
    w, h = game.bounds
    for _ in range(count):
        kind, margin, y = pick_enemy_kind(game.rng.random())
        x = rand(margin, w - margin, game.rng)
        game.enemies.append(Enemy((x, y), kind, game.rng, hover_y=rand(40, h * 0.35, game.rng)))


def spawn_boss(game):
    if not FEATURES["BOSS"]:
        return None
    boss = Enemy((game.bounds.width / 2, -140), EnemyKind.BIG, game.rng)
    boss.hp = 18 + game.level * 6
    boss.score_val = 500 + game.level * 200
    boss.speed = BOSS_SPEED
    boss.is_boss = True
    game.enemies.append(boss)
    game.sound.play("boss")
    log.info("boss spawned at level %d (hp=%d)", game.level, boss.hp)
    return boss


def make_explosion(game, x, y, power=12, color=(255, 215, 166)):
    if FEATURES["PARTICLES"]:
        for _ in range(int(power)):
            a = rand(0, math.tau, game.rng)
            s = rand(80, 320, game.rng)
            vel = (math.cos(a) * s, math.sin(a) * s * 0.9)
            game.particles.append(Particle((x, y), vel, rand(0.4, 1.2, game.rng), rand(2, 5, game.rng), color))
    game.sound.play("boom")


def drop_powerup(game, x, y):
    if not FEATURES["POWERUPS"] or game.rng.random() > POWERUP_DROP_CHANCE:
        return None
    kinds = list(PowerupKind)
    pu = Powerup((x, y), kinds[int(game.rng.random() * len(kinds))])
    game.powerups.append(pu)
    return pu
