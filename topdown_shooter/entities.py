import math
import random
from dataclasses import dataclass, field
from enum import Enum

import pygame

from .helpers import clamp, direction, rand
from .settings import (
    BULLET_LIFETIME, BULLET_MARGIN_X, BULLET_MARGIN_Y, BULLET_SIZE,
    ENEMY_BULLET_SPEED, ENEMY_SHOOT_DELAY, FIRERATE_MAX, MAX_WEAPON_LEVEL,
    PARTICLE_GRAVITY, PLAYER_BOTTOM_OFFSET, PLAYER_FIRE_RATE, PLAYER_MAX_HP,
    PLAYER_SIZE, PLAYER_SPEED, POWERUP_SIZE, POWERUP_SPEED,
)


class Owner(Enum):
    PLAYER = "player"
    ENEMY = "enemy"


class EnemyKind(Enum):
    BASIC = "basic"
    SHOOTER = "shooter"
    BIG = "big"


class PowerupKind(Enum):
    HEALTH = "health"
    FIRERATE = "firerate"
    SHIELD = "shield"
    WEAPON = "weapon"
    SCORE = "score"


# size, speed range, hp, score value
ENEMY_STATS = {
    EnemyKind.BASIC: (28, (40, 95), 1, 10),
    EnemyKind.SHOOTER: (36, (35, 70), 2, 30),
    EnemyKind.BIG: (48, (18, 45), 6, 120),
}


@dataclass
class Intent:
    """Per-frame input: a movement direction of length <= 1 and a fire flag."""
    direction: pygame.Vector2 = field(default_factory=pygame.Vector2)
    fire: bool = False

    @classmethod
    def from_axes(cls, dx, dy, fire=False):
        v = pygame.Vector2(dx, dy)
        if v.length_squared() > 1:
            v = v.normalize()
        return cls(v, bool(fire))


class Bullet:
    def __init__(self, pos, vel, owner=Owner.PLAYER):
        self.pos = pygame.Vector2(pos)
        self.vel = pygame.Vector2(vel)
        self.owner = owner
        self.size = BULLET_SIZE
        self.life = BULLET_LIFETIME
    def update(self, dt):
        self.pos += self.vel * dt
        self.life -= dt
    def expired(self, bounds):
        return (self.life <= 0 or self.pos.y < -BULLET_MARGIN_Y or self.pos.y > bounds.height + BULLET_MARGIN_Y
                or self.pos.x < -BULLET_MARGIN_X or self.pos.x > bounds.width + BULLET_MARGIN_X)


class Player:
    def __init__(self, bounds, rng=random):
        self.bounds = bounds
        self.rng = rng
        self.reset()

    def reset(self):
        self.pos = pygame.Vector2(self.bounds.width / 2, self.bounds.height - PLAYER_BOTTOM_OFFSET)
        self.size = PLAYER_SIZE
        self.speed = PLAYER_SPEED
        self.cooldown = 0.0
        self.fire_rate = PLAYER_FIRE_RATE
        self.alive = True
        self.hp = PLAYER_MAX_HP
        self.max_hp = PLAYER_MAX_HP
        self.weapon_level = 1
        self.weapon_timer = 0.0
        self.score_multiplier = 1
        self.multiplier_time = 0.0
        self.shield = False
        self.shield_time = 0.0
        # [seconds left, fire rate ms to give back]
        self.fire_boosts = []

    def update(self, dt, intent: Intent):
        if not self.alive:
            return []
        half = self.size / 2
        self.pos += intent.direction * self.speed * dt
        self.pos.x = clamp(self.pos.x, half, self.bounds.width - half)
        self.pos.y = clamp(self.pos.y, half, self.bounds.height - half)

        fired = []
        self.cooldown -= dt * 1000
        if intent.fire and self.cooldown <= 0:
            self.cooldown = self.fire_rate
            fired = self.fire()

        if self.weapon_timer > 0:
            self.weapon_timer -= dt
            if self.weapon_timer <= 0:
                self.weapon_timer = 0.0
                self.weapon_level = max(1, self.weapon_level - 1)

        self.update_effects(dt)
        return fired

    def update_effects(self, dt):
        if self.shield_time > 0:
            self.shield_time = max(0.0, self.shield_time - dt)
            if self.shield_time == 0:
                self.shield = False
        if self.multiplier_time > 0:
            self.multiplier_time = max(0.0, self.multiplier_time - dt)
            if self.multiplier_time == 0:
                self.score_multiplier = 1
        for boost in self.fire_boosts:
            boost[0] -= dt
            if boost[0] <= 0:
                self.fire_rate = min(FIRERATE_MAX, self.fire_rate + boost[1])
        self.fire_boosts = [b for b in self.fire_boosts if b[0] > 0]

    def fire(self):
        px, py = self.pos.x, self.pos.y - self.size / 2
        lvl = self.weapon_level
        if lvl == 1:
            shots = [((px, py), (0, -720))]
        elif lvl == 2:
            shots = [((px - 10, py), (-60, -700)), ((px + 10, py), (60, -700))]
        elif lvl == 3:
            shots = [((px, py), (0, -820)),
                     ((px - 14, py + 4), (-120, -720)),
                     ((px + 14, py + 4), (120, -720))]
        else:
            # rapid burst
            shots = [((px + rand(-8, 8, self.rng), py + i * 2), (rand(-30, 30, self.rng), -720 - i * 40))
                     for i in range(3)]
        return [Bullet(pos, vel, Owner.PLAYER) for pos, vel in shots]

    def take_damage(self, dmg: int):
        self.hp = clamp(self.hp - dmg, 0, self.max_hp)
        return self.hp <= 0

    def consume_shield(self):
        self.shield = False
        self.shield_time = 0.0

    def upgrade_weapon(self, seconds):
        self.weapon_level = min(MAX_WEAPON_LEVEL, self.weapon_level + 1)
        self.weapon_timer += seconds


class Enemy:
    def __init__(self, pos, kind=EnemyKind.BASIC, rng=random, hover_y=None):
        self.pos = pygame.Vector2(pos)
        self.kind = kind
        self.rng = rng
        size, speed, hp, score_val = ENEMY_STATS[kind]
        self.size = size
        self.speed = rand(*speed, rng)
        self.hp = hp
        self.score_val = score_val
        self.shoot_timer = rand(1.2, 3.0, rng)
        self.angle = rand(0, math.tau, rng)
        self.t = 0.0
        self.is_boss = False
        self.hover_y = hover_y
        # shooters given a hover line fly down to it before orbiting
        self.entering = kind is EnemyKind.SHOOTER and hover_y is not None and self.pos.y < hover_y

    def update(self, dt, target):
        """Move one step. Shooters return the bullet they fire at ``target``, if any."""
        self.t += dt
        if self.kind is EnemyKind.BASIC:
            self.pos.y += self.speed * dt
            self.pos.x += math.sin(self.pos.y / 30 + self.angle) * 14 * dt
        elif self.kind is EnemyKind.BIG:
            self.pos.y += self.speed * dt * 0.6
            self.pos.x += math.sin(self.t * 0.4 + self.angle) * 26 * dt
        elif self.kind is EnemyKind.SHOOTER:
            if self.entering:
                self.pos.y += self.speed * dt
                if self.pos.y >= self.hover_y:
                    self.entering = False
            else:
                self.pos.y += math.cos(self.t * 0.6 + self.angle) * 10 * dt
                self.pos.x += math.sin(self.t * 0.8 + self.angle) * 18 * dt
            self.shoot_timer -= dt
            if self.shoot_timer <= 0:
                self.shoot_timer = rand(*ENEMY_SHOOT_DELAY, self.rng)
                aim = direction(target.x - self.pos.x, target.y - self.pos.y)
                return Bullet(self.pos, aim * rand(*ENEMY_BULLET_SPEED, self.rng), Owner.ENEMY)
        return None


class Particle:
    def __init__(self, pos, vel, life, size, color=(255, 215, 166)):
        self.pos = pygame.Vector2(pos)
        self.vel = pygame.Vector2(vel)
        self.life = life
        self.size = size
        self.color = color
    def update(self, dt):
        self.pos += self.vel * dt
        self.vel.y += PARTICLE_GRAVITY * dt
        self.life -= dt
    @property
    def alpha(self): return clamp(self.life, 0.0, 1.0)
    @property
    def dead(self): return self.life <= 0


class Powerup:
    def __init__(self, pos, kind: PowerupKind):
        self.pos = pygame.Vector2(pos)
        self.kind = kind
        self.size = POWERUP_SIZE
        self.speed = POWERUP_SPEED
    def update(self, dt): self.pos.y += self.speed * dt
