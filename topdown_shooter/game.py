import logging
import math
import random

from . import spawner
from .entities import Intent, Player, PowerupKind
from .helpers import Bounds, clamp, touching
from .settings import (
    BOSS_EVERY_LEVELS, ENEMY_BULLET_DAMAGE, ENEMY_EXIT_MARGIN, FIRERATE_BONUS,
    FIRERATE_DURATION, FIRERATE_MIN, HEALTH_BONUS, HEIGHT, HIGHSCORE_KEY,
    LEVEL_SCORE_STEP, MAX_DT, POWERUP_EXIT_MARGIN, RAM_DAMAGE, SCORE_MULT,
    SCORE_MULT_DURATION, SHIELD_DURATION, SPAWN_INTERVAL_BASE, WEAPON_DURATION, WIDTH,
)
from .sound import SoundManager

log = logging.getLogger(__name__)

SPARK = (255, 215, 166)
BLAST = (255, 204, 102)
SHIELD_BLUE = (93, 207, 255)
HURT_RED = (255, 107, 107)
HEAL_GREEN = (60, 255, 74)


class Game:
    """One play session: world state, lifecycle and the per-frame simulation step.

    Collaborators are injected: ``sound`` needs ``play(name)``, ``store`` needs
    ``get(key)``/``set(key, value)`` and ``on_game_over(score, highscore)`` is
    called once when a run ends. Pass a seeded ``rng`` for a reproducible run.
    """
    IDLE, RUNNING, PAUSED = "idle", "running", "paused"

    def __init__(self, sound=None, store=None, width=WIDTH, height=HEIGHT, rng=None, on_game_over=None):
        self.sound = sound if sound is not None else SoundManager(False)
        self.store = store
        self.on_game_over = on_game_over
        self.bounds = Bounds(width, height)
        self.rng = rng if rng is not None else random.Random()
        self.player = Player(self.bounds, self.rng)
        self.highscore = self._load_highscore()
        self.reset_state()

    def _load_highscore(self):
        if self.store is None:
            return 0
        try:
            return max(0, int(self.store.get(HIGHSCORE_KEY)))
        except (TypeError, ValueError, OverflowError) as e:
            log.warning("ignoring stored highscore: %s", e)
            return 0

    def reset_state(self):
        self.running = False
        self.paused = False
        self.score = 0.0
        self.level = 1
        self.wave = 1
        self.spawn_timer = 0.0
        self.spawn_interval = SPAWN_INTERVAL_BASE
        self.clear_world()

    def clear_world(self):
        self.bullets = []
        self.enemy_bullets = []
        self.enemies = []
        self.particles = []
        self.powerups = []

    @property
    def state(self):
        if not self.running:
            return self.IDLE
        return self.PAUSED if self.paused else self.RUNNING

    @property
    def display_score(self): return math.floor(self.score)

    # ---------------- lifecycle ----------------
    def start(self):
        self.reset_state()
        self.player.reset()
        self.running = True
        log.info("new game started (highscore %d)", self.highscore)

    def pause(self):
        if self.running:
            self.paused = True

    def resume(self):
        if self.running:
            self.paused = False

    def toggle_pause(self):
        if self.running:
            self.paused = not self.paused

    def game_over(self):
        self.running = False
        self.paused = False
        self.player.alive = False
        s = self.display_score
        if s > self.highscore:
            self.highscore = s
            if self.store is not None:
                self.store.set(HIGHSCORE_KEY, s)
        self.clear_world()
        self.sound.play("gameover")
        log.info("game over: score %d, level %d, highscore %d", s, self.level, self.highscore)
        if self.on_game_over is not None:
            self.on_game_over(s, self.highscore)

    # ---------------- simulation ----------------
    def tick(self, raw_dt, intent=None):
        """Advance one frame of wall-clock time. Stalls longer than MAX_DT are cut short."""
        dt = clamp(raw_dt, 0.0, MAX_DT)
        self.update(dt, intent)
        return dt

    def update(self, dt, intent=None):
        if not self.running or self.paused:
            return
        dt = clamp(dt, 0.0, MAX_DT)
        if intent is None:
            intent = Intent()

        self.update_spawning(dt)
        self.update_level()

        fired = self.player.update(dt, intent)
        if fired:
            self.bullets.extend(fired)
            self.sound.play("shoot")

        for b in self.bullets: b.update(dt)
        for b in self.enemy_bullets: b.update(dt)
        self.bullets = [b for b in self.bullets if not b.expired(self.bounds)]
        self.enemy_bullets = [b for b in self.enemy_bullets if not b.expired(self.bounds)]

        if not self.update_enemies(dt):
            return
        if not self.check_enemy_bullets():
            return

        for p in self.particles: p.update(dt)
        self.particles = [p for p in self.particles if not p.dead]

        self.update_powerups(dt)

    def update_spawning(self, dt):
        self.spawn_timer += dt * 1000
        interval = spawner.spawn_interval(self.spawn_interval, self.score, self.level)
        if self.spawn_timer > interval:
            self.spawn_timer = 0.0
            spawner.spawn_wave(self, spawner.wave_size(self.level, self.score))

    def update_level(self):
        if self.score > self.level * LEVEL_SCORE_STEP:
            self.level += 1
            self.wave += 1
            log.info("level %d reached at score %d", self.level, self.display_score)
            if self.level % BOSS_EVERY_LEVELS == 0:
                spawner.spawn_boss(self)

    def update_enemies(self, dt):
        """Move enemies and resolve their collisions. Returns False if the run ended."""
        player = self.player
        exit_y = self.bounds.height + ENEMY_EXIT_MARGIN
        kept = []
        for e in reversed(list(self.enemies)):
            shot = e.update(dt, player.pos)
            if shot is not None:
                self.enemy_bullets.append(shot)

            if e.pos.y > exit_y:
                if e.is_boss:
                    log.info("boss escaped")
                    self.game_over()
                    return False
                continue

            if self.hit_enemy(e):
                continue

            if player.alive and touching(e, player):
                if player.shield:
                    player.consume_shield()
                    spawner.make_explosion(self, player.pos.x, player.pos.y, 18, SHIELD_BLUE)
                    continue
                dead = player.take_damage(RAM_DAMAGE)
                self.sound.play("hit")
                spawner.make_explosion(self, player.pos.x, player.pos.y, 12, HURT_RED)
                if dead:
                    self.game_over()
                    return False
                continue
            kept.append(e)
        kept.reverse()
        self.enemies = kept
        self.bullets = [b for b in self.bullets if b.life > 0]
        return True

    def hit_enemy(self, e):
        """Apply the first live player bullet touching ``e``. Returns True if ``e`` died."""
        for b in reversed(self.bullets):
            if b.life <= 0 or not touching(e, b):
                continue
            # one hit per enemy per frame
            e.hp -= 1
            b.life = 0
            spawner.make_explosion(self, b.pos.x, b.pos.y, 6, SPARK)
            if e.hp <= 0:
                self.enemy_killed(e)
                return True
            return False
        return False

    def enemy_killed(self, e):
        self.score += e.score_val * (self.player.score_multiplier or 1)
        spawner.make_explosion(self, e.pos.x, e.pos.y, min(36, e.size * 0.8), BLAST)
        spawner.drop_powerup(self, e.pos.x, e.pos.y)

    def check_enemy_bullets(self):
        player = self.player
        for b in reversed(self.enemy_bullets):
            if b.life <= 0 or not touching(b, player):
                continue
            b.life = 0
            if player.shield:
                player.consume_shield()
                spawner.make_explosion(self, player.pos.x, player.pos.y, 10, SHIELD_BLUE)
                continue
            dead = player.take_damage(ENEMY_BULLET_DAMAGE)
            self.sound.play("hit")
            spawner.make_explosion(self, player.pos.x, player.pos.y, 8, HURT_RED)
            if dead:
                self.game_over()
                return False
        self.enemy_bullets = [b for b in self.enemy_bullets if b.life > 0]
        return True

    def update_powerups(self, dt):
        limit = self.bounds.height + POWERUP_EXIT_MARGIN
        kept = []
        for pu in self.powerups:
            pu.update(dt)
            if pu.pos.y > limit:
                continue
            if touching(pu, self.player):
                self.apply_powerup(pu.kind)
                continue
            kept.append(pu)
        self.powerups = kept

    def apply_powerup(self, kind: PowerupKind):
        p = self.player
        if kind is PowerupKind.HEALTH:
            p.hp = min(p.max_hp, p.hp + HEALTH_BONUS)
            spawner.make_explosion(self, p.pos.x, p.pos.y, 8, HEAL_GREEN)
        elif kind is PowerupKind.FIRERATE:
            faster = max(FIRERATE_MIN, p.fire_rate - FIRERATE_BONUS)
            if faster < p.fire_rate:
                p.fire_boosts.append([FIRERATE_DURATION, p.fire_rate - faster])
                p.fire_rate = faster
        elif kind is PowerupKind.SHIELD:
            p.shield = True
            p.shield_time = SHIELD_DURATION
        elif kind is PowerupKind.WEAPON:
            p.upgrade_weapon(WEAPON_DURATION)
        elif kind is PowerupKind.SCORE:
            p.score_multiplier = SCORE_MULT
            p.multiplier_time = SCORE_MULT_DURATION
        self.sound.play("power")
