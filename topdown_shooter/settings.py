# Top-Down Shooter
# ===============================================================#
# Controls:
# Move: WASD/Arrows or hold mouse | Shoot: SPACE/Z (hold) | Pause: P | Start: ENTER | Quit: ESC

import os

#  EASY SETTINGS (Edit here)
FEATURES = {
    "POWERUPS": True,
    "BOSS": True,
    "PARTICLES": True,
    "SOUNDS": True,
    "FULLSCREEN": False,     # True = fullscreen
}

WIDTH, HEIGHT = 800, 600
FPS = 60
MAX_DT = 0.05

PLAYER_SIZE = 28
PLAYER_SPEED = 360.0
PLAYER_FIRE_RATE = 160.0     # ms between shots
PLAYER_MAX_HP = 5
PLAYER_BOTTOM_OFFSET = 80
MAX_WEAPON_LEVEL = 5

BULLET_SIZE = 6
BULLET_LIFETIME = 2.2
BULLET_MARGIN_Y = 60
BULLET_MARGIN_X = 80

ENEMY_EXIT_MARGIN = 120
ENEMY_BULLET_SPEED = (220.0, 340.0)
ENEMY_SHOOT_DELAY = (1.0, 2.2)
RAM_DAMAGE = 2
ENEMY_BULLET_DAMAGE = 1

SPAWN_INTERVAL_BASE = 1000.0
SPAWN_INTERVAL_MIN = 300.0
MAX_WAVE_SIZE = 4
LEVEL_SCORE_STEP = 500
BOSS_EVERY_LEVELS = 3
BOSS_SPEED = 18.0

PARTICLE_GRAVITY = 300.0

POWERUP_SIZE = 22
POWERUP_SPEED = 80.0
POWERUP_EXIT_MARGIN = 40
POWERUP_DROP_CHANCE = 0.12
HEALTH_BONUS = 2
FIRERATE_BONUS = 40.0
FIRERATE_MIN = 70.0
FIRERATE_MAX = 320.0
FIRERATE_DURATION = 15.0
SHIELD_DURATION = 12.0
WEAPON_DURATION = 12.0
SCORE_MULT = 2
SCORE_MULT_DURATION = 15.0

MASTER_VOLUME = 0.30
SFX_VOLUME = 0.65
SAMPLE_RATE = 44100

HIGHSCORE_KEY = "topdown_highscore"
HIGHSCORE_FILE = os.environ.get("TOPDOWN_SHOOTER_HIGHSCORE", "highscore.json")
