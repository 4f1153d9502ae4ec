import pygame

from .entities import EnemyKind, Owner, PowerupKind
from .helpers import clamp

BG = (4, 6, 10)
TEXT = (230, 241, 255)
PLAYER_COLOR = (174, 239, 255)
BULLET_COLORS = {Owner.PLAYER: (255, 215, 166), Owner.ENEMY: (255, 179, 179)}
ENEMY_COLORS = {EnemyKind.BASIC: (255, 107, 107), EnemyKind.SHOOTER: (255, 168, 214), EnemyKind.BIG: (255, 184, 107)}
POWERUP_LOOK = {
    PowerupKind.HEALTH: ((60, 255, 74), "H"),
    PowerupKind.FIRERATE: ((166, 107, 255), "F"),
    PowerupKind.SHIELD: ((93, 207, 255), "S"),
    PowerupKind.WEAPON: ((255, 211, 107), "W"),
    PowerupKind.SCORE: ((255, 107, 214), "+"),
}


def draw_background(surf, t):
    surf.fill(BG)
    w, h = surf.get_size()
    # faint scrolling streaks
    off = int(t * 33) % 40 - 40
    for x in range(0, w, 60):
        pygame.draw.line(surf, (18, 20, 26), (x, off), (x, h + 80))


def draw_player(surf, player):
    if not player.alive: return
    x, y = player.pos.x, player.pos.y
    if player.shield:
        pygame.draw.circle(surf, (90, 180, 255), (int(x), int(y)), int(player.size * 0.8), width=2)
    pts = [(0, -16), (12, 12), (6, 8), (-6, 8), (-12, 12)]
    pygame.draw.polygon(surf, PLAYER_COLOR, [(x + px, y + py) for px, py in pts])


def draw_enemy(surf, e):
    r = pygame.Rect(0, 0, int(e.size * 1.2), int(e.size * 1.8))
    r.center = (int(e.pos.x), int(e.pos.y))
    pygame.draw.ellipse(surf, ENEMY_COLORS[e.kind], r)
    pygame.draw.circle(surf, (43, 43, 43), r.center, int(e.size * 0.22))


def draw_powerup(surf, pu, font):
    color, letter = POWERUP_LOOK[pu.kind]
    c = (int(pu.pos.x), int(pu.pos.y))
    pygame.draw.circle(surf, color, c, pu.size // 2)
    s = font.render(letter, True, (34, 34, 34))
    surf.blit(s, s.get_rect(center=c))


def draw_particle(surf, p):
    a = p.alpha
    if a <= 0: return
    color = tuple(int(ch * a) for ch in p.color)
    pygame.draw.circle(surf, color, (int(p.pos.x), int(p.pos.y)), max(1, int(p.size)))


def draw_hud(surf, game, font):
    p = game.player
    surf.blit(font.render(f"Score: {game.display_score}  High: {game.highscore}", True, TEXT), (14, 10))
    x, y, bar_w, bar_h = 14, 36, 160, 12
    pygame.draw.rect(surf, (40, 40, 50), (x, y, bar_w, bar_h))
    frac = clamp(p.hp / p.max_hp, 0, 1)
    pygame.draw.rect(surf, (60, 255, 74), (x, y, int(bar_w * frac), bar_h))
    surf.blit(font.render(f"HP {p.hp}/{p.max_hp}", True, TEXT), (x + bar_w + 8, y - 3))
    surf.blit(font.render(f"Weapon Lv: {p.weapon_level}", True, TEXT), (14, y + 24))
    surf.blit(font.render(f"Shield: {'ON' if p.shield else 'OFF'}", True, TEXT), (14, y + 44))
    surf.blit(font.render(f"Level {game.level}", True, TEXT), (surf.get_width() - 100, 10))
    if p.score_multiplier > 1:
        surf.blit(font.render(f"x{p.score_multiplier} {p.multiplier_time:0.1f}s", True, (255, 107, 214)), (surf.get_width() - 100, 32))


def _center(surf, font, text, y):
    s = font.render(text, True, (245, 245, 250))
    surf.blit(s, s.get_rect(center=(surf.get_width() // 2, y)))


def draw_overlay(surf, game, font, bigfont):
    mid = surf.get_height() // 2
    if game.state == game.PAUSED:
        _center(surf, bigfont, "PAUSED", mid - 30)
        _center(surf, font, "Press P to resume", mid + 20)
    elif game.state == game.IDLE:
        if game.player.alive:
            _center(surf, bigfont, "TOP-DOWN SHOOTER", mid - 60)
        else:
            _center(surf, bigfont, "GAME OVER", mid - 60)
            _center(surf, font, f"Score: {game.display_score}   Highscore: {game.highscore}", mid - 10)
        _center(surf, font, "ENTER to start | Move: WASD/Arrows | Shoot: SPACE | P: Pause", mid + 30)


def draw(surf, game, font, bigfont, t=0.0):
    """Draw one frame. Reads the game, never changes it."""
    draw_background(surf, t)
    draw_player(surf, game.player)
    for b in game.bullets + game.enemy_bullets:
        pygame.draw.circle(surf, BULLET_COLORS[b.owner], (int(b.pos.x), int(b.pos.y)), b.size // 2)
    for e in game.enemies: draw_enemy(surf, e)
    for pu in game.powerups: draw_powerup(surf, pu, font)
    for p in game.particles: draw_particle(surf, p)
    draw_hud(surf, game, font)
    draw_overlay(surf, game, font, bigfont)
