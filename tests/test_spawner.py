import pytest

from topdown_shooter import spawner
from topdown_shooter.entities import EnemyKind, PowerupKind
from topdown_shooter.settings import FEATURES

from .conftest import FixedRandom


@pytest.mark.parametrize("score, level, expected", [
    (0, 1, 980),
    (500, 2, 760),
    (5000, 1, 300),
])
def test_spawn_interval(score, level, expected):
    assert spawner.spawn_interval(1000, score, level) == pytest.approx(expected)


@pytest.mark.parametrize("level, score, expected", [
    (1, 0, 1),
    (2, 0, 2),
    (1, 450, 3),
    (9, 2000, 4),
])
def test_wave_size(level, score, expected):
    assert spawner.wave_size(level, score) == expected


@pytest.mark.parametrize("r, kind", [
    (0.0, EnemyKind.BASIC),
    (0.69, EnemyKind.BASIC),
    (0.7, EnemyKind.SHOOTER),
    (0.89, EnemyKind.SHOOTER),
    (0.9, EnemyKind.BIG),
    (0.999, EnemyKind.BIG),
])
def test_wave_weights(r, kind):
    assert spawner.pick_enemy_kind(r)[0] is kind


def test_spawn_wave_adds_enemies_above_the_screen(game):
    spawner.spawn_wave(game, 4)
    assert len(game.enemies) == 4
    for e in game.enemies:
        assert e.pos.y < 0
        assert 40 <= e.pos.x <= 760
        assert not e.is_boss


def test_spawn_boss_scales_with_level(game, sound):
    game.level = 3
    boss = spawner.spawn_boss(game)
    assert boss in game.enemies
    assert boss.is_boss
    assert boss.kind is EnemyKind.BIG
    assert boss.hp == 36
    assert boss.score_val == 1100
    assert boss.speed == 18
    assert tuple(boss.pos) == (400, -140)
    assert "boss" in sound.played


def test_boss_feature_flag(game, monkeypatch):
    monkeypatch.setitem(FEATURES, "BOSS", False)
    assert spawner.spawn_boss(game) is None
    assert game.enemies == []


def test_make_explosion(game, sound):
    spawner.make_explosion(game, 10, 20, power=22.4, color=(1, 2, 3))
    assert len(game.particles) == 22
    assert all(p.color == (1, 2, 3) for p in game.particles)
    assert all(0.4 <= p.life <= 1.2 for p in game.particles)
    assert sound.played == ["boom"]


def test_drop_powerup_hits(game):
    game.rng = FixedRandom(0.0)
    pu = spawner.drop_powerup(game, 5, 6)
    assert pu.kind is PowerupKind.HEALTH
    assert game.powerups == [pu]


def test_drop_powerup_misses(game):
    game.rng = FixedRandom(0.5)
    assert spawner.drop_powerup(game, 5, 6) is None
    assert game.powerups == []
