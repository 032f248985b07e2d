from __future__ import annotations

import random

from core import settings
from core.events import Cue
from entities.enemy import Enemy
from entities.projectile import Projectile
from world import combat
from world.arena import Arena, SessionState


def _enemy(kind: str, x: float, y: float, wave: int = 1) -> Enemy:
    return Enemy(kind, x, y, wave, random.Random(0))


def _orb_at(x: float, y: float) -> Projectile:
    return Projectile("light_orb", x, y, 0.0)


def test_single_hit_kills_weak_enemy_and_scores(arena: Arena, cues) -> None:
    demon = _enemy("demon", 100, 100)
    arena.enemies.append(demon)
    arena.projectiles.append(_orb_at(100, 100))

    combat.resolve(arena)

    assert arena.enemies == []
    assert arena.projectiles == []
    assert arena.score == settings.POINTS_PER_WAVE * 1 * 1
    assert any(c.cue == Cue.ENEMY_DEFEATED for c in cues)


def test_scenario_c_tanky_enemy_needs_three_hits(arena: Arena, cues) -> None:
    arena.waves.wave = 2
    stone = _enemy("stone", 100, 100, wave=2)
    assert stone.health == 3
    arena.enemies.append(stone)

    for _ in range(2):
        arena.projectiles.append(_orb_at(100, 100))
        combat.resolve(arena)
        assert stone in arena.enemies
        assert arena.score == 0
        assert arena.projectiles == []

    assert [c.cue for c in cues].count(Cue.ENEMY_HIT) == 2

    arena.projectiles.append(_orb_at(100, 100))
    combat.resolve(arena)
    assert stone not in arena.enemies
    assert arena.score == settings.POINTS_PER_WAVE * 2 * 3


def test_first_enemy_in_list_order_wins_not_nearest(arena: Arena) -> None:
    far = _enemy("demon", 110, 100)
    near = _enemy("demon", 100, 100)
    arena.enemies.extend([far, near])
    arena.projectiles.append(_orb_at(101, 100))

    combat.resolve(arena)

    assert arena.enemies == [near]


def test_one_enemy_per_projectile_and_remaining_projectiles_continue(arena: Arena) -> None:
    stone = _enemy("stone", 100, 100)
    other = _enemy("demon", 300, 100)
    arena.enemies.extend([stone, other])
    arena.projectiles.extend([_orb_at(100, 100), _orb_at(100, 100), _orb_at(300, 100), _orb_at(600, 50)])

    combat.resolve(arena)

    assert stone.health == 1
    assert arena.enemies == [stone]
    # only the miss survives
    assert len(arena.projectiles) == 1
    assert arena.projectiles[0].pos.x == 600


def test_no_dead_enemy_left_after_resolution(arena: Arena) -> None:
    rng = random.Random(4)
    for _ in range(30):
        kind = rng.choice(["demon", "stone", "wraith"])
        arena.enemies.append(_enemy(kind, rng.uniform(50, 300), rng.uniform(50, 300)))
    for _ in range(60):
        arena.projectiles.append(_orb_at(rng.uniform(50, 300), rng.uniform(50, 300)))

    combat.resolve(arena)

    assert all(e.health > 0 for e in arena.enemies)


def test_projectile_kill_refreshes_combat_momentum(arena: Arena) -> None:
    arena.enemies.append(_enemy("demon", 100, 100))
    arena.projectiles.append(_orb_at(100, 100))
    assert not arena.player.momentum.active

    combat.resolve(arena)

    assert arena.player.momentum.active
    assert arena.player.momentum.speed_cap(4.0) > 4.0


def test_non_lethal_hit_does_not_grant_momentum(arena: Arena) -> None:
    arena.enemies.append(_enemy("stone", 100, 100))
    arena.projectiles.append(_orb_at(100, 100))
    combat.resolve(arena)
    assert not arena.player.momentum.active


def test_scenario_b_contact_damage_until_game_over(arena: Arena, cues) -> None:
    player = arena.player
    px, py = player.pos.x, player.pos.y

    for expected in (80, 60, 40):
        arena.enemies.append(_enemy("demon", px, py))
        combat.resolve(arena)
        assert player.health == expected
        assert arena.state == SessionState.PLAYING

    arena.enemies.append(_enemy("demon", px, py))
    combat.resolve(arena)
    assert player.health == 20
    assert arena.state == SessionState.PLAYING

    arena.enemies.append(_enemy("demon", px, py))
    combat.resolve(arena)
    assert player.health <= 0
    assert arena.state == SessionState.GAME_OVER
    assert any(c.cue == Cue.GAME_OVER for c in cues)


def test_only_one_contact_per_step(arena: Arena) -> None:
    px, py = arena.player.pos.x, arena.player.pos.y
    first = _enemy("demon", px + 5, py)
    second = _enemy("demon", px - 5, py)
    arena.enemies.extend([first, second])

    combat.resolve(arena)

    assert arena.player.health == settings.PLAYER_MAX_HEALTH - settings.CONTACT_DAMAGE
    assert arena.enemies == [second]


def test_contact_kills_tanky_enemy_regardless_of_health(arena: Arena) -> None:
    px, py = arena.player.pos.x, arena.player.pos.y
    giant = _enemy("giant", px, py, wave=9)
    arena.enemies.append(giant)

    combat.resolve(arena)

    assert arena.enemies == []
    assert arena.score == 0


def test_shield_blocks_contact_damage(arena: Arena, cues) -> None:
    arena.player.shield_timer = 30
    arena.enemies.append(_enemy("demon", arena.player.pos.x, arena.player.pos.y))

    combat.resolve(arena)

    assert arena.player.health == settings.PLAYER_MAX_HEALTH
    assert arena.enemies == []
    assert any(c.cue == Cue.SHIELD_BLOCK for c in cues)


def test_touching_circles_do_not_collide(arena: Arena) -> None:
    demon = _enemy("demon", 100, 100)
    orb = _orb_at(100 + demon.radius + orb_radius(), 100)
    arena.enemies.append(demon)
    arena.projectiles.append(orb)

    combat.resolve(arena)

    assert arena.enemies == [demon]


def orb_radius() -> int:
    return Projectile("light_orb", 0, 0, 0.0).radius
