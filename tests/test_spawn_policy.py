from __future__ import annotations

import random

import pytest

from core import settings
from core.events import Cue
from entities.enemy import Enemy
from world import spawn_policy
from world.arena import Arena
from world.enemy_defs import ENEMIES, ENEMY_KINDS, scaled_health, scaled_stat


@pytest.mark.parametrize("wave", [1, 2])
def test_opening_waves_only_the_fast_variant(wave: int) -> None:
    rng = random.Random(wave)
    kinds = {spawn_policy.choose_variant(wave, i, rng) for i in range(200)}
    assert kinds == {spawn_policy.FAST_KIND}


def test_middle_waves_mix_fast_and_stone() -> None:
    rng = random.Random(5)
    kinds = {spawn_policy.choose_variant(4, i, rng) for i in range(500)}
    assert kinds == {"crawler", "stone"}

    stone_shares = [spawn_policy.variant_weights(w, 0)["stone"] for w in (3, 4, 5)]
    assert stone_shares == sorted(stone_shares)
    assert stone_shares[0] < stone_shares[-1]


def test_late_waves_add_wraiths() -> None:
    rng = random.Random(6)
    kinds = {spawn_policy.choose_variant(7, i, rng) for i in range(500)}
    assert kinds == {"crawler", "stone", "wraith"}


def test_boss_waves_open_with_a_giant() -> None:
    rng = random.Random(9)
    for wave in (9, 10, 15):
        assert spawn_policy.choose_variant(wave, 0, rng) == "giant"

    escorts = {spawn_policy.choose_variant(9, i, rng) for i in range(1, 500)}
    assert "giant" not in escorts
    assert escorts <= {"crawler", "demon", "wraith"}

    weights = spawn_policy.variant_weights(9, 1)
    assert max(weights, key=weights.get) == "crawler"


def test_weights_sum_to_one() -> None:
    for wave in range(1, 20):
        for index in (0, 1, 5):
            assert sum(spawn_policy.variant_weights(wave, index).values()) == pytest.approx(1.0)


def test_edge_positions_are_outside_the_arena() -> None:
    rng = random.Random(11)
    for _ in range(200):
        x, y = spawn_policy.edge_position(960, 640, rng)
        outside_x = x < 0 or x > 960
        outside_y = y < 0 or y > 640
        assert outside_x or outside_y


@pytest.mark.parametrize("kind", ENEMY_KINDS)
def test_stats_scale_monotonically_and_clamp(kind: str) -> None:
    d = ENEMIES[kind]
    for stat in ("radius", "speed"):
        values = [scaled_stat(kind, stat, w) for w in range(1, 60)]
        assert values == sorted(values)
        assert values[-1] == d["max_" + stat]
    healths = [scaled_health(kind, w) for w in range(1, 200)]
    assert healths == sorted(healths)
    assert healths[-1] <= d["max_health"]


def test_demon_matches_classic_scaling() -> None:
    demon = Enemy("demon", 0, 0, wave=3, rng=random.Random(1))
    assert demon.radius == 14
    assert demon.speed == pytest.approx(0.86)
    assert demon.health == 1


def test_spawn_enemy_appends_to_shared_list(arena: Arena, cues) -> None:
    arena.waves.wave = 9
    boss = spawn_policy.spawn_enemy(arena, 0)
    assert arena.enemies == [boss]
    assert boss.kind == "giant"
    assert boss.wave == 9
    assert any(c.cue == Cue.BOSS_SPAWN for c in cues)


def test_swarm_count_range() -> None:
    rng = random.Random(2)
    seen = set()
    for _ in range(50):
        giant = Enemy("giant", 0, 0, 9, rng)
        giant.swarm_timer = settings.SWARM_INTERVAL - 1
        seen.add(giant.update(giant.pos + (100, 0), rng))
    assert seen == {3, 4}


def test_fast_variant_is_the_quickest_non_boss_and_fills_swarms(arena: Arena) -> None:
    fast = spawn_policy.FAST_KIND
    for wave in (1, 5, 12):
        speeds = {k: scaled_stat(k, "speed", wave) for k in ENEMY_KINDS if k != "giant"}
        assert max(speeds, key=speeds.get) == fast
    assert spawn_policy.choose_variant(1, 0, random.Random(0)) == fast

    arena.waves.wave = 9
    boss = spawn_policy.spawn_enemy(arena, 0)
    minions = spawn_policy.spawn_swarm(arena, boss, 3)
    assert {m.kind for m in minions} == {fast}
