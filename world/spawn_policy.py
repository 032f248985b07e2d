# world/spawn_policy.py
"""
Which enemy appears, and where.

Tiers by wave number:
  1-2  crawler only
  3-5  crawler / stone, stone share grows each wave
  6-8  crawler / stone / wraith
  9+   first spawn of the wave is a giant, the rest are a crawler-heavy
       swarm (crawler / demon / wraith) escorting it
"""
import logging
import math
from typing import Dict, List

from core import settings
from core.events import Cue
from entities.enemy import Enemy

logger = logging.getLogger(__name__)


# weak and fast: opens the game and makes up the giant swarms
FAST_KIND = "crawler"


def variant_weights(wave: int, spawn_index: int) -> Dict[str, float]:
    wave = max(1, int(wave))

    if wave <= 2:
        return {FAST_KIND: 1.0}

    if wave <= 5:
        stone = 0.15 + 0.10 * (wave - 3)
        return {FAST_KIND: 1.0 - stone, "stone": stone}

    if wave < settings.BOSS_WAVE:
        wraith = 0.20 + 0.05 * (wave - 6)
        stone = 0.30
        return {FAST_KIND: 1.0 - stone - wraith, "stone": stone, "wraith": wraith}

    if spawn_index == 0:
        return {"giant": 1.0}
    return {FAST_KIND: 0.55, "demon": 0.30, "wraith": 0.15}


def choose_variant(wave: int, spawn_index: int, rng) -> str:
    weights = variant_weights(wave, spawn_index)
    if len(weights) == 1:
        return next(iter(weights))

    roll = rng.random() * sum(weights.values())
    acc = 0.0
    for kind, w in weights.items():
        acc += w
        if roll < acc:
            return kind
    return kind


def edge_position(width: float, height: float, rng, margin: float = settings.SPAWN_MARGIN):
    side = rng.randrange(4)
    if side == 0:  # top
        return rng.random() * width, -margin
    if side == 1:  # right
        return width + margin, rng.random() * height
    if side == 2:  # bottom
        return rng.random() * width, height + margin
    return -margin, rng.random() * height  # left


def spawn_enemy(ctx, spawn_index: int) -> Enemy:
    """Build the next wave enemy at an arena edge and add it to the shared list."""
    kind = choose_variant(ctx.wave, spawn_index, ctx.rng)
    x, y = edge_position(ctx.width, ctx.height, ctx.rng)
    enemy = Enemy(kind, x, y, ctx.wave, ctx.rng)
    ctx.enemies.append(enemy)

    if kind == "giant":
        ctx.events.emit(Cue.BOSS_SPAWN, x, y)
        logger.info("giant entered wave %d", ctx.wave)
    else:
        logger.debug("spawned %s #%d at (%.0f, %.0f)", kind, spawn_index, x, y)
    return enemy


def spawn_swarm(ctx, boss: Enemy, count: int) -> List[Enemy]:
    """Bonus crawlers around a giant; not counted against the wave target."""
    spawned = []
    for i in range(count):
        angle = (math.pi * 2 / count) * i + ctx.rng.random() * 0.5
        dist = boss.radius + ctx.rng.random() * settings.SWARM_SPREAD
        x = boss.pos.x + math.cos(angle) * dist
        y = boss.pos.y + math.sin(angle) * dist
        minion = Enemy(FAST_KIND, x, y, ctx.wave, ctx.rng)
        ctx.enemies.append(minion)
        spawned.append(minion)

    ctx.events.emit(Cue.BOSS_SWARM, boss.pos.x, boss.pos.y)
    logger.debug("giant released %d crawlers", count)
    return spawned
