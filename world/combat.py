# world/combat.py
"""
Per-step collision resolution. Runs after every entity has moved.

Pass 1, projectile x enemy: each projectile damages at most one enemy, the
first overlapping one in list order (not the nearest). The projectile is
always consumed. Only lethal hits score and remove the enemy.

Pass 2, enemy x player: the first overlapping enemy in list order hurts the
player and is removed whatever its health; at most one contact per step.
"""
import logging

from core import settings, utils
from core.events import Cue

logger = logging.getLogger(__name__)


def circles_overlap(a, b) -> bool:
    return utils.circles_overlap(a.pos.x, a.pos.y, a.radius, b.pos.x, b.pos.y, b.radius)


def damage_enemy(ctx, enemy, amount: int = 1) -> bool:
    """Damage one enemy; on a kill award points, notify, remove it. True if lethal."""
    if not enemy.take_hit(amount):
        ctx.events.emit(Cue.ENEMY_HIT, enemy.pos.x, enemy.pos.y)
        return False

    points = enemy.points(ctx.wave)
    ctx.score += points
    ctx.events.emit(Cue.ENEMY_DEFEATED, enemy.pos.x, enemy.pos.y)
    if enemy in ctx.enemies:
        ctx.enemies.remove(enemy)
    logger.debug("%s defeated (+%d)", enemy.kind, points)
    return True


def resolve_projectiles(ctx):
    projectiles = ctx.projectiles
    enemies = ctx.enemies

    i = 0
    while i < len(projectiles):
        projectile = projectiles[i]

        target = None
        for enemy in enemies:
            if circles_overlap(projectile, enemy):
                target = enemy
                break

        if target is None:
            i += 1
            continue

        # consumed; the next projectile slides into index i
        del projectiles[i]
        if damage_enemy(ctx, target, 1):
            ctx.player.momentum.refresh()


def resolve_contacts(ctx):
    player = ctx.player
    for enemy in ctx.enemies:
        if not player.overlaps(enemy):
            continue

        ctx.enemies.remove(enemy)
        if player.take_damage(settings.CONTACT_DAMAGE):
            ctx.events.emit(Cue.PLAYER_HURT, player.pos.x, player.pos.y)
            logger.debug("player hit by %s, health %d", enemy.kind, player.health)
        else:
            ctx.events.emit(Cue.SHIELD_BLOCK, player.pos.x, player.pos.y)

        if player.health <= 0:
            ctx.game_over()
        break


def resolve(ctx):
    resolve_projectiles(ctx)
    resolve_contacts(ctx)
