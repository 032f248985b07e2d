# entities/weapon.py
"""
Weapons and the collected-weapon inventory.

Every attack goes through fire():
  1. blocked while the weapon is cooling down
  2. blocked if the player cannot pay the energy cost
  3. otherwise the variant effect runs and sets the next cooldown
A blocked attempt changes nothing.
"""
import logging
import math
from typing import Callable, Dict, List, Optional

import pygame

from core.events import Cue
from core.utils import angle_to
from entities.projectile import Projectile
from world import combat
from world.weapon_defs import WEAPONS

logger = logging.getLogger(__name__)


class Weapon:
    def __init__(self, kind: str):
        self.kind = kind
        self.cooldown = 0
        self.burst_left = int(WEAPONS[kind].get("burst", 0))
        self.idle = 0  # steps since last shot

    @property
    def name(self) -> str:
        return WEAPONS[self.kind]["name"]

    @property
    def ready(self) -> bool:
        return self.cooldown <= 0

    def tick(self):
        if self.cooldown > 0:
            self.cooldown -= 1
        self.idle += 1


def fire(weapon: Weapon, player, target: pygame.Vector2, ctx) -> bool:
    if not weapon.ready:
        return False
    d = WEAPONS[weapon.kind]
    if not player.energy.try_spend(d["energy_cost"]):
        return False

    _EFFECTS[weapon.kind](weapon, player, target, ctx, d)
    weapon.idle = 0
    return True


# ------------------------------------------------------------
# Variant effects
# ------------------------------------------------------------
def _light_orb(weapon: Weapon, player, target, ctx, d):
    angle = angle_to(player.pos.x, player.pos.y, target.x, target.y)
    ctx.projectiles.append(Projectile(d["projectile"], player.pos.x, player.pos.y, angle))
    weapon.cooldown = d["cooldown"]
    ctx.events.emit(Cue.SHOOT, target.x, target.y)


def _thunder_hammer(weapon: Weapon, player, target, ctx, d):
    # instant area hit around the player, aim is ignored
    reach = d["range"]
    struck = [
        e for e in ctx.enemies
        if math.hypot(e.pos.x - player.pos.x, e.pos.y - player.pos.y) <= reach + e.radius
    ]
    for enemy in struck:
        combat.damage_enemy(ctx, enemy, d["damage"])
    weapon.cooldown = d["cooldown"]
    ctx.events.emit(Cue.HAMMER_SLAM, player.pos.x, player.pos.y)
    logger.debug("hammer struck %d enemies", len(struck))


def _phoenix_bow(weapon: Weapon, player, target, ctx, d):
    base = angle_to(player.pos.x, player.pos.y, target.x, target.y)
    count = int(d["arrows"])
    spread = math.radians(d["spread_deg"])
    for i in range(count):
        offset = 0.0 if count == 1 else -spread / 2 + spread * i / (count - 1)
        ctx.projectiles.append(Projectile(d["projectile"], player.pos.x, player.pos.y, base + offset))
    weapon.cooldown = d["cooldown"]
    ctx.events.emit(Cue.SHOOT, target.x, target.y)


def _shield_of_light(weapon: Weapon, player, target, ctx, d):
    player.shield_timer = int(d["duration"])
    weapon.cooldown = d["cooldown"]
    ctx.events.emit(Cue.SHIELD_UP, player.pos.x, player.pos.y)


def _spirit_cannon(weapon: Weapon, player, target, ctx, d):
    if weapon.idle >= d["reload"]:
        weapon.burst_left = d["burst"]

    angle = angle_to(player.pos.x, player.pos.y, target.x, target.y)
    ctx.projectiles.append(Projectile(d["projectile"], player.pos.x, player.pos.y, angle))
    weapon.burst_left -= 1
    if weapon.burst_left <= 0:
        weapon.burst_left = d["burst"]
        weapon.cooldown = d["reload"]
    else:
        weapon.cooldown = d["cooldown"]
    ctx.events.emit(Cue.SHOOT, target.x, target.y)


_EFFECTS: Dict[str, Callable] = {
    "none": _light_orb,
    "thunder_hammer": _thunder_hammer,
    "phoenix_bow": _phoenix_bow,
    "shield_of_light": _shield_of_light,
    "spirit_cannon": _spirit_cannon,
}


class WeaponInventory:
    """
    Ordered, unique-by-kind list of collected weapons plus the active index.
    - first pickup auto-activates, later ones do not
    - switching never touches cooldowns
    """

    def __init__(self):
        self.weapons: List[Weapon] = []
        self.index = -1

    def __len__(self) -> int:
        return len(self.weapons)

    @property
    def active(self) -> Optional[Weapon]:
        if 0 <= self.index < len(self.weapons):
            return self.weapons[self.index]
        return None

    def has(self, kind: str) -> bool:
        return any(w.kind == kind for w in self.weapons)

    def collect(self, kind: str) -> bool:
        if kind == "none" or kind not in WEAPONS or self.has(kind):
            return False
        self.weapons.append(Weapon(kind))
        if len(self.weapons) == 1:
            self.index = 0
        return True

    def cycle(self) -> bool:
        if len(self.weapons) < 2:
            return False
        self.index = (self.index + 1) % len(self.weapons)
        return True

    def select(self, index: int) -> bool:
        if not (0 <= index < len(self.weapons)) or index == self.index:
            return False
        self.index = index
        return True

    def tick(self):
        for w in self.weapons:
            w.tick()

    def clear(self):
        self.weapons.clear()
        self.index = -1
