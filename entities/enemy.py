# entities/enemy.py
import math
import random
from typing import Callable, Dict, List

import pygame

from core import settings
from world.enemy_defs import ENEMIES, scaled_health, scaled_stat


class Enemy:
    """
    One record shape for every enemy variant; behaviour is picked by `kind`.
    - Stats come from world.enemy_defs scaled by the wave that spawned it
    - update() returns how many swarm minions this enemy wants spawned
      (only giants ever ask; the arena performs the spawn)
    """

    def __init__(self, kind: str, x: float, y: float, wave: int, rng=None):
        rng = rng or random
        d = ENEMIES[kind]

        self.kind = kind
        self.wave = int(wave)
        self.pos = pygame.Vector2(x, y)

        self.radius = scaled_stat(kind, "radius", wave)
        self.speed = scaled_stat(kind, "speed", wave)
        self.max_health = scaled_health(kind, wave)
        self.health = self.max_health
        self.points_mult = d["points_mult"]

        # motion state
        self.pulse = rng.random() * math.pi * 2
        self.sine_timer = rng.random() * math.pi * 2
        self.sine_amplitude = d.get("sine_amplitude", 0.0)
        self.sine_rate = d.get("sine_rate", 0.0)
        self.tentacle_phases: List[float] = [
            (math.pi * 2 / d["tentacles"]) * i for i in range(d.get("tentacles", 0))
        ]
        self.swarm_timer = 0

    # ------------------------------------------------------------
    # Combat
    # ------------------------------------------------------------
    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def health_fraction(self) -> float:
        return max(0.0, self.health / self.max_health)

    def take_hit(self, amount: int = 1) -> bool:
        """Apply damage; True if this hit was lethal."""
        if self.health <= 0:
            return False
        self.health -= int(amount)
        return self.health <= 0

    def points(self, wave: int) -> int:
        return settings.POINTS_PER_WAVE * int(wave) * self.points_mult

    # ------------------------------------------------------------
    # Update
    # ------------------------------------------------------------
    def update(self, target: pygame.Vector2, rng=None) -> int:
        return _UPDATES[self.kind](self, target, rng or random)

    def _heading(self, target: pygame.Vector2) -> float:
        return math.atan2(target.y - self.pos.y, target.x - self.pos.x)

    def _step(self, angle: float, speed: float):
        self.pos.x += math.cos(angle) * speed
        self.pos.y += math.sin(angle) * speed


def _update_chaser(enemy: Enemy, target: pygame.Vector2, rng) -> int:
    enemy._step(enemy._heading(target), enemy.speed)
    enemy.pulse += 0.1
    return 0


def _update_demon(enemy: Enemy, target: pygame.Vector2, rng) -> int:
    wobble = math.sin(enemy.pulse) * 0.1
    enemy._step(enemy._heading(target) + wobble, enemy.speed)
    enemy.pulse += 0.1
    return 0


def _update_wraith(enemy: Enemy, target: pygame.Vector2, rng) -> int:
    heading = enemy._heading(target)
    enemy._step(heading, enemy.speed)
    # sideways sine drift perpendicular to the approach
    drift = math.cos(enemy.sine_timer) * enemy.sine_amplitude
    enemy._step(heading + math.pi / 2, drift)
    enemy.sine_timer += enemy.sine_rate
    enemy.pulse += 0.05
    return 0


def _update_giant(enemy: Enemy, target: pygame.Vector2, rng) -> int:
    enemy._step(enemy._heading(target), enemy.speed)
    enemy.pulse += 0.04
    for i in range(len(enemy.tentacle_phases)):
        enemy.tentacle_phases[i] += 0.05 + 0.01 * i

    enemy.swarm_timer += 1
    if enemy.swarm_timer >= settings.SWARM_INTERVAL:
        enemy.swarm_timer = 0
        return rng.randint(settings.SWARM_MIN, settings.SWARM_MAX)
    return 0


_UPDATES: Dict[str, Callable[[Enemy, pygame.Vector2, object], int]] = {
    "crawler": _update_chaser,
    "demon": _update_demon,
    "stone": _update_chaser,
    "wraith": _update_wraith,
    "giant": _update_giant,
}
