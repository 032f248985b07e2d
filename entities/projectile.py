# entities/projectile.py
import math

import pygame

from core import settings
from world.weapon_defs import PROJECTILES


class Projectile:
    def __init__(self, kind: str, x: float, y: float, angle: float):
        d = PROJECTILES[kind]
        self.kind = kind
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(math.cos(angle), math.sin(angle)) * d["speed"]
        self.angle = angle

        self.radius = d["radius"]
        self.max_life = int(d["life"])
        self.life = self.max_life  # steps

    def update(self):
        self.pos += self.vel
        self.life -= 1

    def expired(self, width: float, height: float, margin: float = settings.OFFSCREEN_MARGIN) -> bool:
        if self.life <= 0:
            return True
        x, y = self.pos.x, self.pos.y
        return x < -margin or x > width + margin or y < -margin or y > height + margin
