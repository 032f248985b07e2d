# entities/shrine.py
import pygame

from core import settings
from core.utils import circles_overlap
from world.weapon_defs import SHRINE_LAYOUT


class WeaponShrine:
    def __init__(self, weapon_kind: str, x: float, y: float):
        self.weapon_kind = weapon_kind
        self.pos = pygame.Vector2(x, y)
        self.radius = settings.SHRINE_RADIUS
        self.active = True
        self.t = 0  # bob animation

    def update(self):
        self.t += 1

    def consume(self) -> bool:
        if not self.active:
            return False
        self.active = False
        return True

    def reset(self):
        self.active = True

    def overlaps(self, pos: pygame.Vector2, radius: float) -> bool:
        return circles_overlap(self.pos.x, self.pos.y, self.radius, pos.x, pos.y, radius)


def build_shrines(width: float, height: float, inset: float = settings.SHRINE_INSET):
    corners = [
        (inset, inset),
        (width - inset, inset),
        (inset, height - inset),
        (width - inset, height - inset),
    ]
    return [WeaponShrine(kind, x, y) for kind, (x, y) in zip(SHRINE_LAYOUT, corners)]
