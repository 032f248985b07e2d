# entities/particle.py
# Cosmetic only: the simulation emits cues, this turns them into sparks.
import random

import pygame

from core.events import Cue, Event

PARTICLES = {
    "light": {"spread": 4.0, "lift": 0.0, "life": 30, "color": (255, 215, 0)},
    "explosion": {"spread": 6.0, "lift": 0.0, "life": 30, "color": (255, 107, 53)},
    "damage": {"spread": 3.0, "lift": 0.0, "life": 30, "color": (231, 76, 60)},
    "sparkle": {"spread": 5.0, "lift": -2.0, "life": 40, "color": (255, 215, 0)},
    "healing": {"spread": 2.0, "lift": -1.0, "life": 45, "color": (76, 175, 80)},
}

# cue -> [(particle kind, count, position jitter)]
CUE_BURSTS = {
    Cue.SHOOT: [("light", 8, 0.0)],
    Cue.ENEMY_HIT: [("light", 4, 0.0)],
    Cue.ENEMY_DEFEATED: [("sparkle", 12, 30.0), ("explosion", 6, 0.0)],
    Cue.PLAYER_HURT: [("damage", 6, 0.0)],
    Cue.SHIELD_BLOCK: [("light", 6, 0.0)],
    Cue.HAMMER_SLAM: [("explosion", 10, 60.0)],
    Cue.HEAL: [("healing", 12, 40.0)],
    Cue.WEAPON_PICKUP: [("sparkle", 10, 20.0)],
}


class Particle:
    def __init__(self, kind: str, x: float, y: float, rng=None):
        rng = rng or random
        d = PARTICLES[kind]
        self.kind = kind
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(
            (rng.random() - 0.5) * d["spread"],
            (rng.random() - 0.5) * d["spread"] + d["lift"],
        )
        self.max_life = d["life"]
        self.life = self.max_life
        self.color = d["color"]

    def update(self):
        self.pos += self.vel
        self.vel *= 0.98
        self.life -= 1


class ParticleEmitter:
    """Cue listener that appends particles to a list it does not own."""

    def __init__(self, particles, rng=None):
        self.particles = particles
        self.rng = rng or random.Random()

    def __call__(self, event: Event):
        for kind, count, jitter in CUE_BURSTS.get(event.cue, ()):
            for _ in range(count):
                x = event.x + (self.rng.random() - 0.5) * jitter
                y = event.y + (self.rng.random() - 0.5) * jitter
                self.particles.append(Particle(kind, x, y, self.rng))
