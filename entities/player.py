# entities/player.py
import math

import pygame

from core import settings
from core.energy import CombatMomentum, LightEnergy
from core.events import Cue
from core.utils import circles_overlap
from entities.weapon import Weapon, WeaponInventory, fire


class Player:
    """
    Top-down light warrior.
    - Movement: accelerating input, per-axis friction, speed cap, short dash
    - Combat momentum raises the speed cap for a while after a projectile kill
    - Attacks use the active weapon, or the unarmed light orb when none is active
    - Shield of Light sets shield_timer; while it runs contact damage is ignored
    """

    def __init__(self, x: float, y: float):
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(0, 0)
        self.radius = settings.PLAYER_RADIUS

        self.max_health = settings.PLAYER_MAX_HEALTH
        self.health = self.max_health

        self.energy = LightEnergy()
        self.momentum = CombatMomentum()

        self.unarmed = Weapon("none")
        self.weapons = WeaponInventory()

        # acceleration curve
        self.held_steps = 0

        # dash
        self.dashing = False
        self.dash_timer = 0
        self.dash_cd = 0

        self.shield_timer = 0
        self.light_pulse = 0.0

    # ------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------
    @property
    def attack_cooldown(self) -> int:
        weapon = self.weapons.active or self.unarmed
        return weapon.cooldown

    @property
    def shielded(self) -> bool:
        return self.shield_timer > 0

    @property
    def light_energy(self) -> float:
        return self.energy.current

    def overlaps(self, other) -> bool:
        return circles_overlap(self.pos.x, self.pos.y, self.radius, other.pos.x, other.pos.y, other.radius)

    def take_damage(self, amount: int) -> bool:
        if self.shielded:
            return False
        self.health = max(0, self.health - int(amount))
        self.light_pulse = 0.0
        return True

    def heal(self, amount: int):
        self.health = min(self.max_health, self.health + int(amount))

    def restore(self):
        self.health = self.max_health
        self.energy.refill()

    def attack(self, target: pygame.Vector2, ctx) -> bool:
        weapon = self.weapons.active or self.unarmed
        return fire(weapon, self, target, ctx)

    # ------------------------------------------------------------
    # Update
    # ------------------------------------------------------------
    def update(self, frame, width: float, height: float, events=None):
        ix, iy = frame.move_x, frame.move_y

        # timers
        self.momentum.tick()
        if self.dash_cd > 0:
            self.dash_cd -= 1
        if self.shield_timer > 0:
            self.shield_timer -= 1
            if self.shield_timer == 0 and events is not None:
                events.emit(Cue.SHIELD_DOWN, self.pos.x, self.pos.y)

        # dash start
        if frame.dash and not self.dashing and self.dash_cd <= 0:
            direction = pygame.Vector2(ix, iy)
            if direction.length_squared() == 0:
                direction = pygame.Vector2(self.vel)
            if direction.length_squared() > 0:
                self.dashing = True
                self.dash_timer = settings.DASH_STEPS
                self.vel = direction.normalize() * settings.DASH_SPEED
                if events is not None:
                    events.emit(Cue.DASH, self.pos.x, self.pos.y)

        if self.dashing:
            self.dash_timer -= 1
            if self.dash_timer <= 0:
                self.dashing = False
                self.dash_cd = settings.DASH_COOLDOWN
                cap = self.momentum.speed_cap(settings.PLAYER_MAX_SPEED)
                if self.vel.length() > cap:
                    self.vel.scale_to_length(cap)
        else:
            self._accelerate(ix, iy)

        self.pos += self.vel
        self._clamp_to_arena(width, height)

        # cooldowns + energy
        self.unarmed.tick()
        self.weapons.tick()
        self.energy.regenerate()

        self.light_pulse += 0.15

    def _accelerate(self, ix: float, iy: float):
        if ix != 0.0 or iy != 0.0:
            self.held_steps = min(settings.ACCEL_RAMP_STEPS, self.held_steps + 1)
        else:
            self.held_steps = 0

        ramp = self.held_steps / settings.ACCEL_RAMP_STEPS
        accel = settings.PLAYER_ACCEL + (settings.PLAYER_ACCEL_MAX - settings.PLAYER_ACCEL) * ramp

        self.vel.x += ix * accel
        self.vel.y += iy * accel

        if ix == 0.0:
            self.vel.x *= settings.PLAYER_FRICTION
        if iy == 0.0:
            self.vel.y *= settings.PLAYER_FRICTION

        cap = self.momentum.speed_cap(settings.PLAYER_MAX_SPEED)
        speed = math.hypot(self.vel.x, self.vel.y)
        if speed > cap:
            self.vel.x = self.vel.x / speed * cap
            self.vel.y = self.vel.y / speed * cap

    def _clamp_to_arena(self, width: float, height: float):
        r = self.radius
        if self.pos.x - r < 0:
            self.pos.x = r
            self.vel.x = 0.0
        if self.pos.x + r > width:
            self.pos.x = width - r
            self.vel.x = 0.0
        if self.pos.y - r < 0:
            self.pos.y = r
            self.vel.y = 0.0
        if self.pos.y + r > height:
            self.pos.y = height - r
            self.vel.y = 0.0
