# core/energy.py
from __future__ import annotations
from dataclasses import dataclass

from core import settings
from core.utils import clamp


@dataclass
class LightEnergy:
    """
    Depletable resource gating every attack.
    - try_spend() either pays the full cost or changes nothing
    - regenerate() is called once per step, independent of attacks
    - current always stays within 0..maximum
    """
    current: float = settings.MAX_LIGHT_ENERGY
    maximum: float = settings.MAX_LIGHT_ENERGY
    regen: float = settings.ENERGY_REGEN

    def can_afford(self, cost: float) -> bool:
        return self.current >= cost

    def try_spend(self, cost: float) -> bool:
        if not self.can_afford(cost):
            return False
        self.current = clamp(self.current - cost, 0.0, self.maximum)
        return True

    def regenerate(self):
        if self.current < self.maximum:
            self.current = min(self.maximum, self.current + self.regen)

    def refill(self):
        self.current = self.maximum

    @property
    def fraction(self) -> float:
        return self.current / self.maximum if self.maximum > 0 else 0.0


@dataclass
class CombatMomentum:
    """Temporary max-speed buff refreshed by projectile kills."""
    duration: int = settings.MOMENTUM_STEPS
    boost: float = settings.MOMENTUM_SPEED_MULT
    timer: int = 0

    @property
    def active(self) -> bool:
        return self.timer > 0

    def refresh(self):
        self.timer = self.duration

    def tick(self):
        if self.timer > 0:
            self.timer -= 1

    def speed_cap(self, base: float) -> float:
        return base * self.boost if self.active else base
