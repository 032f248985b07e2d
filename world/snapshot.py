# world/snapshot.py
# Read-only frame data handed to the renderer after each completed step.
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class EntityView:
    kind: str
    x: float
    y: float
    radius: float
    health_fraction: float = 1.0
    phase: float = 0.0               # drives pulses / bobbing
    extra: Tuple[float, ...] = ()    # variant visuals (tentacle phases, particle life)


@dataclass(frozen=True)
class HudView:
    health: int
    max_health: int
    energy: float
    max_energy: float
    score: int
    wave: int
    wave_state: str
    intermission_remaining: int
    weapons: Tuple[str, ...] = ()
    active_weapon: Optional[int] = None
    shielded: bool = False
    momentum: bool = False


@dataclass(frozen=True)
class FrameSnapshot:
    session_state: str
    width: int
    height: int
    player: EntityView
    hud: HudView
    enemies: Tuple[EntityView, ...] = field(default_factory=tuple)
    projectiles: Tuple[EntityView, ...] = field(default_factory=tuple)
    shrines: Tuple[EntityView, ...] = field(default_factory=tuple)
    particles: Tuple[EntityView, ...] = field(default_factory=tuple)
    new_high_score: bool = False
