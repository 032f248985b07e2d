# world/waves.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core import settings
from core.events import Cue
from world import spawn_policy

logger = logging.getLogger(__name__)


class WaveState(str, Enum):
    SPAWNING = "spawning"
    ACTIVE = "active"
    COMPLETE = "complete"
    INTERMISSION = "intermission"


@dataclass
class WaveTuning:
    base_count: int = settings.BASE_ENEMY_COUNT
    per_wave: int = settings.ENEMIES_PER_WAVE
    initial_delay: int = settings.INITIAL_SPAWN_DELAY
    delay_step: int = settings.SPAWN_DELAY_STEP
    min_delay: int = settings.MIN_SPAWN_DELAY
    complete_grace: int = settings.COMPLETE_GRACE_STEPS
    intermission: int = settings.INTERMISSION_STEPS


def enemy_count_for_wave(wave: int, tuning: Optional[WaveTuning] = None) -> int:
    t = tuning or WaveTuning()
    return t.base_count + (int(wave) - 1) * t.per_wave


def spawn_delay_for_wave(wave: int, tuning: Optional[WaveTuning] = None) -> int:
    t = tuning or WaveTuning()
    return max(t.min_delay, t.initial_delay - (int(wave) - 1) * t.delay_step)


class WaveController:
    """
    Wave state machine.
      spawning     -> active        every scheduled enemy has been spawned
      active       -> complete      the shared enemy list is empty
      complete     -> intermission  grace period after the last spawn
      intermission -> spawning      next wave: more enemies, shorter delay,
                                    player restored, shrines re-armed

    advance() runs before entities move (timers + spawning),
    evaluate() runs after combat (completion checks).
    An empty arena while spawning is never a completed wave.
    """

    def __init__(self, tuning: Optional[WaveTuning] = None):
        self.tuning = tuning or WaveTuning()
        self.reset()

    def reset(self):
        self.wave = 1
        self.state = WaveState.SPAWNING
        self.timer = 0
        self.last_spawn_time = 0
        self.intermission_timer = 0
        self.enemies_spawned = 0
        self.wave_enemy_count = enemy_count_for_wave(1, self.tuning)
        self.spawn_delay = self.tuning.initial_delay

    @property
    def wave_number(self) -> int:
        return self.wave

    @property
    def intermission_remaining(self) -> int:
        if self.state != WaveState.INTERMISSION:
            return 0
        return max(0, self.tuning.intermission - self.intermission_timer)

    def advance(self, ctx):
        self.timer += 1

        if self.state == WaveState.SPAWNING:
            if self.enemies_spawned < self.wave_enemy_count:
                if self.timer - self.last_spawn_time >= self.spawn_delay:
                    spawn_policy.spawn_enemy(ctx, self.enemies_spawned)
                    self.enemies_spawned += 1
                    self.last_spawn_time = self.timer

        elif self.state == WaveState.COMPLETE:
            if self.timer > self.last_spawn_time + self.tuning.complete_grace:
                self.state = WaveState.INTERMISSION
                self.intermission_timer = 0

        elif self.state == WaveState.INTERMISSION:
            self.intermission_timer += 1
            if self.intermission_timer >= self.tuning.intermission:
                self._start_next_wave(ctx)

    def evaluate(self, ctx):
        if self.state == WaveState.SPAWNING:
            if self.enemies_spawned >= self.wave_enemy_count:
                self.state = WaveState.ACTIVE

        elif self.state == WaveState.ACTIVE:
            # bonus swarm enemies live in the same list, so they hold the wave open too
            if len(ctx.enemies) == 0:
                self.state = WaveState.COMPLETE
                ctx.events.emit(Cue.WAVE_COMPLETE, ctx.width / 2, ctx.height / 2)
                logger.info("wave %d complete", self.wave)

    def _start_next_wave(self, ctx):
        self.wave += 1
        self.state = WaveState.SPAWNING
        self.timer = 0
        self.last_spawn_time = 0
        self.intermission_timer = 0
        self.enemies_spawned = 0

        self.wave_enemy_count = enemy_count_for_wave(self.wave, self.tuning)
        self.spawn_delay = max(self.tuning.min_delay, self.spawn_delay - self.tuning.delay_step)

        ctx.player.restore()
        ctx.events.emit(Cue.HEAL, ctx.player.pos.x, ctx.player.pos.y)
        for shrine in ctx.shrines:
            shrine.reset()

        ctx.events.emit(Cue.WAVE_START, ctx.width / 2, ctx.height / 2)
        logger.info(
            "wave %d: %d enemies, spawn every %d steps",
            self.wave, self.wave_enemy_count, self.spawn_delay,
        )
