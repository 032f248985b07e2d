# core/timestep.py
from core import settings


class FixedStepper:
    """
    Accumulator that turns wall-clock time into whole logical steps.
    - Every tuning constant is "per step", so the display rate never changes game speed
    - Backlog beyond max_steps is dropped (slow frame -> slow motion, not a freeze)
    """

    def __init__(self, step: float = 1.0 / settings.FPS, max_steps: int = settings.MAX_STEPS_PER_FRAME):
        self.step = float(step)
        self.max_steps = int(max_steps)
        self.accumulator = 0.0

    def advance(self, elapsed: float) -> int:
        if elapsed > 0.0:
            self.accumulator += elapsed

        steps = int(self.accumulator // self.step)
        if steps > self.max_steps:
            steps = self.max_steps
            self.accumulator = 0.0
        else:
            self.accumulator -= steps * self.step
        return steps

    @property
    def alpha(self) -> float:
        return self.accumulator / self.step

    def reset(self):
        self.accumulator = 0.0
