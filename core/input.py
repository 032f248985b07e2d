# core/input.py
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import pygame

from core.utils import clamp

WEAPON_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
}


@dataclass(frozen=True)
class InputFrame:
    """
    Normalized per-step input. Keyboard, mouse and on-screen joysticks
    all map to this before reaching the simulation.
    """
    move_x: float = 0.0
    move_y: float = 0.0
    aim_x: float = 0.0
    aim_y: float = 0.0
    attack: bool = False
    dash: bool = False
    switch_next: bool = False
    switch_index: Optional[int] = None

    @staticmethod
    def normalized(x: float, y: float) -> Tuple[float, float]:
        x = clamp(float(x), -1.0, 1.0)
        y = clamp(float(y), -1.0, 1.0)
        length = math.hypot(x, y)
        if length > 1.0:
            x /= length
            y /= length
        return x, y

    @classmethod
    def from_axes(cls, x: float, y: float, **kwargs) -> "InputFrame":
        nx, ny = cls.normalized(x, y)
        return cls(move_x=nx, move_y=ny, **kwargs)


class Input:
    def __init__(self):
        self._keys = None
        self._dash = False
        self._switch_next = False
        self._switch_index: Optional[int] = None

    def handle_event(self, event):
        # one-shot actions latch until the next poll
        if event.type != pygame.KEYDOWN:
            return
        if event.key in (pygame.K_LSHIFT, pygame.K_RSHIFT, pygame.K_SPACE):
            self._dash = True
        elif event.key in (pygame.K_q, pygame.K_TAB):
            self._switch_next = True
        elif event.key in WEAPON_KEYS:
            self._switch_index = WEAPON_KEYS[event.key]

    def poll(self, events: Iterable = ()) -> InputFrame:
        for event in events:
            self.handle_event(event)

        self._keys = pygame.key.get_pressed()
        k = self._keys

        x = 0.0
        y = 0.0
        if k[pygame.K_a] or k[pygame.K_LEFT]:
            x -= 1.0
        if k[pygame.K_d] or k[pygame.K_RIGHT]:
            x += 1.0
        if k[pygame.K_w] or k[pygame.K_UP]:
            y -= 1.0
        if k[pygame.K_s] or k[pygame.K_DOWN]:
            y += 1.0

        mx, my = pygame.mouse.get_pos()
        attack = bool(pygame.mouse.get_pressed()[0])

        frame = InputFrame.from_axes(
            x, y,
            aim_x=float(mx),
            aim_y=float(my),
            attack=attack,
            dash=self._dash,
            switch_next=self._switch_next,
            switch_index=self._switch_index,
        )

        self._dash = False
        self._switch_next = False
        self._switch_index = None
        return frame
