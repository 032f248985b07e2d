# core/events.py
"""
Fire-and-forget cue events.

The core never waits on a listener and never lets one break a step:
audio, particles and analytics all hang off the same bus.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List

logger = logging.getLogger(__name__)


class Cue(str, Enum):
    SHOOT = "shoot"
    ENEMY_HIT = "enemy_hit"
    ENEMY_DEFEATED = "enemy_defeated"
    PLAYER_HURT = "player_hurt"
    SHIELD_BLOCK = "shield_block"
    WAVE_START = "wave_start"
    WAVE_COMPLETE = "wave_complete"
    WEAPON_PICKUP = "weapon_pickup"
    WEAPON_SWITCH = "weapon_switch"
    HAMMER_SLAM = "hammer_slam"
    SHIELD_UP = "shield_up"
    SHIELD_DOWN = "shield_down"
    BOSS_SPAWN = "boss_spawn"
    BOSS_SWARM = "boss_swarm"
    DASH = "dash"
    HEAL = "heal"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Event:
    cue: Cue
    x: float = 0.0
    y: float = 0.0


Listener = Callable[[Event], None]


class EventBus:
    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, cue: Cue, x: float = 0.0, y: float = 0.0) -> Event:
        event = Event(cue, float(x), float(y))
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("cue listener %r failed on %s", listener, cue.value)
        return event
