from __future__ import annotations

import random

import pytest

from core.events import Event
from core.input import InputFrame
from world.arena import Arena


@pytest.fixture
def arena() -> Arena:
    session = Arena(rng=random.Random(1234))
    session.start()
    return session


@pytest.fixture
def cues(arena: Arena) -> list[Event]:
    seen: list[Event] = []
    arena.events.subscribe(seen.append)
    return seen


@pytest.fixture
def idle() -> InputFrame:
    return InputFrame()
