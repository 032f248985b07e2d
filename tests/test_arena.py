from __future__ import annotations

import math
import random

import pytest

from core import settings
from core.events import Cue, EventBus
from core.input import InputFrame
from entities.player import Player
from world.arena import Arena, SessionState


def test_new_arena_waits_in_menu() -> None:
    arena = Arena(rng=random.Random(1))
    assert arena.state == SessionState.MENU
    assert not arena.step(InputFrame())
    assert arena.steps == 0

    assert arena.start()
    assert not arena.start()
    assert arena.state == SessionState.PLAYING


def test_pause_freezes_the_simulation(arena: Arena, idle: InputFrame) -> None:
    for _ in range(40):
        arena.step(idle)
    enemies = [(e.pos.x, e.pos.y) for e in arena.enemies]
    timer = arena.waves.timer

    assert arena.toggle_pause()
    assert arena.state == SessionState.PAUSED
    for _ in range(20):
        assert not arena.step(idle)

    assert [(e.pos.x, e.pos.y) for e in arena.enemies] == enemies
    assert arena.waves.timer == timer
    assert arena.toggle_pause()
    assert arena.state == SessionState.PLAYING


def test_restart_resets_the_run(arena: Arena, idle: InputFrame) -> None:
    for _ in range(100):
        arena.step(idle)
    arena.score = 500
    arena.waves.wave = 4
    arena.game_over()

    arena.restart()

    assert arena.state == SessionState.PLAYING
    assert arena.score == 0
    assert arena.wave == 1
    assert arena.enemies == []
    assert arena.projectiles == []
    assert arena.player.health == settings.PLAYER_MAX_HEALTH
    assert arena.player.energy.current == settings.MAX_LIGHT_ENERGY


def test_game_over_is_emitted_once(arena: Arena, cues) -> None:
    arena.game_over()
    arena.game_over()
    assert [c.cue for c in cues].count(Cue.GAME_OVER) == 1
    assert not arena.step(InputFrame())


def test_snapshot_reflects_state(arena: Arena, idle: InputFrame) -> None:
    arena.player.weapons.collect("phoenix_bow")
    for _ in range(31):
        arena.step(idle)

    snap = arena.snapshot()

    assert snap.session_state == "playing"
    assert (snap.width, snap.height) == (arena.width, arena.height)
    assert len(snap.enemies) == len(arena.enemies) == 1
    assert len(snap.shrines) == 4
    assert snap.hud.wave == 1
    assert snap.hud.wave_state == "spawning"
    assert snap.hud.weapons == ("phoenix_bow",)
    assert snap.hud.active_weapon == 0
    assert snap.player.x == arena.player.pos.x


def test_player_stays_inside_the_arena(arena: Arena) -> None:
    frames = [
        InputFrame.from_axes(1, 0),
        InputFrame.from_axes(0, 1),
        InputFrame.from_axes(-1, -1, dash=True),
    ]
    player = arena.player
    for frame in frames:
        for _ in range(300):
            arena.step(frame)
            assert player.radius <= player.pos.x <= arena.width - player.radius
            assert player.radius <= player.pos.y <= arena.height - player.radius


def test_energy_regenerates_each_step(arena: Arena, idle: InputFrame) -> None:
    arena.player.energy.current = 50.0
    arena.step(idle)
    assert arena.player.energy.current == 50.0 + settings.ENERGY_REGEN


@pytest.mark.parametrize("x, y", [(1, 1), (5, -3), (-0.2, 0.1), (0, 0)])
def test_input_frame_axes_never_exceed_unit_length(x: float, y: float) -> None:
    frame = InputFrame.from_axes(x, y)
    assert math.hypot(frame.move_x, frame.move_y) <= 1.0 + 1e-9
    assert -1.0 <= frame.move_x <= 1.0
    assert -1.0 <= frame.move_y <= 1.0


def _run(player: Player, frame: InputFrame, steps: int, events=None) -> None:
    for _ in range(steps):
        player.update(frame, 100_000, 100_000, events)


def test_speed_is_capped_and_momentum_raises_the_cap() -> None:
    player = Player(50_000, 50_000)
    right = InputFrame.from_axes(1, 0)

    _run(player, right, 100)
    assert player.vel.length() == pytest.approx(settings.PLAYER_MAX_SPEED)

    player.momentum.refresh()
    _run(player, right, 30)
    assert player.vel.length() == pytest.approx(settings.PLAYER_MAX_SPEED * settings.MOMENTUM_SPEED_MULT)


def test_friction_slows_a_released_player() -> None:
    player = Player(50_000, 50_000)
    _run(player, InputFrame.from_axes(1, 0), 50)
    _run(player, InputFrame(), 50)
    assert player.vel.length() < 0.01


def test_dash_bursts_then_cools_down() -> None:
    events = EventBus()
    seen = []
    events.subscribe(seen.append)
    player = Player(50_000, 50_000)
    dash = InputFrame.from_axes(0, 1, dash=True)

    player.update(dash, 100_000, 100_000, events)
    assert player.dashing
    assert player.vel.length() == pytest.approx(settings.DASH_SPEED)
    assert [e.cue for e in seen] == [Cue.DASH]

    _run(player, InputFrame.from_axes(0, 1), settings.DASH_STEPS - 1)
    assert not player.dashing
    assert player.vel.length() <= settings.PLAYER_MAX_SPEED + 1e-9

    player.update(dash, 100_000, 100_000, events)
    assert not player.dashing
    assert len(seen) == 1


def test_dash_needs_a_direction() -> None:
    player = Player(50_000, 50_000)
    player.update(InputFrame(dash=True), 100_000, 100_000)
    assert not player.dashing


def test_start_and_restart_announce_the_first_wave() -> None:
    arena = Arena(rng=random.Random(1))
    seen = []
    arena.events.subscribe(seen.append)

    arena.start()
    assert [e.cue for e in seen] == [Cue.WAVE_START]

    arena.game_over()
    arena.restart()
    assert [e.cue for e in seen].count(Cue.WAVE_START) == 2
    assert arena.wave == 1
