# world/arena.py
import logging
import random
from enum import Enum
from typing import Optional

import pygame

from core import settings
from core.events import Cue, EventBus
from entities.particle import ParticleEmitter
from entities.player import Player
from entities.shrine import build_shrines
from world import combat, spawn_policy
from world.snapshot import EntityView, FrameSnapshot, HudView
from world.waves import WaveController, WaveTuning

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Arena:
    """
    One game session and the single owner of every mutable collection.

    The arena is also the context object passed to weapons, the spawn
    policy, the wave controller and the combat resolver; they all mutate
    the same `enemies` / `projectiles` lists through it.

    Step order:
      waves.advance -> player (move, switch, attack) -> shrines ->
      enemies (+ giant swarms) -> projectiles -> particles ->
      combat.resolve -> waves.evaluate
    """

    def __init__(
        self,
        width: int = settings.WIDTH,
        height: int = settings.HEIGHT,
        scores=None,
        rng: Optional[random.Random] = None,
        tuning: Optional[WaveTuning] = None,
    ):
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.scores = scores

        self.events = EventBus()
        self.enemies = []
        self.projectiles = []
        self.particles = []
        self.shrines = build_shrines(width, height)
        self.waves = WaveController(tuning)

        # cosmetics draw from their own rng so they never shift gameplay rolls
        self.events.subscribe(ParticleEmitter(self.particles, random.Random(self.rng.random())))

        self.state = SessionState.MENU
        self._reset_run()

    def _reset_run(self):
        self.player = Player(self.width / 2, self.height / 2)
        self.enemies.clear()
        self.projectiles.clear()
        self.particles.clear()
        for shrine in self.shrines:
            shrine.reset()
        self.waves.reset()

        self.score = 0
        self.steps = 0
        self.new_high_score = False
        self.final_rank: Optional[int] = None

    @property
    def wave(self) -> int:
        return self.waves.wave

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------
    def start(self) -> bool:
        if self.state != SessionState.MENU:
            return False
        self.state = SessionState.PLAYING
        self.events.emit(Cue.WAVE_START, self.width / 2, self.height / 2)
        logger.info("game started")
        return True

    def toggle_pause(self) -> bool:
        if self.state == SessionState.PLAYING:
            self.state = SessionState.PAUSED
        elif self.state == SessionState.PAUSED:
            self.state = SessionState.PLAYING
        else:
            return False
        return True

    def restart(self):
        self._reset_run()
        self.state = SessionState.PLAYING
        self.events.emit(Cue.WAVE_START, self.width / 2, self.height / 2)
        logger.info("game restarted")

    def game_over(self):
        if self.state == SessionState.GAME_OVER:
            return
        self.state = SessionState.GAME_OVER
        self.events.emit(Cue.GAME_OVER, self.player.pos.x, self.player.pos.y)
        logger.info("game over: score %d, wave %d", self.score, self.wave)

        self.new_high_score = False
        if self.scores is not None:
            try:
                self.new_high_score = bool(self.scores.qualifies(self.score, self.wave))
            except Exception:
                logger.exception("high score lookup failed")

    def submit_score(self, name: str) -> Optional[int]:
        """Record the finished run under `name`; returns the rank or None."""
        if self.state != SessionState.GAME_OVER or not self.new_high_score:
            return None
        if self.final_rank is not None or self.scores is None:
            return self.final_rank
        try:
            self.final_rank = self.scores.submit(name, self.score, self.wave)
        except Exception:
            logger.exception("high score submit failed")
            # drop back to the restart prompt instead of retrying the write
            self.new_high_score = False
            return None
        return self.final_rank

    # ------------------------------------------------------------
    # Weapons
    # ------------------------------------------------------------
    def cycle_weapon(self) -> bool:
        if not self.player.weapons.cycle():
            return False
        self.events.emit(Cue.WEAPON_SWITCH, self.player.pos.x, self.player.pos.y)
        return True

    def select_weapon(self, index: int) -> bool:
        if not self.player.weapons.select(index):
            return False
        self.events.emit(Cue.WEAPON_SWITCH, self.player.pos.x, self.player.pos.y)
        return True

    def _collect_shrines(self):
        inventory = self.player.weapons
        for shrine in self.shrines:
            if not shrine.active or inventory.has(shrine.weapon_kind):
                continue
            if shrine.overlaps(self.player.pos, self.player.radius):
                shrine.consume()
                inventory.collect(shrine.weapon_kind)
                self.events.emit(Cue.WEAPON_PICKUP, shrine.pos.x, shrine.pos.y)
                logger.info("picked up %s", shrine.weapon_kind)

    # ------------------------------------------------------------
    # Step
    # ------------------------------------------------------------
    def step(self, frame) -> bool:
        if self.state != SessionState.PLAYING:
            return False
        self.steps += 1

        self.waves.advance(self)

        player = self.player
        player.update(frame, self.width, self.height, self.events)

        if frame.switch_index is not None:
            self.select_weapon(frame.switch_index)
        elif frame.switch_next:
            self.cycle_weapon()

        if frame.attack:
            player.attack(pygame.Vector2(frame.aim_x, frame.aim_y), self)

        for shrine in self.shrines:
            shrine.update()
        self._collect_shrines()

        for enemy in list(self.enemies):
            swarm = enemy.update(player.pos, self.rng)
            if swarm:
                spawn_policy.spawn_swarm(self, enemy, swarm)

        for projectile in self.projectiles:
            projectile.update()
        self.projectiles[:] = [p for p in self.projectiles if not p.expired(self.width, self.height)]

        for particle in self.particles:
            particle.update()
        self.particles[:] = [p for p in self.particles if p.life > 0]

        combat.resolve(self)

        if self.state == SessionState.PLAYING:
            self.waves.evaluate(self)
        return True

    # ------------------------------------------------------------
    # Render data
    # ------------------------------------------------------------
    def snapshot(self) -> FrameSnapshot:
        p = self.player
        inventory = p.weapons
        hud = HudView(
            health=p.health,
            max_health=p.max_health,
            energy=p.energy.current,
            max_energy=p.energy.maximum,
            score=self.score,
            wave=self.wave,
            wave_state=self.waves.state.value,
            intermission_remaining=self.waves.intermission_remaining,
            weapons=tuple(w.kind for w in inventory.weapons),
            active_weapon=inventory.index if inventory.active is not None else None,
            shielded=p.shielded,
            momentum=p.momentum.active,
        )
        return FrameSnapshot(
            session_state=self.state.value,
            width=self.width,
            height=self.height,
            player=EntityView(
                "player", p.pos.x, p.pos.y, p.radius,
                health_fraction=p.health / p.max_health,
                phase=p.light_pulse,
                extra=(p.energy.fraction, float(p.shield_timer)),
            ),
            hud=hud,
            enemies=tuple(
                EntityView(
                    e.kind, e.pos.x, e.pos.y, e.radius,
                    health_fraction=e.health_fraction,
                    phase=e.pulse,
                    extra=tuple(e.tentacle_phases),
                )
                for e in self.enemies
            ),
            projectiles=tuple(
                EntityView(pr.kind, pr.pos.x, pr.pos.y, pr.radius, phase=pr.angle, extra=(pr.life / pr.max_life,))
                for pr in self.projectiles
            ),
            shrines=tuple(
                EntityView(s.weapon_kind, s.pos.x, s.pos.y, s.radius, health_fraction=1.0 if s.active else 0.0, phase=s.t)
                for s in self.shrines
            ),
            particles=tuple(
                EntityView(pa.kind, pa.pos.x, pa.pos.y, 0.0, phase=0.0, extra=(pa.life / pa.max_life,))
                for pa in self.particles
            ),
            new_high_score=self.new_high_score and self.final_rank is None,
        )
