# core/game.py
import logging
import os

import pygame

from core import settings
from core.errors import ScoreStoreError
from core.events import Event
from core.highscores import HighScoreTable
from core.input import Input, InputFrame
from core.timestep import FixedStepper
from ui.renderer import Renderer
from world.arena import Arena, SessionState

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, scores_path: str = settings.HIGH_SCORE_FILE):
        pygame.init()
        pygame.display.set_caption(settings.TITLE)

        self.screen = pygame.display.set_mode((settings.WIDTH, settings.HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True

        self.scores = HighScoreTable(scores_path)
        try:
            self.scores.load()
        except ScoreStoreError:
            logger.exception("ignoring unreadable high score file")

        self.input = Input()
        self.stepper = FixedStepper()
        self.arena = Arena(settings.WIDTH, settings.HEIGHT, scores=self.scores)
        self.arena.events.subscribe(self._log_cue)
        self.renderer = Renderer(settings.WIDTH, settings.HEIGHT)

        self.player_name = ""

    def run(self):
        while self.running:
            elapsed = self.clock.tick(settings.FPS) / 1000.0

            events = pygame.event.get()
            self._handle_events(events)

            if self.arena.state == SessionState.PLAYING:
                for event in events:
                    self.input.handle_event(event)

            steps = self.stepper.advance(elapsed)
            # latched one-shot actions (dash, weapon switch) go to the first step only
            frame = self.input.poll() if steps else None
            for _ in range(steps):
                self.arena.step(frame)
                frame = InputFrame(
                    move_x=frame.move_x, move_y=frame.move_y,
                    aim_x=frame.aim_x, aim_y=frame.aim_y,
                    attack=frame.attack,
                )

            self.renderer.draw(self.screen, self.arena.snapshot(), self.player_name)
            pygame.display.flip()

        pygame.quit()

    def _handle_events(self, events):
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)

    def _handle_key(self, event):
        state = self.arena.state

        if state == SessionState.GAME_OVER and self.arena.new_high_score and self.arena.final_rank is None:
            self._handle_name_entry(event)
            return

        if event.key == pygame.K_RETURN and state == SessionState.MENU:
            self.arena.start()
            self.stepper.reset()
        elif event.key in (pygame.K_p, pygame.K_ESCAPE) and state in (SessionState.PLAYING, SessionState.PAUSED):
            self.arena.toggle_pause()
        elif event.key == pygame.K_r and state != SessionState.MENU:
            self.arena.restart()
            self.stepper.reset()
        elif event.key == pygame.K_ESCAPE and state in (SessionState.MENU, SessionState.GAME_OVER):
            self.running = False

    def _handle_name_entry(self, event):
        if event.key == pygame.K_RETURN:
            rank = self.arena.submit_score(self.player_name)
            if rank is not None:
                logger.info("saved as rank %d", rank)
            self.player_name = ""
        elif event.key == pygame.K_BACKSPACE:
            self.player_name = self.player_name[:-1]
        elif event.unicode and event.unicode.isprintable() and len(self.player_name) < settings.NAME_MAX_LENGTH:
            self.player_name += event.unicode

    @staticmethod
    def _log_cue(event: Event):
        logger.debug("cue %s at (%.0f, %.0f)", event.cue.value, event.x, event.y)


def main():
    logging.basicConfig(
        level=os.environ.get(settings.LOG_LEVEL_ENV, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Game().run()


if __name__ == "__main__":
    main()
