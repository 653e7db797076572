"""Game loop, input mapping and frame composition for Dino Dash."""

from __future__ import annotations

import logging
import sys

import pygame

from .clock import FrameClock
from .config import HIGH_SCORE_PATH, MAX_FRAME_SCALE, WINDOW_HEIGHT, WINDOW_WIDTH
from .render import Renderer
from .state import GameState
from .storage import HighScoreStore, JsonHighScoreStore

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
DUCK_KEYS = (pygame.K_s, pygame.K_DOWN)


class Game:
    """Top-level game controller: owns the window, clock, store and session."""

    def __init__(self, store: HighScoreStore | None = None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.DOUBLEBUF)
        pygame.display.set_caption("Dino Dash")
        self.clock = FrameClock()
        self.renderer = Renderer(self.screen)
        self.store = store if store is not None else JsonHighScoreStore(HIGH_SCORE_PATH)
        self.state = GameState(self.store)

    def press_primary(self) -> None:
        """Space/click: start or restart when idle, otherwise jump."""
        if not self.state.started or self.state.over:
            self.state.confirm_requested()
        else:
            self.state.jump_requested()

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in JUMP_KEYS:
                self.press_primary()
            elif event.key in DUCK_KEYS:
                self.state.duck_started()
            elif event.key in (pygame.K_r,):
                if self.state.over:
                    self.state.confirm_requested()
            elif event.key in (pygame.K_ESCAPE,):
                pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif event.type == pygame.KEYUP:
            if event.key in DUCK_KEYS:
                self.state.duck_ended()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.press_primary()

    def update(self, dt: float) -> None:
        self.state.advance(dt)

    def draw(self) -> None:
        self.renderer.draw(self.state.snapshot())
        pygame.display.flip()

    def quit(self) -> None:
        # Leaving mid-session still records a new best
        if self.state.started and self.state.score > self.state.high_score:
            self.state.reset()
        pygame.quit()

    def run(self) -> None:
        while True:
            frame = self.clock.tick()
            if frame.scale >= MAX_FRAME_SCALE:
                logger.debug("slow frame: %.1f ms", frame.dt * 1000.0)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.quit()
                    sys.exit(0)
                self.handle_input(event)

            self.update(frame.dt)
            self.draw()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    Game().run()
