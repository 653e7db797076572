"""Session state and the per-tick simulation step."""

from __future__ import annotations

import copy
import logging
import random
from dataclasses import dataclass

from .config import INVINCIBLE_TICKS, MAX_LIVES, SCORE_INTERVAL
from .daynight import DayNightController, DayNightState
from .entities import Bird, Cactus, Cloud, Comet, Dino, GroundRocket, Star
from .pools import EntityPools
from .storage import HighScoreStore
from .utils import frame_scale, rects_overlap, sanitize_dt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only copy of everything the renderer needs for one frame."""

    score: int
    high_score: int
    lives: int
    invincibility_ticks: int
    started: bool
    over: bool
    dino: Dino
    cacti: tuple[Cactus, ...]
    rockets: tuple[GroundRocket, ...]
    clouds: tuple[Cloud, ...]
    birds: tuple[Bird, ...]
    night_sky: tuple[Comet, ...]
    stars: tuple[Star, ...]
    day_night: DayNightState


class GameState:
    """One owned session: dino, entity pools, day/night cycle, score and lives.

    The high score itself belongs to `store`; it is read once here and only
    written back when a finished session beat it.
    """

    def __init__(self, store: HighScoreStore, rng: random.Random | None = None) -> None:
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.high_score = store.read_high_score()
        self._new_session()
        self.started = False
        self.over = False

    def _new_session(self) -> None:
        self.dino = Dino()
        self.pools = EntityPools(self.rng)
        self.day_night = DayNightController(self.rng)
        self.score = 0
        self.lives = MAX_LIVES
        self.invincibility_ticks = 0
        self._grace_carry = 0.0
        self._score_accum = 0.0

    def start(self) -> None:
        self.reset()
        logger.info("session started (high score %d)", self.high_score)

    def reset(self) -> None:
        if self.started and self.score > self.high_score:
            self.high_score = self.score
            self.store.write_high_score(self.score)
        if self.started:
            logger.info("session ended with score %d", self.score)
        self._new_session()
        self.started = True
        self.over = False

    # Input -----------------------------------------------------------------

    def jump_requested(self) -> None:
        if not self.started or self.over:
            return
        self.dino.jump()

    def duck_started(self) -> None:
        if not self.started or self.over:
            return
        self.dino.start_duck()

    def duck_ended(self) -> None:
        self.dino.end_duck()

    def confirm_requested(self) -> None:
        if not self.started:
            self.start()
        elif self.over:
            self.reset()

    # Simulation ------------------------------------------------------------

    def advance(self, dt: float) -> None:
        if not self.started or self.over:
            return
        dt = sanitize_dt(dt)
        scale = frame_scale(dt)

        self._tick_invincibility(scale)
        self._accumulate_score(dt)
        self.dino.integrate(scale)

        if self.day_night.advance(dt, scale):
            if self.day_night.is_night:
                self.pools.clear_day_only()
            else:
                self.pools.clear_night_only()

        self.score += self.pools.spawn_and_advance(self.score, scale, self.day_night.state())

        if self.invincibility_ticks == 0:
            self._check_collisions()

    def _tick_invincibility(self, scale: float) -> None:
        if self.invincibility_ticks <= 0:
            return
        # Whole ticks only; the fractional remainder carries to the next frame
        self._grace_carry += scale
        whole = int(self._grace_carry)
        self._grace_carry -= whole
        self.invincibility_ticks = max(0, self.invincibility_ticks - whole)
        if self.invincibility_ticks == 0:
            self._grace_carry = 0.0

    def _accumulate_score(self, dt: float) -> None:
        self._score_accum += dt
        points = int(self._score_accum / SCORE_INTERVAL)
        if points:
            self.score += points
            self._score_accum -= points * SCORE_INTERVAL

    def _check_collisions(self) -> None:
        hitbox = self.dino.hitbox()
        for hazard in self.pools.hazards():
            if self.over:
                break
            if rects_overlap(hitbox, hazard.box):
                self._register_hit(hazard)

    def _register_hit(self, hazard: object) -> None:
        self.lives = max(0, self.lives - 1)
        if self.lives == 0:
            self.over = True
            logger.info("game over, final score %d", self.score)
        else:
            self.invincibility_ticks = INVINCIBLE_TICKS
            self._grace_carry = 0.0
            logger.info("hit by %r, %d lives left", hazard, self.lives)

    @property
    def best_score(self) -> int:
        return max(self.high_score, self.score)

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            score=self.score,
            high_score=self.best_score,
            lives=self.lives,
            invincibility_ticks=self.invincibility_ticks,
            started=self.started,
            over=self.over,
            dino=copy.copy(self.dino),
            cacti=tuple(copy.copy(e) for e in self.pools.cacti),
            rockets=tuple(copy.copy(e) for e in self.pools.rockets),
            clouds=tuple(copy.copy(e) for e in self.pools.clouds),
            birds=tuple(copy.copy(e) for e in self.pools.birds),
            night_sky=tuple(copy.copy(e) for e in self.pools.night_sky),
            stars=tuple(copy.copy(e) for e in self.pools.stars),
            day_night=self.day_night.state(),
        )
