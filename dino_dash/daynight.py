"""Day/night cycle: a timed logical switch plus a lagging visual blend."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .config import (
    DAY_NIGHT_CHECK_MS,
    NIGHT_CHANCE,
    NIGHT_DURATION_MS,
    SUN_MOON_THRESHOLD,
    TRANSITION_RATE,
)
from .utils import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayNightState:
    is_night: bool = False
    transition: float = 0.0  # 0 = full day, 1 = full night
    night_elapsed_ms: int = 0

    @property
    def show_moon(self) -> bool:
        return self.transition >= SUN_MOON_THRESHOLD

    def star_alpha(self, brightness: float) -> float:
        """Star opacity in [0, 1] for a star of the given twinkle brightness."""
        return clamp(self.transition * brightness, 0.0, 1.0)


class DayNightController:
    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        self.is_night = False
        self.transition = 0.0
        self.night_elapsed_ms = 0
        self._check_accum_ms = 0.0

    def set_night(self, night: bool) -> None:
        """Switch the logical mode immediately; the blend still eases over."""
        if night == self.is_night:
            return
        self.is_night = night
        self.night_elapsed_ms = 0
        logger.info("night falls" if night else "day breaks")

    def _check(self) -> None:
        if self.is_night:
            self.night_elapsed_ms += DAY_NIGHT_CHECK_MS
            if self.night_elapsed_ms >= NIGHT_DURATION_MS:
                self.set_night(False)
        elif self.rng.random() < NIGHT_CHANCE:
            self.set_night(True)

    def advance(self, dt: float, scale: float) -> bool:
        """Run due mode checks and ease the blend; True if the mode switched."""
        was_night = self.is_night
        self._check_accum_ms += dt * 1000.0
        while self._check_accum_ms >= DAY_NIGHT_CHECK_MS:
            self._check_accum_ms -= DAY_NIGHT_CHECK_MS
            self._check()
        target = 1.0 if self.is_night else 0.0
        step = TRANSITION_RATE * scale
        if self.transition < target:
            self.transition = clamp(self.transition + step, 0.0, target)
        elif self.transition > target:
            self.transition = clamp(self.transition - step, target, 1.0)
        return self.is_night != was_night

    def state(self) -> DayNightState:
        return DayNightState(self.is_night, self.transition, self.night_elapsed_ms)
