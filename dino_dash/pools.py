"""Entity pools: spawn rules, per-tick movement and expiry for every kind."""

from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Sequence, TypeVar

from .config import (
    BIRD_MAX_Y,
    BIRD_MIN_Y,
    BIRD_SPAWN_CHANCE,
    CACTUS_SPAWN_CHANCE,
    CLOUD_SPAWN_CHANCE,
    COMET_MAX_ANGLE_DEG,
    COMET_MAX_SPEED,
    COMET_MIN_ANGLE_DEG,
    COMET_MIN_SPEED,
    COMET_SPAWN_CHANCE,
    MAX_BIRDS,
    MAX_CACTI,
    MAX_CLOUDS,
    MAX_COMETS,
    MAX_ROCKETS,
    METEOR_CHANCE,
    MIN_OBSTACLE_DISTANCE,
    RARE_CACTUS_CHANCE,
    ROCKET_SPAWN_TABLE,
    STAR_COUNT,
    STAR_MAX_TWINKLE,
    STAR_MIN_TWINKLE,
    STAR_SKY_FRACTION,
    UFO_CHANCE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .entities import (
    COMMON_CACTUS_TYPES,
    RARE_CACTUS_TYPES,
    TAU,
    Bird,
    Cactus,
    CactusType,
    Cloud,
    Comet,
    Entity,
    GroundRocket,
    Meteor,
    Star,
    Ufo,
)
from .utils import per_frame_probability

if TYPE_CHECKING:
    from .daynight import DayNightState

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


def ground_rocket_chance(score: int) -> float:
    """Per-tick ground rocket spawn chance for the given score."""
    for floor, chance in ROCKET_SPAWN_TABLE:
        if score >= floor:
            return chance
    return 0.0


def advance_pool(pool: Sequence[E], scale: float) -> tuple[list[E], list[E]]:
    """Move every entity and split the pool into (kept, expired)."""
    kept: list[E] = []
    expired: list[E] = []
    for entity in pool:
        entity.advance(scale)
        if entity.offscreen():
            expired.append(entity)
        else:
            kept.append(entity)
    return kept, expired


class EntityPools:
    """Owns every entity collection of one session."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.cacti: list[Cactus] = []
        self.rockets: list[GroundRocket] = []
        self.clouds: list[Cloud] = []
        self.birds: list[Bird] = []  # birds and UFOs, day only
        self.night_sky: list[Comet] = []  # comets and meteors, night only
        self.stars: list[Star] = [self._make_star() for _ in range(STAR_COUNT)]

    def hazards(self) -> list[Entity]:
        return [*self.cacti, *self.rockets]

    def clear_day_only(self) -> None:
        self.birds = []

    def clear_night_only(self) -> None:
        self.night_sky = []

    def _roll(self, chance: float, scale: float) -> bool:
        return self.rng.random() < per_frame_probability(chance, scale)

    # Spawning -------------------------------------------------------------

    def pick_cactus_type(self) -> CactusType:
        if self.rng.random() < RARE_CACTUS_CHANCE:
            return self.rng.choice(RARE_CACTUS_TYPES)
        return self.rng.choice(COMMON_CACTUS_TYPES)

    def spawn_cactus(self, x: float = WINDOW_WIDTH) -> Cactus | None:
        """Add a cactus at x unless the spawn window is crowded."""
        if len(self.cacti) >= MAX_CACTI:
            return None
        if self.cacti and self.cacti[-1].x > WINDOW_WIDTH - MIN_OBSTACLE_DISTANCE:
            return None
        for rocket in self.rockets:
            if WINDOW_WIDTH - MIN_OBSTACLE_DISTANCE < rocket.x < WINDOW_WIDTH + MIN_OBSTACLE_DISTANCE:
                return None
        cactus = Cactus(x, self.pick_cactus_type())
        self.cacti.append(cactus)
        return cactus

    def spawn_rocket(self, x: float = WINDOW_WIDTH) -> GroundRocket | None:
        """Add a ground rocket at x unless a cactus is too close."""
        if len(self.rockets) >= MAX_ROCKETS:
            return None
        if any(abs(cactus.x - x) < MIN_OBSTACLE_DISTANCE for cactus in self.cacti):
            return None
        rocket = GroundRocket(x)
        self.rockets.append(rocket)
        return rocket

    def spawn_cloud(self) -> Cloud | None:
        if len(self.clouds) >= MAX_CLOUDS:
            return None
        height = 40 + self.rng.random() * 30
        width = 60 + self.rng.random() * 40
        y = 50 + self.rng.random() * 100
        cloud = Cloud(WINDOW_WIDTH, y, width, height)
        self.clouds.append(cloud)
        return cloud

    def spawn_bird(self) -> Bird | None:
        if len(self.birds) >= MAX_BIRDS:
            return None
        y = self.rng.uniform(BIRD_MIN_Y, BIRD_MAX_Y)
        phase = self.rng.uniform(0.0, TAU)
        cls = Ufo if self.rng.random() < UFO_CHANCE else Bird
        bird = cls(WINDOW_WIDTH, y, phase)
        self.birds.append(bird)
        return bird

    def spawn_night_streak(self) -> Comet | None:
        if len(self.night_sky) >= MAX_COMETS:
            return None
        angle = math.radians(self.rng.uniform(COMET_MIN_ANGLE_DEG, COMET_MAX_ANGLE_DEG))
        speed = self.rng.uniform(COMET_MIN_SPEED, COMET_MAX_SPEED)
        if self.rng.random() < METEOR_CHANCE:
            streak: Comet = Meteor(self.rng.uniform(WINDOW_WIDTH * 0.3, WINDOW_WIDTH), -8.0, angle, speed)
        else:
            y = self.rng.uniform(WINDOW_HEIGHT * 0.3, WINDOW_HEIGHT * 0.6)
            streak = Comet(WINDOW_WIDTH, y, angle, speed)
        self.night_sky.append(streak)
        return streak

    def _make_star(self) -> Star:
        return Star(
            self.rng.uniform(0, WINDOW_WIDTH),
            self.rng.uniform(0, WINDOW_HEIGHT * STAR_SKY_FRACTION),
            self.rng.choice((1.0, 1.0, 2.0, 3.0)),
            self.rng.uniform(0.0, TAU),
            self.rng.uniform(STAR_MIN_TWINKLE, STAR_MAX_TWINKLE),
        )

    def spawn(self, score: int, scale: float, is_night: bool) -> None:
        if self._roll(CLOUD_SPAWN_CHANCE, scale):
            self.spawn_cloud()
        if self._roll(ground_rocket_chance(score), scale):
            self.spawn_rocket()
        if self._roll(CACTUS_SPAWN_CHANCE, scale):
            self.spawn_cactus()
        if is_night:
            if self._roll(COMET_SPAWN_CHANCE, scale):
                self.spawn_night_streak()
        elif self._roll(BIRD_SPAWN_CHANCE, scale):
            self.spawn_bird()

    # Movement -------------------------------------------------------------

    def advance(self, scale: float) -> int:
        """Move everything, drop what left the screen and return the dodge bonus."""
        bonus = 0
        self.cacti, gone_cacti = advance_pool(self.cacti, scale)
        self.rockets, gone_rockets = advance_pool(self.rockets, scale)
        for hazard in (*gone_cacti, *gone_rockets):
            bonus += hazard.bonus
        self.clouds, _ = advance_pool(self.clouds, scale)
        self.birds, _ = advance_pool(self.birds, scale)
        self.night_sky, _ = advance_pool(self.night_sky, scale)
        for star in self.stars:
            star.advance(scale)
        if bonus:
            logger.debug("dodged %d cacti, %d rockets", len(gone_cacti), len(gone_rockets))
        return bonus

    def spawn_and_advance(self, score: int, scale: float, day_night: DayNightState) -> int:
        self.spawn(score, scale, day_night.is_night)
        return self.advance(scale)
