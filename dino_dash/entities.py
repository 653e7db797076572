"""Game entities.

Contains the player-controlled dino and every scrolling thing on screen:
cacti and ground rockets (hazards), clouds and stars (decoration), birds and
UFOs (day sky), comets and meteors (night sky).
"""

from __future__ import annotations

import math
from enum import Enum

from .config import (
    BIRD_FLAP_RATE,
    BIRD_SPEED,
    CACTUS_BONUS,
    CACTUS_SPEED,
    CLOUD_SPEED,
    DINO_BODY_HEIGHT,
    DINO_BODY_WIDTH,
    DINO_X,
    DUCK_SCALE,
    FAST_FALL_MULTIPLIER,
    GRAVITY,
    GROUND_Y,
    JUMP_VELOCITY,
    OBSTACLE_HEIGHT,
    OBSTACLE_WIDTH,
    ROCKET_BONUS,
    ROCKET_HEIGHT,
    ROCKET_SPEED,
    ROCKET_WIDTH,
    ROCKET_Y,
    UFO_SPEED,
    WINDOW_HEIGHT,
)
from .utils import Box

TAU = 2.0 * math.pi


class EntityKind(Enum):
    CACTUS = "cactus"
    GROUND_ROCKET = "ground_rocket"
    CLOUD = "cloud"
    BIRD = "bird"
    UFO = "ufo"
    COMET = "comet"
    METEOR = "meteor"
    STAR = "star"


HAZARD_KINDS = frozenset({EntityKind.CACTUS, EntityKind.GROUND_ROCKET})


class CactusType(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    TALL = "tall"
    DOUBLE = "double"
    TRIPLE = "triple"
    # Rare subtypes
    GOLDEN = "golden"
    FLOWERING = "flowering"


RARE_CACTUS_TYPES = (CactusType.GOLDEN, CactusType.FLOWERING)
COMMON_CACTUS_TYPES = tuple(t for t in CactusType if t not in RARE_CACTUS_TYPES)

# Drawn (width, height) per subtype; collisions use OBSTACLE_WIDTH x OBSTACLE_HEIGHT
CACTUS_SIZES: dict[CactusType, tuple[int, int]] = {
    CactusType.SMALL: (20, 40),
    CactusType.MEDIUM: (30, 60),
    CactusType.TALL: (26, 75),
    CactusType.DOUBLE: (50, 60),
    CactusType.TRIPLE: (70, 50),
    CactusType.GOLDEN: (30, 60),
    CactusType.FLOWERING: (30, 65),
}


class Entity:
    """Shared header for everything that scrolls: position, size and kind.

    Subclasses set `kind` and `speed` (px/tick, leftwards) and override
    `advance`/`offscreen` when they move differently.
    """

    kind: EntityKind
    speed = 0.0
    bonus = 0  # score credited when the entity scrolls off

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def is_hazard(self) -> bool:
        return self.kind in HAZARD_KINDS

    def advance(self, scale: float) -> None:
        self.x -= self.speed * scale

    def offscreen(self) -> bool:
        return self.x + self.width < 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x:.1f}, y={self.y:.1f}, w={self.width:.0f}, h={self.height:.0f})"


class Cactus(Entity):
    kind = EntityKind.CACTUS
    speed = CACTUS_SPEED
    bonus = CACTUS_BONUS

    def __init__(self, x: float, cactus_type: CactusType = CactusType.MEDIUM) -> None:
        super().__init__(x, WINDOW_HEIGHT - OBSTACLE_HEIGHT, OBSTACLE_WIDTH, OBSTACLE_HEIGHT)
        self.cactus_type = cactus_type
        # Subtype only changes the silhouette
        self.draw_width, self.draw_height = CACTUS_SIZES[cactus_type]

    @property
    def rare(self) -> bool:
        return self.cactus_type in RARE_CACTUS_TYPES


class GroundRocket(Entity):
    kind = EntityKind.GROUND_ROCKET
    speed = ROCKET_SPEED
    bonus = ROCKET_BONUS

    def __init__(self, x: float, y: float = ROCKET_Y) -> None:
        super().__init__(x, y, ROCKET_WIDTH, ROCKET_HEIGHT)


class Cloud(Entity):
    kind = EntityKind.CLOUD
    speed = CLOUD_SPEED


class Bird(Entity):
    kind = EntityKind.BIRD
    speed = BIRD_SPEED

    def __init__(self, x: float, y: float, flap_phase: float = 0.0) -> None:
        super().__init__(x, y, 34, 16)
        self.flap_phase = flap_phase

    def advance(self, scale: float) -> None:
        super().advance(scale)
        self.flap_phase = (self.flap_phase + BIRD_FLAP_RATE * scale) % TAU

    @property
    def wings_up(self) -> bool:
        return math.sin(self.flap_phase) > 0.0


class Ufo(Bird):
    """Rare bird replacement that hovers with a slow vertical bob."""

    kind = EntityKind.UFO
    speed = UFO_SPEED

    def __init__(self, x: float, y: float, flap_phase: float = 0.0) -> None:
        super().__init__(x, y, flap_phase)
        self.width = 48.0
        self.height = 20.0
        self.base_y = self.y

    def advance(self, scale: float) -> None:
        super().advance(scale)
        self.y = self.base_y + 6.0 * math.sin(self.flap_phase * 0.5)


class Comet(Entity):
    """Streaks across the night sky on an angle, leaving through the top edge."""

    kind = EntityKind.COMET

    def __init__(self, x: float, y: float, angle: float, speed: float, size: float = 6.0) -> None:
        super().__init__(x, y, size, size)
        self.angle = angle  # radians above the horizontal, travelling left
        self.speed = speed
        self.vx = -math.cos(angle) * speed
        self.vy = -math.sin(angle) * speed

    def advance(self, scale: float) -> None:
        self.x += self.vx * scale
        self.y += self.vy * scale

    def offscreen(self) -> bool:
        return self.x + self.width < 0 or self.y + self.height < 0


class Meteor(Comet):
    """Falls down-left and burns out at the horizon."""

    kind = EntityKind.METEOR

    def __init__(self, x: float, y: float, angle: float, speed: float, size: float = 8.0) -> None:
        super().__init__(x, y, angle, speed, size)
        self.vy = math.sin(angle) * speed

    def offscreen(self) -> bool:
        return self.x + self.width < 0 or self.y > WINDOW_HEIGHT


class Star(Entity):
    """Fixed background star; never expires, its twinkle phase wraps around."""

    kind = EntityKind.STAR

    def __init__(self, x: float, y: float, size: float, phase: float, twinkle_rate: float) -> None:
        super().__init__(x, y, size, size)
        self.phase = phase
        self.twinkle_rate = twinkle_rate

    def advance(self, scale: float) -> None:
        self.phase = (self.phase + self.twinkle_rate * scale) % TAU

    def offscreen(self) -> bool:
        return False

    @property
    def brightness(self) -> float:
        return 0.6 + 0.4 * math.sin(self.phase)


class Dino:
    """The player: a fixed horizontal slot with jump/duck vertical physics."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.x = float(DINO_X)
        self.y = float(GROUND_Y)
        self.vy = 0.0
        self.airborne = False
        self.ducking = False

    def jump(self) -> bool:
        """Launch upwards; ignored while already in the air."""
        if self.airborne:
            return False
        self.airborne = True
        self.vy = JUMP_VELOCITY
        return True

    def start_duck(self) -> None:
        # Key repeat delivers several presses, only the first one counts
        if self.ducking:
            return
        self.ducking = True
        if self.airborne and self.vy > 0.0:
            self.vy *= FAST_FALL_MULTIPLIER

    def end_duck(self) -> None:
        self.ducking = False

    def integrate(self, scale: float) -> None:
        if not self.airborne:
            return
        gravity = GRAVITY * (FAST_FALL_MULTIPLIER if self.ducking else 1.0)
        self.vy += gravity * scale
        self.y += self.vy * scale
        if self.y < 0.0:
            self.y = 0.0
            self.vy = 0.0
        if self.y >= GROUND_Y:
            self.y = float(GROUND_Y)
            self.vy = 0.0
            self.airborne = False

    @property
    def height(self) -> float:
        return DINO_BODY_HEIGHT * DUCK_SCALE if self.ducking else float(DINO_BODY_HEIGHT)

    def hitbox(self) -> Box:
        return Box(self.x, self.y, float(DINO_BODY_WIDTH), self.height)
