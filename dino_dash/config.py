from __future__ import annotations

"""Game configuration constants for Dino Dash.

Rates marked "per tick" are tuned for a 60 Hz frame and get multiplied by the
frame-scale factor at runtime.
"""

import os

# Game configuration
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 400
FPS = 60
TARGET_FRAME_TIME = 1.0 / FPS  # s
MAX_FRAME_SCALE = 2.0
MAX_FRAME_TIME = 0.25  # s, longer stalls are clamped

# Session
MAX_LIVES = 3
INVINCIBLE_TICKS = 90  # about 1.5s of grace after a hit
SCORE_INTERVAL = 0.010  # s of real time per score point
CACTUS_BONUS = 5
ROCKET_BONUS = 20

# Dino
DINO_X = 50
DINO_BODY_WIDTH = 60
DINO_BODY_HEIGHT = 60
DINO_LEG_HEIGHT = 20
DUCK_SCALE = 0.5  # hitbox height multiplier while ducking
GROUND_Y = WINDOW_HEIGHT - DINO_BODY_HEIGHT - DINO_LEG_HEIGHT

# Physics (px/tick, px/tick^2)
GRAVITY = 0.8
JUMP_VELOCITY = -18.0
FAST_FALL_MULTIPLIER = 2.5

# Obstacles
OBSTACLE_WIDTH = 30  # collision box shared by every cactus subtype
OBSTACLE_HEIGHT = 60
CACTUS_SPEED = 5.0
CACTUS_SPAWN_CHANCE = 0.02
MAX_CACTI = 4
MIN_OBSTACLE_DISTANCE = 400
RARE_CACTUS_CHANCE = 0.03  # combined chance of the two rare subtypes

# Ground rockets
ROCKET_WIDTH = 40
ROCKET_HEIGHT = 20
ROCKET_SPEED = 6.0
ROCKET_Y = WINDOW_HEIGHT - OBSTACLE_HEIGHT - ROCKET_HEIGHT - 30
MAX_ROCKETS = 2
# Score floor -> spawn chance per tick, highest floor first
ROCKET_SPAWN_TABLE = (
    (6000, 0.002),
    (5000, 0.001),
    (4000, 0.0005),
    (3000, 0.0004),
    (2000, 0.0003),
    (1000, 0.0002),
    (500, 0.0001),
)

# Clouds
CLOUD_SPEED = 2.0
CLOUD_SPAWN_CHANCE = 0.005
MAX_CLOUDS = 6

# Birds (day only)
BIRD_SPEED = 3.0
UFO_SPEED = 4.0
BIRD_SPAWN_CHANCE = 0.004
UFO_CHANCE = 0.10  # share of bird spawns that turn out to be UFOs
MAX_BIRDS = 3
BIRD_MIN_Y = 40
BIRD_MAX_Y = 170
BIRD_FLAP_RATE = 0.25  # rad/tick

# Comets and meteors (night only)
COMET_SPAWN_CHANCE = 0.006
METEOR_CHANCE = 0.35
MAX_COMETS = 3
COMET_MIN_SPEED = 7.0
COMET_MAX_SPEED = 11.0
COMET_MIN_ANGLE_DEG = 10.0
COMET_MAX_ANGLE_DEG = 35.0

# Stars
STAR_COUNT = 40
STAR_SKY_FRACTION = 0.55  # stars live in the top part of the screen
STAR_MIN_TWINKLE = 0.02  # rad/tick
STAR_MAX_TWINKLE = 0.08

# Day / night cycle
DAY_NIGHT_CHECK_MS = 1000
NIGHT_DURATION_MS = 30000
NIGHT_CHANCE = 0.05  # per check while it is day
TRANSITION_RATE = 0.01  # per tick
SUN_MOON_THRESHOLD = 0.5

# Sun / moon glyph
SUN_X = WINDOW_WIDTH - 80
SUN_Y = 80
SUN_RADIUS = 40
SUN_RAY_LENGTH = 20

# Palette
SKY_DAY_TOP = (214, 236, 250)
SKY_DAY_BOTTOM = (247, 247, 247)
SKY_NIGHT_TOP = (10, 14, 38)
SKY_NIGHT_BOTTOM = (40, 46, 82)
GROUND_DAY = (83, 83, 83)
GROUND_NIGHT = (170, 170, 190)
DINO_COLOR = (83, 83, 83)
DINO_NIGHT_COLOR = (200, 200, 210)
CACTUS_COLOR = (22, 217, 44)
CACTUS_GOLD = (232, 190, 40)
CACTUS_FLOWER = (240, 90, 160)
ROCKET_COLOR = (255, 68, 68)
FLAME_COLOR = (255, 165, 0)
CLOUD_COLOR = (255, 255, 255)
BIRD_COLOR = (60, 60, 70)
UFO_COLOR = (150, 160, 180)
UFO_DOME = (140, 230, 200)
COMET_COLOR = (230, 240, 255)
METEOR_COLOR = (255, 150, 80)
STAR_COLOR = (255, 255, 230)
SUN_COLOR = (255, 215, 0)
MOON_COLOR = (235, 235, 215)
TEXT_COLOR = (83, 83, 83)
HEART_COLOR = (220, 40, 60)

# High score persistence
HIGH_SCORE_PATH = os.environ.get(
    "DINO_DASH_HIGHSCORE", os.path.join(os.path.expanduser("~"), ".dino_dash_highscore.json")
)
