"""Frame rendering: paints a FrameSnapshot onto a pygame surface."""

from __future__ import annotations

import math
from typing import Callable

import pygame

from .config import (
    BIRD_COLOR,
    CACTUS_COLOR,
    CACTUS_FLOWER,
    CACTUS_GOLD,
    CLOUD_COLOR,
    COMET_COLOR,
    DINO_BODY_HEIGHT,
    DINO_BODY_WIDTH,
    DINO_COLOR,
    DINO_LEG_HEIGHT,
    DINO_NIGHT_COLOR,
    DUCK_SCALE,
    FLAME_COLOR,
    GROUND_DAY,
    GROUND_NIGHT,
    HEART_COLOR,
    MAX_LIVES,
    METEOR_COLOR,
    MOON_COLOR,
    ROCKET_COLOR,
    SKY_DAY_BOTTOM,
    SKY_DAY_TOP,
    SKY_NIGHT_BOTTOM,
    SKY_NIGHT_TOP,
    STAR_COLOR,
    SUN_COLOR,
    SUN_RADIUS,
    SUN_RAY_LENGTH,
    SUN_X,
    SUN_Y,
    TEXT_COLOR,
    UFO_COLOR,
    UFO_DOME,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .entities import Bird, Cactus, CactusType, Comet, Entity, EntityKind
from .state import FrameSnapshot
from .utils import lerp_color, scale_color, vertical_gradient


class Renderer:
    """Draws one frame from a read-only snapshot; never touches simulation state."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.font_big = pygame.font.SysFont(None, 48)
        self.font_small = pygame.font.SysFont(None, 26)
        self.sky_day = pygame.surfarray.make_surface(
            vertical_gradient(WINDOW_WIDTH, WINDOW_HEIGHT, SKY_DAY_TOP, SKY_DAY_BOTTOM)
        )
        self.sky_night = pygame.surfarray.make_surface(
            vertical_gradient(WINDOW_WIDTH, WINDOW_HEIGHT, SKY_NIGHT_TOP, SKY_NIGHT_BOTTOM)
        )
        self._painters: dict[EntityKind, Callable[..., None]] = {
            EntityKind.CACTUS: self._draw_cactus,
            EntityKind.GROUND_ROCKET: self._draw_rocket,
            EntityKind.CLOUD: self._draw_cloud,
            EntityKind.BIRD: self._draw_bird,
            EntityKind.UFO: self._draw_ufo,
            EntityKind.COMET: self._draw_streak,
            EntityKind.METEOR: self._draw_streak,
        }

    def draw(self, snap: FrameSnapshot) -> None:
        surf = self.surface
        night = snap.day_night.transition
        self._draw_sky(surf, night)
        self._draw_stars(surf, snap)
        self._draw_sun_or_moon(surf, snap)
        for group in (snap.clouds, snap.birds, snap.night_sky, snap.rockets):
            for entity in group:
                self._painters[entity.kind](surf, entity, night)
        # Blink while invincible
        if snap.invincibility_ticks == 0 or (snap.invincibility_ticks // 4) % 2 == 0:
            self._draw_dino(surf, snap, night)
        for cactus in snap.cacti:
            self._draw_cactus(surf, cactus, night)
        self._draw_hud(surf, snap, night)

    # Background ------------------------------------------------------------

    def _draw_sky(self, surf: pygame.Surface, night: float) -> None:
        surf.blit(self.sky_day, (0, 0))
        if night > 0.0:
            self.sky_night.set_alpha(int(255 * night))
            surf.blit(self.sky_night, (0, 0))
        ground = lerp_color(GROUND_DAY, GROUND_NIGHT, night)
        pygame.draw.line(surf, ground, (0, WINDOW_HEIGHT - 1), (WINDOW_WIDTH, WINDOW_HEIGHT - 1), 2)

    def _draw_stars(self, surf: pygame.Surface, snap: FrameSnapshot) -> None:
        if snap.day_night.transition <= 0.0:
            return
        sky = lerp_color(SKY_DAY_TOP, SKY_NIGHT_TOP, snap.day_night.transition)
        for star in snap.stars:
            alpha = snap.day_night.star_alpha(star.brightness)
            color = lerp_color(sky, STAR_COLOR, alpha)
            pygame.draw.circle(surf, color, (int(star.x), int(star.y)), max(1, int(star.width)))

    def _draw_sun_or_moon(self, surf: pygame.Surface, snap: FrameSnapshot) -> None:
        if snap.day_night.show_moon:
            pygame.draw.circle(surf, MOON_COLOR, (SUN_X, SUN_Y), SUN_RADIUS - 6)
            shadow = lerp_color(SKY_DAY_TOP, SKY_NIGHT_TOP, snap.day_night.transition)
            pygame.draw.circle(surf, shadow, (SUN_X + 14, SUN_Y - 8), SUN_RADIUS - 10)
            return
        pygame.draw.circle(surf, SUN_COLOR, (SUN_X, SUN_Y), SUN_RADIUS)
        for i in range(8):
            angle = i * math.pi / 4
            start = (SUN_X + math.cos(angle) * SUN_RADIUS, SUN_Y + math.sin(angle) * SUN_RADIUS)
            end = (
                SUN_X + math.cos(angle) * (SUN_RADIUS + SUN_RAY_LENGTH),
                SUN_Y + math.sin(angle) * (SUN_RADIUS + SUN_RAY_LENGTH),
            )
            pygame.draw.line(surf, SUN_COLOR, start, end, 4)

    def _draw_cloud(self, surf: pygame.Surface, cloud: Entity, night: float) -> None:
        color = scale_color(CLOUD_COLOR, 1.0 - 0.6 * night)
        x, y, w, h = (int(v) for v in cloud.box)
        pygame.draw.ellipse(surf, color, pygame.Rect(x, y + h // 3, w, h - h // 3))
        pygame.draw.ellipse(surf, color, pygame.Rect(x + w // 4, y, w // 2, h * 2 // 3))

    # Sky creatures -----------------------------------------------------------

    def _draw_bird(self, surf: pygame.Surface, bird: Bird, night: float) -> None:
        x, y, w, h = bird.x, bird.y, bird.width, bird.height
        tip_y = y if bird.wings_up else y + h
        mid = (x + w / 2, y + h / 2)
        pygame.draw.lines(surf, BIRD_COLOR, False, [(x, tip_y), mid, (x + w, tip_y)], 3)

    def _draw_ufo(self, surf: pygame.Surface, ufo: Entity, night: float) -> None:
        x, y, w, h = (int(v) for v in ufo.box)
        pygame.draw.ellipse(surf, UFO_DOME, pygame.Rect(x + w // 4, y, w // 2, h * 2 // 3))
        pygame.draw.ellipse(surf, UFO_COLOR, pygame.Rect(x, y + h // 3, w, h * 2 // 3))

    def _draw_streak(self, surf: pygame.Surface, streak: Comet, night: float) -> None:
        color = METEOR_COLOR if streak.kind is EntityKind.METEOR else COMET_COLOR
        cx = streak.x + streak.width / 2
        cy = streak.y + streak.height / 2
        tail = (cx - streak.vx * 6, cy - streak.vy * 6)
        pygame.draw.line(surf, scale_color(color, 0.6), (cx, cy), tail, 2)
        pygame.draw.circle(surf, color, (int(cx), int(cy)), max(2, int(streak.width / 2)))

    # Hazards ----------------------------------------------------------------

    def _draw_cactus(self, surf: pygame.Surface, cactus: Cactus, night: float) -> None:
        kind = cactus.cactus_type
        color = {CactusType.GOLDEN: CACTUS_GOLD}.get(kind, CACTUS_COLOR)
        # Silhouette stands on the ground, centred on the collision box
        w, h = int(cactus.draw_width), int(cactus.draw_height)
        x = int(cactus.x + (cactus.width - w) / 2)
        y = WINDOW_HEIGHT - h
        stems = {CactusType.DOUBLE: 2, CactusType.TRIPLE: 3}.get(kind, 1)
        stem_w = max(8, w // stems - 4)
        for i in range(stems):
            sx = x + i * (w // stems)
            pygame.draw.rect(surf, color, pygame.Rect(sx, y, stem_w, h), border_radius=4)
            # Arms
            pygame.draw.rect(surf, color, pygame.Rect(sx - 5, y + h // 3, 5, h // 4))
            pygame.draw.rect(surf, color, pygame.Rect(sx + stem_w, y + h // 4, 5, h // 4))
        if kind is CactusType.FLOWERING:
            pygame.draw.circle(surf, CACTUS_FLOWER, (x + stem_w // 2, y + 2), 6)
        if cactus.rare:
            # Rare finds get a glint on top
            pygame.draw.circle(surf, (255, 255, 255), (x + stem_w // 2, y - 6), 2)

    def _draw_rocket(self, surf: pygame.Surface, rocket: Entity, night: float) -> None:
        x, y, w, h = rocket.x, rocket.y, rocket.width, rocket.height
        pygame.draw.rect(surf, ROCKET_COLOR, pygame.Rect(int(x), int(y), int(w), int(h)))
        # Nose faces the direction of travel
        pygame.draw.polygon(surf, ROCKET_COLOR, [(x, y), (x - 10, y + h / 2), (x, y + h)])
        pygame.draw.polygon(
            surf, FLAME_COLOR, [(x + w, y + h / 4), (x + w + 15, y + h / 2), (x + w, y + h * 3 / 4)]
        )

    # Player -----------------------------------------------------------------

    def _draw_dino(self, surf: pygame.Surface, snap: FrameSnapshot, night: float) -> None:
        dino = snap.dino
        color = lerp_color(DINO_COLOR, DINO_NIGHT_COLOR, night)
        scale = DUCK_SCALE if dino.ducking else 1.0
        body_h = int(DINO_BODY_HEIGHT * scale)
        x, y = int(dino.x), int(dino.y)
        pygame.draw.rect(surf, color, pygame.Rect(x, y, DINO_BODY_WIDTH, body_h))
        # Legs hang from the bottom of the body
        for fx in (0.2, 0.7):
            leg_x = x + int(DINO_BODY_WIDTH * fx)
            pygame.draw.rect(surf, color, pygame.Rect(leg_x, y + body_h, 10, DINO_LEG_HEIGHT))
        arm_h = max(2, int(8 * scale))
        pygame.draw.rect(surf, color, pygame.Rect(x + DINO_BODY_WIDTH, y + body_h // 2, 12, arm_h))
        eye_r = max(2, int(8 * scale))
        eye = (x + DINO_BODY_WIDTH - 15, y + max(eye_r + 2, int(15 * scale)))
        pygame.draw.circle(surf, (255, 255, 255), eye, eye_r)
        pygame.draw.circle(surf, (0, 0, 0), (eye[0] + 2, eye[1]), max(1, eye_r // 2))

    # HUD ---------------------------------------------------------------------

    def _draw_heart(self, surf: pygame.Surface, x: int, y: int, filled: bool) -> None:
        points = [(x, y + 5), (x + 10, y + 20), (x + 20, y + 5), (x + 15, y), (x + 10, y + 4), (x + 5, y)]
        pygame.draw.polygon(surf, HEART_COLOR, points, 0 if filled else 2)

    def _draw_hud(self, surf: pygame.Surface, snap: FrameSnapshot, night: float) -> None:
        text_color = lerp_color(TEXT_COLOR, (230, 230, 230), night)
        score = self.font_small.render(f"Score: {snap.score}", True, text_color)
        surf.blit(score, (30, 24))
        best = self.font_small.render(f"Best: {snap.high_score}", True, text_color)
        surf.blit(best, (30, 50))
        for i in range(MAX_LIVES):
            self._draw_heart(surf, 30 + i * 40, 80, i < snap.lives)

        center = (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)
        if not snap.started:
            title = self.font_big.render("Dino Dash", True, text_color)
            hint = self.font_small.render("Press Space to start", True, text_color)
        elif snap.over:
            title = self.font_big.render("Game Over!", True, text_color)
            hint = self.font_small.render(
                f"Final Score: {snap.score}  -  Press Space to restart", True, text_color
            )
        else:
            return
        surf.blit(title, title.get_rect(center=(center[0], center[1] - 30)))
        surf.blit(hint, hint.get_rect(center=(center[0], center[1] + 15)))
