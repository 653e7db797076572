"""Real-time frame clock feeding the simulation."""

from __future__ import annotations

from typing import NamedTuple

import pygame

from .config import FPS
from .utils import frame_scale, sanitize_dt


class FrameTime(NamedTuple):
    dt: float  # seconds since the previous tick, clamped
    scale: float  # dt in units of the target frame


class FrameClock:
    """Wraps a pygame clock and reports both real time and the frame-scale factor."""

    def __init__(self, clock: pygame.time.Clock | None = None, fps: int = FPS) -> None:
        self._clock = clock if clock is not None else pygame.time.Clock()
        self.fps = fps

    def tick(self) -> FrameTime:
        dt = sanitize_dt(self._clock.tick(self.fps) / 1000.0)
        return FrameTime(dt, frame_scale(dt))
