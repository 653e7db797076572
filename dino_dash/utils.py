"""Geometry, timing and color utility functions used across the game."""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from .config import MAX_FRAME_SCALE, MAX_FRAME_TIME, TARGET_FRAME_TIME


class Box(NamedTuple):
    """Axis-aligned rectangle in screen pixels, y growing downwards."""

    x: float
    y: float
    width: float
    height: float


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def rects_overlap(a: Box, b: Box) -> bool:
    """True if the two rectangles share interior area.

    Edges that merely touch do not count as an overlap.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def sanitize_dt(dt: float) -> float:
    """Coerce a frame duration (seconds) into [0, MAX_FRAME_TIME]."""
    try:
        dt = float(dt)
    except OverflowError:
        # Integers beyond float range
        return MAX_FRAME_TIME if dt > 0 else 0.0
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(dt) or dt < 0.0:
        return 0.0
    return min(dt, MAX_FRAME_TIME)


def frame_scale(dt: float) -> float:
    """Frame duration normalized against the target frame, capped to absorb stalls."""
    return min(sanitize_dt(dt) / TARGET_FRAME_TIME, MAX_FRAME_SCALE)


def per_frame_probability(chance: float, scale: float) -> float:
    """Convert a per-tick chance into the chance for a frame lasting `scale` ticks."""
    if chance <= 0.0 or scale <= 0.0:
        return 0.0
    if chance >= 1.0:
        return 1.0
    return 1.0 - (1.0 - chance) ** scale


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_color(
    a: tuple[int, int, int], b: tuple[int, int, int], t: float
) -> tuple[int, int, int]:
    """Blend two RGB colors, t=0 gives a and t=1 gives b."""
    t = clamp(t, 0.0, 1.0)
    return (
        int(round(lerp(a[0], b[0], t))),
        int(round(lerp(a[1], b[1], t))),
        int(round(lerp(a[2], b[2], t))),
    )


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def vertical_gradient(
    w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]
) -> np.ndarray:
    """Build a (w, h, 3) uint8 array fading from `top` to `bottom`.

    The layout matches what pygame.surfarray expects (x first).
    """
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    column = np.asarray(top, dtype=np.float32) * (1.0 - t) + np.asarray(bottom, dtype=np.float32) * t
    column = np.clip(np.rint(column), 0, 255).astype(np.uint8)
    return np.broadcast_to(column[None, :, :], (w, h, 3)).copy()
