import math

import numpy as np

from dino_dash.config import MAX_FRAME_SCALE, MAX_FRAME_TIME, TARGET_FRAME_TIME
from dino_dash.utils import (
    Box,
    clamp,
    frame_scale,
    lerp_color,
    per_frame_probability,
    rects_overlap,
    sanitize_dt,
    vertical_gradient,
)


def test_clamp_basic() -> None:
    """clamp keeps values in range."""
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_rects_overlap() -> None:
    """Overlap needs shared area; touching edges do not count."""
    a = Box(0, 0, 10, 10)
    assert rects_overlap(a, Box(5, 5, 10, 10)) is True
    assert rects_overlap(Box(5, 5, 10, 10), a) is True
    # Touching edges are not a hit
    assert rects_overlap(a, Box(10, 0, 10, 10)) is False
    assert rects_overlap(a, Box(0, 10, 10, 10)) is False
    assert rects_overlap(a, Box(30, 30, 5, 5)) is False


def test_rects_overlap_containment() -> None:
    """A box inside another overlaps it."""
    assert rects_overlap(Box(0, 0, 100, 100), Box(40, 40, 5, 5)) is True


def test_sanitize_dt() -> None:
    """Frame times are coerced into [0, MAX_FRAME_TIME]."""
    assert sanitize_dt(0.016) == 0.016
    assert sanitize_dt(-1.0) == 0.0
    assert sanitize_dt(float("nan")) == 0.0
    assert sanitize_dt(float("inf")) == 0.0
    assert sanitize_dt("soon") == 0.0
    assert sanitize_dt(10.0) == MAX_FRAME_TIME
    assert sanitize_dt(10**400) == MAX_FRAME_TIME
    assert sanitize_dt(-10**400) == 0.0


def test_frame_scale_is_capped() -> None:
    """Frame scale is relative to the target frame and capped."""
    assert math.isclose(frame_scale(TARGET_FRAME_TIME), 1.0)
    assert math.isclose(frame_scale(TARGET_FRAME_TIME / 2), 0.5)
    assert frame_scale(1.0) == MAX_FRAME_SCALE
    assert frame_scale(-0.5) == 0.0


def test_per_frame_probability() -> None:
    """Per-tick chances convert consistently across frame lengths."""
    assert per_frame_probability(0.0, 1.0) == 0.0
    assert per_frame_probability(0.2, 0.0) == 0.0
    assert math.isclose(per_frame_probability(0.2, 1.0), 0.2)
    # Two short frames roll the same odds as one full one
    half = per_frame_probability(0.2, 0.5)
    assert math.isclose(1 - (1 - half) ** 2, 0.2)
    assert per_frame_probability(1.0, 0.3) == 1.0


def test_lerp_color_endpoints() -> None:
    """Color blend hits both endpoints and clamps t."""
    assert lerp_color((0, 0, 0), (200, 100, 50), 0.0) == (0, 0, 0)
    assert lerp_color((0, 0, 0), (200, 100, 50), 1.0) == (200, 100, 50)
    assert lerp_color((0, 0, 0), (200, 100, 50), 0.5) == (100, 50, 25)
    assert lerp_color((0, 0, 0), (200, 100, 50), 3.0) == (200, 100, 50)


def test_vertical_gradient_layout() -> None:
    """Gradient array is laid out for surfarray."""
    arr = vertical_gradient(4, 3, (0, 0, 0), (200, 100, 50))
    assert arr.shape == (4, 3, 3)
    assert arr.dtype == np.uint8
    assert tuple(arr[0, 0]) == (0, 0, 0)
    assert tuple(arr[3, 2]) == (200, 100, 50)
    assert tuple(arr[2, 1]) == (100, 50, 25)
