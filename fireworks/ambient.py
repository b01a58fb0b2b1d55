"""Ambient starfield.

Slow-drifting dots whose opacity oscillates between 0 and 1. They are
created once and live for the whole run; only the driver mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from fireworks.constants import (
    AMBIENT_DOT_COUNT,
    AMBIENT_DRIFT_MAX,
    AMBIENT_FADE_MAX,
    AMBIENT_FADE_MIN,
    AMBIENT_SIZE_MAX,
    AMBIENT_SIZE_MIN,
)
from fireworks.rng_service import RNGService


@dataclass
class AmbientDot:
    x: float
    y: float
    size: float
    speed_x: float
    speed_y: float
    opacity: float
    fade: float  # signed per-tick opacity delta


def create_dot(width: float, height: float, rng: RNGService | None = None) -> AmbientDot:
    rng = rng or RNGService.get()
    return AmbientDot(
        x=rng.range(0, width),
        y=rng.range(0, height),
        size=rng.range(AMBIENT_SIZE_MIN, AMBIENT_SIZE_MAX),
        speed_x=rng.range(-AMBIENT_DRIFT_MAX, AMBIENT_DRIFT_MAX),
        speed_y=rng.range(-AMBIENT_DRIFT_MAX, AMBIENT_DRIFT_MAX),
        opacity=rng.range(0, 1),
        fade=rng.range(AMBIENT_FADE_MIN, AMBIENT_FADE_MAX) * rng.sign(),
    )


def create_field(
    width: float,
    height: float,
    count: int = AMBIENT_DOT_COUNT,
    rng: RNGService | None = None,
) -> List[AmbientDot]:
    rng = rng or RNGService.get()
    return [create_dot(width, height, rng) for _ in range(count)]


def advance_dot(dot: AmbientDot, width: float, height: float) -> None:
    """Drift, fade and wrap ``dot`` in place for one tick.

    Opacity bounces: the fade direction flips once the value reaches either
    bound, so it may overshoot by at most one fade step. Coordinates that
    leave ``[0, extent]`` jump to the opposite edge.
    """
    width = max(width, 0)
    height = max(height, 0)

    dot.x += dot.speed_x
    dot.y += dot.speed_y
    dot.opacity += dot.fade
    if dot.opacity <= 0 or dot.opacity >= 1:
        dot.fade = -dot.fade

    if dot.x < 0:
        dot.x = width
    elif dot.x > width:
        dot.x = 0
    if dot.y < 0:
        dot.y = height
    elif dot.y > height:
        dot.y = 0


__all__ = ["AmbientDot", "create_dot", "create_field", "advance_dot"]
