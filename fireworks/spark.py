"""Explosion sparks: short-lived radial particles with friction and gravity."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from fireworks.constants import (
    SPARK_BRIGHTNESS_MAX,
    SPARK_BRIGHTNESS_MIN,
    SPARK_BURST_COUNT,
    SPARK_DECAY_MAX,
    SPARK_DECAY_MIN,
    SPARK_FRICTION,
    SPARK_GRAVITY,
    SPARK_SPEED_MAX,
    SPARK_SPEED_MIN,
)
from fireworks.rng_service import RNGService


@dataclass
class Spark:
    x: float
    y: float
    angle: float
    speed: float
    hue: float
    brightness: float
    decay: float
    alpha: float = 1.0
    friction: float = SPARK_FRICTION
    gravity: float = SPARK_GRAVITY


def spawn_burst(
    site: Tuple[float, float],
    count: int = SPARK_BURST_COUNT,
    rng: RNGService | None = None,
) -> List[Spark]:
    """Create ``count`` sparks radiating from ``site``."""
    rng = rng or RNGService.get()
    x, y = site
    return [
        Spark(
            x=x,
            y=y,
            angle=rng.range(0, math.pi * 2),
            speed=rng.range(SPARK_SPEED_MIN, SPARK_SPEED_MAX),
            hue=rng.range(0, 360),
            brightness=rng.range(SPARK_BRIGHTNESS_MIN, SPARK_BRIGHTNESS_MAX),
            decay=rng.range(SPARK_DECAY_MIN, SPARK_DECAY_MAX),
        )
        for _ in range(count)
    ]


def advance(spark: Spark) -> bool:
    """Advance one tick. Returns True once the spark has faded out."""
    spark.speed *= spark.friction
    spark.x += math.cos(spark.angle) * spark.speed
    spark.y += math.sin(spark.angle) * spark.speed + spark.gravity
    spark.alpha -= spark.decay
    return spark.alpha <= 0


__all__ = ["Spark", "spawn_burst", "advance"]
