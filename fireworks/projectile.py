"""Firework projectiles.

A projectile is launched from an origin toward a target and accelerates
geometrically along the straight line between them. Once the distance
covered reaches the distance to the target it is marked exploded; the
driver then drops it and spawns a spark burst at the *target* (not at the
terminal position, which can overshoot because speed keeps growing).

Lifecycle per tick:
    advance() -> False      moving, or exploded flag just set
    advance() -> True       already exploded; caller removes it
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Tuple

from fireworks.constants import (
    PROJECTILE_ACCELERATION,
    PROJECTILE_BASE_SPEED,
    PROJECTILE_BRIGHTNESS_MAX,
    PROJECTILE_BRIGHTNESS_MIN,
    PROJECTILE_TRAIL_LENGTH,
)
from fireworks.rng_service import RNGService

Point = Tuple[float, float]


@dataclass
class Projectile:
    origin: Point
    target: Point
    x: float
    y: float
    angle: float
    distance_to_target: float
    brightness: float
    speed: float = PROJECTILE_BASE_SPEED
    acceleration: float = PROJECTILE_ACCELERATION
    distance_traveled: float = 0.0
    exploded: bool = False
    # Newest position first
    trail: Deque[Point] = field(default_factory=lambda: deque(maxlen=PROJECTILE_TRAIL_LENGTH))

    @property
    def pos(self) -> Point:
        return (self.x, self.y)

    @property
    def tail(self) -> Point:
        """Oldest retained trail position (start of the drawn streak)."""
        return self.trail[-1]


def launch(origin: Point, target: Point, rng: RNGService | None = None) -> Projectile:
    rng = rng or RNGService.get()
    ox, oy = origin
    tx, ty = target
    proj = Projectile(
        origin=(ox, oy),
        target=(tx, ty),
        x=ox,
        y=oy,
        angle=math.atan2(ty - oy, tx - ox),
        distance_to_target=math.hypot(tx - ox, ty - oy),
        brightness=rng.range(PROJECTILE_BRIGHTNESS_MIN, PROJECTILE_BRIGHTNESS_MAX),
    )
    for _ in range(PROJECTILE_TRAIL_LENGTH):
        proj.trail.append((ox, oy))
    return proj


def advance(proj: Projectile) -> bool:
    """Advance one tick. Returns True when the projectile should explode now."""
    if proj.exploded:
        return True

    proj.trail.appendleft((proj.x, proj.y))
    proj.speed *= proj.acceleration
    vx = math.cos(proj.angle) * proj.speed
    vy = math.sin(proj.angle) * proj.speed

    ox, oy = proj.origin
    proj.distance_traveled = math.hypot(proj.x - ox, proj.y - oy)
    if proj.distance_traveled >= proj.distance_to_target:
        proj.exploded = True
    else:
        proj.x += vx
        proj.y += vy
    return False


__all__ = ["Projectile", "Point", "launch", "advance"]
