"""FireworkSimulation: the per-frame driver.

Owns the three particle collections (ambient dots, projectiles, sparks)
and advances every member exactly once per tick. External triggers
(key presses, clicks) never touch the collections directly: they flip
the ``celebrating`` flag or enqueue launches, which are released inside
the next ``tick`` so each frame has a single writer.

Frame order:
1. Translucent background fill (produces the fading trails)
2. Ambient dots: advance, then draw
3. Release queued launches; random launch while celebrating
4. Projectiles: draw, then advance; exploded ones become spark bursts
5. Sparks: draw, then advance; expired ones are dropped

Drawing is delegated to an optional *painter* (see ``Renderer``) so the
simulation can run headless in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from fireworks import ambient, projectile, spark
from fireworks.ambient import AmbientDot
from fireworks.constants import (
    AMBIENT_DOT_COUNT,
    LAUNCH_CHANCE,
    LAUNCH_MARGIN_X,
    LAUNCH_MIN_Y,
    SPARK_BURST_COUNT,
)
from fireworks.logger import get_logger
from fireworks.projectile import Point, Projectile
from fireworks.rng_service import RNGService
from fireworks.spark import Spark

log = get_logger("simulation")


class Painter(Protocol):
    def fade(self, width: float, height: float) -> None: ...

    def draw_dot(self, dot: AmbientDot) -> None: ...

    def draw_projectile(self, proj: Projectile) -> None: ...

    def draw_spark(self, s: Spark) -> None: ...


@dataclass
class PendingLaunch:
    delay: int  # ticks left before release
    target: Optional[Point] = None  # None -> random target at release time


class FireworkSimulation:
    def __init__(
        self,
        width: float,
        height: float,
        rng: RNGService | None = None,
        dot_count: int = AMBIENT_DOT_COUNT,
    ) -> None:
        self.rng = rng or RNGService.get()
        self.width = width
        self.height = height
        self.dot_count = dot_count
        self.celebrating = False
        self.frame = 0
        self.dots: List[AmbientDot] = []
        self.projectiles: List[Projectile] = []
        self.sparks: List[Spark] = []
        self._pending: List[PendingLaunch] = []
        self.reset()

    # --- Lifecycle -------------------------------------------------------
    def reset(self) -> None:
        self.dots = ambient.create_field(self.width, self.height, self.dot_count, self.rng)
        self.projectiles = []
        self.sparks = []
        self._pending = []
        self.frame = 0
        log.debug(f"Simulation reset ({self.dot_count} dots, {self.width}x{self.height})")

    def resize(self, width: float, height: float) -> None:
        """Change the viewport extent. Existing particles keep their positions."""
        self.width = width
        self.height = height
        log.debug(f"Viewport resized to {width}x{height}")

    # --- External triggers -----------------------------------------------
    def set_celebrating(self, flag: bool) -> None:
        flag = bool(flag)
        if flag != self.celebrating:
            log.info("Celebrating" if flag else "Celebration paused")
        self.celebrating = flag

    def launch(self, target: Optional[Point] = None, delay: int = 0) -> None:
        """Queue one projectile for release ``delay`` ticks from now."""
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._pending.append(PendingLaunch(delay, target))

    def launch_burst(self, n: int, stagger: int = 0) -> None:
        """Queue ``n`` projectiles with random targets, ``stagger`` ticks apart."""
        if n < 0:
            raise ValueError(f"burst size must be >= 0, got {n}")
        if stagger < 0:
            raise ValueError(f"stagger must be >= 0, got {stagger}")
        for i in range(n):
            self._pending.append(PendingLaunch(i * stagger))
        log.debug(f"Queued burst of {n} (stagger {stagger} ticks)")

    @property
    def pending_launches(self) -> int:
        return len(self._pending)

    # --- Geometry helpers --------------------------------------------------
    @property
    def launch_origin(self) -> Point:
        return (self.width / 2, self.height)

    def random_target(self) -> Point:
        """Random aim point in the upper half, away from the side edges.

        When the viewport is too small for the margins the range collapses
        toward its centre instead of inverting.
        """
        half_w = self.width / 2
        half_h = self.height / 2
        x = self.rng.range(min(LAUNCH_MARGIN_X, half_w), max(self.width - LAUNCH_MARGIN_X, half_w))
        y = self.rng.range(min(LAUNCH_MIN_Y, half_h), half_h)
        return (x, y)

    def _spawn(self, target: Optional[Point] = None) -> Projectile:
        proj = projectile.launch(self.launch_origin, target or self.random_target(), self.rng)
        self.projectiles.append(proj)
        return proj

    # --- Frame -----------------------------------------------------------
    def tick(self, painter: Optional[Painter] = None) -> Dict[str, Any]:
        """Run one frame. Returns a summary for instrumentation / tests."""
        self.frame += 1

        if painter is not None:
            painter.fade(self.width, self.height)

        for dot in self.dots:
            ambient.advance_dot(dot, self.width, self.height)
            if painter is not None:
                painter.draw_dot(dot)

        launched = self._release_pending()
        if self.celebrating and self.rng.random() < LAUNCH_CHANCE:
            self._spawn()
            launched += 1

        exploded = 0
        spawned = 0
        survivors: List[Projectile] = []
        for proj in self.projectiles:
            if painter is not None:
                painter.draw_projectile(proj)
            if projectile.advance(proj):
                burst = spark.spawn_burst(proj.target, SPARK_BURST_COUNT, self.rng)
                self.sparks.extend(burst)
                exploded += 1
                spawned += len(burst)
            else:
                survivors.append(proj)
        self.projectiles = survivors

        expired = 0
        live_sparks: List[Spark] = []
        for s in self.sparks:
            if painter is not None:
                painter.draw_spark(s)
            if spark.advance(s):
                expired += 1
            else:
                live_sparks.append(s)
        self.sparks = live_sparks

        return {
            "frame": self.frame,
            "launched": launched,
            "exploded": exploded,
            "sparks_spawned": spawned,
            "sparks_expired": expired,
            "projectiles": len(self.projectiles),
            "sparks": len(self.sparks),
        }

    def _release_pending(self) -> int:
        released = 0
        waiting: List[PendingLaunch] = []
        for item in self._pending:
            if item.delay <= 0:
                self._spawn(item.target)
                released += 1
            else:
                item.delay -= 1
                waiting.append(item)
        self._pending = waiting
        return released


__all__ = ["FireworkSimulation", "Painter", "PendingLaunch"]
