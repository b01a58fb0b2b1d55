"""pygame rasterisation of the simulation.

``Renderer`` implements the painter protocol consumed by
``FireworkSimulation.tick``. It never mutates simulation state.

Notes:
- The background is never cleared: a translucent overlay is blitted over
  the previous frame so moving objects leave fading trails.
- Translucent circles are stamped from small SRCALPHA surfaces because
  ``pygame.draw`` writes alpha instead of blending it.
- Sparks are blitted with ``BLEND_RGB_ADD``; the blend mode is a per-blit
  flag so it cannot leak into later draws.
- ``capture_sequence`` records each high-level draw step for tests.
"""

from __future__ import annotations

import colorsys
import math
from typing import Dict, List, Optional, Tuple

import pygame

from fireworks.ambient import AmbientDot
from fireworks.constants import BACKGROUND_COLOR, FADE_ALPHA, SPARK_RADIUS
from fireworks.projectile import Projectile
from fireworks.rng_service import RNGService
from fireworks.spark import Spark


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """Convert CSS-style HSL (degrees, percent, percent) to an RGB tuple."""
    r, g, b = colorsys.hls_to_rgb(
        (hue % 360) / 360.0,
        max(0.0, min(1.0, lightness / 100.0)),
        max(0.0, min(1.0, saturation / 100.0)),
    )
    return int(r * 255), int(g * 255), int(b * 255)


class Renderer:
    def __init__(
        self,
        surface: pygame.Surface,
        rng: RNGService | None = None,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        self.surface = surface
        self.rng = rng or RNGService.get()
        self.capture_sequence = capture_sequence
        self._overlay: pygame.Surface | None = None
        self._overlay_size: Tuple[int, int] = (0, 0)
        self._stamps: Dict[int, pygame.Surface] = {}

    def set_surface(self, surface: pygame.Surface) -> None:
        """Switch target (e.g. after a window resize)."""
        self.surface = surface
        self._overlay = None

    def _record(self, step: str) -> None:
        if self.capture_sequence is not None:
            self.capture_sequence.append(step)

    # --- Painter protocol ---------------------------------------------------
    def fade(self, width: float, height: float) -> None:
        size = (max(int(width), 0), max(int(height), 0))
        if self._overlay is None or self._overlay_size != size:
            self._overlay = pygame.Surface(size, pygame.SRCALPHA)
            self._overlay.fill((*BACKGROUND_COLOR, int(255 * FADE_ALPHA)))
            self._overlay_size = size
        self.surface.blit(self._overlay, (0, 0))
        self._record("fade")

    def draw_dot(self, dot: AmbientDot) -> None:
        alpha = int(255 * max(0.0, min(1.0, dot.opacity)))
        if alpha == 0:
            return
        stamp = self._circle_stamp(dot.size, (255, 255, 255, alpha))
        self.surface.blit(stamp, (dot.x - stamp.get_width() // 2, dot.y - stamp.get_height() // 2))
        self._record("dot")

    def draw_projectile(self, proj: Projectile) -> None:
        # Hue changes every frame, brightness is fixed per projectile
        color = hsl_to_rgb(self.rng.range(0, 360), 100, proj.brightness)
        pygame.draw.line(self.surface, color, proj.tail, proj.pos)
        self._record("projectile")

    def draw_spark(self, s: Spark) -> None:
        if s.alpha <= 0:
            return
        alpha = min(1.0, s.alpha)
        r, g, b = hsl_to_rgb(s.hue, 100, s.brightness)
        # Additive blending ignores the alpha channel, so premultiply
        color = (int(r * alpha), int(g * alpha), int(b * alpha), 255)
        stamp = self._circle_stamp(SPARK_RADIUS, color)
        self.surface.blit(
            stamp,
            (s.x - stamp.get_width() // 2, s.y - stamp.get_height() // 2),
            special_flags=pygame.BLEND_RGB_ADD,
        )
        self._record("spark")

    # --- Helpers ---------------------------------------------------------------
    def _circle_stamp(self, radius: float, color) -> pygame.Surface:
        # Spare pixel border so the circle never touches the stamp edge
        r = math.ceil(radius) + 1
        diameter = r * 2 + 1
        stamp = self._stamps.get(r)
        if stamp is None:
            stamp = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
            self._stamps[r] = stamp
        stamp.fill((0, 0, 0, 0))
        # pygame draws nothing below radius 1
        pygame.draw.circle(stamp, color, (r, r), max(1, round(radius)))
        return stamp


__all__ = ["Renderer", "hsl_to_rgb"]
