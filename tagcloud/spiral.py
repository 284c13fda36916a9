"""
Golden-angle (phyllotactic) spiral of candidate anchor points.

Point n sits at angle n * golden_angle and at a radius proportional to that
angle, so the radius never shrinks as n grows. The golden angle keeps
successive points from lining up into straight rays.
"""

import itertools
import math
from dataclasses import dataclass
from typing import Iterator

from .geometry import Point

GOLDEN_ANGLE = math.pi * (3 - math.sqrt(5))
DEFAULT_RADIUS_STEP_FACTOR = 0.05


class SpiralPointGenerator:
    def __init__(self, center: Point, radius_step_factor: float = DEFAULT_RADIUS_STEP_FACTOR):
        if radius_step_factor <= 0:
            raise ValueError(f"radius_step_factor must be positive, got {radius_step_factor}")
        self.center = center
        self.radius_step_factor = radius_step_factor

    def point_at(self, step: int, scale: int) -> Point:
        """
        Spiral point number `step` for a spiral sampled at `scale`.
        Offsets are truncated toward zero, not rounded.
        """
        angle = step * GOLDEN_ANGLE
        radius = scale * self.radius_step_factor * (angle / (2 * math.pi))
        return Point(
            self.center.x + int(radius * math.cos(angle)),
            self.center.y + int(radius * math.sin(angle)),
        )

    def points(self, scale: int) -> Iterator[Point]:
        """Infinite sequence of spiral points starting from step 0 on every call."""
        return (self.point_at(step, scale) for step in itertools.count())

    def cursor(self, scale: int) -> "SpiralCursor":
        return SpiralCursor(self, scale)


@dataclass
class SpiralCursor:
    """Resumable position on one spiral: the scale plus an explicit step counter."""
    generator: SpiralPointGenerator
    scale: int
    step: int = 0

    def next_point(self) -> Point:
        point = self.generator.point_at(self.step, self.scale)
        self.step += 1
        return point
