"""Circles in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from planeshapes.point import Point

_TOLERANCE = 1e-6


@dataclass
class Circle:
    """A circle given by its radius and centre."""

    radius: float
    center: Point = field(default_factory=Point)

    def circumference(self) -> float:
        """Return the circumference of the circle."""
        return 2 * math.pi * self.radius

    def area(self) -> float:
        """Return the area of the circle."""
        return math.pi * self.radius * self.radius

    def points(self) -> list[Point]:
        """Return one point on the circle for every whole degree, from 0 to 359."""
        cx, cy, r = self.center.x, self.center.y, self.radius
        return [
            Point(cx + r * math.cos(angle), cy + r * math.sin(angle))
            for angle in (math.radians(degree) for degree in range(360))
        ]

    def translate(self, offset: Point) -> None:
        """Move the centre by ``offset``."""
        self.center = Point(self.center.x + offset.x, self.center.y + offset.y)

    def resize(self, ratio: float) -> None:
        """Scale the radius by ``ratio``, keeping the centre."""
        self.radius *= ratio

    def equals(self, other: Circle) -> bool:
        """Return whether both circles match within a small tolerance."""
        return (
            abs(self.radius - other.radius) < _TOLERANCE
            and abs(self.center.x - other.center.x) < _TOLERANCE
            and abs(self.center.y - other.center.y) < _TOLERANCE
        )