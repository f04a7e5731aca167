"""Squares in the plane, given by two opposite corners."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planeshapes.circle import Circle
from planeshapes.point import Point

_TOLERANCE = 1e-6


def _rotate_about(p: Point, pivot: Point, cos_theta: float, sin_theta: float) -> Point:
    dx = p.x - pivot.x
    dy = p.y - pivot.y
    return Point(
        cos_theta * dx - sin_theta * dy + pivot.x,
        sin_theta * dx + cos_theta * dy + pivot.y,
    )


@dataclass
class Square:
    """A square described by the opposite corners ``a`` and ``c``."""

    a: Point
    c: Point

    def side(self) -> float:
        """Return the length of a side."""
        return abs(self.a.x - self.c.x)

    def perimeter(self) -> float:
        """Return the perimeter."""
        return 4 * self.side()

    def area(self) -> float:
        """Return the area."""
        return self.side() * self.side()

    def center(self) -> Point:
        """Return the centre of the square."""
        half = self.side() / 2
        return Point(max(self.a.x, self.c.x) - half, max(self.a.y, self.c.y) - half)

    def points(self) -> list[Point]:
        """Return the corners as a closed outline, rotated to match the diagonal."""
        mid = self.center()
        half = self.side() / 2
        top_left = Point(mid.x - half, mid.y + half)
        top_right = Point(mid.x + half, mid.y + half)
        bottom_right = Point(mid.x + half, mid.y - half)
        bottom_left = Point(mid.x - half, mid.y - half)

        angle = math.atan2(self.c.y - self.a.y, self.c.x - self.a.x) - math.pi / 4
        cos_theta, sin_theta = math.cos(angle), math.sin(angle)
        outline = (top_left, top_right, bottom_right, bottom_left, top_left)
        return [_rotate_about(p, mid, cos_theta, sin_theta) for p in outline]

    def translate(self, offset: Point) -> None:
        """Move both corners by ``offset``."""
        self.a = Point(self.a.x + offset.x, self.a.y + offset.y)
        self.c = Point(self.c.x + offset.x, self.c.y + offset.y)

    def resize(self, ratio: float) -> None:
        """Scale the side by ``ratio`` about the centre."""
        mid = self.center()
        half = self.side() * ratio / 2
        self.a = Point(mid.x - half, mid.y - half)
        self.c = Point(mid.x + half, mid.y + half)

    def rotate(self, angle: float) -> None:
        """Rotate counterclockwise by ``angle`` degrees about the centre."""
        mid = self.center()
        theta = math.radians(angle)
        cos_theta, sin_theta = math.cos(theta), math.sin(theta)
        self.a = _rotate_about(self.a, mid, cos_theta, sin_theta)
        self.c = _rotate_about(self.c, mid, cos_theta, sin_theta)

    def equals(self, other: Square) -> bool:
        """Return whether both squares have the same side length."""
        return abs(self.side() - other.side()) < _TOLERANCE

    def inscribed_circle(self) -> Circle:
        """Return the circle touching every side."""
        return Circle(self.side() / 2.0, self.center())

    def circumscribed_circle(self) -> Circle:
        """Return the circle through every corner."""
        return Circle(self.side() * math.sqrt(2) / 2.0, self.center())