"""Triangles in the plane."""

from __future__ import annotations

from dataclasses import dataclass

from planeshapes.point import Point


@dataclass
class Triangle:
    """A triangle with vertices ``a``, ``b`` and ``c``."""

    a: Point
    b: Point
    c: Point

    def perimeter(self) -> float:
        """Return the sum of the side lengths."""
        return self.a.distance(self.b) + self.b.distance(self.c) + self.c.distance(self.a)

    def area(self) -> float:
        """Return the signed area (positive when the vertices run counterclockwise)."""
        a, b, c = self.a, self.b, self.c
        return 0.5 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))

    def center(self) -> Point:
        """Return the centroid."""
        return Point(
            (self.a.x + self.b.x + self.c.x) / 3,
            (self.a.y + self.b.y + self.c.y) / 3,
        )

    def points(self) -> list[Point]:
        """Return the vertices as a closed outline."""
        return [self.a, self.b, self.c, self.a]

    def translate(self, target: Point) -> None:
        """Move the triangle so that vertex ``a`` lands on ``target``."""
        dx = target.x - self.a.x
        dy = target.y - self.a.y
        self.b = Point(self.b.x + dx, self.b.y + dy)
        self.c = Point(self.c.x + dx, self.c.y + dy)
        self.a = target

    def resize(self, ratio: float) -> None:
        """Scale the triangle by ``ratio`` about its centroid."""
        g = self.center()

        def scale(p: Point) -> Point:
            return Point(g.x + ratio * (p.x - g.x), g.y + ratio * (p.y - g.y))

        self.a, self.b, self.c = scale(self.a), scale(self.b), scale(self.c)