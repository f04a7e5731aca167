"""Points in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable point with Cartesian coordinates."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Point | None = None) -> float:
        """Return the Euclidean distance to ``other`` (the origin by default)."""
        if other is None:
            other = Point()
        return math.hypot(self.x - other.x, self.y - other.y)