"""Plane geometry: points, circles, squares and triangles."""

__version__ = "0.1.0"
__all__ = ["point", "circle", "square", "triangle"]