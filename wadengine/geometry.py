"""Two-dimensional points and vector operations."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """A point or vector in the plane."""

    x: float
    y: float

    @classmethod
    def origin(cls) -> Point2D:
        return cls(0.0, 0.0)

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def dot(self, other: Point2D) -> float:
        return self.x * other.x + self.y * other.y

    def normalize(self) -> Point2D:
        """Return the unit vector in the same direction, or the origin."""
        length = math.hypot(self.x, self.y)
        if length > 0.0:
            return Point2D(self.x / length, self.y / length)
        return Point2D.origin()

    def rotate(self, angle_rad: float) -> Point2D:
        """Rotate counter-clockwise about the origin."""
        cos = math.cos(angle_rad)
        sin = math.sin(angle_rad)
        return Point2D(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def __add__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point2D:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point2D(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"