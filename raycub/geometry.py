"""Two-dimensional vectors and angle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

TWO_PI = math.pi * 2


@dataclass(frozen=True)
class Vector:
    """A point or displacement in the plane."""

    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> Vector:
        """Return this vector multiplied by ``factor``."""
        return Vector(self.x * factor, self.y * factor)


def reset_angle(angle: float) -> float:
    """Bring an angle at most one turn out of range back into [0, 2*pi]."""
    if angle < 0:
        angle += TWO_PI
    if angle > TWO_PI:
        angle -= TWO_PI
    return angle


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return (math.pi / 180.0) * degrees


def calc_hyp(a: Vector, b: Vector) -> float:
    """Return the distance between two points."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)