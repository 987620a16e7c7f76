"""Points and vectors in the chart plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .common import degree_to_radian, turn_to_radian

DEFAULT_TOLERANCE = 1.0e-6


def _rotate(x: float, y: float, tau: float) -> tuple[float, float]:
    cos, sin = math.cos(tau), math.sin(tau)
    return x * cos - y * sin, x * sin + y * cos


def _close(a: float, b: float, tolerance: float) -> bool:
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)


@dataclass(frozen=True)
class Point:
    """A point on the chart."""

    x: float = 0.0
    y: float = 0.0

    def rotate_tau(self, tau: float) -> Point:
        """Rotate about the origin by ``tau`` radians."""
        return Point(*_rotate(self.x, self.y, tau))

    def rotate_turn(self, turn: float) -> Point:
        """Rotate about the origin by a number of turns."""
        return self.rotate_tau(turn_to_radian(turn))

    def rotate_degree(self, degree: float) -> Point:
        """Rotate about the origin by a number of degrees."""
        return self.rotate_tau(degree_to_radian(degree))

    def translate(self, vector: Vector) -> Point:
        """Return the point moved by ``vector``."""
        return Point(self.x + vector.x, self.y + vector.y)

    def isclose(self, other: Point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Compare coordinates within an absolute or relative tolerance."""
        return _close(self.x, other.x, tolerance) and _close(self.y, other.y, tolerance)


@dataclass(frozen=True)
class Vector:
    """A displacement on the chart."""

    x: float = 0.0
    y: float = 0.0

    def to_point(self) -> Point:
        """Return the point this vector reaches from the origin."""
        return Point(self.x, self.y)

    def module(self) -> float:
        """Return the length of the vector."""
        return math.hypot(self.x, self.y)

    def az_rotate_tau(self, tau: float) -> Vector:
        """Rotate around the z axis by ``tau`` radians."""
        return Vector(*_rotate(self.x, self.y, tau))

    def multiply(self, num: float) -> Vector:
        """Scale the vector by ``num``."""
        return Vector(self.x * num, self.y * num)

    def isclose(self, other: Vector, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Compare components within an absolute or relative tolerance."""
        return _close(self.x, other.x, tolerance) and _close(self.y, other.y, tolerance)