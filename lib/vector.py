from __future__ import annotations

import math
from dataclasses import dataclass

from wpimath.units import degrees


@dataclass(frozen=True)
class Vector2D:
    """
    Immutable 2D vector in the robot frame. +y is forwards and +x is to the right.
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def fromDirection(cls, direction: degrees, magnitude: float = 1.0) -> Vector2D:
        """
        Builds a vector pointing at a heading measured clockwise from forwards.

        :param direction: heading in degrees, 0 is directly forwards
        :param magnitude: length of the resulting vector
        """
        rads = math.radians(direction)
        return cls(math.sin(rads) * magnitude, math.cos(rads) * magnitude)

    def add(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def scale(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def reflectAcrossX(self) -> Vector2D:
        """Mirrors between the front and rear wheel on the same side."""
        return Vector2D(self.x, -self.y)

    def reflectAcrossY(self) -> Vector2D:
        """Mirrors between the left and right wheel."""
        return Vector2D(-self.x, self.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def angleFromForward(self) -> degrees:
        """
        Heading of the vector in degrees on [0, 360), where 0 is +y and the
        angle increases clockwise. Undefined for the zero vector.
        """
        angle = math.degrees(math.atan2(self.x, self.y)) % 360.0
        # -1e-17 % 360 rounds up to 360.0
        if angle >= 360.0:
            angle -= 360.0
        return angle

    def __add__(self, other: Vector2D) -> Vector2D:
        return self.add(other)

    def __mul__(self, scalar: float) -> Vector2D:
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> Vector2D:
        return self.scale(scalar)

    def __neg__(self) -> Vector2D:
        return self.scale(-1)
