"""Small fixed-size float vectors."""

from __future__ import annotations

import math
from typing import NamedTuple


class Vec2(NamedTuple):
    """A two-component vector."""

    x: float
    y: float


class Vec3(NamedTuple):
    """A three-component vector, also addressable as an RGB colour."""

    x: float
    y: float
    z: float

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector pointing the same way.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.length()
        return Vec3(self.x / length, self.y / length, self.z / length)


class Vec4(NamedTuple):
    """A four-component vector, also addressable as an RGBA colour."""

    x: float
    y: float
    z: float
    w: float

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w