"""4x4 transformation matrices in row-vector convention."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import chain

from doot.vector import Vec3

Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix stored as four rows.

    Translation lives in the last row, so points are treated as row vectors
    and ``a @ b`` applies ``a`` first, then ``b``.
    """

    rows: tuple[Row, Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Mat4 needs exactly four rows of four values")
        object.__setattr__(self, "rows", rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return multiply(self, other)

    def flatten(self) -> tuple[float, ...]:
        """All sixteen values, row after row."""
        return tuple(chain.from_iterable(self.rows))


def identity() -> Mat4:
    """The identity matrix."""
    return Mat4(tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)))


def multiply(m1: Mat4, m2: Mat4) -> Mat4:
    """Matrix product ``m1 * m2``."""
    columns = list(zip(*m2.rows))
    return Mat4(
        tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in m1.rows
        )
    )


def translate(translation: Vec3) -> Mat4:
    """Translation by the given vector."""
    x, y, z = translation
    return Mat4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (x, y, z, 1.0),
        )
    )


def scale(factors: Vec3) -> Mat4:
    """Scaling along each axis by the given factors."""
    x, y, z = factors
    return Mat4(
        (
            (x, 0.0, 0.0, 0.0),
            (0.0, y, 0.0, 0.0),
            (0.0, 0.0, z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def rotate(axis: Vec3, angle: float) -> Mat4:
    """Rotation by ``angle`` radians about ``axis``."""
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    x, y, z = Vec3(*axis).normalized()
    return Mat4(
        (
            (t * x * x + c, t * x * y - s * z, t * x * z + s * y, 0.0),
            (t * x * y + s * z, t * y * y + c, t * y * z - s * x, 0.0),
            (t * x * z - s * y, t * y * z + s * x, t * z * z + c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    """Orthographic projection of the given box onto the unit cube."""
    return Mat4(
        (
            (2.0 / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2.0 / (top - bottom), 0.0, 0.0),
            (0.0, 0.0, 2.0 / (far - near), 0.0),
            (
                -(right + left) / (right - left),
                -(top + bottom) / (top - bottom),
                -(far + near) / (far - near),
                1.0,
            ),
        )
    )