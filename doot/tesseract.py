"""A spinning tesseract, projected from four dimensions to the screen."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import combinations, product
from typing import Protocol

from doot.vector import Vec2, Vec4

WIDTH = 1200
HEIGHT = 675

W_DISTANCE = 2.5
Z_DISTANCE = 3.5
PROJECTION_SCALE = 400.0

LINE_WIDTH = 2.0
LINE_COLOR = Vec4(0.2, 0.8, 1.0, 1.0)
SECOND_PLANE_SPEED = 0.7

# All sixteen combinations of ±1, with x varying fastest.
VERTICES: tuple[Vec4, ...] = tuple(
    Vec4(x, y, z, w) for w, z, y, x in product((-1.0, 1.0), repeat=4)
)


class LineRenderer(Protocol):
    def draw_line(self, p0: Vec2, p1: Vec2, width: float, color: Vec4) -> None: ...


def build_edges(vertices: Sequence[Vec4]) -> list[tuple[int, int]]:
    """Index pairs of vertices that differ in exactly one coordinate."""
    return [
        (i, j)
        for (i, a), (j, b) in combinations(enumerate(vertices), 2)
        if sum(p != q for p, q in zip(a, b)) == 1
    ]


EDGES: tuple[tuple[int, int], ...] = tuple(build_edges(VERTICES))


def rotate_xw(v: Vec4, angle: float) -> Vec4:
    """Rotate ``v`` in the x-w plane."""
    c, s = math.cos(angle), math.sin(angle)
    return Vec4(v.x * c - v.w * s, v.y, v.z, v.x * s + v.w * c)


def rotate_zw(v: Vec4, angle: float) -> Vec4:
    """Rotate ``v`` in the z-w plane."""
    c, s = math.cos(angle), math.sin(angle)
    return Vec4(v.x, v.y, v.z * c - v.w * s, v.z * s + v.w * c)


def project(v: Vec4, width: int, height: int) -> Vec2:
    """Perspective-project a 4D point to screen coordinates."""
    w4 = 1.0 / (W_DISTANCE - v.w)
    x3 = v.x * w4
    y3 = v.y * w4
    z3 = v.z * w4
    z3p = 1.0 / (Z_DISTANCE - z3)
    return Vec2(
        width // 2 + x3 * z3p * PROJECTION_SCALE,
        height // 2 + y3 * z3p * PROJECTION_SCALE,
    )


def tesseract_lines(angle: float, width: int, height: int) -> Iterator[tuple[Vec2, Vec2]]:
    """Screen-space end points of every edge at the given rotation."""
    angle2 = angle * SECOND_PLANE_SPEED

    def place(v: Vec4) -> Vec2:
        return project(rotate_zw(rotate_xw(v, angle), angle2), width, height)

    for i, j in EDGES:
        yield place(VERTICES[i]), place(VERTICES[j])


def draw_tesseract(renderer: LineRenderer, angle: float) -> None:
    """Draw every edge of the tesseract through ``renderer``."""
    for pa, pb in tesseract_lines(angle, WIDTH, HEIGHT):
        renderer.draw_line(pa, pb, LINE_WIDTH, LINE_COLOR)