"""Flat-colour 2D drawing of points, quads and lines with OpenGL."""

from __future__ import annotations

import math

from pyglet import gl

from doot import matrix
from doot.gl import FRAGMENT, VERTEX, compile_shader, link_program
from doot.matrix import Mat4
from doot.vector import Vec2, Vec3, Vec4

VERTEX_SHADER = (
    "#version 330 core\n"
    "layout (location = 0) in vec2 pos;\n"
    "uniform mat4 model;\n"
    "uniform mat4 projection;\n"
    "void main() {\n"
    "    gl_Position = projection * model * vec4(pos, 0.0, 1.0);\n"
    "}\n"
)

FRAGMENT_SHADER = (
    "#version 330 core\n"
    "out vec4 fragColor;\n"
    "uniform vec4 color;\n"
    "void main() {\n"
    "    fragColor = color;\n"
    "}\n"
)

CLEAR_COLOR = Vec4(0.2, 0.2, 0.2, 1.0)

# A unit quad centred on the origin, drawn as two triangles.
QUAD_VERTICES = (
    0.5, 0.5,    # top-right
    0.5, -0.5,   # bottom-right
    -0.5, -0.5,  # bottom-left
    -0.5, 0.5,   # top-left
)
QUAD_INDICES = (0, 1, 3, 1, 2, 3)

_Z_AXIS = Vec3(0.0, 0.0, 1.0)


def point_model(point: Vec2, size: float) -> Mat4:
    """Model matrix placing a square of side ``size`` at ``point``."""
    return matrix.scale(Vec3(size, size, 1.0)) @ matrix.translate(
        Vec3(point[0], point[1], 0.0)
    )


def quad_model(center: Vec2, size: Vec2, angle: float) -> Mat4:
    """Model matrix for a ``size`` rectangle at ``center`` turned by ``angle``."""
    return (
        matrix.scale(Vec3(size[0], size[1], 1.0))
        @ matrix.rotate(_Z_AXIS, angle)
        @ matrix.translate(Vec3(center[0], center[1], 0.0))
    )


def line_model(p0: Vec2, p1: Vec2, width: float) -> Mat4:
    """Model matrix stretching the unit quad into a line from ``p0`` to ``p1``."""
    dx = p1[0] - p0[0]
    dy = p0[1] - p1[1]
    length = math.hypot(dx, dy)
    theta = math.atan2(dy, dx)
    middle = Vec3((p0[0] + p1[0]) / 2.0, (p0[1] + p1[1]) / 2.0, 0.0)
    return (
        matrix.scale(Vec3(length, width, 1.0))
        @ matrix.rotate(_Z_AXIS, theta)
        @ matrix.translate(middle)
    )


class Renderer:
    """Draws coloured shapes in pixel coordinates on the current GL context."""

    def __init__(self, width: int, height: int) -> None:
        self.width = float(width)
        self.height = float(height)
        self.projection = matrix.ortho(0.0, self.width, self.height, 0.0, -1.0, 1.0)

        gl.glClearColor(*CLEAR_COLOR)

        vertex = compile_shader(VERTEX, VERTEX_SHADER)
        fragment = compile_shader(FRAGMENT, FRAGMENT_SHADER)
        self.program = link_program(vertex, fragment)
        self.program.use()

        self.quad = self.program.vertex_list_indexed(
            len(QUAD_VERTICES) // 2,
            gl.GL_TRIANGLES,
            QUAD_INDICES,
            pos=("f", QUAD_VERTICES),
        )
        self.program["projection"] = self.projection.flatten()

    def clear(self) -> None:
        """Fill the frame with the clear colour."""
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

    def draw_point(self, point: Vec2, size: float, color: Vec4) -> None:
        """Draw a square point of side ``size``."""
        self._draw(point_model(point, size), color)

    def draw_quad(self, center: Vec2, size: Vec2, angle: float, color: Vec4) -> None:
        """Draw a filled rectangle rotated by ``angle`` radians."""
        self._draw(quad_model(center, size, angle), color)

    def draw_line(self, p0: Vec2, p1: Vec2, width: float, color: Vec4) -> None:
        """Draw a line ``width`` pixels thick between two points."""
        self._draw(line_model(p0, p1, width), color)

    def _draw(self, model: Mat4, color: Vec4) -> None:
        self.program["color"] = tuple(color)
        self.program["model"] = model.flatten()
        self.quad.draw(gl.GL_TRIANGLES)