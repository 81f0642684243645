"""Shader compilation and program linking on the current OpenGL context."""

from __future__ import annotations

from pyglet.graphics.shader import Shader, ShaderException, ShaderProgram

VERTEX = "vertex"
FRAGMENT = "fragment"

_LOG_SIZE = 512


class ShaderError(RuntimeError):
    """A shader failed to compile or a program failed to link."""

    def __init__(self, message: str, log: str) -> None:
        super().__init__(f"{message}\nInfo Log:\n{log}")
        self.log = log


def _log_of(exc: Exception) -> str:
    return str(exc).strip()[: _LOG_SIZE - 1]


def compile_shader(shader_type: str, source: str) -> Shader:
    """Compile ``source`` as a ``shader_type`` shader ("vertex", "fragment").

    Raises ShaderError with the driver's info log if compilation fails.
    """
    try:
        return Shader(source, shader_type)
    except ShaderException as exc:
        raise ShaderError("Failed to compile shader!", _log_of(exc)) from exc


def link_program(*shaders: Shader) -> ShaderProgram:
    """Link the given compiled shaders into a program.

    Raises ShaderError with the driver's info log if linking fails.
    """
    try:
        return ShaderProgram(*shaders)
    except ShaderException as exc:
        raise ShaderError("Failed to link shader program!", _log_of(exc)) from exc