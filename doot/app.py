"""Window and main loop showing the spinning tesseract."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass

from doot.gl import ShaderError
from doot.renderer import Renderer
from doot.tesseract import HEIGHT, WIDTH, draw_tesseract

TITLE = "DOOT"
ANGULAR_SPEED = 2.0


@dataclass
class _FrameTimer:
    """Tracks frame time and the rotation angle it drives."""

    angle: float = 0.0
    last: float = 0.0

    def tick(self, now: float) -> float:
        delta = now - self.last
        self.last = now
        self.angle += ANGULAR_SPEED * delta
        return delta


def _frame_title(delta: float) -> str:
    fps = 1.0 / delta if delta else float("inf")
    return f"{TITLE} | {fps:.0f}"


def main(argv: list[str] | None = None) -> int:
    """Open the window and draw until it is closed."""
    parser = argparse.ArgumentParser(prog="doot", description="Draw a spinning tesseract.")
    parser.parse_args(argv)

    import pyglet.window
    from pyglet import gl

    config = gl.Config(
        major_version=3, minor_version=3, forward_compatible=True, double_buffer=True
    )
    try:
        window = pyglet.window.Window(
            WIDTH, HEIGHT, caption=TITLE, resizable=False, config=config
        )
    except (pyglet.window.WindowException, gl.ContextException) as exc:
        print(f"Failed to initialize the window: {exc}", file=sys.stderr)
        return 1

    try:
        renderer = Renderer(WIDTH, HEIGHT)
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        window.close()
        return 1

    timer = _FrameTimer()
    start = time.perf_counter()
    while not window.has_exit:
        delta = timer.tick(time.perf_counter() - start)
        window.dispatch_events()
        window.set_caption(_frame_title(delta))

        renderer.clear()
        draw_tesseract(renderer, timer.angle)

        window.flip()

    window.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())