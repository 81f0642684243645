# doot

A small OpenGL demo that draws a tesseract (a four-dimensional hypercube)
spinning in the XW and ZW planes, projected to the screen through a
4D-to-3D and then a 3D-to-2D perspective step. Every edge is drawn as a
thin quad by a minimal 2D renderer.

## Installing

```
pip install .
```

Running the demo needs a machine that can open an OpenGL 3.3 window
through pyglet.

## Running

```
doot
```

A fixed-size 1200×675 window titled `DOOT` opens; while it runs, the title
shows the current frame rate (`DOOT | <fps>`). Close the window to quit.
The command takes no options other than `--help`. If the window cannot be
created or the shaders fail to compile or link, the error is printed to
standard error and the command exits with status 1.

## Using the pieces

The maths works without a window:

```python
from doot.vector import Vec3
from doot.matrix import translate, scale, rotate, ortho
from doot.tesseract import tesseract_lines

model = scale(Vec3(2.0, 2.0, 1.0)) @ translate(Vec3(10.0, 20.0, 0.0))
projection = ortho(0.0, 1200.0, 675.0, 0.0, -1.0, 1.0)

for start, end in tesseract_lines(0.5, 1200, 675):
    print(start, end)
```

- `doot.vector` has the named tuples `Vec2`, `Vec3` and `Vec4`. `Vec3` and
  `Vec4` can also be read as colours through `r`, `g`, `b` (and `a` on
  `Vec4`). `Vec3.length()` gives the Euclidean length and
  `Vec3.normalized()` the unit vector; normalizing the zero vector raises
  `ZeroDivisionError`.
- `doot.matrix` has the immutable `Mat4`, stored as four rows with
  translation in the last row (row-vector convention, so `a @ b` applies
  `a` first, then `b`). `flatten()` returns the sixteen values row after
  row. The functions `identity`, `multiply`, `translate`, `scale`, `rotate`
  (angle in radians about any axis) and `ortho` build matrices.
- `doot.tesseract` holds the sixteen `VERTICES` and the 32 `EDGES` found by
  `build_edges`, the plane rotations `rotate_xw` and `rotate_zw`, and
  `project`, which maps a 4D point to screen coordinates.
  `tesseract_lines(angle, width, height)` yields the end points of every
  edge, and `draw_tesseract(renderer, angle)` passes them to any object with
  a `draw_line(p0, p1, width, color)` method.
- `doot.renderer.Renderer(width, height)` draws points, quads and lines in
  pixel coordinates (origin at the top left) once a GL context is current:
  `clear()`, `draw_point(point, size, color)`,
  `draw_quad(center, size, angle, color)` and
  `draw_line(p0, p1, width, color)`. The model matrices it uses come from
  `point_model`, `quad_model` and `line_model`, which need no context.
- `doot.gl` has `compile_shader(shader_type, source)` (with the type
  `VERTEX` or `FRAGMENT`) and `link_program(*shaders)`. Both raise
  `ShaderError`, which carries the driver's info log in `log`.

## Tests

```
pip install ".[test]"
pytest
```