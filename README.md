# curvesketch

Pixel-level drawing primitives, polynomial plotting and cubic-spline, camera
and shape helpers, independent of any windowing toolkit. Everything returns
plain Python data (lists of pixels, NumPy vectors and matrices), so the
result can be handed to any renderer or checked directly in tests.

## Modules

### `curvesketch.raster`

Scan-conversion of basic primitives into lists of `Vertex` pixels. A `Vertex`
is a frozen dataclass with integer `x`, `y`, an RGB `color` (white by
default) and a `position` property giving `(x, y)`.

- `bresenham_line(x0, y0, x1, y1, color)` - Bresenham line in any direction;
  `color` defaults to white.
- `draw_ellipse(xc, yc, rx_point, ry_point)` - midpoint ellipse centred at
  `(xc, yc)`; the horizontal and vertical radii are the distances from the
  centre to `rx_point` and `ry_point` along each axis.
- `scanline_fill(edges, window_height)` - fills a closed polygon given as a
  list of `(start, end)` edges, each point an `(x, y)` pair.
- `segments_intersect(x1, y1, x2, y2, x3, y3, x4, y4)` - True only when the
  two segments properly cross; touching or collinear segments do not count.

```python
from curvesketch.raster import bresenham_line, draw_ellipse, scanline_fill

line = bresenham_line(10, 10, 60, 35)
ring = draw_ellipse(400, 400, 450, 430)
square = [((10, 10), (40, 10)), ((40, 10), (40, 40)),
          ((40, 40), (10, 40)), ((10, 40), (10, 10))]
filled = scanline_fill(square, 800)
print(len(line), line[0].position, len(filled))
```

### `curvesketch.polynomial`

Rasterises `y = a3*x^3 + a2*x^2 + a1*x + a0` for `0 <= x <= width`
(`width` defaults to 800).

- `draw_polynomial(a3, a2, a1, a0, width)` - a straight line when `a3` and
  `a2` are zero, otherwise a quadratic or a cubic.
- `draw_cubic(a3, a2, a1, a0, width)` - splits the x axis where the slope is
  1, 0 and -1, sampling steep parts at sub-pixel steps and tracing shallow
  parts with a midpoint decision variable. Raises `ValueError` if `a3` is 0.
- `draw_quadratic(a2, a1, a0, width)` - traces the parabola and mirrors the
  part left of its axis. Raises `ValueError` if `a2` is 0 or if the curve
  cannot be sampled with a positive step.
- `read_coefficients(path)` - reads `a3 a2 a1 a0` as the first four
  whitespace-separated numbers of a text file; raises `ValueError` if there
  are fewer than four or one is not a number.

```python
from curvesketch.polynomial import draw_polynomial

pixels = draw_polynomial(0.0, 0.0, 0.5, 100.0)
```

### `curvesketch.bezier`

Cubic spline helpers; points are sequences or NumPy arrays of any dimension.

- `evaluate_bezier(points, t)` - point on a cubic Bezier segment given by
  four control points.
- `c2_extension(p1, p2, p3)` - the first three control points of the next
  segment that keep the spline C2-continuous, given the last three of the
  previous segment.
- `catmull_rom_segment(p_prev, p_start, p_end, p_next)` - Bezier control
  points of one Catmull-Rom span.
- `catmull_rom_segments(points)` - all Bezier segments of a Catmull-Rom
  spline; fewer than four points give none.
- `next_segment_points(prev_segment, new_point)` - three control points
  continuing a segment towards a new point.

Functions that need four control points raise `ValueError` when given fewer.

### `curvesketch.shapes`

- `rotate2d(model, angle)` - a homogeneous 3x3 matrix post-multiplied by a
  rotation of `angle` radians.
- `ColoredVertex(position, color)` - a 2D vertex with an RGB colour.
- `Triangle(vertices, model)` and `Circle(parameters, model)` - hold a 3x3
  model matrix (identity by default); `advance(dt, animate)` rotates it by
  `dt` radians when `animate` is true and returns it. `Circle` takes one
  three-component parameter vector per circle.

### `curvesketch.camera`

`Camera(width, height)` keeps a 45-degree perspective projection and a
look-at view matrix, starting at `(0, 0, 3)` looking down -z.

- `move(direction, dt)` - moves by `speed * dt` towards `"forward"`,
  `"backward"`, `"left"`, `"right"`, `"up"` or `"down"`.
- `orbit(step)` - advances the orbit angle and places the camera on a circle
  of radius 5 about the origin, looking at it.
- `update_view()` - recomputes the view matrix.
- `screen_to_sphere(x, y)` - unit world-space direction through a screen
  point (y grows upwards).
- `trackball_drag(x, y)` - rotates the stored quaternion `rotation` by the
  arc from the last trackball point.

Lower-level helpers: `perspective`, `look_at`, `quat_from_axis_angle`,
`quat_multiply`, `quat_to_matrix` (quaternions are `(w, x, y, z)`).

## What this package does not do

It opens no window, draws nothing on screen and handles no mouse or keyboard
input. There is no interactive drawing board or spline editor, no command to
run, and no file format for saving or loading curves: the package only
computes pixels, control points and matrices for a caller to use.

## Requirements

Python 3.10 or later and NumPy.