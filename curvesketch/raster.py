"""Pixel rasterisation: lines, ellipses, segment tests and scanline fill."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Color = tuple[float, float, float]
Point = Sequence[float]

WHITE: Color = (1.0, 1.0, 1.0)
RED: Color = (1.0, 0.0, 0.0)
BLACK: Color = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Vertex:
    """A single screen-space pixel with an RGB colour."""

    x: int
    y: int
    color: Color = WHITE

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


def _side(ax: int, ay: int, bx: int, by: int, px: int, py: int) -> int:
    return (by - ay) * px - (bx - ax) * py + (bx * ay - ax * by)


def segments_intersect(
    x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, x4: int, y4: int
) -> bool:
    """Return True if segment 1-2 properly crosses segment 3-4.

    Touching or collinear configurations do not count as crossings.
    """
    one = _side(x1, y1, x2, y2, x3, y3)
    two = _side(x1, y1, x2, y2, x4, y4)
    if (one >= 0 and two >= 0) or (one <= 0 and two <= 0):
        return False
    one = _side(x3, y3, x4, y4, x1, y1)
    two = _side(x3, y3, x4, y4, x2, y2)
    if (one >= 0 and two >= 0) or (one <= 0 and two <= 0):
        return False
    return True


def bresenham_line(
    x0: int, y0: int, x1: int, y1: int, color: Color = WHITE
) -> list[Vertex]:
    """Rasterise the line (x0, y0) -> (x1, y1) with Bresenham's algorithm."""
    x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    x, y = x0, y0
    path: list[Vertex] = []

    if dy > dx:
        if y1 < y0:
            # The reversed line is drawn, then the start pixel is emitted once more.
            path.extend(bresenham_line(x1, y1, x0, y0, color))
        p = 2 * dx - dy
        two_dx = 2 * dx
        two_dx_minus_dy = 2 * (dx - dy)
        path.append(Vertex(x, y, color))
        while y < y1:
            y += 1
            if p < 0:
                p += two_dx
            else:
                x += 1
                p += two_dx_minus_dy
            if x1 >= x0:
                path.append(Vertex(x, y, color))
            else:
                path.append(Vertex(2 * x0 - x, y, color))
        return path

    if x1 < x0:
        return bresenham_line(x1, y1, x0, y0, color)

    p = 2 * dy - dx
    two_dy = 2 * dy
    two_dy_minus_dx = 2 * (dy - dx)
    path.append(Vertex(x, y, color))
    while x < x1:
        x += 1
        if p < 0:
            p += two_dy
        else:
            y += 1
            p += two_dy_minus_dx
        if y1 <= y0:
            path.append(Vertex(x, y0 - (y - y0), color))
        else:
            path.append(Vertex(x, y, color))
    return path


def _four_way(xc: int, yc: int, x: int, y: int) -> list[Vertex]:
    return [
        Vertex(xc + x, yc + y),
        Vertex(xc - x, yc + y),
        Vertex(xc + x, yc - y),
        Vertex(xc - x, yc - y),
    ]


def draw_ellipse(xc: int, yc: int, rx_point: int, ry_point: int) -> list[Vertex]:
    """Rasterise an axis-aligned ellipse with the midpoint algorithm.

    The radii are taken from the distance of (rx_point, ry_point) to the
    centre along each axis. A zero vertical radius yields only the extreme
    points rather than looping.
    """
    xc, yc = int(xc), int(yc)
    rx_point, ry_point = int(rx_point), int(ry_point)
    if rx_point < xc:
        rx_point = 2 * xc - rx_point
    if ry_point < yc:
        ry_point = 2 * yc - ry_point

    rx = rx_point - xc
    ry = ry_point - yc
    rx2, ry2 = rx * rx, ry * ry
    path: list[Vertex] = []

    x, y = 0, ry
    p1 = ry2 - rx2 * ry + 0.25 * rx2
    path.extend(_four_way(xc, yc, x, y))
    if ry > 0:
        while True:
            x += 1
            if not 2 * rx2 * y >= 2 * ry2 * x:
                break
            if p1 < 0:
                p1 += 2 * ry2 * x + ry2
            else:
                y -= 1
                p1 += 2 * ry2 * x - 2 * rx2 * y + ry2
            path.extend(_four_way(xc, yc, x, y))

    x, y = rx, 0
    p2 = rx2 - ry2 * rx + 0.25 * ry2
    path.extend(_four_way(xc, yc, x, y))
    while True:
        y += 1
        if not 2 * rx2 * y < 2 * ry2 * x:
            break
        if p2 < 0:
            p2 += 2 * rx2 * y + rx2
        else:
            x -= 1
            p2 += 2 * rx2 * y - 2 * ry2 * x + rx2
        path.extend(_four_way(xc, yc, x, y))
    return path


def _div_trunc(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def scanline_fill(
    edges: Sequence[Sequence[Point]], window_height: int
) -> list[Vertex]:
    """Fill a closed polygon given as a list of (start, end) edges."""
    if not edges:
        return []

    ys = [int(point[1]) for edge in edges for point in edge]
    ymin = min([window_height, *ys])
    ymax = max([0, *ys])

    path: list[Vertex] = []
    for y in range(ymin, ymax + 1):
        crossings: list[int] = []
        for start, end in ((edge[0], edge[1]) for edge in edges):
            ya, yb = int(start[1]), int(end[1])
            if ya <= y < yb or yb <= y < ya:
                xa, xb = int(start[0]), int(end[0])
                crossings.append(xa + _div_trunc((y - ya) * (xb - xa), yb - ya))
        crossings.sort()
        for left, right in zip(crossings[::2], crossings[1::2]):
            path.extend(Vertex(x, y) for x in range(left, right + 1))
    return path