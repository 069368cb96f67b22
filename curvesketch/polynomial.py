"""Rasterisation of polynomial curves y = a3*x^3 + a2*x^2 + a1*x + a0."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from os import PathLike
from pathlib import Path

from curvesketch.raster import Vertex, bresenham_line

WINDOW_WIDTH = 800

_CUBIC_STEP = 1.0 / 10


def _fractions(step: float) -> Iterator[float]:
    """Yield 0, step, 2*step, ... while the running sum stays below one."""
    i = 0.0
    while i < 1:
        yield i
        i += step


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def _reciprocal(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1 / value


def draw_cubic(
    a3: float, a2: float, a1: float, a0: float, width: int = WINDOW_WIDTH
) -> list[Vertex]:
    """Rasterise a cubic over 0 <= x <= width.

    The x axis is split at the points where the slope is 1, 0 and -1; steep
    parts are sampled at sub-pixel steps and shallow parts are traced with a
    midpoint decision variable.
    """
    if a3 == 0:
        raise ValueError("cubic coefficient must be non-zero")

    reverse = a3 < 0
    if reverse:
        a3, a2, a1, a0 = -a3, -a2, -a1, -a0

    path: list[Vertex] = []

    def f(t: float) -> float:
        return a3 * t * t * t + a2 * t * t + a1 * t + a0

    def emit(x: float, y: int) -> None:
        path.append(Vertex(int(x), -y if reverse else y))

    def increment(x: float) -> float:
        return 3 * a3 * x * x + x * (3 * a3 + 2 * a2) + a1 + a2 + a3

    def rising_column(x: float, py: int) -> int:
        for i in _fractions(_CUBIC_STEP):
            y = int(f(x + i) + 0.5)
            if py != y:
                emit(x, y)
            while py < y:
                emit(x, py)
                py += 1
        return py

    def falling_column(x: float, py: int) -> int:
        for i in _fractions(_CUBIC_STEP):
            y = int(f(x + i) + 0.5)
            if py != y:
                emit(x, y)
            while py > y:
                emit(x, py)
                py -= 1
        return py

    def rising_run(x: float, end: float, y: int, p1: float) -> float:
        while x <= end and x <= width:
            if p1 > 0:
                y += 1
                p1 -= 1
            p1 += increment(x)
            emit(x, y)
            x += 1
        return x

    def falling_run(x: float, end: float, y: int, p1: float) -> float:
        while x <= end and x <= width:
            if p1 < 0:
                p1 += 1
                y -= 1
            p1 += increment(x)
            emit(x, y)
            x += 1
        return x

    limit = float(width + 1)
    x1_1 = x1_2 = x0_1 = x0_2 = xm1_1 = xm1_2 = limit
    discriminant = 4 * a2 * a2 - 4 * 3 * a3 * (a1 - 1)
    denom = 2 * 3 * a3
    if discriminant > 0:
        root = math.sqrt(discriminant)
        x1_1 = (-(2 * a2) - root) / denom
        x1_2 = (-(2 * a2) + root) / denom
        if discriminant - 4 * a3 > 0:
            root0 = _sqrt(discriminant - 4 * 3 * a3)
            x0_1 = (-(2 * a2) - root0) / denom
            x0_2 = (-(2 * a2) + root0) / denom
            if discriminant - 8 * a3 > 0:
                root_m1 = _sqrt(discriminant - 8 * 3 * a3)
                xm1_1 = (-(2 * a2) - root_m1) / denom
                xm1_2 = (-(2 * a2) + root_m1) / denom
            else:
                xm1_1 = xm1_2 = x0_2
        else:
            x0_1 = x0_2 = xm1_1 = xm1_2 = x1_2

    x = 0.0
    while x <= x1_1 and x <= width:
        rising_column(x, int(f(x) - 1))
        x += 1

    ty = f(x)
    y = int(ty)
    x = rising_run(x, x0_1, y, ty - y - 0.5)

    ty = f(x)
    x = falling_run(x, xm1_1, int(ty + 0.5), ty - int(ty) - 0.5)

    while x <= xm1_2 and x <= width:
        falling_column(x, int(f(x) - 0.5))
        x += 1

    ty = f(x)
    x = falling_run(x, x0_2, int(ty + 0.5), ty - int(ty) - 0.5)

    ty = f(x)
    y = int(ty + 0.5)
    x = rising_run(x, x1_2, y, ty - y - 0.5)

    py = int(f(x) - 0.5)
    while x <= width:
        py = rising_column(x, py)
        x += 1

    return path


def draw_quadratic(
    a2: float, a1: float, a0: float, width: int = WINDOW_WIDTH
) -> list[Vertex]:
    """Rasterise a parabola, mirroring the part left of its axis.

    Raises ValueError when the sampling step would become non-positive,
    which would otherwise never terminate.
    """
    if a2 == 0:
        raise ValueError("quadratic coefficient must be non-zero")

    reverse = a2 < 0
    if reverse:
        a2, a1, a0 = -a2, -a1, -a0

    path: list[Vertex] = []

    def emit(x: int, y: int) -> None:
        path.append(Vertex(x, -y if reverse else y))

    x = int((-1 - a1) / (2 * a2))
    y_exact = a2 * x * x + a1 * x + a0
    p1 = y_exact - int(y_exact) - 0.5
    y = int(y_exact)
    slope = 2 * a2 * x + a1
    slope_step = 2 * a2

    while -1 <= slope < 0:
        if p1 < 0:
            y -= 1
            p1 += 1
        p1 += 2 * a2 * x + a2 + a1
        emit(x, y)
        x += 1
        slope += slope_step

    mid_x = int(-a1 / (2 * a2))
    while 0 <= slope <= 1:
        if p1 > 0:
            y += 1
            p1 -= 1
        p1 += 2 * a2 * x + a2 + a1
        emit(x, y)
        x += 1
        slope += slope_step

    slope_at_end = 2 * a2 * (x + 1) + a1
    while x < width or 2 * mid_x - x >= 0:
        step = _reciprocal(slope_at_end)
        if not step > 0:
            raise ValueError("curve cannot be sampled: non-positive step")
        for i in _fractions(step):
            y = int(a2 * (x + i) * (x + i) + a1 * (x + i) + a0 + 0.5)
            if x < width:
                emit(x, y)
            if 2 * mid_x - x >= 0:
                emit(2 * mid_x - x, y)
        x += 1
        slope_at_end += 2 * a2

    return path


def draw_polynomial(
    a3: float, a2: float, a1: float, a0: float, width: int = WINDOW_WIDTH
) -> list[Vertex]:
    """Rasterise the polynomial using the routine suited to its degree."""
    if a3 == 0:
        if a2 == 0:
            return bresenham_line(
                0, int(a0 + 0.5), width, int(a1 * width + a0 + 0.5)
            )
        return draw_quadratic(a2, a1, a0, width)
    return draw_cubic(a3, a2, a1, a0, width)


def read_coefficients(
    path: str | PathLike[str],
) -> tuple[float, float, float, float]:
    """Read a3, a2, a1, a0 as the first four whitespace-separated numbers."""
    tokens = Path(path).read_text().split()
    if len(tokens) < 4:
        raise ValueError(f"expected four coefficients in {path}")
    to_float: Callable[[str], float] = float
    try:
        a3, a2, a1, a0 = (to_float(token) for token in tokens[:4])
    except ValueError as exc:
        raise ValueError(f"invalid coefficient in {path}: {exc}") from exc
    return (a3, a2, a1, a0)