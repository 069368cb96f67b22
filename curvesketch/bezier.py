"""Cubic Bézier evaluation and the control-point rules used to chain segments."""

from __future__ import annotations

from typing import Sequence

import numpy as np

ArrayLike = Sequence[float] | np.ndarray


def _vec(point: ArrayLike) -> np.ndarray:
    return np.asarray(point, dtype=float)


def _four(points: Sequence[ArrayLike]) -> list[np.ndarray]:
    if len(points) < 4:
        raise ValueError(f"a cubic segment needs 4 control points, got {len(points)}")
    return [_vec(p) for p in points[:4]]


def evaluate_bezier(points: Sequence[ArrayLike], t: float) -> np.ndarray:
    """Evaluate the cubic Bézier curve given by four control points at t."""
    p0, p1, p2, p3 = _four(points)
    u = 1.0 - t
    return u * u * u * p0 + 3 * u * u * t * p1 + 3 * u * t * t * p2 + t * t * t * p3


def c2_extension(
    p1: ArrayLike, p2: ArrayLike, p3: ArrayLike
) -> list[np.ndarray]:
    """Return the first three control points of the next C2-continuous segment.

    ``p1``, ``p2`` and ``p3`` are the last three control points of the
    previous segment; the new segment starts at ``p3``.
    """
    a, b, c = _vec(p1), _vec(p2), _vec(p3)
    p4 = c + (c - b)
    p5 = a + 2.0 * p4 - 2.0 * b
    return [c, p4, p5]


def catmull_rom_segment(
    p_prev: ArrayLike, p_start: ArrayLike, p_end: ArrayLike, p_next: ArrayLike
) -> list[np.ndarray]:
    """Convert one Catmull-Rom span (p_start -> p_end) to Bézier control points."""
    pm1, pi, pp1, pp2 = _vec(p_prev), _vec(p_start), _vec(p_end), _vec(p_next)
    v1 = (pp1 + 6.0 * pi - pm1) / 6.0
    v2 = (pi + 6.0 * pp1 - pp2) / 6.0
    return [pi, v1, v2, pp1]


def catmull_rom_segments(points: Sequence[ArrayLike]) -> list[list[np.ndarray]]:
    """Build the Bézier segments of a Catmull-Rom spline through ``points``.

    Fewer than four points give no segments.
    """
    return [
        catmull_rom_segment(*points[i - 3 : i + 1]) for i in range(3, len(points))
    ]


def next_segment_points(
    prev_segment: Sequence[ArrayLike], new_point: ArrayLike
) -> list[np.ndarray]:
    """Return three control points continuing ``prev_segment`` towards ``new_point``."""
    _, _, q2, q3 = _four(prev_segment)
    p0 = q3
    p1 = 2.0 * q3 - q2
    p2 = (2.0 * p1 - p0 + _vec(new_point)) / 2.0
    return [p0, p1, p2]