import numpy as np
import pytest

from curvesketch.bezier import (
    c2_extension,
    catmull_rom_segment,
    catmull_rom_segments,
    evaluate_bezier,
    next_segment_points,
)

SEGMENT = [(432, 484), (454, 536), (496, 536), (523, 488)]


def test_evaluate_endpoints():
    assert np.allclose(evaluate_bezier(SEGMENT, 0.0), SEGMENT[0])
    assert np.allclose(evaluate_bezier(SEGMENT, 1.0), SEGMENT[3])


def test_evaluate_straight_line_midpoint():
    line = [(0, 0), (1, 1), (2, 2), (3, 3)]
    assert np.allclose(evaluate_bezier(line, 0.5), (1.5, 1.5))


def test_evaluate_three_dimensional():
    pts = [(0, 0, 0), (0, 0, 1), (0, 0, 2), (0, 0, 3)]
    result = evaluate_bezier(pts, 0.25)
    assert result.shape == (3,)
    assert np.allclose(result[:2], (0, 0))


def test_evaluate_needs_four_points():
    with pytest.raises(ValueError):
        evaluate_bezier([(0, 0), (1, 1)], 0.5)


def test_c2_extension_continuity():
    p1, p2, p3 = map(np.array, SEGMENT[1:])
    start, p4, p5 = c2_extension(p1, p2, p3)
    assert np.allclose(start, p3)
    assert np.allclose(p4 - p3, p3 - p2)
    assert np.allclose(p1 - 2 * p2 + p3, p3 - 2 * p4 + p5)


def test_c2_extension_matches_saved_example():
    # Control points that follow the first segment in the saved sample.
    start, p4, p5 = c2_extension(SEGMENT[1], SEGMENT[2], SEGMENT[3])
    assert np.allclose(start, (523, 488))
    assert np.allclose(p4, (550, 440))


def test_catmull_rom_segment_endpoints_and_tangent():
    pm1, pi, pp1, pp2 = map(np.array, [(0, 0), (10, 5), (20, 0), (30, 10)])
    seg = catmull_rom_segment(pm1, pi, pp1, pp2)
    assert np.allclose(seg[0], pi)
    assert np.allclose(seg[3], pp1)
    assert np.allclose(3 * (seg[1] - pi), (pp1 - pm1) / 2)
    assert np.allclose(3 * (pp1 - seg[2]), (pp2 - pi) / 2)


def test_catmull_rom_segments_count_and_sharing():
    pts = [(0, 0), (10, 5), (20, 0), (30, 10), (40, 3), (50, 8)]
    segs = catmull_rom_segments(pts)
    assert len(segs) == len(pts) - 3
    for a, b in zip(segs, segs[1:]):
        assert np.allclose(a[3], b[0])


def test_catmull_rom_segments_too_few_points():
    assert catmull_rom_segments([(0, 0), (1, 1), (2, 2)]) == []


def test_next_segment_points_is_c1():
    prev = [np.array(p, dtype=float) for p in SEGMENT]
    new = np.array((600.0, 300.0))
    p0, p1, p2 = next_segment_points(prev, new)
    assert np.allclose(p0, prev[3])
    assert np.allclose(p1 - p0, prev[3] - prev[2])
    assert np.allclose(2 * p2, 2 * p1 - p0 + new)