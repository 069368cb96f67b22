import pytest

from curvesketch.raster import (
    RED,
    WHITE,
    Vertex,
    bresenham_line,
    draw_ellipse,
    scanline_fill,
    segments_intersect,
)


def _points(path):
    return [(v.x, v.y) for v in path]


def test_crossing_segments_intersect():
    assert segments_intersect(0, 0, 10, 10, 0, 10, 10, 0) is True


def test_parallel_segments_do_not_intersect():
    assert segments_intersect(0, 0, 10, 0, 0, 5, 10, 5) is False


def test_touching_segments_do_not_count():
    assert segments_intersect(0, 0, 10, 0, 10, 0, 10, 10) is False


def test_separated_segments_do_not_intersect():
    assert segments_intersect(0, 0, 1, 1, 5, 0, 6, -3) is False


def test_horizontal_line():
    assert _points(bresenham_line(0, 0, 5, 0)) == [(x, 0) for x in range(6)]


def test_diagonal_line():
    pts = _points(bresenham_line(0, 0, 7, 7))
    assert pts == [(i, i) for i in range(8)]


@pytest.mark.parametrize(
    "line",
    [(0, 0, 10, 4), (0, 0, 10, -4), (3, 2, 4, 20), (3, 20, 9, 2), (5, 0, -3, 17)],
)
def test_line_pixels_are_adjacent(line):
    pts = _points(bresenham_line(*line))
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        if (ax, ay) == (bx, by):
            continue
        assert abs(ax - bx) <= 1 and abs(ay - by) <= 1


def test_shallow_line_reaches_end():
    pts = _points(bresenham_line(0, 0, 10, -4))
    assert pts[0] == (0, 0)
    assert pts[-1] == (10, -4)


def test_reversed_shallow_line_matches_forward():
    assert bresenham_line(10, 3, 0, 0) == bresenham_line(0, 0, 10, 3)


def test_steep_line_covers_each_row():
    pts = _points(bresenham_line(2, 1, 5, 12))
    assert [y for _, y in pts] == list(range(1, 13))
    assert pts[-1] == (5, 12)


def test_steep_mirrored_line_ends_at_target():
    pts = _points(bresenham_line(5, 0, -3, 17))
    assert pts[0] == (5, 0)
    assert pts[-1] == (-3, 17)


def test_steep_downward_line_repeats_start():
    path = bresenham_line(0, 10, 2, 0)
    assert len(path) == (10 - 0) + 2
    assert path[:-1] == bresenham_line(2, 0, 0, 10)
    assert path[-1] == Vertex(0, 10)


def test_line_colour():
    path = bresenham_line(0, 0, 4, 2, RED)
    assert all(v.color == RED for v in path)
    assert all(v.color == WHITE for v in bresenham_line(0, 0, 4, 2))


def test_single_point_line():
    assert _points(bresenham_line(3, 3, 3, 3)) == [(3, 3)]


def test_circle_extremes_and_symmetry():
    pts = set(_points(draw_ellipse(0, 0, 5, 5)))
    for p in [(0, 5), (5, 0), (0, -5), (-5, 0)]:
        assert p in pts
    for x, y in pts:
        assert (-x, y) in pts and (x, -y) in pts


def test_circle_points_near_radius():
    for x, y in _points(draw_ellipse(0, 0, 20, 20)):
        assert abs((x * x + y * y) ** 0.5 - 20) <= 1.0


def test_ellipse_centre_offset():
    base = set(_points(draw_ellipse(0, 0, 8, 3)))
    moved = set(_points(draw_ellipse(100, 50, 108, 53)))
    assert moved == {(x + 100, y + 50) for x, y in base}


def test_ellipse_radius_point_mirrored():
    assert draw_ellipse(10, 10, 5, 7) == draw_ellipse(10, 10, 15, 13)


def test_flat_ellipse_terminates():
    pts = set(_points(draw_ellipse(10, 10, 16, 10)))
    assert (16, 10) in pts and (4, 10) in pts
    assert all(y == 10 for _, y in pts)


def test_fill_square():
    square = [
        [(0, 0), (10, 0)],
        [(10, 0), (10, 10)],
        [(10, 10), (0, 10)],
        [(0, 10), (0, 0)],
    ]
    pts = _points(scanline_fill(square, 800))
    assert set(pts) == {(x, y) for x in range(11) for y in range(10)}
    assert len(pts) == len(set(pts))


def test_fill_triangle_within_bounds():
    tri = [
        [(0.0, 0.0), (40.0, 0.0)],
        [(40.0, 0.0), (20.0, 30.0)],
        [(20.0, 30.0), (0.0, 0.0)],
    ]
    path = scanline_fill(tri, 800)
    assert path
    for v in path:
        assert 0 <= v.x <= 40 and 0 <= v.y <= 30
        assert v.color == WHITE


def test_fill_empty():
    assert scanline_fill([], 800) == []