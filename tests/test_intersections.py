import math

import pytest

from geom2d import (
    Circle,
    Line,
    Ray,
    Vector2,
    intersect_line_circle,
    intersect_line_line,
    intersect_ray_circle,
)
from geom2d.config import EPSILON


def _unit(x, y):
    return Vector2(x, y).normalized()


def test_perpendicular_lines_scenario():
    result = intersect_line_line(Line((0, 0), (1, 0)), Line((5, 5), (0, 1)))
    assert result.success
    assert tuple(result.point) == pytest.approx((5, 0))


@pytest.mark.parametrize(
    "line_a, line_b",
    [
        (Line((0, 0), (1, 0)), Line((5, 5), (0, 1))),
        (Line((1, 2), (3, 1)), Line((-4, 0), (1, 2))),
        (Line((0, 0), _unit(1, 1)), Line((2, 0), _unit(-1, 1))),
    ],
)
def test_line_line_is_symmetric(line_a, line_b):
    forward = intersect_line_line(line_a, line_b)
    backward = intersect_line_line(line_b, line_a)
    assert forward.success and backward.success
    assert tuple(forward.point) == pytest.approx(tuple(backward.point))
    # the point lies on both lines
    for line in (line_a, line_b):
        assert (forward.point - line.origin).perp_dot(line.direction) == pytest.approx(0.0, abs=1e-9)


def test_parallel_lines_do_not_intersect():
    result = intersect_line_line(Line((0, 0), (1, 0)), Line((0, 1), (2, 0)))
    assert not result
    assert result.point == Vector2.ZERO


def test_collinear_lines_report_first_origin():
    success, point = intersect_line_line(Line((1, 1), (1, 1)), Line((4, 4), (-2, -2)))
    assert success is True
    assert point == Vector2(1, 1)


def test_nearly_parallel_offset_within_epsilon_counts_as_collinear():
    result = intersect_line_line(Line((0, 0), (1, 0)), Line((3, EPSILON / 2), (1, 0)))
    assert result.success
    assert result.point == Vector2(0, 0)


def test_line_circle_two_points_ordered_along_direction():
    result = intersect_line_circle(Line((-10, 0), (1, 0)), Circle((0, 0), 5))
    assert result.success
    assert tuple(result.point_a) == pytest.approx((-5, 0))
    assert tuple(result.point_b) == pytest.approx((5, 0))

    reverse = intersect_line_circle(Line((10, 0), (-1, 0)), Circle((0, 0), 5))
    assert tuple(reverse.point_a) == pytest.approx((5, 0))
    assert tuple(reverse.point_b) == pytest.approx((-5, 0))


def test_line_circle_intersects_behind_origin():
    # a line extends in both directions
    result = intersect_line_circle(Line((10, 0), (1, 0)), Circle((0, 0), 5))
    assert result.success
    assert tuple(result.point_a) == pytest.approx((-5, 0))
    assert tuple(result.point_b) == pytest.approx((5, 0))


def test_line_circle_tangent_yields_coincident_points():
    success, point_a, point_b = intersect_line_circle(Line((-3, 5), (1, 0)), Circle((0, 0), 5))
    assert success
    assert point_a == point_b
    assert tuple(point_a) == pytest.approx((0, 5))


def test_line_circle_miss_zeroes_points():
    result = intersect_line_circle(Line((0, 6), (1, 0)), Circle((0, 0), 5))
    assert not result.success
    assert result.point_a == Vector2.ZERO
    assert result.point_b == Vector2.ZERO


@pytest.mark.parametrize("angle_deg", [0, 17, 45, 90, 133, 250])
def test_line_circle_points_lie_on_circle(angle_deg):
    circle = Circle((1, -2), 3)
    angle = math.radians(angle_deg)
    line = Line((0, -1), (math.cos(angle), math.sin(angle)))
    result = intersect_line_circle(line, circle)
    assert result.success
    for point in (result.point_a, result.point_b):
        assert abs(point.distance(circle.center) - circle.radius) < EPSILON


def test_ray_circle_scenario_two_hits():
    result = intersect_ray_circle(Ray((-10, 0), (1, 0)), Circle((0, 0), 5))
    assert result.success
    assert tuple(result.point_a) == pytest.approx((-5, 0))
    assert tuple(result.point_b) == pytest.approx((5, 0))


def test_ray_pointing_away_misses():
    result = intersect_ray_circle(Ray((10, 0), (1, 0)), Circle((0, 0), 5))
    assert not result
    assert result.point_a == Vector2.ZERO
    assert result.point_b == Vector2.ZERO


def test_ray_from_inside_reports_single_exit_twice():
    result = intersect_ray_circle(Ray((0, 0), (0, 1)), Circle((0, 0), 5))
    assert result.success
    assert result.point_a == result.point_b
    assert tuple(result.point_a) == pytest.approx((0, 5))


def test_ray_circle_miss_beside_circle():
    result = intersect_ray_circle(Ray((-10, 6), (1, 0)), Circle((0, 0), 5))
    assert not result.success


def test_ray_starting_on_boundary_keeps_origin():
    result = intersect_ray_circle(Ray((-5, 0), (1, 0)), Circle((0, 0), 5))
    assert result.success
    assert tuple(result.point_a) == pytest.approx((-5, 0))
    assert tuple(result.point_b) == pytest.approx((5, 0))


def test_ray_leaving_from_boundary_touches_only_origin():
    result = intersect_ray_circle(Ray((5, 0), (1, 0)), Circle((0, 0), 5))
    assert result.success
    assert result.point_a == result.point_b
    assert tuple(result.point_a) == pytest.approx((5, 0))
