"""Intersections between lines, rays and circles."""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from .config import EPSILON
from .logging_utils import apply_debug_logging
from .primitives import Circle, Line, Ray
from .results import NO_CIRCLE_INTERSECTION, NO_LINE_INTERSECTION, CircleIntersection, LineIntersection
from .vector import Vector2

logger = logging.getLogger(__name__)


def intersect_line_line(line_a: Line, line_b: Line) -> LineIntersection:
    """Intersect two infinite lines.

    Parallel lines that are not collinear do not intersect. Collinear lines
    share every point; ``line_a.origin`` is reported as the intersection.
    """

    origin_a, direction_a = line_a.origin, line_a.direction
    origin_b, direction_b = line_b.origin, line_b.direction

    denominator = direction_a.perp_dot(direction_b)
    origin_b_to_a = origin_a - origin_b
    a = direction_a.perp_dot(origin_b_to_a)
    b = direction_b.perp_dot(origin_b_to_a)

    if abs(denominator) < EPSILON:
        if abs(a) > EPSILON or abs(b) > EPSILON:
            return NO_LINE_INTERSECTION
        return LineIntersection(True, origin_a)

    distance_a = b / denominator
    return LineIntersection(True, origin_a + direction_a * distance_a)


def _circle_roots(origin: Vector2, direction: Vector2, circle: Circle) -> Optional[Tuple[float, float]]:
    # Assumes a unit-length direction: the squared distance from the center to
    # the line is |to_center|^2 minus the squared projection.
    to_center = circle.center - origin
    to_center_on_line = to_center.dot(direction)
    sqr_distance_to_line = to_center.sqr_magnitude - to_center_on_line * to_center_on_line

    sqr_radius = circle.radius * circle.radius
    if sqr_distance_to_line > sqr_radius:
        return None

    half_chord = math.sqrt(sqr_radius - sqr_distance_to_line)
    root_a = to_center_on_line - half_chord
    root_b = to_center_on_line + half_chord
    if root_a > root_b:
        root_a, root_b = root_b, root_a
    return root_a, root_b


def intersect_line_circle(line: Line, circle: Circle) -> CircleIntersection:
    """Intersect an infinite line with a circle.

    ``line.direction`` must be unit length; it is neither checked nor
    normalized. Points are ordered along the direction, and a tangent line
    yields two coincident points.
    """

    roots = _circle_roots(line.origin, line.direction, circle)
    if roots is None:
        return NO_CIRCLE_INTERSECTION

    root_a, root_b = roots
    return CircleIntersection(
        True,
        line.origin + line.direction * root_a,
        line.origin + line.direction * root_b,
    )


def intersect_ray_circle(ray: Ray, circle: Circle) -> CircleIntersection:
    """Intersect a ray with a circle, keeping only points at or ahead of the origin.

    ``ray.direction`` must be unit length. When the origin lies inside the
    circle only one crossing remains and both result points equal it.
    """

    roots = _circle_roots(ray.origin, ray.direction, circle)
    if roots is None:
        return NO_CIRCLE_INTERSECTION

    root_a, root_b = roots
    if root_a < 0:
        root_a = root_b
        if root_a < 0:
            return NO_CIRCLE_INTERSECTION

    return CircleIntersection(
        True,
        ray.origin + ray.direction * root_a,
        ray.origin + ray.direction * root_b,
    )


apply_debug_logging(globals(), logger=logger)
