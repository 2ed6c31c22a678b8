"""Closest-point projections onto lines, rays and segments."""

from __future__ import annotations

import logging
from typing import Optional

from .config import EPSILON
from .diagnostics import DegenerateInput, DiagnosticSink, report_degenerate
from .logging_utils import apply_debug_logging
from .primitives import Line, Ray, Segment
from .results import Projection
from .vector import Vector2, VectorLike

logger = logging.getLogger(__name__)


def closest_point_on_line(
    point: VectorLike, line: Line, *, sink: Optional[DiagnosticSink] = None
) -> Projection:
    """Project ``point`` onto ``line``.

    ``projected_x`` is the signed position of the projection relative to the
    origin, in units of ``line.direction``. A zero direction reports a
    degenerate line and falls back to ``Projection(line.origin, 0.0)``.
    """

    origin, direction = line.origin, line.direction
    to_point = Vector2.of(point) - origin

    denom = direction.dot(direction)
    if denom < EPSILON:
        report_degenerate(DegenerateInput.for_direction("line", origin, direction), sink)
        return Projection(origin, 0.0)

    projected_x = to_point.dot(direction) / denom
    return Projection(origin + direction * projected_x, projected_x)


def distance_to_line(point: VectorLike, line: Line, *, sink: Optional[DiagnosticSink] = None) -> float:
    point = Vector2.of(point)
    return point.distance(closest_point_on_line(point, line, sink=sink).point)


def closest_point_on_ray(
    point: VectorLike, ray: Ray, *, sink: Optional[DiagnosticSink] = None
) -> Projection:
    """Project ``point`` onto ``ray``; projections behind the origin clip to it."""

    origin, direction = ray.origin, ray.direction
    to_point = Vector2.of(point) - origin

    denom = direction.dot(direction)
    if denom < EPSILON:
        report_degenerate(DegenerateInput.for_direction("ray", origin, direction), sink)
        return Projection(origin, 0.0)

    dot_to_point = to_point.dot(direction)
    if dot_to_point <= 0:
        return Projection(origin, 0.0)

    projected_x = dot_to_point / denom
    return Projection(origin + direction * projected_x, projected_x)


def distance_to_ray(point: VectorLike, ray: Ray, *, sink: Optional[DiagnosticSink] = None) -> float:
    point = Vector2.of(point)
    return point.distance(closest_point_on_ray(point, ray, sink=sink).point)


def closest_point_on_segment(
    point: VectorLike, segment: Segment, *, sink: Optional[DiagnosticSink] = None
) -> Projection:
    """Project ``point`` onto ``segment``.

    ``projected_x`` is normalized: 0 means the projection coincides with
    ``segment.a`` and 1 means it coincides with ``segment.b``. Endpoints are
    returned as-is when clipping, never re-interpolated.
    """

    a, b = segment.a, segment.b
    direction = b - a
    to_point = Vector2.of(point) - a

    denom = direction.dot(direction)
    if denom < EPSILON:
        report_degenerate(DegenerateInput.for_segment(a, b), sink)
        return Projection(a, 0.0)

    dot_to_point = to_point.dot(direction)
    if dot_to_point <= 0:
        return Projection(a, 0.0)
    if dot_to_point >= denom:
        return Projection(b, 1.0)

    projected_x = dot_to_point / denom
    return Projection(a + direction * projected_x, projected_x)


def distance_to_segment(
    point: VectorLike, segment: Segment, *, sink: Optional[DiagnosticSink] = None
) -> float:
    point = Vector2.of(point)
    return point.distance(closest_point_on_segment(point, segment, sink=sink).point)


apply_debug_logging(globals(), logger=logger)
