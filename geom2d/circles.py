"""Point/circle queries."""

from __future__ import annotations

import logging

from .logging_utils import apply_debug_logging
from .primitives import Circle
from .vector import Vector2, VectorLike

logger = logging.getLogger(__name__)


def distance_to_circle(point: VectorLike, circle: Circle) -> float:
    """Signed distance to the circle boundary: positive outside, negative inside."""

    return (circle.center - Vector2.of(point)).magnitude - circle.radius


def closest_point_on_circle(point: VectorLike, circle: Circle) -> Vector2:
    """Return the offset from ``circle.center`` to the boundary point closest to ``point``.

    Add ``circle.center`` for absolute coordinates. When ``point`` coincides
    with the center the direction is undefined and the result is
    ``Vector2.ZERO``.
    """

    return (Vector2.of(point) - circle.center).normalized() * circle.radius


def intersect_point_circle(point: VectorLike, circle: Circle) -> bool:
    """Strict interior test; points on the boundary are not inside."""

    return (Vector2.of(point) - circle.center).sqr_magnitude < circle.radius * circle.radius


apply_debug_logging(globals(), logger=logger)
