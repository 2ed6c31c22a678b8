"""Multi-value results returned by the kernel routines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .vector import Vector2


@dataclass(frozen=True)
class Projection:
    """Closest point on a line-like primitive and its parametric position.

    For lines and rays ``projected_x`` is the signed position along the
    direction relative to the origin, measured in direction lengths. For
    segments it is normalized: 0 at ``a``, 1 at ``b``.
    """

    point: Vector2
    projected_x: float

    def __iter__(self) -> Iterator[Union[Vector2, float]]:
        yield self.point
        yield self.projected_x


@dataclass(frozen=True)
class LineIntersection:
    success: bool
    point: Vector2

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self) -> Iterator[Union[bool, Vector2]]:
        yield self.success
        yield self.point


@dataclass(frozen=True)
class CircleIntersection:
    """Up to two intersection points, ordered along the query direction.

    A tangent line, or a ray starting inside the circle, reports two equal
    points. On failure both points are ``Vector2.ZERO``.
    """

    success: bool
    point_a: Vector2
    point_b: Vector2

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self) -> Iterator[Union[bool, Vector2]]:
        yield self.success
        yield self.point_a
        yield self.point_b


NO_LINE_INTERSECTION = LineIntersection(False, Vector2.ZERO)
NO_CIRCLE_INTERSECTION = CircleIntersection(False, Vector2.ZERO, Vector2.ZERO)


__all__ = [
    "CircleIntersection",
    "LineIntersection",
    "NO_CIRCLE_INTERSECTION",
    "NO_LINE_INTERSECTION",
    "Projection",
]
