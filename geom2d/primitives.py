"""Value types for the primitives the kernel operates on."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector2, VectorLike


@dataclass(frozen=True)
class Line:
    """Infinite line through ``origin`` along ``direction``.

    ``direction`` is expected to be non-zero. Routines that rely on the
    Pythagorean decomposition (line/circle intersection) additionally expect
    it to be unit length; it is never normalized here.
    """

    origin: Vector2
    direction: Vector2

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", Vector2.of(self.origin))
        object.__setattr__(self, "direction", Vector2.of(self.direction))

    @classmethod
    def from_points(cls, a: VectorLike, b: VectorLike) -> "Line":
        start = Vector2.of(a)
        return cls(start, Vector2.of(b) - start)


@dataclass(frozen=True)
class Ray:
    """Half-line ``origin + t * direction`` for ``t >= 0``."""

    origin: Vector2
    direction: Vector2

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", Vector2.of(self.origin))
        object.__setattr__(self, "direction", Vector2.of(self.direction))

    def to_line(self) -> Line:
        return Line(self.origin, self.direction)


@dataclass(frozen=True)
class Segment:
    """Bounded set of points ``a + t * (b - a)`` for ``t`` in ``[0, 1]``."""

    a: Vector2
    b: Vector2

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", Vector2.of(self.a))
        object.__setattr__(self, "b", Vector2.of(self.b))

    @property
    def direction(self) -> Vector2:
        return self.b - self.a

    @property
    def length(self) -> float:
        return self.direction.magnitude

    @property
    def center(self) -> Vector2:
        return (self.a + self.b) * 0.5


@dataclass(frozen=True)
class Circle:
    center: Vector2
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", Vector2.of(self.center))
        object.__setattr__(self, "radius", float(self.radius))


__all__ = ["Circle", "Line", "Ray", "Segment"]
