"""Immutable 2D vector used by every kernel routine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence, Union

import numpy as np

from .config import EPSILON


class GeometryInputError(ValueError):
    """Raised when a value cannot be interpreted as a 2D coordinate."""


@dataclass(frozen=True)
class Vector2:
    """Pair of real components ``(x, y)`` with value semantics."""

    x: float
    y: float

    ZERO: ClassVar["Vector2"]

    def __post_init__(self) -> None:
        try:
            x, y = float(self.x), float(self.y)
        except (TypeError, ValueError) as exc:
            raise GeometryInputError(
                f"coordinate must be numeric, got ({self.x!r}, {self.y!r})"
            ) from exc
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def of(cls, value: "VectorLike") -> "Vector2":
        """Coerce ``value`` (a ``Vector2``, pair or numpy array) into a ``Vector2``."""

        if isinstance(value, Vector2):
            return value
        try:
            arr = np.asarray(value, dtype=float)
        except (TypeError, ValueError) as exc:
            raise GeometryInputError(f"coordinate must be numeric, got {value!r}") from exc
        if arr.shape != (2,):
            raise GeometryInputError(f"coordinate must be length-2, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def __str__(self) -> str:
        return f"({self.x:.6g}, {self.y:.6g})"

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def perp_dot(self, other: "Vector2") -> float:
        """2D analogue of the cross product; zero when the vectors are parallel."""

        return self.x * other.y - self.y * other.x

    @property
    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """Return the unit vector in this direction, or ``ZERO`` for a near-zero vector."""

        length = self.magnitude
        if length <= EPSILON:
            return Vector2.ZERO
        return Vector2(self.x / length, self.y / length)

    def distance(self, other: "Vector2") -> float:
        return (self - other).magnitude

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


Vector2.ZERO = Vector2(0.0, 0.0)

VectorLike = Union[Vector2, Sequence[float], np.ndarray]


__all__ = ["GeometryInputError", "Vector2", "VectorLike"]
