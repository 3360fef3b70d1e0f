"""Immutable 2D vector used for positions, velocities and grid coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Vector2D:
    """
    A 2D vector of real numbers.

    Every operation returns a new instance; nothing mutates in place.
    """
    x: float
    y: float

    @staticmethod
    def from_polar(r: float, theta: float) -> Vector2D:
        return Vector2D(r * math.cos(theta), r * math.sin(theta))

    @staticmethod
    def add(*vecs: Vector2D) -> Vector2D:
        """Componentwise sum of any number of vectors (zero vector when empty)."""
        return Vector2D(sum(v.x for v in vecs), sum(v.y for v in vecs))

    def theta(self) -> float:
        return math.atan2(self.y, self.x)

    def r(self) -> float:
        return math.hypot(self.x, self.y)

    def negate(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def scale(self, factor: float) -> Vector2D:
        return Vector2D(self.x * factor, self.y * factor)

    def rounded(self) -> Vector2D:
        return Vector2D(round_half_up(self.x), round_half_up(self.y))

    def floored(self) -> tuple[int, int]:
        return math.floor(self.x), math.floor(self.y)
