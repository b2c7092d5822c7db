# MIT License (see LICENSE)
"""
Utility types and functions for 2D vector math.

Provides the immutable Vec2 value type used for every position, previous
position and accumulator in the simulation, plus array conversion helpers
for handing state to numpy-based consumers (renderers, metrics, benchmarks).
"""
from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np

from .constants import NORMALIZE_EPS


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Accepts tuples, lists, Vec2 instances and arrays alike.
    """
    if isinstance(x, Vec2):
        return x.to_array()
    return np.array(x, dtype=np.float64)


@dataclass(frozen=True)
class Vec2:
    """
    Immutable 2D vector.

    Attributes:
        x: Horizontal component.
        y: Vertical component (positive is up).
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, v) -> Vec2:
        """
        Coerce a Vec2, a 2-tuple/list or a shape (2,) array to Vec2.

        Raises:
            ValueError: If v does not hold exactly two components.
        """
        if isinstance(v, Vec2):
            return v
        arr = f64(v).reshape(-1)
        if arr.shape != (2,):
            raise ValueError(f"Expected 2 components, got {arr.shape[0]}")
        return cls(float(arr[0]), float(arr[1]))

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, k: float) -> Vec2:
        return Vec2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Vec2:
        return Vec2(self.x / k, self.y / k)

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        """Squared magnitude. Avoids sqrt for overlap tests."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self, eps: float = NORMALIZE_EPS) -> Vec2:
        """
        Return a unit vector in the same direction.

        Returns the zero vector if the length is below eps.
        """
        n = self.length()
        if n < eps:
            return Vec2.zero()
        return Vec2(self.x / n, self.y / n)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)
