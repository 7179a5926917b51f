"""Three-component vectors and scalar interpolation helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True, order=True, slots=True)
class Vec3:
    """An immutable 3-vector, ordered lexicographically by (x, y, z)."""

    x: Number = 0.0
    y: Number = 0.0
    z: Number = 0.0

    @classmethod
    def filled(cls, value: Number) -> "Vec3":
        """Return a vector with every component set to ``value``."""
        return cls(value, value, value)

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> Number:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union["Vec3", Number]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Vec3":
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Union["Vec3", Number]) -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        parts = ", ".join(_format_component(c) for c in self)
        return "{" + parts + "}"

    def sum(self) -> Number:
        """Sum of the components."""
        return self.x + self.y + self.z

    def abssum(self) -> Number:
        """Sum of the absolute values of the components."""
        return abs(self.x) + abs(self.y) + abs(self.z)

    def argmax(self) -> int:
        """Index of the largest component; ties favour the later one."""
        a = 0 if self.x > self.y else 1
        return a if self[a] > self.z else 2

    def argmin(self) -> int:
        """Index of the smallest component; ties favour the later one."""
        a = 0 if self.x < self.y else 1
        return a if self[a] < self.z else 2

    def max(self) -> Number:
        """Largest component."""
        a = self.x if self.x > self.y else self.y
        return a if a > self.z else self.z

    def min(self) -> Number:
        """Smallest component."""
        a = self.x if self.x < self.y else self.y
        return a if a < self.z else self.z

    def cast(self, kind: Callable[[Number], Number]) -> "Vec3":
        """Return a vector with ``kind`` applied to every component."""
        return Vec3(kind(self.x), kind(self.y), kind(self.z))

    @staticmethod
    def distance2(v1: "Vec3", v2: "Vec3") -> Number:
        """Squared Euclidean distance between two vectors."""
        dx = v1.x - v2.x
        dy = v1.y - v2.y
        dz = v1.z - v2.z
        return dx * dx + dy * dy + dz * dz

    @staticmethod
    def distance(v1: "Vec3", v2: "Vec3") -> float:
        """Euclidean distance between two vectors."""
        return math.sqrt(Vec3.distance2(v1, v2))


def _format_component(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def interpolate(point: float, a: float, b: float, f_a: float, f_b: float) -> float:
    """Linearly interpolate between ``(a, f_a)`` and ``(b, f_b)`` at ``point``."""
    return f_a + (f_b - f_a) * (point - a) / (b - a)