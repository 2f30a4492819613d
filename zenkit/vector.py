"""Two, three and four component float vectors."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from numbers import Real

from .types import Point2, Size2


def _format_component(value) -> str:
    return f"{value:g}"


class _VectorBase:
    """Component-wise arithmetic shared by the fixed-size vectors."""

    _names: tuple = ()
    __hash__ = None

    @classmethod
    def from_values(cls, values):
        """Build a vector from an iterable of components."""
        values = tuple(values)
        if len(values) != len(cls._names):
            raise ValueError(f"{cls.__name__} needs {len(cls._names)} components, got {len(values)}")
        return cls(*values)

    def __iter__(self):
        return (getattr(self, name) for name in self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, index):
        return getattr(self, self._names[index])

    def __setitem__(self, index, value) -> None:
        setattr(self, self._names[index], value)

    def _combine(self, other, op):
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if isinstance(other, Real):
            return type(self)(*(op(a, other) for a in self))
        return NotImplemented

    def __neg__(self):
        return type(self)(*(-a for a in self))

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __eq__(self, other):
        if isinstance(other, type(self)):
            return all(a == b for a, b in zip(self, other))
        if isinstance(other, Real):
            return all(a == other for a in self)
        return NotImplemented

    def __str__(self) -> str:
        return ",".join(_format_component(a) for a in self)

    def dot(self, other) -> float:
        return sum(a * b for a, b in zip(self, other))

    def length2(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length2())

    def distance(self, other) -> float:
        return (other - self).length()

    def distance2(self, other) -> float:
        return (other - self).length2()

    def normalize(self):
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self * (1.0 / self.length())

    def lerp(self, end, t):
        """Linear interpolation from this vector to end."""
        return type(self)(*(a + (b - a) * t for a, b in zip(self, end)))

    def project(self, p):
        """Projection of this vector onto p."""
        return p * (p.dot(self) / p.dot(p))


@dataclass(eq=False)
class Vector2(_VectorBase):
    x: float = 0.0
    y: float = 0.0

    _names = ("x", "y")

    @classmethod
    def from_point(cls, point: Point2) -> "Vector2":
        return cls(point.x, point.y)

    def to_point(self) -> Point2:
        return Point2(self.x, self.y)

    def to_size(self) -> Size2:
        return Size2(self.x, self.y)

    def normalize(self) -> "Vector2":
        return super().normalize()

    def dot(self, other) -> float:
        return super().dot(other)

    def length(self) -> float:
        return super().length()

    def length2(self) -> float:
        return super().length2()

    def distance(self, other) -> float:
        return super().distance(other)

    def distance2(self, other) -> float:
        return super().distance2(other)

    def lerp(self, end, t) -> "Vector2":
        return super().lerp(end, t)

    def project(self, p) -> "Vector2":
        return super().project(p)


@dataclass(eq=False)
class Vector3(_VectorBase):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _names = ("x", "y", "z")

    def normalize(self) -> "Vector3":
        return super().normalize()

    def dot(self, other) -> float:
        return super().dot(other)

    def length(self) -> float:
        return super().length()

    def length2(self) -> float:
        return super().length2()

    def distance(self, other) -> float:
        return super().distance(other)

    def distance2(self, other) -> float:
        return super().distance2(other)

    def lerp(self, end, t) -> "Vector3":
        return super().lerp(end, t)

    def cross(self, other) -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def project(self, p) -> "Vector3":
        return super().project(p)


@dataclass(eq=False)
class Vector4(_VectorBase):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _names = ("x", "y", "z", "w")

    @classmethod
    def from_vector3(cls, v, w) -> "Vector4":
        return cls(v.x, v.y, v.z, w)

    def normalize(self) -> "Vector4":
        return super().normalize()

    def dot(self, other) -> float:
        return super().dot(other)

    def length(self) -> float:
        return super().length()

    def length2(self) -> float:
        return super().length2()

    def distance(self, other) -> float:
        return super().distance(other)

    def distance2(self, other) -> float:
        return super().distance2(other)

    def lerp(self, end, t) -> "Vector4":
        return super().lerp(end, t)

    def cross(self, other) -> "Vector4":
        """Cross product of the xyz parts; w of the result is zero."""
        return Vector4(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0,
        )

    def project(self, p) -> "Vector4":
        return super().project(p)