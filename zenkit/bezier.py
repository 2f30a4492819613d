"""Quadratic and cubic Bezier curves over 2D or 3D vectors."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vector2, Vector3


@dataclass
class Bezier:
    """A curve with three (quadratic) or four (cubic) control points."""

    controls: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.controls = list(self.controls)
        if len(self.controls) not in (3, 4):
            raise ValueError(f"a Bezier curve needs 3 or 4 controls, got {len(self.controls)}")
        kind = type(self.controls[0])
        if kind not in (Vector2, Vector3):
            raise TypeError("controls must be Vector2 or Vector3")
        if any(type(c) is not kind for c in self.controls):
            raise TypeError("all controls must be of the same vector type")

    def pair(self, value):
        """The two points whose interpolation gives the curve point; their difference is the tangent."""
        points = self.controls
        while len(points) > 2:
            points = [a.lerp(b, value) for a, b in zip(points, points[1:])]
        return points[0], points[1]

    def point(self, value):
        """The point on the curve at parameter value."""
        first, second = self.pair(value)
        return first.lerp(second, value)