"""Plain geometric value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point2:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Size2:
    w: float = 0.0
    h: float = 0.0


@dataclass
class Point3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Rect4f:
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


def rect_from_points(x0, y0, x1, y1) -> Rect4f:
    """Build a rectangle from two corner points."""
    return Rect4f(x0, y0, x1 - x0, y1 - y0)