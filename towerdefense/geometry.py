"""Plane geometry helpers: a 2D vector, distances and path proximity."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable point or direction in screen coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


def distance(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def is_near_path(point: Vec2, path: Sequence[Vec2], radius: float) -> bool:
    """Return True if ``point`` lies closer than ``radius`` to any path segment."""
    limit = radius * radius
    for a, b in zip(path, path[1:]):
        dx = b.x - a.x
        dy = b.y - a.y
        length2 = dx * dx + dy * dy
        if length2 == 0:
            t = 0.0
        else:
            t = ((point.x - a.x) * dx + (point.y - a.y) * dy) / length2
            t = max(0.0, min(1.0, t))
        px = a.x + t * dx
        py = a.y + t * dy
        dist2 = (point.x - px) ** 2 + (point.y - py) ** 2
        if dist2 < limit:
            return True
    return False