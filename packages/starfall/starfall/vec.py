"""2D vector helpers operating on ``(x, y)`` tuples. y grows downward."""
from __future__ import annotations

Vec = tuple[float, float]


def offset(v: Vec, dx: float = 0.0, dy: float = 0.0) -> Vec:
    return (v[0] + dx, v[1] + dy)


def distance_sq(a: Vec, b: Vec) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def clamp(value: float, low: float, high: float) -> float:
    """Clamp into ``[low, high]``. When the range is inverted, ``high`` wins."""
    return min(high, max(low, value))
