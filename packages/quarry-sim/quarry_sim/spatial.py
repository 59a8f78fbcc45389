"""Positions and radius tests on the continuous 2D plane."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Pos2D:
    x: float
    y: float


def distance_sq(a: Pos2D, b: Pos2D) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def within_radius(center: Pos2D, point: Pos2D, radius: float) -> bool:
    """True when *point* lies inside or on the circle. No square root taken."""
    return distance_sq(center, point) <= radius * radius


def footprint_radius(width: float, height: float) -> int:
    """Accept radius for a rectangular footprint: the longer side rounded half up."""
    if width <= 0 or height <= 0:
        raise ValueError(f"footprint must be positive, got {width}x{height}")
    return math.floor(max(width, height) + 0.5)
