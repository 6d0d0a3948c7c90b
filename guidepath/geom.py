# guidepath/geom.py
"""
3D vector helpers over plain (x, y, z) float tuples.
"""

from __future__ import annotations

import math
from typing import Iterable, Tuple

Vec3 = Tuple[float, float, float]

ZERO: Vec3 = (0.0, 0.0, 0.0)
RIGHT: Vec3 = (1.0, 0.0, 0.0)
DOWN: Vec3 = (0.0, -1.0, 0.0)


def vec3(p: Iterable[float]) -> Vec3:
    """Coerce a 2- or 3-sequence into a float 3-tuple (missing z is 0)."""
    vals = [float(v) for v in p]
    if len(vals) == 2:
        vals.append(0.0)
    if len(vals) != 3:
        raise ValueError(f"expected 2 or 3 coordinates, got {len(vals)}")
    return (vals[0], vals[1], vals[2])


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(a: Vec3, k: float) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Unclamped linear interpolation a + (b - a) * t."""
    return (a[0] + (b[0] - a[0]) * t,
            a[1] + (b[1] - a[1]) * t,
            a[2] + (b[2] - a[2]) * t)


def lerp_clamped(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Linear interpolation with t clamped to [0, 1]."""
    return lerp(a, b, max(0.0, min(1.0, t)))


def midpoint(a: Vec3, b: Vec3) -> Vec3:
    return lerp(a, b, 0.5)


def distance(a: Vec3, b: Vec3) -> float:
    """Euclidean distance."""
    return math.sqrt((b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2 + (b[2] - a[2]) ** 2)


def heading_from_points(p0: Vec3, p1: Vec3) -> float:
    """
    Planar heading in degrees (math frame, 0=+x, CCW positive) from p0 to p1,
    measured in the x/y plane. Returns 0.0 when the points coincide.
    """
    dx = p1[0] - p0[0]
    dy = p1[1] - p0[1]
    if abs(dx) <= 1e-12 and abs(dy) <= 1e-12:
        return 0.0
    return math.degrees(math.atan2(dy, dx)) % 360.0
