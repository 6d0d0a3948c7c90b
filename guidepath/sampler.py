# guidepath/sampler.py
"""
Arc-length queries over a sampled polyline.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .config import FACING_EPSILON
from .geom import Vec3, ZERO, distance, lerp, lerp_clamped

# Segments shorter than this are treated as coincident points
_MIN_SEGMENT = 1e-12


def curve_length(curve: Optional[Sequence[Vec3]]) -> float:
    """Total chordal length; 0.0 for fewer than 2 points."""
    if not curve or len(curve) < 2:
        return 0.0
    length = 0.0
    for i in range(len(curve) - 1):
        length += distance(curve[i], curve[i + 1])
    return length


def point_at_distance(curve: Optional[Sequence[Vec3]], dist: float,
                      facing_epsilon: float = FACING_EPSILON) -> Tuple[Vec3, Vec3]:
    """
    Walk the polyline `dist` units from its start.

    Returns (position, facing), where facing is a look-at point a little
    further along the same segment. Negative distances pin to the start;
    distances past the end return the last point.
    """
    if not curve or len(curve) < 2:
        return ZERO, ZERO

    remaining = max(0.0, float(dist))
    for i in range(len(curve) - 1):
        p0 = curve[i]
        p1 = curve[i + 1]
        d = distance(p0, p1)
        if d <= _MIN_SEGMENT:
            continue
        if d < remaining:
            remaining -= d
            continue
        frac = remaining / d
        return lerp(p0, p1, frac), lerp_clamped(p0, p1, frac + facing_epsilon)

    # made it to the end
    return curve[-1], lerp_clamped(curve[-2], curve[-1], 1.0)


def point_on_curve(curve: Optional[Sequence[Vec3]], t: float,
                   facing_epsilon: float = FACING_EPSILON) -> Tuple[Vec3, Vec3]:
    """
    Point and facing point at normalized arc-length fraction t.

    t is not clamped above 1; anything past the end saturates to the final
    point. t below 0 saturates to the first point.
    """
    if not curve or len(curve) < 2:
        return ZERO, ZERO
    return point_at_distance(curve, curve_length(curve) * float(t), facing_epsilon)
