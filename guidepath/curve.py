# guidepath/curve.py
"""
Chained quadratic Bezier construction.
Guides are stitched into quadratic segments that meet at the midpoint between
consecutive interior guides, so every join is shared by both sides.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .geom import Vec3, lerp, midpoint, scale, sub, add, vec3


def quadratic_bezier_points(origin: Vec3, influence: Vec3, destination: Vec3,
                            count: int, through_influence: bool = False) -> List[Vec3]:
    """
    Sample `count` points of the quadratic Bezier origin -> influence -> destination.

    The first point is exactly `origin` and the last exactly `destination`;
    interior point i is evaluated at t = i / count. A count of 1 yields only
    the destination and a count below 1 yields nothing.

    Args:
        origin: Segment start
        influence: Control point
        destination: Segment end
        count: Number of points to emit
        through_influence: Move the control point so the curve passes through
            `influence` at t = 0.5

    Returns:
        List of (x, y, z) points
    """
    count = int(count)
    if count <= 0:
        return []

    if through_influence:
        influence = sub(scale(influence, 2.0), scale(add(origin, destination), 0.5))

    result = [origin] * count
    for i in range(1, count - 1):
        t = (1.0 / count) * i
        a = lerp(origin, influence, t)
        b = lerp(influence, destination, t)
        result[i] = lerp(a, b, t)
    result[count - 1] = destination
    return result


def curve_path(guides: Sequence[Sequence[float]], resolution: int) -> Optional[List[Vec3]]:
    """
    Build the sampled polyline for an ordered guide chain.

    Needs a start, at least one influence and an end; fewer than 3 guides
    returns None. The result holds (len(guides) - 2) * resolution points.
    """
    if guides is None or len(guides) < 3:
        return None

    pts = [vec3(g) for g in guides]
    result: List[Vec3] = []

    current = pts[0]
    for i in range(1, len(pts) - 2):
        p0 = pts[i]
        p1 = pts[i + 1]
        mid = midpoint(p0, p1)
        result.extend(quadratic_bezier_points(current, p0, mid, resolution))
        current = mid

    result.extend(quadratic_bezier_points(current, pts[-2], pts[-1], resolution))
    return result


def segment_slice(segment_index: int, resolution: int) -> slice:
    """Slice of curve_path output covered by quadratic segment `segment_index` (0-based)."""
    r = max(0, int(resolution))
    return slice(segment_index * r, (segment_index + 1) * r)
