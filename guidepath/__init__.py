"""
guidepath: chained quadratic Bezier paths built from ordered guide nodes,
sampled by arc length.
"""

from .curve import curve_path, quadratic_bezier_points
from .sampler import curve_length, point_at_distance, point_on_curve
from .path import GuideNode, GuidePath
from .follow import PathFollower

__all__ = [
    "curve_path", "quadratic_bezier_points",
    "curve_length", "point_at_distance", "point_on_curve",
    "GuideNode", "GuidePath", "PathFollower",
]
