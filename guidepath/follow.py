# guidepath/follow.py
"""
Tick-driven movement along a path at constant arc-length speed.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple, Union

from .config import FACING_EPSILON
from .geom import Vec3, ZERO, heading_from_points
from .path import GuidePath, Positioned
from .sampler import curve_length, point_on_curve

PathLike = Union[GuidePath, Sequence[Vec3]]


def _remap01(value: float, lo: float, hi: float) -> float:
    """Inverse lerp clamped to [0, 1]."""
    if hi == lo:
        return 1.0 if value >= hi else 0.0
    return max(0.0, min(1.0, (value - lo) / (hi - lo)))


def path_length(path: PathLike) -> float:
    if isinstance(path, GuidePath):
        return path.length
    return curve_length(path)


def sample_path(path: PathLike, t: float) -> Optional[Tuple[Vec3, Vec3]]:
    """Point and facing on a GuidePath or a raw point sequence; None when no curve."""
    if isinstance(path, GuidePath):
        return path.query_point(t)
    if not path or len(path) < 2:
        return None
    return point_on_curve(path, t, FACING_EPSILON)


class PathFollower:
    """
    Move along a path over `duration` seconds.

    Each pass runs elapsed time 0 -> duration. At the end of a pass a non-zero
    `ping_pong` runs again backwards, else a non-zero `loop` runs again the same
    way (negative loops forever), else the follower finishes and calls on_done.
    """

    def __init__(self, path: PathLike, duration: float, loop: int = 0, ping_pong: int = 0,
                 inverse: bool = False, align: bool = False,
                 on_done: Optional[Callable[["PathFollower"], None]] = None,
                 target: Optional[Positioned] = None):
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        self.path = path
        self.duration = float(duration)
        self.loop = int(loop)
        self.ping_pong = int(ping_pong)
        self.inverse = bool(inverse)
        self.align = bool(align)
        self.on_done = on_done
        self.target = target
        self.elapsed = 0.0
        self.iteration_count = 1
        self.running = True
        self.position: Vec3 = ZERO
        self.facing: Vec3 = ZERO
        self.heading_deg = 0.0

    @classmethod
    def from_speed(cls, path: PathLike, speed: float, **kw) -> "PathFollower":
        """Duration chosen so the path is covered at `speed` units per second."""
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        length = path_length(path)
        return cls(path, max(length / speed, 1e-6), **kw)

    @property
    def progress(self) -> float:
        """Current arc-length fraction, inverse-aware."""
        t = _remap01(self.elapsed, 0.0, self.duration)
        return 1.0 - t if self.inverse else t

    def stop(self) -> None:
        self.running = False

    def tick(self, dt: float) -> bool:
        """Advance by dt seconds. Returns True while still running."""
        if not self.running:
            return False
        self.elapsed += max(0.0, float(dt))
        self._place(self.progress)
        if self.elapsed >= self.duration:
            self._end_pass()
        return self.running

    def _place(self, t: float) -> None:
        hit = sample_path(self.path, t)
        if hit is None:
            return
        pos, look = hit
        if self.align and look != pos:
            self.heading_deg = heading_from_points(pos, look)
        self.position, self.facing = pos, look
        if self.target is not None:
            self.target.position = pos
            if self.align and hasattr(self.target, "facing"):
                self.target.facing = look

    def _end_pass(self) -> None:
        self.elapsed = 0.0
        if self.ping_pong != 0:
            self.ping_pong -= 1
            self.loop = 0
            self.inverse = not self.inverse
        elif self.loop != 0:
            self.loop -= 1
        else:
            self.running = False
            if self.on_done is not None:
                self.on_done(self)
            return
        self.iteration_count += 1
