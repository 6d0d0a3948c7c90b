# guidepath/path.py
"""
Guide nodes and the path that owns them.

A GuidePath keeps its sampled curve cached. Guide moves, structural edits and
resolution changes only mark the cache stale; the next read rebuilds it once.
"""

from __future__ import annotations

import weakref
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from .config import DEFAULT_RESOLUTION, FACING_EPSILON, clamp_resolution
from .curve import curve_path
from .geom import DOWN, RIGHT, Vec3, add, vec3
from .sampler import curve_length, point_on_curve


class Positioned(Protocol):
    """Anything with a settable 3D position (scene transform, slider, follower target)."""
    position: Vec3


class GuideOwner(Protocol):
    """Capability of owning guides: accepts stale notifications."""
    def invalidate(self) -> None: ...


class GuideNode:
    """
    One control point of a path.

    The position is either held by the node or read from a bound `transform`
    (any object with a `.position`). Held positions notify the owner on write;
    bound ones are polled by tick().
    """

    def __init__(self, position: Sequence[float] = (0.0, 0.0, 0.0), order: int = 0,
                 owner: Optional[GuideOwner] = None, transform: Optional[Positioned] = None,
                 name: Optional[str] = None):
        self.transform = transform
        self._position: Vec3 = vec3(transform.position if transform is not None else position)
        self.last_observed_position: Vec3 = self._position
        self.order = int(order)
        self.name = name or f"Node_{self.order}"
        self._owner_ref: Optional[weakref.ReferenceType] = None
        if owner is not None:
            self.attach(owner)

    def __repr__(self):
        return f"GuideNode({self.name!r}, position={self.position}, order={self.order})"

    @property
    def owner(self) -> Optional[GuideOwner]:
        return self._owner_ref() if self._owner_ref is not None else None

    def attach(self, owner: GuideOwner) -> None:
        self._owner_ref = weakref.ref(owner)

    def detach(self) -> None:
        self._owner_ref = None

    @property
    def position(self) -> Vec3:
        if self.transform is not None:
            return vec3(self.transform.position)
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        p = vec3(value)
        if self.transform is not None:
            self.transform.position = p
        self._position = p
        self._observe(p)

    def tick(self) -> bool:
        """Compare the current position with the last observed one. True if moved."""
        return self._observe(self.position)

    def _observe(self, p: Vec3) -> bool:
        if p == self.last_observed_position:
            return False
        self.last_observed_position = p
        owner = self.owner
        # Detached guides are inert
        if owner is not None:
            owner.invalidate()
        return True


GuideRef = Union[GuideNode, int]


class GuidePath:
    """
    Ordered chain of guides plus the cached curve sampled from them.

    Attributes:
        resolution: Samples per quadratic segment, clamped to [2, 50]
        facing_epsilon: Fraction offset used for the facing point
        slider: Optional target placed at `percent` every tick
        percent: Slider position along the curve, 0..1
    """

    def __init__(self, positions: Iterable[Sequence[float]] = (),
                 resolution: int = DEFAULT_RESOLUTION,
                 facing_epsilon: float = FACING_EPSILON,
                 name: str = "Path"):
        self.name = name
        self.facing_epsilon = float(facing_epsilon)
        self.slider: Optional[Positioned] = None
        self.percent = 0.0
        self._guides: List[GuideNode] = []
        self._resolution = clamp_resolution(resolution)
        self._curve: Optional[List[Vec3]] = None
        self._length = 0.0
        self._stale = True
        for p in positions:
            self.add_guide(p)
        self.renumber_guides()

    def __repr__(self):
        return f"GuidePath({self.name!r}, guides={len(self._guides)}, resolution={self._resolution})"

    def __len__(self):
        return len(self._guides)

    # ---------------- cache ----------------

    @property
    def guides(self) -> Tuple[GuideNode, ...]:
        return tuple(self._guides)

    @property
    def positions(self) -> List[Vec3]:
        return [g.position for g in self._guides]

    @property
    def resolution(self) -> int:
        return self._resolution

    @resolution.setter
    def resolution(self, value: int) -> None:
        r = clamp_resolution(value)
        if r != self._resolution:
            self._resolution = r
            self.invalidate()

    @property
    def stale(self) -> bool:
        return self._stale

    @property
    def curve(self) -> Optional[List[Vec3]]:
        """Sampled curve, rebuilt first when stale. None with fewer than 3 guides."""
        if self._stale:
            self.refresh_path()
        return self._curve

    @property
    def length(self) -> float:
        if self._stale:
            self.refresh_path()
        return self._length

    def invalidate(self) -> None:
        self._stale = True

    def refresh_path(self) -> Optional[List[Vec3]]:
        """Rebuild the curve and its length from the current guides and resolution."""
        self._curve = curve_path(self.positions, self._resolution)
        self._length = curve_length(self._curve)
        self._stale = False
        return self._curve

    def curve_path(self, resolution: Optional[int] = None) -> Optional[List[Vec3]]:
        """One-shot build from current guide positions; the cache is left alone."""
        r = self._resolution if resolution is None else resolution
        return curve_path(self.positions, r)

    def query_point(self, t: float) -> Optional[Tuple[Vec3, Vec3]]:
        """(position, facing) at arc-length fraction t, or None when there is no curve."""
        curve = self.curve
        if curve is None:
            return None
        return point_on_curve(curve, t, self.facing_epsilon)

    # ---------------- structure ----------------

    def index_of(self, guide: GuideRef) -> int:
        if isinstance(guide, GuideNode):
            for i, g in enumerate(self._guides):
                if g is guide:
                    return i
            raise ValueError(f"{guide!r} does not belong to {self!r}")
        idx = int(guide)
        if not -len(self._guides) <= idx < len(self._guides):
            raise IndexError(f"guide index {idx} out of range")
        return idx % len(self._guides)

    def _insert(self, index: int, guide: GuideNode) -> GuideNode:
        guide.attach(self)
        self._guides.insert(index, guide)
        self.invalidate()
        return guide

    def add_guide(self, position: Union[Sequence[float], Positioned]) -> GuideNode:
        """Append a guide. Accepts a position or an object with `.position`."""
        if hasattr(position, "position"):
            guide = GuideNode(order=len(self._guides), transform=position)  # type: ignore[arg-type]
        else:
            guide = GuideNode(position, order=len(self._guides))
        return self._insert(len(self._guides), guide)

    def insert_guide_after(self, index: int, position: Optional[Sequence[float]] = None) -> GuideNode:
        """
        Insert a guide right after `index`. Without a position the new guide
        starts on top of its neighbour. Call renumber_guides() afterwards.
        """
        src = self.index_of(index)
        pos = self._guides[src].position if position is None else position
        return self._insert(src + 1, GuideNode(pos, order=src + 1))

    def duplicate_guide(self, guide: GuideRef) -> GuideNode:
        """
        Clone a guide in place. A copy of the first guide becomes the new first
        guide; any other copy lands right after its source. Renumbers.
        """
        src = self.index_of(guide)
        pos = self._guides[src].position
        index = 0 if src == 0 else src + 1
        dupe = self._insert(index, GuideNode(pos, order=index))
        self.renumber_guides()
        return dupe

    def remove_guide(self, guide: GuideRef) -> GuideNode:
        """Remove and detach a guide. Call renumber_guides() afterwards."""
        idx = self.index_of(guide)
        removed = self._guides.pop(idx)
        removed.detach()
        self.invalidate()
        return removed

    def seed_default_guides(self, origin: Sequence[float] = (0.0, 0.0, 0.0)) -> None:
        """Give an empty path a usable start, influence and end."""
        if self._guides:
            return
        o = vec3(origin)
        for p in (o, add(o, RIGHT), add(add(o, RIGHT), DOWN)):
            self.add_guide(p)
        self.renumber_guides()

    def renumber_guides(self) -> None:
        """Reassign order and name of every guide from its list position."""
        for i, g in enumerate(self._guides):
            g.order = i
            g.name = f"Node_{i}"

    # ---------------- per tick ----------------

    def tick(self) -> None:
        """Poll bound guides, then place the slider."""
        for g in self._guides:
            if g.transform is not None:
                g.tick()
        if self.slider is None:
            return
        hit = self.query_point(self.percent)
        if hit is None:
            return
        pos, facing = hit
        self.slider.position = pos
        if hasattr(self.slider, "facing"):
            self.slider.facing = facing
