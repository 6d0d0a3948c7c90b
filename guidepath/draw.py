# guidepath/draw.py
"""
Read-only preview of paths on a pygame surface.
Top-down projection: x to the right, y up, z ignored.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import pygame

from .config import (
    CURVE_COLOR, GUIDE_COLOR, GUIDE_LINE_COLOR, FOLLOWER_COLOR, ARROW_COLOR,
    SELECTED_COLOR, WINDOW_WIDTH, WINDOW_HEIGHT, PIXELS_PER_UNIT
)
from .geom import Vec3

Screen = Tuple[float, float]


class View:
    """Maps world units to screen pixels around a screen-space origin."""

    def __init__(self, ppu: float = PIXELS_PER_UNIT,
                 origin: Optional[Screen] = None):
        self.ppu = float(ppu)
        self.origin = origin or (WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0)

    def to_screen(self, p: Vec3) -> Screen:
        return (self.origin[0] + p[0] * self.ppu, self.origin[1] - p[1] * self.ppu)

    def to_world(self, s: Screen, z: float = 0.0) -> Vec3:
        return ((s[0] - self.origin[0]) / self.ppu, -(s[1] - self.origin[1]) / self.ppu, z)


def draw_curve(surface, curve: Optional[Sequence[Vec3]], view: View,
               color=CURVE_COLOR) -> bool:
    """Draw the sampled curve. Returns False when there is nothing to draw."""
    if not curve or len(curve) < 2:
        return False
    pts = [view.to_screen(p) for p in curve]
    pygame.draw.aalines(surface, color, False, pts)
    return True


def draw_guide_lines(surface, positions: Sequence[Vec3], view: View,
                     color=GUIDE_LINE_COLOR):
    """Thin polyline through the guides, in order."""
    if len(positions) < 2:
        return
    pygame.draw.lines(surface, color, False, [view.to_screen(p) for p in positions], 1)


def draw_guides(surface, positions: Sequence[Vec3], view: View,
                selected_idx: Optional[int] = None, radius: int = 6):
    """Draw guide handles; the selected one is highlighted."""
    for i, p in enumerate(positions):
        sx, sy = view.to_screen(p)
        color = SELECTED_COLOR if i == selected_idx else GUIDE_COLOR
        pygame.draw.rect(surface, color, (int(sx) - radius, int(sy) - radius, radius * 2, radius * 2))


def nearest_guide(positions: Sequence[Vec3], view: View, screen_pos: Screen,
                  max_px: float = 12.0) -> Optional[int]:
    """Index of the guide closest to a screen position, within max_px."""
    best, best_idx = max_px * max_px, None
    for i, p in enumerate(positions):
        sx, sy = view.to_screen(p)
        d2 = (sx - screen_pos[0]) ** 2 + (sy - screen_pos[1]) ** 2
        if d2 <= best:
            best, best_idx = d2, i
    return best_idx


def draw_chevron(surface, pos: Screen, heading_deg: float, length=20, offset=45, arm=10):
    """Draw directional arrow chevron."""
    rad = math.radians(heading_deg)
    tip = (pos[0] + length * math.cos(rad), pos[1] - length * math.sin(rad))
    l = math.radians(heading_deg - offset)
    r = math.radians(heading_deg + offset)
    left = (tip[0] - arm * math.cos(l), tip[1] + arm * math.sin(l))
    right = (tip[0] - arm * math.cos(r), tip[1] + arm * math.sin(r))
    pygame.draw.line(surface, ARROW_COLOR, tip, left, 3)
    pygame.draw.line(surface, ARROW_COLOR, tip, right, 3)


def draw_follower(surface, position: Vec3, heading_deg: float, view: View):
    """Follower dot plus heading chevron."""
    sp = view.to_screen(position)
    pygame.draw.circle(surface, FOLLOWER_COLOR, (int(sp[0]), int(sp[1])), 8)
    draw_chevron(surface, sp, heading_deg)
