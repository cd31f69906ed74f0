"""Planar vector helpers: rotation, convex hulls and minimum bounding boxes."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Sequence

_DBL_MAX = sys.float_info.max
_DBL_MIN = sys.float_info.min


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


class Orientation(IntEnum):
    """Turn direction of an ordered point triplet."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def rotate_vector(v: Vec2, theta: float) -> Vec2:
    """Rotate ``v`` about the origin by ``theta`` radians."""
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return Vec2(v.x * cos_t - v.y * sin_t, v.x * sin_t + v.y * cos_t)


def rotate_about(v: Vec2, origin: Vec2, theta: float) -> Vec2:
    """Rotate ``v`` about ``origin`` by ``theta`` radians."""
    offset = rotate_vector(Vec2(v.x - origin.x, v.y - origin.y), theta)
    return Vec2(offset.x + origin.x, offset.y + origin.y)


def angle_to_x(a: Vec2, b: Vec2) -> float:
    """Angle between the segment a->b and the X axis."""
    return math.atan2(b.y - a.y, b.x - a.x)


def orientation(p: Vec2, q: Vec2, r: Vec2) -> Orientation:
    """Orientation of the triplet (p, q, r); the cross product is truncated to an integer."""
    val = math.trunc((q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y))
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTERCLOCKWISE


def convex_hull(points: Iterable[Vec2]) -> list[Vec2]:
    """Gift-wrapping convex hull; returns an empty list for fewer than three points."""
    pts = list(points)
    n = len(pts)
    if n < 3:
        return []

    start = min(range(n), key=lambda idx: pts[idx].x)
    hull: list[Vec2] = []
    current = start
    while True:
        hull.append(pts[current])
        best = (current + 1) % n
        for idx, candidate in enumerate(pts):
            if orientation(pts[current], candidate, pts[best]) is Orientation.COUNTERCLOCKWISE:
                best = idx
        current = best
        if current == start or len(hull) >= n:
            break
    return hull


def tighten_hull(hull: Sequence[Vec2], threshold: float) -> list[Vec2]:
    """Drop hull points whose neighbouring segments differ in angle by less than ``threshold``."""
    pts = list(hull)
    n = len(pts)
    for i in range(n):
        a, b, c = pts[i], pts[(i + 1) % n], pts[(i + 2) % n]
        if abs(angle_to_x(a, b) - angle_to_x(b, c)) < threshold:
            pts[(i + 1) % n] = a
    return [pt for i, pt in enumerate(pts) if pt != pts[(i + 1) % n]]


def minimum_bounding_box(hull: Sequence[Vec2], pin_size: float) -> tuple[Vec2, Vec2, Vec2, Vec2]:
    """Smallest-area rotated rectangle around ``hull``, grown by ``pin_size`` on each side."""
    if not hull:
        raise ValueError("hull must contain at least one point")

    origin = Vec2(min(p.x for p in hull), min(p.y for p in hull))
    pts = [Vec2(p.x - origin.x, p.y - origin.y) for p in hull]
    n = len(pts)

    best_area = _DBL_MAX
    best_angle = 0.0
    cumulative = 0.0
    low: Vec2 | None = None
    high: Vec2 | None = None

    for i in range(n):
        angle = angle_to_x(pts[i], pts[(i + 1) % n])
        cumulative += angle
        pts = [rotate_vector(p, -angle) for p in pts]

        top = max(_DBL_MIN, max(p.y for p in pts))
        right = max(_DBL_MIN, max(p.x for p in pts))
        bottom = min(_DBL_MAX, min(p.y for p in pts))
        left = min(_DBL_MAX, min(p.x for p in pts))
        area = (right - left) * (top - bottom)

        if area < best_area:
            best_area = area
            best_angle = cumulative
            low = Vec2(left, bottom)
            high = Vec2(right, top)

    if low is None or high is None:
        raise ValueError("could not determine a bounding box for the hull")

    low = Vec2(low.x - pin_size, low.y - pin_size)
    high = Vec2(high.x + pin_size, high.y + pin_size)

    corners = (low, Vec2(high.x, low.y), high, Vec2(low.x, high.y))
    rotated = [rotate_vector(c, best_angle) for c in corners]
    a, b, c, d = (Vec2(p.x + origin.x, p.y + origin.y) for p in rotated)
    return a, b, c, d


def segment_intersection(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2) -> Vec2 | None:
    """Intersection point of segments p0-p1 and p2-p3, or None if they do not meet."""
    s1x, s1y = p1.x - p0.x, p1.y - p0.y
    s2x, s2y = p3.x - p2.x, p3.y - p2.y

    denom = -s2x * s1y + s1x * s2y
    if denom == 0:
        return None

    s = (-s1y * (p0.x - p2.x) + s1x * (p0.y - p2.y)) / denom
    t = (s2x * (p0.y - p2.y) - s2y * (p0.x - p2.x)) / denom

    if 0 <= s <= 1 and 0 <= t <= 1:
        return Vec2(p0.x + t * s1x, p0.y + t * s1y)
    return None