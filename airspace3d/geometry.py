"""Planar geometry on the x/y components of points: convex hulls, polygon
containment, segment intersection and rotation."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Tuple

from .bounds import FLT_MAX

Point2 = Tuple[float, float]


def _xy(point: Sequence[float]) -> Point2:
    return (float(point[0]), float(point[1]))


def _cross(origin: Sequence[float], a: Sequence[float], b: Sequence[float]) -> float:
    """z component of (a - origin) x (b - a)."""
    return (a[0] - origin[0]) * (b[1] - a[1]) - (a[1] - origin[1]) * (b[0] - a[0])


def _fuzzy_equal(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


def convex_hull(points: Iterable[Sequence[float]]) -> list[tuple]:
    """Return the convex hull of ``points`` using a monotone chain scan.

    Only x and y take part in the turn test; every coordinate of the hull
    points is kept. Fewer than three points give an empty hull, and points on
    a hull edge are dropped.
    """
    pts = [tuple(float(c) for c in p) for p in points]
    if len(pts) < 3:
        return []
    ordered = sorted(pts, key=lambda p: (p[0], p[1]))

    def chain(sequence: Iterable[tuple]) -> list[tuple]:
        stack: list[tuple] = []
        for p in sequence:
            while len(stack) >= 2 and _cross(stack[-2], stack[-1], p) <= 0:
                stack.pop()
            stack.append(p)
        return stack

    lower = chain(ordered)
    upper = chain(reversed(ordered))
    return lower[-2::-1] + upper[-2::-1]


def point_in_polygon(point: Sequence[float], polygon: Sequence[Sequence[float]]) -> bool:
    """Test ``point`` against ``polygon`` with the odd-even fill rule."""
    vertices = [_xy(p) for p in polygon]
    if not vertices:
        return False
    x, y = _xy(point)
    winding = 0
    for (x1, y1), (x2, y2) in zip(vertices, vertices[1:] + vertices[:1]):
        if _fuzzy_equal(y1, y2):
            continue
        direction = 1
        if y2 < y1:
            x1, y1, x2, y2 = x2, y2, x1, y1
            direction = -1
        if y1 <= y < y2:
            cross_x = x1 + ((x2 - x1) / (y2 - y1)) * (y - y1)
            if cross_x <= x:
                winding += direction
    return winding % 2 != 0


def segment_intersection(
    p1: Sequence[float], p2: Sequence[float], q1: Sequence[float], q2: Sequence[float]
) -> Optional[Point2]:
    """Return where segment p1-p2 meets segment q1-q2, or None.

    Parallel segments never meet.
    """
    ax, ay = p2[0] - p1[0], p2[1] - p1[1]
    bx, by = q1[0] - q2[0], q1[1] - q2[1]
    cx, cy = p1[0] - q1[0], p1[1] - q1[1]
    denominator = ay * bx - ax * by
    if denominator == 0 or not math.isfinite(denominator):
        return None
    reciprocal = 1.0 / denominator
    na = (by * cx - bx * cy) * reciprocal
    if na < 0 or na > 1:
        return None
    nb = (ax * cy - ay * cx) * reciprocal
    if nb < 0 or nb > 1:
        return None
    return (float(p1[0]) + ax * na, float(p1[1]) + ay * na)


def _edges(polygon: Sequence[Sequence[float]]):
    vertices = [_xy(p) for p in polygon]
    return zip(vertices, vertices[1:] + vertices[:1])


def segment_in_polygon(
    start: Sequence[float], end: Sequence[float], polygon: Sequence[Sequence[float]]
) -> bool:
    """True when both ends lie inside ``polygon`` and no edge is crossed."""
    if not point_in_polygon(start, polygon) or not point_in_polygon(end, polygon):
        return False
    return all(
        segment_intersection(start, end, a, b) is None for a, b in _edges(polygon)
    )


def scan_intersections(
    start: Sequence[float], end: Sequence[float], polygon: Sequence[Sequence[float]]
) -> list[Point2]:
    """Return the points where a segment meets the polygon edges, sorted by x."""
    hits = (segment_intersection(start, end, a, b) for a, b in _edges(polygon))
    return sorted((hit for hit in hits if hit is not None), key=lambda p: p[0])


def bounding_rect(polygon: Sequence[Sequence[float]]) -> tuple[float, float, float, float]:
    """Return ``(left, top, right, bottom)`` with top the smallest y.

    An empty polygon gives a zero rectangle at the origin.
    """
    vertices = [_xy(p) for p in polygon]
    if not vertices:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [x for x, _ in vertices]
    ys = [y for _, y in vertices]
    return (min(xs), min(ys), max(xs), max(ys))


def _sin_cos(angle: float) -> tuple[float, float]:
    turn = angle % 360
    if turn == 0:
        return 0.0, 1.0
    if turn == 90:
        return 1.0, 0.0
    if turn == 180:
        return 0.0, -1.0
    if turn == 270:
        return -1.0, 0.0
    radians = math.radians(angle)
    return math.sin(radians), math.cos(radians)


def rotate_about(
    points: Iterable[Sequence[float]], center: Sequence[float], angle: float
) -> list[Point2]:
    """Rotate the x/y of ``points`` counter-clockwise by ``angle`` degrees."""
    sin, cos = _sin_cos(angle)
    cx, cy = _xy(center)
    rotated = []
    for x, y in map(_xy, points):
        dx, dy = x - cx, y - cy
        rotated.append((cx + dx * cos - dy * sin, cy + dx * sin + dy * cos))
    return rotated


def optimal_rotation(polygon: Sequence[Sequence[float]]) -> float:
    """Return the angle, in 5-degree steps below 180, whose rotation about the
    origin gives ``polygon`` the smallest bounding-box area."""
    min_area = FLT_MAX
    best = 0.0
    for angle in range(0, 180, 5):
        left, top, right, bottom = bounding_rect(rotate_about(polygon, (0.0, 0.0), angle))
        area = (right - left) * (bottom - top)
        if area < min_area:
            min_area = area
            best = float(angle)
    return best