"""
Utility functions for game mechanics
"""

from __future__ import annotations
from typing import Sequence, Tuple

Point = Tuple[float, float]


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def map_range(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """Linearly re-map value from [start1, stop1] to [start2, stop2] (unclamped)"""
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def segments_intersect(x1, y1, x2, y2, x3, y3, x4, y4) -> bool:
    """Check if segment (x1,y1)-(x2,y2) crosses segment (x3,y3)-(x4,y4)"""
    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denom == 0:
        # Parallel or collinear
        return False

    u_a = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    u_b = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom
    return 0.0 <= u_a <= 1.0 and 0.0 <= u_b <= 1.0


def segment_rect_collide(x1, y1, x2, y2, rx, ry, rw, rh) -> bool:
    """Check if a segment crosses any of the four edges of a rectangle"""
    return (
        segments_intersect(x1, y1, x2, y2, rx, ry, rx, ry + rh)                # left
        or segments_intersect(x1, y1, x2, y2, rx + rw, ry, rx + rw, ry + rh)   # right
        or segments_intersect(x1, y1, x2, y2, rx, ry, rx + rw, ry)             # top
        or segments_intersect(x1, y1, x2, y2, rx, ry + rh, rx + rw, ry + rh)   # bottom
    )


def point_in_polygon(px: float, py: float, vertices: Sequence[Point]) -> bool:
    """Ray casting point-in-polygon test"""
    inside = False
    n = len(vertices)

    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if ((yi > py) != (yj > py)) and (px < (xj - xi) * (py - yi) / (yj - yi) + xi):
            inside = not inside
        j = i

    return inside


def point_in_rect(px: float, py: float, rx: float, ry: float, rw: float, rh: float) -> bool:
    """Check if a point lies inside (or on the border of) a rectangle"""
    return rx <= px <= rx + rw and ry <= py <= ry + rh


def collide_rect_poly(
    rx: float,
    ry: float,
    rw: float,
    rh: float,
    vertices: Sequence[Point],
    interior: bool = True,
) -> bool:
    """
    Check if an axis-aligned rectangle intersects a polygon.

    Any polygon edge crossing a rectangle edge counts as a hit. With
    ``interior`` set, full containment in either direction also counts
    (a small bullet sitting entirely inside a hull, or the reverse).
    """
    n = len(vertices)
    for i in range(n):
        x1, y1 = vertices[i]
        x2, y2 = vertices[(i + 1) % n]
        if segment_rect_collide(x1, y1, x2, y2, rx, ry, rw, rh):
            return True

    if not interior:
        return False

    if point_in_polygon(rx, ry, vertices):
        return True

    vx, vy = vertices[0]
    return point_in_rect(vx, vy, rx, ry, rw, rh)
