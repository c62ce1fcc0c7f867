"""Geometric primitives for path and polygon tests.

This module provides the core mathematical utilities for:
- Euclidean distance
- Point-to-segment distance (clamped projection)
- Segment-segment intersection (boundary-inclusive)
- Point-in-polygon testing (ray casting algorithm)
- Polygon edge iteration and bounding boxes

All functions are pure and stateless. ``is_point_in_polygon`` is the single
containment routine shared by collision detection and solution replay.
"""

import math
from collections.abc import Iterator, Sequence

from oneline.domain import Point


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points.

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    return math.hypot(b.x - a.x, b.y - a.y)


def point_to_segment_distance(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to the closest point of a line segment.

    Projects the point onto the infinite line, then clamps the projection
    parameter to [0, 1] to stay within the segment. A zero-length segment
    degrades to point-to-point distance.

    Args:
        point: The point to measure from
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Euclidean distance to the nearest point of the segment

    Examples:
        >>> point_to_segment_distance(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return distance(point, seg_start)

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(point.x - (seg_start.x + t * dx), point.y - (seg_start.y + t * dy))


def _direction(origin: Point, target: Point, point: Point) -> float:
    """Cross product sign of ``point`` relative to the line origin -> target."""
    return (point.x - origin.x) * (target.y - origin.y) - (target.x - origin.x) * (
        point.y - origin.y
    )


def _within_bounds(seg_start: Point, seg_end: Point, point: Point) -> bool:
    """Check that a point lies inside the segment's bounding box (inclusive)."""
    return (
        min(seg_start.x, seg_end.x) <= point.x <= max(seg_start.x, seg_end.x)
        and min(seg_start.y, seg_end.y) <= point.y <= max(seg_start.y, seg_end.y)
    )


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Determine whether segment p1-p2 intersects segment p3-p4.

    Proper intersections are detected by a strict sign change of the cross
    product on both segments. Touching and collinear-overlap cases count as
    intersections too: an endpoint whose direction value is exactly zero and
    that lies within the other segment's bounds intersects it.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        True if the segments share at least one point

    Examples:
        >>> segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        True
        >>> segments_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))
        False
    """
    d1 = _direction(p3, p4, p1)
    d2 = _direction(p3, p4, p2)
    d3 = _direction(p1, p2, p3)
    d4 = _direction(p1, p2, p4)

    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True

    if d1 == 0 and _within_bounds(p3, p4, p1):
        return True
    if d2 == 0 and _within_bounds(p3, p4, p2):
        return True
    if d3 == 0 and _within_bounds(p1, p2, p3):
        return True
    if d4 == 0 and _within_bounds(p1, p2, p4):
        return True

    return False


def is_point_in_polygon(point: Point, vertices: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.
    A point lying exactly on an edge may land on either side.

    Args:
        point: The point to test
        vertices: Points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> is_point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> is_point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    n = len(vertices)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = vertices[i].x, vertices[i].y
        xj, yj = vertices[j].x, vertices[j].y

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def polygon_edges(vertices: Sequence[Point]) -> Iterator[tuple[Point, Point]]:
    """Yield the closed polygon's edges, wrapping the last vertex to the first."""
    n = len(vertices)
    for i in range(n):
        yield vertices[i], vertices[(i + 1) % n]


def bounding_box(points: Sequence[Point]) -> tuple[float, float, float, float]:
    """Calculate bounding box of a point set.

    Args:
        points: Points to bound

    Returns:
        Tuple of (min_x, min_y, max_x, max_y)

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute bounding box of an empty point set")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
