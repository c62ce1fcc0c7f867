"""Collision detection between path segments and board elements.

Every test here is built from the primitives in ``oneline.core.geometry``.
Comparisons are inclusive: grazing a dot's rim or touching a polygon edge
counts as contact.
"""

from collections.abc import Sequence

from oneline.core.geometry import (
    distance,
    is_point_in_polygon,
    point_to_segment_distance,
    polygon_edges,
    segments_intersect,
)
from oneline.domain import Dot, Point, RedArea, Shape


def is_point_in_dot(point: Point, dot: Dot) -> bool:
    """Check if a point lies within a dot's radius (inclusive)."""
    return distance(point, dot.position) <= dot.radius


def segment_touches_dot(seg_start: Point, seg_end: Point, dot: Dot) -> bool:
    """Check if any point of a segment lies within a dot's radius.

    Args:
        seg_start: Start point of the segment
        seg_end: End point of the segment
        dot: Dot to test against

    Returns:
        True if the closest point of the segment is within ``dot.radius``
    """
    return point_to_segment_distance(dot.position, seg_start, seg_end) <= dot.radius


def is_point_in_shape(point: Point, shape: Shape) -> bool:
    return is_point_in_polygon(point, shape.vertices)


def is_point_in_red_area(point: Point, red_area: RedArea) -> bool:
    return is_point_in_polygon(point, red_area.vertices)


def segment_crosses_polygon(seg_start: Point, seg_end: Point, vertices: Sequence[Point]) -> bool:
    """Check if a segment intersects any edge of a closed polygon."""
    return any(
        segments_intersect(seg_start, seg_end, v1, v2)
        for v1, v2 in polygon_edges(vertices)
    )


def count_shape_crossings(seg_start: Point, seg_end: Point, shape: Shape) -> int:
    """Count the shape edges a segment intersects.

    Summed over a whole path this approximates entries and exits: a clean
    pass through a convex region produces 2, a path ending inside produces 1.
    A segment through a shared vertex hits both adjacent edges.

    Args:
        seg_start: Start point of the segment
        seg_end: End point of the segment
        shape: Shape whose boundary is tested

    Returns:
        Number of intersected edges
    """
    return sum(
        1
        for v1, v2 in polygon_edges(shape.vertices)
        if segments_intersect(seg_start, seg_end, v1, v2)
    )


def segment_enters_shape(seg_start: Point, seg_end: Point, shape: Shape) -> bool:
    """Check if a segment crosses a shape's boundary."""
    return segment_crosses_polygon(seg_start, seg_end, shape.vertices)


def segment_crosses_red_area(seg_start: Point, seg_end: Point, red_area: RedArea) -> bool:
    """Check if a segment violates a red area.

    A violation is either a boundary crossing or an endpoint inside the area.
    The endpoint test catches strokes that start or end inside the zone
    without a sampled segment ever crossing its boundary.

    Args:
        seg_start: Start point of the segment
        seg_end: End point of the segment
        red_area: Forbidden area to test

    Returns:
        True if the segment crosses or sits inside the red area
    """
    if segment_crosses_polygon(seg_start, seg_end, red_area.vertices):
        return True

    return is_point_in_red_area(seg_start, red_area) or is_point_in_red_area(seg_end, red_area)
