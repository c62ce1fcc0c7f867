"""Unit tests for geometry primitives.

Tests cover:
- Distance and point-to-segment distance
- Segment intersection, including touching and collinear cases
- Point-in-polygon for convex and concave polygons
- Polygon edge iteration and bounding boxes
"""

import pytest

from oneline.core.geometry import (
    bounding_box,
    distance,
    is_point_in_polygon,
    point_to_segment_distance,
    polygon_edges,
    segments_intersect,
)
from oneline.domain import Point

SQUARE = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]

# L-shaped polygon with a notch in the upper right quadrant
L_SHAPE = [
    Point(0.0, 0.0),
    Point(2.0, 0.0),
    Point(2.0, 1.0),
    Point(1.0, 1.0),
    Point(1.0, 2.0),
    Point(0.0, 2.0),
]

TRIANGLE = [Point(10.0, 10.0), Point(50.0, 10.0), Point(30.0, 40.0)]


class TestDistance:
    """Tests for distance functions."""

    def test_distance_345(self):
        """Classic 3-4-5 triangle."""
        assert distance(Point(0, 0), Point(3, 4)) == 5.0

    def test_distance_symmetric(self):
        """Distance does not depend on argument order."""
        a, b = Point(1.5, -2.0), Point(-4.0, 7.25)
        assert distance(a, b) == distance(b, a)

    def test_perpendicular_projection(self):
        """Point above the middle of a segment."""
        d = point_to_segment_distance(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        assert d == pytest.approx(1.0)

    def test_projection_clamped_to_end(self):
        """Point beyond the end measures to the endpoint."""
        d = point_to_segment_distance(Point(5.0, 0.0), Point(0.0, 0.0), Point(2.0, 0.0))
        assert d == pytest.approx(3.0)

    def test_projection_clamped_to_start(self):
        """Point before the start measures to the start point."""
        d = point_to_segment_distance(Point(-3.0, 4.0), Point(0.0, 0.0), Point(2.0, 0.0))
        assert d == pytest.approx(5.0)

    def test_zero_length_segment(self):
        """Degenerate segment falls back to point distance."""
        d = point_to_segment_distance(Point(3.0, 4.0), Point(0.0, 0.0), Point(0.0, 0.0))
        assert d == pytest.approx(5.0)


class TestSegmentsIntersect:
    """Tests for segment intersection."""

    def test_proper_crossing(self):
        """Diagonals of a square cross."""
        assert segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))

    def test_parallel_segments(self):
        """Parallel segments never meet."""
        assert not segments_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))

    def test_disjoint_non_parallel(self):
        """Lines would cross, but not within the segments."""
        assert not segments_intersect(Point(0, 0), Point(1, 1), Point(3, 0), Point(2, 1))

    def test_t_junction_counts(self):
        """An endpoint touching the other segment is an intersection."""
        assert segments_intersect(Point(0, 0), Point(2, 0), Point(1, 0), Point(1, 2))

    def test_shared_endpoint(self):
        """Segments sharing an endpoint intersect."""
        assert segments_intersect(Point(0, 0), Point(1, 1), Point(1, 1), Point(2, 0))

    def test_collinear_overlap(self):
        """Overlapping collinear segments intersect."""
        assert segments_intersect(Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0))

    def test_collinear_disjoint(self):
        """Collinear segments with a gap do not intersect."""
        assert not segments_intersect(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))

    def test_argument_order_irrelevant(self):
        """Swapping the two segments gives the same answer."""
        p1, p2, p3, p4 = Point(0, 0), Point(4, 4), Point(0, 4), Point(4, 0)
        assert segments_intersect(p1, p2, p3, p4) == segments_intersect(p3, p4, p1, p2)


class TestPointInPolygon:
    """Tests for ray-casting containment."""

    def test_center_inside(self):
        assert is_point_in_polygon(Point(1.0, 1.0), SQUARE)

    def test_outside(self):
        assert not is_point_in_polygon(Point(3.0, 3.0), SQUARE)

    def test_concave_notch_is_outside(self):
        """The notch of an L shape lies outside the polygon."""
        assert not is_point_in_polygon(Point(1.5, 1.5), L_SHAPE)

    def test_concave_arm_is_inside(self):
        """Both arms of the L are inside."""
        assert is_point_in_polygon(Point(0.5, 1.5), L_SHAPE)
        assert is_point_in_polygon(Point(1.5, 0.5), L_SHAPE)

    def test_degenerate_polygon(self):
        """Fewer than 3 vertices never contains anything."""
        assert not is_point_in_polygon(Point(0.5, 0.0), [Point(0, 0), Point(1, 0)])
        assert not is_point_in_polygon(Point(0.0, 0.0), [])

    def test_winding_order_irrelevant(self):
        """Clockwise and counter-clockwise vertex order agree."""
        reversed_square = list(reversed(SQUARE))
        assert is_point_in_polygon(Point(1.0, 1.0), reversed_square)
        assert not is_point_in_polygon(Point(3.0, 1.0), reversed_square)

    @pytest.mark.parametrize("polygon", [SQUARE, L_SHAPE, TRIANGLE])
    @pytest.mark.parametrize(
        ("dx", "dy"),
        [(-100.0, 0.0), (100.0, 0.0), (0.0, -100.0), (0.0, 100.0), (75.0, -60.0)],
    )
    def test_points_beyond_hull_are_outside(self, polygon, dx, dy):
        """Any point outside the bounding box (hence the hull) is outside."""
        min_x, min_y, max_x, max_y = bounding_box(polygon)
        cx, cy = (min_x + max_x) / 2, (min_y + max_y) / 2
        assert not is_point_in_polygon(Point(cx + dx, cy + dy), polygon)


class TestPolygonHelpers:
    """Tests for edge iteration and bounding boxes."""

    def test_edges_wrap_around(self):
        """The last edge closes the polygon."""
        edges = list(polygon_edges(TRIANGLE))
        assert len(edges) == 3
        assert edges[0] == (TRIANGLE[0], TRIANGLE[1])
        assert edges[-1] == (TRIANGLE[2], TRIANGLE[0])

    def test_bounding_box(self):
        assert bounding_box(TRIANGLE) == (10.0, 10.0, 50.0, 40.0)

    def test_bounding_box_empty(self):
        with pytest.raises(ValueError):
            bounding_box([])
