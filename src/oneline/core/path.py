"""Drawn path model.

A ``Line`` is the sampled polyline of one stroke. Every operation returns a
new ``Line``; a rejected point hands back the line it was given.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from oneline.config import DEFAULT_MIN_POINT_SPACING, DEFAULT_SMOOTHING_FACTOR
from oneline.core.geometry import distance
from oneline.domain import Point

Segment = tuple[Point, Point]


@dataclass(frozen=True, slots=True)
class Line:
    """The points recorded for a stroke.

    Attributes:
        points: Recorded points in drawing order
        is_active: True while the stroke is still accepting points
    """

    points: tuple[Point, ...] = ()
    is_active: bool = False

    def __len__(self) -> int:
        return len(self.points)

    def is_empty(self) -> bool:
        return not self.points


def create_line() -> Line:
    """Create an empty, inactive line."""
    return Line()


def start_line(point: Point) -> Line:
    """Begin an active line at ``point``."""
    return Line(points=(point,), is_active=True)


def add_point(
    line: Line,
    point: Point,
    *,
    min_spacing: float = DEFAULT_MIN_POINT_SPACING,
    smoothing: float = DEFAULT_SMOOTHING_FACTOR,
) -> Line:
    """Append a sampled point to an active line.

    The point is ignored when the line is inactive or empty, or when it is
    closer than ``min_spacing`` to the last recorded point. Accepted points
    are pulled toward the previous point:
    ``previous + (1 - smoothing) * (raw - previous)``.

    Args:
        line: Line to extend
        point: Raw sampled point
        min_spacing: Minimum distance from the last recorded point
        smoothing: Fraction of the step removed by smoothing

    Returns:
        New line with the smoothed point appended, or ``line`` unchanged
    """
    if not line.is_active or not line.points:
        return line

    last = line.points[-1]
    if distance(last, point) < min_spacing:
        return line

    follow = 1.0 - smoothing
    smoothed = Point(
        last.x + (point.x - last.x) * follow,
        last.y + (point.y - last.y) * follow,
    )
    return Line(points=(*line.points, smoothed), is_active=True)


def end_line(line: Line) -> Line:
    """Freeze a line; no further points are accepted."""
    return Line(points=line.points, is_active=False)


def reset_line() -> Line:
    """Discard a line, returning the empty inactive state."""
    return create_line()


def line_from_points(points: Iterable[Point]) -> Line:
    """Build an inactive line verbatim from a reference path.

    No spacing filter or smoothing is applied; reference solutions are
    replayed exactly as authored.
    """
    return Line(points=tuple(points), is_active=False)


def segments(line: Line) -> list[Segment]:
    """Consecutive point pairs of the line, in drawing order."""
    pts = line.points
    return [(pts[i], pts[i + 1]) for i in range(len(pts) - 1)]


def last_segment(line: Line) -> Segment | None:
    """The most recently drawn segment, or None with fewer than 2 points."""
    if len(line.points) < 2:
        return None
    return (line.points[-2], line.points[-1])
