"""Unit tests for the per-stroke drawing session."""

import pytest

from oneline.config import PathConfig
from oneline.core.rules import ViolationKind
from oneline.core.session import DrawingSession
from oneline.domain import Dot, Point, Puzzle, RedArea, Shape


def make_puzzle() -> Puzzle:
    return Puzzle(
        id=5,
        name="session",
        difficulty=1,
        board_width=300,
        board_height=300,
        elements=(
            Dot(id=1, position=Point(50, 50), radius=10),
            Shape(
                id=2,
                position=Point(120, 50),
                vertices=(Point(100, 40), Point(140, 40), Point(140, 60), Point(100, 60)),
            ),
            RedArea(
                id=3,
                position=Point(50, 110),
                vertices=(Point(40, 100), Point(60, 100), Point(60, 120), Point(40, 120)),
            ),
        ),
    )


def draw(*coords: tuple[float, float]) -> DrawingSession:
    """Begin at the first point and extend through the rest without smoothing."""
    session = DrawingSession.for_puzzle(make_puzzle(), PathConfig(smoothing_factor=0.0))
    first, *rest = coords
    session = session.begin(Point(*first))
    for x, y in rest:
        session = session.extend(Point(x, y))
    return session


class TestDrawingFlow:
    """Tests for begin/extend/finish sequences."""

    def test_solving_stroke(self):
        session = draw((0, 50), (50, 50), (120, 50), (200, 50))

        assert session.visited_dots == {1}
        assert session.visited_shapes == {2}
        assert session.remaining_dots == []
        assert session.remaining_shapes == []
        assert not session.has_violation

        finished, result = session.finish()

        assert result is not None
        assert result.is_valid
        assert not finished.is_drawing
        assert finished.violation is None

    def test_red_area_stops_stroke(self):
        session = draw((50, 80), (50, 110))

        assert session.violation == ViolationKind.RED_AREA
        assert session.has_violation

        # Further points are ignored once violated
        assert session.extend(Point(50, 200)) is session

    def test_shape_reentry_stops_stroke(self):
        session = draw((0, 50), (120, 50), (200, 50), (200, 80), (120, 55))

        assert session.violation == ViolationKind.SHAPE_REENTRY

    def test_moving_inside_entered_shape_is_allowed(self):
        session = draw((0, 50), (120, 50), (125, 45))

        assert not session.has_violation
        assert session.visited_shapes == {2}
        assert session.exited_shapes == frozenset()

    def test_leaving_shape_marks_it_exited(self):
        session = draw((0, 50), (120, 50), (200, 50))
        assert session.exited_shapes == {2}

    def test_violation_kept_after_finish(self):
        finished, result = draw((50, 80), (50, 110)).finish()

        assert result is not None
        assert not result.is_valid
        assert finished.violation == ViolationKind.RED_AREA

    def test_finish_reports_missed_elements(self):
        finished, result = draw((0, 200), (100, 200)).finish()

        assert result is not None
        assert not result.is_valid
        assert finished.violation is None
        assert result.missing_dots(finished.puzzle) == [1]
        assert result.missing_shapes(finished.puzzle) == [2]


class TestSessionEvents:
    """Tests for individual session transitions."""

    def test_idle_session(self):
        session = DrawingSession.for_puzzle(make_puzzle())
        assert not session.is_drawing
        assert session.remaining_dots == [1]
        assert session.remaining_shapes == [2]

    def test_extend_without_begin_is_ignored(self):
        session = DrawingSession.for_puzzle(make_puzzle())
        assert session.extend(Point(10, 10)) is session

    def test_filtered_point_returns_same_session(self):
        session = DrawingSession.for_puzzle(make_puzzle()).begin(Point(0, 0))
        assert session.extend(Point(1, 0)) is session

    def test_default_smoothing_applied(self):
        session = DrawingSession.for_puzzle(make_puzzle()).begin(Point(0, 0))
        session = session.extend(Point(10, 0))

        last = session.line.points[-1]
        assert last.x == pytest.approx(7.0)
        assert last.y == pytest.approx(0.0)

    def test_finish_when_idle(self):
        session = DrawingSession.for_puzzle(make_puzzle())
        finished, result = session.finish()
        assert finished is session
        assert result is None

    def test_begin_blocked_by_violation(self):
        session = draw((50, 80), (50, 110))
        assert session.begin(Point(0, 0)) is session

    def test_reset_clears_everything(self):
        session = draw((0, 50), (120, 50), (200, 50), (200, 80), (120, 55))

        fresh = session.reset()

        assert fresh.violation is None
        assert fresh.line.is_empty()
        assert fresh.visited_dots == frozenset()
        assert fresh.visited_shapes == frozenset()
        assert fresh.config == session.config

    def test_begin_clears_previous_stroke(self):
        finished, _ = draw((0, 50), (50, 50), (120, 50)).finish()

        restarted = finished.begin(Point(0, 0))

        assert restarted.is_drawing
        assert restarted.visited_dots == frozenset()
        assert restarted.visited_shapes == frozenset()
        assert len(restarted.line) == 1
