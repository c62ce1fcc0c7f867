"""Core algorithms for oneline.

This module contains the core algorithms for:

- Geometry primitives (distance, segment intersection, point-in-polygon)
- Collision detection between segments and board elements
- The sampled path model
- Rule validation, both for complete lines and per segment
- Reference solution replay and the regression gate
- Per-stroke drawing sessions

All functions are pure: they never mutate their inputs and hold no state
between calls.

Key functions:
- validate: Full validation of a line against a puzzle
- check_incremental: Violation check for a single new segment
- elements_in_solution_order: First-touch order of a reference solution
- run_regression: Validate every puzzle's reference solution

Key classes:
- Line: Sampled path of a stroke
- ValidationResult: Snapshot of one validation
- DrawingSession: Immutable per-stroke state
"""

from oneline.core.collision import (
    count_shape_crossings,
    is_point_in_dot,
    is_point_in_red_area,
    is_point_in_shape,
    segment_crosses_polygon,
    segment_crosses_red_area,
    segment_enters_shape,
    segment_touches_dot,
)
from oneline.core.geometry import (
    bounding_box,
    distance,
    is_point_in_polygon,
    point_to_segment_distance,
    polygon_edges,
    segments_intersect,
)
from oneline.core.path import (
    Line,
    Segment,
    add_point,
    create_line,
    end_line,
    last_segment,
    line_from_points,
    reset_line,
    segments,
    start_line,
)
from oneline.core.regression import RegressionEntry, RegressionReport, run_regression
from oneline.core.rules import (
    NO_VIOLATION,
    IncrementalCheck,
    ValidationResult,
    ViolationKind,
    check_incremental,
    newly_entered_shapes,
    newly_touched_dots,
    validate,
)
from oneline.core.session import DrawingSession
from oneline.core.solution import (
    SolutionCheck,
    elements_in_solution_order,
    validate_solution_path,
)

__all__ = [
    # Rules
    "NO_VIOLATION",
    # Session
    "DrawingSession",
    "IncrementalCheck",
    # Path
    "Line",
    # Regression
    "RegressionEntry",
    "RegressionReport",
    "Segment",
    # Solution
    "SolutionCheck",
    "ValidationResult",
    "ViolationKind",
    "add_point",
    # Geometry functions
    "bounding_box",
    "check_incremental",
    # Collision functions
    "count_shape_crossings",
    "create_line",
    "distance",
    "elements_in_solution_order",
    "end_line",
    "is_point_in_dot",
    "is_point_in_polygon",
    "is_point_in_red_area",
    "is_point_in_shape",
    "last_segment",
    "line_from_points",
    "newly_entered_shapes",
    "newly_touched_dots",
    "point_to_segment_distance",
    "polygon_edges",
    "reset_line",
    "run_regression",
    "segment_crosses_polygon",
    "segment_crosses_red_area",
    "segment_enters_shape",
    "segment_touches_dot",
    "segments",
    "segments_intersect",
    "start_line",
    "validate",
    "validate_solution_path",
]
