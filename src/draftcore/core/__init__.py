"""Core editing algorithms for draftcore.

This module contains the algorithms for:

- Geometry helpers (projections, nearest points, tangents, grid rounding)
- Hit testing and characteristic points
- Intersections between entities
- Extend and trim against a boundary
- Snapping with priority ranking
- Move, rotate, scale, mirror and offset copies

All functions are:
- Pure (no side effects, inputs are never modified)
- Synchronous and deterministic
- Total over degenerate geometry (empty results instead of errors)

Key functions:
- find_intersections: Intersection points of two entities
- extend: Grow a line or arc to a boundary
- trim: Cut an entity at its intersections with a cutter
- hit_test: Pointer pick test against an entity boundary

Key classes:
- SnapEngine: Finds and ranks snap targets around a cursor
"""

from draftcore.core.extend import extend, extend_arc, extend_line
from draftcore.core.geometry import (
    is_point_on_arc,
    is_point_on_segment,
    nearest_point_on_segment,
    snap_to_grid,
    tangent_points,
)
from draftcore.core.hit_test import distance_to_entity, hit_test, nearest_point
from draftcore.core.intersection import (
    circle_circle_intersection,
    find_intersections,
    line_circle_intersection,
    line_line_intersection,
    line_rectangle_intersection,
    segment_circle_intersection,
    segment_segment_intersection,
)
from draftcore.core.points import characteristic_points, classified_points
from draftcore.core.snap import SnapEngine, perpendicular_point
from draftcore.core.transform import mirror, offset_copy, rotate, scale, translate
from draftcore.core.trim import trim, trim_circle, trim_line

__all__ = [
    # Snap engine
    "SnapEngine",
    "characteristic_points",
    "circle_circle_intersection",
    "classified_points",
    "distance_to_entity",
    # Editing operations
    "extend",
    "extend_arc",
    "extend_line",
    # Intersections
    "find_intersections",
    "hit_test",
    "is_point_on_arc",
    "is_point_on_segment",
    "line_circle_intersection",
    "line_line_intersection",
    "line_rectangle_intersection",
    "mirror",
    "nearest_point",
    "nearest_point_on_segment",
    "offset_copy",
    "perpendicular_point",
    "rotate",
    "scale",
    "segment_circle_intersection",
    "segment_segment_intersection",
    "snap_to_grid",
    "tangent_points",
    "translate",
    "trim",
    "trim_circle",
    "trim_line",
]
