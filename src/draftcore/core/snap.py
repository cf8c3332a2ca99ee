"""Snap engine.

Given a cursor position in document space, the engine collects every snap
candidate within the snap radius and ranks them: first by snap kind priority
(explicit anchors such as endpoints and intersections beat interpolated ones
such as the grid or the nearest point), then by distance to the cursor.

The snap radius is configured in screen units and divided by the view scale.
"""

import itertools

import structlog

from draftcore.config.settings import SnapSettings
from draftcore.core.geometry import (
    projection_parameter,
    snap_to_grid,
    tangent_points,
)
from draftcore.core.hit_test import distance_to_entity, nearest_point
from draftcore.core.intersection import find_intersections
from draftcore.core.points import classified_points
from draftcore.domain import Arc, Circle, Document, Line, Point, SnapKind, SnapResult
from draftcore.domain.angles import angle_of, is_angle_in_sweep

logger = structlog.get_logger(__name__)

LABELS: dict[SnapKind, str] = {
    SnapKind.GRID: "Grid",
    SnapKind.ENDPOINT: "Endpoint",
    SnapKind.MIDPOINT: "Midpoint",
    SnapKind.CENTER: "Center",
    SnapKind.QUADRANT: "Quadrant",
    SnapKind.INTERSECTION: "Intersection",
    SnapKind.PERPENDICULAR: "Perpendicular",
    SnapKind.TANGENT: "Tangent",
    SnapKind.NEAREST: "Nearest",
}


def perpendicular_point(point: Point, line: Line) -> Point:
    """Foot of the perpendicular from ``point`` onto a line.

    Projections falling outside the segment are clamped to the nearer
    endpoint; a degenerate line returns its start.
    """
    if line.start.distance_squared_to(line.end) < 1e-10:
        return line.start
    t = projection_parameter(point, line.start, line.end)
    if 0.0 <= t <= 1.0:
        return line.start + (line.end - line.start) * t
    if point.distance_squared_to(line.start) < point.distance_squared_to(line.end):
        return line.start
    return line.end


class SnapEngine:
    """Finds and ranks snap targets around a cursor.

    Example:
        >>> engine = SnapEngine(SnapSettings(), scale=2.0)
        >>> best = engine.snap(Point(9.7, 0.2), document)
    """

    def __init__(self, settings: SnapSettings | None = None, scale: float = 1.0) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.settings = settings or SnapSettings()
        self.scale = scale

    @property
    def tolerance(self) -> float:
        """Snap radius in document units."""
        return self.settings.snap_distance / self.scale

    def _enabled(self, kind: SnapKind) -> bool:
        return self.settings.is_kind_enabled(kind)

    def find_snap_points(self, cursor: Point, document: Document) -> list[SnapResult]:
        """Collect every snap candidate within the snap radius.

        Args:
            cursor: Cursor position in document space
            document: Document whose visible entities are considered

        Returns:
            Unranked candidates; empty when snapping is disabled
        """
        if not self.settings.enabled:
            return []

        tolerance = self.tolerance
        entities = document.visible_entities
        results: list[SnapResult] = []

        def add(position: Point, kind: SnapKind, label: str, source: str | None) -> None:
            if position.distance_to(cursor) <= tolerance:
                results.append(SnapResult(position, kind, label, source))

        if self._enabled(SnapKind.GRID) and document.snap_to_grid:
            add(snap_to_grid(cursor, document.grid_size), SnapKind.GRID, LABELS[SnapKind.GRID], None)

        for entity in entities:
            if distance_to_entity(entity, cursor) > 2 * tolerance:
                continue

            for cp in classified_points(entity):
                if cp.kind is not None and self._enabled(cp.kind):
                    add(cp.point, cp.kind, cp.label, entity.id)

            if self._enabled(SnapKind.PERPENDICULAR) and isinstance(entity, Line):
                add(
                    perpendicular_point(cursor, entity),
                    SnapKind.PERPENDICULAR,
                    LABELS[SnapKind.PERPENDICULAR],
                    entity.id,
                )

            if self._enabled(SnapKind.TANGENT) and isinstance(entity, Circle | Arc):
                for point in self._tangents(cursor, entity):
                    add(point, SnapKind.TANGENT, LABELS[SnapKind.TANGENT], entity.id)

            if self._enabled(SnapKind.NEAREST):
                closest = nearest_point(entity, cursor)
                if closest is not None:
                    add(closest, SnapKind.NEAREST, LABELS[SnapKind.NEAREST], entity.id)

        if self._enabled(SnapKind.INTERSECTION):
            for first, second in itertools.combinations(entities, 2):
                for point in find_intersections(first, second):
                    add(point, SnapKind.INTERSECTION, LABELS[SnapKind.INTERSECTION], None)

        logger.debug("Snap candidates", cursor=cursor.to_tuple(), count=len(results))
        return results

    @staticmethod
    def _tangents(cursor: Point, entity: Circle | Arc) -> list[Point]:
        points = tangent_points(cursor, entity.center, entity.radius)
        if isinstance(entity, Arc):
            points = [
                p
                for p in points
                if is_angle_in_sweep(angle_of(entity.center, p), entity.start_angle, entity.end_angle)
            ]
        return points

    @staticmethod
    def find_best_snap_point(results: list[SnapResult], cursor: Point) -> SnapResult | None:
        """Pick the highest-priority candidate, nearest the cursor among equals.

        The input list is not modified.
        """
        if not results:
            return None
        return min(results, key=lambda r: (-r.priority, r.distance_to(cursor)))

    def snap(self, cursor: Point, document: Document) -> SnapResult | None:
        """Find the best snap target for a cursor, or None."""
        best = self.find_best_snap_point(self.find_snap_points(cursor, document), cursor)
        if best is not None:
            logger.debug("Snapped", kind=best.kind.value, position=best.position.to_tuple())
        return best
