"""Internal spline flattening algorithms.

This is an internal module containing helper functions for spline sampling
used by hit testing and nearest-point snapping. Not intended for public use.
"""

from draftcore.domain import Point, Spline, SplineKind

MAX_SUBDIVISION_DEPTH = 16


def _mid(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2 = points

    # Curve midpoint (t=0.5) against the chord midpoint
    curve_mid = Point(0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x, 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y)
    chord_mid = _mid(p0, p2)

    if depth >= MAX_SUBDIVISION_DEPTH or curve_mid.distance_to(chord_mid) <= tolerance:
        return [p0, p2]

    q1 = _mid(p0, p1)
    r1 = _mid(p1, p2)

    left = flatten_quadratic([p0, q1, curve_mid], tolerance, depth + 1)
    right = flatten_quadratic([curve_mid, r1, p2], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2, p3 = points

    # Flatness: both handles close to the chord
    chord = p3 - p0
    chord_length = chord.length
    if chord_length < 1e-12:
        deviation = max(p1.distance_to(p0), p2.distance_to(p0))
    else:
        deviation = max(abs(chord.cross(p1 - p0)), abs(chord.cross(p2 - p0))) / chord_length

    if depth >= MAX_SUBDIVISION_DEPTH or deviation <= tolerance:
        return [p0, p3]

    # First level
    q0 = _mid(p0, p1)
    q1 = _mid(p1, p2)
    q2 = _mid(p2, p3)
    # Second level
    r0 = _mid(q0, q1)
    r1 = _mid(q1, q2)
    # Third level (curve midpoint)
    mid = _mid(r0, r1)

    left = flatten_cubic([p0, q0, r0, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r1, q2, p3], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def catmull_rom_segments(points: tuple[Point, ...], tension: float) -> list[list[Point]]:
    """Convert a Catmull-Rom chain into cubic Bezier segments.

    The first and last points are duplicated as phantom neighbours so the
    curve passes through every point.
    """
    segments = []
    n = len(points)
    for i in range(n - 1):
        p0 = points[i - 1] if i > 0 else points[i]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 2] if i < n - 2 else points[i + 1]
        c1 = p1 + (p2 - p0) * (tension / 6)
        c2 = p2 - (p3 - p1) * (tension / 6)
        segments.append([p1, c1, c2, p2])
    return segments


def bezier_segments(points: tuple[Point, ...]) -> list[list[Point]]:
    """Split a Bezier control polygon into drawable segments.

    Points are read as anchor, handle, handle, anchor, ... Trailing points
    that cannot form a cubic make a quadratic, then a straight line.
    """
    segments = []
    n = len(points)
    i = 0
    while i < n - 1:
        if i + 3 < n:
            segments.append(list(points[i : i + 4]))
            i += 3
        elif i + 2 < n:
            segments.append(list(points[i : i + 3]))
            i += 2
        else:
            segments.append([points[i], points[i + 1]])
            i += 1
    return segments


def flatten_spline(spline: Spline, tolerance: float = 0.25) -> list[Point]:
    """Sample a spline into a polyline.

    Args:
        spline: Spline to flatten
        tolerance: Maximum distance from the true curve

    Returns:
        Points along the curve, starting and ending at the curve endpoints
    """
    if spline.kind is SplineKind.CATMULL_ROM and len(spline.control_points) >= 3:
        segments = catmull_rom_segments(spline.control_points, spline.tension)
    elif spline.kind is SplineKind.CATMULL_ROM:
        segments = [list(spline.control_points)]
    else:
        segments = bezier_segments(spline.control_points)

    tolerance = max(tolerance, 1e-6)
    result: list[Point] = [segments[0][0]]
    for segment in segments:
        if len(segment) == 4:
            flattened = flatten_cubic(segment, tolerance)
        elif len(segment) == 3:
            flattened = flatten_quadratic(segment, tolerance)
        else:
            flattened = segment
        result.extend(flattened[1:])
    return result

