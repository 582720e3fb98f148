"""Geometric primitives consumed by the intersection graph.

This module provides the curve-level collaborators:
- Curve evaluation and subdivision (straight lines stay straight)
- Bounding boxes and box overlap tests
- Flatness testing for recursive subdivision
- Line segment intersection with parameters on both segments
- Bezier flattening and nearest-point / boundary distance queries

Curves are plain (p0, c1, c2, p3) tuples of (x, y) coordinates. A curve
whose control points sit on its endpoints is a straight line and is
parameterised linearly.
"""

import math

from fontTools.misc.bezierTools import calcCubicBounds, cubicPointAtT, splitCubicAtT

from pathbool.core.curves import (
    Coord,
    Curve,
    flatness_deviation,
    flatten_cubic,
    is_straight,
    lerp,
    split_line,
)
from pathbool.domain import Region
from pathbool.exceptions import DegenerateGeometryError

Box = tuple[float, float, float, float]

FLATNESS_TOLERANCE = 1e-5


def _check_finite(operation: str, *coords: Coord) -> None:
    for x, y in coords:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise DegenerateGeometryError(operation, (x, y))


def evaluate_curve(curve: Curve, t: float) -> Coord:
    """Evaluate a curve at parameter t.

    Args:
        curve: Control points (p0, c1, c2, p3)
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve

    Raises:
        DegenerateGeometryError: If the result is not finite
    """
    if is_straight(curve):
        point = lerp(curve[0], curve[3], t)
    else:
        point = tuple(cubicPointAtT(*curve, t))
    _check_finite("evaluate_curve", point)
    return point


def subdivide_curve(curve: Curve, t: float) -> tuple[Curve, Curve]:
    """Split a curve at parameter t.

    Straight curves split into two straight curves; cubic curves use
    De Casteljau subdivision. Both pieces share the split point exactly.

    Args:
        curve: Control points (p0, c1, c2, p3)
        t: Split parameter in (0, 1)

    Returns:
        Tuple of (left, right) curves

    Raises:
        DegenerateGeometryError: If a resulting coordinate is not finite
    """
    if is_straight(curve):
        left, right = split_line(curve, t)
    else:
        left, right = splitCubicAtT(*curve, t)
        # Force an exactly shared split point
        right = (left[3], right[1], right[2], right[3])
    _check_finite("subdivide_curve", *left, *right)
    return left, right


def bounding_box(curve: Curve) -> Box:
    """Calculate the tight bounding box of a curve.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y)
    """
    if is_straight(curve):
        (x0, y0), (x3, y3) = curve[0], curve[3]
        return (min(x0, x3), min(y0, y3), max(x0, x3), max(y0, y3))
    return calcCubicBounds(*curve)


def boxes_overlap(a: Box, b: Box, tolerance: float = 0.0) -> bool:
    """Check whether two boxes touch or overlap, with a margin."""
    return (
        a[0] <= b[2] + tolerance
        and b[0] <= a[2] + tolerance
        and a[1] <= b[3] + tolerance
        and b[1] <= a[3] + tolerance
    )


def is_flat_enough(curve: Curve, tolerance: float = FLATNESS_TOLERANCE) -> bool:
    """Check whether a curve can be treated as its chord.

    A curve is flat when its control points lie within tolerance of the
    chord's 1/3 and 2/3 points, which also makes its parameterisation close
    to uniform. Straight curves are always flat.
    """
    if is_straight(curve):
        return True
    return flatness_deviation(curve) < 10 * tolerance * tolerance


def line_intersection(
    a0: Coord,
    a1: Coord,
    b0: Coord,
    b1: Coord,
    slop_a: float = 1e-9,
    slop_b: float = 1e-9,
) -> tuple[Coord, float, float] | None:
    """Find the intersection of two line segments.

    Uses parametric line equations. Parameters slightly outside [0, 1]
    (within the given slop) are accepted and clamped, so crossings that land
    on a segment end are not lost to rounding.

    Args:
        a0: First endpoint of segment a
        a1: Second endpoint of segment a
        b0: First endpoint of segment b
        b1: Second endpoint of segment b
        slop_a: Parameter slack on segment a
        slop_b: Parameter slack on segment b

    Returns:
        Tuple of (point, t, u) with t on segment a and u on segment b, or
        None if the segments are parallel or do not meet

    Examples:
        >>> line_intersection((0.0, 0.0), (2.0, 2.0), (0.0, 2.0), (2.0, 0.0))
        ((1.0, 1.0), 0.5, 0.5)
    """
    x1, y1 = a0
    x2, y2 = a1
    x3, y3 = b0
    x4, y4 = b1

    dax, day = x2 - x1, y2 - y1
    dbx, dby = x4 - x3, y4 - y3

    denom = dax * dby - day * dbx
    scale = math.hypot(dax, day) * math.hypot(dbx, dby)

    # Parallel, coincident or zero-length
    if scale == 0.0 or abs(denom) <= 1e-12 * scale:
        return None

    t = ((x3 - x1) * dby - (y3 - y1) * dbx) / denom
    u = ((x3 - x1) * day - (y3 - y1) * dax) / denom

    if -slop_a <= t <= 1 + slop_a and -slop_b <= u <= 1 + slop_b:
        t = min(max(t, 0.0), 1.0)
        u = min(max(u, 0.0), 1.0)
        point = (x1 + t * dax, y1 + t * day)
        _check_finite("line_intersection", point)
        return point, t, u

    return None


def bezier_flatten(curve: Curve, tolerance: float = 1e-3) -> list[Coord]:
    """Convert a curve to line segments using recursive subdivision.

    Args:
        curve: Control points (p0, c1, c2, p3)
        tolerance: Maximum distance from true curve

    Returns:
        List of points forming line segments that approximate the curve
    """
    return flatten_cubic(curve, tolerance)


def nearest_point_on_segment(point: Coord, seg_start: Coord, seg_end: Coord) -> tuple[Coord, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps to the segment endpoints.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance)
    """
    dx = seg_end[0] - seg_start[0]
    dy = seg_end[1] - seg_start[1]

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-24:
        return seg_start, math.hypot(point[0] - seg_start[0], point[1] - seg_start[1])

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point[0] - seg_start[0]) * dx + (point[1] - seg_start[1]) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest = (seg_start[0] + t * dx, seg_start[1] + t * dy)
    return nearest, math.hypot(point[0] - nearest[0], point[1] - nearest[1])


def distance_to_boundary(region: Region, point: Coord, tolerance: float = 1e-6) -> float:
    """Find the distance from a point to the nearest boundary curve of a region.

    Curves are flattened first, so the result is accurate to about the
    given tolerance.

    Args:
        region: Region whose boundary is searched
        point: Query point
        tolerance: Flattening tolerance

    Returns:
        Distance to the boundary (infinity for an empty region)
    """
    best = math.inf
    for contour in region.contours:
        for curve in contour.curves():
            flattened = bezier_flatten(curve, tolerance)
            for k in range(len(flattened) - 1):
                _, distance = nearest_point_on_segment(point, flattened[k], flattened[k + 1])
                if distance < best:
                    best = distance
    return best


def contains_point(region: Region, point: Coord, even_odd: bool = True) -> bool:
    """Test whether a point lies inside a region's boundary."""
    return region.contains_point(point[0], point[1], even_odd=even_odd)


def region_area(region: Region) -> float:
    """Signed area of a region (counter-clockwise positive, holes subtract)."""
    return region.area()
