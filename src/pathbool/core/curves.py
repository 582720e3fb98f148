"""Bezier curve helpers shared by the geometry layer.

Straight-line special cases and the recursive flattener. Curves are plain
(p0, c1, c2, p3) tuples; a curve whose control points sit on its endpoints
is a straight line.
"""

from fontTools.misc.bezierTools import splitCubicAtT

Coord = tuple[float, float]
Curve = tuple[Coord, Coord, Coord, Coord]


def lerp(p: Coord, q: Coord, t: float) -> Coord:
    """Linear interpolation between two coordinates."""
    return (p[0] + (q[0] - p[0]) * t, p[1] + (q[1] - p[1]) * t)


def is_straight(curve: Curve) -> bool:
    """Check whether a curve is a straight line (both handles at the endpoints)."""
    p0, c1, c2, p3 = curve
    return c1 == p0 and c2 == p3


def split_line(curve: Curve, t: float) -> tuple[Curve, Curve]:
    """Split a straight curve, keeping both halves straight.

    Straight curves are parameterised linearly, so the split point is the
    plain interpolation between the endpoints.
    """
    p0, _, _, p3 = curve
    mid = lerp(p0, p3, t)
    return (p0, p0, mid, mid), (mid, mid, p3, p3)


def flatness_deviation(curve: Curve) -> float:
    """Squared deviation of the control points from the chord's thirds.

    Zero means the curve is a uniformly parameterised straight line. Used
    by the flatness test, scaled against the squared tolerance.
    """
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = curve
    ux = 3 * x1 - 2 * x0 - x3
    uy = 3 * y1 - 2 * y0 - y3
    vx = 3 * x2 - 2 * x3 - x0
    vy = 3 * y2 - 2 * y3 - y0
    return max(ux * ux, vx * vx) + max(uy * uy, vy * vy)


def flatten_cubic(curve: Curve, tolerance: float, depth: int = 24) -> list[Coord]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Args:
        curve: Control points (p0, c1, c2, p3)
        tolerance: Maximum distance from true curve
        depth: Remaining recursion depth

    Returns:
        List of points approximating the curve, both endpoints included
    """
    if is_straight(curve):
        return [curve[0], curve[3]]

    if depth <= 0 or flatness_deviation(curve) <= 16 * tolerance * tolerance:
        return [curve[0], curve[3]]

    left, right = splitCubicAtT(*curve, 0.5)
    left_points = flatten_cubic(left, tolerance, depth - 1)
    right_points = flatten_cubic(right, tolerance, depth - 1)

    # Combine, avoiding duplicate midpoint
    return left_points[:-1] + right_points
