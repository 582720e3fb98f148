"""Curve/curve intersection locator.

Finds the crossings of two curves by recursive subdivision: pieces whose
bounding boxes do not touch are rejected, pieces that are flat enough are
intersected as their chords, and everything else is halved and retried.

Solutions at the *start* of either curve are suppressed. Where two
consecutive boundary curves join, a crossing at the joint is therefore
reported once, by the curve that ends there.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from pathbool.core.curves import Coord, Curve
from pathbool.core.geometry import (
    FLATNESS_TOLERANCE,
    bounding_box,
    boxes_overlap,
    is_flat_enough,
    line_intersection,
    subdivide_curve,
)


@dataclass(frozen=True, slots=True)
class CurveIntersection:
    """One crossing between two curves.

    Attributes:
        point: Position of the crossing
        parameter_a: Parameter of the crossing on the first curve
        parameter_b: Parameter of the crossing on the second curve
    """

    point: Coord
    parameter_a: float
    parameter_b: float


def intersect_curves(
    curve_a: Curve,
    curve_b: Curve,
    tolerance: float = FLATNESS_TOLERANCE,
    parameter_tolerance: float = 1e-6,
    duplicate_tolerance: float = 1e-4,
    max_depth: int = 48,
) -> Iterator[CurveIntersection]:
    """Lazily find the crossings of two curves.

    Every call returns a fresh generator, so results can be re-requested.

    Args:
        curve_a: Control points of the first curve
        curve_b: Control points of the second curve
        tolerance: Flatness tolerance for subdivision
        parameter_tolerance: Parameters at or below this count as a curve start
        duplicate_tolerance: Solutions closer than this in both parameters are
            the same crossing reported by neighbouring subdivision pieces
        max_depth: Recursion cap; pieces at the cap are treated as flat

    Yields:
        CurveIntersection for each distinct crossing, in discovery order
    """
    found: list[CurveIntersection] = []
    for hit in _intersect(curve_a, 0.0, 1.0, curve_b, 0.0, 1.0, tolerance, max_depth):
        if hit.parameter_a <= parameter_tolerance or hit.parameter_b <= parameter_tolerance:
            continue
        if any(
            abs(hit.parameter_a - seen.parameter_a) <= duplicate_tolerance
            and abs(hit.parameter_b - seen.parameter_b) <= duplicate_tolerance
            for seen in found
        ):
            continue
        found.append(hit)
        yield hit


def _chord_slop(curve: Curve, tolerance: float) -> float:
    """Parameter slack along a piece's chord worth `tolerance` in distance."""
    (x0, y0), (x3, y3) = curve[0], curve[3]
    length = math.hypot(x3 - x0, y3 - y0)
    if length == 0.0:
        return 0.0
    return tolerance / length


def _halves(curve: Curve, t0: float, t1: float) -> list[tuple[Curve, float, float]]:
    left, right = subdivide_curve(curve, 0.5)
    mid = (t0 + t1) / 2
    return [(left, t0, mid), (right, mid, t1)]


def _intersect(
    a: Curve,
    a0: float,
    a1: float,
    b: Curve,
    b0: float,
    b1: float,
    tolerance: float,
    depth: int,
) -> Iterator[CurveIntersection]:
    if not boxes_overlap(bounding_box(a), bounding_box(b), tolerance):
        return

    flat_a = is_flat_enough(a, tolerance)
    flat_b = is_flat_enough(b, tolerance)

    if (flat_a and flat_b) or depth <= 0:
        hit = line_intersection(
            a[0], a[3], b[0], b[3],
            slop_a=_chord_slop(a, tolerance),
            slop_b=_chord_slop(b, tolerance),
        )
        if hit is not None:
            point, t, u = hit
            yield CurveIntersection(point, a0 + t * (a1 - a0), b0 + u * (b1 - b0))
        return

    pieces_a = [(a, a0, a1)] if flat_a else _halves(a, a0, a1)
    pieces_b = [(b, b0, b1)] if flat_b else _halves(b, b0, b1)
    for piece_a, pa0, pa1 in pieces_a:
        for piece_b, pb0, pb1 in pieces_b:
            yield from _intersect(piece_a, pa0, pa1, piece_b, pb0, pb1, tolerance, depth - 1)
