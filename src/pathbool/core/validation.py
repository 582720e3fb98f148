"""Input validation for boolean operations.

Checks run before the graph is built:
- Every coordinate is finite
- No operand boundary crosses itself (including crossings between two
  sub-contours of the same operand)
- Whether the two operands' boundaries coincide
"""

import math

from pathbool.config import GeometryConfig
from pathbool.core.geometry import bounding_box, boxes_overlap, distance_to_boundary, evaluate_curve
from pathbool.core.intersect import CurveIntersection, intersect_curves
from pathbool.domain import Region
from pathbool.exceptions import DegenerateGeometryError, UnsupportedInputError


def check_finite(region: Region) -> None:
    """Ensure every point and handle of a region is finite.

    Raises:
        DegenerateGeometryError: On the first NaN or infinite coordinate
    """
    for contour in region.contours:
        for segment in contour.segments:
            for p in (segment.point, segment.handle_in, segment.handle_out):
                if not (math.isfinite(p.x) and math.isfinite(p.y)):
                    raise DegenerateGeometryError("input region", p.to_tuple())


def find_self_intersection(
    region: Region,
    config: GeometryConfig | None = None,
) -> CurveIntersection | None:
    """Find a crossing between two boundary curves of the same region.

    Joints between consecutive curves are not crossings. A single curve
    looping over itself is not detected.

    Args:
        region: Region to check
        config: Geometry tolerances (defaults if None)

    Returns:
        The first crossing found, or None
    """
    config = config or GeometryConfig()
    curves = [curve for contour in region.contours for curve in contour.curves()]
    boxes = [bounding_box(curve) for curve in curves]

    for i in range(len(curves)):
        for j in range(i + 1, len(curves)):
            if not boxes_overlap(boxes[i], boxes[j], config.flatness_tolerance):
                continue
            for hit in intersect_curves(
                curves[i],
                curves[j],
                tolerance=config.flatness_tolerance,
                parameter_tolerance=config.parameter_tolerance,
                duplicate_tolerance=config.duplicate_tolerance,
                max_depth=config.max_subdivision_depth,
            ):
                return hit
    return None


def validate_operand(region: Region, name: str, config: GeometryConfig | None = None) -> None:
    """Reject a self-intersecting operand.

    Raises:
        UnsupportedInputError: If the operand's boundary crosses itself
    """
    hit = find_self_intersection(region, config)
    if hit is not None:
        x, y = hit.point
        raise UnsupportedInputError(f"operand {name} is self-intersecting near ({x:.6g}, {y:.6g})")


def regions_coincide(a: Region, b: Region, tolerance: float = 1e-6) -> bool:
    """Check whether two regions have the same boundary.

    Every vertex and every curve midpoint of each region must lie within
    tolerance of the other region's boundary.

    Boundaries that only partly overlap along a shared stretch are not
    detected here; such operands are unsupported and typically fail later
    with GraphConsistencyError.

    Args:
        a: First region
        b: Second region
        tolerance: Distance tolerance

    Returns:
        True if the boundaries coincide
    """
    if a.is_empty() or b.is_empty():
        return False

    box_a = a.bounding_box()
    box_b = b.bounding_box()
    if any(abs(p - q) > tolerance for p, q in zip(box_a, box_b)):
        return False

    return _lies_on(a, b, tolerance) and _lies_on(b, a, tolerance)


def _lies_on(region: Region, other: Region, tolerance: float) -> bool:
    for contour in region.contours:
        for curve in contour.curves():
            for sample in (curve[0], evaluate_curve(curve, 0.5)):
                if distance_to_boundary(other, sample, tolerance / 4) > tolerance:
                    return False
    return True
