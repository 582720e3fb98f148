"""Boolean operations on regions.

This module runs the full pipeline for one operation:
1. Clone and validate both operands
2. Normalize contour winding (reversing B for subtraction)
3. Build the boundary intersection graph
4. Resolve and split at every crossing
5. Classify edges, merge intersection nodes, extract contours
6. Drop degenerate result contours

Inputs are never modified.
"""

import time

from pathbool.config import BooleanSettings, get_default_settings
from pathbool.core.builder import build_graph
from pathbool.core.classifier import BooleanOperator, classify_edges
from pathbool.core.extractor import extract_contours
from pathbool.core.graph import OPERAND_A, OPERAND_B, CurveGraph
from pathbool.core.merger import merge_nodes
from pathbool.core.orientation import normalize_orientation
from pathbool.core.resolver import resolve_intersections
from pathbool.core.splitter import split_edges
from pathbool.core.validation import check_finite, regions_coincide, validate_operand
from pathbool.domain import Region
from pathbool.exceptions import UnsupportedInputError
from pathbool.utils import OperationLogger, OperationStats, get_logger

logger = get_logger(__name__)


def compute_boolean(
    region_a: Region,
    region_b: Region,
    operator: BooleanOperator,
    settings: BooleanSettings | None = None,
    stats: OperationStats | None = None,
) -> Region:
    """Compute a boolean combination of two regions.

    Args:
        region_a: First operand
        region_b: Second operand (the one removed for subtraction)
        operator: Operation to perform
        settings: Tolerances and validation switches (defaults if None)
        stats: Optional statistics object filled in as the pipeline runs

    Returns:
        Result region; an empty result has no contours

    Raises:
        DegenerateGeometryError: If an input or intermediate coordinate is not finite
        UnsupportedInputError: If an operand crosses itself, or the operands
            coincide while strict coincidence handling is enabled
        GraphConsistencyError: If the result graph cannot be walked into closed contours
    """
    settings = settings or get_default_settings()
    operator = BooleanOperator(operator)
    stats = stats if stats is not None else OperationStats()
    stats.operation = operator.value
    stats.start_time = time.time()
    op_logger = OperationLogger(logger, stats)

    region_a = region_a.copy()
    region_b = region_b.copy()
    check_finite(region_a)
    check_finite(region_b)

    shortcut = _shortcut(region_a, region_b, operator, settings, op_logger)
    if shortcut is not None:
        stats.end_time = time.time()
        op_logger.log_complete(len(shortcut.contours), 0)
        return shortcut

    geometry = settings.geometry
    region_a = normalize_orientation(region_a)
    region_b = normalize_orientation(region_b)
    if operator is BooleanOperator.SUBTRACTION:
        region_b = region_b.reversed()

    graph = CurveGraph()
    edges_a = build_graph(graph, region_a, OPERAND_A)
    edges_b = build_graph(graph, region_b, OPERAND_B)
    op_logger.log_graph_built(len(edges_a), len(edges_b))

    op_logger.log_intersections(resolve_intersections(graph, edges_a, edges_b, geometry))
    op_logger.log_split(split_edges(graph, geometry.parameter_tolerance))

    discarded = classify_edges(
        graph, operator, region_a, region_b, even_odd=settings.containment.even_odd
    )
    op_logger.log_classified(discarded)

    merge = merge_nodes(graph)
    op_logger.log_merged(merge.merged, merge.swapped)
    if merge.unpaired:
        logger.warning("Unpaired intersection nodes", count=merge.unpaired)

    contours = extract_contours(graph)
    kept = [c for c in contours if abs(c.signed_area()) >= geometry.min_contour_area]

    stats.end_time = time.time()
    op_logger.log_complete(len(kept), len(contours) - len(kept))
    return Region(contours=kept)


def _shortcut(
    region_a: Region,
    region_b: Region,
    operator: BooleanOperator,
    settings: BooleanSettings,
    op_logger: OperationLogger,
) -> Region | None:
    """Resolve empty, self-intersecting and coincident operands.

    Returns:
        The result when the graph is not needed, else None
    """
    if region_a.is_empty() or region_b.is_empty():
        op_logger.log_shortcut("empty operand")
        if operator is BooleanOperator.UNION:
            return region_b if region_a.is_empty() else region_a
        if operator is BooleanOperator.INTERSECTION:
            return Region()
        return region_a

    if settings.validation.check_self_intersection:
        validate_operand(region_a, "A", settings.geometry)
        validate_operand(region_b, "B", settings.geometry)

    if settings.validation.check_coincidence and regions_coincide(
        region_a, region_b, settings.geometry.coincidence_tolerance
    ):
        if settings.validation.strict_coincidence:
            raise UnsupportedInputError("operands have coincident boundaries")
        op_logger.log_shortcut("coincident operands")
        if operator is BooleanOperator.SUBTRACTION:
            return Region()
        return region_a

    return None


def union(region_a: Region, region_b: Region, settings: BooleanSettings | None = None) -> Region:
    """Region covered by either operand."""
    return compute_boolean(region_a, region_b, BooleanOperator.UNION, settings)


def intersect(region_a: Region, region_b: Region, settings: BooleanSettings | None = None) -> Region:
    """Region covered by both operands."""
    return compute_boolean(region_a, region_b, BooleanOperator.INTERSECTION, settings)


def subtract(region_a: Region, region_b: Region, settings: BooleanSettings | None = None) -> Region:
    """Region covered by the first operand but not the second."""
    return compute_boolean(region_a, region_b, BooleanOperator.SUBTRACTION, settings)
