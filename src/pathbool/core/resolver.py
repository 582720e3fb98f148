"""Intersection resolver.

Registers every crossing between the two operands' boundaries on both
edges involved, with a pairing id shared by the two records.
"""

from pathbool.config import GeometryConfig
from pathbool.core.geometry import bounding_box, boxes_overlap
from pathbool.core.graph import CurveGraph, IntersectionRecord
from pathbool.core.intersect import intersect_curves


def resolve_intersections(
    graph: CurveGraph,
    edges_a: list[int],
    edges_b: list[int],
    config: GeometryConfig | None = None,
) -> int:
    """Find and register all crossings between two edge sets.

    Edges of the same operand are never tested against each other.

    Args:
        graph: Graph holding both edge sets
        edges_a: Edge indices of the first operand
        edges_b: Edge indices of the second operand
        config: Geometry tolerances (defaults if None)

    Returns:
        Number of crossings registered
    """
    config = config or GeometryConfig()
    count = 0

    curves_b = [(index, graph.curve(index)) for index in edges_b]
    boxes_b = [bounding_box(curve) for _, curve in curves_b]

    for index_a in edges_a:
        edge_a = graph.edges[index_a]
        curve_a = graph.curve(index_a)
        box_a = bounding_box(curve_a)

        for (index_b, curve_b), box_b in zip(curves_b, boxes_b):
            edge_b = graph.edges[index_b]
            if edge_a.operand == edge_b.operand:
                continue
            if not boxes_overlap(box_a, box_b, config.flatness_tolerance):
                continue

            for hit in intersect_curves(
                curve_a,
                curve_b,
                tolerance=config.flatness_tolerance,
                parameter_tolerance=config.parameter_tolerance,
                duplicate_tolerance=config.duplicate_tolerance,
                max_depth=config.max_subdivision_depth,
            ):
                pairing_id = graph.ids.pairing_id()
                edge_a.intersections.append(
                    IntersectionRecord(hit.point, hit.parameter_a, pairing_id)
                )
                edge_b.intersections.append(
                    IntersectionRecord(hit.point, hit.parameter_b, pairing_id)
                )
                count += 1

    return count
