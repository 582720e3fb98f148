"""Curve graph builder.

Turns a region into graph edges: one node per boundary vertex, one edge
per boundary curve, each sub-contour closing back to its first node.
"""

from pathbool.core.graph import CurveGraph
from pathbool.domain import Region


def build_graph(graph: CurveGraph, region: Region, operand: int) -> list[int]:
    """Add a region's boundary to the graph.

    Every node and edge is tagged with the operand, the sub-contour index
    and whether that sub-contour is the base one (index 0). New edges are
    appended to ``graph.order``.

    Args:
        graph: Graph to extend
        region: Region to convert (not modified)
        operand: Operand id to tag with

    Returns:
        Indices of the created edges, in boundary order. Empty for a region
        without segments.
    """
    created: list[int] = []

    for contour_index, contour in enumerate(region.contours):
        if not contour.segments:
            continue

        is_base = contour_index == 0
        node_indices = [
            graph.add_node(segment.point.to_tuple(), operand, is_base)
            for segment in contour.segments
        ]

        n = len(contour.segments)
        for i in range(n):
            j = (i + 1) % n
            edge_index = graph.add_edge(
                start=node_indices[i],
                end=node_indices[j],
                handle_out=contour.segments[i].handle_out.to_tuple(),
                handle_in=contour.segments[j].handle_in.to_tuple(),
                operand=operand,
                contour=contour_index,
                is_base=is_base,
            )
            created.append(edge_index)

    graph.order.extend(created)
    return created
