"""Edge splitter.

Subdivides every edge at its registered crossings so that each crossing
becomes a graph node. An edge is replaced in ``graph.order`` by its pieces,
left to right, so boundary order is preserved.
"""

from operator import attrgetter

from pathbool.core.geometry import subdivide_curve
from pathbool.core.graph import CurveGraph, Edge, NodeKind
from pathbool.utils import get_logger

logger = get_logger(__name__)


def split_edges(graph: CurveGraph, parameter_tolerance: float = 1e-6) -> int:
    """Split all edges at their pending crossings.

    Args:
        graph: Graph whose edges carry intersection records
        parameter_tolerance: Parameter distance treated as coincident

    Returns:
        Number of edges in boundary order after splitting
    """
    new_order: list[int] = []
    for edge_index in graph.order:
        edge = graph.edges[edge_index]
        if edge.intersections:
            new_order.extend(_split_edge(graph, edge, parameter_tolerance))
        else:
            new_order.append(edge_index)

    graph.order = new_order
    return len(new_order)


def _split_edge(graph: CurveGraph, edge: Edge, tolerance: float) -> list[int]:
    """Split one edge; the edge itself is kept as the rightmost piece.

    Returns:
        Indices of the pieces, left to right
    """
    # Stable sort: equal parameters keep discovery order
    records = sorted(edge.intersections, key=attrgetter("parameter"))
    edge.intersections = []

    pieces: list[int] = []
    consumed = 0.0
    last_split: int | None = None
    last_parameter: float | None = None

    for record in records:
        t = record.parameter

        if t <= tolerance:
            graph.mark_intersection(edge.start, record.pairing_id)
            continue
        if t >= 1.0 - tolerance:
            graph.mark_intersection(edge.end, record.pairing_id)
            continue
        if last_parameter is not None and t - last_parameter <= tolerance:
            # Same position as the previous split: no zero-length edge
            graph.mark_intersection(last_split, record.pairing_id)
            logger.debug("Coincident crossings on edge", edge=edge.index, parameter=t)
            continue

        local = (t - consumed) / (1.0 - consumed)
        left, right = subdivide_curve(graph.curve(edge.index), local)

        start_point = graph.nodes[edge.start].point
        end_point = graph.nodes[edge.end].point
        split_point = left[3]

        node = graph.add_node(
            split_point,
            edge.operand,
            edge.is_base,
            kind=NodeKind.INTERSECTION,
            pairing_id=record.pairing_id,
        )
        left_index = graph.add_edge(
            start=edge.start,
            end=node,
            handle_out=_offset(left[1], start_point),
            handle_in=_offset(left[2], split_point),
            operand=edge.operand,
            contour=edge.contour,
            is_base=edge.is_base,
        )

        # The remaining tail is the right piece
        graph.set_start(edge.index, node)
        edge.handle_out = _offset(right[1], split_point)
        edge.handle_in = _offset(right[2], end_point)

        pieces.append(left_index)
        consumed = t
        last_split = node
        last_parameter = t

    pieces.append(edge.index)
    return pieces


def _offset(point: tuple[float, float], origin: tuple[float, float]) -> tuple[float, float]:
    return (point[0] - origin[0], point[1] - origin[1])
