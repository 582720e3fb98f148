"""Contour extractor.

Walks the merged graph and emits one closed contour per cycle of
surviving edges.
"""

from pathbool.core.graph import CurveGraph, Edge
from pathbool.domain import Contour, Point, Segment
from pathbool.exceptions import GraphConsistencyError


def extract_contours(graph: CurveGraph) -> list[Contour]:
    """Extract the closed contours formed by the surviving edges.

    The first walk is seeded from a base-contour edge when one survives,
    so the outer boundary is emitted before holes. Every walk is capped at
    the number of surviving edges.

    Args:
        graph: Classified and merged graph

    Returns:
        Closed contours, possibly none

    Raises:
        GraphConsistencyError: If a walk dead-ends, re-enters a node, does
            not close, or a surviving edge is never visited
    """
    surviving = list(graph.valid_edges())
    limit = len(surviving)
    contours: list[Contour] = []

    while True:
        seed = _find_seed(graph, surviving, prefer_base=not contours)
        if seed is None:
            break
        contours.append(_walk(graph, seed, limit))

    unvisited = [edge.index for edge in surviving if not edge.visited]
    if unvisited:
        raise GraphConsistencyError(
            f"{len(unvisited)} surviving edge(s) never traversed: {unvisited[:10]}"
        )

    return contours


def _find_seed(graph: CurveGraph, surviving: list[Edge], prefer_base: bool) -> Edge | None:
    fallback: Edge | None = None
    for edge in surviving:
        if graph.nodes[edge.start].visited:
            continue
        if not prefer_base or edge.is_base:
            return edge
        if fallback is None:
            fallback = edge
    return fallback


def _walk(graph: CurveGraph, seed: Edge, limit: int) -> Contour:
    start_index = seed.start
    start_uid = graph.nodes[start_index].uid

    segments: list[Segment] = []
    arrived_by: Edge | None = None
    node_index = start_index

    for _ in range(limit):
        node = graph.nodes[node_index]
        graph.incoming_edge(node_index)
        out_index = graph.outgoing_edge(node_index)
        if out_index is None:
            raise GraphConsistencyError(
                f"Walk reached node {node.uid} at {node.point} with no outgoing edge",
                node_id=node.uid,
            )

        out_edge = graph.edges[out_index]
        handle_in = arrived_by.handle_in if arrived_by is not None else (0.0, 0.0)
        segments.append(
            Segment(
                point=Point(*node.point),
                handle_in=Point(*handle_in),
                handle_out=Point(*out_edge.handle_out),
            )
        )
        node.visited = True
        out_edge.visited = True

        arrived_by = out_edge
        node_index = out_edge.end
        next_node = graph.nodes[node_index]

        if next_node.uid == start_uid:
            # The closing edge supplies the first segment's incoming handle
            first = segments[0]
            segments[0] = Segment(first.point, Point(*out_edge.handle_in), first.handle_out)
            return Contour(segments=segments)

        if next_node.visited:
            raise GraphConsistencyError(
                f"Walk re-entered node {next_node.uid} at {next_node.point}",
                node_id=next_node.uid,
            )

    raise GraphConsistencyError(
        f"Walk from node {start_uid} did not close within {limit} edges",
        node_id=start_uid,
    )
