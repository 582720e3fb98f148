"""Edge classifier.

Decides for every edge whether it belongs to the result boundary by
testing its midpoint against the *other* operand's region and applying
the boolean operator.
"""

from enum import Enum

from pathbool.core.geometry import evaluate_curve
from pathbool.core.graph import OPERAND_A, OPERAND_B, CurveGraph
from pathbool.domain import Region


class BooleanOperator(str, Enum):
    """Boolean operation between two regions."""

    UNION = "union"
    INTERSECTION = "intersection"
    SUBTRACTION = "subtraction"

    def keep(self, operand: int, inside_a: bool, inside_b: bool) -> bool:
        """Decide whether an edge survives.

        Args:
            operand: Operand owning the edge
            inside_a: Edge midpoint lies inside operand A (always False for A's edges)
            inside_b: Edge midpoint lies inside operand B (always False for B's edges)

        Returns:
            True to keep the edge, False to discard it
        """
        if self is BooleanOperator.UNION:
            return not (inside_a or inside_b)
        if self is BooleanOperator.INTERSECTION:
            return inside_a or inside_b
        # A - B, with B already reversed
        if operand == OPERAND_A:
            return not inside_b
        return inside_a


def classify_edge(
    graph: CurveGraph,
    edge_index: int,
    operator: BooleanOperator,
    region_a: Region,
    region_b: Region,
    even_odd: bool = True,
) -> bool:
    """Classify one edge.

    An edge is never tested against its own operand: it lies on that
    boundary, where numerical containment is meaningless.

    Returns:
        True to keep the edge, False to discard it
    """
    edge = graph.edges[edge_index]
    midpoint = evaluate_curve(graph.curve(edge_index), 0.5)

    inside_a = False if edge.operand == OPERAND_A else region_a.contains_point(*midpoint, even_odd=even_odd)
    inside_b = False if edge.operand == OPERAND_B else region_b.contains_point(*midpoint, even_odd=even_odd)

    return operator.keep(edge.operand, inside_a, inside_b)


def classify_edges(
    graph: CurveGraph,
    operator: BooleanOperator,
    region_a: Region,
    region_b: Region,
    even_odd: bool = True,
) -> int:
    """Classify every valid edge and discard the rejected ones.

    Discarded edges stay in the arena with ``valid = False`` and their
    nodes' slots cleared.

    Returns:
        Number of discarded edges
    """
    discarded = 0
    for edge_index in graph.order:
        if not graph.edges[edge_index].valid:
            continue
        if not classify_edge(graph, edge_index, operator, region_a, region_b, even_odd):
            graph.discard_edge(edge_index)
            discarded += 1
    return discarded
