"""Intersection node merger.

Every crossing produced two intersection nodes, one on each operand's
boundary, sharing a pairing id. The merger fuses each pair into a single
node so traversal can switch from one operand's boundary to the other's.
Counterparts are found through a pairing-id map in a single pass.
"""

from dataclasses import dataclass

from pathbool.core.graph import CurveGraph, Merged, Node, NodeKind, Simple


@dataclass
class MergeResult:
    """Outcome of a merge pass.

    Attributes:
        merged: Cross-operand pairs fused into one node
        swapped: Same-operand pairs resolved by swapping outgoing edges
        unpaired: Intersection nodes whose counterpart never appeared
    """

    merged: int = 0
    swapped: int = 0
    unpaired: int = 0


def merge_nodes(graph: CurveGraph) -> MergeResult:
    """Fuse or untangle all paired intersection nodes.

    Unpaired intersection nodes are left alone; they behave like ordinary
    turn points during traversal.

    Args:
        graph: Graph after splitting (classification may run before or after)

    Returns:
        MergeResult with counts
    """
    result = MergeResult()
    pending: dict[int, int] = {}

    for node in list(graph.intersection_nodes()):
        if node.pairing_id is None:
            continue

        pairing_id = graph.canonical_pairing(node.pairing_id)
        other_index = pending.pop(pairing_id, None)
        if other_index is None:
            pending[pairing_id] = node.index
            continue

        other = graph.nodes[other_index]
        if other.operand == node.operand:
            _swap_outgoing(graph, node, other)
            result.swapped += 1
        else:
            _fuse(graph, node, other)
            result.merged += 1

    result.unpaired = len(pending)
    return result


def _swap_outgoing(graph: CurveGraph, node: Node, other: Node) -> None:
    """Untangle a crossing of one operand with itself.

    Swapping the outgoing edges turns one crossing cycle into two
    independent cycles.
    """
    ours = graph.slot_edge(node.outgoing)
    theirs = graph.slot_edge(other.outgoing)

    node.outgoing = Simple(theirs)
    other.outgoing = Simple(ours)
    if theirs is not None:
        graph.edges[theirs].start = node.index
    if ours is not None:
        graph.edges[ours].start = other.index

    for n in (node, other):
        n.kind = NodeKind.ORDINARY
        n.pairing_id = None


def _fuse(graph: CurveGraph, node: Node, other: Node) -> None:
    """Fuse ``other`` into ``node``.

    ``other``'s edges move into ``node``'s shadow slots and their endpoint
    references are redirected; ``other`` becomes inert.
    """
    other_in = graph.slot_edge(other.incoming)
    other_out = graph.slot_edge(other.outgoing)

    node.incoming = Merged(primary=graph.slot_edge(node.incoming), shadow=other_in)
    node.outgoing = Merged(primary=graph.slot_edge(node.outgoing), shadow=other_out)
    node.shadow_operand = other.operand
    node.shadow_is_base = other.is_base
    node.pairing_id = None

    if other_in is not None:
        graph.edges[other_in].end = node.index
    if other_out is not None:
        graph.edges[other_out].start = node.index

    other.incoming = Simple(None)
    other.outgoing = Simple(None)
    other.kind = NodeKind.ORDINARY
    other.pairing_id = None
    other.inert = True
