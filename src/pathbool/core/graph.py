"""Boundary intersection graph.

The graph is an arena: nodes and edges live in lists and refer to each
other by index. A node is a boundary point, an edge is one boundary curve
between two nodes. Connectivity is kept mutually consistent: an edge's
``start`` is node ``n`` exactly when ``n``'s outgoing slot references that
edge (and the same for ``end`` / incoming).

A node's slots are ``Simple`` until the node merger fuses two intersection
nodes; the survivor then holds ``Merged`` slots (its own edge as primary,
the fused node's edge as shadow). A merged slot is resolved to a single
effective edge the first time traversal asks for it and stays frozen.

Identifiers come from a per-graph ``IdAllocator``; nothing is shared
between graphs, so independent operations can run concurrently.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

from pathbool.core.curves import Coord, Curve
from pathbool.exceptions import GraphConsistencyError

OPERAND_A = 1
OPERAND_B = 2


class NodeKind(Enum):
    """Node kind.

    - ORDINARY: An original boundary vertex
    - INTERSECTION: A crossing with the other operand's boundary
    """

    ORDINARY = auto()
    INTERSECTION = auto()


@dataclass(slots=True)
class Simple:
    """A connectivity slot holding at most one edge."""

    edge: int | None = None


@dataclass(slots=True)
class Merged:
    """A connectivity slot of a fused node, not yet resolved."""

    primary: int | None
    shadow: int | None


Connectivity = Simple | Merged


class IdAllocator:
    """Monotonic id counters owned by one graph."""

    def __init__(self) -> None:
        self._node = 0
        self._pairing = 0

    def node_id(self) -> int:
        """Allocate a fresh node id."""
        self._node += 1
        return self._node

    def pairing_id(self) -> int:
        """Allocate a fresh intersection pairing id."""
        self._pairing += 1
        return self._pairing


@dataclass(frozen=True, slots=True)
class IntersectionRecord:
    """A pending crossing registered on an edge before splitting.

    Attributes:
        point: Position of the crossing
        parameter: Curve parameter of the crossing on the edge
        pairing_id: Id shared with the record on the other operand's edge
    """

    point: Coord
    parameter: float
    pairing_id: int


@dataclass(slots=True)
class Node:
    """A boundary point of the graph.

    Attributes:
        index: Position in the graph's node arena
        uid: Unique id used for identity checks during traversal
        point: Position
        operand: Owning operand (OPERAND_A or OPERAND_B)
        is_base: True if the node lies on its operand's base contour
        kind: Ordinary vertex or intersection
        pairing_id: Pairing id of an intersection node
        visited: Traversal bookkeeping
        inert: True once the node has been fused into another one
        incoming: Incoming connectivity slot
        outgoing: Outgoing connectivity slot
        shadow_operand: Operand of the node fused into this one
        shadow_is_base: Base flag of the node fused into this one
    """

    index: int
    uid: int
    point: Coord
    operand: int
    is_base: bool
    kind: NodeKind = NodeKind.ORDINARY
    pairing_id: int | None = None
    visited: bool = False
    inert: bool = False
    incoming: Connectivity = field(default_factory=Simple)
    outgoing: Connectivity = field(default_factory=Simple)
    shadow_operand: int | None = None
    shadow_is_base: bool = False


@dataclass(slots=True)
class Edge:
    """One boundary curve between two nodes.

    Handles are stored on the edge: ``handle_out`` is the first control
    point relative to the start node, ``handle_in`` the second control
    point relative to the end node.

    Attributes:
        index: Position in the graph's edge arena
        start: Start node index
        end: End node index
        handle_out: Offset of the first control point from the start node
        handle_in: Offset of the second control point from the end node
        operand: Owning operand
        contour: Index of the owning sub-contour within its operand
        is_base: True if the edge lies on its operand's base contour
        intersections: Crossings registered before splitting
        valid: False once the classifier discards the edge
        visited: Traversal bookkeeping
    """

    index: int
    start: int
    end: int
    handle_out: Coord
    handle_in: Coord
    operand: int
    contour: int
    is_base: bool
    intersections: list[IntersectionRecord] = field(default_factory=list)
    valid: bool = True
    visited: bool = False

    def is_straight(self) -> bool:
        """Check whether the edge is a straight line."""
        return self.handle_out == (0.0, 0.0) and self.handle_in == (0.0, 0.0)


class CurveGraph:
    """Arena of nodes and edges for one boolean operation.

    Attributes:
        ids: Id counters for this graph
        nodes: Node arena
        edges: Edge arena
        order: Edge indices in boundary order; traversal seeds are taken
            from this sequence
    """

    def __init__(self, ids: IdAllocator | None = None) -> None:
        self.ids = ids or IdAllocator()
        self.nodes: list[Node] = []
        self.edges: list[Edge] = []
        self.order: list[int] = []
        self._aliases: dict[int, int] = {}

    def add_node(
        self,
        point: Coord,
        operand: int,
        is_base: bool,
        kind: NodeKind = NodeKind.ORDINARY,
        pairing_id: int | None = None,
    ) -> int:
        """Create a node and return its index."""
        index = len(self.nodes)
        self.nodes.append(
            Node(
                index=index,
                uid=self.ids.node_id(),
                point=point,
                operand=operand,
                is_base=is_base,
                kind=kind,
                pairing_id=pairing_id,
            )
        )
        return index

    def add_edge(
        self,
        start: int,
        end: int,
        handle_out: Coord,
        handle_in: Coord,
        operand: int,
        contour: int,
        is_base: bool,
    ) -> int:
        """Create an edge between two nodes and link both nodes to it.

        The edge is not added to ``order``; callers place it.

        Returns:
            Index of the new edge
        """
        index = len(self.edges)
        self.edges.append(
            Edge(
                index=index,
                start=start,
                end=end,
                handle_out=handle_out,
                handle_in=handle_in,
                operand=operand,
                contour=contour,
                is_base=is_base,
            )
        )
        self.nodes[start].outgoing = Simple(index)
        self.nodes[end].incoming = Simple(index)
        return index

    def set_start(self, edge_index: int, node_index: int) -> None:
        """Re-attach an edge's start to another node."""
        self.edges[edge_index].start = node_index
        self.nodes[node_index].outgoing = Simple(edge_index)

    def curve(self, edge_index: int) -> Curve:
        """Get the control points of an edge."""
        edge = self.edges[edge_index]
        p0 = self.nodes[edge.start].point
        p3 = self.nodes[edge.end].point
        return (
            p0,
            (p0[0] + edge.handle_out[0], p0[1] + edge.handle_out[1]),
            (p3[0] + edge.handle_in[0], p3[1] + edge.handle_in[1]),
            p3,
        )

    def edges_of(self, operand: int) -> list[int]:
        """Get the edge indices of one operand, in boundary order."""
        return [i for i in self.order if self.edges[i].operand == operand]

    def valid_edges(self) -> Iterator[Edge]:
        """Iterate over edges that survived classification, in boundary order."""
        for i in self.order:
            if self.edges[i].valid:
                yield self.edges[i]

    def intersection_nodes(self) -> Iterator[Node]:
        """Iterate over live intersection nodes."""
        for node in self.nodes:
            if node.kind is NodeKind.INTERSECTION and not node.inert:
                yield node

    # Pairing ids

    def canonical_pairing(self, pairing_id: int) -> int:
        """Follow aliases to the representative of a pairing id."""
        while pairing_id in self._aliases:
            pairing_id = self._aliases[pairing_id]
        return pairing_id

    def alias_pairing(self, pairing_id: int, target: int) -> None:
        """Declare that two pairing ids denote the same crossing."""
        source = self.canonical_pairing(pairing_id)
        target = self.canonical_pairing(target)
        if source != target:
            self._aliases[source] = target

    def mark_intersection(self, node_index: int, pairing_id: int) -> None:
        """Turn an existing node into an intersection node.

        A node that already carries a pairing id keeps it and the new id is
        aliased to it, so both crossings' counterparts still find this node.
        """
        node = self.nodes[node_index]
        node.kind = NodeKind.INTERSECTION
        if node.pairing_id is None:
            node.pairing_id = pairing_id
        else:
            self.alias_pairing(pairing_id, node.pairing_id)

    # Connectivity

    def discard_edge(self, edge_index: int) -> None:
        """Invalidate an edge and clear the node slots that reference it.

        The edge stays in the arena; only traversal stops seeing it.
        """
        edge = self.edges[edge_index]
        edge.valid = False
        start = self.nodes[edge.start]
        end = self.nodes[edge.end]
        start.outgoing = _without(start.outgoing, edge_index)
        end.incoming = _without(end.incoming, edge_index)

    def slot_edge(self, slot: Connectivity) -> int | None:
        """Get the edge of an unmerged slot, treating invalid edges as absent."""
        if isinstance(slot, Merged):
            raise GraphConsistencyError("Slot is already merged")
        if slot.edge is None or not self.edges[slot.edge].valid:
            return None
        return slot.edge

    def outgoing_edge(self, node_index: int) -> int | None:
        """Get a node's effective outgoing edge, resolving merged slots once."""
        node = self.nodes[node_index]
        edge_index = self._resolve(node, node.outgoing)
        node.outgoing = Simple(edge_index)
        if edge_index is not None:
            self.edges[edge_index].start = node_index
        return edge_index

    def incoming_edge(self, node_index: int) -> int | None:
        """Get a node's effective incoming edge, resolving merged slots once."""
        node = self.nodes[node_index]
        edge_index = self._resolve(node, node.incoming)
        node.incoming = Simple(edge_index)
        if edge_index is not None:
            self.edges[edge_index].end = node_index
        return edge_index

    def _resolve(self, node: Node, slot: Connectivity) -> int | None:
        if isinstance(slot, Simple):
            if slot.edge is None or not self.edges[slot.edge].valid:
                return None
            return slot.edge

        node.is_base = node.is_base or node.shadow_is_base
        for candidate in (slot.primary, slot.shadow):
            if candidate is not None and self.edges[candidate].valid:
                return candidate
        return None


def _without(slot: Connectivity, edge_index: int) -> Connectivity:
    if isinstance(slot, Simple):
        return Simple(None) if slot.edge == edge_index else slot
    return Merged(
        primary=None if slot.primary == edge_index else slot.primary,
        shadow=None if slot.shadow == edge_index else slot.shadow,
    )
