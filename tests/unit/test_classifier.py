"""Unit tests for edge classification."""

import pytest

from pathbool.core.builder import build_graph
from pathbool.core.classifier import BooleanOperator, classify_edge, classify_edges
from pathbool.core.graph import OPERAND_A, OPERAND_B, CurveGraph
from pathbool.core.resolver import resolve_intersections
from pathbool.core.splitter import split_edges
from pathbool.domain import Region

SQUARE_A = Region.from_polygons([[(0, 0), (1, 0), (1, 1), (0, 1)]])
SQUARE_B = Region.from_polygons([[(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5)]])


def split_graph(a: Region, b: Region) -> CurveGraph:
    """Build, resolve and split a two-operand graph."""
    graph = CurveGraph()
    edges_a = build_graph(graph, a, OPERAND_A)
    edges_b = build_graph(graph, b, OPERAND_B)
    resolve_intersections(graph, edges_a, edges_b)
    split_edges(graph)
    return graph


class TestBooleanOperator:
    """Tests for the keep predicates."""

    @pytest.mark.parametrize(
        ("inside_a", "inside_b", "expected"),
        [(False, False, True), (True, False, False), (False, True, False)],
    )
    def test_union(self, inside_a, inside_b, expected):
        assert BooleanOperator.UNION.keep(OPERAND_A, inside_a, inside_b) is expected

    @pytest.mark.parametrize(
        ("inside_a", "inside_b", "expected"),
        [(False, False, False), (True, False, True), (False, True, True)],
    )
    def test_intersection(self, inside_a, inside_b, expected):
        assert BooleanOperator.INTERSECTION.keep(OPERAND_B, inside_a, inside_b) is expected

    def test_subtraction_keeps_a_outside_b(self):
        assert BooleanOperator.SUBTRACTION.keep(OPERAND_A, False, False)
        assert not BooleanOperator.SUBTRACTION.keep(OPERAND_A, False, True)

    def test_subtraction_keeps_b_inside_a(self):
        assert BooleanOperator.SUBTRACTION.keep(OPERAND_B, True, False)
        assert not BooleanOperator.SUBTRACTION.keep(OPERAND_B, False, False)

    def test_from_string(self):
        assert BooleanOperator("union") is BooleanOperator.UNION
        assert BooleanOperator("subtraction") is BooleanOperator.SUBTRACTION


class TestClassifyEdges:
    """Tests for classifying split graphs."""

    def test_union_discards_inner_edges(self):
        graph = split_graph(SQUARE_A, SQUARE_B)
        assert classify_edges(graph, BooleanOperator.UNION, SQUARE_A, SQUARE_B) == 4
        assert len(list(graph.valid_edges())) == 8

    def test_intersection_keeps_inner_edges(self):
        graph = split_graph(SQUARE_A, SQUARE_B)
        assert classify_edges(graph, BooleanOperator.INTERSECTION, SQUARE_A, SQUARE_B) == 8

        kept = {(e.operand, graph.nodes[e.start].point) for e in graph.valid_edges()}
        assert kept == {
            (OPERAND_A, (1.0, 0.5)),
            (OPERAND_A, (1.0, 1.0)),
            (OPERAND_B, (0.5, 0.5)),
            (OPERAND_B, (0.5, 1.0)),
        }

    def test_subtraction(self):
        b = SQUARE_B.reversed()
        graph = split_graph(SQUARE_A, b)
        assert classify_edges(graph, BooleanOperator.SUBTRACTION, SQUARE_A, b) == 6

        kept_b = [e for e in graph.valid_edges() if e.operand == OPERAND_B]
        assert len(kept_b) == 2

    def test_disjoint_union_keeps_everything(self):
        far = Region.from_polygons([[(2, 0.25), (3, 0.25), (3, 1.25), (2, 1.25)]])
        graph = split_graph(SQUARE_A, far)
        assert classify_edges(graph, BooleanOperator.UNION, SQUARE_A, far) == 0

    def test_classify_single_edge(self):
        graph = split_graph(SQUARE_A, SQUARE_B)
        bottom_a = graph.edges_of(OPERAND_A)[0]
        assert classify_edge(graph, bottom_a, BooleanOperator.UNION, SQUARE_A, SQUARE_B)
        assert not classify_edge(graph, bottom_a, BooleanOperator.INTERSECTION, SQUARE_A, SQUARE_B)

    def test_discarded_edges_leave_the_nodes(self):
        graph = split_graph(SQUARE_A, SQUARE_B)
        classify_edges(graph, BooleanOperator.UNION, SQUARE_A, SQUARE_B)

        for edge in graph.edges:
            if not edge.valid:
                assert graph.outgoing_edge(edge.start) != edge.index
