"""Unit tests for contour extraction.

Tests cover:
- Walking simple cycles back into contours
- Handle reconstruction from edges
- Base-first seeding and its fallback
- Consistency errors on broken graphs
"""

import pytest

from pathbool.core.builder import build_graph
from pathbool.core.classifier import BooleanOperator, classify_edges
from pathbool.core.extractor import extract_contours
from pathbool.core.graph import OPERAND_A, OPERAND_B, CurveGraph
from pathbool.core.merger import merge_nodes
from pathbool.core.resolver import resolve_intersections
from pathbool.core.splitter import split_edges
from pathbool.domain import Contour, Point, Region, Segment
from pathbool.exceptions import GraphConsistencyError

KAPPA = 0.5522847498

SQUARE_A = Region.from_polygons([[(0, 0), (1, 0), (1, 1), (0, 1)]])
SQUARE_B = Region.from_polygons([[(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5)]])


@pytest.fixture
def circle() -> Region:
    """Create a counter-clockwise unit circle."""
    k = KAPPA
    return Region(
        contours=[
            Contour(
                segments=[
                    Segment(Point(1, 0), Point(0, -k), Point(0, k)),
                    Segment(Point(0, 1), Point(k, 0), Point(-k, 0)),
                    Segment(Point(-1, 0), Point(0, k), Point(0, -k)),
                    Segment(Point(0, -1), Point(-k, 0), Point(k, 0)),
                ]
            )
        ]
    )


@pytest.fixture
def square_with_hole() -> Region:
    """Create a 4x4 square with a 2x2 clockwise hole."""
    return Region.from_polygons(
        [
            [(0, 0), (4, 0), (4, 4), (0, 4)],
            [(1, 1), (1, 3), (3, 3), (3, 1)],
        ]
    )


class TestSimpleCycles:
    """Extraction from graphs without crossings."""

    def test_circle_round_trips(self, circle):
        graph = CurveGraph()
        build_graph(graph, circle, OPERAND_A)

        contours = extract_contours(graph)

        assert len(contours) == 1
        assert contours[0].segments == circle.contours[0].segments

    def test_hole_follows_outer(self, square_with_hole):
        graph = CurveGraph()
        build_graph(graph, square_with_hole, OPERAND_A)

        contours = extract_contours(graph)

        assert [c.signed_area() for c in contours] == pytest.approx([16.0, -4.0])

    def test_all_edges_visited(self, square_with_hole):
        graph = CurveGraph()
        build_graph(graph, square_with_hole, OPERAND_A)
        extract_contours(graph)
        assert all(edge.visited for edge in graph.edges)

    def test_empty_graph(self):
        assert extract_contours(CurveGraph()) == []


class TestSeeding:
    """Tests for the choice of walk seeds."""

    def test_base_contour_first(self, square_with_hole):
        """The base contour comes first even when it is built last."""
        graph = CurveGraph()
        hole_first = Region(contours=list(reversed(square_with_hole.contours)))
        edges = build_graph(graph, hole_first, OPERAND_A)
        # Make the second contour the base one
        for index in edges:
            graph.edges[index].is_base = graph.edges[index].contour == 1

        contours = extract_contours(graph)

        assert contours[0].signed_area() == pytest.approx(16.0)

    def test_falls_back_without_base_edges(self, square_with_hole):
        graph = CurveGraph()
        edges = build_graph(graph, square_with_hole, OPERAND_A)
        for index in edges[:4]:
            graph.discard_edge(index)

        contours = extract_contours(graph)

        assert len(contours) == 1
        assert contours[0].signed_area() == pytest.approx(-4.0)


class TestMergedGraphs:
    """Extraction after a full classify and merge."""

    @pytest.mark.parametrize(
        ("operator", "area"),
        [
            (BooleanOperator.UNION, 1.75),
            (BooleanOperator.INTERSECTION, 0.25),
        ],
    )
    def test_overlapping_squares(self, operator, area):
        graph = CurveGraph()
        edges_a = build_graph(graph, SQUARE_A, OPERAND_A)
        edges_b = build_graph(graph, SQUARE_B, OPERAND_B)
        resolve_intersections(graph, edges_a, edges_b)
        split_edges(graph)
        classify_edges(graph, operator, SQUARE_A, SQUARE_B)
        merge_nodes(graph)

        contours = extract_contours(graph)

        assert len(contours) == 1
        assert contours[0].signed_area() == pytest.approx(area)


class TestConsistencyErrors:
    """Broken graphs raise instead of producing partial output."""

    def test_dead_end(self):
        graph = CurveGraph()
        edges = build_graph(graph, SQUARE_A, OPERAND_A)
        graph.discard_edge(edges[2])

        with pytest.raises(GraphConsistencyError, match="no outgoing edge"):
            extract_contours(graph)

    def test_stray_edge(self):
        """An edge that no cycle uses is detected."""
        graph = CurveGraph()
        edges = build_graph(graph, SQUARE_A, OPERAND_A)
        first = graph.edges[edges[0]]
        shortcut = graph.add_edge(
            first.start, graph.edges[edges[2]].start, (0.0, 0.0), (0.0, 0.0), OPERAND_A, 0, True
        )
        graph.order.append(shortcut)

        with pytest.raises(GraphConsistencyError):
            extract_contours(graph)

    def test_error_carries_node_id(self):
        graph = CurveGraph()
        edges = build_graph(graph, SQUARE_A, OPERAND_A)
        graph.discard_edge(edges[1])

        with pytest.raises(GraphConsistencyError) as excinfo:
            extract_contours(graph)

        assert excinfo.value.node_id == graph.nodes[graph.edges[edges[1]].start].uid
